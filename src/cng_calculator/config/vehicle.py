"""Fleet configuration — one block per vehicle class (light / medium / heavy)."""

from typing import Literal

from pydantic import BaseModel, Field

VehicleClass = Literal["light", "medium", "heavy"]
FuelType = Literal["gasoline", "diesel"]

VEHICLE_CLASSES: tuple[VehicleClass, ...] = ("light", "medium", "heavy")


class VehicleClassConfig(BaseModel):
    """Conversion inputs for one vehicle class."""

    count: int = Field(default=0, ge=0, description="Vehicles of this class to convert over the horizon")
    unit_cost: float = Field(default=15_000.0, ge=0, description="CNG conversion cost per vehicle ($)")
    lifespan_years: int = Field(default=7, ge=1, description="Years in service before a 1:1 replacement")
    mpg: float = Field(default=12.0, gt=0, description="Fuel economy on the baseline fuel (miles per gallon)")
    annual_miles: float = Field(default=20_000.0, ge=0, description="Miles driven per vehicle per year")
    fuel_type: FuelType = Field(default="gasoline", description="Baseline fuel being displaced")
    cng_efficiency_loss_pct: float = Field(
        default=0.05, ge=0, lt=1.0,
        description="Fuel-economy penalty on CNG as a fraction (e.g. 0.05 = 5% fewer miles per GGE).",
    )
    maintenance_savings_per_mile: float = Field(
        default=0.0, ge=0,
        description="Maintenance differential of CNG versus the baseline fuel ($/mile).",
    )

    @property
    def cng_mpg(self) -> float:
        """Fuel economy after the CNG efficiency loss."""
        return self.mpg * (1.0 - self.cng_efficiency_loss_pct)


def _light() -> VehicleClassConfig:
    return VehicleClassConfig(
        count=10, unit_cost=15_000, lifespan_years=7, mpg=12, annual_miles=20_000,
        fuel_type="gasoline", cng_efficiency_loss_pct=0.05, maintenance_savings_per_mile=0.0,
    )


def _medium() -> VehicleClassConfig:
    return VehicleClassConfig(
        count=5, unit_cost=15_000, lifespan_years=7, mpg=10, annual_miles=20_000,
        fuel_type="diesel", cng_efficiency_loss_pct=0.075, maintenance_savings_per_mile=0.0,
    )


def _heavy() -> VehicleClassConfig:
    return VehicleClassConfig(
        count=2, unit_cost=50_000, lifespan_years=7, mpg=5, annual_miles=40_000,
        fuel_type="diesel", cng_efficiency_loss_pct=0.10, maintenance_savings_per_mile=0.05,
    )


class FleetConfig(BaseModel):
    """The full fleet: light, medium and heavy duty vehicle classes.

    Defaults reproduce the reference fleet of 10 light, 5 medium and
    2 heavy duty vehicles.  Only heavy duty carries a maintenance
    differential by default, but every class can be given one.
    """

    light: VehicleClassConfig = Field(default_factory=_light)
    medium: VehicleClassConfig = Field(default_factory=_medium)
    heavy: VehicleClassConfig = Field(default_factory=_heavy)

    def get(self, vehicle_class: VehicleClass) -> VehicleClassConfig:
        return getattr(self, vehicle_class)

    def counts(self) -> dict[str, int]:
        """Configured totals per class."""
        return {c: self.get(c).count for c in VEHICLE_CLASSES}
