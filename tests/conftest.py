"""Shared test fixtures — sample configs matching base_case.yaml."""

from __future__ import annotations

import pytest

from cng_calculator.config import (
    FleetConfig,
    FuelPriceConfig,
    Scenario,
    StationConfig,
    VehicleClassConfig,
)


@pytest.fixture
def fleet() -> FleetConfig:
    """Reference fleet: 10 light, 5 medium, 2 heavy duty."""
    return FleetConfig()


@pytest.fixture
def station() -> StationConfig:
    return StationConfig(station_type="fast", business_type="aglc", turnkey=True)


@pytest.fixture
def fuel() -> FuelPriceConfig:
    return FuelPriceConfig(
        gasoline_price=3.38,
        diesel_price=3.84,
        cng_price=0.82,
        cng_tax_credit=0.0,
        annual_increase_pct=0.0,
    )


@pytest.fixture
def scenario(fleet: FleetConfig, station: StationConfig, fuel: FuelPriceConfig) -> Scenario:
    return Scenario(fleet=fleet, station=station, fuel=fuel, horizon_years=15, strategy="immediate")


@pytest.fixture
def break_even_fleet() -> FleetConfig:
    """Fleet whose CNG fuel economy equals its baseline (no efficiency loss, no maintenance gain)."""
    def _cls(count: int, fuel_type: str) -> VehicleClassConfig:
        return VehicleClassConfig(
            count=count, unit_cost=10_000, lifespan_years=7, mpg=10, annual_miles=10_000,
            fuel_type=fuel_type, cng_efficiency_loss_pct=0.0, maintenance_savings_per_mile=0.0,
        )
    return FleetConfig(light=_cls(4, "gasoline"), medium=_cls(2, "diesel"), heavy=_cls(1, "diesel"))
