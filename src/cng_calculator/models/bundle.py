"""Saved strategy bundle — the serializable snapshot handed to storage.

The calculator never reads or writes storage itself; a persistence layer
stores whatever ``model_dump_json`` produces and hands it back through
``model_validate_json``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from cng_calculator.config.fuel import FuelPriceConfig
from cng_calculator.config.scenario import Scenario
from cng_calculator.config.station import StationConfig
from cng_calculator.config.strategy import DeploymentStrategy
from cng_calculator.config.vehicle import FleetConfig
from cng_calculator.models.results import CalculationResults, YearDistribution


class SavedStrategyBundle(BaseModel):
    """Everything needed to restore and redisplay one saved strategy."""

    name: str = Field(min_length=1)
    strategy: DeploymentStrategy
    fleet: FleetConfig
    station: StationConfig
    fuel: FuelPriceConfig
    horizon_years: int = Field(ge=1, le=50)
    vehicle_distribution: list[YearDistribution] | None = None
    calculated_results: CalculationResults | None = None

    @classmethod
    def from_run(cls, name: str, scenario: Scenario, results: CalculationResults) -> SavedStrategyBundle:
        return cls(
            name=name,
            strategy=scenario.strategy,
            fleet=scenario.fleet,
            station=scenario.station,
            fuel=scenario.fuel,
            horizon_years=scenario.horizon_years,
            vehicle_distribution=results.vehicle_distribution,
            calculated_results=results,
        )

    def to_scenario(self) -> Scenario:
        """Rebuild the inputs; manual strategies keep their saved distribution."""
        manual = None
        if self.strategy is DeploymentStrategy.MANUAL and self.vehicle_distribution is not None:
            manual = self.vehicle_distribution
        return Scenario(
            fleet=self.fleet,
            station=self.station,
            fuel=self.fuel,
            horizon_years=self.horizon_years,
            strategy=self.strategy,
            manual_distribution=manual,
        )
