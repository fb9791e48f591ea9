"""Calculation pipeline — distributor → lifecycle → station → financials.

``compute`` is a pure function of its Scenario: the caller re-runs it on
every input change, and two runs on the same Scenario give identical results.
"""

from __future__ import annotations

import logging

from cng_calculator.config.scenario import Scenario
from cng_calculator.config.strategy import DeploymentStrategy
from cng_calculator.engine.distribution import distribute_vehicles
from cng_calculator.engine.financial import calculate_roi
from cng_calculator.engine.lifecycle import apply_vehicle_lifecycle
from cng_calculator.engine.manual import clamp_distribution, set_bulk
from cng_calculator.models.results import CalculationResults, YearDistribution

logger = logging.getLogger(__name__)


def build_base_distribution(scenario: Scenario) -> list[YearDistribution]:
    """Purchases per year before lifecycle enrichment.

    Manual scenarios with a supplied distribution are repriced and clamped
    to the fleet; every other case comes from the distributor.
    """
    if scenario.strategy is DeploymentStrategy.MANUAL and scenario.manual_distribution is not None:
        base = set_bulk(scenario.manual_distribution, scenario.fleet)
        return clamp_distribution(base, scenario.fleet, scenario.horizon_years)

    return distribute_vehicles(scenario.fleet, scenario.horizon_years, scenario.strategy)


def compute(scenario: Scenario) -> CalculationResults:
    """Run the full calculation for one scenario."""
    base = build_base_distribution(scenario)
    enriched = apply_vehicle_lifecycle(base, scenario.fleet, scenario.horizon_years)

    results = calculate_roi(
        scenario.fleet,
        scenario.station,
        scenario.fuel,
        scenario.horizon_years,
        scenario.strategy,
        enriched,
    )
    logger.debug(
        "Computed %s scenario: station tier %s, roi %.1f%%",
        scenario.strategy.value,
        results.station.tier if results.station else None,
        results.roi,
    )
    return results
