"""Deployment distributor — spread each class's purchases across the horizon.

Allocation rules per strategy (per vehicle class, independently):

  immediate   all vehicles in year 1
  phased      floor(n / H) every year, the remainder one-by-one to the earliest years
  aggressive  ceil(n / 2) in year 1, the rest at ceil(rest / (H − 1)) per year until exhausted
  deferred    ceil(n / 2) in the final year, the rest front-filled over years 1..H−1
  manual      all zeros; counts are entered afterwards (see ``engine.manual``)

The returned list always has exactly H entries.
"""

from __future__ import annotations

import logging
import math

from cng_calculator.config.strategy import DeploymentStrategy
from cng_calculator.config.vehicle import VEHICLE_CLASSES, FleetConfig
from cng_calculator.engine.vehicle_cost import compute_investment, get_vehicle_costs
from cng_calculator.models.results import YearDistribution

logger = logging.getLogger(__name__)

FRONT_LOAD_SHARE = 0.5
"""Share of a class placed in the first (aggressive) or last (deferred) year."""


# ═══════════════════════════════════════════════════════════════════════════
# Per-class allocation rules
# ═══════════════════════════════════════════════════════════════════════════

def _immediate(count: int, horizon: int) -> list[int]:
    return [count] + [0] * (horizon - 1)


def _phased(count: int, horizon: int) -> list[int]:
    per_year, remainder = divmod(count, horizon)
    return [per_year + (1 if i < remainder else 0) for i in range(horizon)]


def _spread_capped(remaining: int, years: int) -> list[int]:
    """ceil(remaining / years) per year, capped by what is left to place."""
    if years <= 0:
        return []
    per_year = math.ceil(remaining / years)
    out: list[int] = []
    for _ in range(years):
        this_year = min(per_year, remaining)
        remaining -= this_year
        out.append(this_year)
    return out


def _aggressive(count: int, horizon: int) -> list[int]:
    if horizon == 1:
        return [count]
    first_year = math.ceil(count * FRONT_LOAD_SHARE)
    return [first_year] + _spread_capped(count - first_year, horizon - 1)


def _deferred(count: int, horizon: int) -> list[int]:
    if horizon == 1:
        return [count]
    final_year = math.ceil(count * FRONT_LOAD_SHARE)
    return _spread_capped(count - final_year, horizon - 1) + [final_year]


def _manual(count: int, horizon: int) -> list[int]:
    return [0] * horizon


_ALLOCATORS = {
    DeploymentStrategy.IMMEDIATE: _immediate,
    DeploymentStrategy.PHASED: _phased,
    DeploymentStrategy.AGGRESSIVE: _aggressive,
    DeploymentStrategy.DEFERRED: _deferred,
    DeploymentStrategy.MANUAL: _manual,
}


# ═══════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════

def distribute_vehicles(
    fleet: FleetConfig,
    horizon_years: int,
    strategy: DeploymentStrategy | str,
) -> list[YearDistribution]:
    """Allocate purchases per year for ``strategy``.

    Returns ``horizon_years`` entries carrying purchases and their investment
    only; lifecycle fields are added by ``engine.lifecycle``.  Unknown
    strategy names are treated as phased.
    """
    if horizon_years <= 0:
        return []

    strategy = DeploymentStrategy(strategy)
    allocate = _ALLOCATORS[strategy]
    costs = get_vehicle_costs(fleet)

    per_class = {c: allocate(fleet.get(c).count, horizon_years) for c in VEHICLE_CLASSES}

    distribution: list[YearDistribution] = []
    for year in range(horizon_years):
        counts = {
            c: per_class[c][year] if year < len(per_class[c]) else 0
            for c in VEHICLE_CLASSES
        }
        distribution.append(YearDistribution(
            **counts,
            investment=compute_investment(counts, costs),
        ))

    logger.debug(
        "Distributed %s over %d years (%s)",
        fleet.counts(), horizon_years, strategy.value,
    )
    return distribution


def empty_year() -> YearDistribution:
    """A year with no purchases."""
    return YearDistribution(light=0, medium=0, heavy=0, investment=0.0)
