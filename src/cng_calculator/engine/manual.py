"""Manual distribution edits.

A manual distribution is a list of per-year purchases entered by a user.
These functions are the only way the engine changes one; each returns a new
list and leaves its input untouched.  Lifecycle fields are dropped from
edited years because they must be recomputed by ``engine.lifecycle``.

  set_cell              one year, one class; rejects over-allocation
  set_bulk              replace every year (e.g. loading a saved strategy)
  rescale_distribution  follow a change of configured fleet totals
  clamp_distribution    trim over-allocation from the last visible year backward
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from cng_calculator.config.vehicle import VEHICLE_CLASSES, FleetConfig
from cng_calculator.engine.distribution import empty_year
from cng_calculator.engine.rounding import round_half_up
from cng_calculator.engine.vehicle_cost import compute_investment, get_vehicle_costs
from cng_calculator.exceptions import ConfigurationError, FleetLimitExceeded
from cng_calculator.models.results import YearDistribution

logger = logging.getLogger(__name__)


def _purchase_year(counts: Mapping[str, int], costs: Mapping[str, float]) -> YearDistribution:
    counts = {c: max(0, int(counts.get(c, 0))) for c in VEHICLE_CLASSES}
    return YearDistribution(**counts, investment=compute_investment(counts, costs))


def _counts(year: YearDistribution) -> dict[str, int]:
    return {c: year.purchases(c) for c in VEHICLE_CLASSES}


def _padded(distribution: list[YearDistribution], horizon_years: int) -> list[YearDistribution]:
    out = list(distribution)
    while len(out) < horizon_years:
        out.append(empty_year())
    return out


def allocated_totals(distribution: list[YearDistribution], horizon_years: int) -> dict[str, int]:
    """Purchases per class over the visible years."""
    visible = distribution[:horizon_years]
    return {c: sum(yd.purchases(c) for yd in visible) for c in VEHICLE_CLASSES}


def is_over_allocated(
    distribution: list[YearDistribution],
    fleet: FleetConfig,
    horizon_years: int,
) -> bool:
    """True when any class places more vehicles than the fleet has."""
    totals = allocated_totals(distribution, horizon_years)
    return any(totals[c] > fleet.get(c).count for c in VEHICLE_CLASSES)


# ═══════════════════════════════════════════════════════════════════════════
# Edits
# ═══════════════════════════════════════════════════════════════════════════

def set_cell(
    distribution: list[YearDistribution],
    year_index: int,
    vehicle_class: str,
    count: int,
    fleet: FleetConfig,
    horizon_years: int,
) -> list[YearDistribution]:
    """Set one class's purchases in one year (0-indexed) and reprice that year.

    Raises
    ------
    ConfigurationError
        ``year_index`` is outside the horizon or ``vehicle_class`` is unknown.
    FleetLimitExceeded
        The class total over the visible years would exceed the fleet.
    """
    if vehicle_class not in VEHICLE_CLASSES:
        raise ConfigurationError(f"Unknown vehicle class {vehicle_class!r}")
    if not 0 <= year_index < horizon_years:
        raise ConfigurationError(
            f"Year index {year_index} is outside the {horizon_years}-year horizon"
        )

    count = max(0, int(count))
    years = _padded(distribution, horizon_years)

    others = sum(
        yd.purchases(vehicle_class)
        for i, yd in enumerate(years[:horizon_years])
        if i != year_index
    )
    limit = fleet.get(vehicle_class).count
    if others + count > limit:
        raise FleetLimitExceeded(vehicle_class, others + count, limit)

    counts = _counts(years[year_index])
    counts[vehicle_class] = count
    years[year_index] = _purchase_year(counts, get_vehicle_costs(fleet))
    return years


def set_bulk(
    entries: Iterable[YearDistribution | Mapping[str, Any]],
    fleet: FleetConfig,
) -> list[YearDistribution]:
    """Replace every year at once, repricing each from the fleet's unit costs."""
    costs = get_vehicle_costs(fleet)
    out: list[YearDistribution] = []
    for entry in entries:
        year = entry if isinstance(entry, YearDistribution) else YearDistribution.model_validate(entry)
        out.append(_purchase_year(_counts(year), costs))
    return out


def _rescale_class(counts: list[int], new_total: int) -> list[int]:
    current_total = sum(counts)
    if current_total == 0 or current_total == new_total:
        return list(counts)

    # Everything in year 1 stays in year 1.
    if counts[0] == current_total:
        return [new_total] + [0] * (len(counts) - 1)

    remaining = new_total
    scaled: list[int] = []
    for n in counts:
        share = min(round_half_up(n * new_total / current_total), remaining)
        scaled.append(share)
        remaining -= share

    if remaining > 0:
        last_used = max(i for i, n in enumerate(counts) if n > 0)
        scaled[last_used] += remaining
    return scaled


def rescale_distribution(
    distribution: list[YearDistribution],
    previous_fleet: FleetConfig,
    fleet: FleetConfig,
    horizon_years: int,
) -> list[YearDistribution]:
    """Rescale the visible years after the configured fleet totals change.

    Each class whose total changed is scaled proportionally, keeping the
    year-by-year pattern; rounding leftovers are placed against a running
    budget so the class sums to exactly the new total.  Classes with nothing
    allocated yet are left empty.  Years are repriced with the new unit costs.
    """
    years = _padded(distribution, horizon_years)
    visible = years[:horizon_years]

    per_class: dict[str, list[int]] = {}
    for c in VEHICLE_CLASSES:
        counts = [yd.purchases(c) for yd in visible]
        if previous_fleet.get(c).count == fleet.get(c).count:
            per_class[c] = counts
        else:
            per_class[c] = _rescale_class(counts, fleet.get(c).count)

    costs = get_vehicle_costs(fleet)
    rescaled = [
        _purchase_year({c: per_class[c][y] for c in VEHICLE_CLASSES}, costs)
        for y in range(horizon_years)
    ]
    return rescaled + years[horizon_years:]


def clamp_distribution(
    distribution: list[YearDistribution],
    fleet: FleetConfig,
    horizon_years: int,
) -> list[YearDistribution]:
    """Remove over-allocated vehicles, latest visible year first, per class.

    Every modified year is repriced.  Years past the horizon are kept as-is.
    """
    years = list(distribution)
    visible_years = min(horizon_years, len(years))

    totals = allocated_totals(years, visible_years)
    excess = {c: max(0, totals[c] - fleet.get(c).count) for c in VEHICLE_CLASSES}
    if not any(excess.values()):
        return years

    logger.warning("Manual distribution over-allocated by %s; trimming from the last year", excess)

    costs = get_vehicle_costs(fleet)
    for i in range(visible_years - 1, -1, -1):
        if not any(excess.values()):
            break
        counts = _counts(years[i])
        for c in VEHICLE_CLASSES:
            reduction = min(excess[c], counts[c])
            counts[c] -= reduction
            excess[c] -= reduction
        years[i] = _purchase_year(counts, costs)

    return years
