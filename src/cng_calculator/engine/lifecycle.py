"""Vehicle lifecycle — replacements and active fleet per year.

A vehicle bought in year ``y`` retires at the end of its lifespan ``L`` and
is replaced 1:1 in year ``y + L``.  Replacements keep the fleet size steady,
so the active fleet is simply the cumulative deployment capped at the total
planned purchases.
"""

from __future__ import annotations

import numpy as np

from cng_calculator.config.vehicle import VEHICLE_CLASSES, FleetConfig
from cng_calculator.engine.distribution import empty_year
from cng_calculator.engine.vehicle_cost import compute_investment, get_vehicle_costs
from cng_calculator.models.results import YearDistribution


def apply_vehicle_lifecycle(
    base_distribution: list[YearDistribution],
    fleet: FleetConfig,
    horizon_years: int,
) -> list[YearDistribution]:
    """Return ``horizon_years`` enriched entries; purchases are left untouched.

    Years beyond ``base_distribution`` are treated as having no purchases.
    """
    costs = get_vehicle_costs(fleet)
    lifespans = {c: fleet.get(c).lifespan_years for c in VEHICLE_CLASSES}

    years = [
        base_distribution[y] if y < len(base_distribution) else empty_year()
        for y in range(horizon_years)
    ]

    # Running deployment per class over the horizon, and planned totals over
    # the whole base distribution.
    cumulative = {
        c: np.cumsum([yd.purchases(c) for yd in years], dtype=np.int64)
        for c in VEHICLE_CLASSES
    }
    planned = {c: sum(yd.purchases(c) for yd in base_distribution) for c in VEHICLE_CLASSES}

    enriched: list[YearDistribution] = []
    for y, current in enumerate(years):
        replacements: dict[str, int] = {}
        for c in VEHICLE_CLASSES:
            source_year = y - lifespans[c]
            if 0 <= source_year < len(base_distribution):
                replacements[c] = base_distribution[source_year].purchases(c)
            else:
                replacements[c] = 0

        active = {c: int(min(cumulative[c][y], planned[c])) for c in VEHICLE_CLASSES}

        enriched.append(current.model_copy(update={
            "light_replacements": replacements["light"],
            "medium_replacements": replacements["medium"],
            "heavy_replacements": replacements["heavy"],
            "replacement_investment": compute_investment(replacements, costs),
            "total_active_light": active["light"],
            "total_active_medium": active["medium"],
            "total_active_heavy": active["heavy"],
        }))

    return enriched
