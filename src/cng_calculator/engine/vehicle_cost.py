"""Per-class conversion cost lookups."""

from __future__ import annotations

from collections.abc import Mapping

from cng_calculator.config.vehicle import VEHICLE_CLASSES, FleetConfig


def get_vehicle_costs(fleet: FleetConfig) -> dict[str, float]:
    """Unit conversion cost for each vehicle class."""
    return {c: fleet.get(c).unit_cost for c in VEHICLE_CLASSES}


def compute_investment(counts: Mapping[str, int], costs: Mapping[str, float]) -> float:
    """Σ count × unit cost over the three vehicle classes."""
    return float(sum(counts.get(c, 0) * costs[c] for c in VEHICLE_CLASSES))
