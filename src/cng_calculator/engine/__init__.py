"""Engine — deployment, lifecycle, station sizing and financial projection."""

from cng_calculator.engine.vehicle_cost import get_vehicle_costs, compute_investment
from cng_calculator.engine.distribution import distribute_vehicles
from cng_calculator.engine.lifecycle import apply_vehicle_lifecycle
from cng_calculator.engine.station_sizing import calculate_station_cost, size_station
from cng_calculator.engine.financial import calculate_roi
from cng_calculator.engine.manual import (
    clamp_distribution,
    is_over_allocated,
    rescale_distribution,
    set_bulk,
    set_cell,
)
from cng_calculator.engine.pipeline import build_base_distribution, compute
from cng_calculator.engine.comparison import compare_strategies, rank_by_net_cash_flow

__all__ = [
    "get_vehicle_costs",
    "compute_investment",
    "distribute_vehicles",
    "apply_vehicle_lifecycle",
    "size_station",
    "calculate_station_cost",
    "calculate_roi",
    # Manual distribution edits
    "set_cell",
    "set_bulk",
    "rescale_distribution",
    "clamp_distribution",
    "is_over_allocated",
    # Pipeline
    "build_base_distribution",
    "compute",
    "compare_strategies",
    "rank_by_net_cash_flow",
]
