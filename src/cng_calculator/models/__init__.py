"""Result models — calculation output contracts."""

from cng_calculator.models.results import (
    PAYBACK_NEVER,
    CalculationResults,
    ClassCostPerMile,
    StationSizing,
    YearDistribution,
)

__all__ = [
    "PAYBACK_NEVER",
    "CalculationResults",
    "ClassCostPerMile",
    "StationSizing",
    "YearDistribution",
]
