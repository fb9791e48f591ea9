"""Return metrics on a completed projection."""

from __future__ import annotations


def compute_roi(final_savings: float, total_investment: float) -> float:
    """Simple ROI (%) = final cumulative savings / total investment × 100."""
    if total_investment <= 0:
        return 0.0
    return final_savings / total_investment * 100


def compute_annualized_return(final_savings: float, total_investment: float, horizon_years: int) -> float:
    """Annualized rate of return (%) = ((savings/investment + 1)^(1/H) − 1) × 100.

    Losses exceeding the investment (base ≤ 0) report −100%.
    """
    if total_investment <= 0 or horizon_years <= 0:
        return 0.0
    base = final_savings / total_investment + 1
    if base <= 0:
        return -100.0
    return (base ** (1 / horizon_years) - 1) * 100


def compute_cost_reduction(cost_per_mile_conventional: float, cost_per_mile_cng: float) -> float:
    """Per-mile fuel cost reduction (%) of CNG versus the conventional fuel."""
    if cost_per_mile_conventional <= 0:
        return 0.0
    return (cost_per_mile_conventional - cost_per_mile_cng) / cost_per_mile_conventional * 100
