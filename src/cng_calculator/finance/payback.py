"""Payback period — when cumulative savings catch up with cumulative investment.

Within the horizon the crossover is interpolated linearly between the last
year short of payback and the first year at or past it:

  payback = (i − 1) + gap / (gap + surplus),   floored at 1 year

Break-even in the first year reports 1.  When the horizon ends before
payback and savings are still growing, the final year's growth is used to
extrapolate; projections beyond ``MAX_PROJECTED_PAYBACK_YEARS`` report never.
"""

from __future__ import annotations

from cng_calculator.models.results import PAYBACK_NEVER

MAX_PROJECTED_PAYBACK_YEARS = 50


def compute_payback_period(
    cumulative_savings: list[float],
    cumulative_investment: list[float],
) -> float:
    """Fractional payback in years, or ``PAYBACK_NEVER`` (−1).

    Parameters
    ----------
    cumulative_savings, cumulative_investment : list[float]
        Year-aligned running totals. Index 0 = year 1.
    """
    horizon = min(len(cumulative_savings), len(cumulative_investment))

    for i in range(horizon):
        if cumulative_savings[i] >= cumulative_investment[i]:
            if i == 0:
                return 1.0
            gap = cumulative_investment[i - 1] - cumulative_savings[i - 1]
            surplus = cumulative_savings[i] - cumulative_investment[i]
            return max(1.0, (i - 1) + gap / (gap + surplus))

    if horizon > 1:
        growth = cumulative_savings[horizon - 1] - cumulative_savings[horizon - 2]
        if growth > 0:
            gap = cumulative_investment[horizon - 1] - cumulative_savings[horizon - 1]
            projected = horizon + gap / growth
            if projected <= MAX_PROJECTED_PAYBACK_YEARS:
                return projected

    return PAYBACK_NEVER


def is_projected(payback_period: float, horizon_years: int) -> bool:
    """True when the payback lies beyond the analysed horizon."""
    return payback_period != PAYBACK_NEVER and payback_period > horizon_years
