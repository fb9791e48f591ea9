"""Tests for finance/payback.py — interpolation and projection."""

from __future__ import annotations

import pytest

from cng_calculator.finance.payback import (
    MAX_PROJECTED_PAYBACK_YEARS,
    compute_payback_period,
    is_projected,
)
from cng_calculator.models.results import PAYBACK_NEVER


class TestWithinHorizon:

    def test_break_even_in_first_year(self):
        assert compute_payback_period([100, 200], [100, 100]) == 1.0

    @pytest.mark.parametrize("k", [1, 2, 3, 5])
    def test_exact_break_even_reports_that_year(self, k):
        # Savings grow 50/yr from 0, investment flat at 50 × k
        savings = [50 * i for i in range(k + 3)]
        investment = [50 * k] * (k + 3)
        assert compute_payback_period(savings, investment) == pytest.approx(k)

    def test_linear_interpolation(self):
        # Year index 2 crosses: gap 50 before, surplus 50 after → halfway
        assert compute_payback_period([0, 50, 150], [100, 100, 100]) == pytest.approx(1.5)

    def test_floored_at_one_year(self):
        # gap 10, surplus 100 → 0.09 years, floored
        assert compute_payback_period([90, 200], [100, 100]) == 1.0

    def test_growing_investment(self):
        savings = [100, 300, 500]
        investment = [400, 400, 450]
        # gap at index 1 = 100, surplus at index 2 = 50 → 1 + 100/150
        assert compute_payback_period(savings, investment) == pytest.approx(1 + 100 / 150)


class TestBeyondHorizon:

    def test_projected_from_final_growth(self):
        # growth 10/yr, 70 short after 3 years → 3 + 7
        assert compute_payback_period([10, 20, 30], [100, 100, 100]) == pytest.approx(10.0)

    def test_projection_capped(self):
        assert compute_payback_period([1, 2], [1_000, 1_000]) == PAYBACK_NEVER

    def test_projection_at_cap_is_kept(self):
        # 2 + 48 = 50 exactly
        payback = compute_payback_period([1, 2], [50, 50])
        assert payback == pytest.approx(MAX_PROJECTED_PAYBACK_YEARS)

    def test_flat_savings_never(self):
        assert compute_payback_period([10, 10, 10], [100, 100, 100]) == PAYBACK_NEVER

    def test_declining_savings_never(self):
        assert compute_payback_period([30, 20, 10], [100, 100, 100]) == PAYBACK_NEVER

    def test_single_year_short_is_never(self):
        assert compute_payback_period([10], [100]) == PAYBACK_NEVER

    def test_empty_series_never(self):
        assert compute_payback_period([], []) == PAYBACK_NEVER


class TestProjectedFlag:

    def test_within_horizon(self):
        assert not is_projected(7.5, 15)

    def test_beyond_horizon(self):
        assert is_projected(16.2, 15)

    def test_never_is_not_projected(self):
        assert not is_projected(PAYBACK_NEVER, 15)
