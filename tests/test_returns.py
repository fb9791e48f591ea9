"""Tests for finance/returns.py — ROI, annualized return, cost reduction."""

from __future__ import annotations

import pytest

from cng_calculator.finance.returns import (
    compute_annualized_return,
    compute_cost_reduction,
    compute_roi,
)


def test_roi():
    assert compute_roi(150_000, 100_000) == pytest.approx(150.0)


def test_roi_zero_investment():
    assert compute_roi(150_000, 0) == 0.0


def test_annualized_return_one_year():
    # (100/100 + 1)^1 − 1 = 100%
    assert compute_annualized_return(100, 100, 1) == pytest.approx(100.0)


def test_annualized_return_compounds():
    # (300/100 + 1)^(1/2) − 1 = 1 → 100%
    assert compute_annualized_return(300, 100, 2) == pytest.approx(100.0)


def test_annualized_return_negative_savings():
    # (−50/100 + 1)^(1/1) − 1 = −50%
    assert compute_annualized_return(-50, 100, 1) == pytest.approx(-50.0)


def test_annualized_return_total_loss():
    assert compute_annualized_return(-100, 100, 5) == -100.0
    assert compute_annualized_return(-250, 100, 5) == -100.0


def test_annualized_return_zero_investment():
    assert compute_annualized_return(100, 0, 5) == 0.0


def test_cost_reduction():
    assert compute_cost_reduction(0.30, 0.075) == pytest.approx(75.0)


def test_cost_reduction_zero_conventional_cost():
    assert compute_cost_reduction(0.0, 0.07) == 0.0
