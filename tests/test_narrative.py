"""Tests for api/narrative.py — payback formatting and run summaries."""

from __future__ import annotations

import math

import pytest

from cng_calculator.api.narrative import (
    format_payback_period,
    generate_comparison_narrative,
    generate_narrative,
)
from cng_calculator.config import StationConfig
from cng_calculator.engine.comparison import compare_strategies
from cng_calculator.engine.pipeline import compute
from cng_calculator.models.results import PAYBACK_NEVER


class TestFormatPaybackPeriod:

    @pytest.mark.parametrize("value", [PAYBACK_NEVER, -3.0, math.nan])
    def test_never(self, value):
        assert format_payback_period(value) == "Never"

    def test_years_and_months(self):
        assert format_payback_period(2.5, 15) == "2 Years, 6 Months"

    def test_singular_units(self):
        assert format_payback_period(1 + 1 / 12, 15) == "1 Year, 1 Month"

    def test_whole_year(self):
        assert format_payback_period(3.0, 15) == "3 Years, 0 Months"

    def test_months_rounding_up_to_a_year(self):
        assert format_payback_period(1.99, 15) == "2 Years, 0 Months"

    def test_beyond_horizon_is_projected(self):
        assert format_payback_period(20.25, 15) == "20 Years, 3 Months (projected)"

    def test_without_horizon_fifteen_years_is_projected(self):
        assert format_payback_period(15.0).endswith("(projected)")
        assert not format_payback_period(14.5).endswith("(projected)")


class TestNarrative:

    def test_sections(self, scenario):
        text = generate_narrative(compute(scenario), scenario)
        for heading in ("FLEET CONVERSION SUMMARY", "STATION", "FINANCIAL HEALTH", "EMISSIONS", "VERDICT"):
            assert heading in text

    def test_mentions_fleet_and_tier(self, scenario):
        text = generate_narrative(compute(scenario), scenario)
        assert "10 light duty" in text
        assert "tier 2" in text
        assert "69% of capacity" in text
        assert "paid upfront" in text

    def test_projected_payback_verdict(self, scenario):
        text = generate_narrative(compute(scenario), scenario)
        assert "(projected)" in text
        assert "beyond the analysed horizon" in text

    def test_financed_station_mentions_tariff(self, scenario):
        financed = scenario.model_copy(update={"station": StationConfig(turnkey=False)})
        text = generate_narrative(compute(financed), financed)
        assert "Annual tariff fee: $387,039" in text

    def test_replacements_reported(self, scenario):
        text = generate_narrative(compute(scenario), scenario)
        assert "Lifecycle replacements within horizon: 17 vehicles" in text


class TestComparisonNarrative:

    def test_one_line_per_strategy(self, scenario):
        outcomes = compare_strategies(scenario)
        lines = generate_comparison_narrative(outcomes, scenario.horizon_years).splitlines()
        assert len(lines) == 1 + len(outcomes)
        assert lines[1].startswith("1. ")

    def test_empty(self):
        assert generate_comparison_narrative([], 15) == "No strategies to compare."
