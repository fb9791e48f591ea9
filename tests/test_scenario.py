"""Tests for config/scenario.py — YAML loading and partial updates."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from cng_calculator.config import DeploymentStrategy, Scenario, apply_parameter_update, load_scenario
from cng_calculator.config.scenario import deep_merge

BASE_CASE = Path(__file__).resolve().parent.parent / "scenarios" / "base_case.yaml"


def test_base_case_matches_defaults():
    assert load_scenario(BASE_CASE).model_dump() == Scenario().model_dump()


def test_load_partial_yaml(tmp_path):
    path = tmp_path / "small.yaml"
    path.write_text("horizon_years: 10\nstrategy: deferred\nfleet:\n  light:\n    count: 3\n")
    s = load_scenario(path)
    assert s.horizon_years == 10
    assert s.strategy is DeploymentStrategy.DEFERRED
    assert s.fleet.light.count == 3
    # Unspecified light fields fall back to the class defaults, other classes to the reference fleet
    assert s.fleet.heavy.count == 2


def test_load_empty_yaml(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_scenario(path).model_dump() == Scenario().model_dump()


class TestParameterUpdate:

    def test_nested_update_keeps_siblings(self):
        s = apply_parameter_update(Scenario(), {"fleet": {"heavy": {"count": 8}}})
        assert s.fleet.heavy.count == 8
        assert s.fleet.heavy.unit_cost == 50_000
        assert s.fleet.light.count == 10

    def test_strategy_and_horizon(self):
        s = apply_parameter_update(Scenario(), {"strategy": "phased", "horizon_years": 20})
        assert s.strategy is DeploymentStrategy.PHASED
        assert s.horizon_years == 20

    def test_original_untouched(self):
        original = Scenario()
        apply_parameter_update(original, {"fuel": {"cng_price": 1.5}})
        assert original.fuel.cng_price == 0.82

    def test_invalid_update_rejected(self):
        with pytest.raises(ValidationError):
            apply_parameter_update(Scenario(), {"horizon_years": 0})


def test_deep_merge():
    base = {"a": {"b": 1, "c": 2}, "d": 3}
    assert deep_merge(base, {"a": {"b": 10}, "e": 5}) == {"a": {"b": 10, "c": 2}, "d": 3, "e": 5}
