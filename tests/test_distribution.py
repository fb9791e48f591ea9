"""Tests for engine/distribution.py — per-strategy allocation rules."""

from __future__ import annotations

import logging

import pytest

from cng_calculator.config import DeploymentStrategy, FleetConfig, VehicleClassConfig
from cng_calculator.config.vehicle import VEHICLE_CLASSES
from cng_calculator.engine.distribution import distribute_vehicles


def _fleet(light: int = 0, medium: int = 0, heavy: int = 0) -> FleetConfig:
    return FleetConfig(
        light=VehicleClassConfig(count=light, unit_cost=15_000),
        medium=VehicleClassConfig(count=medium, unit_cost=20_000, fuel_type="diesel"),
        heavy=VehicleClassConfig(count=heavy, unit_cost=50_000, fuel_type="diesel"),
    )


def _light(distribution) -> list[int]:
    return [yd.light for yd in distribution]


# ═══════════════════════════════════════════════════════════════════════════
# Individual strategies
# ═══════════════════════════════════════════════════════════════════════════

class TestStrategies:

    def test_immediate_all_in_first_year(self):
        d = distribute_vehicles(_fleet(light=7), 4, DeploymentStrategy.IMMEDIATE)
        assert _light(d) == [7, 0, 0, 0]

    def test_phased_remainder_to_earliest_years(self):
        d = distribute_vehicles(_fleet(light=10), 3, "phased")
        assert _light(d) == [4, 3, 3]

    def test_phased_fewer_vehicles_than_years(self):
        d = distribute_vehicles(_fleet(light=2), 5, "phased")
        assert _light(d) == [1, 1, 0, 0, 0]

    def test_aggressive_front_loads_half(self):
        # ceil(10/2) = 5 in year 1, then ceil(5/3) = 2 per year until exhausted
        d = distribute_vehicles(_fleet(light=10), 4, "aggressive")
        assert _light(d) == [5, 2, 2, 1]

    def test_deferred_back_loads_half(self):
        d = distribute_vehicles(_fleet(light=10), 4, "deferred")
        assert _light(d) == [2, 2, 1, 5]

    def test_aggressive_single_vehicle(self):
        d = distribute_vehicles(_fleet(light=1), 3, "aggressive")
        assert _light(d) == [1, 0, 0]

    def test_manual_starts_empty(self):
        d = distribute_vehicles(_fleet(light=10, medium=5, heavy=2), 5, "manual")
        assert len(d) == 5
        assert all(yd.light == yd.medium == yd.heavy == 0 for yd in d)
        assert all(yd.investment == 0 for yd in d)

    @pytest.mark.parametrize("strategy", ["aggressive", "deferred"])
    def test_one_year_horizon_keeps_whole_fleet(self, strategy):
        d = distribute_vehicles(_fleet(light=9, medium=3, heavy=1), 1, strategy)
        assert (d[0].light, d[0].medium, d[0].heavy) == (9, 3, 1)


# ═══════════════════════════════════════════════════════════════════════════
# Properties shared by every strategy
# ═══════════════════════════════════════════════════════════════════════════

class TestDistributionProperties:

    @pytest.mark.parametrize("strategy", ["immediate", "phased", "aggressive", "deferred"])
    @pytest.mark.parametrize("counts", [(0, 0, 0), (1, 1, 1), (10, 5, 2), (37, 12, 9)])
    @pytest.mark.parametrize("horizon", [1, 2, 3, 7, 15])
    def test_class_sums_match_configured_counts(self, strategy, counts, horizon):
        fleet = _fleet(*counts)
        d = distribute_vehicles(fleet, horizon, strategy)
        assert len(d) == horizon
        for c, expected in zip(VEHICLE_CLASSES, counts):
            assert sum(yd.purchases(c) for yd in d) == expected

    def test_investment_priced_per_class(self):
        d = distribute_vehicles(_fleet(light=2, medium=1, heavy=1), 3, "immediate")
        assert d[0].investment == 2 * 15_000 + 20_000 + 50_000
        assert d[1].investment == 0

    def test_entries_are_not_enriched(self):
        d = distribute_vehicles(_fleet(light=3), 3, "phased")
        assert not any(yd.is_enriched for yd in d)

    def test_zero_horizon_is_empty(self):
        assert distribute_vehicles(_fleet(light=3), 0, "phased") == []


# ═══════════════════════════════════════════════════════════════════════════
# Unknown strategy names
# ═══════════════════════════════════════════════════════════════════════════

class TestStrategyFallback:

    def test_unknown_strategy_is_phased(self, caplog):
        with caplog.at_level(logging.WARNING):
            d = distribute_vehicles(_fleet(light=10), 3, "staggered")
        assert _light(d) == [4, 3, 3]
        assert "falling back to phased" in caplog.text

    def test_enum_lookup_falls_back(self):
        assert DeploymentStrategy("no-such-strategy") is DeploymentStrategy.PHASED

    def test_lookup_is_case_insensitive(self):
        assert DeploymentStrategy("Aggressive") is DeploymentStrategy.AGGRESSIVE
