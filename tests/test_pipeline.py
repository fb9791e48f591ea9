"""End-to-end pipeline tests — distributor → lifecycle → station → financials."""

from __future__ import annotations

from cng_calculator.config import DeploymentStrategy, Scenario, apply_parameter_update
from cng_calculator.engine.pipeline import build_base_distribution, compute
from cng_calculator.models.results import PAYBACK_NEVER, YearDistribution


def test_reference_scenario_immediate(scenario: Scenario):
    r = compute(scenario)
    d = r.vehicle_distribution

    assert len(d) == 15
    assert (d[0].light, d[0].medium, d[0].heavy) == (10, 5, 2)
    assert all(yd.light == yd.medium == yd.heavy == 0 for yd in d[1:])
    # Lifespan 7: first replacements in year 8
    assert all(yd.replacements("light") == 0 for yd in d[:7])
    assert d[7].replacements("light") == 10
    assert r.station.tier == 2


def test_idempotent(scenario: Scenario):
    first = compute(scenario)
    second = compute(scenario)
    assert first == second
    assert first.model_dump_json() == second.model_dump_json()


def test_scenario_not_mutated(scenario: Scenario):
    before = scenario.model_dump()
    compute(scenario)
    assert scenario.model_dump() == before


def test_parameter_update_recomputes(scenario: Scenario):
    base = compute(scenario)
    updated = compute(apply_parameter_update(scenario, {"fuel": {"gasoline_price": 4.50}}))
    assert updated.yearly_fuel_savings[0] > base.yearly_fuel_savings[0]
    assert updated.yearly_maintenance_savings == base.yearly_maintenance_savings


def test_manual_without_entries_deploys_nothing(scenario: Scenario):
    manual = scenario.model_copy(update={"strategy": DeploymentStrategy.MANUAL})
    r = compute(manual)
    assert all(s == 0 for s in r.yearly_savings)
    assert r.payback_period == PAYBACK_NEVER
    # Only the station is invested in
    assert r.total_investment == r.station_cost


def test_manual_distribution_used(scenario: Scenario):
    entries = [YearDistribution(light=5), YearDistribution(light=5, medium=5, heavy=2)]
    manual = scenario.model_copy(update={
        "strategy": DeploymentStrategy.MANUAL,
        "manual_distribution": entries,
    })
    base = build_base_distribution(manual)
    assert [yd.light for yd in base] == [5, 5]
    assert base[1].investment == 5 * 15_000 + 5 * 15_000 + 2 * 50_000

    r = compute(manual)
    assert len(r.vehicle_distribution) == 15
    assert r.yearly_savings[1] > r.yearly_savings[0]


def test_manual_over_allocation_clamped(scenario: Scenario):
    entries = [YearDistribution(light=8), YearDistribution(light=8)]
    manual = scenario.model_copy(update={
        "strategy": DeploymentStrategy.MANUAL,
        "manual_distribution": entries,
    })
    base = build_base_distribution(manual)
    assert [yd.light for yd in base] == [8, 2]


def test_manual_distribution_ignored_for_automatic_strategies(scenario: Scenario):
    phased = scenario.model_copy(update={
        "strategy": DeploymentStrategy.PHASED,
        "manual_distribution": [YearDistribution(light=1)],
    })
    base = build_base_distribution(phased)
    assert sum(yd.light for yd in base) == 10
    assert len(base) == 15
