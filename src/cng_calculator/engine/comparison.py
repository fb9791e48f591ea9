"""Strategy comparison — the same scenario under several deployment strategies."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from cng_calculator.config.scenario import Scenario
from cng_calculator.config.strategy import AUTOMATIC_STRATEGIES, DeploymentStrategy
from cng_calculator.engine.pipeline import compute
from cng_calculator.models.results import CalculationResults


@dataclass(frozen=True)
class StrategyOutcome:
    """One strategy's results."""

    strategy: DeploymentStrategy
    results: CalculationResults


def compare_strategies(
    scenario: Scenario,
    strategies: Iterable[DeploymentStrategy | str] | None = None,
) -> list[StrategyOutcome]:
    """Run ``scenario`` once per strategy, in the order given.

    Defaults to the four automatic strategies.  Duplicates (including
    unknown names that fall back to phased) are run once.
    """
    chosen = AUTOMATIC_STRATEGIES if strategies is None else strategies

    outcomes: list[StrategyOutcome] = []
    seen: set[DeploymentStrategy] = set()
    for name in chosen:
        strategy = DeploymentStrategy(name)
        if strategy in seen:
            continue
        seen.add(strategy)
        variant = scenario.model_copy(update={"strategy": strategy})
        outcomes.append(StrategyOutcome(strategy=strategy, results=compute(variant)))
    return outcomes


def rank_by_net_cash_flow(outcomes: list[StrategyOutcome]) -> list[StrategyOutcome]:
    """Best net cash flow first; ties keep input order."""
    return sorted(outcomes, key=lambda o: o.results.net_cash_flow, reverse=True)
