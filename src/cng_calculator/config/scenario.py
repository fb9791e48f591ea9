"""Top-level scenario — bundles every calculator input."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from cng_calculator.config.vehicle import FleetConfig
from cng_calculator.config.station import StationConfig
from cng_calculator.config.fuel import FuelPriceConfig
from cng_calculator.config.strategy import DeploymentStrategy
from cng_calculator.models.results import YearDistribution


class Scenario(BaseModel):
    """Complete input bundle for one calculation."""

    fleet: FleetConfig = Field(default_factory=FleetConfig)
    station: StationConfig = Field(default_factory=StationConfig)
    fuel: FuelPriceConfig = Field(default_factory=FuelPriceConfig)
    horizon_years: int = Field(default=15, ge=1, le=50, description="Analysis horizon (years)")
    strategy: DeploymentStrategy = Field(
        default=DeploymentStrategy.IMMEDIATE,
        description="Deployment strategy. Unknown names fall back to 'phased'.",
    )
    manual_distribution: list[YearDistribution] | None = Field(
        default=None,
        description="Per-year purchases entered by hand. Only read when strategy='manual'.",
    )


def deep_merge(base: dict, overrides: dict) -> dict:
    """Recursively merge overrides into base dict."""
    for key, val in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(val, dict):
            deep_merge(base[key], val)
        else:
            base[key] = val
    return base


def apply_parameter_update(scenario: Scenario, update: dict[str, Any]) -> Scenario:
    """Return a new Scenario with a partial update merged in.

    ``update`` uses the Scenario field names and may touch any subset, e.g.
    ``{"fleet": {"heavy": {"count": 8}}, "strategy": "phased"}``.
    """
    data = scenario.model_dump(mode="json")
    deep_merge(data, update)
    return Scenario(**data)


def load_scenario(path: str | Path) -> Scenario:
    """Load a Scenario from a YAML file."""
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    return Scenario(**data)
