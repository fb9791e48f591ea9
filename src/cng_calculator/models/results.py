"""Result types — the contract between engine, API and any presentation layer.

Every model here is frozen: a calculation produces one immutable snapshot and
the caller recomputes whenever an input changes.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field

PAYBACK_NEVER = -1.0
"""Sentinel payback period: savings never catch up with investment."""


# ═══════════════════════════════════════════════════════════════════════════
# Vehicle distribution (one entry per projection year)
# ═══════════════════════════════════════════════════════════════════════════

class YearDistribution(BaseModel):
    """Purchases for one year, plus lifecycle fields once enriched.

    The distributor fills the purchase fields only.  The lifecycle
    projector returns new entries with the replacement and active-fleet
    fields set; until then they stay ``None``.
    """

    model_config = ConfigDict(frozen=True)

    # --- New purchases ---
    light: int = Field(default=0, ge=0)
    medium: int = Field(default=0, ge=0)
    heavy: int = Field(default=0, ge=0)
    investment: float = Field(default=0.0, ge=0)
    """Conversion cost of this year's new purchases."""

    # --- Replacements (vehicles bought ``lifespan`` years earlier) ---
    light_replacements: int | None = Field(default=None, ge=0)
    medium_replacements: int | None = Field(default=None, ge=0)
    heavy_replacements: int | None = Field(default=None, ge=0)
    replacement_investment: float | None = Field(default=None, ge=0)

    # --- Active fleet: cumulative deployed, capped at total planned ---
    total_active_light: int | None = Field(default=None, ge=0)
    total_active_medium: int | None = Field(default=None, ge=0)
    total_active_heavy: int | None = Field(default=None, ge=0)

    def purchases(self, vehicle_class: str) -> int:
        return getattr(self, vehicle_class)

    def replacements(self, vehicle_class: str) -> int:
        return getattr(self, f"{vehicle_class}_replacements") or 0

    def total_active(self, vehicle_class: str) -> int | None:
        return getattr(self, f"total_active_{vehicle_class}")

    @property
    def is_enriched(self) -> bool:
        return self.replacement_investment is not None

    @property
    def total_investment(self) -> float:
        """New-purchase plus replacement investment."""
        return self.investment + (self.replacement_investment or 0.0)


# ═══════════════════════════════════════════════════════════════════════════
# Station sizing
# ═══════════════════════════════════════════════════════════════════════════

class StationSizing(BaseModel):
    """Selected capacity tier and its cost."""

    model_config = ConfigDict(frozen=True)

    tier: int
    """Tier label from the fill-type table."""
    capacity: float
    """Tier capacity (GGE per year)."""
    annual_gge: float
    """Fleet consumption the station was sized for, rounded to whole GGE."""
    base_cost: float
    """Table cost before business and turnkey multipliers."""
    final_cost: float
    """round(base_cost × business multiplier × turnkey multiplier)."""

    @property
    def utilization_pct(self) -> int:
        """Share of tier capacity used by the sized demand, whole percent, capped at 100."""
        if self.capacity <= 0:
            return 0
        return min(int(math.floor(self.annual_gge / self.capacity * 100 + 0.5)), 100)


class ClassCostPerMile(BaseModel):
    """Year-1 operating cost per mile for one vehicle class ($/mile)."""

    model_config = ConfigDict(frozen=True)

    conventional: float
    """Baseline fuel price / MPG."""
    cng: float
    """Effective CNG price / CNG-adjusted MPG."""
    savings: float
    """conventional − cng + maintenance differential."""


# ═══════════════════════════════════════════════════════════════════════════
# Full calculation output
# ═══════════════════════════════════════════════════════════════════════════

class CalculationResults(BaseModel):
    """Financial and emissions projection for one scenario."""

    model_config = ConfigDict(frozen=True)

    total_investment: float
    """Vehicle purchases + replacements, plus the station when turnkey."""
    station_cost: float
    """Final station cost (upfront if turnkey, tariff base otherwise)."""
    station: StationSizing | None = None

    annual_fuel_savings: float
    """Average net savings per year = final cumulative savings / horizon."""
    yearly_savings: list[float]
    """Net savings per year = fuel + maintenance − tariff."""
    yearly_fuel_savings: list[float]
    yearly_maintenance_savings: list[float]
    yearly_tariff_fees: list[float]
    cumulative_savings: list[float]
    cumulative_investment: list[float]

    payback_period: float
    """Fractional years, or ``PAYBACK_NEVER`` (−1)."""
    payback_projected: bool = False
    """True when the payback lies beyond the horizon (extrapolated)."""
    roi: float
    """final cumulative savings / total investment × 100."""
    annual_rate_of_return: float
    net_cash_flow: float

    co2_reduction: float
    """Percentage reduction of CO2 versus the conventional fleet."""
    yearly_emissions_saved: list[float]
    """kg CO2 per year."""
    cumulative_emissions_saved: list[float]
    total_emissions_saved: float
    """kg CO2 over the horizon."""

    cost_per_mile_gasoline: float
    cost_per_mile_cng: float
    cost_reduction: float
    cost_per_mile_by_class: dict[str, ClassCostPerMile] = Field(default_factory=dict)
    """Per-class breakdown keyed by ``light`` / ``medium`` / ``heavy``."""

    vehicle_distribution: list[YearDistribution]

    @property
    def pays_back(self) -> bool:
        return self.payback_period != PAYBACK_NEVER

    @property
    def total_emissions_saved_tonnes(self) -> float:
        return self.total_emissions_saved / 1_000
