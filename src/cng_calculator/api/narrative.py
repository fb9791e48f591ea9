"""Narrative generator — plain-English interpretation of calculation results."""

from __future__ import annotations

import math

from cng_calculator.config.scenario import Scenario
from cng_calculator.config.vehicle import VEHICLE_CLASSES
from cng_calculator.engine.comparison import StrategyOutcome
from cng_calculator.engine.rounding import round_half_up
from cng_calculator.models.results import CalculationResults

DEFAULT_PROJECTION_YEARS = 15
"""Without a horizon, paybacks from this many years on are flagged as projected."""


def format_payback_period(payback_period: float, horizon_years: int | None = None) -> str:
    """Format fractional years as "X Years, Y Months".

    Negative or NaN paybacks read "Never".  Paybacks beyond the horizon
    (or from 15 years on when no horizon is given) get a "(projected)" suffix.
    """
    if math.isnan(payback_period) or payback_period < 0:
        return "Never"

    years = math.floor(payback_period)
    months = round_half_up((payback_period - years) * 12)

    if horizon_years is not None:
        projected = payback_period > horizon_years
    else:
        projected = years >= DEFAULT_PROJECTION_YEARS

    if months == 12:
        years, months = years + 1, 0

    year_text = "Year" if years == 1 else "Years"
    month_text = "Month" if months == 1 else "Months"
    text = f"{years} {year_text}, {months} {month_text}"
    return f"{text} (projected)" if projected else text


def generate_narrative(results: CalculationResults, scenario: Scenario) -> str:
    """Plain-English summary: fleet, station, financial health, emissions."""
    fleet = scenario.fleet
    horizon = scenario.horizon_years
    sections: list[str] = []

    # ── 1. Fleet & deployment ──
    sections.append("=" * 60)
    sections.append("FLEET CONVERSION SUMMARY")
    sections.append("=" * 60)
    counts = ", ".join(f"{fleet.get(c).count} {c} duty" for c in VEHICLE_CLASSES)
    sections.append(
        f"Strategy: {scenario.strategy.value}\n"
        f"Horizon: {horizon} years\n"
        f"Fleet: {counts}"
    )
    replacements = sum(
        yd.replacements(c) for yd in results.vehicle_distribution for c in VEHICLE_CLASSES
    )
    if replacements:
        sections.append(f"Lifecycle replacements within horizon: {replacements} vehicles")

    # ── 2. Station ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("STATION")
    sections.append("=" * 60)
    payment = "paid upfront (turnkey)" if scenario.station.turnkey else "financed through LDC tariff"
    if results.station:
        sections.append(
            f"{scenario.station.station_type.title()}-fill tier {results.station.tier} "
            f"for {results.station.annual_gge:,.0f} GGE/yr peak demand "
            f"({results.station.utilization_pct}% of capacity)\n"
            f"Station cost: ${results.station_cost:,.0f}, {payment}"
        )
    else:
        sections.append(f"Station cost: ${results.station_cost:,.0f}, {payment}")
    if not scenario.station.turnkey and results.yearly_tariff_fees:
        sections.append(f"Annual tariff fee: ${results.yearly_tariff_fees[0]:,.0f}")

    # ── 3. Financial health ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("FINANCIAL HEALTH")
    sections.append("=" * 60)
    final_savings = results.cumulative_savings[-1] if results.cumulative_savings else 0
    sections.append(
        f"Total investment: ${results.total_investment:,.0f}\n"
        f"Cumulative savings: ${final_savings:,.0f}\n"
        f"Net cash flow: ${results.net_cash_flow:,.0f}\n"
        f"ROI: {results.roi:.1f}%\n"
        f"Annualized return: {results.annual_rate_of_return:.1f}%\n"
        f"Payback: {format_payback_period(results.payback_period, horizon)}"
    )
    sections.append(
        f"Fuel cost per mile (light duty): gasoline ${results.cost_per_mile_gasoline:.3f} "
        f"vs CNG ${results.cost_per_mile_cng:.3f} ({results.cost_reduction:.1f}% lower)"
    )

    # ── 4. Emissions ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("EMISSIONS")
    sections.append("=" * 60)
    sections.append(
        f"CO2 avoided: {results.total_emissions_saved_tonnes:,.1f} metric tons "
        f"({results.co2_reduction:.1f}% reduction)"
    )

    # ── 5. Verdict ──
    sections.append("")
    if not results.pays_back:
        sections.append("VERDICT: savings never recover the investment at these prices.")
    elif results.payback_projected:
        sections.append("VERDICT: payback only beyond the analysed horizon; consider a longer horizon.")
    else:
        sections.append("VERDICT: the conversion pays back within the horizon.")

    return "\n".join(sections)


def generate_comparison_narrative(outcomes: list[StrategyOutcome], horizon_years: int) -> str:
    """One line per strategy, best net cash flow first."""
    if not outcomes:
        return "No strategies to compare."

    ranked = sorted(outcomes, key=lambda o: o.results.net_cash_flow, reverse=True)
    lines = ["STRATEGY COMPARISON (best net cash flow first)"]
    for rank, outcome in enumerate(ranked, start=1):
        r = outcome.results
        lines.append(
            f"{rank}. {outcome.strategy.value:10s} net ${r.net_cash_flow:>14,.0f}  "
            f"ROI {r.roi:6.1f}%  payback {format_payback_period(r.payback_period, horizon_years)}  "
            f"CO2 {r.total_emissions_saved_tonnes:,.1f} t"
        )
    return "\n".join(lines)
