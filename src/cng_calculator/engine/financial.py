"""Financial projection — yearly savings, investment, payback, ROI and CO2.

Per year ``y`` (0-indexed):

  in operation   = Σ new purchases in years 0..y (per class)
  price_y        = base price × (1 + escalation)^y   (gasoline, diesel, net CNG)
  fuel savings   = miles × (conventional price / mpg − CNG price / CNG mpg)
  maintenance    = miles × per-mile differential
  tariff         = station cost × monthly LDC rate × 12   (financed stations only)
  net savings    = fuel + maintenance − tariff

Cumulative investment starts at the station cost for turnkey stations (zero
when financed) and adds each year's new-purchase and replacement investment.

In-operation counts are cumulative purchases, not the lifecycle-capped active
fleet; retired vehicles keep contributing savings and emissions.
"""

from __future__ import annotations

import logging

import numpy as np

from cng_calculator.config.fuel import FuelPriceConfig
from cng_calculator.config.station import StationConfig
from cng_calculator.config.strategy import DeploymentStrategy
from cng_calculator.config.vehicle import VEHICLE_CLASSES, FleetConfig
from cng_calculator.engine.distribution import empty_year
from cng_calculator.engine.emissions import project_emissions
from cng_calculator.engine.rounding import round_half_up
from cng_calculator.engine.station_sizing import size_station, calculate_station_cost
from cng_calculator.finance.payback import compute_payback_period, is_projected
from cng_calculator.finance.returns import (
    compute_annualized_return,
    compute_cost_reduction,
    compute_roi,
)
from cng_calculator.models.results import CalculationResults, ClassCostPerMile, YearDistribution

logger = logging.getLogger(__name__)

MONTHLY_TARIFF_RATES = {"aglc": 0.015, "cgc": 0.016, "vng": 0.015}
"""Monthly LDC investment tariff as a fraction of station cost."""


def cost_per_mile_breakdown(fleet: FleetConfig, fuel: FuelPriceConfig) -> dict[str, ClassCostPerMile]:
    """Year-1 fuel cost per mile on the baseline fuel and on CNG, per class."""
    breakdown: dict[str, ClassCostPerMile] = {}
    for c in VEHICLE_CLASSES:
        vehicle = fleet.get(c)
        price = fuel.gasoline_price if vehicle.fuel_type == "gasoline" else fuel.diesel_price
        conventional = price / vehicle.mpg
        cng = fuel.effective_cng_price / vehicle.cng_mpg
        breakdown[c] = ClassCostPerMile(
            conventional=conventional,
            cng=cng,
            savings=conventional - cng + vehicle.maintenance_savings_per_mile,
        )
    return breakdown


def calculate_roi(
    fleet: FleetConfig,
    station: StationConfig,
    fuel: FuelPriceConfig,
    horizon_years: int,
    strategy: DeploymentStrategy | str,
    vehicle_distribution: list[YearDistribution],
) -> CalculationResults:
    """Run the year-by-year projection over an enriched vehicle distribution."""

    # ── Investment ─────────────────────────────────────────────────────
    total_vehicle_investment = sum(
        yd.total_investment for yd in vehicle_distribution[:horizon_years]
    )

    sizing = size_station(station, fleet, vehicle_distribution, fuel)
    station_cost = sizing.final_cost if sizing else calculate_station_cost(station)

    total_investment = total_vehicle_investment + (station_cost if station.turnkey else 0)

    distribution = list(vehicle_distribution)
    while len(distribution) < horizon_years:
        distribution.append(empty_year())

    # ── Vehicles in operation: cumulative purchases ────────────────────
    purchases = np.array(
        [[yd.purchases(c) for c in VEHICLE_CLASSES] for yd in distribution[:horizon_years]],
        dtype=np.int64,
    ).reshape(-1, len(VEHICLE_CLASSES))
    cumulative = np.cumsum(purchases, axis=0)
    in_operation = [
        {c: int(cumulative[y, i]) for i, c in enumerate(VEHICLE_CLASSES)}
        for y in range(horizon_years)
    ]

    # ── Prices ─────────────────────────────────────────────────────────
    escalation = (1 + fuel.annual_increase_pct) ** np.arange(horizon_years)
    gasoline_prices = fuel.gasoline_price * escalation
    diesel_prices = fuel.diesel_price * escalation
    cng_prices = fuel.effective_cng_price * escalation

    annual_tariff_fee = 0.0
    if not station.turnkey:
        annual_tariff_fee = station_cost * MONTHLY_TARIFF_RATES[station.business_type] * 12

    # ── Yearly loop ────────────────────────────────────────────────────
    yearly_savings: list[int] = []
    yearly_fuel_savings: list[int] = []
    yearly_maintenance_savings: list[int] = []
    yearly_tariff_fees: list[int] = []
    cumulative_savings: list[int] = []
    cumulative_investment: list[int] = []

    investment_to_date = float(station_cost) if station.turnkey else 0.0

    for y in range(horizon_years):
        fuel_savings = 0.0
        maintenance_savings = 0.0

        for c in VEHICLE_CLASSES:
            vehicle = fleet.get(c)
            miles = in_operation[y][c] * vehicle.annual_miles
            conventional_price = gasoline_prices[y] if vehicle.fuel_type == "gasoline" else diesel_prices[y]

            fuel_savings += (
                miles / vehicle.mpg * conventional_price
                - miles / vehicle.cng_mpg * cng_prices[y]
            )
            maintenance_savings += miles * vehicle.maintenance_savings_per_mile

        year_savings = fuel_savings + maintenance_savings - annual_tariff_fee

        yearly_savings.append(round_half_up(year_savings))
        yearly_fuel_savings.append(round_half_up(fuel_savings))
        yearly_maintenance_savings.append(round_half_up(maintenance_savings))
        yearly_tariff_fees.append(round_half_up(annual_tariff_fee))

        previous = cumulative_savings[-1] if cumulative_savings else 0
        cumulative_savings.append(round_half_up(previous + year_savings))

        investment_to_date += distribution[y].total_investment
        cumulative_investment.append(round_half_up(investment_to_date))

    # ── Summary metrics ────────────────────────────────────────────────
    payback = compute_payback_period(cumulative_savings, cumulative_investment)
    final_savings = cumulative_savings[-1] if cumulative_savings else 0

    emissions = project_emissions(fleet, in_operation)

    light = fleet.light
    cost_per_mile_gasoline = fuel.gasoline_price / light.mpg
    cost_per_mile_cng = fuel.effective_cng_price / light.cng_mpg
    cost_per_mile_by_class = cost_per_mile_breakdown(fleet, fuel)

    logger.debug(
        "%s over %d years: investment=%.0f final savings=%.0f payback=%.2f",
        DeploymentStrategy(strategy).value, horizon_years, total_investment, final_savings, payback,
    )

    return CalculationResults(
        total_investment=total_investment,
        station_cost=station_cost,
        station=sizing,
        annual_fuel_savings=final_savings / horizon_years if horizon_years > 0 else 0.0,
        yearly_savings=yearly_savings,
        yearly_fuel_savings=yearly_fuel_savings,
        yearly_maintenance_savings=yearly_maintenance_savings,
        yearly_tariff_fees=yearly_tariff_fees,
        cumulative_savings=cumulative_savings,
        cumulative_investment=cumulative_investment,
        payback_period=payback,
        payback_projected=is_projected(payback, horizon_years),
        roi=compute_roi(final_savings, total_investment),
        annual_rate_of_return=compute_annualized_return(final_savings, total_investment, horizon_years),
        net_cash_flow=final_savings - total_investment,
        co2_reduction=emissions.reduction_pct,
        yearly_emissions_saved=emissions.yearly_saved_kg,
        cumulative_emissions_saved=emissions.cumulative_saved_kg,
        total_emissions_saved=emissions.total_saved_kg,
        cost_per_mile_gasoline=cost_per_mile_gasoline,
        cost_per_mile_cng=cost_per_mile_cng,
        cost_reduction=compute_cost_reduction(cost_per_mile_gasoline, cost_per_mile_cng),
        cost_per_mile_by_class=cost_per_mile_by_class,
        vehicle_distribution=distribution,
    )
