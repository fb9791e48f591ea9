"""Station sizing — pick a capacity tier from fleet fuel demand and price it.

Annual demand is expressed in GGE (gasoline gallon equivalents):

  GGE per vehicle = (annual_miles / mpg) × fuel→CNG factor / (1 − CNG efficiency loss)
  fleet GGE       = Σ peak-year active vehicles × GGE per vehicle

The smallest tier whose capacity covers the fleet GGE is selected; demand
above every tier gets the largest one.

  final cost = round(tier cost × business multiplier × turnkey multiplier)
"""

from __future__ import annotations

from dataclasses import dataclass

from cng_calculator.config.fuel import FuelPriceConfig
from cng_calculator.config.station import StationConfig
from cng_calculator.config.vehicle import VEHICLE_CLASSES, FleetConfig, VehicleClassConfig
from cng_calculator.engine.rounding import round_half_up
from cng_calculator.models.results import StationSizing, YearDistribution


@dataclass(frozen=True)
class StationTier:
    """One row of a station cost table."""

    tier: int
    capacity: float
    """Annual throughput (GGE/yr)."""
    cost: float
    """Installed cost before multipliers ($)."""


FAST_FILL_TIERS: tuple[StationTier, ...] = (
    StationTier(1, 100, 1_828_172),
    StationTier(2, 72_001, 2_150_219),
    StationTier(3, 192_001, 2_694_453),
    StationTier(4, 384_001, 2_869_245),
    StationTier(5, 576_001, 3_080_351),
)

TIME_FILL_TIERS: tuple[StationTier, ...] = (
    StationTier(1, 100, 491_333),
    StationTier(2, 12_961, 1_831_219),
    StationTier(3, 108_001, 2_218_147),
    StationTier(4, 288_001, 2_907_603),
    StationTier(5, 576_001, 3_200_857),
    StationTier(6, 864_001, 3_506_651),
)

STATION_TIERS: dict[str, tuple[StationTier, ...]] = {
    "fast": FAST_FILL_TIERS,
    "time": TIME_FILL_TIERS,
}

# Cost used when no fleet is known yet (mid-size station).
DEFAULT_STATION_COST = {"fast": 2_200_000, "time": 1_200_000}

TURNKEY_MULTIPLIER = 1.2
BUSINESS_MULTIPLIERS = {"aglc": 1.0, "cgc": 0.95, "vng": 1.0}

DEFAULT_GASOLINE_TO_CNG_FACTOR = 1.0
DEFAULT_DIESEL_TO_CNG_FACTOR = 1.136


# ═══════════════════════════════════════════════════════════════════════════
# Demand
# ═══════════════════════════════════════════════════════════════════════════

def peak_year_vehicle_counts(distribution: list[YearDistribution]) -> dict[str, int]:
    """Maximum vehicles of each class in service in any single year.

    Uses the active-fleet figure where the lifecycle projector has set it,
    otherwise that year's new purchases.
    """
    peaks = {c: 0 for c in VEHICLE_CLASSES}
    for year in distribution:
        for c in VEHICLE_CLASSES:
            active = year.total_active(c)
            count = active if active is not None else year.purchases(c)
            peaks[c] = max(peaks[c], count)
    return peaks


def annual_gge_per_vehicle(vehicle: VehicleClassConfig, fuel: FuelPriceConfig | None = None) -> float:
    """CNG demand of one converted vehicle (GGE/yr)."""
    if vehicle.fuel_type == "gasoline":
        factor = fuel.gasoline_to_cng_factor if fuel else DEFAULT_GASOLINE_TO_CNG_FACTOR
    else:
        factor = fuel.diesel_to_cng_factor if fuel else DEFAULT_DIESEL_TO_CNG_FACTOR
    return (vehicle.annual_miles / vehicle.mpg) * factor / (1.0 - vehicle.cng_efficiency_loss_pct)


def compute_annual_gge(
    fleet: FleetConfig,
    counts: dict[str, int],
    fuel: FuelPriceConfig | None = None,
) -> float:
    """Fleet CNG demand (GGE/yr) for the given per-class vehicle counts."""
    return sum(counts[c] * annual_gge_per_vehicle(fleet.get(c), fuel) for c in VEHICLE_CLASSES)


# ═══════════════════════════════════════════════════════════════════════════
# Tier selection & cost
# ═══════════════════════════════════════════════════════════════════════════

def select_tier(station_type: str, annual_gge: float) -> StationTier:
    """Smallest tier with capacity ≥ demand, else the largest tier."""
    tiers = sorted(STATION_TIERS[station_type], key=lambda t: t.capacity)
    for tier in tiers:
        if annual_gge <= tier.capacity:
            return tier
    return tiers[-1]


def _multiplier(station: StationConfig) -> float:
    turnkey = TURNKEY_MULTIPLIER if station.turnkey else 1.0
    return BUSINESS_MULTIPLIERS[station.business_type] * turnkey


def size_station(
    station: StationConfig,
    fleet: FleetConfig | None = None,
    distribution: list[YearDistribution] | None = None,
    fuel: FuelPriceConfig | None = None,
) -> StationSizing | None:
    """Size and price the station.

    Vehicle counts come from the peak year of ``distribution`` when given,
    else from the fleet's configured totals.  Returns ``None`` when no fleet
    is supplied (see ``calculate_station_cost`` for the default price).
    """
    if fleet is None:
        return None

    if distribution is not None:
        counts = peak_year_vehicle_counts(distribution)
    else:
        counts = fleet.counts()

    annual_gge = compute_annual_gge(fleet, counts, fuel)
    tier = select_tier(station.station_type, annual_gge)

    return StationSizing(
        tier=tier.tier,
        capacity=tier.capacity,
        annual_gge=round_half_up(annual_gge),
        base_cost=tier.cost,
        final_cost=round_half_up(tier.cost * _multiplier(station)),
    )


def calculate_station_cost(
    station: StationConfig,
    fleet: FleetConfig | None = None,
    distribution: list[YearDistribution] | None = None,
    fuel: FuelPriceConfig | None = None,
) -> float:
    """Final station cost; a fixed default per fill type when no fleet is known."""
    sizing = size_station(station, fleet, distribution, fuel)
    if sizing is None:
        turnkey = TURNKEY_MULTIPLIER if station.turnkey else 1.0
        return round_half_up(DEFAULT_STATION_COST[station.station_type] * turnkey)
    return sizing.final_cost
