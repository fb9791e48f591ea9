"""Tailpipe CO2 — conventional fleet versus the same miles on CNG.

Factors are g CO2 per mile per vehicle class; light duty is rated as a
gasoline vehicle, medium and heavy duty as diesel vehicles.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from cng_calculator.config.vehicle import VEHICLE_CLASSES, FleetConfig
from cng_calculator.engine.rounding import round_half_up

# (conventional, CNG) g CO2 per mile
EMISSION_FACTORS_G_PER_MILE: dict[str, tuple[float, float]] = {
    "light": (404.0, 303.0),
    "medium": (690.0, 520.0),
    "heavy": (690.0, 520.0),
}


@dataclass
class EmissionsProjection:
    """Yearly emissions outcome, kg CO2."""

    total_conventional_kg: float = 0.0
    total_cng_kg: float = 0.0
    yearly_saved_kg: list[int] = field(default_factory=list)
    cumulative_saved_kg: list[int] = field(default_factory=list)

    @property
    def reduction_pct(self) -> float:
        if self.total_conventional_kg <= 0:
            return 0.0
        return (self.total_conventional_kg - self.total_cng_kg) / self.total_conventional_kg * 100

    @property
    def total_saved_kg(self) -> float:
        return self.cumulative_saved_kg[-1] if self.cumulative_saved_kg else 0


def project_emissions(
    fleet: FleetConfig,
    in_operation: list[dict[str, int]],
) -> EmissionsProjection:
    """Emissions per year for the vehicles in operation each year."""
    result = EmissionsProjection()
    running_saved = 0.0

    for counts in in_operation:
        conventional = 0.0
        cng = 0.0
        for c in VEHICLE_CLASSES:
            miles = counts[c] * fleet.get(c).annual_miles
            conv_factor, cng_factor = EMISSION_FACTORS_G_PER_MILE[c]
            conventional += miles * conv_factor / 1_000
            cng += miles * cng_factor / 1_000

        saved = conventional - cng
        result.total_conventional_kg += conventional
        result.total_cng_kg += cng
        running_saved += saved
        result.yearly_saved_kg.append(round_half_up(saved))
        result.cumulative_saved_kg.append(round_half_up(running_saved))

    return result
