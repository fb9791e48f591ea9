"""Yearly projection table — one row per year, for export and reporting."""

from __future__ import annotations

import pandas as pd

from cng_calculator.config.vehicle import VEHICLE_CLASSES
from cng_calculator.models.results import CalculationResults


def build_yearly_table(results: CalculationResults) -> pd.DataFrame:
    """Flatten a result into a DataFrame indexed by year (1-based).

    Distribution years beyond the savings series are dropped so every
    column has the same length.
    """
    horizon = len(results.yearly_savings)
    rows: list[dict[str, float]] = []

    for y, yd in enumerate(results.vehicle_distribution[:horizon]):
        row: dict[str, float] = {"year": y + 1}
        for c in VEHICLE_CLASSES:
            row[f"{c}_purchases"] = yd.purchases(c)
        for c in VEHICLE_CLASSES:
            row[f"{c}_replacements"] = yd.replacements(c)
        for c in VEHICLE_CLASSES:
            active = yd.total_active(c)
            row[f"{c}_active"] = active if active is not None else 0
        row["vehicle_investment"] = yd.investment
        row["replacement_investment"] = yd.replacement_investment or 0.0
        row["fuel_savings"] = results.yearly_fuel_savings[y]
        row["maintenance_savings"] = results.yearly_maintenance_savings[y]
        row["tariff_fee"] = results.yearly_tariff_fees[y]
        row["net_savings"] = results.yearly_savings[y]
        row["cumulative_savings"] = results.cumulative_savings[y]
        row["cumulative_investment"] = results.cumulative_investment[y]
        row["emissions_saved_kg"] = results.yearly_emissions_saved[y]
        row["cumulative_emissions_saved_kg"] = results.cumulative_emissions_saved[y]
        rows.append(row)

    df = pd.DataFrame(rows)
    if not df.empty:
        df = df.set_index("year")
    return df
