"""FastAPI server — HTTP access to the CNG fleet conversion calculator.

Run with:
    uvicorn cng_calculator.api.server:app --reload --port 8000

Or:
    python -m cng_calculator.api.server

Endpoints:
    GET  /scenario/defaults             — complete default scenario as JSON
    GET  /schema                        — JSON Schema for Scenario inputs
    POST /calculate                     — run the full calculation (partial or full Scenario)
    POST /calculate/compare             — same scenario under several strategies
    POST /calculate/table               — yearly projection as CSV
    POST /station/size                  — station tier and cost for a scenario
    POST /distribution/manual/cell      — edit one year/class of a manual distribution
    POST /distribution/manual/bulk      — replace a manual distribution
    POST /distribution/manual/rescale   — follow a change of fleet totals
    POST /distribution/manual/clamp     — trim over-allocation

The server is stateless: every request carries the scenario it applies to.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field, ValidationError

from cng_calculator.config.scenario import Scenario, apply_parameter_update
from cng_calculator.config.vehicle import FleetConfig
from cng_calculator.engine.comparison import compare_strategies, rank_by_net_cash_flow
from cng_calculator.engine.manual import (
    allocated_totals,
    clamp_distribution,
    is_over_allocated,
    rescale_distribution,
    set_bulk,
    set_cell,
)
from cng_calculator.engine.pipeline import build_base_distribution, compute
from cng_calculator.engine.lifecycle import apply_vehicle_lifecycle
from cng_calculator.engine.station_sizing import calculate_station_cost, size_station
from cng_calculator.exceptions import ConfigurationError
from cng_calculator.finance.tables import build_yearly_table
from cng_calculator.models.results import YearDistribution
from cng_calculator.api.narrative import generate_comparison_narrative, generate_narrative

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="CNG Fleet Conversion Calculator API",
    version="1.0",
    description=(
        "Projects vehicle deployment, station cost, fuel and maintenance savings, "
        "payback, ROI and CO2 reduction for converting a fleet to compressed natural gas."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class CalculateRequest(BaseModel):
    """Request body for /calculate. All fields optional — defaults used for missing."""
    scenario: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial or full Scenario JSON. Missing fields use defaults. "
                    "Example: {'fleet': {'heavy': {'count': 8}}, 'strategy': 'phased'}",
    )


class CompareRequest(BaseModel):
    """Request body for /calculate/compare."""
    scenario: dict[str, Any] = Field(default_factory=dict)
    strategies: list[str] | None = Field(
        default=None,
        description="Strategies to compare. Default: immediate, phased, aggressive, deferred.",
    )


class ManualDistributionRequest(BaseModel):
    """Base body for manual distribution edits."""
    scenario: dict[str, Any] = Field(default_factory=dict)
    distribution: list[YearDistribution] = Field(default_factory=list)


class ManualCellRequest(ManualDistributionRequest):
    """Request body for /distribution/manual/cell."""
    year_index: int = Field(ge=0, description="0-indexed year to edit")
    vehicle_class: str = Field(description="'light', 'medium' or 'heavy'")
    count: int = Field(ge=0)


class ManualRescaleRequest(ManualDistributionRequest):
    """Request body for /distribution/manual/rescale."""
    previous_fleet: dict[str, Any] = Field(
        default_factory=dict,
        description="Fleet the distribution was built for (partial, merged onto defaults).",
    )


class CalculateResponse(BaseModel):
    """Response from /calculate."""
    result: dict[str, Any]
    narrative: str = ""


class CompareResponse(BaseModel):
    """Response from /calculate/compare."""
    results: list[dict[str, Any]]
    comparison_narrative: str
    ranking: list[dict[str, Any]]


class DistributionResponse(BaseModel):
    """Response from the manual distribution endpoints."""
    distribution: list[YearDistribution]
    allocated: dict[str, int]
    over_allocated: bool


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def get_default_scenario() -> dict[str, Any]:
    """Complete default scenario as a JSON-ready dict."""
    return Scenario().model_dump(mode="json")


def _build_scenario(overrides: dict[str, Any]) -> Scenario:
    """Build a Scenario from partial overrides merged onto defaults."""
    try:
        return apply_parameter_update(Scenario(), overrides)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


def _distribution_response(distribution: list[YearDistribution], scenario: Scenario) -> DistributionResponse:
    return DistributionResponse(
        distribution=distribution,
        allocated=allocated_totals(distribution, scenario.horizon_years),
        over_allocated=is_over_allocated(distribution, scenario.fleet, scenario.horizon_years),
    )


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — returns a welcome message and pointers."""
    return {
        "name": "CNG Fleet Conversion Calculator API",
        "version": "1.0",
        "start_here": "GET /scenario/defaults",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/schema")
def get_schema():
    """Full JSON Schema for Scenario — all inputs with types, defaults, constraints."""
    return Scenario.model_json_schema()


@app.get("/scenario/defaults")
def get_defaults():
    """Complete default Scenario as JSON. Use as a starting point for modifications."""
    return get_default_scenario()


@app.post("/calculate", response_model=CalculateResponse)
def calculate(req: CalculateRequest):
    """Run the full calculation and return results + narrative.

    Example minimal request:
    ```json
    {"scenario": {"strategy": "phased", "fuel": {"annual_increase_pct": 0.03}}}
    ```
    """
    scenario = _build_scenario(req.scenario)
    results = compute(scenario)
    return CalculateResponse(
        result=results.model_dump(mode="json"),
        narrative=generate_narrative(results, scenario),
    )


@app.post("/calculate/compare", response_model=CompareResponse)
def calculate_compare(req: CompareRequest):
    """Compare deployment strategies side by side, ranked by net cash flow."""
    scenario = _build_scenario(req.scenario)
    outcomes = compare_strategies(scenario, req.strategies)

    ranking = [
        {
            "strategy": o.strategy.value,
            "net_cash_flow": round(o.results.net_cash_flow, 2),
            "roi": round(o.results.roi, 2),
            "payback_period": round(o.results.payback_period, 2),
            "total_emissions_saved_tonnes": round(o.results.total_emissions_saved_tonnes, 2),
        }
        for o in rank_by_net_cash_flow(outcomes)
    ]

    return CompareResponse(
        results=[
            {"strategy": o.strategy.value, **o.results.model_dump(mode="json")}
            for o in outcomes
        ],
        comparison_narrative=generate_comparison_narrative(outcomes, scenario.horizon_years),
        ranking=ranking,
    )


@app.post("/calculate/table", response_class=PlainTextResponse)
def calculate_table(req: CalculateRequest):
    """Yearly projection table as CSV (one row per year)."""
    scenario = _build_scenario(req.scenario)
    table = build_yearly_table(compute(scenario))
    return PlainTextResponse(table.to_csv(), media_type="text/csv")


@app.post("/station/size")
def station_size(req: CalculateRequest):
    """Station tier sized from the peak-year active fleet of the scenario."""
    scenario = _build_scenario(req.scenario)
    enriched = apply_vehicle_lifecycle(
        build_base_distribution(scenario), scenario.fleet, scenario.horizon_years,
    )
    sizing = size_station(scenario.station, scenario.fleet, enriched, scenario.fuel)
    return {
        "sizing": sizing.model_dump() if sizing else None,
        "utilization_pct": sizing.utilization_pct if sizing else 0,
        "station_cost": calculate_station_cost(scenario.station, scenario.fleet, enriched, scenario.fuel),
    }


@app.post("/distribution/manual/cell", response_model=DistributionResponse)
def manual_cell(req: ManualCellRequest):
    """Set one class's purchases in one year. 422 when the fleet would be over-allocated."""
    scenario = _build_scenario(req.scenario)
    try:
        distribution = set_cell(
            req.distribution, req.year_index, req.vehicle_class, req.count,
            scenario.fleet, scenario.horizon_years,
        )
    except ConfigurationError as exc:
        logger.info("Rejected manual edit: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return _distribution_response(distribution, scenario)


@app.post("/distribution/manual/bulk", response_model=DistributionResponse)
def manual_bulk(req: ManualDistributionRequest):
    """Replace the whole distribution, repricing every year."""
    scenario = _build_scenario(req.scenario)
    return _distribution_response(set_bulk(req.distribution, scenario.fleet), scenario)


@app.post("/distribution/manual/rescale", response_model=DistributionResponse)
def manual_rescale(req: ManualRescaleRequest):
    """Rescale a distribution built for ``previous_fleet`` to the scenario's fleet."""
    scenario = _build_scenario(req.scenario)
    previous = _build_scenario({"fleet": req.previous_fleet}).fleet if req.previous_fleet else FleetConfig()
    distribution = rescale_distribution(
        req.distribution, previous, scenario.fleet, scenario.horizon_years,
    )
    return _distribution_response(distribution, scenario)


@app.post("/distribution/manual/clamp", response_model=DistributionResponse)
def manual_clamp(req: ManualDistributionRequest):
    """Trim over-allocation from the last visible year backward."""
    scenario = _build_scenario(req.scenario)
    distribution = clamp_distribution(req.distribution, scenario.fleet, scenario.horizon_years)
    return _distribution_response(distribution, scenario)


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(
        "cng_calculator.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
