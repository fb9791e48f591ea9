"""Fueling station configuration."""

from typing import Literal

from pydantic import BaseModel, Field


class StationConfig(BaseModel):
    """Station inputs: fill type, operator, and how the station is paid for."""

    station_type: Literal["fast", "time"] = Field(
        default="fast",
        description="Fill type. Selects the capacity/cost tier table.",
    )
    business_type: Literal["aglc", "cgc", "vng"] = Field(
        default="aglc",
        description="Gas utility operating the station. 'cgc' gets a 5% cost discount "
                    "and a 1.6% monthly tariff; the others use 1.5%.",
    )
    turnkey: bool = Field(
        default=True,
        description="True = station cost paid upfront (capital investment, +20% markup). "
                    "False = financed through a recurring LDC tariff.",
    )
    sizing_method: Literal["peak"] = Field(
        default="peak",
        description="Station capacity is always sized from the peak-year active fleet.",
    )
    station_markup_pct: float = Field(
        default=0.0, ge=0, le=100,
        description="Markup percentage recorded with the station configuration. "
                    "Carried with saved strategies; not applied to the station cost.",
    )
