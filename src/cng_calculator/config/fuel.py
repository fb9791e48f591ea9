"""Fuel prices and energy conversion factors."""

from pydantic import BaseModel, Field


class FuelPriceConfig(BaseModel):
    """Pump prices ($/gallon, $/GGE for CNG) and their escalation."""

    gasoline_price: float = Field(default=3.38, ge=0, description="Gasoline price ($/gal)")
    diesel_price: float = Field(default=3.84, ge=0, description="Diesel price ($/gal)")
    cng_price: float = Field(default=0.82, ge=0, description="CNG price before tax credit ($/GGE)")
    cng_tax_credit: float = Field(default=0.0, ge=0, description="Credit subtracted from the CNG price ($/GGE)")
    annual_increase_pct: float = Field(
        default=0.0, ge=0, le=1.0,
        description="Annual price escalation applied to every fuel (e.g. 0.03 = 3%/yr).",
    )
    gasoline_to_cng_factor: float = Field(
        default=1.0, gt=0,
        description="GGE of CNG needed to replace one gallon of gasoline.",
    )
    diesel_to_cng_factor: float = Field(
        default=1.136, gt=0,
        description="GGE of CNG needed to replace one gallon of diesel (diesel is more energy-dense).",
    )

    @property
    def effective_cng_price(self) -> float:
        """CNG price net of the tax credit, floored at zero."""
        return max(0.0, self.cng_price - self.cng_tax_credit)
