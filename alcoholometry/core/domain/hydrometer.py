"""
HydrometerCorrection — true strength recovered from a hydrometer reading

Immutable Pydantic model. true_abv = reading_abv + correction.
"""

from pydantic import BaseModel, Field


class HydrometerCorrection(BaseModel):
    """
    Hydrometer reading reinterpreted at the 20°C reference temperature.

    Immutable (frozen=True). Contains:
    - Corrected strength and the correction applied (0.1 %vol)
    - Advisory flag for temperatures outside the 10-30°C table band
    - Display metadata (reading band label, integer temperature)
    """

    true_abv: float = Field(..., ge=0, le=100, description="True ABV at 20°C (%)")
    correction: float = Field(..., description="true_abv - reading_abv (%)")
    outside_table_range: bool = Field(
        ..., description="Temperature outside 10-30°C (reduced confidence)"
    )
    abv_range: str = Field(
        ..., pattern=r"^-?\d+--?\d+$", description="10-point reading band, e.g. '40-50'"
    )
    temp_used: int = Field(..., description="Sample temperature rounded half-up to whole °C")

    model_config = {"frozen": True}
