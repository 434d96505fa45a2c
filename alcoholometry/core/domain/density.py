"""
Density results — mixture density, volume and mass conversions

Immutable Pydantic models returned by the density engine.
Compatible with the JSON Schema contracts (core/contracts/schema/*.json).
"""

from pydantic import BaseModel, Field


class DensityResult(BaseModel):
    """
    Density of an ethanol-water mixture at a given temperature.

    Immutable (frozen=True). Contains:
    - density in g/mL (6 decimal places)
    - contraction factor: ideal volume of the separated components divided
      by the true mixture volume; 1 for pure components, > 1 in between

    No sign constraint: far outside the calibration range the polynomial can
    return non-physical values, which are passed through unchanged.
    """

    density: float = Field(..., description="Mixture density (g/mL)")
    contraction_factor: float = Field(
        ..., description="Ideal component volume / mixture volume"
    )

    model_config = {"frozen": True}


class VolumeResult(BaseModel):
    """
    Volume occupied by a weighed mass of spirit.

    Immutable (frozen=True). volume_ml = mass_g / density.
    """

    volume_ml: float = Field(..., description="Volume at the given temperature (mL)")
    density: float = Field(..., description="Mixture density (g/mL)")
    contraction_factor: float = Field(
        ..., description="Ideal component volume / mixture volume"
    )

    model_config = {"frozen": True}


class MassResult(BaseModel):
    """
    Mass to weigh out for a target volume of spirit.

    Immutable (frozen=True). mass_g = volume_ml * density.
    """

    mass_g: float = Field(..., description="Mass to weigh (g)")
    density: float = Field(..., description="Mixture density (g/mL)")

    model_config = {"frozen": True}
