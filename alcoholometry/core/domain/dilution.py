"""
DilutionResult — gravimetric dilution plan

Immutable Pydantic model. Ethanol mass is conserved between the source
spirit and the diluted product:

    ethanol_mass_g = source_mass_g * source_mass_fraction
                   = final_mass_g * target_mass_fraction
    water_to_add_g = final_mass_g - source_mass_g
"""

from pydantic import BaseModel, Field


class DilutionResult(BaseModel):
    """
    Water to add (by weight) to bring a spirit down to a target ABV.

    Immutable (frozen=True). Values are rounded for display:
    water/final mass to 0.1 g, ethanol mass to 0.01 g, fractions to 4 places.
    """

    water_to_add_g: float = Field(..., description="Water to add (g)")
    final_mass_g: float = Field(..., description="Total mass after dilution (g)")
    ethanol_mass_g: float = Field(..., description="Pure ethanol mass, conserved (g)")
    source_mass_fraction: float = Field(
        ..., ge=0, le=1, description="Ethanol mass fraction of the source spirit"
    )
    target_mass_fraction: float = Field(
        ..., ge=0, le=1, description="Ethanol mass fraction of the diluted product"
    )

    model_config = {"frozen": True}
