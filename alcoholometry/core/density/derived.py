"""
Derived-Quantity Calculators

Conversions built on the density model and the fraction converter:
- density and contraction factor for an ABV at a temperature
- mass → volume and volume → mass (weighing)
- ethanol mass contained in a volume
- gravimetric dilution by ethanol mass balance

All returned quantities are rounded to the precision of their physical
meaning; the rounding is part of the return contract.
"""

import math
from typing import Final

from alcoholometry.core.density.fractions import abv_to_mass_fraction
from alcoholometry.core.density.polynomial import contraction_factor, density_g_ml
from alcoholometry.core.domain.density import DensityResult, MassResult, VolumeResult
from alcoholometry.core.domain.dilution import DilutionResult
from alcoholometry.core.math.numerical_safeguards import round_to_places

# =============================================================================
# PRESENTATION PRECISION (decimal places)
# =============================================================================

DENSITY_PLACES: Final[int] = 6
CONTRACTION_PLACES: Final[int] = 6
VOLUME_PLACES: Final[int] = 2
MASS_PLACES: Final[int] = 2
ETHANOL_MASS_PLACES: Final[int] = 2
DILUTION_MASS_PLACES: Final[int] = 1
MASS_FRACTION_PLACES: Final[int] = 4


# =============================================================================
# DENSITY
# =============================================================================


def calculate_density(abv: float, temp_c: float) -> DensityResult:
    """
    Density and contraction factor of a spirit at a temperature.

    Args:
        abv: Alcohol by volume (%), 0..100
        temp_c: Temperature (°C)

    Returns:
        DensityResult (density g/mL and contraction factor, 6 places)

    Examples:
        >>> calculate_density(0, 20).density
        0.998201
        >>> calculate_density(100, 20).density
        0.789239
    """
    p = abv_to_mass_fraction(abv)

    return DensityResult(
        density=round_to_places(density_g_ml(p, temp_c), DENSITY_PLACES),
        contraction_factor=round_to_places(
            contraction_factor(p, temp_c), CONTRACTION_PLACES
        ),
    )


def water_density(temp_c: float) -> float:
    """Pure-water density at temp_c (g/mL, 6 places)."""
    return calculate_density(0, temp_c).density


def ethanol_density(temp_c: float) -> float:
    """Pure-ethanol density at temp_c (g/mL, 6 places)."""
    return calculate_density(100, temp_c).density


# =============================================================================
# MASS ↔ VOLUME
# =============================================================================


def calculate_volume_from_mass(mass_g: float, abv: float, temp_c: float) -> VolumeResult:
    """
    Volume occupied by a weighed mass of spirit.

    volume_ml = mass_g / density, using the rounded display density.

    Args:
        mass_g: Mass (g)
        abv: Alcohol by volume (%)
        temp_c: Temperature (°C)

    Returns:
        VolumeResult (volume to 0.01 mL, density, contraction factor)
    """
    result = calculate_density(abv, temp_c)

    return VolumeResult(
        volume_ml=round_to_places(mass_g / result.density, VOLUME_PLACES),
        density=result.density,
        contraction_factor=result.contraction_factor,
    )


def calculate_mass_from_volume(volume_ml: float, abv: float, temp_c: float) -> MassResult:
    """
    Mass to weigh out to obtain a target volume of spirit.

    mass_g = volume_ml * density

    Args:
        volume_ml: Target volume (mL)
        abv: Alcohol by volume (%)
        temp_c: Temperature (°C)

    Returns:
        MassResult (mass to 0.01 g, density)
    """
    density = calculate_density(abv, temp_c).density

    return MassResult(
        mass_g=round_to_places(volume_ml * density, MASS_PLACES),
        density=density,
    )


def calculate_ethanol_mass(volume_ml: float, abv: float, temp_c: float) -> float:
    """
    Mass of pure ethanol contained in a volume of spirit.

    ethanol_mass = volume_ml * density * p

    Args:
        volume_ml: Volume (mL)
        abv: Alcohol by volume (%)
        temp_c: Temperature (°C)

    Returns:
        Ethanol mass (g, 2 places)
    """
    density = calculate_density(abv, temp_c).density
    p = abv_to_mass_fraction(abv)

    return round_to_places(volume_ml * density * p, ETHANOL_MASS_PLACES)


# =============================================================================
# GRAVIMETRIC DILUTION
# =============================================================================


def calculate_dilution_water(
    source_mass_g: float, source_abv: float, target_abv: float
) -> DilutionResult:
    """
    Water to add by weight to dilute a spirit to a target ABV.

    Ethanol mass balance:
        m_ethanol = m_source * p_source = m_final * p_target
        m_final   = m_ethanol / p_target
        water     = m_final - m_source

    Precondition (caller's responsibility): target_abv < source_abv.
    Otherwise water_to_add_g is negative (concentration), and for
    target_abv <= 0 the final mass is unbounded (inf).

    Args:
        source_mass_g: Mass of the source spirit (g)
        source_abv: ABV of the source spirit (%)
        target_abv: Desired ABV (%)

    Returns:
        DilutionResult
    """
    source_p = abv_to_mass_fraction(source_abv)
    target_p = abv_to_mass_fraction(target_abv)

    ethanol_mass_g = source_mass_g * source_p
    if target_p > 0:
        final_mass_g = ethanol_mass_g / target_p
    else:
        final_mass_g = math.inf if ethanol_mass_g > 0 else math.nan

    return DilutionResult(
        water_to_add_g=round_to_places(final_mass_g - source_mass_g, DILUTION_MASS_PLACES),
        final_mass_g=round_to_places(final_mass_g, DILUTION_MASS_PLACES),
        ethanol_mass_g=round_to_places(ethanol_mass_g, ETHANOL_MASS_PLACES),
        source_mass_fraction=round_to_places(source_p, MASS_FRACTION_PLACES),
        target_mass_fraction=round_to_places(target_p, MASS_FRACTION_PLACES),
    )
