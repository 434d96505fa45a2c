"""
Hydrometer Corrector — true ABV from a reading taken off 20°C

A hydrometer's scale is engraved for liquid at 20°C. At another temperature
the float settles at the density of the sample as it is, so the engraved
number must be reinterpreted:

1. The density the instrument senses is the one its scale assigns to the
   reading at 20°C:  ρ_target = ρ(p(reading), 20)
2. Find the true ABV whose density at the sample temperature equals it:
   ρ(p(true), t) = ρ_target, by fixed-depth bisection on [0, 100]
3. correction = true - reading

ρ decreases as ABV increases (fixed t), so the root is unique: if the
candidate is denser than the target, the true ABV lies above it.

The sensed density is adjusted (OIML R 22 §14) for the thermal expansion of
the glass float:  ρ_target / (1 - α·(t - 20)), soda-lime glass by default.
"""

import math
from typing import Final

from alcoholometry.core.density.coefficients import REFERENCE_TEMP_C
from alcoholometry.core.density.fractions import abv_to_mass_fraction
from alcoholometry.core.density.polynomial import density_kg_m3
from alcoholometry.core.density.ranges import TABLE_RANGE_MAX_C, TABLE_RANGE_MIN_C
from alcoholometry.core.domain.hydrometer import HydrometerCorrection
from alcoholometry.core.math.bisection import bisect_fixed_depth
from alcoholometry.core.math.numerical_safeguards import round_to_places

# Halvings of [0, 100]: bracket width 100 * 2**-30 ≈ 9.3e-8 %vol
HYDROMETER_BISECTION_ITERATIONS: Final[int] = 30

# Cubic expansion coefficient of soda-lime glass (1/K)
SODA_LIME_GLASS_EXPANSION: Final[float] = 0.000025

# Decimal places of true_abv and correction
CORRECTION_PLACES: Final[int] = 1


def _reading_band(reading_abv: float) -> str:
    """10-point band of the reading, e.g. 43.5 → '40-50'."""
    lower = math.floor(reading_abv / 10) * 10
    return f"{lower}-{lower + 10}"


def correct_hydrometer_reading(
    reading_abv: float,
    temp_c: float,
    glass_expansion_coefficient: float = SODA_LIME_GLASS_EXPANSION,
    iterations: int = HYDROMETER_BISECTION_ITERATIONS,
) -> HydrometerCorrection:
    """
    Recover the true ABV at 20°C from a hydrometer reading at temp_c.

    Never raises for out-of-band temperatures: the result is returned with
    outside_table_range=True when temp_c is outside 10-30°C.

    Args:
        reading_abv: Value read off the hydrometer scale (%)
        temp_c: Sample temperature (°C)
        glass_expansion_coefficient: Float glass expansion α (1/K);
            0.0 disables the glass correction (default: soda-lime glass)
        iterations: Bisection depth (default: HYDROMETER_BISECTION_ITERATIONS)

    Returns:
        HydrometerCorrection (true ABV and correction to 0.1 %vol)

    Examples:
        >>> correct_hydrometer_reading(50, 20).correction
        0.0
    """
    target_rho = density_kg_m3(abv_to_mass_fraction(reading_abv), REFERENCE_TEMP_C)
    target_rho /= 1 - glass_expansion_coefficient * (temp_c - REFERENCE_TEMP_C)

    true_abv = bisect_fixed_depth(
        lambda abv: density_kg_m3(abv_to_mass_fraction(abv), temp_c) > target_rho,
        low=0.0,
        high=100.0,
        iterations=iterations,
    )

    return HydrometerCorrection(
        true_abv=round_to_places(true_abv, CORRECTION_PLACES),
        correction=round_to_places(true_abv - reading_abv, CORRECTION_PLACES),
        outside_table_range=temp_c < TABLE_RANGE_MIN_C or temp_c > TABLE_RANGE_MAX_C,
        abv_range=_reading_band(reading_abv),
        temp_used=math.floor(temp_c + 0.5),
    )
