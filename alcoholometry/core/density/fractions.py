"""
Fraction Converter — ABV ↔ ethanol mass fraction

ABV is the volume fraction of ethanol at the 20°C reference:

    v(p) = p · ρ(p, 20) / ρ_ethanol(20)

v(p) has no closed-form inverse, so ABV → p is solved by fixed-depth
bisection on p ∈ [0, 1]. The forward direction p → ABV is the defining
ratio itself.
"""

from typing import Final

from alcoholometry.core.density.coefficients import (
    REFERENCE_TEMP_C,
    RHO_ETHANOL_20_KG_M3,
)
from alcoholometry.core.density.polynomial import density_kg_m3
from alcoholometry.core.math.bisection import bisect_fixed_depth

# Halvings of [0, 1]: bracket width 2**-40 ≈ 9.1e-13
ABV_BISECTION_ITERATIONS: Final[int] = 40


def _volume_fraction(p: float) -> float:
    """v(p) = p · ρ(p, 20) / ρ_ethanol(20)"""
    return p * density_kg_m3(p, REFERENCE_TEMP_C) / RHO_ETHANOL_20_KG_M3


def abv_to_mass_fraction(
    abv: float, iterations: int = ABV_BISECTION_ITERATIONS
) -> float:
    """
    Convert ABV (% vol at 20°C) to ethanol mass fraction.

    Boundary shortcuts skip the solver: abv <= 0 → 0.0, abv >= 100 → 1.0.

    Args:
        abv: Alcohol by volume (%)
        iterations: Bisection depth (default: ABV_BISECTION_ITERATIONS)

    Returns:
        Mass fraction p ∈ [0, 1] (unrounded)

    Examples:
        >>> abv_to_mass_fraction(100)
        1.0
        >>> round(abv_to_mass_fraction(50), 4)
        0.4243
    """
    if abv <= 0:
        return 0.0
    if abv >= 100:
        return 1.0

    target_v = abv / 100

    return bisect_fixed_depth(
        lambda p: _volume_fraction(p) < target_v,
        low=0.0,
        high=1.0,
        iterations=iterations,
    )


def mass_fraction_to_abv(mass_fraction: float) -> float:
    """
    Convert ethanol mass fraction to ABV (% vol at 20°C).

    Closed form, exact inverse of the ratio used by abv_to_mass_fraction.

    Args:
        mass_fraction: Ethanol mass fraction (0..1)

    Returns:
        ABV (%) (unrounded)
    """
    return _volume_fraction(mass_fraction) * 100
