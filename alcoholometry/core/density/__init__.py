"""
Density engine — OIML R 22 ethanol-water alcoholometry

Polynomial density model, ABV ↔ mass fraction converter, derived-quantity
calculators, hydrometer corrector and temperature range validator.
"""

# Coefficient tables
from alcoholometry.core.density.coefficients import (
    A,
    B,
    C,
    REFERENCE_TEMP_C,
    RHO_ETHANOL_20_KG_M3,
)

# Polynomial model
from alcoholometry.core.density.polynomial import (
    contraction_factor,
    density_g_ml,
    density_kg_m3,
)

# Fraction converter
from alcoholometry.core.density.fractions import (
    ABV_BISECTION_ITERATIONS,
    abv_to_mass_fraction,
    mass_fraction_to_abv,
)

# Derived quantities
from alcoholometry.core.density.derived import (
    calculate_density,
    calculate_dilution_water,
    calculate_ethanol_mass,
    calculate_mass_from_volume,
    calculate_volume_from_mass,
    ethanol_density,
    water_density,
)

# Range validator
from alcoholometry.core.density.ranges import (
    TABLE_RANGE_MAX_C,
    TABLE_RANGE_MIN_C,
    validate_temperature,
)

# Hydrometer corrector
from alcoholometry.core.density.hydrometer import (
    HYDROMETER_BISECTION_ITERATIONS,
    SODA_LIME_GLASS_EXPANSION,
    correct_hydrometer_reading,
)

__all__ = [
    # Coefficients
    "A",
    "B",
    "C",
    "REFERENCE_TEMP_C",
    "RHO_ETHANOL_20_KG_M3",
    # Polynomial model
    "density_kg_m3",
    "density_g_ml",
    "contraction_factor",
    # Fraction converter
    "ABV_BISECTION_ITERATIONS",
    "abv_to_mass_fraction",
    "mass_fraction_to_abv",
    # Derived quantities
    "calculate_density",
    "calculate_volume_from_mass",
    "calculate_mass_from_volume",
    "calculate_ethanol_mass",
    "calculate_dilution_water",
    "water_density",
    "ethanol_density",
    # Range validator
    "TABLE_RANGE_MIN_C",
    "TABLE_RANGE_MAX_C",
    "validate_temperature",
    # Hydrometer corrector
    "HYDROMETER_BISECTION_ITERATIONS",
    "SODA_LIME_GLASS_EXPANSION",
    "correct_hydrometer_reading",
]
