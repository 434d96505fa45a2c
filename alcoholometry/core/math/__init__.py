"""
Core math modules for alcoholometry

Float primitives and the fixed-depth bisection solver.
"""

# Numerical Safeguards
from alcoholometry.core.math.numerical_safeguards import (
    # NaN/Inf checks
    is_valid_float,
    # Rounding
    round_to_places,
    # Validation
    validate_in_range,
    validate_positive,
)

# Bisection
from alcoholometry.core.math.bisection import bisect_fixed_depth

__all__ = [
    # Numerical Safeguards: NaN/Inf checks
    "is_valid_float",
    # Numerical Safeguards: Rounding
    "round_to_places",
    # Numerical Safeguards: Validation
    "validate_in_range",
    "validate_positive",
    # Bisection
    "bisect_fixed_depth",
]
