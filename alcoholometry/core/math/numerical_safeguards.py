"""
Numerical Safeguards — Float Primitives

Helpers shared by the density engine and its callers:
- NaN/Inf detection
- Rounding to a fixed number of decimal places (presentation precision)
- Range validation for caller-side input checks

CRITICAL INVARIANTS:
1. Every function is deterministic and side-effect free
2. Validation helpers raise ValueError with the parameter name in the message
3. Rounding never returns -0.0
"""

import math


# =============================================================================
# NaN/Inf CHECKS
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Check that a float is finite (not NaN, not Inf).

    Args:
        value: Value to check

    Returns:
        True if the value is finite
    """
    return math.isfinite(value)


# =============================================================================
# ROUNDING
# =============================================================================


def round_to_places(value: float, places: int) -> float:
    """
    Round a value to a fixed number of decimal places.

    The engine rounds every returned quantity to the precision appropriate
    to its physical meaning so that displayed values do not depend on how
    the caller formats them.

    Args:
        value: Value to round
        places: Number of decimal places (>= 0)

    Returns:
        Rounded value (NaN/Inf pass through unchanged)

    Raises:
        ValueError: If places is negative

    Examples:
        >>> round_to_places(0.99820123, 6)
        0.998201
        >>> round_to_places(1817.6543, 1)
        1817.7
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")

    if not is_valid_float(value):
        return value

    rounded = round(value, places)

    # round(-0.04, 1) == -0.0
    if rounded == 0.0:
        return 0.0
    return rounded


# =============================================================================
# VALIDATION
# =============================================================================


def validate_positive(value: float, name: str) -> None:
    """
    Validate that a value is strictly positive.

    Args:
        value: Value to check
        name: Parameter name (for the error message)

    Raises:
        ValueError: If value <= 0 or NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_in_range(
    value: float,
    name: str,
    min_value: float | None = None,
    max_value: float | None = None,
) -> None:
    """
    Validate that a value lies in [min_value, max_value].

    Args:
        value: Value to check
        name: Parameter name (for the error message)
        min_value: Lower bound, inclusive (optional)
        max_value: Upper bound, inclusive (optional)

    Raises:
        ValueError: If the value is out of range or NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if min_value is not None and value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")
