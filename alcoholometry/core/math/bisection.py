"""
Fixed-Depth Bisection

Root bracketing on a monotone function with a fixed number of halvings.

No convergence test: the iteration count is fixed, and after n halvings the
bracket width is (high - low) / 2**n.

CRITICAL INVARIANTS:
1. Exactly `iterations` evaluations of `root_is_above` are made
2. The returned value is the last midpoint evaluated
3. The result always lies inside the initial [low, high] bracket
"""

from typing import Callable


def bisect_fixed_depth(
    root_is_above: Callable[[float], bool],
    low: float,
    high: float,
    iterations: int,
) -> float:
    """
    Narrow [low, high] by bisection for a fixed number of iterations.

    At each step the midpoint is evaluated; if the root lies above it the
    lower bound moves up, otherwise the upper bound moves down.

    Args:
        root_is_above: Predicate on a candidate, True if the sought root is
            strictly greater than the candidate
        low: Lower bound of the bracket
        high: Upper bound of the bracket
        iterations: Number of halvings (>= 1)

    Returns:
        The midpoint evaluated on the last iteration

    Raises:
        ValueError: If iterations < 1 or low > high

    Examples:
        >>> round(bisect_fixed_depth(lambda x: x * x < 2.0, 0.0, 2.0, 40), 9)
        1.414213562
    """
    if iterations < 1:
        raise ValueError(f"iterations must be >= 1, got {iterations}")
    if low > high:
        raise ValueError(f"low must be <= high, got low={low}, high={high}")

    mid = (low + high) / 2
    for _ in range(iterations):
        mid = (low + high) / 2
        if root_is_above(mid):
            low = mid
        else:
            high = mid

    return mid
