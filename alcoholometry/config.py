"""
Calculator configuration.

Input bounds enforced by the caller façade before the engine is invoked,
and the hydrometer glass-expansion option.
"""

from dataclasses import dataclass

from alcoholometry.core.density.hydrometer import SODA_LIME_GLASS_EXPANSION


@dataclass(frozen=True)
class CalculatorConfig:
    """Configuration of AlcoholometryCalculator.

    Bounds are inclusive. The engine itself accepts any value; these are the
    ranges a user-facing caller accepts.
    """

    # Sample temperature accepted as input (°C)
    temp_min_c: float = -10.0
    temp_max_c: float = 50.0

    # Strength accepted as input (% vol)
    abv_min: float = 0.0
    abv_max: float = 100.0

    # OIML R 22 §14 glass float expansion in hydrometer correction
    apply_glass_correction: bool = True
    glass_expansion_coefficient: float = SODA_LIME_GLASS_EXPANSION

    def __post_init__(self) -> None:
        if self.temp_min_c >= self.temp_max_c:
            raise ValueError(
                f"temp_min_c {self.temp_min_c} must be < temp_max_c {self.temp_max_c}"
            )
        if self.abv_min >= self.abv_max:
            raise ValueError(f"abv_min {self.abv_min} must be < abv_max {self.abv_max}")
        if self.glass_expansion_coefficient < 0:
            raise ValueError(
                "glass_expansion_coefficient must be non-negative, "
                f"got {self.glass_expansion_coefficient}"
            )
