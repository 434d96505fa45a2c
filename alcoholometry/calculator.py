"""Alcoholometry calculator — caller façade over the density engine.

The engine accepts any scalar and never raises for out-of-domain input.
This façade is the user-facing caller: it rejects inputs outside the ranges
a calculator accepts, logs each calculation and attaches temperature
warnings.

Input checks:
- ABV in [abv_min, abv_max]
- temperature in [temp_min_c, temp_max_c]
- mass / volume > 0
- dilution: source ABV > 0, target ABV > 0, target < source
"""

import logging
from typing import Optional

from alcoholometry.config import CalculatorConfig
from alcoholometry.core.density import (
    calculate_density,
    calculate_dilution_water,
    calculate_ethanol_mass,
    calculate_mass_from_volume,
    calculate_volume_from_mass,
    correct_hydrometer_reading,
    validate_temperature,
)
from alcoholometry.core.domain import (
    DensityResult,
    DilutionResult,
    HydrometerCorrection,
    MassResult,
    TemperatureValidation,
    VolumeResult,
    WarningLevel,
)
from alcoholometry.core.math.numerical_safeguards import (
    validate_in_range,
    validate_positive,
)

logger = logging.getLogger(__name__)


class InputRangeError(ValueError):
    """Input outside the range accepted by the calculator."""


class AlcoholometryCalculator:
    """Validating entry point for the density engine.

    Every method checks its inputs against CalculatorConfig, calls the pure
    engine function and returns its immutable result unchanged.
    """

    def __init__(self, config: Optional[CalculatorConfig] = None):
        """
        Args:
            config: Calculator configuration (default: CalculatorConfig())
        """
        self.config = config or CalculatorConfig()

    # -------------------------------------------------------------------------
    # Input checks
    # -------------------------------------------------------------------------

    def _check_abv(self, abv: float, name: str = "abv") -> None:
        try:
            validate_in_range(abv, name, self.config.abv_min, self.config.abv_max)
        except ValueError as e:
            raise InputRangeError(str(e)) from e

    def _check_temperature(self, temp_c: float) -> TemperatureValidation:
        try:
            validate_in_range(
                temp_c, "temp_c", self.config.temp_min_c, self.config.temp_max_c
            )
        except ValueError as e:
            raise InputRangeError(str(e)) from e

        validation = validate_temperature(temp_c)
        if validation.warning == WarningLevel.DANGER:
            logger.warning("temp_c=%.2f: %s", temp_c, validation.message)
        return validation

    @staticmethod
    def _check_positive(value: float, name: str) -> None:
        try:
            validate_positive(value, name)
        except ValueError as e:
            raise InputRangeError(str(e)) from e

    # -------------------------------------------------------------------------
    # Calculations
    # -------------------------------------------------------------------------

    def temperature(self, temp_c: float) -> TemperatureValidation:
        """Classify a temperature (input bounds are still enforced)."""
        return self._check_temperature(temp_c)

    def density(self, abv: float, temp_c: float) -> DensityResult:
        """Density and contraction factor of a spirit at temp_c."""
        self._check_abv(abv)
        self._check_temperature(temp_c)

        result = calculate_density(abv, temp_c)
        logger.debug(
            "density abv=%s temp_c=%s -> %s g/mL (contraction %s)",
            abv, temp_c, result.density, result.contraction_factor,
        )
        return result

    def volume_from_mass(self, mass_g: float, abv: float, temp_c: float) -> VolumeResult:
        """Volume occupied by mass_g of spirit."""
        self._check_positive(mass_g, "mass_g")
        self._check_abv(abv)
        self._check_temperature(temp_c)

        result = calculate_volume_from_mass(mass_g, abv, temp_c)
        logger.debug(
            "volume mass_g=%s abv=%s temp_c=%s -> %s mL", mass_g, abv, temp_c, result.volume_ml
        )
        return result

    def mass_from_volume(self, volume_ml: float, abv: float, temp_c: float) -> MassResult:
        """Mass to weigh out for volume_ml of spirit."""
        self._check_positive(volume_ml, "volume_ml")
        self._check_abv(abv)
        self._check_temperature(temp_c)

        result = calculate_mass_from_volume(volume_ml, abv, temp_c)
        logger.debug(
            "weigh volume_ml=%s abv=%s temp_c=%s -> %s g", volume_ml, abv, temp_c, result.mass_g
        )
        return result

    def ethanol_mass(self, volume_ml: float, abv: float, temp_c: float) -> float:
        """Pure ethanol mass (g) in volume_ml of spirit."""
        self._check_positive(volume_ml, "volume_ml")
        self._check_abv(abv)
        self._check_temperature(temp_c)

        mass_g = calculate_ethanol_mass(volume_ml, abv, temp_c)
        logger.debug(
            "ethanol volume_ml=%s abv=%s temp_c=%s -> %s g", volume_ml, abv, temp_c, mass_g
        )
        return mass_g

    def dilution(
        self, source_mass_g: float, source_abv: float, target_abv: float
    ) -> DilutionResult:
        """Water to add by weight to bring source_abv down to target_abv."""
        self._check_positive(source_mass_g, "source_mass_g")
        self._check_abv(source_abv, "source_abv")
        self._check_abv(target_abv, "target_abv")
        self._check_positive(source_abv, "source_abv")
        self._check_positive(target_abv, "target_abv")
        if target_abv >= source_abv:
            raise InputRangeError(
                f"target_abv {target_abv} must be < source_abv {source_abv} (dilution only)"
            )

        result = calculate_dilution_water(source_mass_g, source_abv, target_abv)
        logger.debug(
            "dilution %s g @ %s%% -> %s%%: add %s g water",
            source_mass_g, source_abv, target_abv, result.water_to_add_g,
        )
        return result

    def hydrometer(self, reading_abv: float, temp_c: float) -> HydrometerCorrection:
        """True ABV at 20°C from a hydrometer reading taken at temp_c."""
        self._check_abv(reading_abv, "reading_abv")
        self._check_temperature(temp_c)

        alpha = (
            self.config.glass_expansion_coefficient
            if self.config.apply_glass_correction
            else 0.0
        )
        result = correct_hydrometer_reading(
            reading_abv, temp_c, glass_expansion_coefficient=alpha
        )
        logger.debug(
            "hydrometer reading=%s temp_c=%s -> true %s (%+.1f)",
            reading_abv, temp_c, result.true_abv, result.correction,
        )
        return result
