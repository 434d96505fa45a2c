"""
Range Validator — temperature warning bands

Pure classification used by callers to decide whether to surface a warning.
It never affects numeric output.

    t < 10 or t > 30  → danger   (outside hydrometer correction tables)
    t < 15 or t > 25  → caution  (far from the 20°C reference)
    otherwise         → none
"""

from typing import Final

from alcoholometry.core.domain.temperature import TemperatureValidation, WarningLevel

# Hydrometer correction table band (°C)
TABLE_RANGE_MIN_C: Final[float] = 10.0
TABLE_RANGE_MAX_C: Final[float] = 30.0

# Comfort band around the reference temperature (°C)
CAUTION_RANGE_MIN_C: Final[float] = 15.0
CAUTION_RANGE_MAX_C: Final[float] = 25.0

DANGER_MESSAGE: Final[str] = "Temperature out of range (10-30°C)"
CAUTION_MESSAGE: Final[str] = "Temperature far from 20°C reference (15-25°C recommended)"


def validate_temperature(temp_c: float) -> TemperatureValidation:
    """
    Classify a sample temperature into none/caution/danger.

    Args:
        temp_c: Temperature (°C)

    Returns:
        TemperatureValidation (is_valid is False only for danger)
    """
    if temp_c < TABLE_RANGE_MIN_C or temp_c > TABLE_RANGE_MAX_C:
        return TemperatureValidation(
            is_valid=False, warning=WarningLevel.DANGER, message=DANGER_MESSAGE
        )

    if temp_c < CAUTION_RANGE_MIN_C or temp_c > CAUTION_RANGE_MAX_C:
        return TemperatureValidation(
            is_valid=True, warning=WarningLevel.CAUTION, message=CAUTION_MESSAGE
        )

    return TemperatureValidation(is_valid=True, warning=WarningLevel.NONE, message="")
