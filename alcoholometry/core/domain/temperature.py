"""
TemperatureValidation — advisory temperature classification
"""

from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class WarningLevel(str, Enum):
    """Severity of a temperature warning."""

    NONE = "none"
    CAUTION = "caution"
    DANGER = "danger"


# =============================================================================
# TEMPERATURE VALIDATION MODEL
# =============================================================================


class TemperatureValidation(BaseModel):
    """
    Classification of a sample temperature against the hydrometer table band.

    Immutable (frozen=True). Advisory only: numeric results are computed
    regardless of the warning level.
    """

    is_valid: bool = Field(..., description="False only for the danger band")
    warning: WarningLevel = Field(..., description="none / caution / danger")
    message: str = Field(..., description="Human-readable warning ('' for none)")

    model_config = {"frozen": True}
