"""
Domain models and value objects.

Immutable results returned by the density engine.
"""

from alcoholometry.core.domain.density import DensityResult, MassResult, VolumeResult
from alcoholometry.core.domain.dilution import DilutionResult
from alcoholometry.core.domain.hydrometer import HydrometerCorrection
from alcoholometry.core.domain.temperature import TemperatureValidation, WarningLevel

__all__ = [
    # Density
    "DensityResult",
    "VolumeResult",
    "MassResult",
    # Dilution
    "DilutionResult",
    # Hydrometer
    "HydrometerCorrection",
    # Temperature
    "TemperatureValidation",
    "WarningLevel",
]
