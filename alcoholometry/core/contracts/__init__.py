"""
Contract Validation Module

JSON Schema contracts for the results of the density engine.
"""

from .validators import (
    ContractValidator,
    DensityResultValidator,
    DilutionResultValidator,
    HydrometerCorrectionValidator,
    MassResultValidator,
    SchemaLoader,
    TemperatureValidationValidator,
    VolumeResultValidator,
    validate_density_result,
    validate_dilution_result,
    validate_hydrometer_correction,
    validate_mass_result,
    validate_temperature_validation,
    validate_volume_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DensityResultValidator",
    "VolumeResultValidator",
    "MassResultValidator",
    "DilutionResultValidator",
    "HydrometerCorrectionValidator",
    "TemperatureValidationValidator",
    # Functions
    "validate_density_result",
    "validate_volume_result",
    "validate_mass_result",
    "validate_dilution_result",
    "validate_hydrometer_correction",
    "validate_temperature_validation",
]
