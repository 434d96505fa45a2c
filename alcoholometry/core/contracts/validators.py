"""
JSON Schema Contract Validators

Validation of engine results (as plain dicts, e.g. `model.model_dump(mode="json")`)
against the formal JSON Schema contracts shipped with the package.
Uses the jsonschema library (Draft 2020-12).

Schemas:
- density_result.json
- volume_result.json
- mass_result.json
- dilution_result.json
- hydrometer_correction.json
- temperature_validation.json
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Loader for the JSON Schema files.

    Schemas live in the schema/ directory next to this module.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Cache of loaded schemas
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file.

        Args:
            schema_name: Schema name without extension (e.g. 'density_result')

        Returns:
            The loaded schema as a dict

        Raises:
            FileNotFoundError: If the schema file does not exist
            json.JSONDecodeError: If the file is not valid JSON
            ValueError: If the file is not a valid JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation of the schema itself
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Global loader instance
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Base class for contract validators.

    Wraps validation of data against one JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Validate data against the schema.

        Raises:
            ValidationError: If the data does not match the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Check validity without raising."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """
        Iterate over all validation errors.

        Yields:
            ValidationError for every violation found
        """
        return self.validator.iter_errors(data)


class DensityResultValidator(ContractValidator):
    def __init__(self):
        super().__init__("density_result")


class VolumeResultValidator(ContractValidator):
    def __init__(self):
        super().__init__("volume_result")


class MassResultValidator(ContractValidator):
    def __init__(self):
        super().__init__("mass_result")


class DilutionResultValidator(ContractValidator):
    def __init__(self):
        super().__init__("dilution_result")


class HydrometerCorrectionValidator(ContractValidator):
    def __init__(self):
        super().__init__("hydrometer_correction")


class TemperatureValidationValidator(ContractValidator):
    def __init__(self):
        super().__init__("temperature_validation")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_density_result(data: Dict[str, Any]) -> None:
    """
    Validate density_result data.

    Raises:
        ValidationError: If the data does not match the schema
    """
    DensityResultValidator().validate(data)


def validate_volume_result(data: Dict[str, Any]) -> None:
    """Validate volume_result data (raises ValidationError)."""
    VolumeResultValidator().validate(data)


def validate_mass_result(data: Dict[str, Any]) -> None:
    """Validate mass_result data (raises ValidationError)."""
    MassResultValidator().validate(data)


def validate_dilution_result(data: Dict[str, Any]) -> None:
    """
    Validate dilution_result data.

    Raises:
        ValidationError: If the data does not match the schema
    """
    DilutionResultValidator().validate(data)


def validate_hydrometer_correction(data: Dict[str, Any]) -> None:
    """
    Validate hydrometer_correction data.

    Raises:
        ValidationError: If the data does not match the schema
    """
    HydrometerCorrectionValidator().validate(data)


def validate_temperature_validation(data: Dict[str, Any]) -> None:
    """Validate temperature_validation data (raises ValidationError)."""
    TemperatureValidationValidator().validate(data)
