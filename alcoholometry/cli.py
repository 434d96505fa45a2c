"""
Alcoholometry - Command Line Interface

Ethanol-water conversions per OIML R 22: density, mass/volume, gravimetric
dilution and hydrometer temperature correction.
"""

import argparse
import json
import logging
import sys
from typing import Callable, Dict, Optional, Sequence

from pydantic import BaseModel

from alcoholometry import __version__
from alcoholometry.calculator import AlcoholometryCalculator, InputRangeError
from alcoholometry.config import CalculatorConfig
from alcoholometry.core.contracts import (
    validate_density_result,
    validate_dilution_result,
    validate_hydrometer_correction,
    validate_mass_result,
    validate_temperature_validation,
    validate_volume_result,
)
from alcoholometry.core.density import validate_temperature
from alcoholometry.core.domain import WarningLevel
from alcoholometry.logging_config import setup_logging

logger = logging.getLogger(__name__)

# Exit status for rejected input
EXIT_INPUT_ERROR = 2

# Contract checked before a result is printed as JSON
_CONTRACTS: Dict[str, Callable[[dict], None]] = {
    "density": validate_density_result,
    "volume": validate_volume_result,
    "weigh": validate_mass_result,
    "dilute": validate_dilution_result,
    "hydrometer": validate_hydrometer_correction,
    "temperature": validate_temperature_validation,
}


def setup_argparse() -> argparse.ArgumentParser:
    """Setup command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="alcoholometry",
        description="Precision alcoholometry calculator (OIML R 22)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"alcoholometry {__version__}"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Density
    density_parser = subparsers.add_parser("density", help="Mixture density")
    density_parser.add_argument("abv", type=float, help="ABV (%%)")
    _add_temp_argument(density_parser)

    # Mass -> volume
    volume_parser = subparsers.add_parser("volume", help="Volume of a weighed mass")
    volume_parser.add_argument("mass_g", type=float, help="Mass (g)")
    volume_parser.add_argument("abv", type=float, help="ABV (%%)")
    _add_temp_argument(volume_parser)

    # Volume -> mass
    weigh_parser = subparsers.add_parser("weigh", help="Mass to weigh for a target volume")
    weigh_parser.add_argument("volume_ml", type=float, help="Target volume (mL)")
    weigh_parser.add_argument("abv", type=float, help="ABV (%%)")
    _add_temp_argument(weigh_parser)

    # Ethanol content
    ethanol_parser = subparsers.add_parser("ethanol", help="Pure ethanol mass in a volume")
    ethanol_parser.add_argument("volume_ml", type=float, help="Volume (mL)")
    ethanol_parser.add_argument("abv", type=float, help="ABV (%%)")
    _add_temp_argument(ethanol_parser)

    # Dilution
    dilute_parser = subparsers.add_parser("dilute", help="Water to add by weight")
    dilute_parser.add_argument("source_mass_g", type=float, help="Source mass (g)")
    dilute_parser.add_argument("source_abv", type=float, help="Source ABV (%%)")
    dilute_parser.add_argument("target_abv", type=float, help="Target ABV (%%)")

    # Hydrometer
    hydro_parser = subparsers.add_parser("hydrometer", help="Correct a hydrometer reading")
    hydro_parser.add_argument("reading_abv", type=float, help="Hydrometer reading (%%)")
    _add_temp_argument(hydro_parser)
    hydro_parser.add_argument(
        "--no-glass-correction",
        action="store_true",
        help="Ignore thermal expansion of the glass float (OIML R 22 §14)"
    )

    # Temperature
    temp_parser = subparsers.add_parser("temperature", help="Classify a sample temperature")
    temp_parser.add_argument("temp_c", type=float, help="Temperature (°C)")

    return parser


def _add_temp_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--temp",
        dest="temp_c",
        type=float,
        default=20.0,
        help="Sample temperature in °C (default: 20)"
    )


def _run(calculator: AlcoholometryCalculator, args: argparse.Namespace):
    """Dispatch a parsed command to the calculator."""
    if args.command == "density":
        return calculator.density(args.abv, args.temp_c)
    if args.command == "volume":
        return calculator.volume_from_mass(args.mass_g, args.abv, args.temp_c)
    if args.command == "weigh":
        return calculator.mass_from_volume(args.volume_ml, args.abv, args.temp_c)
    if args.command == "ethanol":
        return {"ethanol_mass_g": calculator.ethanol_mass(args.volume_ml, args.abv, args.temp_c)}
    if args.command == "dilute":
        return calculator.dilution(args.source_mass_g, args.source_abv, args.target_abv)
    if args.command == "hydrometer":
        return calculator.hydrometer(args.reading_abv, args.temp_c)
    if args.command == "temperature":
        return calculator.temperature(args.temp_c)
    raise ValueError(f"Unknown command: {args.command}")


def _render(data: dict) -> str:
    """Human-readable rendering, one 'key: value' per line."""
    return "\n".join(f"{key}: {value}" for key, value in data.items())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point. Returns the process exit status."""
    parser = setup_argparse()
    args = parser.parse_args(argv)

    setup_logging(level=getattr(logging, args.log_level))

    config = CalculatorConfig(
        apply_glass_correction=not getattr(args, "no_glass_correction", False)
    )
    calculator = AlcoholometryCalculator(config)

    try:
        result = _run(calculator, args)
    except InputRangeError as e:
        logger.error("Rejected input: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    data = result.model_dump(mode="json") if isinstance(result, BaseModel) else result

    if args.json:
        contract = _CONTRACTS.get(args.command)
        if contract is not None:
            contract(data)
        print(json.dumps(data, indent=2))
    else:
        print(_render(data))

    temp_c = getattr(args, "temp_c", None)
    if temp_c is not None and args.command != "temperature":
        warning = validate_temperature(temp_c)
        if warning.warning != WarningLevel.NONE:
            print(f"warning ({warning.warning.value}): {warning.message}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
