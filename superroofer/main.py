"""
SuperRoofer Hip Calculator - Main CLI

Computes the derived measurements of a rectangular hipped roof.

Usage:
    python -m superroofer.main --length <m> --width <m> --slope-angle <deg> --end-slope-angle <deg>

Example:
    python -m superroofer.main --length 12 --width 6 --slope-angle 40 --end-slope-angle 50
"""

import argparse
import json
import logging
import sys
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional, Sequence

from . import __version__
from .config import (
    CalculatorConfig,
    GuardMode,
    DEFAULT_LENGTH,
    DEFAULT_WIDTH,
    DEFAULT_SLOPE_ANGLE,
    DEFAULT_END_SLOPE_ANGLE,
    OUTPUT_PRECISION,
)
from .calculators import RoofGeometry
from .models import DegenerateRoofError


@dataclass
class CalculationReport:
    """Report from a single calculation run."""
    version: str
    success: bool
    inputs: Dict[str, float]
    result: Optional[Dict[str, float]] = None
    is_pyramidal: bool = False
    skipped_reason: Optional[str] = None
    errors: List[str] = field(default_factory=list)
    config_used: Dict[str, Any] = field(default_factory=dict)


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """
    Configure logging to console and optionally to file.

    Args:
        verbose: If True, use DEBUG level; otherwise WARNING
        log_file: Optional path to log file. If provided, logs will be written to file.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if log_file else level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    # Console handler (stderr, so --json output stays clean)
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)  # Always log DEBUG to file
        file_formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)


def run_calculation(roof: RoofGeometry) -> CalculationReport:
    """
    Calculate a roof and describe the outcome.

    Guard failures and degenerate geometry are reported, not raised.

    Args:
        roof: Roof with its inputs set

    Returns:
        CalculationReport; success is True only if derived values were produced
    """
    logger = logging.getLogger(__name__)

    errors: List[str] = []
    skipped_reason = None

    violation = roof.check_guards()
    if violation is not None:
        skipped_reason = str(violation)
        logger.warning(f"Calculation skipped: {skipped_reason}")
    else:
        try:
            roof.calculate()
        except DegenerateRoofError as e:
            errors.append(str(e))
            logger.error(f"Degenerate roof geometry: {e}")

    success = skipped_reason is None and not errors

    return CalculationReport(
        version=__version__,
        success=success,
        inputs=asdict(roof.inputs),
        result=roof.result.as_dict() if success else None,
        is_pyramidal=success and roof.result.is_pyramidal,
        skipped_reason=skipped_reason,
        errors=errors,
        config_used={
            'guard_mode': roof.config.guard_mode.value,
            'precision': roof.config.precision,
        },
    )


def format_report(report: CalculationReport, precision: int = OUTPUT_PRECISION) -> str:
    """Render a report as human-readable text."""
    lines = ["Inputs:"]
    lines.append(f"  Length: {report.inputs['length']:.{precision}f} m")
    lines.append(f"  Width: {report.inputs['width']:.{precision}f} m")
    lines.append(f"  Slope angle: {report.inputs['slope_angle']:.{precision}f} deg")
    lines.append(f"  End slope angle: {report.inputs['end_slope_angle']:.{precision}f} deg")

    if report.success:
        lines.append("\nRoof geometry:")
        lines.append(f"  Height: {report.result['height']:.{precision}f} m")
        lines.append(f"  Ridge length: {report.result['ridge_length']:.{precision}f} m")
        lines.append(f"  Hip length: {report.result['hip_length']:.{precision}f} m")
        if report.is_pyramidal:
            lines.append("  (pyramidal: hips meet at a single apex)")
    elif report.skipped_reason:
        lines.append(f"\nNot calculated: {report.skipped_reason}")
    else:
        lines.append("\nCalculation failed with errors:")
        for error in report.errors:
            lines.append(f"  - {error}")

    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='SuperRoofer Hip Calculator - Derive hipped roof measurements'
    )

    parser.add_argument(
        '--length',
        type=float,
        default=DEFAULT_LENGTH,
        help=f'Roof base length in meters (default: {DEFAULT_LENGTH:g})'
    )

    parser.add_argument(
        '--width',
        type=float,
        default=DEFAULT_WIDTH,
        help=f'Roof base width in meters, not more than the length (default: {DEFAULT_WIDTH:g})'
    )

    parser.add_argument(
        '--slope-angle',
        type=float,
        default=DEFAULT_SLOPE_ANGLE,
        help=f'Main roof pitch in degrees (default: {DEFAULT_SLOPE_ANGLE:g})'
    )

    parser.add_argument(
        '--end-slope-angle',
        type=float,
        default=DEFAULT_END_SLOPE_ANGLE,
        help=f'Hipped end pitch in degrees (default: {DEFAULT_END_SLOPE_ANGLE:g})'
    )

    parser.add_argument(
        '--strict-guard',
        action='store_true',
        help='Also require the derived fields to be positive before calculating '
             '(a fresh roof then never calculates)'
    )

    parser.add_argument(
        '--precision',
        type=int,
        default=OUTPUT_PRECISION,
        help=f'Decimal places for printed values (default: {OUTPUT_PRECISION})'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Print the calculation report as JSON'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    parser.add_argument(
        '--log-file',
        default=None,
        help='Also write a DEBUG log to this file'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    args = parser.parse_args(argv)

    setup_logging(args.verbose, args.log_file)

    guard_mode = GuardMode.ALL_FIELDS if args.strict_guard else GuardMode.INPUTS

    try:
        config = CalculatorConfig(
            guard_mode=guard_mode,
            precision=args.precision,
            debug=args.verbose,
        )
    except ValueError as e:
        parser.error(str(e))

    roof = RoofGeometry(
        length=args.length,
        width=args.width,
        slope_angle=args.slope_angle,
        end_slope_angle=args.end_slope_angle,
        config=config,
    )

    try:
        report = run_calculation(roof)
    except Exception as e:
        logging.exception(f"Calculation failed: {e}")
        return 1

    if args.json:
        print(json.dumps(asdict(report), indent=2))
    else:
        print(format_report(report, config.precision))

    return 0 if report.success else 1


if __name__ == '__main__':
    sys.exit(main())
