"""
Hip roof calculator for SuperRoofer Hip Calculator.

Derives the measurements of a rectangular hipped roof from its base
dimensions and pitches. The values depend on each other and are always
computed in the same order:

1. Height, from the right triangle through the roof's mid cross-section:
   half the width is the run, the main slope angle gives the rise.
2. Ridge length, from the triangle through the hipped end: each hip takes
   height / tan(end slope) off both ends of the ridge. A shallow end slope
   can push this below zero, which is floored to 0 (pyramidal roof).
3. Hip length, the 3D diagonal through the height, half the width and half
   the part of the length not covered by the ridge.

All angles are in degrees and converted to radians before any trig call.
"""

from typing import Iterable, Optional, Tuple
import logging
import math

from ..models.roof import (
    RoofInputs,
    RoofResult,
    GuardFailure,
    GuardViolation,
    DegenerateRoofError,
)
from ..config import CalculatorConfig, MAX_PITCH_ANGLE, DEBUG_HIP_ROOF
from ..utils.math_utils import tan_degrees, half, clamp, all_finite

logger = logging.getLogger(__name__)


def calculate_height(width: float, slope_angle: float) -> float:
    """
    Vertical rise of the roof.

    Args:
        width: Base width in meters
        slope_angle: Main roof pitch in degrees

    Returns:
        Height in meters
    """
    return half(width) * tan_degrees(slope_angle)


def calculate_ridge_length(length: float, height: float, end_slope_angle: float) -> float:
    """
    Length of the horizontal ridge.

    At shallow end slope angles the ridge can vanish, but never
    becomes negative.

    Args:
        length: Base length in meters
        height: Roof height in meters
        end_slope_angle: Hipped end pitch in degrees

    Returns:
        Ridge length in meters, in [0, length]
    """
    end_run = height / tan_degrees(end_slope_angle)
    return clamp(length - 2 * end_run, 0.0, length)


def calculate_hip_length(height: float, width: float, ridge_length: float, length: float) -> float:
    """
    Length of each hip rafter (eave corner to ridge end).

    Args:
        height: Roof height in meters
        width: Base width in meters
        ridge_length: Ridge length in meters
        length: Base length in meters

    Returns:
        Hip length in meters
    """
    return math.sqrt(
        height ** 2
        + half(width) ** 2
        + half(length - ridge_length) ** 2
    )


def find_guard_violation(
    fields: Iterable[Tuple[str, float]],
    length: float,
    width: float
) -> Optional[GuardViolation]:
    """
    Check the preconditions of a calculation.

    Every listed field must be strictly greater than 0 (NaN fails too),
    and the width must not exceed the length.

    Args:
        fields: (name, value) pairs that must be positive
        length: Base length in meters
        width: Base width in meters

    Returns:
        The first violation found, or None if the calculation may proceed
    """
    for name, value in fields:
        if not (value > 0):
            return GuardViolation(GuardFailure.NON_POSITIVE_FIELD, name, value)

    if width > length:
        return GuardViolation(GuardFailure.WIDTH_EXCEEDS_LENGTH, 'width', width)

    return None


def _check_pitch_angles(slope_angle: float, end_slope_angle: float) -> None:
    """Reject pitches with no finite tangent."""
    for name, angle in (('slope_angle', slope_angle), ('end_slope_angle', end_slope_angle)):
        if angle >= MAX_PITCH_ANGLE:
            raise DegenerateRoofError(
                f"{name} must be below {MAX_PITCH_ANGLE:g} degrees (got {angle})"
            )


def solve_hip_roof(
    length: float,
    width: float,
    slope_angle: float,
    end_slope_angle: float
) -> RoofResult:
    """
    Compute height, ridge length and hip length without any guard.

    Callers are expected to have run find_guard_violation() first.

    Raises:
        DegenerateRoofError: if a pitch is 90 degrees or more, or a
            derived value is not finite
    """
    _check_pitch_angles(slope_angle, end_slope_angle)

    height = calculate_height(width, slope_angle)
    ridge_length = calculate_ridge_length(length, height, end_slope_angle)
    hip_length = calculate_hip_length(height, width, ridge_length, length)

    if not all_finite((height, ridge_length, hip_length)):
        raise DegenerateRoofError(
            f"Non-finite roof geometry: height={height}, "
            f"ridge_length={ridge_length}, hip_length={hip_length}"
        )

    return RoofResult(height=height, ridge_length=ridge_length, hip_length=hip_length)


def compute_hip_roof(
    inputs: RoofInputs,
    config: Optional[CalculatorConfig] = None
) -> Optional[RoofResult]:
    """
    Compute the derived measurements for a set of inputs.

    Stateless counterpart of RoofGeometry.calculate(). The positivity
    guard covers the four inputs; there are no derived fields to check.

    Args:
        inputs: Roof dimensions and pitches
        config: Optional configuration (only the debug flag is used)

    Returns:
        RoofResult, or None if the inputs fail the guard

    Raises:
        DegenerateRoofError: for pitches of 90 degrees or more
    """
    violation = find_guard_violation(inputs.fields(), inputs.length, inputs.width)
    if violation is not None:
        logger.debug(f"Calculation skipped: {violation}")
        return None

    result = solve_hip_roof(
        inputs.length, inputs.width, inputs.slope_angle, inputs.end_slope_angle
    )
    log_result(inputs, result, config)
    return result


def log_result(
    inputs: RoofInputs,
    result: RoofResult,
    config: Optional[CalculatorConfig] = None
) -> None:
    """Log a calculation, at INFO when hip roof debugging is enabled."""
    debug = DEBUG_HIP_ROOF or (config is not None and config.debug)
    message = (
        f"HIP ROOF: L={inputs.length:.3f}m, W={inputs.width:.3f}m, "
        f"slope={inputs.slope_angle:.2f}deg, end_slope={inputs.end_slope_angle:.2f}deg -> "
        f"height={result.height:.3f}m, ridge={result.ridge_length:.3f}m, "
        f"hip={result.hip_length:.3f}m"
        f"{' (pyramidal)' if result.is_pyramidal else ''}"
    )
    if debug:
        logger.info(message)
    else:
        logger.debug(message)
