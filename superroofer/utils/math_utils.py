"""
Mathematical utilities for SuperRoofer Hip Calculator.

Provides degree-based trigonometry and small numeric helpers
used by the roof calculators.
"""

from typing import Iterable
import math


def tan_degrees(angle: float) -> float:
    """
    Tangent of an angle given in degrees.

    Args:
        angle: Angle in degrees

    Returns:
        tan(angle), computed after converting to radians
    """
    return math.tan(math.radians(angle))


def half(value: float) -> float:
    """Half of a dimension (e.g. the horizontal run of a symmetric slope)."""
    return value / 2


def clamp(value: float, min_val: float, max_val: float) -> float:
    """
    Clamp value to [min_val, max_val] range.

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def all_finite(values: Iterable[float]) -> bool:
    """True if none of the values is infinite or NaN."""
    return all(math.isfinite(v) for v in values)
