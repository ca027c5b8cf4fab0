"""
Roof data model for SuperRoofer Hip Calculator.

Provides immutable input/result records for a rectangular hipped roof,
the guard failure types reported when a calculation is skipped, and the
error raised for degenerate geometry.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Dict, List, Tuple

from ..config import (
    DEFAULT_LENGTH,
    DEFAULT_WIDTH,
    DEFAULT_SLOPE_ANGLE,
    DEFAULT_END_SLOPE_ANGLE,
)


class DegenerateRoofError(ValueError):
    """Raised when the inputs describe a roof with no finite geometry."""


class GuardFailure(Enum):
    """Reason a calculation was skipped."""
    NON_POSITIVE_FIELD = "non_positive_field"
    WIDTH_EXCEEDS_LENGTH = "width_exceeds_length"


@dataclass(frozen=True)
class GuardViolation:
    """First guard check that failed, with the offending field."""
    reason: GuardFailure
    field_name: str
    value: float

    def __str__(self) -> str:
        if self.reason is GuardFailure.WIDTH_EXCEEDS_LENGTH:
            return f"width ({self.value}) exceeds length"
        return f"{self.field_name} must be greater than 0 (got {self.value})"


@dataclass(frozen=True)
class RoofInputs:
    """User-supplied dimensions of a rectangular hipped roof."""
    length: float = DEFAULT_LENGTH  # Base length, m
    width: float = DEFAULT_WIDTH  # Base width, m
    slope_angle: float = DEFAULT_SLOPE_ANGLE  # Main pitch, deg
    end_slope_angle: float = DEFAULT_END_SLOPE_ANGLE  # Hipped end pitch, deg

    def fields(self) -> List[Tuple[str, float]]:
        """Named input values, in declaration order."""
        return [
            ('length', self.length),
            ('width', self.width),
            ('slope_angle', self.slope_angle),
            ('end_slope_angle', self.end_slope_angle),
        ]


@dataclass(frozen=True)
class RoofResult:
    """Derived measurements of a hipped roof."""
    height: float  # Vertical rise, m
    ridge_length: float  # Horizontal ridge, m (0 = pyramidal)
    hip_length: float  # Each hip rafter, m

    @property
    def is_pyramidal(self) -> bool:
        """True when the hips meet at a single apex (no ridge)."""
        return self.ridge_length == 0

    def fields(self) -> List[Tuple[str, float]]:
        """Named derived values, in calculation order."""
        return [
            ('height', self.height),
            ('ridge_length', self.ridge_length),
            ('hip_length', self.hip_length),
        ]

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)
