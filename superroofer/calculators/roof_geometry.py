"""
Mutable roof geometry entity for SuperRoofer Hip Calculator.

RoofGeometry holds the four inputs and three derived fields of a
rectangular hipped roof. The caller edits the inputs in place and calls
calculate() to refresh the derived fields. Nothing tracks whether the
derived fields still match the inputs; call calculate() after every edit.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import logging

from ..models.roof import RoofInputs, RoofResult, GuardViolation
from ..config import (
    CalculatorConfig,
    GuardMode,
    DEFAULT_LENGTH,
    DEFAULT_WIDTH,
    DEFAULT_SLOPE_ANGLE,
    DEFAULT_END_SLOPE_ANGLE,
)
from .hip_roof import find_guard_violation, solve_hip_roof, log_result

logger = logging.getLogger(__name__)


@dataclass
class RoofGeometry:
    """
    A rectangular hipped roof, described by its numeric fields only.

    Lengths are in meters, angles in degrees from horizontal.
    height, ridge_length and hip_length start at 0 (not yet calculated).
    """
    length: float = DEFAULT_LENGTH
    width: float = DEFAULT_WIDTH
    height: float = 0.0
    slope_angle: float = DEFAULT_SLOPE_ANGLE
    end_slope_angle: float = DEFAULT_END_SLOPE_ANGLE
    ridge_length: float = 0.0
    hip_length: float = 0.0
    config: CalculatorConfig = field(default_factory=CalculatorConfig, repr=False, compare=False)

    @classmethod
    def from_inputs(
        cls,
        inputs: RoofInputs,
        config: Optional[CalculatorConfig] = None
    ) -> 'RoofGeometry':
        """Create an uncalculated roof from an inputs record."""
        return cls(
            length=inputs.length,
            width=inputs.width,
            slope_angle=inputs.slope_angle,
            end_slope_angle=inputs.end_slope_angle,
            config=config if config is not None else CalculatorConfig(),
        )

    @property
    def inputs(self) -> RoofInputs:
        """Snapshot of the current inputs."""
        return RoofInputs(
            length=self.length,
            width=self.width,
            slope_angle=self.slope_angle,
            end_slope_angle=self.end_slope_angle,
        )

    @property
    def result(self) -> RoofResult:
        """Snapshot of the derived fields as they currently stand."""
        return RoofResult(
            height=self.height,
            ridge_length=self.ridge_length,
            hip_length=self.hip_length,
        )

    def guard_fields(self) -> List[Tuple[str, float]]:
        """Fields that must be strictly positive under the configured guard mode."""
        fields = self.inputs.fields()
        if self.config.guard_mode is GuardMode.ALL_FIELDS:
            fields.extend(self.result.fields())
        return fields

    def check_guards(self) -> Optional[GuardViolation]:
        """Return the first failed precondition, or None."""
        return find_guard_violation(self.guard_fields(), self.length, self.width)

    def calculate(self) -> None:
        """
        Recompute height, ridge length and hip length from the inputs.

        If a guard fails the derived fields are left as they are and
        nothing is signalled to the caller; use check_guards() to find
        out why.

        Raises:
            DegenerateRoofError: if a pitch is 90 degrees or more; the
                derived fields are not modified
        """
        violation = self.check_guards()
        if violation is not None:
            logger.debug(f"Calculation skipped: {violation}")
            return

        result = solve_hip_roof(
            self.length, self.width, self.slope_angle, self.end_slope_angle
        )

        self.height = result.height
        self.ridge_length = result.ridge_length
        self.hip_length = result.hip_length

        log_result(self.inputs, result, self.config)
