"""
SuperRoofer Hip Calculator

Computes the height, ridge length and hip length of a rectangular
hipped roof from its base length, base width, main slope angle and
end slope angle.

Can be used as:
- Library: RoofGeometry(...).calculate() or compute_hip_roof(RoofInputs(...))
- CLI tool: python -m superroofer.main
"""

__version__ = "1.0.0"
__author__ = "SuperRoofer Team"

from .config import CalculatorConfig, GuardMode
from .models import (
    RoofInputs,
    RoofResult,
    GuardFailure,
    GuardViolation,
    DegenerateRoofError,
)
from .calculators import RoofGeometry, compute_hip_roof

__all__ = [
    'CalculatorConfig',
    'GuardMode',
    'RoofInputs',
    'RoofResult',
    'GuardFailure',
    'GuardViolation',
    'DegenerateRoofError',
    'RoofGeometry',
    'compute_hip_roof',
]
