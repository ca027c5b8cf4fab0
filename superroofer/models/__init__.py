"""
Data models for SuperRoofer Hip Calculator.
"""

from .roof import (
    RoofInputs,
    RoofResult,
    GuardFailure,
    GuardViolation,
    DegenerateRoofError,
)

__all__ = [
    'RoofInputs',
    'RoofResult',
    'GuardFailure',
    'GuardViolation',
    'DegenerateRoofError',
]
