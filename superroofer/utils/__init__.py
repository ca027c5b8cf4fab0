"""
Utility functions for SuperRoofer Hip Calculator.
"""

from .math_utils import (
    tan_degrees,
    half,
    clamp,
    all_finite,
)

__all__ = [
    'tan_degrees',
    'half',
    'clamp',
    'all_finite',
]
