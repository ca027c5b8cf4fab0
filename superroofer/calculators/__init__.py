"""
Roof calculators for SuperRoofer Hip Calculator.

Contains the hip roof formulas, the calculation guard, the stateless
compute_hip_roof() and the mutable RoofGeometry entity.
"""

from .hip_roof import (
    calculate_height,
    calculate_ridge_length,
    calculate_hip_length,
    find_guard_violation,
    solve_hip_roof,
    compute_hip_roof,
)
from .roof_geometry import RoofGeometry

__all__ = [
    'calculate_height',
    'calculate_ridge_length',
    'calculate_hip_length',
    'find_guard_violation',
    'solve_hip_roof',
    'compute_hip_roof',
    'RoofGeometry',
]
