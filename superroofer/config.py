"""
Configuration constants for SuperRoofer Hip Calculator.

Contains the default roof dimensions, angle limits, output settings,
and the runtime configuration used by the calculator and the CLI.
"""

from dataclasses import dataclass
from enum import Enum


# =============================================================================
# GUARD MODE
# =============================================================================

class GuardMode(Enum):
    """
    Which fields the positivity guard inspects before a calculation.

    INPUTS: (Default) Only the four user inputs (length, width, slope angle,
            end slope angle) must be strictly positive.

    ALL_FIELDS: All seven fields, including height, ridge length and hip
                length, must be strictly positive. A fresh roof whose derived
                fields are still 0 will never calculate in this mode.
    """
    INPUTS = "inputs"
    ALL_FIELDS = "all_fields"


# =============================================================================
# DEFAULT ROOF DIMENSIONS
# =============================================================================

# Base dimensions (meters)
DEFAULT_LENGTH = 10.0
DEFAULT_WIDTH = 5.0

# Pitches (degrees from horizontal)
DEFAULT_SLOPE_ANGLE = 45.0
DEFAULT_END_SLOPE_ANGLE = 35.0

# =============================================================================
# ANGLE LIMITS
# =============================================================================

# A pitch of 90 degrees or more has no finite tangent (vertical wall)
MAX_PITCH_ANGLE = 90.0

# =============================================================================
# OUTPUT SETTINGS
# =============================================================================

# Decimal places for printed values
OUTPUT_PRECISION = 3

# Debug mode for hip roof calculations
# When True, logs a summary line for every successful calculation
DEBUG_HIP_ROOF = False


# =============================================================================
# RUNTIME CONFIGURATION
# =============================================================================

@dataclass
class CalculatorConfig:
    """
    Runtime configuration for the hip roof calculator.

    Can be adjusted per-run via CLI arguments or programmatically.
    """

    # Fields the positivity guard checks
    guard_mode: GuardMode = GuardMode.INPUTS

    # Decimal places used when printing results
    precision: int = OUTPUT_PRECISION

    # Log a summary of every calculation at INFO level
    debug: bool = DEBUG_HIP_ROOF

    def __post_init__(self):
        """Validate configuration values."""
        if not isinstance(self.guard_mode, GuardMode):
            raise ValueError(
                f"guard_mode must be a GuardMode, got {self.guard_mode!r}"
            )

        if self.precision < 0:
            raise ValueError("precision must be non-negative")


# Default configuration instance
DEFAULT_CONFIG = CalculatorConfig()
