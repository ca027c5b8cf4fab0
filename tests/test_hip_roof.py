"""Tests for calculators/hip_roof.py — formulas, guard, stateless calculation."""
import logging
import math
import pytest
from superroofer.calculators.hip_roof import (
    calculate_height,
    calculate_ridge_length,
    calculate_hip_length,
    find_guard_violation,
    solve_hip_roof,
    compute_hip_roof,
)
from superroofer.config import CalculatorConfig
from superroofer.models import (
    RoofInputs,
    RoofResult,
    GuardFailure,
    DegenerateRoofError,
)


# --- calculate_height ---

def test_height_45_degrees_is_half_width():
    assert calculate_height(5.0, 45.0) == pytest.approx(2.5)


def test_height_30_degrees():
    assert calculate_height(6.0, 30.0) == pytest.approx(3.0 / math.sqrt(3))


def test_height_60_degrees():
    assert calculate_height(4.0, 60.0) == pytest.approx(2.0 * math.sqrt(3))


# --- calculate_ridge_length ---

def test_ridge_length_default_roof():
    ridge = calculate_ridge_length(10.0, 2.5, 35.0)
    assert ridge == pytest.approx(2.85926, abs=1e-4)


def test_ridge_length_45_degree_end():
    # Each hip takes height / tan(45) = height off each end
    assert calculate_ridge_length(10.0, 2.0, 45.0) == pytest.approx(6.0)


def test_ridge_length_floored_at_zero():
    assert calculate_ridge_length(4.0, 1.95, 10.0) == 0.0


def test_ridge_length_steep_end_approaches_length():
    ridge = calculate_ridge_length(10.0, 2.5, 89.9)
    assert 9.99 < ridge < 10.0


# --- calculate_hip_length ---

def test_hip_length_three_term_diagonal():
    # 3-4-12 box diagonal is 13: height=3, width/2=4, (length-ridge)/2=12
    assert calculate_hip_length(3.0, 8.0, 6.0, 30.0) == pytest.approx(13.0)


def test_hip_length_full_hip():
    hip = calculate_hip_length(1.95, 3.9, 0.0, 4.0)
    assert hip == pytest.approx(math.sqrt(1.95 ** 2 + 1.95 ** 2 + 2.0 ** 2))


# --- find_guard_violation ---

def test_guard_passes_valid_fields():
    fields = [('length', 10.0), ('width', 5.0)]
    assert find_guard_violation(fields, 10.0, 5.0) is None


@pytest.mark.parametrize("bad", [0.0, -1.0, float('nan')])
def test_guard_rejects_non_positive(bad):
    fields = [('length', 10.0), ('slope_angle', bad), ('width', 5.0)]
    violation = find_guard_violation(fields, 10.0, 5.0)
    assert violation.reason is GuardFailure.NON_POSITIVE_FIELD
    assert violation.field_name == 'slope_angle'


def test_guard_reports_first_bad_field():
    fields = [('length', 0.0), ('width', -2.0)]
    violation = find_guard_violation(fields, 0.0, -2.0)
    assert violation.field_name == 'length'


def test_guard_rejects_width_over_length():
    violation = find_guard_violation([], 4.0, 10.0)
    assert violation.reason is GuardFailure.WIDTH_EXCEEDS_LENGTH
    assert violation.value == 10.0
    assert "exceeds length" in str(violation)


def test_guard_allows_square_plan():
    assert find_guard_violation([], 8.0, 8.0) is None


def test_positivity_checked_before_width():
    violation = find_guard_violation([('length', -1.0)], -1.0, 5.0)
    assert violation.reason is GuardFailure.NON_POSITIVE_FIELD


# --- solve_hip_roof ---

class TestSolveHipRoof:
    def test_default_roof(self):
        result = solve_hip_roof(10.0, 5.0, 45.0, 35.0)
        assert result.height == pytest.approx(2.5)
        assert result.ridge_length == pytest.approx(2.85926, abs=1e-4)
        assert result.hip_length == pytest.approx(5.02469, abs=1e-4)
        assert not result.is_pyramidal

    def test_pyramidal(self):
        result = solve_hip_roof(4.0, 3.9, 45.0, 10.0)
        assert result.ridge_length == 0.0
        assert result.is_pyramidal

    @pytest.mark.parametrize("slope, end_slope", [(90.0, 35.0), (45.0, 90.0), (120.0, 35.0)])
    def test_degenerate_angles_raise(self, slope, end_slope):
        with pytest.raises(DegenerateRoofError, match="below 90"):
            solve_hip_roof(10.0, 5.0, slope, end_slope)

    def test_non_finite_result_raises(self):
        with pytest.raises(DegenerateRoofError, match="Non-finite"):
            solve_hip_roof(float('inf'), 5.0, 45.0, 35.0)

    def test_degenerate_error_is_value_error(self):
        with pytest.raises(ValueError):
            solve_hip_roof(10.0, 5.0, 90.0, 35.0)

    @pytest.mark.parametrize("slope", [0.5, 15.0, 45.0, 75.0, 89.5])
    @pytest.mark.parametrize("end_slope", [0.5, 15.0, 45.0, 75.0, 89.5])
    def test_valid_inputs_give_finite_non_negative(self, slope, end_slope):
        for length, width in [(1.0, 0.1), (10.0, 5.0), (10.0, 10.0), (37.5, 12.0)]:
            result = solve_hip_roof(length, width, slope, end_slope)
            for _, value in result.fields():
                assert math.isfinite(value)
                assert value >= 0
            assert result.ridge_length <= length

    def test_shallow_end_slope_is_full_hip(self):
        assert solve_hip_roof(10.0, 5.0, 45.0, 0.1).ridge_length == 0.0


# --- compute_hip_roof ---

class TestComputeHipRoof:
    def test_returns_result(self, default_inputs):
        result = compute_hip_roof(default_inputs)
        assert isinstance(result, RoofResult)
        assert result == solve_hip_roof(10.0, 5.0, 45.0, 35.0)

    def test_width_over_length_returns_none(self):
        assert compute_hip_roof(RoofInputs(length=4.0, width=10.0)) is None

    def test_zero_input_returns_none(self):
        assert compute_hip_roof(RoofInputs(end_slope_angle=0.0)) is None

    def test_inputs_not_mutated(self, default_inputs):
        compute_hip_roof(default_inputs)
        assert default_inputs == RoofInputs()

    def test_degenerate_raises(self):
        with pytest.raises(DegenerateRoofError):
            compute_hip_roof(RoofInputs(slope_angle=90.0))

    def test_skip_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="superroofer")
        compute_hip_roof(RoofInputs(length=4.0, width=10.0))
        assert "Calculation skipped: width (10.0) exceeds length" in caplog.text

    def test_debug_config_logs_at_info(self, caplog, default_inputs):
        caplog.set_level(logging.INFO, logger="superroofer")
        compute_hip_roof(default_inputs, CalculatorConfig(debug=True))
        assert "HIP ROOF:" in caplog.text
        assert "ridge=2.859m" in caplog.text

    def test_pyramidal_noted_in_log(self, caplog):
        caplog.set_level(logging.DEBUG, logger="superroofer")
        compute_hip_roof(RoofInputs(length=4.0, width=3.9, end_slope_angle=10.0))
        assert "(pyramidal)" in caplog.text
