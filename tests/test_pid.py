import pytest
from hypothesis import given
from hypothesis import strategies as st

from linobase.pid import PID


def test_proportional_only():
    pid = PID(-100, 100, 2, 0, 0)
    assert pid.compute(10, 4) == pytest.approx(12)


def test_output_clamped_to_max():
    pid = PID(-255, 255, 10, 0, 0)
    assert pid.compute(1000, 0) == 255


def test_output_clamped_to_min():
    pid = PID(-255, 255, 10, 0, 0)
    assert pid.compute(-1000, 0) == -255


@given(
    st.floats(min_value=-1e6, max_value=1e6),
    st.floats(min_value=-1e6, max_value=1e6),
)
def test_output_always_within_limits(setpoint, measured):
    pid = PID(-50, 50, 1.5, 0.3, 0.7)
    for _ in range(3):
        out = pid.compute(setpoint, measured)
        assert -50 <= out <= 50


def test_integral_accumulates():
    pid = PID(-100, 100, 0, 1, 0)
    first = pid.compute(1, 0)
    second = pid.compute(1, 0)
    assert second == pytest.approx(2 * first)


def test_integral_resets_when_stopped_at_zero():
    pid = PID(-100, 100, 0, 1, 0)
    pid.compute(5, 0)
    pid.compute(5, 0)
    assert pid.compute(0, 0) == 0


def test_integral_kept_when_setpoint_nonzero_and_error_zero():
    pid = PID(-100, 100, 0, 1, 0)
    accumulated = pid.compute(3, 0)
    assert pid.compute(3, 3) == pytest.approx(accumulated)


def test_derivative_acts_on_change_of_error():
    pid = PID(-100, 100, 0, 0, 1)
    first = pid.compute(5, 0)
    assert first == pytest.approx(5)
    assert pid.compute(5, 0) == 0


def test_update_constants_changes_gain():
    pid = PID(-100, 100, 1, 0, 0)
    low = pid.compute(10, 0)
    pid.update_constants(3, 0, 0)
    high = pid.compute(10, 0)
    assert high == pytest.approx(3 * low)
    assert (pid.kp, pid.ki, pid.kd) == (3, 0, 0)


def test_update_constants_keeps_integral():
    pid = PID(-100, 100, 0, 1, 0)
    pid.compute(4, 0)
    pid.update_constants(0, 2, 0)
    assert pid.compute(0, 0) == 0
    pid2 = PID(-100, 100, 0, 1, 0)
    before = pid2.compute(4, 0)
    pid2.update_constants(0, 2, 0)
    assert pid2.compute(4, 4) == pytest.approx(2 * before)