import pytest
from hypothesis import given
from hypothesis import strategies as st

from linobase.motor import Motor, MotorDriver, PinOutput


class RecordingOutput(PinOutput):
    def __init__(self):
        self.events = []

    def set_output(self, pin):
        self.events.append(("mode", pin))

    def digital_write(self, pin, high):
        self.events.append(("digital", pin, high))

    def analog_write(self, pin, value):
        self.events.append(("analog", pin, value))


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


def make_l298(clock=None, cpr=100):
    out = RecordingOutput()
    motor = Motor(out, 4, 5, 3, counts_per_rev=cpr, clock=clock or FakeClock())
    return motor, out


def make_bts(clock=None, cpr=100):
    out = RecordingOutput()
    motor = Motor(out, 4, 5, counts_per_rev=cpr, clock=clock or FakeClock())
    return motor, out


def test_driver_selected_by_pwm_pin():
    l298, _ = make_l298()
    bts, _ = make_bts()
    assert l298.driver is MotorDriver.L298
    assert bts.driver is MotorDriver.BTS7960


def test_constructor_configures_outputs():
    _, out = make_l298()
    assert out.events == [("mode", 3), ("mode", 4), ("mode", 5)]
    _, out = make_bts()
    assert out.events == [("mode", 4), ("mode", 5)]


def test_zero_counts_per_rev_rejected():
    with pytest.raises(ValueError):
        Motor(RecordingOutput(), 1, 2, counts_per_rev=0)


def test_l298_forward():
    motor, out = make_l298()
    out.events.clear()
    motor.spin(120)
    assert out.events == [("digital", 4, True), ("digital", 5, False), ("analog", 3, 120)]


def test_l298_reverse():
    motor, out = make_l298()
    out.events.clear()
    motor.spin(-80)
    assert out.events == [("digital", 4, False), ("digital", 5, True), ("analog", 3, 80)]


def test_l298_zero_leaves_direction_pins():
    motor, out = make_l298()
    out.events.clear()
    motor.spin(0)
    assert out.events == [("analog", 3, 0)]


def test_bts_forward():
    motor, out = make_bts()
    out.events.clear()
    motor.spin(200)
    assert out.events == [("analog", 4, 0), ("analog", 5, 200)]


def test_bts_reverse():
    motor, out = make_bts()
    out.events.clear()
    motor.spin(-200)
    assert out.events == [("analog", 5, 0), ("analog", 4, 200)]


def test_bts_stop():
    motor, out = make_bts()
    out.events.clear()
    motor.spin(0)
    assert out.events == [("analog", 5, 0), ("analog", 4, 0)]


@given(st.integers(min_value=-255, max_value=255))
def test_duty_is_magnitude(pwm):
    motor, out = make_l298()
    out.events.clear()
    motor.spin(pwm)
    assert out.events[-1] == ("analog", 3, abs(pwm))


def test_one_revolution_per_minute():
    clock = FakeClock()
    motor, _ = make_l298(clock=clock, cpr=100)
    clock.now = 60_000
    assert motor.update_speed(100) == 1
    assert motor.rpm == 1


def test_speed_uses_deltas():
    clock = FakeClock()
    motor, _ = make_l298(clock=clock, cpr=100)
    clock.now = 60_000
    motor.update_speed(100)
    clock.now = 120_000
    assert motor.update_speed(100) == 0
    clock.now = 180_000
    assert motor.update_speed(0) == -1


@given(
    st.integers(min_value=-10**6, max_value=10**6),
    st.integers(min_value=1, max_value=10**6),
)
def test_rpm_sign_follows_ticks(ticks, dt):
    clock = FakeClock()
    motor, _ = make_bts(clock=clock, cpr=360)
    clock.now = dt
    rpm = motor.update_speed(ticks)
    assert rpm * ticks >= 0
    assert abs(rpm) <= abs(ticks) / 360 * 60_000 / dt + 1


def test_clock_wraparound():
    clock = FakeClock(2**32 - 30_000)
    motor, _ = make_l298(clock=clock, cpr=100)
    motor.update_speed(0)
    clock.now = 30_000
    assert motor.update_speed(100) == 1


def test_no_elapsed_time_raises():
    motor, _ = make_l298(clock=FakeClock(0))
    with pytest.raises(ZeroDivisionError):
        motor.update_speed(10)