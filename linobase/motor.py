"""DC motor control through an H-bridge, with speed measured from encoder ticks."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Optional

_ULONG_MODULUS = 2**32
_MS_PER_MINUTE = 60_000


def _millis() -> int:
    return (time.monotonic_ns() // 1_000_000) % _ULONG_MODULUS


class MotorDriver(Enum):
    """The H-bridge a motor is wired through."""

    L298 = "L298"
    BTS7960 = "BTS7960"


class PinOutput(ABC):
    """The pins a motor drives."""

    @abstractmethod
    def set_output(self, pin: int) -> None:
        """Configure ``pin`` as an output."""

    @abstractmethod
    def digital_write(self, pin: int, high: bool) -> None:
        """Drive ``pin`` high or low."""

    @abstractmethod
    def analog_write(self, pin: int, value: int) -> None:
        """Drive ``pin`` with a PWM duty of ``value``."""


class Motor:
    """A motor driven by an L298 (with ``pwm_pin``) or a BTS7960 (without).

    ``clock`` returns milliseconds as an unsigned 32-bit counter; it defaults
    to a monotonic clock.
    """

    def __init__(
        self,
        output: PinOutput,
        motor_pin_a: int,
        motor_pin_b: int,
        pwm_pin: Optional[int] = None,
        *,
        counts_per_rev: int,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        if counts_per_rev == 0:
            raise ValueError("counts_per_rev must not be zero")
        self.output = output
        self.motor_pin_a = motor_pin_a
        self.motor_pin_b = motor_pin_b
        self.pwm_pin = pwm_pin
        self.counts_per_rev = counts_per_rev
        self.driver = MotorDriver.BTS7960 if pwm_pin is None else MotorDriver.L298
        self._clock = clock if clock is not None else _millis
        self.rpm = 0
        self._prev_encoder_ticks = 0
        self._prev_update_time = 0

        if pwm_pin is not None:
            output.set_output(pwm_pin)
        output.set_output(motor_pin_a)
        output.set_output(motor_pin_b)

    def update_speed(self, encoder_ticks: int) -> int:
        """Recompute ``rpm`` from the ticks seen since the last call and return it.

        Raises ``ZeroDivisionError`` when no time has passed since the last call.
        """
        current_time = self._clock() % _ULONG_MODULUS
        dt = (current_time - self._prev_update_time) % _ULONG_MODULUS
        dt_minutes = dt / _MS_PER_MINUTE
        delta_ticks = float(encoder_ticks - self._prev_encoder_ticks)
        self.rpm = int((delta_ticks / self.counts_per_rev) / dt_minutes)
        self._prev_update_time = current_time
        self._prev_encoder_ticks = encoder_ticks
        return self.rpm

    def spin(self, pwm: int) -> None:
        """Drive the motor; the sign of ``pwm`` picks the direction."""
        duty = abs(pwm)
        if self.driver is MotorDriver.L298:
            if pwm > 0:
                self.output.digital_write(self.motor_pin_a, True)
                self.output.digital_write(self.motor_pin_b, False)
            elif pwm < 0:
                self.output.digital_write(self.motor_pin_a, False)
                self.output.digital_write(self.motor_pin_b, True)
            assert self.pwm_pin is not None
            self.output.analog_write(self.pwm_pin, duty)
        elif pwm > 0:
            self.output.analog_write(self.motor_pin_a, 0)
            self.output.analog_write(self.motor_pin_b, duty)
        elif pwm < 0:
            self.output.analog_write(self.motor_pin_b, 0)
            self.output.analog_write(self.motor_pin_a, duty)
        else:
            self.output.analog_write(self.motor_pin_b, 0)
            self.output.analog_write(self.motor_pin_a, 0)