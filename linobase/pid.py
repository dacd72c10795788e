"""A discrete PID controller with a clamped output."""

from __future__ import annotations


class PID:
    """PID controller whose output is clamped to ``[min_val, max_val]``."""

    def __init__(self, min_val: float, max_val: float, kp: float, ki: float, kd: float) -> None:
        self.min_val = min_val
        self.max_val = max_val
        self.kp = kp
        self.ki = ki
        self.kd = kd
        self._integral = 0.0
        self._derivative = 0.0
        self._prev_error = 0.0

    def compute(self, setpoint: float, measured_value: float) -> float:
        """Advance the controller one step and return its clamped output."""
        error = setpoint - measured_value
        self._integral += error
        self._derivative = error - self._prev_error

        if setpoint == 0 and error == 0:
            self._integral = 0.0

        output = self.kp * error + self.ki * self._integral + self.kd * self._derivative
        self._prev_error = error
        return min(max(output, self.min_val), self.max_val)

    def update_constants(self, kp: float, ki: float, kd: float) -> None:
        """Replace the three gains; the accumulated state is kept."""
        self.kp = kp
        self.ki = ki
        self.kd = kd