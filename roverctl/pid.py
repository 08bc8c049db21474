"""Discrete PID controller with output limits."""

from __future__ import annotations


def constrain(value: float, min_val: float, max_val: float) -> float:
    """Limit a value to the closed range [min_val, max_val]."""
    if value < min_val:
        return min_val
    if value > max_val:
        return max_val
    return value


class PID:
    """A PID controller whose output is clamped to [min_val, max_val]."""

    def __init__(self, min_val, max_val, kp, ki, kd):
        self.min_val = min_val
        self.max_val = max_val
        self.kp = kp
        self.ki = ki
        self.kd = kd
        self.integral = 0.0
        self.derivative = 0.0
        self.prev_error = 0.0

    def compute(self, setpoint: float, measured_value: float) -> float:
        """Run one control step and return the clamped output."""
        error = setpoint - measured_value
        self.integral += error
        self.derivative = error - self.prev_error

        if setpoint == 0 and error == 0:
            self.integral = 0.0
            self.derivative = 0.0

        output = self.kp * error + self.ki * self.integral + self.kd * self.derivative
        self.prev_error = error
        return constrain(output, self.min_val, self.max_val)

    def update_constants(self, kp, ki, kd) -> None:
        """Replace the three gains."""
        self.kp = kp
        self.ki = ki
        self.kd = kd