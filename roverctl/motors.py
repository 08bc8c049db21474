"""Brushed DC motor control through a two-operator PWM timer per wheel."""

from __future__ import annotations

from enum import Enum
from typing import Protocol

LEFT_WHEEL_R = 15
LEFT_WHEEL_B = 4
RIGHT_WHEEL_R = 19
RIGHT_WHEEL_B = 18

LEFT_TIMER = 0
RIGHT_TIMER = 1
PWM_FREQUENCY_HZ = 500


class Operator(Enum):
    """The two PWM outputs of one timer; each drives one side of an H-bridge."""

    A = "A"
    B = "B"


class PwmBackend(Protocol):
    """Hardware interface the motor driver talks to."""

    def bind_pin(self, timer: int, operator: Operator, pin: int) -> None: ...

    def configure_timer(self, timer: int, frequency: int) -> None: ...

    def set_signal_low(self, timer: int, operator: Operator) -> None: ...

    def set_duty(self, timer: int, operator: Operator, duty_cycle: float) -> None: ...


_PIN_MAP = (
    (LEFT_TIMER, Operator.A, LEFT_WHEEL_R),
    (LEFT_TIMER, Operator.B, LEFT_WHEEL_B),
    (RIGHT_TIMER, Operator.A, RIGHT_WHEEL_R),
    (RIGHT_TIMER, Operator.B, RIGHT_WHEEL_B),
)


class MotorDriver:
    """Drives the rover's wheels; duty cycles are percentages."""

    def __init__(self, backend: PwmBackend):
        self._backend = backend

    def setup(self) -> None:
        """Bind the wheel pins and start both timers at zero duty."""
        for timer, operator, pin in _PIN_MAP:
            self._backend.bind_pin(timer, operator, pin)
        for timer in (LEFT_TIMER, RIGHT_TIMER):
            self._backend.configure_timer(timer, PWM_FREQUENCY_HZ)

    def forward(self, timer: int, duty_cycle: float) -> None:
        """Turn one motor forward at the given duty cycle."""
        self._backend.set_signal_low(timer, Operator.B)
        self._backend.set_duty(timer, Operator.A, duty_cycle)

    def backward(self, timer: int, duty_cycle: float) -> None:
        """Turn one motor backward at the given duty cycle."""
        self._backend.set_signal_low(timer, Operator.A)
        self._backend.set_duty(timer, Operator.B, duty_cycle)

    def stop(self, timer: int) -> None:
        """Pull both outputs of one motor low."""
        self._backend.set_signal_low(timer, Operator.A)
        self._backend.set_signal_low(timer, Operator.B)

    def rover_stop(self, left_timer: int, right_timer: int) -> None:
        """Stop both wheels."""
        self.stop(left_timer)
        self.stop(right_timer)

    def rover_forward(self, left_timer: int, left_duty: float, right_timer: int, right_duty: float) -> None:
        """Drive the rover forward; the right motor is mounted mirrored."""
        self.forward(left_timer, left_duty)
        self.backward(right_timer, right_duty)

    def rover_backward(self, left_timer: int, left_duty: float, right_timer: int, right_duty: float) -> None:
        """Drive the rover backward; the right motor is mounted mirrored."""
        self.backward(left_timer, left_duty)
        self.forward(right_timer, right_duty)

    def spin_left(self, timer: int, duty_cycle: float) -> None:
        """Run the left wheel in the direction given by the sign of the duty cycle."""
        if duty_cycle > 0:
            self.forward(timer, duty_cycle)
        elif duty_cycle < 0:
            self.backward(timer, abs(duty_cycle))
        else:
            self.stop(timer)

    def spin_right(self, timer: int, duty_cycle: float) -> None:
        """Run the mirrored right wheel in the direction given by the sign of the duty cycle."""
        if duty_cycle > 0:
            self.backward(timer, duty_cycle)
        elif duty_cycle < 0:
            self.forward(timer, abs(duty_cycle))
        else:
            self.stop(timer)