"""Wheel speed measurement from rising-edge encoder pulse counts."""

from __future__ import annotations

import math
import time
from typing import Callable

PCNT_HIGH_LIMIT = 1000
PCNT_LOW_LIMIT = -1000
MOTOR_A_ENCODER = 14
MOTOR_B_ENCODER = 25
GLITCH_FILTER_NS = 1000
COUNTS_PER_REV = 20

_MICROS_PER_MINUTE = 60_000_000


def _monotonic_us() -> int:
    return time.monotonic_ns() // 1000


class RpmMeter:
    """Turns a running pulse count into revolutions per minute."""

    def __init__(
        self,
        read_count: Callable[[], int],
        clock_us: Callable[[], int] = _monotonic_us,
        counts_per_rev: int = COUNTS_PER_REV,
    ):
        if counts_per_rev <= 0:
            raise ValueError(f"counts_per_rev must be positive: {counts_per_rev}")
        self._read_count = read_count
        self._clock_us = clock_us
        self.counts_per_rev = counts_per_rev
        self._prev_time_us = 0
        self._prev_ticks = 0

    def rpm(self) -> float:
        """Speed since the previous call, from the change in count over the elapsed time."""
        ticks = int(self._read_count())
        now = int(self._clock_us())
        minutes = (now - self._prev_time_us) / _MICROS_PER_MINUTE
        delta_ticks = ticks - self._prev_ticks

        self._prev_time_us = now
        self._prev_ticks = ticks

        revolutions = delta_ticks / self.counts_per_rev
        if minutes == 0:
            # No time has passed: follow floating-point division semantics.
            if revolutions == 0:
                return math.nan
            return math.copysign(math.inf, revolutions)
        return revolutions / minutes