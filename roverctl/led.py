"""Status LED on a digital output line."""

from __future__ import annotations

import time
from typing import Callable

BLINK_GPIO = 27
BLINK_PERIOD_S = 1.0


class Led:
    """Drives a status LED through a level setter and a sleep function."""

    def __init__(self, set_level: Callable[[int], None], sleep: Callable[[float], None] = time.sleep):
        self._set_level = set_level
        self._sleep = sleep

    def blink(self, n_times: int) -> None:
        """Flash the LED n_times, one second on and one off, then pause a second."""
        for _ in range(n_times):
            self._set_level(1)
            self._sleep(BLINK_PERIOD_S)
            self._set_level(0)
            self._sleep(BLINK_PERIOD_S)
        self._sleep(BLINK_PERIOD_S)

    def turn_on(self) -> None:
        """Light the LED."""
        self._set_level(1)

    def turn_off(self) -> None:
        """Switch the LED off."""
        self._set_level(0)