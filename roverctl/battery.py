"""Battery voltage supervision through a calibrated ADC channel."""

from __future__ import annotations

from typing import Callable, Optional

ADC_CHANNEL = 4
ADC_ATTEN_DB = 11
LOW_BATTERY_MV = 2000


class BatteryMonitor:
    """Reports a low battery when the calibrated reading falls to the threshold."""

    def __init__(
        self,
        read_raw: Callable[[], int],
        to_millivolts: Optional[Callable[[int], int]],
        threshold_mv: int = LOW_BATTERY_MV,
    ):
        self._read_raw = read_raw
        self._to_millivolts = to_millivolts
        self.threshold_mv = threshold_mv

    @property
    def calibrated(self) -> bool:
        """Whether a raw-to-millivolt conversion is available."""
        return self._to_millivolts is not None

    def is_low(self) -> bool:
        """Sample the channel; without calibration the battery is never reported low."""
        raw = self._read_raw()
        if self._to_millivolts is None:
            return False
        return self._to_millivolts(raw) <= self.threshold_mv