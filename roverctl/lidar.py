"""Laser distance sensor: frame decoding and polling over a serial port."""

from __future__ import annotations

import logging
import math
from typing import Iterator, Protocol

from roverctl.messages import SCAN_POINTS, LaserScan

log = logging.getLogger(__name__)

BAUD_RATE = 230400
TX_PIN = 17
RX_PIN = 16

FRAME_SIZE = 2520
BLOCK_SIZE = 42
BLOCKS = FRAME_SIZE // BLOCK_SIZE
READINGS_PER_BLOCK = 6
READING_SIZE = 6
SYNC_BYTE = 0xFA
BLOCK_INDEX_BASE = 0xA0

START_COMMAND = b"b"
STOP_COMMAND = b"e"
MAX_ATTEMPTS = 5

RANGE_MIN = 0.12
RANGE_MAX = 3.5
FRAME_ID = "laser"


class SerialPort(Protocol):
    """Byte stream to and from the sensor."""

    def read(self, size: int) -> bytes: ...

    def write(self, data: bytes) -> int: ...


def _check_frame(frame: bytes) -> None:
    if len(frame) < FRAME_SIZE:
        raise ValueError(f"frame too short: {len(frame)} bytes, need {FRAME_SIZE}")


def _valid_blocks(frame: bytes) -> Iterator[tuple[int, bytes]]:
    for number in range(BLOCKS):
        start = number * BLOCK_SIZE
        block = frame[start : start + BLOCK_SIZE]
        if block[0] == SYNC_BYTE and block[1] == BLOCK_INDEX_BASE + number:
            yield number, block


def _readings(number: int, block: bytes) -> Iterator[tuple[int, int, int]]:
    """Yield (angle index, range in mm, intensity) for each reading of a block."""
    for r in range(READINGS_PER_BLOCK):
        offset = 4 + r * READING_SIZE
        intensity = block[offset] | (block[offset + 1] << 8)
        distance = block[offset + 2] | (block[offset + 3] << 8)
        yield READINGS_PER_BLOCK * number + r, distance, intensity


def parse_frame(frame: bytes, scan: LaserScan) -> int:
    """Fill a scan from one full frame and return the sensor's rotation speed in rpm."""
    _check_frame(frame)
    blocks = list(_valid_blocks(frame))
    if not blocks:
        raise ValueError("frame holds no valid block")

    scan.angle_increment = 2.0 * math.pi / 360.0
    scan.angle_min = 0.0
    scan.angle_max = 2.0 * math.pi - scan.angle_increment
    scan.range_min = RANGE_MIN
    scan.range_max = RANGE_MAX

    motor_speed = 0
    for number, block in blocks:
        motor_speed += block[2] | (block[3] << 8)
        for index, distance, intensity in _readings(number, block):
            slot = SCAN_POINTS - 1 - index
            scan.ranges[slot] = distance / 1000.0
            scan.intensities[slot] = float(intensity)

    rpm = (motor_speed // len(blocks) // 10) & 0xFFFF
    scan.time_increment = math.inf if rpm == 0 else 1.0 / (rpm * 6)
    scan.scan_time = scan.time_increment * 360
    return rpm


def scan_points(frame: bytes) -> Iterator[tuple[float, float]]:
    """Cartesian (x, y) points in mm for every non-zero reading away from angle zero."""
    _check_frame(frame)
    for number, block in _valid_blocks(frame):
        for degrees, distance, _ in _readings(number, block):
            if degrees != 0 and distance != 0:
                radians = math.radians(degrees)
                yield distance * math.cos(radians), distance * math.sin(radians)


class LidarScanner:
    """Requests and decodes scans from the sensor on a serial port."""

    def __init__(self, port: SerialPort):
        self._port = port
        self.successful_scans = 0
        self.resets = 0
        self.rpm = 0

    def start(self) -> None:
        """Tell the sensor to start sending data."""
        self._port.write(START_COMMAND)
        log.info("%s, this to start sending data from lidar", START_COMMAND.decode())

    def poll(self, scan: LaserScan) -> bool:
        """Try a few reads for a full frame; fill the scan and return whether one arrived."""
        self._port.write(START_COMMAND)
        for _ in range(MAX_ATTEMPTS):
            data = self._port.read(FRAME_SIZE)
            if (
                len(data) >= FRAME_SIZE
                and data[0] == SYNC_BYTE
                and data[1] == BLOCK_INDEX_BASE
            ):
                self.rpm = parse_frame(data, scan)
                scan.header.frame_id = FRAME_ID
                self.successful_scans += 1
                return True
        self.resets += 1
        log.info(
            "Number of resets of lidar: %d Current value of conversions: %d",
            self.resets,
            self.successful_scans,
        )
        return False