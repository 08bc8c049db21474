"""MPU-6050 inertial measurement unit: calibration, readings and attitude estimate."""

from __future__ import annotations

import copy
import logging
import math
import time
from typing import Callable, Protocol

from roverctl.messages import ImuMessage, Vector3

log = logging.getLogger(__name__)

SENSOR_ADDR = 0x68
WHO_AM_I_REG = 0x75
PWR_MGMT_1_REG = 0x6B
ACCEL_XOUT = 0x3B
ACCEL_YOUT = 0x3D
ACCEL_ZOUT = 0x3F
GYRO_XOUT = 0x43
GYRO_YOUT = 0x45
GYRO_ZOUT = 0x47

I2C_SCL_PIN = 22
I2C_SDA_PIN = 21
I2C_FREQ_HZ = 400_000

GYRO_LSB_PER_DPS = 131.0
ACCEL_LSB_PER_G = 16384.0
G_TO_ACCEL = 9.81
ACCEL_COVARIANCE = 0.00001
GYRO_COVARIANCE = 0.00001
CALIBRATION_SAMPLES = 80
FRAME_ID = "imu_link"

# Fixed offsets measured on the rover's sensor.
_ACC_ANGLE_X_OFFSET = -2.682687929
_ACC_ANGLE_Y_OFFSET = 6.097904643
_GYRO_OFFSETS = (0.8151635714, 2.063793857, 3.518060286)
_GYRO_WEIGHT = 0.96
_ACCEL_WEIGHT = 0.04
_COVARIANCE_DIAGONAL = (0, 4, 8)


class I2cDevice(Protocol):
    """Register access to a device on the I2C bus."""

    def read(self, register: int, length: int) -> bytes: ...

    def write_byte(self, register: int, value: int) -> None: ...


def decode_int16(high: int, low: int) -> int:
    """Signed 16-bit value from its big-endian byte pair."""
    value = ((high & 0xFF) << 8) | (low & 0xFF)
    return value - 0x10000 if value & 0x8000 else value


def _monotonic_us() -> int:
    return time.monotonic_ns() // 1000


def _tilt_degrees(along: float, other1: float, other2: float) -> float:
    return math.degrees(math.atan2(along, math.sqrt(other1**2 + other2**2)))


class Mpu6050:
    """Reads and calibrates an MPU-6050 and keeps the latest IMU message."""

    def __init__(self, bus: I2cDevice, clock_us: Callable[[], int] = _monotonic_us):
        self._bus = bus
        self._clock_us = clock_us
        self.gyro_error = Vector3()
        self.gyro_error_mean_z = 0.0
        self.acc_error_x = 0.0
        self.acc_error_y = 0.0
        self._gyro_angle_x = 0.0
        self._gyro_angle_y = 0.0
        self.yaw = 0.0
        self._current_time_us = 0.0
        self._msg = ImuMessage()

    def _read_word(self, register: int) -> int:
        data = self._bus.read(register, 2)
        if len(data) < 2:
            raise OSError(f"short read from register 0x{register:02X}")
        return decode_int16(data[0], data[1])

    def _raw_accel(self) -> tuple[float, float, float]:
        return tuple(self._read_word(reg) / ACCEL_LSB_PER_G for reg in (ACCEL_XOUT, ACCEL_YOUT, ACCEL_ZOUT))

    def _raw_gyro(self) -> tuple[int, int, int]:
        return tuple(self._read_word(reg) for reg in (GYRO_XOUT, GYRO_YOUT, GYRO_ZOUT))

    def setup(self) -> int:
        """Wake the sensor, calibrate it and return its WHO_AM_I value."""
        self._bus.write_byte(PWR_MGMT_1_REG, 0)
        who = self._bus.read(WHO_AM_I_REG, 1)
        if not who:
            raise OSError("no answer from WHO_AM_I register")
        log.info("WHO_AM_I = %X", who[0])
        self.calibrate()
        self._msg.header.frame_id = FRAME_ID
        return who[0]

    def calibrate(self, samples: int = CALIBRATION_SAMPLES) -> None:
        """Average the resting sensor output to find gyroscope and accelerometer errors."""
        if samples <= 0:
            raise ValueError(f"samples must be positive: {samples}")

        sums = [0.0, 0.0, 0.0]
        for _ in range(samples):
            for axis, raw in enumerate(self._raw_gyro()):
                sums[axis] += raw / GYRO_LSB_PER_DPS
        self.gyro_error = Vector3(*(s / samples for s in sums))

        mean_z = 0.0
        for _ in range(samples):
            mean_z += self.read_gyroscope().z - self.gyro_error.z
        self.gyro_error_mean_z = mean_z / samples

        acc_x = acc_y = 0.0
        for _ in range(samples):
            ax, ay, az = self._raw_accel()
            acc_x += _tilt_degrees(ay, ax, az)
            acc_y += _tilt_degrees(-ax, ay, az)
        self.acc_error_x = acc_x / samples
        self.acc_error_y = acc_y / samples

        log.info("AccErrorX: %f", self.acc_error_x)
        log.info("AccErrorY: %f", self.acc_error_y)
        log.info("GyroErrorX: %f", self.gyro_error.x)
        log.info("GyroErrorY: %f", self.gyro_error.y)
        log.info("GyroErrorZ: %f", self.gyro_error.z)

    def read_accelerometer(self) -> Vector3:
        """Linear acceleration in m/s^2."""
        ax, ay, az = self._raw_accel()
        return Vector3(ax * G_TO_ACCEL, ay * G_TO_ACCEL, az * G_TO_ACCEL)

    def read_gyroscope(self) -> Vector3:
        """Angular velocity in rad/s."""
        scale = (1.0 / GYRO_LSB_PER_DPS) * (math.pi / 180.0)
        gx, gy, gz = self._raw_gyro()
        return Vector3(gx * scale, gy * scale, gz * scale)

    def imu_data(self) -> ImuMessage:
        """A fresh IMU message with calibration and dead bands applied."""
        msg = self._msg
        vel = self.read_gyroscope()
        vel.x -= self.gyro_error.x
        vel.y -= self.gyro_error.y
        vel.z -= self.gyro_error.z - self.gyro_error_mean_z

        if -0.01 < vel.x < 0.01:
            vel.x = 0.0
        if -0.01 < vel.y < 0.01:
            vel.y = 0.0
        if 2 < vel.z < 3:
            vel.z = 0.0

        msg.angular_velocity = vel
        for i in _COVARIANCE_DIAGONAL:
            msg.angular_velocity_covariance[i] = GYRO_COVARIANCE

        msg.linear_acceleration = self.read_accelerometer()
        for i in _COVARIANCE_DIAGONAL:
            msg.linear_acceleration_covariance[i] = ACCEL_COVARIANCE

        return copy.deepcopy(msg)

    def angles(self) -> tuple[float, float, float]:
        """Roll, pitch and yaw in degrees from a complementary filter."""
        ax, ay, az = self._raw_accel()
        acc_angle_x = _tilt_degrees(ay, ax, az) + _ACC_ANGLE_X_OFFSET
        acc_angle_y = _tilt_degrees(-ax, ay, az) + _ACC_ANGLE_Y_OFFSET

        previous = self._current_time_us
        self._current_time_us = float(self._clock_us())
        elapsed_s = (self._current_time_us - previous) / 1_000_000

        gx, gy, gz = (
            raw / GYRO_LSB_PER_DPS + offset for raw, offset in zip(self._raw_gyro(), _GYRO_OFFSETS)
        )

        self._gyro_angle_x += gx * elapsed_s
        self._gyro_angle_y += gy * elapsed_s
        self.yaw += gz * elapsed_s
        roll = _GYRO_WEIGHT * self._gyro_angle_x + _ACCEL_WEIGHT * acc_angle_x
        pitch = _GYRO_WEIGHT * self._gyro_angle_y + _ACCEL_WEIGHT * acc_angle_y
        return roll, pitch, self.yaw