"""Conversion between body velocities and wheel speeds for the supported bases."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class Base(Enum):
    """Drive layout of the robot base."""

    DIFFERENTIAL_DRIVE = 0
    SKID_STEER = 1
    MECANUM = 2


@dataclass
class Rpm:
    """Target speed of each motor in revolutions per minute."""

    motor1: float = 0.0
    motor2: float = 0.0
    motor3: float = 0.0
    motor4: float = 0.0


@dataclass
class Velocities:
    """Body velocities: linear in m/s, angular in rad/s."""

    linear_x: float = 0.0
    linear_y: float = 0.0
    angular_z: float = 0.0


def total_wheels(base: Base) -> int:
    """Number of driven wheels for a base layout."""
    if base is Base.DIFFERENTIAL_DRIVE:
        return 2
    if base in (Base.SKID_STEER, Base.MECANUM):
        return 4
    return 2


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if value > high:
        return high
    return value


class Kinematics:
    """Forward and inverse kinematics of a wheeled base."""

    def __init__(
        self,
        base,
        motor_max_rpm,
        max_rpm_ratio,
        motor_operating_voltage,
        motor_power_max_voltage,
        wheel_diameter,
        wheels_y_distance,
    ):
        self.base = Base(base)
        self.wheels_y_distance = float(wheels_y_distance)
        self.wheel_circumference = math.pi * wheel_diameter
        self.total_wheels = total_wheels(self.base)
        supply = _clamp(motor_power_max_voltage, 0.0, motor_operating_voltage)
        self.max_rpm = (supply / motor_operating_voltage) * motor_max_rpm * max_rpm_ratio

    def calculate_rpm(self, linear_x: float, linear_y: float, angular_z: float) -> Rpm:
        """Wheel speeds for the requested body velocities, scaled and clamped to the limit."""
        tangential_vel = angular_z * (self.wheels_y_distance / 2.0)

        x_rpm = linear_x * 60.0 / self.wheel_circumference
        y_rpm = linear_y * 60.0 / self.wheel_circumference
        tan_rpm = tangential_vel * 60.0 / self.wheel_circumference

        xy_sum = abs(x_rpm) + abs(y_rpm)
        xtan_sum = abs(x_rpm) + abs(tan_rpm)

        # Scale the whole motion down rather than distort it when it exceeds the limit.
        if xy_sum >= self.max_rpm and angular_z == 0:
            scaler = self.max_rpm / xy_sum
            x_rpm *= scaler
            y_rpm *= scaler
        elif xtan_sum >= self.max_rpm and linear_y == 0:
            scaler = self.max_rpm / xtan_sum
            x_rpm *= scaler
            tan_rpm *= scaler

        limit = self.max_rpm
        return Rpm(
            motor1=_clamp(x_rpm - y_rpm - tan_rpm, -limit, limit),
            motor2=_clamp(x_rpm + y_rpm + tan_rpm, -limit, limit),
            motor3=_clamp(x_rpm + y_rpm - tan_rpm, -limit, limit),
            motor4=_clamp(x_rpm - y_rpm + tan_rpm, -limit, limit),
        )

    def get_rpm(self, linear_x: float, linear_y: float, angular_z: float) -> Rpm:
        """Wheel speeds for the base; non-holonomic bases ignore sideways motion."""
        if self.base in (Base.DIFFERENTIAL_DRIVE, Base.SKID_STEER):
            linear_y = 0.0
        return self.calculate_rpm(linear_x, linear_y, angular_z)

    def get_velocities(self, rpm1: float, rpm2: float, rpm3: float, rpm4: float) -> Velocities:
        """Body velocities from measured wheel speeds."""
        if self.base is Base.DIFFERENTIAL_DRIVE:
            rpm3 = 0.0
            rpm4 = 0.0

        wheels = self.total_wheels
        average_rps_x = ((rpm1 + rpm2 + rpm3 + rpm4) / wheels) / 60.0
        linear_x = average_rps_x * self.wheel_circumference

        if self.base is Base.MECANUM:
            average_rps_y = ((-rpm1 + rpm2 + rpm3 - rpm4) / wheels) / 60.0
            linear_y = average_rps_y * self.wheel_circumference
        else:
            linear_y = 0.0

        average_rps_a = ((-rpm1 + rpm2 - rpm3 + rpm4) / wheels) / 60.0
        angular_z = (average_rps_a * self.wheel_circumference) / (self.wheels_y_distance / 2.0)

        return Velocities(linear_x=linear_x, linear_y=linear_y, angular_z=angular_z)