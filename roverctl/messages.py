"""Plain message types published by the rover: odometry, IMU and laser scans."""

from __future__ import annotations

from dataclasses import dataclass, field

SCAN_POINTS = 360
POSE_COVARIANCE_SIZE = 36
IMU_COVARIANCE_SIZE = 9


@dataclass
class Vector3:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Quaternion:
    """An orientation quaternion."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0


@dataclass
class Stamp:
    """A time stamp split into whole seconds and nanoseconds."""

    sec: int = 0
    nanosec: int = 0

    @classmethod
    def from_millis(cls, millis: int) -> "Stamp":
        """Build a stamp from a count of milliseconds."""
        millis = int(millis)
        if millis < 0:
            raise ValueError(f"time stamp must not be negative: {millis}")
        seconds, rest = divmod(millis, 1000)
        return cls(sec=seconds, nanosec=rest * 1_000_000)


@dataclass
class Header:
    """Frame name and time stamp carried by every message."""

    frame_id: str = ""
    stamp: Stamp = field(default_factory=Stamp)


def _zeros(n: int) -> list[float]:
    return [0.0] * n


@dataclass
class OdometryMessage:
    """Estimated pose and twist of the robot base."""

    header: Header = field(default_factory=Header)
    child_frame_id: str = ""
    position: Vector3 = field(default_factory=Vector3)
    orientation: Quaternion = field(default_factory=Quaternion)
    pose_covariance: list[float] = field(default_factory=lambda: _zeros(POSE_COVARIANCE_SIZE))
    linear: Vector3 = field(default_factory=Vector3)
    angular: Vector3 = field(default_factory=Vector3)
    twist_covariance: list[float] = field(default_factory=lambda: _zeros(POSE_COVARIANCE_SIZE))


@dataclass
class ImuMessage:
    """Inertial measurement: orientation, angular velocity and acceleration."""

    header: Header = field(default_factory=Header)
    orientation: Quaternion = field(default_factory=Quaternion)
    orientation_covariance: list[float] = field(default_factory=lambda: _zeros(IMU_COVARIANCE_SIZE))
    angular_velocity: Vector3 = field(default_factory=Vector3)
    angular_velocity_covariance: list[float] = field(
        default_factory=lambda: _zeros(IMU_COVARIANCE_SIZE)
    )
    linear_acceleration: Vector3 = field(default_factory=Vector3)
    linear_acceleration_covariance: list[float] = field(
        default_factory=lambda: _zeros(IMU_COVARIANCE_SIZE)
    )


@dataclass
class LaserScan:
    """One full revolution of the laser range finder."""

    header: Header = field(default_factory=Header)
    angle_min: float = 0.0
    angle_max: float = 0.0
    angle_increment: float = 0.0
    time_increment: float = 0.0
    scan_time: float = 0.0
    range_min: float = 0.0
    range_max: float = 0.0
    ranges: list[float] = field(default_factory=lambda: _zeros(SCAN_POINTS))
    intensities: list[float] = field(default_factory=lambda: _zeros(SCAN_POINTS))