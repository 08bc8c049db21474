"""Dead-reckoning odometry from body velocities."""

from __future__ import annotations

import copy
import math

from roverctl.messages import Header, OdometryMessage, Quaternion, Vector3

POSE_COVARIANCE = 0.05
TWIST_COVARIANCE = 0.0001
_COVARIANCE_DIAGONAL = (0, 7, 35)


def euler_to_quat(roll: float, pitch: float, yaw: float) -> Quaternion:
    """Quaternion for the given roll, pitch and yaw in radians."""
    cy, sy = math.cos(yaw * 0.5), math.sin(yaw * 0.5)
    cp, sp = math.cos(pitch * 0.5), math.sin(pitch * 0.5)
    cr, sr = math.cos(roll * 0.5), math.sin(roll * 0.5)
    return Quaternion(
        w=cy * cp * cr + sy * sp * sr,
        x=cy * cp * sr - sy * sp * cr,
        y=sy * cp * sr + cy * sp * cr,
        z=sy * cp * cr - cy * sp * sr,
    )


class Odometry:
    """Integrates velocities into a pose and keeps the latest odometry message."""

    def __init__(self):
        self.x_pos = 0.0
        self.y_pos = 0.0
        self.heading = 0.0
        self._msg = OdometryMessage(header=Header(frame_id="odom"), child_frame_id="base_footprint")

    def update(self, vel_dt: float, linear_vel_x: float, linear_vel_y: float, angular_vel_z: float) -> None:
        """Advance the pose by the given velocities over vel_dt seconds."""
        delta_heading = angular_vel_z * vel_dt
        cos_h = math.cos(self.heading)
        sin_h = math.sin(self.heading)
        delta_x = (linear_vel_x * cos_h - linear_vel_y * sin_h) * vel_dt
        delta_y = (linear_vel_x * sin_h + linear_vel_y * cos_h) * vel_dt

        self.x_pos += delta_x
        self.y_pos += delta_y
        self.heading += delta_heading

        msg = self._msg
        msg.position = Vector3(self.x_pos, self.y_pos, 0.0)
        msg.orientation = euler_to_quat(0.0, 0.0, self.heading)
        for i in _COVARIANCE_DIAGONAL:
            msg.pose_covariance[i] = POSE_COVARIANCE
        msg.linear = Vector3(linear_vel_x, linear_vel_y, 0.0)
        msg.angular = Vector3(0.0, 0.0, angular_vel_z)
        for i in _COVARIANCE_DIAGONAL:
            msg.twist_covariance[i] = TWIST_COVARIANCE

    def data(self) -> OdometryMessage:
        """A copy of the latest odometry message."""
        return copy.deepcopy(self._msg)