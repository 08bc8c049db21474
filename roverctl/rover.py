"""Control loop of the rover base: velocity commands in, motor duty and telemetry out."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Protocol

from roverctl.kinematics import Base, Kinematics, Velocities
from roverctl.messages import Stamp
from roverctl.motors import LEFT_TIMER, RIGHT_TIMER, MotorDriver
from roverctl.odometry import Odometry
from roverctl.pid import PID

NODE_NAME = "linorobot_base_node"
TOPIC_ODOM = "agent0/odom/unfiltered"
TOPIC_IMU = "agent0/imu/data"
TOPIC_SCAN = "agent0/can"
TOPIC_CMD_VEL = "agent0/cmd_vel"
CONTROL_PERIOD_MS = 20


class AgentState(Enum):
    """Connection state with the middleware agent."""

    WAITING_AGENT = 0
    AGENT_AVAILABLE = 1
    AGENT_CONNECTED = 2
    AGENT_DISCONNECTED = 3


@dataclass(frozen=True)
class RoverConfig:
    """Drive geometry, motor limits and controller gains of the rover."""

    base: Base = Base.DIFFERENTIAL_DRIVE
    kp_left: float = 0.05 * 4
    ki_left: float = 0.034 * 4
    kd_left: float = 0.0175 * 4
    kp_right: float = 0.039 * 4
    ki_right: float = 0.03135 * 4
    kd_right: float = 0.0173 * 4
    pid_min: float = 0.0
    pid_max: float = 100.0
    motor_max_rpm: int = 250
    max_rpm_ratio: float = 0.95
    motor_operating_voltage: float = 8.0
    motor_power_max_voltage: float = 8.4
    motor_power_measured_voltage: float = 7.7
    wheel_diameter: float = 0.06
    lr_wheels_distance: float = 0.104
    command_timeout_ms: int = 1000


class _Meter(Protocol):
    def rpm(self) -> float: ...


class _Battery(Protocol):
    def is_low(self) -> bool: ...


class _Imu(Protocol):
    def imu_data(self) -> Any: ...


class _Led(Protocol):
    def turn_on(self) -> None: ...


def _monotonic_ms() -> int:
    return time.monotonic_ns() // 1_000_000


class Rover:
    """Ties kinematics, wheel PIDs, odometry and sensors into one control step."""

    def __init__(
        self,
        config: RoverConfig,
        motors: MotorDriver,
        left_meter: _Meter,
        right_meter: _Meter,
        battery: _Battery,
        imu: _Imu,
        led: _Led,
        publish: Callable[[str, Any], None],
        clock_ms: Callable[[], int] = _monotonic_ms,
    ):
        self.config = config
        self._motors = motors
        self._left_meter = left_meter
        self._right_meter = right_meter
        self._battery = battery
        self._imu = imu
        self._led = led
        self._publish = publish
        self._clock_ms = clock_ms

        self.kinematics = Kinematics(
            config.base,
            config.motor_max_rpm,
            config.max_rpm_ratio,
            config.motor_operating_voltage,
            config.motor_power_max_voltage,
            config.wheel_diameter,
            config.lr_wheels_distance,
        )
        self.left_pid = PID(config.pid_min, config.pid_max, config.kp_left, config.ki_left, config.kd_left)
        self.right_pid = PID(
            config.pid_min, config.pid_max, config.kp_right, config.ki_right, config.kd_right
        )
        self.odometry = Odometry()

        self.twist = Velocities()
        self.state = AgentState.WAITING_AGENT
        self.time_offset_ms = 0
        self._prev_cmd_time = 0
        self._prev_odom_update = 0

    def on_twist(self, linear_x: float, linear_y: float, angular_z: float) -> None:
        """Accept a velocity command and note when it arrived."""
        self.twist = Velocities(linear_x=linear_x, linear_y=linear_y, angular_z=angular_z)
        self._prev_cmd_time = int(self._clock_ms())

    def full_stop(self) -> None:
        """Drop the current command and stop both wheels."""
        self.twist = Velocities()
        self._motors.rover_stop(LEFT_TIMER, RIGHT_TIMER)

    def move_base(self) -> tuple[float, float]:
        """Drive the wheels toward the commanded speed and update odometry.

        Returns the duty cycles sent to the left and right wheels.
        """
        if int(self._clock_ms()) - self._prev_cmd_time >= self.config.command_timeout_ms:
            self.twist = Velocities()

        if self._battery.is_low():
            self.full_stop()
            self._led.turn_on()

        req = self.kinematics.get_rpm(self.twist.linear_x, self.twist.linear_y, self.twist.angular_z)

        current_rpm1 = self._left_meter.rpm()
        current_rpm2 = self._right_meter.rpm()

        duty_left = self.left_pid.compute(req.motor1, current_rpm1)
        duty_right = self.right_pid.compute(req.motor2, current_rpm2)

        self._motors.spin_left(LEFT_TIMER, duty_left)
        self._motors.spin_right(RIGHT_TIMER, duty_right)

        vel = self.kinematics.get_velocities(current_rpm1, current_rpm2, 0.0, 0.0)

        now = int(self._clock_ms())
        vel_dt = (now - self._prev_odom_update) / 1000.0
        self._prev_odom_update = now

        self.odometry.update(vel_dt, vel.linear_x, vel.linear_y, vel.angular_z)
        return duty_left, duty_right

    def publish_data(self) -> None:
        """Publish the IMU reading and the odometry estimate with a common time stamp."""
        odom_msg = self.odometry.data()
        imu_msg = self._imu.imu_data()

        stamp = self.stamp()
        odom_msg.header.stamp = Stamp(stamp.sec, stamp.nanosec)
        imu_msg.header.stamp = Stamp(stamp.sec, stamp.nanosec)

        self._publish(TOPIC_IMU, imu_msg)
        self._publish(TOPIC_ODOM, odom_msg)

    def control_step(self) -> None:
        """One tick of the control timer."""
        self.move_base()
        self.publish_data()

    def sync_time(self, agent_epoch_ms: int) -> None:
        """Record the offset between the agent's epoch time and the local clock."""
        self.time_offset_ms = int(agent_epoch_ms) - int(self._clock_ms())

    def stamp(self) -> Stamp:
        """Current time in the agent's epoch."""
        return Stamp.from_millis(int(self._clock_ms()) + self.time_offset_ms)