# roverctl

This package holds the control logic for a small two-wheeled rover. No hardware is bound in.
You pass hardware access in as plain callables or small backend objects. The same code can then run on a robot, in a simulator or in tests.

## Modules

- `roverctl.kinematics` converts body velocities into wheel RPMs, and wheel RPMs back into velocities.
  - `Kinematics` does the conversion. `get_rpm` gives wheel speeds for a command. `calculate_rpm` does the same without the base-specific handling. `get_velocities` gives body velocities from measured wheel speeds.
  - `Base` selects differential drive, skid steer or mecanum.
  - `total_wheels` gives the number of wheels for a base.
  - `Rpm` and `Velocities` hold the results.
  - A command beyond the motor limit is scaled down as a whole. Each wheel speed is then clamped to `max_rpm`.
- `roverctl.pid` provides a `PID` controller with a clamped output (`compute`, `update_constants`), plus `constrain`.
- `roverctl.odometry` does dead reckoning.
  - `Odometry.update` integrates velocities over a time step.
  - `Odometry.data` returns a copy of the latest `OdometryMessage`.
  - `euler_to_quat` returns a `Quaternion`.
- `roverctl.messages` defines message dataclasses: `Vector3`, `Quaternion`, `Stamp` (with `Stamp.from_millis`), `Header`, `OdometryMessage`, `ImuMessage` and `LaserScan`.
- `roverctl.imu` reads an MPU-6050 over an I2C device object. The object provides `read(register, length)` and `write_byte(register, value)`.
  - `Mpu6050.setup` wakes the sensor, calibrates it and returns its WHO_AM_I value.
  - `calibrate`, `read_accelerometer`, `read_gyroscope` and `imu_data` are also available.
  - `angles` gives roll, pitch and yaw from a complementary filter.
  - `decode_int16` decodes a big-endian register pair.
- `roverctl.lidar` handles a 360° serial laser sensor.
  - `parse_frame` fills a `LaserScan` from one 2520-byte frame and returns the sensor's rpm. It raises `ValueError` on a short frame or a frame with no valid block.
  - `scan_points` yields Cartesian points.
  - `LidarScanner` works over a port object with `read` and `write`. `start` starts the sensor. `poll` tries up to five reads for a full frame.
- `roverctl.motors` drives brushed H-bridge motors through a PWM backend.
  - `MotorDriver` provides `setup`, `forward`, `backward` and `stop`.
  - `rover_stop`, `rover_forward` and `rover_backward` act on both wheels.
  - `spin_left` and `spin_right` pick the direction from the sign of the duty cycle.
  - `Operator` names the two outputs of a timer.
- `roverctl.encoder` provides `RpmMeter`. It turns a running pulse count and a microsecond clock into wheel RPM.
- `roverctl.battery` provides `BatteryMonitor.is_low`. It compares the calibrated reading with a threshold (2000 mV by default). Without a calibration function the battery is never reported low.
- `roverctl.led` provides `Led`, a status LED driven through a level setter: `blink`, `turn_on`, `turn_off`.
- `roverctl.rover` provides `Rover`, which ties the parts together.
  - `on_twist` takes velocity commands.
  - `move_base` runs the wheel PIDs and updates odometry, then returns the left and right duty cycles. It stops the rover if no command arrived within `command_timeout_ms`, or if the battery is low.
  - `publish_data` passes the IMU and odometry messages, stamped, to a `publish(topic, message)` callable.
  - `control_step` does both.
  - `sync_time` and `stamp` map local time onto the agent's epoch.
  - `RoverConfig` holds geometry, limits and gains. `AgentState` names the connection states.

## Installation

```
pip install .
```

There are no runtime dependencies. The `test` extra installs pytest.

## Example

```python
from roverctl.kinematics import Base, Kinematics
from roverctl.pid import PID
from roverctl.odometry import Odometry

kin = Kinematics(Base.DIFFERENTIAL_DRIVE, 250, 0.95, 8.0, 8.4, 0.06, 0.104)
target = kin.get_rpm(0.3, 0.0, 0.0)

pid = PID(0, 100, 0.2, 0.136, 0.07)
duty = pid.compute(target.motor1, 0.0)

odom = Odometry()
odom.update(0.02, 0.3, 0.0, 0.0)
print(odom.data().position)
```

## What it does not do

- **No hardware drivers.** GPIO, PWM, I2C, serial and ADC access all come from the caller.
- **No messaging transport.** `Rover` never connects to a middleware agent and never receives commands by itself. `AgentState` is only a recorded state, with no connection loop behind it. You must call `control_step` on your own 20 ms timer (`CONTROL_PERIOD_MS`).
- **No command-line program.**