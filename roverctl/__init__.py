"""Hardware-independent rover control: kinematics, PID, odometry, sensors, motor drive and the control step."""

__version__ = "0.1.0"