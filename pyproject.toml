[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "roverctl"
version = "0.1.0"
description = "Control logic for a small differential-drive rover: kinematics, PID, odometry, IMU, lidar and motor drive"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "rover", "kinematics", "pid", "odometry", "lidar", "imu"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["roverctl"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
