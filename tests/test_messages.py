import pytest

from roverctl.messages import (
    Header,
    ImuMessage,
    LaserScan,
    OdometryMessage,
    Quaternion,
    Stamp,
    Vector3,
)


def test_stamp_from_millis_splits_seconds_and_nanoseconds():
    stamp = Stamp.from_millis(1500)
    assert stamp.sec == 1
    assert stamp.nanosec == 500_000_000


def test_stamp_from_zero_millis():
    assert Stamp.from_millis(0) == Stamp(0, 0)


@pytest.mark.parametrize("millis", [1, 999, 1000, 123456789])
def test_stamp_round_trip(millis):
    stamp = Stamp.from_millis(millis)
    assert stamp.sec * 1000 + stamp.nanosec // 1_000_000 == millis
    assert 0 <= stamp.nanosec < 1_000_000_000


def test_stamp_rejects_negative_time():
    with pytest.raises(ValueError):
        Stamp.from_millis(-1)


def test_laser_scan_holds_one_value_per_degree():
    scan = LaserScan()
    assert len(scan.ranges) == 360
    assert len(scan.intensities) == 360


def test_laser_scans_do_not_share_buffers():
    first, second = LaserScan(), LaserScan()
    first.ranges[0] = 1.5
    assert second.ranges[0] == 0.0


def test_covariance_sizes():
    odom = OdometryMessage()
    imu = ImuMessage()
    assert len(odom.pose_covariance) == 36
    assert len(odom.twist_covariance) == 36
    assert len(imu.angular_velocity_covariance) == 9
    assert len(imu.linear_acceleration_covariance) == 9


def test_defaults_are_zeroed():
    assert Vector3() == Vector3(0.0, 0.0, 0.0)
    assert Quaternion() == Quaternion(0.0, 0.0, 0.0, 0.0)
    assert Header().frame_id == ""
    assert Header().stamp == Stamp(0, 0)