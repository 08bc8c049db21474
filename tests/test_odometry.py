import math

import pytest

from roverctl.odometry import Odometry, euler_to_quat


def test_identity_quaternion():
    q = euler_to_quat(0.0, 0.0, 0.0)
    assert (q.w, q.x, q.y, q.z) == pytest.approx((1.0, 0.0, 0.0, 0.0))


@pytest.mark.parametrize("angles", [(0.1, 0.2, 0.3), (-1.0, 0.5, 2.0), (3.0, -2.0, 1.0)])
def test_quaternion_is_unit(angles):
    q = euler_to_quat(*angles)
    assert q.w**2 + q.x**2 + q.y**2 + q.z**2 == pytest.approx(1.0)


def test_half_turn_yaw():
    q = euler_to_quat(0.0, 0.0, math.pi)
    assert q.w == pytest.approx(0.0, abs=1e-12)
    assert q.z == pytest.approx(1.0)


def test_initial_message_frames():
    msg = Odometry().data()
    assert msg.header.frame_id == "odom"
    assert msg.child_frame_id == "base_footprint"


def test_straight_motion_advances_x():
    odo = Odometry()
    odo.update(2.0, 0.5, 0.0, 0.0)
    msg = odo.data()
    assert msg.position.x == pytest.approx(0.5 * 2.0)
    assert msg.position.y == pytest.approx(0.0)
    assert msg.linear.x == 0.5


def test_heading_used_for_next_step():
    odo = Odometry()
    odo.update(1.0, 0.0, 0.0, math.pi / 2)
    odo.update(1.0, 1.0, 0.0, 0.0)
    assert odo.x_pos == pytest.approx(0.0, abs=1e-9)
    assert odo.y_pos == pytest.approx(1.0)
    assert odo.heading == pytest.approx(math.pi / 2)


def test_covariances_set():
    odo = Odometry()
    odo.update(0.1, 0.0, 0.0, 0.0)
    msg = odo.data()
    assert [msg.pose_covariance[i] for i in (0, 7, 35)] == [0.05] * 3
    assert [msg.twist_covariance[i] for i in (0, 7, 35)] == [0.0001] * 3


def test_data_is_a_copy():
    odo = Odometry()
    odo.update(1.0, 1.0, 0.0, 0.2)
    snapshot = odo.data()
    snapshot.position.x = 42.0
    assert odo.data().position.x == pytest.approx(odo.x_pos)
    assert odo.data().angular.z == 0.2