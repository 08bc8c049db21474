import pytest

from roverctl.pid import PID, constrain


@pytest.mark.parametrize(
    "value,expected",
    [(-5.0, 0.0), (50.0, 50.0), (150.0, 100.0), (0.0, 0.0), (100.0, 100.0)],
)
def test_constrain(value, expected):
    assert constrain(value, 0.0, 100.0) == expected


def test_proportional_only():
    pid = PID(-100, 100, 1.0, 0.0, 0.0)
    assert pid.compute(10.0, 4.0) == pytest.approx(10.0 - 4.0)


def test_output_clamped_to_limits():
    pid = PID(0, 100, 1.0, 0.0, 0.0)
    assert pid.compute(1000.0, 0.0) == 100
    assert pid.compute(-1000.0, 0.0) == 0


def test_integral_accumulates():
    pid = PID(-100, 100, 0.0, 1.0, 0.0)
    first = pid.compute(3.0, 1.0)
    second = pid.compute(3.0, 1.0)
    assert second == pytest.approx(2 * first)
    assert pid.integral == pytest.approx(2 * (3.0 - 1.0))


def test_derivative_uses_previous_error():
    pid = PID(-100, 100, 0.0, 0.0, 1.0)
    assert pid.compute(5.0, 0.0) == pytest.approx(5.0)
    assert pid.compute(5.0, 0.0) == pytest.approx(0.0)


def test_idle_resets_integral():
    pid = PID(-100, 100, 1.0, 1.0, 1.0)
    pid.compute(20.0, 0.0)
    assert pid.compute(0.0, 0.0) == 0.0
    assert pid.integral == 0.0
    assert pid.derivative == 0.0


def test_update_constants_changes_output():
    pid = PID(-100, 100, 1.0, 0.0, 0.0)
    pid.update_constants(2.0, 0.0, 0.0)
    assert (pid.kp, pid.ki, pid.kd) == (2.0, 0.0, 0.0)
    assert pid.compute(3.0, 0.0) == pytest.approx(2.0 * 3.0)