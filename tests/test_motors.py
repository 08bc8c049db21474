import pytest

from roverctl.motors import (
    LEFT_TIMER,
    RIGHT_TIMER,
    MotorDriver,
    Operator,
)


class FakeBackend:
    def __init__(self):
        self.calls = []

    def bind_pin(self, timer, operator, pin):
        self.calls.append(("bind", timer, operator, pin))

    def configure_timer(self, timer, frequency):
        self.calls.append(("configure", timer, frequency))

    def set_signal_low(self, timer, operator):
        self.calls.append(("low", timer, operator))

    def set_duty(self, timer, operator, duty_cycle):
        self.calls.append(("duty", timer, operator, duty_cycle))


@pytest.fixture
def rig():
    backend = FakeBackend()
    return backend, MotorDriver(backend)


def test_setup_binds_wheel_pins_and_timers(rig):
    backend, driver = rig
    driver.setup()
    assert backend.calls == [
        ("bind", 0, Operator.A, 15),
        ("bind", 0, Operator.B, 4),
        ("bind", 1, Operator.A, 19),
        ("bind", 1, Operator.B, 18),
        ("configure", 0, 500),
        ("configure", 1, 500),
    ]


def test_forward_drives_operator_a(rig):
    backend, driver = rig
    driver.forward(LEFT_TIMER, 42.5)
    assert backend.calls == [("low", LEFT_TIMER, Operator.B), ("duty", LEFT_TIMER, Operator.A, 42.5)]


def test_backward_drives_operator_b(rig):
    backend, driver = rig
    driver.backward(RIGHT_TIMER, 30.0)
    assert backend.calls == [("low", RIGHT_TIMER, Operator.A), ("duty", RIGHT_TIMER, Operator.B, 30.0)]


def test_stop_pulls_both_low(rig):
    backend, driver = rig
    driver.stop(LEFT_TIMER)
    assert backend.calls == [("low", LEFT_TIMER, Operator.A), ("low", LEFT_TIMER, Operator.B)]


def test_rover_stop_stops_both_wheels(rig):
    backend, driver = rig
    driver.rover_stop(LEFT_TIMER, RIGHT_TIMER)
    assert backend.calls == [
        ("low", LEFT_TIMER, Operator.A),
        ("low", LEFT_TIMER, Operator.B),
        ("low", RIGHT_TIMER, Operator.A),
        ("low", RIGHT_TIMER, Operator.B),
    ]


def test_rover_forward_mirrors_right_wheel(rig):
    backend, driver = rig
    driver.rover_forward(LEFT_TIMER, 10.0, RIGHT_TIMER, 20.0)
    duties = [c for c in backend.calls if c[0] == "duty"]
    assert duties == [("duty", LEFT_TIMER, Operator.A, 10.0), ("duty", RIGHT_TIMER, Operator.B, 20.0)]


def test_rover_backward_mirrors_right_wheel(rig):
    backend, driver = rig
    driver.rover_backward(LEFT_TIMER, 10.0, RIGHT_TIMER, 20.0)
    duties = [c for c in backend.calls if c[0] == "duty"]
    assert duties == [("duty", LEFT_TIMER, Operator.B, 10.0), ("duty", RIGHT_TIMER, Operator.A, 20.0)]


@pytest.mark.parametrize(
    "duty, expected",
    [
        (25.0, [("low", 0, Operator.B), ("duty", 0, Operator.A, 25.0)]),
        (-25.0, [("low", 0, Operator.A), ("duty", 0, Operator.B, 25.0)]),
        (0.0, [("low", 0, Operator.A), ("low", 0, Operator.B)]),
    ],
)
def test_spin_left(rig, duty, expected):
    backend, driver = rig
    driver.spin_left(LEFT_TIMER, duty)
    assert backend.calls == expected


@pytest.mark.parametrize(
    "duty, expected",
    [
        (25.0, [("low", 1, Operator.A), ("duty", 1, Operator.B, 25.0)]),
        (-25.0, [("low", 1, Operator.B), ("duty", 1, Operator.A, 25.0)]),
        (0.0, [("low", 1, Operator.A), ("low", 1, Operator.B)]),
    ],
)
def test_spin_right(rig, duty, expected):
    backend, driver = rig
    driver.spin_right(RIGHT_TIMER, duty)
    assert backend.calls == expected


def test_spin_directions_are_opposite(rig):
    backend, driver = rig
    driver.spin_left(LEFT_TIMER, 50.0)
    left_op = backend.calls[-1][2]
    driver.spin_right(LEFT_TIMER, 50.0)
    right_op = backend.calls[-1][2]
    assert left_op is not right_op
    assert {left_op, right_op} == {Operator.A, Operator.B}