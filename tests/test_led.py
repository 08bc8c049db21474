from roverctl.led import Led


def make():
    levels, sleeps = [], []
    return Led(levels.append, sleeps.append), levels, sleeps


def test_blink_twice():
    led, levels, sleeps = make()
    led.blink(2)
    assert levels == [1, 0, 1, 0]
    assert sleeps == [1.0] * 5


def test_blink_zero_only_pauses():
    led, levels, sleeps = make()
    led.blink(0)
    assert levels == []
    assert sleeps == [1.0]


def test_turn_on_and_off():
    led, levels, sleeps = make()
    led.turn_on()
    led.turn_off()
    assert levels == [1, 0]
    assert sleeps == []