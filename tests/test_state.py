import pytest

from rayfield_qt.core.state import (
    SliderState,
    ToggleState,
    clamp,
    format_value,
    fraction_to_value,
    snap_to_increment,
    value_to_fraction,
)


def test_clamp():
    assert clamp(5, 0, 10) == 5
    assert clamp(-1, 0, 10) == 0
    assert clamp(11, 0, 10) == 10


def test_fraction_to_value_linear():
    for i in range(101):
        f = i / 100
        expected = clamp(20 + f * (80 - 20), 20, 80)
        assert fraction_to_value(f, 20, 80) == pytest.approx(expected)


def test_fraction_is_clamped():
    assert fraction_to_value(-0.5, 0, 100) == 0
    assert fraction_to_value(1.5, 0, 100) == 100


def test_increment_snaps_to_nearest_multiple():
    # 0.53 * 100 = 53 -> nearest multiple of 10 is 50
    assert fraction_to_value(0.53, 0, 100, 10) == 50
    assert fraction_to_value(0.57, 0, 100, 10) == 60


def test_increment_ties_round_up():
    assert snap_to_increment(2.5, 1) == 3
    assert snap_to_increment(-2.5, 1) == -2
    assert fraction_to_value(0.25, 0, 10, 1) == 3


def test_snapped_value_stays_in_range():
    # 95 snaps to 100, which is then clamped back to the maximum
    assert fraction_to_value(1.0, 0, 95, 10) == 95


def test_value_to_fraction():
    assert value_to_fraction(50, 0, 100) == 0.5
    assert value_to_fraction(150, 0, 100) == 1.0
    assert value_to_fraction(-5, 0, 100) == 0.0


def test_format_value():
    assert format_value(50.0) == "50"
    assert format_value(50) == "50"
    assert format_value(2.5) == "2.5"


@pytest.mark.parametrize("initial", [False, True])
@pytest.mark.parametrize("clicks", [0, 1, 2, 5, 8])
def test_toggle_flip_parity(initial, clicks):
    state = ToggleState(initial)
    for _ in range(clicks):
        state.flip()
    assert state.value == (initial ^ (clicks % 2 == 1))


def test_slider_state_clamps_initial_value():
    state = SliderState(minimum=0, maximum=10, value=42)
    assert state.value == 10


def test_slider_state_set_fraction_uses_increment():
    state = SliderState(minimum=0, maximum=100, increment=10, value=50)
    assert state.set_fraction(0.53) == 50
    assert state.fraction == 0.5
    assert state.set_value(-3) == 0
