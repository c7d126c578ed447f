import pytest

from gatetrainer.joystick import (
    ADC_MAX,
    DOWN_THRESHOLD,
    HYSTERESIS_STEPS,
    UP_THRESHOLD,
    MenuNavigator,
)

NEUTRAL = (UP_THRESHOLD + DOWN_THRESHOLD) // 2


def settle(nav):
    for _ in range(HYSTERESIS_STEPS):
        assert nav.update(NEUTRAL) is False


def test_thresholds_sit_at_quarters_of_12_bit_range():
    nav = MenuNavigator(7, selected=3)
    assert nav.update(1023) is False
    assert nav.update(3071) is False
    assert nav.update(1022) is True
    assert nav.selected == 2
    other = MenuNavigator(7, selected=3)
    assert other.update(3072) is True
    assert other.selected == 4


def test_up_from_first_wraps_to_last():
    nav = MenuNavigator(7)
    assert nav.update(0) is True
    assert nav.selected == 6


def test_down_moves_forward_and_wraps():
    nav = MenuNavigator(7, selected=6)
    assert nav.update(ADC_MAX) is True
    assert nav.selected == 0


def test_neutral_reading_changes_nothing():
    nav = MenuNavigator(7, selected=3)
    assert nav.update(NEUTRAL) is False
    assert nav.selected == 3


def test_thresholds_are_neutral_boundaries():
    nav = MenuNavigator(7, selected=3)
    assert nav.update(UP_THRESHOLD) is False
    assert nav.update(DOWN_THRESHOLD) is False
    assert nav.selected == 3
    assert nav.update(UP_THRESHOLD - 1) is True
    assert nav.selected == 2


def test_hysteresis_blocks_updates_after_move():
    nav = MenuNavigator(7, selected=3)
    assert nav.update(ADC_MAX) is True
    for _ in range(HYSTERESIS_STEPS):
        assert nav.update(0) is False
    assert nav.selected == 4
    assert nav.update(0) is True
    assert nav.selected == 3


def test_held_stick_moves_only_once():
    nav = MenuNavigator(7, selected=3)
    assert nav.update(ADC_MAX) is True
    settle(nav)
    nav.update(NEUTRAL)
    assert nav.update(ADC_MAX) is True
    settle(nav)
    for _ in range(10):
        assert nav.update(ADC_MAX) is False
    assert nav.selected == 5


def test_latch_released_by_neutral():
    nav = MenuNavigator(7, selected=3)
    assert nav.update(0) is True
    settle(nav)
    assert nav.update(0) is False
    assert nav.update(NEUTRAL) is False
    assert nav.update(0) is True
    assert nav.selected == 1


def test_initial_hysteresis_delays_first_move():
    nav = MenuNavigator(7, selected=3, hysteresis=0)
    for _ in range(HYSTERESIS_STEPS):
        assert nav.update(0) is False
    assert nav.update(0) is True
    assert nav.selected == 2


@pytest.mark.parametrize(
    "total,selected,hysteresis",
    [(0, 0, 5), (3, 3, 5), (3, -1, 5), (3, 0, -1)],
)
def test_invalid_arguments(total, selected, hysteresis):
    with pytest.raises(ValueError):
        MenuNavigator(total, selected, hysteresis)