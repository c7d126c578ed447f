"""Menu navigation driven by the vertical axis of an analogue joystick."""

from __future__ import annotations

ADC_BITS = 12
ADC_MAX = (1 << ADC_BITS) - 1
UP_THRESHOLD = int(ADC_MAX * 0.25)
"""Readings below this count as the stick pushed up."""
DOWN_THRESHOLD = int(ADC_MAX * 0.75)
"""Readings above this count as the stick pushed down."""
HYSTERESIS_STEPS = 5
"""Updates ignored after each change of selection."""


class MenuNavigator:
    """Moves a selection through a circular menu from joystick readings.

    A push moves the selection once; the stick must return to the neutral
    band before the same direction moves it again. After each move the next
    ``HYSTERESIS_STEPS`` updates are ignored.
    """

    def __init__(self, total: int, selected: int = 0,
                 hysteresis: int = HYSTERESIS_STEPS) -> None:
        if total <= 0:
            raise ValueError("the menu needs at least one option")
        if not 0 <= selected < total:
            raise ValueError(f"selected option {selected} is outside the menu")
        if hysteresis < 0:
            raise ValueError("hysteresis counter cannot be negative")
        self.total = total
        self.selected = selected
        self.hysteresis = hysteresis
        self.up_latched = False
        self.down_latched = False

    def update(self, reading: int) -> bool:
        """Feed one axis reading; return True if the selection changed."""
        if self.hysteresis < HYSTERESIS_STEPS:
            self.hysteresis += 1
            return False

        if reading < UP_THRESHOLD and not self.up_latched:
            self.selected = (self.selected - 1) % self.total
            self.up_latched, self.down_latched = True, False
            self.hysteresis = 0
            return True
        if reading > DOWN_THRESHOLD and not self.down_latched:
            self.selected = (self.selected + 1) % self.total
            self.up_latched, self.down_latched = False, True
            self.hysteresis = 0
            return True
        if UP_THRESHOLD <= reading <= DOWN_THRESHOLD:
            self.up_latched = self.down_latched = False
        return False