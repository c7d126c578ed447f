"""The logic-gate trainer: pick a gate with the joystick, feed it with buttons."""

from __future__ import annotations

import argparse
import itertools
import time
from enum import IntEnum

from .display import TextDisplay
from .joystick import ADC_MAX, HYSTERESIS_STEPS, MenuNavigator
from .logic import GATES, Gate
from .ssd1306 import I2CBus, SSD1306

BUTTON_A = 5
BUTTON_B = 6
MENU_TEXT_Y = 18
MENU_TEXT_SCALE = 3
LOOP_INTERVAL = 0.1


class Led(IntEnum):
    """Output pins of the RGB LED."""

    GREEN = 11
    BLUE = 12
    RED = 13


class Board:
    """Board inputs and outputs; this base class keeps them in memory.

    Buttons use pull-ups, so a released button reads True and a pressed one
    False. Subclass it to reach real hardware.
    """

    def __init__(self) -> None:
        self.axis = (ADC_MAX + 1) // 2
        self.buttons: dict[int, bool] = {BUTTON_A: True, BUTTON_B: True}
        self.leds: dict[Led, bool] = {led: False for led in Led}

    def read_axis(self) -> int:
        """Return the joystick's vertical axis as a 12-bit reading."""
        return self.axis

    def read_button(self, pin: int) -> bool:
        """Return the level of the button on ``pin``."""
        return self.buttons[pin]

    def set_led(self, led: Led, on: bool) -> None:
        """Switch one LED on or off."""
        self.leds[Led(led)] = bool(on)


class GateTrainer:
    """Shows the selected gate and lights green or red for its output."""

    def __init__(self, board: Board, display: TextDisplay) -> None:
        self.board = board
        self.display = display
        self.navigator = MenuNavigator(len(GATES), 0, HYSTERESIS_STEPS)
        self.input_a = True
        self.input_b = True
        self._show_gate()
        for led in (Led.RED, Led.GREEN, Led.BLUE):
            self.board.set_led(led, False)

    @property
    def gate(self) -> Gate:
        """The gate currently selected."""
        return GATES[self.navigator.selected]

    def _show_gate(self) -> None:
        self.display.print_text(self.gate.label, MENU_TEXT_Y, MENU_TEXT_SCALE)

    def read_buttons(self) -> tuple[bool, bool]:
        """Sample both buttons into the gate inputs and return them."""
        self.input_a = bool(self.board.read_button(BUTTON_A))
        self.input_b = bool(self.board.read_button(BUTTON_B))
        return self.input_a, self.input_b

    def execute_logic_operation(self) -> bool:
        """Evaluate the selected gate on the buttons and light the result."""
        self.read_buttons()
        result = self.gate.evaluate(self.input_a, self.input_b)
        if result:
            self.board.set_led(Led.RED, False)
            self.board.set_led(Led.GREEN, True)
        else:
            self.board.set_led(Led.GREEN, False)
            self.board.set_led(Led.RED, True)
        return result

    def step(self) -> bool:
        """Run one pass of the main loop; return True if the gate changed."""
        changed = self.navigator.update(self.board.read_axis())
        if changed:
            self._show_gate()
        self.execute_logic_operation()
        return changed


class _SilentBus(I2CBus):
    def write(self, address: int, data) -> None:
        pass


def main(argv=None) -> int:
    """Run the trainer on the in-memory board, printing each selected gate."""
    parser = argparse.ArgumentParser(
        prog="gatetrainer", description="Logic gate trainer main loop."
    )
    parser.add_argument("--steps", type=int, default=None,
                        help="number of loop passes (default: run until interrupted)")
    parser.add_argument("--interval", type=float, default=LOOP_INTERVAL,
                        help="seconds between passes")
    args = parser.parse_args(argv)
    if args.steps is not None and args.steps < 0:
        parser.error("--steps cannot be negative")
    if args.interval < 0:
        parser.error("--interval cannot be negative")

    trainer = GateTrainer(Board(), TextDisplay(SSD1306(_SilentBus())))
    print(trainer.gate.label)
    passes = itertools.count() if args.steps is None else range(args.steps)
    try:
        for _ in passes:
            if trainer.step():
                print(trainer.gate.label)
            time.sleep(args.interval)
    except KeyboardInterrupt:
        pass
    return 0