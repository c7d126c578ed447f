# gatetrainer

A small trainer for learning boolean logic gates. You pick one of seven gates
from a menu with a joystick: AND, OR, NOT, NAND, NOR, XOR and XNOR. The
gate's name appears in large letters on an SSD1306 OLED panel. Two buttons
feed inputs A and B to the gate. The green LED lights when the gate outputs
true, and the red LED lights when it outputs false.

Board inputs, outputs and the I2C bus each sit behind a small class. The
trainer logic, the menu navigation and the drawing code therefore run and
can be tested on an ordinary computer.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Running

```
gatetrainer
```

This runs the main loop of `gatetrainer.app.main` on an in-memory `Board`
and prints the name of the selected gate. It prints the name again each time
the selection changes. Options:

- `--steps N`: run `N` passes of the loop, then exit. By default the loop
  runs until interrupted with Ctrl-C.
- `--interval SECONDS`: pause between passes. The default is `0.1`.

Negative values for either option are rejected.

## Using the pieces

### Logic gates

`gatetrainer.logic` provides one function for each gate: `logic_and`,
`logic_or`, `logic_xor`, `logic_nand`, `logic_nor`, `logic_xnor` and
`logic_not`. The `Gate` enumeration lists the gates in menu order, and
`GATES` holds the same members as a tuple:

```python
from gatetrainer.logic import Gate, logic_and, logic_not

logic_and(True, False)          # False
logic_not(False)                # True
Gate.XOR.evaluate(True, False)  # True
Gate.NAND.label                 # "NAND"
```

`Gate.NOT.evaluate(a, b)` looks only at `a`.

### Menu navigation

`gatetrainer.joystick.MenuNavigator(total, selected=0, hysteresis=5)` turns
raw 12-bit joystick readings into moves through a circular menu:

- A reading below `UP_THRESHOLD` (a quarter of full scale) moves the
  selection up.
- A reading above `DOWN_THRESHOLD` (three quarters of full scale) moves it
  down.
- The selection wraps around at both ends.

After each move, the next `HYSTERESIS_STEPS` updates are ignored. The stick
must also return to the neutral band before it can move the same way again.
`update(reading)` returns `True` when the selection changed, and the current
index is in `selected`. The constructor raises `ValueError` in three cases:
an empty menu, a starting selection outside the menu, or a negative
hysteresis counter.

### Fonts

`gatetrainer.font.Font` is a fixed-width bitmap font stored as column bytes.
`Font.from_bytes(data)` reads a table laid out as height, width, spacing,
first character, last character, then the glyph data. It raises `ValueError`
if the table is short or inconsistent. On a font:

- `covers(char)` tells whether the font has a glyph for `char`.
- `glyph(char)` returns the glyph's columns as integers, with bit *n* for
  row *n*.
- `advance(scale)` gives the step from one character to the next.

`FONT_8X5` is the built-in 8-pixel-high font for printable ASCII.

### Display driver

`gatetrainer.ssd1306.SSD1306(bus, width=128, height=64, address=0x3C,
external_vcc=False)` keeps a page-organised frame buffer in `buffer`. It sends
its initialisation sequence through `bus` when it is created. Width and height
must be between 1 and 255, and the height must be a multiple of 8.

Panel control:

- `poweron()`
- `poweroff()`
- `contrast(value)`
- `invert(inverted)`

Drawing on the buffer:

- `clear()`
- `draw_pixel(x, y)`, `clear_pixel(x, y)` and `pixel(x, y)`. Coordinates
  outside the panel are ignored, and `pixel` returns `False` for them.
- `draw_line(x1, y1, x2, y2)`
- `draw_square(...)` and `clear_square(...)` for filled rectangles.
- `draw_empty_square(...)` for an outline.
- `draw_char(x, y, scale, char, font=FONT_8X5)` and
  `draw_string(x, y, scale, text, font=FONT_8X5)`. Characters the font lacks
  are skipped.
- `draw_bmp(data, x_offset=0, y_offset=0)` draws the black pixels of an
  uncompressed 1-bit BMP file. It ignores images that are not of that kind
  and raises `ValueError` for truncated ones.

`show()` sends the buffer to the panel.

The base `I2CBus` only records each write as an `(address, bytes)` pair in
`transactions`. To drive a real bus, subclass it and override
`write(address, data)`. A write that raises `OSError` is logged as a warning
and does not stop the driver.

### Centred text

`gatetrainer.display.TextDisplay(panel)` wraps an `SSD1306`:

- `clear()` blanks the panel.
- `print_text(message, pos_y, scale)` replaces the panel contents with
  `message`, centred horizontally at row `pos_y`. Text wider than the panel
  is not drawn.

### The trainer

`gatetrainer.app.Board` holds the board's state in memory:

- `axis` is the joystick reading.
- `buttons` holds the levels of buttons `BUTTON_A` and `BUTTON_B`. The
  buttons use pull-ups, so a released button reads `True`.
- `leds` holds the state of the red, green and blue `Led` outputs.

`read_axis()`, `read_button(pin)` and `set_led(led, on)` are the methods to
override for real hardware.

`GateTrainer(board, display)` shows the first gate and switches every LED
off. Its methods:

- `read_buttons()` samples both buttons into `input_a` and `input_b` and
  returns them.
- `execute_logic_operation()` evaluates the selected `gate` on those inputs,
  lights green for true or red for false, and returns the result.
- `step()` runs one pass of the main loop. It returns `True` when the joystick
  changed the gate, in which case the new name is shown.

## What the package does not do

The package does not talk to GPIO pins, an ADC or a real I2C bus. The
`gatetrainer` command uses the in-memory `Board`, whose joystick rests in the
neutral position and whose buttons are released. Its display writes go
nowhere. Run on its own, it therefore shows only the first gate. To drive
hardware or a richer simulation, subclass `Board` and `I2CBus` and assemble a
`GateTrainer` yourself.

## Tests

```
pytest
```