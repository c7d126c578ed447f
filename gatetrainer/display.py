"""Centred text output on an SSD1306 panel."""

from __future__ import annotations

from .font import FONT_8X5
from .ssd1306 import SSD1306


class TextDisplay:
    """Shows one line of horizontally centred text at a time."""

    def __init__(self, panel: SSD1306) -> None:
        self.panel = panel

    def clear(self) -> None:
        """Blank the panel."""
        self.panel.clear()
        self.panel.show()

    def print_text(self, message: str, pos_y: int, scale: int) -> None:
        """Replace the panel contents with ``message`` centred at row ``pos_y``.

        Text wider than the panel is not drawn.
        """
        self.clear()
        text_width = len(message) * FONT_8X5.advance(scale)
        if text_width <= self.panel.width:
            pos_x = (self.panel.width - text_width) // 2
            self.panel.draw_string(pos_x, pos_y, scale, message, FONT_8X5)
        self.panel.show()