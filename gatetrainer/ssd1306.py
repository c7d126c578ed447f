"""Frame-buffer driver for SSD1306 monochrome OLED panels over I2C."""

from __future__ import annotations

import logging
from enum import IntEnum

from .font import FONT_8X5, Font

logger = logging.getLogger(__name__)

_CONTROL_COMMAND = 0x00
_CONTROL_DATA = 0x40
_BMP_HEADER_SIZE = 54


class Command(IntEnum):
    """Command bytes understood by the SSD1306 controller."""

    SET_CONTRAST = 0x81
    SET_ENTIRE_ON = 0xA4
    SET_NORM_INV = 0xA6
    SET_DISP = 0xAE
    SET_MEM_ADDR = 0x20
    SET_COL_ADDR = 0x21
    SET_PAGE_ADDR = 0x22
    SET_DISP_START_LINE = 0x40
    SET_SEG_REMAP = 0xA0
    SET_MUX_RATIO = 0xA8
    SET_COM_OUT_DIR = 0xC0
    SET_DISP_OFFSET = 0xD3
    SET_COM_PIN_CFG = 0xDA
    SET_DISP_CLK_DIV = 0xD5
    SET_PRECHARGE = 0xD9
    SET_VCOM_DESEL = 0xDB
    SET_CHARGE_PUMP = 0x8D


class I2CBus:
    """I2C bus that records every write; subclass it to reach real hardware.

    A subclass signals a failed transfer by raising ``OSError``.
    """

    def __init__(self) -> None:
        self.transactions: list[tuple[int, bytes]] = []

    def write(self, address: int, data) -> None:
        """Send ``data`` to the device at ``address``."""
        self.transactions.append((address, bytes(data)))


class SSD1306:
    """An SSD1306 panel with an in-memory page-organised frame buffer."""

    def __init__(
        self,
        bus: I2CBus,
        width: int = 128,
        height: int = 64,
        address: int = 0x3C,
        external_vcc: bool = False,
    ) -> None:
        if not 0 < width < 256 or not 0 < height < 256:
            raise ValueError("width and height must be between 1 and 255")
        if height % 8:
            raise ValueError("height must be a multiple of 8")
        self.bus = bus
        self.width = width
        self.height = height
        self.pages = height // 8
        self.address = address
        self.external_vcc = external_vcc
        self.buffer = bytearray(self.pages * width)

        init_sequence = (
            Command.SET_DISP,
            Command.SET_DISP_CLK_DIV, 0x80,
            Command.SET_MUX_RATIO, height - 1,
            Command.SET_DISP_OFFSET, 0x00,
            Command.SET_DISP_START_LINE,
            Command.SET_CHARGE_PUMP, 0x10 if external_vcc else 0x14,
            Command.SET_SEG_REMAP | 0x01,
            Command.SET_COM_OUT_DIR | 0x08,
            Command.SET_COM_PIN_CFG, 0x02 if width > 2 * height else 0x12,
            Command.SET_CONTRAST, 0xFF,
            Command.SET_PRECHARGE, 0x22 if external_vcc else 0xF1,
            Command.SET_VCOM_DESEL, 0x30,
            Command.SET_ENTIRE_ON,
            Command.SET_NORM_INV,
            Command.SET_DISP | 0x01,
            Command.SET_MEM_ADDR, 0x00,
        )
        for value in init_sequence:
            self._command(value)

    def _send(self, data: bytes, name: str) -> None:
        try:
            self.bus.write(self.address, data)
        except OSError as exc:
            logger.warning("[%s] write failed: %s", name, exc)

    def _command(self, value: int) -> None:
        self._send(bytes((_CONTROL_COMMAND, value & 0xFF)), "ssd1306_write")

    def poweroff(self) -> None:
        """Turn the panel off."""
        self._command(Command.SET_DISP | 0x00)

    def poweron(self) -> None:
        """Turn the panel on."""
        self._command(Command.SET_DISP | 0x01)

    def contrast(self, value: int) -> None:
        """Set the panel contrast (0-255)."""
        self._command(Command.SET_CONTRAST)
        self._command(value)

    def invert(self, inverted) -> None:
        """Invert the panel when the low bit of ``inverted`` is set."""
        self._command(Command.SET_NORM_INV | (int(inverted) & 1))

    def show(self) -> None:
        """Send the whole frame buffer to the panel."""
        col_start, col_end = 0, self.width - 1
        if self.width == 64:
            col_start += 32
            col_end += 32
        for value in (
            Command.SET_COL_ADDR, col_start, col_end,
            Command.SET_PAGE_ADDR, 0, self.pages - 1,
        ):
            self._command(value)
        self._send(bytes((_CONTROL_DATA,)) + bytes(self.buffer), "ssd1306_show")

    def clear(self) -> None:
        """Blank the frame buffer."""
        self.buffer[:] = bytes(len(self.buffer))

    def _locate(self, x: int, y: int) -> tuple[int, int] | None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            return None
        return x + self.width * (y >> 3), 1 << (y & 0x07)

    def pixel(self, x: int, y: int) -> bool:
        """Whether the pixel at (x, y) is lit; False outside the panel."""
        spot = self._locate(x, y)
        if spot is None:
            return False
        index, mask = spot
        return bool(self.buffer[index] & mask)

    def clear_pixel(self, x: int, y: int) -> None:
        """Turn off one pixel; coordinates outside the panel are ignored."""
        spot = self._locate(x, y)
        if spot is not None:
            index, mask = spot
            self.buffer[index] &= ~mask & 0xFF

    def draw_pixel(self, x: int, y: int) -> None:
        """Turn on one pixel; coordinates outside the panel are ignored."""
        spot = self._locate(x, y)
        if spot is not None:
            index, mask = spot
            self.buffer[index] |= mask

    def draw_line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Draw a straight line between two points, both included."""
        if x1 > x2:
            x1, x2 = x2, x1
            y1, y2 = y2, y1
        if x1 == x2:
            for y in range(min(y1, y2), max(y1, y2) + 1):
                self.draw_pixel(x1, y)
            return
        slope = (y2 - y1) / (x2 - x1)
        for x in range(x1, x2 + 1):
            self.draw_pixel(x, int(slope * (x - x1) + y1))

    def clear_square(self, x: int, y: int, width: int, height: int) -> None:
        """Turn off a filled rectangle."""
        for i in range(width):
            for j in range(height):
                self.clear_pixel(x + i, y + j)

    def draw_square(self, x: int, y: int, width: int, height: int) -> None:
        """Turn on a filled rectangle."""
        for i in range(width):
            for j in range(height):
                self.draw_pixel(x + i, y + j)

    def draw_empty_square(self, x: int, y: int, width: int, height: int) -> None:
        """Draw a rectangle outline whose far corner is (x + width, y + height)."""
        self.draw_line(x, y, x + width, y)
        self.draw_line(x, y + height, x + width, y + height)
        self.draw_line(x, y, x, y + height)
        self.draw_line(x + width, y, x + width, y + height)

    def draw_char(
        self, x: int, y: int, scale: int, char: str, font: Font = FONT_8X5
    ) -> None:
        """Draw one character; characters the font lacks are skipped."""
        if not font.covers(char):
            return
        rows = font.parts_per_column * 8
        for col, bits in enumerate(font.glyph(char)):
            for row in range(rows):
                if bits >> row & 1:
                    self.draw_square(x + col * scale, y + row * scale, scale, scale)

    def draw_string(
        self, x: int, y: int, scale: int, text: str, font: Font = FONT_8X5
    ) -> None:
        """Draw ``text`` left to right starting at (x, y)."""
        step = font.advance(scale)
        for offset, char in enumerate(text):
            self.draw_char(x + offset * step, y, scale, char, font)

    def draw_bmp(self, data, x_offset: int = 0, y_offset: int = 0) -> None:
        """Draw the black pixels of an uncompressed 1-bit BMP file.

        Images too small for a header, not monochrome or compressed are
        ignored, as the panel cannot show them.
        """
        raw = bytes(data)
        if len(raw) < _BMP_HEADER_SIZE:
            return

        def field(offset: int, size: int, signed: bool = False) -> int:
            return int.from_bytes(raw[offset:offset + size], "little", signed=signed)

        pixel_offset = field(10, 4)
        header_size = field(14, 4)
        width = field(18, 4)
        height = field(22, 4, signed=True)
        bit_count = field(28, 2)
        compression = field(30, 4)

        if bit_count != 1 or compression != 0:
            return

        table_start = 14 + header_size
        if len(raw) < table_start + 8:
            raise ValueError("BMP colour table is truncated")
        color_val = 0
        for index in range(2):
            entry = raw[table_start + index * 4:table_start + index * 4 + 3]
            if not any(entry):
                color_val = index
                break

        bytes_per_line = (width + 7) // 8
        bytes_per_line = (bytes_per_line + 3) // 4 * 4
        row_count = abs(height)
        if len(raw) < pixel_offset + bytes_per_line * row_count:
            raise ValueError("BMP pixel data is truncated")

        rows = range(height - 1, -1, -1) if height > 0 else range(row_count)
        for line, y in enumerate(rows):
            start = pixel_offset + line * bytes_per_line
            row = raw[start:start + bytes_per_line]
            for x in range(width):
                if (row[x >> 3] >> (7 - (x & 7))) & 1 == color_val:
                    self.draw_pixel(x_offset + x, y_offset + y)