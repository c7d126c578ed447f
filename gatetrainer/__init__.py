"""Logic-gate trainer: joystick menu, button inputs, LED results and an SSD1306 frame-buffer driver."""

__version__ = "0.1.0"