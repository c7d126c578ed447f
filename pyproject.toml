[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gatetrainer"
version = "0.1.0"
description = "Logic-gate trainer: pick a gate with a joystick menu, feed it two button inputs, and show the result on red and green LEDs and an SSD1306 OLED panel."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "logic gates",
    "boolean logic",
    "education",
    "ssd1306",
    "oled",
    "joystick",
    "menu",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gatetrainer = "gatetrainer.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gatetrainer"]

[tool.hatch.build.targets.sdist]
include = ["gatetrainer", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
