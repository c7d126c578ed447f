"""Two-input logic gates and the menu of gates the trainer offers."""

from __future__ import annotations

from enum import Enum


def logic_and(a: bool, b: bool) -> bool:
    """Return a AND b."""
    return bool(a) and bool(b)


def logic_or(a: bool, b: bool) -> bool:
    """Return a OR b."""
    return bool(a) or bool(b)


def logic_xor(a: bool, b: bool) -> bool:
    """Return a XOR b."""
    return bool(a) != bool(b)


def logic_nand(a: bool, b: bool) -> bool:
    """Return NOT (a AND b)."""
    return not logic_and(a, b)


def logic_nor(a: bool, b: bool) -> bool:
    """Return NOT (a OR b)."""
    return not logic_or(a, b)


def logic_xnor(a: bool, b: bool) -> bool:
    """Return NOT (a XOR b)."""
    return not logic_xor(a, b)


def logic_not(a: bool) -> bool:
    """Return NOT a."""
    return not bool(a)


class Gate(Enum):
    """The gates offered by the menu, in menu order; the value is the label."""

    AND = "AND"
    OR = "OR"
    NOT = "NOT"
    NAND = "NAND"
    NOR = "NOR"
    XOR = "XOR"
    XNOR = "XNOR"

    @property
    def label(self) -> str:
        """Text shown on the display for this gate."""
        return self.value

    def evaluate(self, a: bool, b: bool = False) -> bool:
        """Apply the gate to the inputs; NOT uses ``a`` only."""
        if self is Gate.NOT:
            return logic_not(a)
        return _BINARY[self](a, b)


_BINARY = {
    Gate.AND: logic_and,
    Gate.OR: logic_or,
    Gate.NAND: logic_nand,
    Gate.NOR: logic_nor,
    Gate.XOR: logic_xor,
    Gate.XNOR: logic_xnor,
}

GATES: tuple[Gate, ...] = tuple(Gate)
"""All gates in menu order."""