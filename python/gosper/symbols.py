"""Gosper curve alphabet and its fixed productions."""

from enum import Enum


class Symbol(Enum):
    DRAW_A = "A"
    DRAW_B = "B"
    TURN_LEFT = "L"
    TURN_RIGHT = "R"

    @property
    def is_draw(self) -> bool:
        return self is Symbol.DRAW_A or self is Symbol.DRAW_B


RULE_A = "ALBLLBRARRAARBL"
RULE_B = "RALBBLLBLARRARB"


def parse(text: str) -> tuple[Symbol, ...]:
    """Convert compact notation (A, B, L, R) into symbols.

    Parameters:
        text (str): The symbols as letters

    Returns:
        tuple[Symbol, ...]: The parsed symbols
    """
    return tuple(Symbol(ch) for ch in text)


def render(symbols) -> str:
    """Inverse of :func:`parse`."""
    return "".join(s.value for s in symbols)


PRODUCTIONS: dict[Symbol, tuple[Symbol, ...]] = {
    Symbol.DRAW_A: parse(RULE_A),
    Symbol.DRAW_B: parse(RULE_B),
}
