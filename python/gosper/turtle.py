"""Turtle interpretation of a Gosper curve on the triangular grid.

The turtle starts at the origin facing heading 0 and knows six headings,
60 degrees apart. ``L`` turns one step counter-clockwise, ``R`` one step
clockwise, and every draw symbol moves one unit and emits the new position.
"""

import math
from dataclasses import dataclass

import numpy as np

from .symbols import Symbol

S = math.sqrt(0.75)

DIRECTIONS: tuple[tuple[float, float], ...] = (
    (1.0, 0.0),
    (0.5, S),
    (-0.5, S),
    (-1.0, 0.0),
    (-0.5, -S),
    (0.5, -S),
)

HEADINGS = len(DIRECTIONS)

_TURNS = {Symbol.TURN_LEFT: 1, Symbol.TURN_RIGHT: HEADINGS - 1}


def displacement(heading: int) -> tuple[float, float]:
    """Unit step for ``heading``; anything outside 0..5 is a bug."""
    if not 0 <= heading < HEADINGS:
        raise AssertionError(f"invalid direction {heading}")
    return DIRECTIONS[heading]


@dataclass
class TurtleState:
    heading: int = 0
    x: float = 0.0
    y: float = 0.0

    def turn(self, steps: int) -> None:
        self.heading = (self.heading + steps) % HEADINGS

    def forward(self) -> tuple[float, float]:
        dx, dy = displacement(self.heading)
        self.x += dx
        self.y += dy
        return self.x, self.y


class Points:
    """Lazy, single-pass iterator over the points traced by a curve.

    Build a new instance from the same symbols to retrace the path.
    """

    def __init__(self, symbols):
        self._symbols = iter(symbols)
        self.state = TurtleState()

    def __iter__(self):
        return self

    def __next__(self) -> tuple[float, float]:
        for symbol in self._symbols:
            if symbol is Symbol.DRAW_A or symbol is Symbol.DRAW_B:
                return self.state.forward()
            if symbol is Symbol.TURN_LEFT or symbol is Symbol.TURN_RIGHT:
                self.state.turn(_TURNS[symbol])
                continue
            raise TypeError(f"not a curve symbol: {symbol!r}")
        raise StopIteration


def points(curve) -> Points:
    """Return a fresh turtle walk over ``curve``."""
    return Points(curve)


def path_array(curve) -> np.ndarray:
    """Vectorised equivalent of :class:`Points`.

    Parameters:
        curve (Iterable[Symbol]): The symbols to interpret

    Returns:
        np.ndarray: An ``(N, 2)`` float64 array, one row per draw symbol
    """
    symbols = list(curve)
    turns = np.fromiter(
        (_TURNS.get(s, 0) for s in symbols), dtype=np.int64, count=len(symbols)
    )
    draws = np.fromiter(
        (s.is_draw for s in symbols), dtype=bool, count=len(symbols)
    )
    # Draws add no turn, so the running sum at a draw is its heading.
    headings = np.cumsum(turns) % HEADINGS
    steps = np.asarray(DIRECTIONS, dtype=np.float64)[headings[draws]]
    return np.cumsum(steps, axis=0)
