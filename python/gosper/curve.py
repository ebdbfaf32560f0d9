"""L-system expansion of the Gosper curve.

A curve starts from the one-symbol axiom ``A`` and grows only by rewriting:
every draw symbol is replaced by its 15-symbol production while turns are
copied through. Each production holds 7 draws and 8 turns, so the number of
segments is exactly ``7 ** n`` after ``n`` generations.
"""

import logging
from itertools import chain

from .bounds import Bounds, fold_bounds
from .errors import InvalidGenerationError
from .symbols import PRODUCTIONS, Symbol, render
from .turtle import Points

logger = logging.getLogger(__name__)

AXIOM = (Symbol.DRAW_A,)


def rewrite(symbols) -> tuple[Symbol, ...]:
    """Apply the productions once, preserving order.

    Parameters:
        symbols (Iterable[Symbol]): The current generation

    Returns:
        tuple[Symbol, ...]: The next generation
    """
    return tuple(chain.from_iterable(_replace(s) for s in symbols))


def _replace(symbol) -> tuple[Symbol, ...]:
    if not isinstance(symbol, Symbol):
        raise TypeError(f"not a curve symbol: {symbol!r}")
    return PRODUCTIONS.get(symbol, (symbol,))


class Curve:
    """An immutable Gosper curve symbol sequence.

    Only curves grown from the axiom by :meth:`generate` or :meth:`next` know
    their generation; any other sequence reports ``None``.
    """

    __slots__ = ("_symbols", "_generation")

    def __init__(self, symbols=AXIOM):
        self._symbols = tuple(symbols)
        for s in self._symbols:
            if not isinstance(s, Symbol):
                raise TypeError(f"not a curve symbol: {s!r}")
        self._generation = 0 if self._symbols == AXIOM else None

    @classmethod
    def _grown(cls, symbols: tuple[Symbol, ...], generation: int | None) -> "Curve":
        curve = cls.__new__(cls)
        curve._symbols = symbols
        curve._generation = generation
        return curve

    @classmethod
    def generate(cls, n: int) -> "Curve":
        _check_generation(n)
        curve = cls()
        for _ in range(n):
            curve = curve.next()
        return curve

    def next(self) -> "Curve":
        generation = None if self._generation is None else self._generation + 1
        curve = Curve._grown(rewrite(self._symbols), generation)
        logger.debug("Generation %s: %d symbols", generation, len(curve._symbols))
        return curve

    @property
    def generation(self) -> int | None:
        return self._generation

    @property
    def symbols(self) -> tuple[Symbol, ...]:
        return self._symbols

    def segment_count(self) -> int:
        return sum(1 for s in self._symbols if s.is_draw)

    def turn_count(self) -> int:
        return len(self._symbols) - self.segment_count()

    def points(self) -> Points:
        return Points(self._symbols)

    def bounds(self) -> Bounds:
        return fold_bounds(self.points())

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self):
        return iter(self._symbols)

    def __getitem__(self, index):
        return self._symbols[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Curve):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __repr__(self) -> str:
        text = render(self._symbols[:30])
        if len(self._symbols) > 30:
            text += "..."
        return f"Curve(generation={self._generation}, symbols={text!r})"


def _check_generation(n) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidGenerationError(
            f"generation count must be an integer, got {type(n).__name__}"
        )
    if n < 0:
        raise InvalidGenerationError(f"generation count must be >= 0, got {n}")


def generate(n: int) -> Curve:
    """Rewrite the axiom ``n`` times.

    Parameters:
        n (int): The number of generations, at least 0

    Returns:
        Curve: The expanded curve

    Raises:
        InvalidGenerationError: If ``n`` is negative or not an integer
    """
    return Curve.generate(n)


def segment_count(curve) -> int:
    """Number of draw symbols, i.e. points the turtle will emit."""
    if isinstance(curve, Curve):
        return curve.segment_count()
    return sum(1 for s in curve if s.is_draw)
