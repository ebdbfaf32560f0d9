from .bounds import Bounds, array_bounds, bounds, fold_bounds
from .curve import AXIOM, Curve, generate, rewrite, segment_count
from .errors import GosperError, InvalidGenerationError
from .symbols import PRODUCTIONS, RULE_A, RULE_B, Symbol
from .turtle import Points, TurtleState, path_array, points

__all__ = [
    "AXIOM",
    "Bounds",
    "Curve",
    "GosperError",
    "InvalidGenerationError",
    "PRODUCTIONS",
    "Points",
    "RULE_A",
    "RULE_B",
    "Symbol",
    "TurtleState",
    "array_bounds",
    "bounds",
    "fold_bounds",
    "generate",
    "path_array",
    "points",
    "rewrite",
    "segment_count",
]
