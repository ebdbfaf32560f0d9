"""Axis-aligned bounding box of a traced curve.

The box is seeded at zero in every direction, so the origin the turtle
starts from is always inside it even though it is never emitted as a point.
"""

from typing import NamedTuple

import numpy as np

from .turtle import Points


class Bounds(NamedTuple):
    max_y: float = 0.0
    max_x: float = 0.0
    min_y: float = 0.0
    min_x: float = 0.0

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def contains(self, x: float, y: float) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y


def fold_bounds(points) -> Bounds:
    """Reduce a point sequence to its bounds in a single pass.

    Parameters:
        points (Iterable[tuple[float, float]]): The points to fold in

    Returns:
        Bounds: The box, all zeros for an empty sequence
    """
    max_y = max_x = min_y = min_x = 0.0
    for x, y in points:
        max_y = max(max_y, y)
        max_x = max(max_x, x)
        min_y = min(min_y, y)
        min_x = min(min_x, x)
    return Bounds(max_y, max_x, min_y, min_x)


def bounds(curve) -> Bounds:
    """Bounds of the points traced by ``curve``."""
    return fold_bounds(Points(curve))


def array_bounds(path: np.ndarray) -> Bounds:
    """Bounds of an ``(N, 2)`` path as returned by ``path_array``."""
    if len(path) == 0:
        return Bounds()
    xs, ys = path[:, 0], path[:, 1]
    return Bounds(
        max(0.0, float(ys.max())),
        max(0.0, float(xs.max())),
        min(0.0, float(ys.min())),
        min(0.0, float(xs.min())),
    )
