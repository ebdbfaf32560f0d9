"""Pixel rendering: one coloured pixel per emitted point."""

import math

import numpy as np
from PIL import Image

from .bounds import Bounds, array_bounds
from .color import segment_colors
from .turtle import path_array


def canvas_size(bounds: Bounds) -> tuple[int, int]:
    """Return ``(width, height)`` in pixels large enough for ``bounds``."""
    width = math.ceil(bounds.width) + 1
    height = math.ceil(bounds.height) + 1
    return width, height


def pixel_coordinates(path: np.ndarray, bounds: Bounds) -> tuple[np.ndarray, np.ndarray]:
    """Shift ``path`` so the box corner sits at pixel (0, 0) and floor it.

    Returns:
        tuple[np.ndarray, np.ndarray]: Integer columns and rows
    """
    cols = np.floor(path[:, 0] - bounds.min_x).astype(np.int64)
    rows = np.floor(path[:, 1] - bounds.min_y).astype(np.int64)
    return cols, rows


def rasterize(curve, path: np.ndarray | None = None) -> np.ndarray:
    """Draw ``curve`` into a transparent RGBA buffer.

    Parameters:
        curve (Iterable[Symbol]): The curve to draw
        path (np.ndarray | None): Precomputed ``path_array(curve)``

    Returns:
        np.ndarray: ``(height, width, 4)`` uint8 pixels
    """
    if path is None:
        path = path_array(curve)
    bounds = array_bounds(path)
    width, height = canvas_size(bounds)
    image = np.zeros((height, width, 4), dtype=np.uint8)
    if len(path) == 0:
        return image

    cols, rows = pixel_coordinates(path, bounds)
    colors = segment_colors(len(path))
    # Later points overwrite earlier ones on the same pixel.
    flat = rows * width + cols
    _, last = np.unique(flat[::-1], return_index=True)
    keep = len(flat) - 1 - last
    image[rows[keep], cols[keep]] = colors[keep]
    return image


def save_png(image: np.ndarray, path) -> None:
    Image.fromarray(image).save(str(path), format="PNG")
