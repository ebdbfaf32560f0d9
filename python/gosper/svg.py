"""SVG rendering of a traced Gosper curve."""

import numpy as np

from .turtle import path_array

BACKGROUND = "#101215"
FOREGROUND = "#FFC857"


def fit_to_viewbox(points, size: int, margin: float = 32.0) -> np.ndarray:
    """Fit the points to the SVG viewbox.

    Parameters:
        points (np.ndarray | list[tuple[float, float]]): The points to fit
        size (int): The size of the SVG canvas
        margin (float): The margin to apply (default 32.0)

    Returns:
        np.ndarray: The transformed ``(N, 2)`` points
    """
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    if len(pts) == 0:
        return pts
    lo = pts.min(axis=0)
    hi = pts.max(axis=0)
    extent = max(1e-9, float((hi - lo).max()))
    scale = (size - 2 * margin) / extent
    center = (lo + hi) / 2.0
    out = (pts - center) * scale + size / 2.0
    out[:, 1] = size - out[:, 1]  # flip Y for SVG
    return out


def svg_path_from_points(points) -> str:
    """Generate an SVG path string from a list of points.

    Parameters:
        points (np.ndarray | list[tuple[float, float]]): The points to join

    Returns:
        str: The SVG path string
    """

    def fmt(v: float) -> str:
        return f"{v:.3f}".rstrip("0").rstrip(".")

    if len(points) == 0:
        return ""
    (x0, y0), rest = points[0], points[1:]
    cmds = [f"M {fmt(x0)} {fmt(y0)}"]
    for x, y in rest:
        cmds.append(f"L {fmt(x)} {fmt(y)}")
    return " ".join(cmds)


def make_svg(path_d: str, size: int, stroke: float) -> str:
    """Generate an SVG document from the path data.

    Parameters:
        path_d (str): The SVG path data
        size (int): The size of the SVG canvas
        stroke (float): The stroke width for the SVG path

    Returns:
        str: The SVG string
    """
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<svg width="{size}" height="{size}" viewBox="0 0 {size} {size}"
     xmlns="http://www.w3.org/2000/svg" version="1.1">
  <rect x="0" y="0" width="{size}" height="{size}" fill="{BACKGROUND}" />
  <path d="{path_d}" fill="none" stroke="{FOREGROUND}" stroke-width="{stroke}"
        stroke-linecap="round" stroke-linejoin="round" />
</svg>"""


def curve_to_svg(curve, size: int = 1024, stroke: float = 1.6, path=None) -> str:
    """Render ``curve`` as a single polyline starting at the origin."""
    if path is None:
        path = path_array(curve)
    pts = np.vstack([np.zeros((1, 2)), path])
    return make_svg(svg_path_from_points(fit_to_viewbox(pts, size)), size, stroke)
