"""Hue ramp along the curve.

Colours sweep 7 * 180 degrees of hue starting from 220, so a full curve
wraps the colour wheel three and a half times.
"""

import numpy as np

HUE_START = 220.0
HUE_SPAN = 7.0 * 180.0


def hue_to_rgb(hue):
    """Fully saturated colour for ``hue`` in degrees.

    Parameters:
        hue (float | np.ndarray): Hue in ``[0, 360)``

    Returns:
        np.ndarray: ``(..., 3)`` channels in ``[0, 1]``
    """
    t = np.asarray(hue, dtype=np.float64) / 60.0
    c = t - np.floor(t)
    i = 1.0 - c
    one = np.ones_like(t)
    zero = np.zeros_like(t)
    sextant = np.clip(np.floor(t).astype(np.int64), 0, 5)
    choices = [
        (one, c, zero),
        (i, one, zero),
        (zero, one, c),
        (zero, i, one),
        (c, zero, one),
        (one, zero, i),
    ]
    channels = [
        np.choose(sextant, [rgb[k] for rgb in choices]) for k in range(3)
    ]
    return np.stack(channels, axis=-1)


def segment_hues(segments: int) -> np.ndarray:
    if segments == 0:
        return np.zeros(0)
    idx = np.arange(segments, dtype=np.float64)
    return (HUE_START + idx * (HUE_SPAN / segments)) % 360.0


def segment_colors(segments: int) -> np.ndarray:
    """RGBA colour for every segment of a curve.

    Parameters:
        segments (int): The number of segments

    Returns:
        np.ndarray: ``(segments, 4)`` uint8 array, alpha always 255
    """
    rgb = hue_to_rgb(segment_hues(segments))
    out = np.empty((segments, 4), dtype=np.uint8)
    out[:, :3] = (rgb * 255.0).astype(np.uint8)
    out[:, 3] = 255
    return out
