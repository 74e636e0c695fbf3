"""
Path densification and pixel-space conversion.

Both renderers connect consecutive points with straight segments. Points
captured at screen resolution can be far apart once scaled to a large
export, so extra points are interpolated until consecutive samples are at
most `max_gap_px` output pixels apart.
"""

import math
from typing import List, Sequence

import numpy as np

from ..config import Config
from .models import Point, Stroke


def densify(
    points: Sequence[Point],
    width: int,
    height: int,
    max_gap_px: float = Config.MAX_GAP_PX
) -> List[Point]:
    """
    Insert evenly spaced points between samples that are too far apart.

    The pixel distance of each segment is measured with x scaled by width and
    y scaled by height; the output stays in normalized coordinates.

    Args:
        points: Normalized stroke points
        width: Target width in pixels
        height: Target height in pixels
        max_gap_px: Largest allowed pixel distance between consecutive points

    Returns:
        New list of points; the input unchanged when it has fewer than 2 points
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Render size must be positive, got {width}x{height}")
    if max_gap_px <= 0:
        raise ValueError(f"max_gap_px must be positive, got {max_gap_px}")

    if len(points) < 2:
        return list(points)

    out: List[Point] = [Point(points[0][0], points[0][1])]
    for a, b in zip(points, points[1:]):
        dx = b[0] - a[0]
        dy = b[1] - a[1]
        dist_px = math.hypot(dx * width, dy * height)
        steps = int(math.floor(dist_px / max_gap_px))
        for s in range(1, steps + 1):
            t = s / (steps + 1)
            out.append(Point(a[0] + dx * t, a[1] + dy * t))
        out.append(Point(b[0], b[1]))
    return out


def to_pixel_polyline(
    points: Sequence[Point],
    width: int,
    height: int,
    max_gap_px: float = Config.MAX_GAP_PX
) -> np.ndarray:
    """
    Densify points and scale them to pixel coordinates.

    This is the one geometry path shared by the raster and SVG renderers.

    Returns:
        Array of shape (N, 2) with [x_px, y_px] rows
    """
    dense = densify(points, width, height, max_gap_px)
    if not dense:
        return np.empty((0, 2), dtype=np.float64)
    return np.asarray(dense, dtype=np.float64) * np.array([width, height], dtype=np.float64)


def stroke_pixel_width(stroke: Stroke, width: int, height: int) -> float:
    """Stroke width in pixels for a render target."""
    return stroke.width_fraction * min(width, height)


__all__ = [
    'densify',
    'to_pixel_polyline',
    'stroke_pixel_width',
]
