"""
SVG renderer - strokes to an SVG 1.1 document

Path geometry comes from the same densify/scale step as the raster renderer,
so rasterizing the SVG at its own size reproduces the PNG export.
"""

import io
import logging
from typing import Iterable, Optional, Sequence

import svgwrite

from ..core.densify import to_pixel_polyline, stroke_pixel_width
from ..core.models import Color, Stroke

logger = logging.getLogger(__name__)


def format_number(value: float) -> str:
    """Compact decimal: at most 4 places, no trailing zeros (3.0720 -> '3.072')."""
    text = f"{value:.4f}".rstrip('0').rstrip('.')
    return '0' if text in ('', '-0') else text


def format_path_data(vertices: Iterable[Sequence[float]]) -> str:
    """
    Build absolute path data: 'M x0 y0 L x1 y1 L x2 y2 ...'.

    Args:
        vertices: Pixel-space [x, y] pairs
    """
    commands = []
    for x, y in vertices:
        command = 'L' if commands else 'M'
        commands.append(f"{command} {format_number(x)} {format_number(y)}")
    return ' '.join(commands)


def render_svg(
    strokes: Sequence[Stroke],
    width: int,
    height: int,
    background_color: Optional[Color] = None
) -> str:
    """
    Render strokes to SVG document text.

    Args:
        strokes: Strokes to draw
        width: Document width in pixels
        height: Document height in pixels
        background_color: Fill for a full-canvas rect (alpha dropped), or None

    Returns:
        UTF-8 XML document as a string
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Render size must be positive, got {width}x{height}")

    # 'vector-effect' is not in the validator's SVG 1.1 tables, so no debug checks
    dwg = svgwrite.Drawing(size=(width, height), profile='full', debug=False)
    dwg['viewBox'] = f"0 0 {width} {height}"
    dwg['shape-rendering'] = 'geometricPrecision'
    # Background rect must be the first child; nothing here uses <defs>
    dwg.elements.remove(dwg.defs)

    if background_color is not None:
        dwg.add(dwg.rect(insert=(0, 0), size=('100%', '100%'), fill=background_color.hex_rgb))

    for stroke in strokes:
        polyline = to_pixel_polyline(stroke.points, width, height)
        if len(polyline) < 2:
            logger.debug(f"Skipping stroke with {len(stroke.points)} point(s)")
            continue

        path = dwg.path(d=format_path_data(polyline.tolist()))
        path.fill('none')
        path.stroke(
            color=stroke.color.hex_rgb,
            width=format_number(stroke_pixel_width(stroke, width, height)),
            linecap='round',
            linejoin='round'
        )
        path['vector-effect'] = 'non-scaling-stroke'
        dwg.add(path)

    out = io.StringIO()
    dwg.write(out)
    return out.getvalue()


__all__ = [
    'format_number',
    'format_path_data',
    'render_svg',
]
