"""Raster (PNG) and vector (SVG) renderers sharing one geometry path"""

from .raster_renderer import render_raster, paint_strokes, encode_png
from .svg_renderer import render_svg, format_path_data

__all__ = [
    'render_raster',
    'paint_strokes',
    'encode_png',
    'render_svg',
    'format_path_data',
]
