"""
Canvas Export

Freehand strokes in normalized coordinates, exported as PNG or SVG at any
square resolution with identical geometry.
"""

__version__ = "1.0.0"

from .config import Config
from .core import Drawing, Stroke, Point, Color, densify
from .renderers import render_raster, render_svg, encode_png

__all__ = [
    'Config',
    'Drawing',
    'Stroke',
    'Point',
    'Color',
    'densify',
    'render_raster',
    'render_svg',
    'encode_png',
]
