"""Stroke model, drawing container and path densification"""

from .models import (
    Color, BLACK, WHITE, TRANSPARENT,
    Point, Stroke, BackgroundMode, ExportFormat, ExportTarget
)
from .densify import densify, to_pixel_polyline, stroke_pixel_width
from .drawing import Drawing

__all__ = [
    'Color',
    'BLACK',
    'WHITE',
    'TRANSPARENT',
    'Point',
    'Stroke',
    'BackgroundMode',
    'ExportFormat',
    'ExportTarget',
    'densify',
    'to_pixel_polyline',
    'stroke_pixel_width',
    'Drawing',
]
