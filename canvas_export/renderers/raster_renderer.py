"""
Raster renderer - strokes to an anti-aliased ARGB image

Normalized stroke points are densified, scaled by the output width/height
and stroked with round caps and joins. Stroke width is the stroke's
width_fraction times min(width, height).
"""

import logging
from typing import Optional, Sequence

from PyQt6.QtCore import Qt, QPointF, QBuffer, QIODevice
from PyQt6.QtGui import QImage, QPainter, QColor, QPen, QPainterPath

from ..core.densify import to_pixel_polyline, stroke_pixel_width
from ..core.models import Color, Stroke

logger = logging.getLogger(__name__)


def to_qcolor(color: Color) -> QColor:
    return QColor(color.r, color.g, color.b, color.a)


def paint_strokes(
    painter: QPainter,
    strokes: Sequence[Stroke],
    width: int,
    height: int
):
    """
    Stroke each polyline onto an active painter, in list order.

    Used for both export rendering and on-screen preview.

    Args:
        painter: Active QPainter
        strokes: Strokes in drawing order (later ones paint over earlier ones)
        width: Target width in pixels
        height: Target height in pixels
    """
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    painter.setBrush(Qt.BrushStyle.NoBrush)

    for stroke in strokes:
        polyline = to_pixel_polyline(stroke.points, width, height)
        if len(polyline) < 2:
            logger.debug(f"Skipping stroke with {len(stroke.points)} point(s)")
            continue

        pen = QPen(to_qcolor(stroke.color), stroke_pixel_width(stroke, width, height))
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
        painter.setPen(pen)

        vertices = polyline.tolist()
        if (polyline == polyline[0]).all():
            # All vertices coincide: a zero-length path strokes nothing, draw the round cap
            painter.drawPoint(QPointF(vertices[0][0], vertices[0][1]))
            continue

        path = QPainterPath()
        path.moveTo(QPointF(vertices[0][0], vertices[0][1]))
        for x, y in vertices[1:]:
            path.lineTo(QPointF(x, y))
        painter.drawPath(path)


def render_raster(
    strokes: Sequence[Stroke],
    width: int,
    height: int,
    background_color: Optional[Color] = None
) -> QImage:
    """
    Rasterize strokes onto a new image.

    Args:
        strokes: Strokes to draw
        width: Image width in pixels
        height: Image height in pixels
        background_color: Opaque fill color, or None for transparency

    Returns:
        ARGB32 QImage of exactly width x height
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Render size must be positive, got {width}x{height}")

    image = QImage(width, height, QImage.Format.Format_ARGB32)
    if background_color is not None:
        image.fill(to_qcolor(background_color.opaque()))
    else:
        image.fill(QColor(0, 0, 0, 0))  # Transparent

    painter = QPainter(image)
    try:
        paint_strokes(painter, strokes, width, height)
    finally:
        painter.end()

    return image


def encode_png(image: QImage) -> bytes:
    """
    Encode an image as lossless PNG.

    Raises:
        OSError: If Qt fails to encode the image
    """
    buffer = QBuffer()
    buffer.open(QIODevice.OpenModeFlag.WriteOnly)
    try:
        if not image.save(buffer, 'PNG'):
            raise OSError("PNG encoding failed")
        return buffer.data().data()
    finally:
        buffer.close()


__all__ = [
    'to_qcolor',
    'paint_strokes',
    'render_raster',
    'encode_png',
]
