"""
DrawingCanvas - freehand drawing surface

Turns left-button drags into strokes on a Drawing:
- press   -> begin stroke
- move    -> append point
- release -> commit stroke
- Escape  -> cancel stroke in progress

Pointer positions are normalized against the widget size and clamped to
the unit square, so strokes do not depend on the on-screen canvas size.
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import QWidget, QSizePolicy
from PyQt6.QtCore import Qt, pyqtSignal, QPointF, QRectF
from PyQt6.QtGui import QPainter, QPen, QColor

from ..core.drawing import Drawing
from ..core.models import Point
from ..renderers.raster_renderer import paint_strokes

logger = logging.getLogger(__name__)


class DrawingCanvas(QWidget):
    """
    Widget that authors a Drawing and previews it.

    The Drawing is owned here; exports read drawing.snapshot().
    """

    # Signals
    drawing_started = pyqtSignal()
    drawing_finished = pyqtSignal()
    drawing_modified = pyqtSignal()

    # Constants
    BACKGROUND_COLOR = '#F7F7F7'
    BORDER_COLOR = '#000000'
    BORDER_WIDTH = 2

    def __init__(self, drawing: Optional[Drawing] = None, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._drawing = drawing or Drawing()

        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        self.setCursor(Qt.CursorShape.CrossCursor)

    @property
    def drawing(self) -> Drawing:
        return self._drawing

    def set_canvas_size(self, size: int):
        """Resize the square drawing surface (strokes rescale with it)."""
        self.setFixedSize(size, size)
        self.update()

    def clear(self):
        """Remove all strokes."""
        self._drawing.clear()
        self.update()
        self.drawing_modified.emit()

    # ==================== Coordinates ====================

    def _screen_to_normalized(self, pos: QPointF) -> Optional[Point]:
        """Convert widget coordinates to a clamped normalized point."""
        if self.width() <= 0 or self.height() <= 0:
            return None
        return Point(pos.x() / self.width(), pos.y() / self.height()).clamped()

    # ==================== Mouse Events ====================

    def mousePressEvent(self, event):
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return

        point = self._screen_to_normalized(event.position())
        if point is None:
            event.ignore()
            return

        self._drawing.begin_stroke(point)
        self.drawing_started.emit()
        self.update()
        event.accept()

    def mouseMoveEvent(self, event):
        if not self._drawing.is_drawing:
            super().mouseMoveEvent(event)
            return

        point = self._screen_to_normalized(event.position())
        if point is not None:
            self._drawing.extend_stroke(point)
            self.update()
        event.accept()

    def mouseReleaseEvent(self, event):
        if self._drawing.is_drawing and event.button() == Qt.MouseButton.LeftButton:
            self._drawing.end_stroke()
            self.update()
            self.drawing_finished.emit()
            self.drawing_modified.emit()
            event.accept()
        else:
            super().mouseReleaseEvent(event)

    def keyPressEvent(self, event):
        if event.key() == Qt.Key.Key_Escape and self._drawing.is_drawing:
            self._drawing.cancel_stroke()
            logger.debug("Stroke cancelled")
            self.update()
            event.accept()
        else:
            super().keyPressEvent(event)

    # ==================== Painting ====================

    def paintEvent(self, event):
        painter = QPainter(self)
        try:
            painter.fillRect(self.rect(), QColor(self.BACKGROUND_COLOR))

            strokes = list(self._drawing.strokes)
            current = self._drawing.current_stroke
            if current is not None:
                strokes.append(current)
            paint_strokes(painter, strokes, self.width(), self.height())

            pen = QPen(QColor(self.BORDER_COLOR), self.BORDER_WIDTH)
            painter.setPen(pen)
            painter.setBrush(Qt.BrushStyle.NoBrush)
            inset = self.BORDER_WIDTH / 2
            painter.drawRect(QRectF(self.rect()).adjusted(inset, inset, -inset, -inset))
        finally:
            painter.end()


__all__ = ['DrawingCanvas']
