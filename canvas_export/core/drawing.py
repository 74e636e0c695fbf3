"""
Drawing - committed strokes plus the stroke currently being authored

Lifecycle of a stroke:
    begin_stroke()  -> in progress (gesture start)
    extend_stroke() -> point appended (gesture move)
    end_stroke()    -> committed (gesture end)
    cancel_stroke() -> discarded (gesture cancel)

Committed strokes are immutable. Exports read `snapshot()`, an immutable
tuple copied at call time, so a stroke started while an export is running
never shows up inside that export.
"""

import logging
from typing import List, Optional, Tuple

from ..config import Config
from .models import Color, Point, Stroke

logger = logging.getLogger(__name__)


class Drawing:
    """
    Ordered, append-only stroke container owned by the authoring session.

    Mutated from the UI thread only; other threads read snapshots.

    Usage:
        drawing = Drawing()
        drawing.begin_stroke(Point(0.1, 0.1))
        drawing.extend_stroke(Point(0.9, 0.9))
        drawing.end_stroke()
        strokes = drawing.snapshot()
    """

    def __init__(
        self,
        width_fraction: float = Config.DEFAULT_WIDTH_FRACTION,
        color: Optional[Color] = None
    ):
        self._width_fraction = width_fraction
        self._color = color or Color.from_hex(Config.DEFAULT_STROKE_COLOR)

        self._strokes: Tuple[Stroke, ...] = ()

        # In-progress stroke state
        self._current_points: Optional[List[Point]] = None
        self._current_width = width_fraction
        self._current_color = self._color

    # ==================== Properties ====================

    @property
    def strokes(self) -> Tuple[Stroke, ...]:
        """Committed strokes in drawing order."""
        return self._strokes

    @property
    def current_stroke(self) -> Optional[Stroke]:
        """In-progress stroke as an immutable Stroke, or None."""
        if self._current_points is None:
            return None
        return Stroke(tuple(self._current_points), self._current_width, self._current_color)

    @property
    def is_drawing(self) -> bool:
        return self._current_points is not None

    @property
    def stroke_count(self) -> int:
        return len(self._strokes)

    def is_empty(self) -> bool:
        """True when there are no committed strokes."""
        return not self._strokes

    def snapshot(self) -> Tuple[Stroke, ...]:
        """Immutable copy of the committed strokes for rendering."""
        return self._strokes

    # ==================== Authoring ====================

    def begin_stroke(
        self,
        point: Point,
        width_fraction: Optional[float] = None,
        color: Optional[Color] = None
    ):
        """Start a new stroke; an unfinished one is discarded."""
        if self._current_points is not None:
            logger.debug("New stroke started before previous ended; discarding previous")

        width = self._width_fraction if width_fraction is None else width_fraction
        if width <= 0:
            raise ValueError(f"width_fraction must be positive, got {width}")

        self._current_points = [Point(*point)]
        self._current_width = width
        self._current_color = color or self._color

    def extend_stroke(self, point: Point):
        """Append a point to the in-progress stroke (ignored when none)."""
        if self._current_points is None:
            return
        self._current_points.append(Point(*point))

    def end_stroke(self) -> Optional[Stroke]:
        """Commit the in-progress stroke and return it."""
        stroke = self.current_stroke
        self._current_points = None
        if stroke is None:
            return None

        # Rebinding keeps previously handed out snapshots unchanged
        self._strokes = self._strokes + (stroke,)
        logger.debug(f"Committed stroke with {len(stroke.points)} points")
        return stroke

    def cancel_stroke(self):
        """Discard the in-progress stroke."""
        self._current_points = None

    def clear(self):
        """Remove all strokes, including the one in progress."""
        self._strokes = ()
        self._current_points = None
        logger.debug("Drawing cleared")


__all__ = ['Drawing']
