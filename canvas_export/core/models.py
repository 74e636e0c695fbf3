"""
Stroke data model

Strokes are stored in normalized coordinates (0-1 of canvas width/height)
so the same drawing exports crisply at any resolution. Stroke width is a
fraction of min(width, height) of the render target.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Optional, Tuple

from ..config import Config
from ..utils.color_utils import hex_to_rgba, rgb_to_hex


@dataclass(frozen=True)
class Color:
    """RGBA color with 0-255 integer channels (alpha defaults to opaque)."""
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self):
        for name in ('r', 'g', 'b', 'a'):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"Color channel {name}={value} outside 0-255")

    @classmethod
    def from_hex(cls, hex_color: str) -> 'Color':
        return cls(*hex_to_rgba(hex_color))

    @property
    def hex_rgb(self) -> str:
        """'#RRGGBB' encoding; alpha is dropped."""
        return rgb_to_hex(self.r, self.g, self.b)

    @property
    def is_opaque(self) -> bool:
        return self.a == 255

    def opaque(self) -> 'Color':
        """Same color with full alpha."""
        if self.is_opaque:
            return self
        return Color(self.r, self.g, self.b)


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
TRANSPARENT = Color(0, 0, 0, 0)


class Point(NamedTuple):
    """Position as a fraction of canvas width (x) and height (y)."""
    x: float
    y: float

    def clamped(self) -> 'Point':
        """Point pinned into the unit square."""
        return Point(min(1.0, max(0.0, self.x)), min(1.0, max(0.0, self.y)))


@dataclass(frozen=True)
class Stroke:
    """
    One continuous freehand gesture.

    Attributes:
        points: Ordered points in drawing order (normalized coordinates)
        width_fraction: Line width as a fraction of min(width, height)
        color: Stroke color
    """
    points: Tuple[Point, ...] = ()
    width_fraction: float = Config.DEFAULT_WIDTH_FRACTION
    color: Color = field(default=BLACK)

    def __post_init__(self):
        if self.width_fraction <= 0:
            raise ValueError(f"width_fraction must be positive, got {self.width_fraction}")
        # Accept any sequence of pairs; store an immutable tuple of Points
        object.__setattr__(self, 'points', tuple(Point(float(p[0]), float(p[1])) for p in self.points))

    @property
    def is_drawable(self) -> bool:
        """A stroke needs at least two points to produce a line."""
        return len(self.points) >= 2


class BackgroundMode(Enum):
    """Export background policy."""
    WHITE = 'white'
    TRANSPARENT = 'transparent'

    @property
    def color(self) -> Optional[Color]:
        """Fill color, or None for a transparent background."""
        if self is BackgroundMode.WHITE:
            return WHITE
        return None


class ExportFormat(Enum):
    """Output file formats: (extension, MIME type)."""
    PNG = ('png', 'image/png')
    SVG = ('svg', 'image/svg+xml')

    @property
    def extension(self) -> str:
        return self.value[0]

    @property
    def mime_type(self) -> str:
        return self.value[1]


@dataclass(frozen=True)
class ExportTarget:
    """Square export resolution plus background policy."""
    size: int = Config.DEFAULT_EXPORT_SIZE
    background: BackgroundMode = BackgroundMode.WHITE

    def __post_init__(self):
        if not Config.is_valid_export_size(self.size):
            raise ValueError(
                f"Unsupported export size {self.size}. Supported: {list(Config.EXPORT_SIZES)}"
            )

    @property
    def width(self) -> int:
        return self.size

    @property
    def height(self) -> int:
        return self.size

    @property
    def background_color(self) -> Optional[Color]:
        return self.background.color


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
]
