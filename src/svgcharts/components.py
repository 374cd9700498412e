"""Drawing primitives and the compound requests a Canvas expands into them.

Primitives (``Rect``, ``Line``, ``Polyline``, ``Polygon``, ``Path``,
``Circle``, ``Text``) are what ends up in the command log, always in absolute
coordinates. ``Grid``, ``Axis``, ``Legend`` and the line requests are inputs
to Canvas operations and never stored.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from svgcharts.color import Color
from svgcharts.smooth import BezierSegment
from svgcharts.util import Align, Point, Position

DEFAULT_TICK_LENGTH = 5.0


def _shift(points: tuple[Point, ...], dx: float, dy: float) -> tuple[Point, ...]:
    return tuple(Point(p.x + dx, p.y + dy) for p in points)


@dataclass(frozen=True)
class Rect:
    left: float
    top: float
    width: float
    height: float
    fill: Color | None = None
    stroke: Color | None = None
    stroke_width: float = 0.0
    rx: float = 0.0

    def translate(self, dx: float, dy: float) -> "Rect":
        return replace(self, left=self.left + dx, top=self.top + dy)


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: Color
    stroke_width: float = 1.0

    def translate(self, dx: float, dy: float) -> "Line":
        return replace(self, x1=self.x1 + dx, y1=self.y1 + dy, x2=self.x2 + dx, y2=self.y2 + dy)


@dataclass(frozen=True)
class Polyline:
    points: tuple[Point, ...]
    stroke: Color
    stroke_width: float = 1.0

    def translate(self, dx: float, dy: float) -> "Polyline":
        return replace(self, points=_shift(self.points, dx, dy))


@dataclass(frozen=True)
class Polygon:
    points: tuple[Point, ...]
    fill: Color

    def translate(self, dx: float, dy: float) -> "Polygon":
        return replace(self, points=_shift(self.points, dx, dy))


@dataclass(frozen=True)
class Path:
    """Chain of cubic segments; closed down to ``baseline`` when set."""

    segments: tuple[BezierSegment, ...]
    stroke: Color | None = None
    stroke_width: float = 0.0
    fill: Color | None = None
    baseline: float | None = None

    def translate(self, dx: float, dy: float) -> "Path":
        return replace(
            self,
            segments=tuple(segment.translate(dx, dy) for segment in self.segments),
            baseline=None if self.baseline is None else self.baseline + dy,
        )


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    r: float
    stroke: Color | None = None
    stroke_width: float = 1.0
    fill: Color | None = None

    def translate(self, dx: float, dy: float) -> "Circle":
        return replace(self, cx=self.cx + dx, cy=self.cy + dy)


@dataclass(frozen=True)
class Text:
    text: str
    x: float = 0.0
    y: float = 0.0
    font_family: str = ""
    font_size: float = 14.0
    font_color: Color | None = None
    font_weight: str | None = None
    rotate: float = 0.0

    def translate(self, dx: float, dy: float) -> "Text":
        return replace(self, x=self.x + dx, y=self.y + dy)


Primitive = Rect | Line | Polyline | Polygon | Path | Circle | Text


@dataclass(frozen=True)
class Grid:
    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    color: Color | None = None
    stroke_width: float = 1.0
    verticals: int = 0
    hidden_verticals: tuple[int, ...] = ()
    horizontals: int = 0
    hidden_horizontals: tuple[int, ...] = ()


@dataclass(frozen=True)
class Axis:
    data: list[str] = field(default_factory=list)
    position: Position = Position.BOTTOM
    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0
    split_number: int = 0
    font_family: str = ""
    font_size: float = 14.0
    font_color: Color | None = None
    stroke_color: Color | None = None
    stroke_width: float = 1.0
    tick_length: float = DEFAULT_TICK_LENGTH
    name_align: Align = Align.CENTER
    name_gap: float = 5.0
    name_rotate: float = 0.0
    formatter: str | None = None


class LegendCategory(str, Enum):
    NORMAL = "normal"
    RECT = "rect"


@dataclass(frozen=True)
class Legend:
    text: str
    font_family: str
    font_size: float
    font_color: Color | None = None
    stroke_color: Color | None = None
    fill: Color | None = None
    left: float = 0.0
    top: float = 0.0
    category: LegendCategory = LegendCategory.NORMAL


@dataclass(frozen=True)
class Symbol:
    """Circle stamped on every data point; ``fill`` is usually the background."""

    radius: float
    fill: Color | None = None


@dataclass(frozen=True)
class SeriesLine:
    points: list[Point]
    color: Color | None = None
    stroke_width: float = 1.0
    symbol: Symbol | None = None


@dataclass(frozen=True)
class SeriesFill:
    points: list[Point]
    fill: Color
    bottom: float
