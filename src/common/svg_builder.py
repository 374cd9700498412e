from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

import svgwrite

from svgcharts.color import Color
from svgcharts.components import Circle, Line, Path, Polygon, Polyline, Primitive, Rect, Text
from svgcharts.util import fmt

ROOT_GROUP_ID = "chart_root"

DEFAULT_FONT_FAMILY = "Arial, sans-serif"


def _paint(kwargs: dict[str, Any], key: str, color: Color | None) -> None:
    if color is None or color.is_transparent():
        kwargs[key] = "none"
        return
    kwargs[key] = color.hex()
    if color.a < 255:
        kwargs[f"{key}_opacity"] = color.opacity


def path_data(path: Path) -> str:
    if not path.segments:
        return ""
    first = path.segments[0].p0
    parts = [f"M {fmt(first.x)} {fmt(first.y)}"]
    for segment in path.segments:
        parts.append(
            "C {} {} {} {} {} {}".format(
                fmt(segment.p1.x),
                fmt(segment.p1.y),
                fmt(segment.p2.x),
                fmt(segment.p2.y),
                fmt(segment.p3.x),
                fmt(segment.p3.y),
            )
        )
    if path.baseline is not None:
        last = path.segments[-1].p3
        parts.append(f"L {fmt(last.x)} {fmt(path.baseline)}")
        parts.append(f"L {fmt(first.x)} {fmt(path.baseline)} Z")
    return " ".join(parts)


@dataclass
class SvgBuilder:
    drawing: svgwrite.Drawing
    root: svgwrite.container.Group
    width: int
    height: int

    @classmethod
    def create(cls, width: float, height: float) -> "SvgBuilder":
        drawing = svgwrite.Drawing(size=(fmt(width), fmt(height)), profile="full")
        root = drawing.g(id=ROOT_GROUP_ID)
        drawing.add(root)
        return cls(drawing=drawing, root=root, width=int(width), height=int(height))

    def draw_all(self, primitives: Iterable[Primitive]) -> None:
        for primitive in primitives:
            self.draw(primitive)

    def draw(self, primitive: Primitive) -> None:
        if isinstance(primitive, Rect):
            self._add_rect(primitive)
        elif isinstance(primitive, Line):
            self._add_line(primitive)
        elif isinstance(primitive, Polyline):
            self._add_polyline(primitive)
        elif isinstance(primitive, Polygon):
            self._add_polygon(primitive)
        elif isinstance(primitive, Path):
            self._add_path(primitive)
        elif isinstance(primitive, Circle):
            self._add_circle(primitive)
        elif isinstance(primitive, Text):
            self._add_text(primitive)
        else:
            raise TypeError(f"Unsupported drawing primitive: {type(primitive).__name__}")

    def _add_rect(self, rect: Rect) -> None:
        kwargs: dict[str, Any] = {
            "insert": (fmt(rect.left), fmt(rect.top)),
            "size": (fmt(rect.width), fmt(rect.height)),
        }
        _paint(kwargs, "fill", rect.fill)
        if rect.stroke is not None and not rect.stroke.is_transparent() and rect.stroke_width > 0:
            _paint(kwargs, "stroke", rect.stroke)
            kwargs["stroke_width"] = fmt(rect.stroke_width)
        if rect.rx > 0:
            kwargs["rx"] = fmt(rect.rx)
            kwargs["ry"] = fmt(rect.rx)
        self.root.add(self.drawing.rect(**kwargs))

    def _add_line(self, line: Line) -> None:
        kwargs: dict[str, Any] = {
            "start": (fmt(line.x1), fmt(line.y1)),
            "end": (fmt(line.x2), fmt(line.y2)),
            "stroke_width": fmt(line.stroke_width),
        }
        _paint(kwargs, "stroke", line.stroke)
        self.root.add(self.drawing.line(**kwargs))

    def _add_polyline(self, polyline: Polyline) -> None:
        kwargs: dict[str, Any] = {
            "points": [(fmt(p.x), fmt(p.y)) for p in polyline.points],
            "fill": "none",
            "stroke_width": fmt(polyline.stroke_width),
        }
        _paint(kwargs, "stroke", polyline.stroke)
        self.root.add(self.drawing.polyline(**kwargs))

    def _add_polygon(self, polygon: Polygon) -> None:
        kwargs: dict[str, Any] = {"points": [(fmt(p.x), fmt(p.y)) for p in polygon.points]}
        _paint(kwargs, "fill", polygon.fill)
        self.root.add(self.drawing.polygon(**kwargs))

    def _add_path(self, path: Path) -> None:
        data = path_data(path)
        if not data:
            return
        kwargs: dict[str, Any] = {"d": data}
        _paint(kwargs, "fill", path.fill)
        if path.stroke is not None:
            _paint(kwargs, "stroke", path.stroke)
            kwargs["stroke_width"] = fmt(path.stroke_width)
        self.root.add(self.drawing.path(**kwargs))

    def _add_circle(self, circle: Circle) -> None:
        kwargs: dict[str, Any] = {
            "center": (fmt(circle.cx), fmt(circle.cy)),
            "r": fmt(circle.r),
        }
        _paint(kwargs, "fill", circle.fill)
        if circle.stroke is not None:
            _paint(kwargs, "stroke", circle.stroke)
            kwargs["stroke_width"] = fmt(circle.stroke_width)
        self.root.add(self.drawing.circle(**kwargs))

    def _add_text(self, text: Text) -> None:
        kwargs: dict[str, Any] = {
            "insert": (fmt(text.x), fmt(text.y)),
            "font_family": text.font_family or DEFAULT_FONT_FAMILY,
            "font_size": fmt(text.font_size),
        }
        _paint(kwargs, "fill", text.font_color or Color.black())
        if text.font_weight:
            kwargs["font_weight"] = text.font_weight
        if text.rotate:
            kwargs["transform"] = f"rotate({fmt(text.rotate)} {fmt(text.x)} {fmt(text.y)})"
        self.root.add(self.drawing.text(text.text, **kwargs))

    def tostring(self) -> str:
        return self.drawing.tostring()
