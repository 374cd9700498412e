from __future__ import annotations

import logging
from typing import Sequence

from common.svg_builder import SvgBuilder
from svgcharts.color import Color
from svgcharts.components import (
    Axis,
    Circle,
    Grid,
    Legend,
    LegendCategory,
    Line,
    Path,
    Polygon,
    Polyline,
    Primitive,
    Rect,
    SeriesFill,
    SeriesLine,
    Symbol,
    Text,
)
from svgcharts.errors import MeasurementError
from svgcharts.legend import LEGEND_MARKER_RADIUS, LEGEND_TEXT_MARGIN, LEGEND_WIDTH
from svgcharts.measure import TextMeasurer, TextSize, measure_text
from svgcharts.smooth import catmull_rom_segments
from svgcharts.util import Align, Box, Point, Position

LOGGER = logging.getLogger(__name__)


def _visible(color: Color | None) -> bool:
    return color is not None and not color.is_transparent()


class Canvas:
    """Drawing surface with a margin, able to spawn offset child views.

    Only the root canvas creates the command list; children share it and write
    primitives already translated by their accumulated margin.
    """

    def __init__(
        self,
        width: float,
        height: float,
        margin: Box | None = None,
        measurer: TextMeasurer = measure_text,
        commands: list[Primitive] | None = None,
    ) -> None:
        self.full_width = float(width)
        self.full_height = float(height)
        self.margin = margin or Box()
        self.measurer = measurer
        self.commands: list[Primitive] = commands if commands is not None else []

    @property
    def width(self) -> float:
        return self.full_width - self.margin.left - self.margin.right

    @property
    def height(self) -> float:
        return self.full_height - self.margin.top - self.margin.bottom

    def child(self, box: Box) -> "Canvas":
        return Canvas(
            self.full_width,
            self.full_height,
            margin=self.margin.add(box),
            measurer=self.measurer,
            commands=self.commands,
        )

    def _append(self, primitive: Primitive) -> None:
        self.commands.append(primitive.translate(self.margin.left, self.margin.top))

    def measure(self, font_family: str, font_size: float, text: str) -> TextSize:
        try:
            return self.measurer(font_family, font_size, text)
        except MeasurementError as exc:
            LOGGER.debug("Text measurement failed (%s); assuming zero size for %r", exc.code, text)
            return TextSize(width=0.0, height=0.0)

    def rect(self, rect: Rect) -> Box:
        box = Box(rect.left, rect.top, rect.left + rect.width, rect.top + rect.height)
        stroked = _visible(rect.stroke) and rect.stroke_width > 0
        if not _visible(rect.fill) and not stroked:
            return box
        self._append(rect)
        return box

    def line(self, line: Line) -> None:
        if not _visible(line.stroke):
            return
        self._append(line)

    def circle(self, circle: Circle) -> None:
        if not _visible(circle.fill) and not _visible(circle.stroke):
            return
        self._append(circle)

    def text(self, text: Text) -> Box:
        """Draw text with its baseline at ``text.y``; returns the drawn box."""
        if not text.text:
            return Box(text.x, text.y, text.x, text.y)
        size = self.measure(text.font_family, text.font_size, text.text)
        self._append(text)
        return Box(text.x, text.y - size.height, text.x + size.width, text.y)

    def grid(self, grid: Grid) -> None:
        if not _visible(grid.color):
            return
        color = grid.color
        if grid.verticals > 0:
            unit = (grid.right - grid.left) / grid.verticals
            for i in range(grid.verticals + 1):
                if i in grid.hidden_verticals:
                    continue
                x = grid.left + unit * i
                self.line(Line(x, grid.top, x, grid.bottom, stroke=color, stroke_width=grid.stroke_width))
        if grid.horizontals > 0:
            unit = (grid.bottom - grid.top) / grid.horizontals
            for i in range(grid.horizontals + 1):
                if i in grid.hidden_horizontals:
                    continue
                y = grid.top + unit * i
                self.line(Line(grid.left, y, grid.right, y, stroke=color, stroke_width=grid.stroke_width))

    def axis(self, axis: Axis) -> Box:
        split_number = max(axis.split_number, 1)
        if axis.position in (Position.LEFT, Position.RIGHT):
            self._vertical_axis(axis, split_number)
        else:
            self._horizontal_axis(axis, split_number)
        return Box(axis.left, axis.top, axis.left + axis.width, axis.top + axis.height)

    def _label(self, axis: Axis, value: str) -> str:
        if axis.formatter:
            return axis.formatter.replace("{c}", value)
        return value

    def _vertical_axis(self, axis: Axis, split_number: int) -> None:
        x = axis.left + axis.width if axis.position == Position.LEFT else axis.left
        direction = -1.0 if axis.position == Position.LEFT else 1.0
        unit = axis.height / split_number
        if _visible(axis.stroke_color):
            self.line(Line(x, axis.top, x, axis.top + axis.height, axis.stroke_color, axis.stroke_width))
            for i in range(split_number + 1):
                y = axis.top + unit * i
                self.line(Line(x, y, x + direction * axis.tick_length, y, axis.stroke_color, axis.stroke_width))

        for i, value in enumerate(axis.data):
            label = self._label(axis, value)
            size = self.measure(axis.font_family, axis.font_size, label)
            if axis.position == Position.LEFT:
                label_x = x - size.width - axis.name_gap
            else:
                label_x = x + axis.name_gap
            label_y = axis.top + unit * i + axis.font_size * 0.35
            self.text(
                Text(
                    text=label,
                    x=label_x,
                    y=label_y,
                    font_family=axis.font_family,
                    font_size=axis.font_size,
                    font_color=axis.font_color,
                    rotate=axis.name_rotate,
                )
            )

    def _horizontal_axis(self, axis: Axis, split_number: int) -> None:
        y = axis.top + axis.height if axis.position == Position.TOP else axis.top
        direction = -1.0 if axis.position == Position.TOP else 1.0
        unit = axis.width / split_number
        if _visible(axis.stroke_color):
            self.line(Line(axis.left, y, axis.left + axis.width, y, axis.stroke_color, axis.stroke_width))
            for i in range(split_number + 1):
                x = axis.left + unit * i
                self.line(Line(x, y, x, y + direction * axis.tick_length, axis.stroke_color, axis.stroke_width))

        if axis.position == Position.TOP:
            label_y = y - axis.tick_length - axis.name_gap
        else:
            label_y = y + axis.tick_length + axis.name_gap + axis.font_size
        for i, value in enumerate(axis.data):
            label = self._label(axis, value)
            size = self.measure(axis.font_family, axis.font_size, label)
            if axis.name_align == Align.LEFT:
                label_x = unit * i - size.width / 2.0
            elif axis.name_align == Align.RIGHT:
                label_x = unit * (i + 1) - size.width
            else:
                label_x = unit * i + (unit - size.width) / 2.0
            # rotated labels keep their anchor and may overflow the axis
            if not axis.name_rotate:
                label_x = max(min(label_x, axis.width - size.width), 0.0)
            self.text(
                Text(
                    text=label,
                    x=axis.left + label_x,
                    y=label_y,
                    font_family=axis.font_family,
                    font_size=axis.font_size,
                    font_color=axis.font_color,
                    rotate=axis.name_rotate,
                )
            )

    def legend(self, legend: Legend) -> Box:
        center_y = legend.top + legend.font_size / 2.0
        if legend.category == LegendCategory.RECT:
            self.rect(
                Rect(
                    left=legend.left,
                    top=legend.top + 2.0,
                    width=LEGEND_WIDTH,
                    height=max(legend.font_size - 4.0, 2.0),
                    fill=legend.fill,
                    stroke=legend.stroke_color,
                    stroke_width=1.0,
                    rx=2.0,
                )
            )
        else:
            if _visible(legend.stroke_color):
                self.line(
                    Line(
                        legend.left,
                        center_y,
                        legend.left + LEGEND_WIDTH,
                        center_y,
                        stroke=legend.stroke_color,
                        stroke_width=2.0,
                    )
                )
            self.circle(
                Circle(
                    cx=legend.left + LEGEND_WIDTH / 2.0,
                    cy=center_y,
                    r=LEGEND_MARKER_RADIUS,
                    stroke=legend.stroke_color,
                    stroke_width=2.0,
                    fill=legend.fill,
                )
            )
        text_box = self.text(
            Text(
                text=legend.text,
                x=legend.left + LEGEND_WIDTH + LEGEND_TEXT_MARGIN,
                y=legend.top + legend.font_size,
                font_family=legend.font_family,
                font_size=legend.font_size,
                font_color=legend.font_color,
            )
        )
        return Box(legend.left, legend.top, text_box.right, legend.top + legend.font_size)

    def _symbols(self, points: Sequence[Point], color: Color, stroke_width: float, symbol: Symbol | None) -> None:
        if symbol is None:
            return
        for point in points:
            self.circle(
                Circle(
                    cx=point.x,
                    cy=point.y,
                    r=symbol.radius,
                    stroke=color,
                    stroke_width=stroke_width,
                    fill=symbol.fill,
                )
            )

    def straight_line(self, line: SeriesLine) -> None:
        color = line.color or Color.black()
        if len(line.points) >= 2 and _visible(color):
            self._append(Polyline(points=tuple(line.points), stroke=color, stroke_width=line.stroke_width))
        self._symbols(line.points, color, line.stroke_width, line.symbol)

    def smooth_line(self, line: SeriesLine) -> None:
        color = line.color or Color.black()
        segments = catmull_rom_segments(line.points)
        if segments and _visible(color):
            self._append(Path(segments=tuple(segments), stroke=color, stroke_width=line.stroke_width))
        self._symbols(line.points, color, line.stroke_width, line.symbol)

    def straight_line_fill(self, fill: SeriesFill) -> None:
        if len(fill.points) < 2 or not _visible(fill.fill):
            return
        first, last = fill.points[0], fill.points[-1]
        points = list(fill.points) + [Point(last.x, fill.bottom), Point(first.x, fill.bottom)]
        self._append(Polygon(points=tuple(points), fill=fill.fill))

    def smooth_line_fill(self, fill: SeriesFill) -> None:
        segments = catmull_rom_segments(fill.points)
        if not segments or not _visible(fill.fill):
            return
        self._append(Path(segments=tuple(segments), fill=fill.fill, baseline=fill.bottom))

    def svg(self) -> str:
        builder = SvgBuilder.create(self.full_width, self.full_height)
        builder.draw_all(self.commands)
        return builder.tostring()
