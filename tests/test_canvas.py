from __future__ import annotations

import pytest

from svgcharts.canvas import Canvas
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
    Rect,
    SeriesFill,
    SeriesLine,
    Symbol,
    Text,
)
from svgcharts.errors import MeasurementError
from svgcharts.measure import TextSize
from svgcharts.util import Align, Box, Point, Position


def _measure(font_family: str, font_size: float, text: str) -> TextSize:
    return TextSize(width=len(text) * font_size * 0.5, height=font_size)


def _failing_measure(font_family: str, font_size: float, text: str) -> TextSize:
    raise MeasurementError(code="E3001_FONT_NOT_FOUND", message="no font", hint="none")


def _canvas(width: float = 300, height: float = 200) -> Canvas:
    return Canvas(width, height, measurer=_measure)


def test_child_composes_offsets_and_shares_buffer() -> None:
    root = _canvas(200, 100)
    child = root.child(Box(left=10, top=5)).child(Box(left=3, top=2, right=4))

    assert child.width == 183
    assert child.height == 93
    child.rect(Rect(left=1, top=1, width=10, height=10, fill=Color.black()))

    assert child.commands is root.commands
    assert root.commands == [Rect(left=14, top=8, width=10, height=10, fill=Color.black())]


def test_negative_boxes_are_not_validated() -> None:
    child = _canvas(100, 100).child(Box(left=-10, right=-5))

    assert child.width == 115


def test_transparent_rect_appends_nothing() -> None:
    canvas = _canvas()
    box = canvas.rect(Rect(left=0, top=0, width=10, height=20, fill=Color.transparent()))

    assert canvas.commands == []
    assert box == Box(0, 0, 10, 20)


def test_text_returns_measured_box() -> None:
    canvas = _canvas()
    box = canvas.text(Text(text="abcd", x=10, y=30, font_size=10))

    assert box == Box(10, 20, 30, 30)
    assert len(canvas.commands) == 1


def test_text_measurement_failure_falls_back_to_zero_size() -> None:
    canvas = Canvas(300, 200, measurer=_failing_measure)
    box = canvas.text(Text(text="abcd", x=10, y=30, font_size=10))

    assert box == Box(10, 30, 10, 30)
    assert isinstance(canvas.commands[0], Text)


def test_grid_skips_hidden_lines() -> None:
    canvas = _canvas()
    canvas.grid(
        Grid(right=100, bottom=60, color=Color.black(), horizontals=3, hidden_horizontals=(3,))
    )

    assert [line.y1 for line in canvas.commands] == [0, 20, 40]
    assert all(isinstance(line, Line) and line.x2 == 100 for line in canvas.commands)


def test_grid_verticals() -> None:
    canvas = _canvas()
    canvas.grid(Grid(right=90, bottom=60, color=Color.black(), verticals=3, hidden_verticals=(0,)))

    assert [line.x1 for line in canvas.commands] == [30, 60, 90]


def test_bottom_axis_centers_labels_in_slots() -> None:
    canvas = _canvas()
    canvas.axis(
        Axis(
            data=["a", "b", "c"],
            width=300,
            height=30,
            split_number=3,
            font_size=10,
            stroke_color=Color.black(),
            name_gap=5,
        )
    )

    lines = [cmd for cmd in canvas.commands if isinstance(cmd, Line)]
    texts = [cmd for cmd in canvas.commands if isinstance(cmd, Text)]
    assert len(lines) == 1 + 4
    assert [text.x for text in texts] == [47.5, 147.5, 247.5]
    assert all(text.y == 20 for text in texts)


def test_transparent_axis_stroke_draws_labels_only() -> None:
    canvas = _canvas()
    canvas.axis(Axis(data=["a", "b"], width=100, split_number=2, stroke_color=Color.transparent()))

    assert all(isinstance(cmd, Text) for cmd in canvas.commands)
    assert len(canvas.commands) == 2


def test_unrotated_labels_are_clamped_but_rotated_labels_overflow() -> None:
    common = dict(data=["a", "b", "c"], width=200, split_number=2, font_size=10, name_align=Align.LEFT)
    straight = _canvas()
    straight.axis(Axis(**common))
    rotated = _canvas()
    rotated.axis(Axis(name_rotate=-45, **common))

    assert [text.x for text in straight.commands] == [0, 97.5, 195]
    assert [text.x for text in rotated.commands] == [-2.5, 97.5, 197.5]
    assert all(text.rotate == -45 for text in rotated.commands)


def test_left_axis_right_aligns_labels() -> None:
    canvas = _canvas()
    canvas.axis(
        Axis(
            data=["20", "10", "0"],
            position=Position.LEFT,
            width=40,
            height=100,
            split_number=2,
            font_size=10,
            name_gap=8,
        )
    )

    texts = canvas.commands
    assert [text.x for text in texts] == [22, 22, 27]
    assert [text.y for text in texts] == pytest.approx([3.5, 53.5, 103.5])


def test_axis_split_number_is_clamped() -> None:
    canvas = _canvas()
    canvas.axis(Axis(data=[], width=100, split_number=0, stroke_color=Color.black()))

    assert len(canvas.commands) == 1 + 2


def test_legend_entry_width() -> None:
    canvas = _canvas()
    box = canvas.legend(
        Legend(
            text="abcd",
            font_family="Arial",
            font_size=10,
            stroke_color=Color.black(),
            fill=Color.white(),
            left=5,
            top=7,
        )
    )

    assert box == Box(5, 7, 5 + 25 + 3 + 20, 17)
    assert [type(cmd) for cmd in canvas.commands] == [Line, Circle, Text]


def test_rect_legend_category() -> None:
    canvas = _canvas()
    canvas.legend(
        Legend(
            text="a",
            font_family="Arial",
            font_size=10,
            stroke_color=Color.black(),
            fill=Color.black(),
            category=LegendCategory.RECT,
        )
    )

    assert [type(cmd) for cmd in canvas.commands] == [Rect, Text]


def test_line_fill_and_symbols() -> None:
    canvas = _canvas()
    points = [Point(0, 10), Point(50, 20), Point(100, 5)]
    canvas.straight_line_fill(SeriesFill(points=points, fill=Color.black().with_alpha(100), bottom=80))
    canvas.straight_line(
        SeriesLine(points=points, color=Color.black(), stroke_width=2, symbol=Symbol(radius=2, fill=Color.white()))
    )

    assert isinstance(canvas.commands[0], Polygon)
    assert canvas.commands[0].points[-2:] == (Point(100, 80), Point(0, 80))
    assert isinstance(canvas.commands[1], Polyline)
    assert [type(cmd) for cmd in canvas.commands[2:]] == [Circle, Circle, Circle]


def test_smooth_line_and_fill_paths() -> None:
    canvas = _canvas().child(Box(left=10))
    points = [Point(0, 10), Point(50, 20), Point(100, 5)]
    canvas.smooth_line_fill(SeriesFill(points=points, fill=Color.black(), bottom=80))
    canvas.smooth_line(SeriesLine(points=points, color=Color.black()))

    fill, stroke = canvas.commands
    assert isinstance(fill, Path) and fill.baseline == 80
    assert isinstance(stroke, Path) and stroke.baseline is None
    assert len(stroke.segments) == 2
    assert stroke.segments[0].p0 == Point(10, 10)
    assert stroke.segments[-1].p3 == Point(110, 5)


def test_single_point_line_draws_symbol_only() -> None:
    canvas = _canvas()
    canvas.straight_line(SeriesLine(points=[Point(5, 5)], color=Color.black(), symbol=Symbol(radius=2)))

    assert [type(cmd) for cmd in canvas.commands] == [Circle]


def test_svg_is_ordered_and_idempotent() -> None:
    canvas = _canvas()
    canvas.rect(Rect(left=0, top=0, width=300, height=200, fill=Color.white()))
    canvas.line(Line(0, 0, 10, 10, stroke=Color.black()))
    canvas.text(Text(text="hello", x=1, y=12, font_size=12))

    first = canvas.svg()
    assert first == canvas.svg()
    assert first.index("<rect") < first.index("<line") < first.index("<text")
