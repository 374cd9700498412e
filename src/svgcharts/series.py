from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Sequence

from svgcharts.axis_values import AxisValues
from svgcharts.util import Point, is_missing

SERIES_CATEGORY_LINE = "line"
SERIES_CATEGORY_BAR = "bar"

BAR_CHART_MARGIN = 5.0
BAR_CHART_GAP = 3.0


@dataclass(frozen=True)
class Series:
    name: str
    data: tuple[float | None, ...] = field(default_factory=tuple)
    index: int | None = None
    category: str | None = None
    label_show: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", tuple(self.data))

    def values(self) -> list[float]:
        return [float(value) for value in self.data if not is_missing(value)]


@dataclass(frozen=True)
class BarGeometry:
    series_position: int
    category_index: int
    value: float
    left: float
    top: float
    width: float
    height: float


def category_count(series_list: Sequence[Series]) -> int:
    return max((len(series.data) for series in series_list), default=0)


def bar_width(unit_width: float, series_count: int) -> float:
    """Width of one bar once the slot margins and inter-bar gaps are removed."""
    series_count = max(series_count, 1)
    margin_width = BAR_CHART_MARGIN * 2.0
    gap_width = BAR_CHART_GAP * (series_count - 1)
    return (unit_width - margin_width - gap_width) / series_count


def bar_rects(
    series_list: Sequence[Series],
    y_axis_values: AxisValues,
    width: float,
    max_height: float,
) -> Iterator[BarGeometry]:
    if not series_list:
        return
    unit_width = width / max(category_count(series_list), 1)
    each_width = bar_width(unit_width, len(series_list))
    for position, series in enumerate(series_list):
        for i, value in enumerate(series.data):
            if is_missing(value):
                continue
            left = unit_width * i + BAR_CHART_MARGIN
            left += (each_width + BAR_CHART_GAP) * position
            top = y_axis_values.get_offset_height(value, max_height)
            yield BarGeometry(
                series_position=position,
                category_index=i,
                value=float(value),
                left=left,
                top=top,
                width=each_width,
                height=max_height - top,
            )


def line_points(
    data: Sequence[Any],
    width: float,
    y_axis_values: AxisValues,
    max_height: float,
    boundary_gap: bool = True,
) -> list[Point]:
    """Screen points of a line series; missing samples leave no point."""
    count = len(data)
    if count == 0:
        return []
    split_unit_count = count if boundary_gap else count - 1
    unit_width = width / max(split_unit_count, 1)
    points: list[Point] = []
    for i, value in enumerate(data):
        if is_missing(value):
            continue
        x = unit_width * i
        if boundary_gap:
            # centred in the slot
            x += unit_width / 2.0
        y = y_axis_values.get_offset_height(value, max_height)
        points.append(Point(x, y))
    return points
