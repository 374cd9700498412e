from __future__ import annotations

import pytest

from svgcharts.axis_values import AxisValueParams, get_axis_values
from svgcharts.series import (
    BAR_CHART_GAP,
    BAR_CHART_MARGIN,
    Series,
    bar_rects,
    bar_width,
    line_points,
)


def _values(data):
    return get_axis_values(AxisValueParams(data_list=data, split_number=4, reverse=True))


@pytest.mark.parametrize("series_count", [1, 2, 3, 5])
def test_bar_partition_fills_the_unit(series_count: int) -> None:
    unit_width = 97.0
    width = bar_width(unit_width, series_count)

    total = series_count * width + (series_count - 1) * BAR_CHART_GAP + 2 * BAR_CHART_MARGIN
    assert total == pytest.approx(unit_width)


def test_bar_offsets_and_heights() -> None:
    series_list = [Series("a", (0, 10)), Series("b", (5, 10))]
    values = _values([0, 10])
    bars = list(bar_rects(series_list, values, 200.0, 100.0))

    each = (100 - 2 * BAR_CHART_MARGIN - BAR_CHART_GAP) / 2
    assert [bar.left for bar in bars] == pytest.approx(
        [
            BAR_CHART_MARGIN,
            100 + BAR_CHART_MARGIN,
            BAR_CHART_MARGIN + each + BAR_CHART_GAP,
            100 + BAR_CHART_MARGIN + each + BAR_CHART_GAP,
        ]
    )
    assert [bar.height for bar in bars] == pytest.approx([0, 100, 50, 100])
    for bar in bars:
        assert bar.top + bar.height == pytest.approx(100.0)
        assert bar.width == pytest.approx(each)


def test_bars_skip_missing_values() -> None:
    bars = list(bar_rects([Series("a", (1, None, 3))], _values([1, 3]), 300.0, 100.0))

    assert [bar.category_index for bar in bars] == [0, 2]


def test_no_series_no_bars() -> None:
    assert list(bar_rects([], _values([1, 2]), 300.0, 100.0)) == []


def test_line_points_with_boundary_gap_are_centred() -> None:
    points = line_points([1, 2, 3], 300.0, _values([1, 2, 3]), 100.0, boundary_gap=True)

    assert [p.x for p in points] == pytest.approx([50, 150, 250])
    assert [p.y for p in points] == pytest.approx([100, 50, 0])


def test_line_points_without_boundary_gap_touch_edges() -> None:
    points = line_points([1, 2, 3], 300.0, _values([1, 2, 3]), 100.0, boundary_gap=False)

    assert [p.x for p in points] == pytest.approx([0, 150, 300])


def test_line_points_drop_missing_samples() -> None:
    points = line_points([1, None, 3], 300.0, _values([1, 3]), 100.0)

    assert [p.x for p in points] == pytest.approx([50, 250])


def test_single_point_without_boundary_gap() -> None:
    points = line_points([4], 300.0, _values([4]), 100.0, boundary_gap=False)

    assert [(p.x, p.y) for p in points] == [(0.0, 100.0)]


def test_series_is_immutable_tuple() -> None:
    series = Series("a", [1, 2])

    assert series.data == (1, 2)
    with pytest.raises(AttributeError):
        series.name = "b"  # type: ignore[misc]
