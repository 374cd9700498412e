"""Chart composition: themed style fields plus an ordered render pipeline.

``Chart`` carries the shared default implementation of every render step;
concrete chart types only decide which series are drawn as bars and which as
lines. Vertical space is stacked top to bottom: title, legend, then the plot
area with the x axis along its bottom edge.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import fields
from typing import Sequence

from svgcharts.axis_values import AxisValueParams, AxisValues, get_axis_values
from svgcharts.canvas import Canvas
from svgcharts.color import Color
from svgcharts.components import (
    Axis,
    Grid,
    Legend,
    LegendCategory,
    Rect,
    SeriesFill,
    SeriesLine,
    Symbol,
    Text,
)
from svgcharts.legend import LEGEND_MARGIN, layout_legends, measure_legends
from svgcharts.measure import TextMeasurer, measure_text
from svgcharts.series import (
    SERIES_CATEGORY_BAR,
    SERIES_CATEGORY_LINE,
    Series,
    bar_rects,
    line_points,
)
from svgcharts.theme import Theme, get_default_theme, get_theme
from svgcharts.util import Align, Box, Position, format_float, is_missing

SERIES_FILL_ALPHA = 100
SERIES_LABEL_GAP = 5.0


def _align_offset(align: Align, available: float, width: float) -> float:
    if align == Align.CENTER:
        return (available - width) / 2.0
    if align == Align.RIGHT:
        return available - width
    return 0.0


class Chart(ABC):
    def __init__(
        self,
        series_list: Sequence[Series],
        x_axis_data: Sequence[str],
        theme: str | None = None,
        measurer: TextMeasurer = measure_text,
    ) -> None:
        self.series_list = list(series_list)
        self.x_axis_data = [str(item) for item in x_axis_data]
        self.measurer = measurer

        self.title_text = ""
        self.sub_title_text = ""
        self.legend_category = LegendCategory.NORMAL
        self.x_axis_name_rotate = 0.0
        self.x_boundary_gap: bool | None = None
        self.y_axis_formatter: str | None = None
        self.y_axis_min: float | None = None
        self.y_axis_max: float | None = None
        self.series_smooth = False
        self.series_fill = False

        self.fill_theme(get_theme(theme or get_default_theme()))

    def fill_theme(self, t: Theme) -> None:
        """Copy every style field out of the preset onto the chart."""
        for item in fields(Theme):
            setattr(self, item.name, getattr(t, item.name))
        self.series_colors = list(t.series_colors)
        self.series_symbol: Symbol | None = Symbol(
            radius=self.series_stroke_width,
            fill=self.background_color,
        )

    @abstractmethod
    def split_series(self) -> tuple[list[Series], list[Series]]:
        """Return ``(bar_series, line_series)``."""

    def series_color(self, series: Series) -> Color:
        if not self.series_colors:
            return Color.black()
        if series.index is not None:
            index = series.index
        else:
            index = next((i for i, item in enumerate(self.series_list) if item is series), 0)
        if 0 <= index < len(self.series_colors):
            return self.series_colors[index]
        return self.series_colors[0]

    def render_background(self, c: Canvas) -> None:
        if self.background_color.is_transparent():
            return
        c.rect(Rect(left=0.0, top=0.0, width=self.width, height=self.height, fill=self.background_color))

    def render_title(self, c: Canvas) -> float:
        title_height = 0.0
        if self.title_text:
            title_margin = self.title_margin or Box()
            title_canvas = c.child(title_margin)
            size = title_canvas.measure(self.font_family, self.title_font_size, self.title_text)
            b = title_canvas.text(
                Text(
                    text=self.title_text,
                    x=_align_offset(self.title_align, title_canvas.width, size.width),
                    y=self.title_font_size,
                    font_family=self.font_family,
                    font_size=self.title_font_size,
                    font_color=self.title_font_color,
                    font_weight=self.title_font_weight,
                )
            )
            title_height = title_margin.top + b.bottom + title_margin.bottom
        if self.sub_title_text:
            sub_title_margin = self.sub_title_margin or Box()
            sub_title_canvas = c.child(Box(top=title_height).add(sub_title_margin))
            size = sub_title_canvas.measure(self.font_family, self.sub_title_font_size, self.sub_title_text)
            b = sub_title_canvas.text(
                Text(
                    text=self.sub_title_text,
                    x=_align_offset(self.sub_title_align, sub_title_canvas.width, size.width),
                    y=self.sub_title_font_size,
                    font_family=self.font_family,
                    font_size=self.sub_title_font_size,
                    font_color=self.sub_title_font_color,
                )
            )
            title_height += sub_title_margin.top + b.bottom + sub_title_margin.bottom
        return title_height

    def render_legend(self, c: Canvas) -> float:
        if not self.series_list:
            return 0.0
        legend_margin = self.legend_margin or Box()
        legend_canvas = c.child(legend_margin)
        names = [series.name for series in self.series_list]
        _, widths = measure_legends(legend_canvas.measure, self.font_family, self.legend_font_size, names)
        legend_unit_height = self.legend_font_size + LEGEND_MARGIN
        layout = layout_legends(widths, legend_canvas.width, self.legend_align, legend_unit_height)

        for series, position in zip(self.series_list, layout.positions):
            color = self.series_color(series)
            fill = self.background_color if self.is_light else color
            legend_canvas.legend(
                Legend(
                    text=series.name,
                    font_family=self.font_family,
                    font_size=self.legend_font_size,
                    font_color=self.legend_font_color,
                    stroke_color=color,
                    fill=fill,
                    left=position.x,
                    top=position.y,
                    category=self.legend_category,
                )
            )
        return layout.height + legend_margin.top + legend_margin.bottom

    def render_grid(self, c: Canvas, axis_width: float, axis_height: float, split_number: int) -> None:
        c.grid(
            Grid(
                right=axis_width,
                bottom=axis_height,
                color=self.grid_stroke_color,
                stroke_width=self.grid_stroke_width,
                horizontals=split_number,
                hidden_horizontals=(split_number,),
            )
        )

    def render_y_axis(self, c: Canvas, y_axis_values: AxisValues, axis_height: float) -> None:
        c.axis(
            Axis(
                data=y_axis_values.data,
                position=Position.LEFT,
                height=axis_height,
                width=self.y_axis_width,
                split_number=y_axis_values.split_number,
                font_family=self.font_family,
                font_size=self.y_axis_font_size,
                font_color=self.y_axis_font_color,
                stroke_color=self.y_axis_stroke_color,
                name_align=Align.LEFT,
                name_gap=self.y_axis_name_gap,
            )
        )

    def render_x_axis(self, c: Canvas, data: list[str], axis_width: float) -> None:
        split_number = len(data)
        if self.boundary_gap():
            name_align = Align.CENTER
        else:
            split_number -= 1
            name_align = Align.LEFT
        c.axis(
            Axis(
                data=data,
                position=Position.BOTTOM,
                height=self.x_axis_height,
                width=axis_width,
                split_number=max(split_number, 1),
                font_family=self.font_family,
                font_size=self.x_axis_font_size,
                font_color=self.x_axis_font_color,
                stroke_color=self.x_axis_stroke_color,
                name_align=name_align,
                name_gap=self.x_axis_name_gap,
                name_rotate=self.x_axis_name_rotate,
            )
        )

    def boundary_gap(self) -> bool:
        return True if self.x_boundary_gap is None else self.x_boundary_gap

    def _render_value_label(self, c: Canvas, value: float, center_x: float, top: float) -> None:
        label = format_float(value)
        size = c.measure(self.font_family, self.series_label_font_size, label)
        c.text(
            Text(
                text=label,
                x=center_x - size.width / 2.0,
                y=top - SERIES_LABEL_GAP,
                font_family=self.font_family,
                font_size=self.series_label_font_size,
                font_color=self.series_label_font_color,
            )
        )

    def render_bar(
        self,
        c: Canvas,
        series_list: Sequence[Series],
        y_axis_values: AxisValues,
        max_height: float,
    ) -> None:
        if not series_list:
            return
        for bar in bar_rects(series_list, y_axis_values, c.width, max_height):
            series = series_list[bar.series_position]
            c.rect(
                Rect(
                    left=bar.left,
                    top=bar.top,
                    width=bar.width,
                    height=bar.height,
                    fill=self.series_color(series),
                )
            )
            if series.label_show:
                self._render_value_label(c, bar.value, bar.left + bar.width / 2.0, bar.top)

    def render_line(
        self,
        c: Canvas,
        series_list: Sequence[Series],
        y_axis_values: AxisValues,
        max_height: float,
    ) -> None:
        if not series_list:
            return
        boundary_gap = self.boundary_gap()
        for series in series_list:
            points = line_points(series.data, c.width, y_axis_values, max_height, boundary_gap)
            color = self.series_color(series)
            fill = SeriesFill(points=points, fill=color.with_alpha(SERIES_FILL_ALPHA), bottom=max_height)
            line = SeriesLine(
                points=points,
                color=color,
                stroke_width=self.series_stroke_width,
                symbol=self.series_symbol,
            )
            if self.series_smooth:
                if self.series_fill:
                    c.smooth_line_fill(fill)
                c.smooth_line(line)
            else:
                if self.series_fill:
                    c.straight_line_fill(fill)
                c.straight_line(line)
            if series.label_show:
                values = [float(value) for value in series.data if not is_missing(value)]
                for value, point in zip(values, points):
                    self._render_value_label(c, value, point.x, point.y)

    def y_axis_values(self) -> AxisValues:
        data_list = [value for series in self.series_list for value in series.data]
        return get_axis_values(
            AxisValueParams(
                data_list=data_list,
                split_number=self.y_axis_split_number,
                reverse=True,
                min=self.y_axis_min,
                max=self.y_axis_max,
                formatter=self.y_axis_formatter,
            )
        )

    def render(self) -> Canvas:
        root = Canvas(self.width, self.height, measurer=self.measurer)
        self.render_background(root.child(Box()))

        c = root.child(self.margin)
        title_height = self.render_title(c.child(Box()))
        legend_height = self.render_legend(c.child(Box(top=title_height)))
        axis_top = title_height + legend_height
        if axis_top > 0:
            c = c.child(Box(top=axis_top))

        axis_height = c.height - self.x_axis_height
        axis_width = c.width - self.y_axis_width

        y_axis_values = self.y_axis_values()
        self.render_grid(c.child(Box(left=self.y_axis_width)), axis_width, axis_height, y_axis_values.split_number)
        self.render_y_axis(c.child(Box()), y_axis_values, axis_height)
        self.render_x_axis(
            c.child(Box(top=axis_height, left=self.y_axis_width)),
            self.x_axis_data,
            axis_width,
        )

        bar_series, line_series = self.split_series()
        series_canvas = c.child(Box(left=self.y_axis_width))
        self.render_bar(series_canvas, bar_series, y_axis_values, axis_height)
        self.render_line(series_canvas, line_series, y_axis_values, axis_height)
        return root

    def svg(self) -> str:
        return self.render().svg()


class LineChart(Chart):
    """Lines by default; series with category ``bar`` are drawn as bars."""

    def split_series(self) -> tuple[list[Series], list[Series]]:
        bars = [series for series in self.series_list if series.category == SERIES_CATEGORY_BAR]
        lines = [series for series in self.series_list if series.category != SERIES_CATEGORY_BAR]
        return bars, lines


class BarChart(Chart):
    """Bars by default; series with category ``line`` are drawn on top as lines."""

    def split_series(self) -> tuple[list[Series], list[Series]]:
        bars = [series for series in self.series_list if series.category != SERIES_CATEGORY_LINE]
        lines = [series for series in self.series_list if series.category == SERIES_CATEGORY_LINE]
        return bars, lines
