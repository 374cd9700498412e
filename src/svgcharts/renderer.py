from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml

from svgcharts.chart import BarChart, Chart, LineChart
from svgcharts.components import LegendCategory
from svgcharts.errors import ChartError
from svgcharts.measure import TextMeasurer, measure_text
from svgcharts.series import Series

CHART_TYPES: dict[str, type[Chart]] = {
    "line": LineChart,
    "bar": BarChart,
}


def _load_params(params_path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(params_path.read_text())
    except yaml.YAMLError as exc:
        raise ChartError(
            code="E1101_PARAMS_INVALID",
            message=f"Failed to parse params file: {exc}",
            hint="Ensure the params file is valid JSON or YAML.",
        ) from exc
    if not isinstance(data, dict):
        raise ChartError(
            code="E1102_PARAMS_TYPE",
            message="Params file must contain an object at the top level.",
            hint="Wrap parameters in an object with keys like type/series/x_axis_data.",
        )
    return data


def _parse_number(value: Any, key: str) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ChartError(
            code="E2101_NUMBER_INVALID",
            message=f"'{key}' must be numeric.",
            hint=f"Provide a number for '{key}'.",
        ) from exc


def _parse_series(params: Mapping[str, Any]) -> list[Series]:
    series_raw = params.get("series", [])
    if not isinstance(series_raw, list):
        raise ChartError(
            code="E2110_SERIES_TYPE",
            message="series must be a list.",
            hint="Provide series as a list of {name, data} objects.",
        )
    series_list: list[Series] = []
    for idx, raw in enumerate(series_raw):
        if not isinstance(raw, dict):
            raise ChartError(
                code="E2111_SERIES_ITEM",
                message="Each series must be an object.",
                hint="Use {name, data} for each series.",
            )
        data_raw = raw.get("data", [])
        if not isinstance(data_raw, list):
            raise ChartError(
                code="E2112_SERIES_DATA",
                message=f"Series {idx} data must be a list.",
                hint="Provide data as a list of numbers or null.",
            )
        data: list[float | None] = []
        for value in data_raw:
            if value is None:
                data.append(None)
                continue
            data.append(_parse_number(value, f"series[{idx}].data"))
        index = raw.get("index")
        series_list.append(
            Series(
                name=str(raw.get("name", f"series {idx + 1}")),
                data=tuple(data),
                index=int(index) if index is not None else None,
                category=raw.get("category"),
                label_show=bool(raw.get("label_show", False)),
            )
        )
    return series_list


def build_chart(params: Mapping[str, Any], measurer: TextMeasurer = measure_text) -> Chart:
    chart_type = str(params.get("type", "line")).lower()
    chart_cls = CHART_TYPES.get(chart_type)
    if chart_cls is None:
        raise ChartError(
            code="E2100_CHART_TYPE_UNKNOWN",
            message=f"Unknown chart type '{chart_type}'.",
            hint=f"Use one of: {', '.join(sorted(CHART_TYPES))}.",
        )
    x_axis_data = params.get("x_axis_data", [])
    if not isinstance(x_axis_data, list):
        raise ChartError(
            code="E2120_X_AXIS_DATA",
            message="x_axis_data must be a list.",
            hint="Provide category labels as a list of strings.",
        )

    chart = chart_cls(_parse_series(params), x_axis_data, theme=params.get("theme"), measurer=measurer)
    chart.title_text = str(params.get("title") or "")
    chart.sub_title_text = str(params.get("sub_title") or "")

    width = _parse_number(params.get("width"), "width")
    height = _parse_number(params.get("height"), "height")
    if width is not None:
        chart.width = width
    if height is not None:
        chart.height = height
    if chart.width <= 0 or chart.height <= 0:
        raise ChartError(
            code="E2102_SIZE_RANGE",
            message="Chart width/height must be positive.",
            hint="Provide positive width and height.",
        )

    chart.series_smooth = bool(params.get("series_smooth", False))
    chart.series_fill = bool(params.get("series_fill", False))
    if "x_boundary_gap" in params:
        chart.x_boundary_gap = bool(params["x_boundary_gap"])
    chart.x_axis_name_rotate = _parse_number(params.get("x_axis_name_rotate"), "x_axis_name_rotate") or 0.0
    chart.y_axis_formatter = params.get("y_axis_formatter")
    chart.y_axis_min = _parse_number(params.get("y_axis_min"), "y_axis_min")
    chart.y_axis_max = _parse_number(params.get("y_axis_max"), "y_axis_max")
    try:
        chart.legend_category = LegendCategory(str(params.get("legend_category", "normal")).lower())
    except ValueError as exc:
        raise ChartError(
            code="E2130_LEGEND_CATEGORY",
            message=f"Unknown legend category '{params.get('legend_category')}'.",
            hint="Use 'normal' or 'rect'.",
        ) from exc
    return chart


def render_chart(params: Mapping[str, Any], measurer: TextMeasurer = measure_text) -> str:
    return build_chart(params, measurer=measurer).svg()


def render_chart_file(params_path: Path, output_svg: Path) -> None:
    params = _load_params(params_path)
    svg = render_chart(params)
    output_svg.parent.mkdir(parents=True, exist_ok=True)
    output_svg.write_text(svg, encoding="utf-8")
