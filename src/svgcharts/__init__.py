"""svgcharts library package."""

from .chart import BarChart, Chart, LineChart
from .errors import ChartError, MeasurementError
from .renderer import build_chart, render_chart, render_chart_file
from .series import Series
from .theme import get_default_theme, get_theme, set_default_theme

__all__ = [
    "BarChart",
    "Chart",
    "ChartError",
    "LineChart",
    "MeasurementError",
    "Series",
    "build_chart",
    "get_default_theme",
    "get_theme",
    "render_chart",
    "render_chart_file",
    "set_default_theme",
]
