from __future__ import annotations

import threading
from dataclasses import dataclass, fields
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml

from svgcharts.color import Color
from svgcharts.errors import ChartError
from svgcharts.util import Align, Box

THEME_LIGHT = "light"
THEME_DARK = "dark"
THEME_ANT = "ant"
THEME_GRAFANA = "grafana"
THEME_VINTAGE = "vintage"
THEME_SHINE = "shine"

DEFAULT_THEME_CATALOG = Path(__file__).resolve().parent / "themes.v1.yaml"


@dataclass(frozen=True)
class Theme:
    is_light: bool
    font_family: str
    margin: Box
    width: float
    height: float
    background_color: Color

    # title
    title_font_size: float
    title_font_color: Color
    title_font_weight: str | None
    title_margin: Box | None
    title_align: Align
    title_height: float

    # sub title
    sub_title_font_size: float
    sub_title_font_color: Color
    sub_title_margin: Box | None
    sub_title_align: Align
    sub_title_height: float

    # legend
    legend_font_size: float
    legend_font_color: Color
    legend_align: Align
    legend_margin: Box | None

    # x axis
    x_axis_font_size: float
    x_axis_stroke_color: Color
    x_axis_font_color: Color
    x_axis_name_gap: float
    x_axis_height: float

    # y axis
    y_axis_font_size: float
    y_axis_font_color: Color
    y_axis_stroke_color: Color
    y_axis_split_number: int
    y_axis_name_gap: float
    y_axis_width: float

    # grid
    grid_stroke_color: Color
    grid_stroke_width: float

    # series
    series_stroke_width: float
    series_label_font_size: float
    series_label_font_color: Color
    series_colors: tuple[Color, ...]


def _convert(name: str, value: Any) -> Any:
    if name == "series_colors":
        return tuple(Color.parse(item) for item in value or [])
    if name.endswith("_color"):
        return Color.parse(value)
    if name.endswith("_margin"):
        return None if value is None else Box.parse(value)
    if name == "margin":
        return Box.parse(value)
    if name.endswith("_align"):
        return Align.parse(value, Align.CENTER)
    if name == "is_light":
        return bool(value)
    if name == "y_axis_split_number":
        return int(value)
    if name in {"font_family", "title_font_weight"}:
        return None if value is None else str(value)
    return float(value)


def _build_theme(name: str, data: Mapping[str, Any]) -> Theme:
    kwargs: dict[str, Any] = {}
    for item in fields(Theme):
        if item.name not in data:
            raise ChartError(
                code="E1202_THEME_FIELD_MISSING",
                message=f"Theme '{name}' is missing '{item.name}'.",
                hint="Add the field to the theme defaults.",
            )
        try:
            kwargs[item.name] = _convert(item.name, data[item.name])
        except (TypeError, ValueError) as exc:
            raise ChartError(
                code="E1203_THEME_FIELD_INVALID",
                message=f"Theme '{name}' has an invalid '{item.name}': {exc}",
                hint="Check the value type in the theme catalog.",
            ) from exc
    return Theme(**kwargs)


def _load_yaml(path: Path) -> dict[str, Any]:
    data = yaml.safe_load(path.read_text())
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ChartError(
            code="E1201_THEME_CATALOG_INVALID",
            message=f"Theme catalog must be a mapping: {path}",
            hint="Ensure the theme YAML has 'defaults' and 'themes' keys.",
        )
    return data


@lru_cache(maxsize=None)
def load_presets(path: Path = DEFAULT_THEME_CATALOG) -> Mapping[str, Theme]:
    """Parse the theme catalog once; the result is read-only."""
    data = _load_yaml(path)
    defaults = data.get("defaults", {}) or {}
    themes = data.get("themes", {}) or {}
    presets = {}
    for name, overrides in themes.items():
        merged = dict(defaults)
        merged.update(overrides or {})
        presets[str(name)] = _build_theme(str(name), merged)
    if THEME_LIGHT not in presets:
        presets[THEME_LIGHT] = _build_theme(THEME_LIGHT, defaults)
    return MappingProxyType(presets)


def list_themes() -> list[str]:
    return sorted(load_presets())


def get_theme(name: str | None) -> Theme:
    """Look up a preset; unknown or empty names give the light theme."""
    presets = load_presets()
    return presets.get(name or "", presets[THEME_LIGHT])


_default_theme_lock = threading.Lock()
_default_theme: str | None = None


def get_or_init_default_theme(theme: str) -> str:
    """Return the default theme name, initialising it to ``theme`` if unset."""
    global _default_theme
    with _default_theme_lock:
        if _default_theme is None:
            _default_theme = theme or THEME_LIGHT
        return _default_theme


def get_default_theme() -> str:
    return get_or_init_default_theme(THEME_LIGHT)


def set_default_theme(theme: str) -> None:
    global _default_theme
    with _default_theme_lock:
        _default_theme = theme or THEME_LIGHT
