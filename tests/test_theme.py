from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from svgcharts import LineChart, Series
from svgcharts.color import Color
from svgcharts.errors import ChartError
from svgcharts.theme import (
    THEME_LIGHT,
    get_default_theme,
    get_or_init_default_theme,
    get_theme,
    list_themes,
    load_presets,
    set_default_theme,
)


@pytest.fixture
def restore_default_theme():
    previous = get_default_theme()
    yield
    set_default_theme(previous)


def test_catalog_has_builtin_presets() -> None:
    assert list_themes() == ["ant", "dark", "grafana", "light", "shine", "vintage"]


def test_unknown_theme_falls_back_to_light() -> None:
    assert get_theme("no-such-theme") is get_theme(THEME_LIGHT)
    assert get_theme("") is get_theme(THEME_LIGHT)
    assert get_theme(None) is get_theme(THEME_LIGHT)


def test_preset_overrides_merge_with_defaults() -> None:
    dark = get_theme("dark")
    light = get_theme("light")

    assert dark.is_light is False
    assert dark.background_color == Color(16, 12, 42)
    assert dark.series_colors == light.series_colors
    assert dark.y_axis_stroke_color.is_transparent()
    assert get_theme("ant").series_colors[0] == Color.from_hex("#5b8ff9")


def test_presets_are_read_only() -> None:
    with pytest.raises(TypeError):
        load_presets()["custom"] = get_theme("light")  # type: ignore[index]


def test_chart_copies_theme_fields(restore_default_theme) -> None:
    chart = LineChart([Series("a", (1, 2))], ["x", "y"], theme="grafana")
    chart.series_colors.append(Color.black())
    chart.width = 10

    preset = get_theme("grafana")
    assert len(preset.series_colors) == 8
    assert preset.width == 600
    assert chart.background_color == preset.background_color


def test_default_theme_slot(restore_default_theme) -> None:
    set_default_theme("dark")

    assert get_default_theme() == "dark"
    assert get_or_init_default_theme("shine") == "dark"
    chart = LineChart([], [])
    assert chart.is_light is False


def test_default_theme_concurrent_reads(restore_default_theme) -> None:
    set_default_theme("vintage")
    with ThreadPoolExecutor(max_workers=8) as pool:
        names = list(pool.map(lambda _: get_default_theme(), range(64)))

    assert set(names) == {"vintage"}


def test_invalid_catalog(tmp_path) -> None:
    path = tmp_path / "themes.yaml"
    path.write_text("- just\n- a list\n")

    with pytest.raises(ChartError) as excinfo:
        load_presets(path)
    assert excinfo.value.code == "E1201_THEME_CATALOG_INVALID"


def test_catalog_missing_field(tmp_path) -> None:
    path = tmp_path / "themes.yaml"
    path.write_text("defaults:\n  width: 100\nthemes:\n  light: {}\n")

    with pytest.raises(ChartError) as excinfo:
        load_presets(path)
    assert excinfo.value.code == "E1202_THEME_FIELD_MISSING"
