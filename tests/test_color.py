from __future__ import annotations

import pytest

from svgcharts.color import Color
from svgcharts.errors import ChartError


def test_parse_hex_forms() -> None:
    assert Color.parse("#fff") == Color(255, 255, 255, 255)
    assert Color.parse("#5470c6") == Color(84, 112, 198)
    assert Color.parse("#00000000").is_transparent()
    assert Color.parse([1, 2, 3]) == Color(1, 2, 3, 255)
    assert Color.parse("none").is_transparent()


def test_with_alpha_returns_new_value() -> None:
    base = Color(10, 20, 30)
    faded = base.with_alpha(100)

    assert faded == Color(10, 20, 30, 100)
    assert base.a == 255
    assert faded.hex() == "#0a141e"
    assert faded.opacity == pytest.approx(0.392)


def test_blend_over_background() -> None:
    assert Color(255, 0, 0, 128).blend(Color.white()) == Color(255, 127, 127, 255)
    assert Color(0, 0, 0, 0).blend(Color.white()) == Color.white()


def test_invalid_hex() -> None:
    with pytest.raises(ChartError) as excinfo:
        Color.parse("#12345")
    assert excinfo.value.code == "E2001_COLOR_INVALID"
