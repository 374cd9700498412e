"""Text measurement backed by Pillow font metrics.

The layout engine only needs the bounding size of a rendered string. Fonts are
resolved from a CSS-like family list (``"Arial, sans-serif"``) through an
explicit registry first, then through well-known file names that Pillow can
find in the system font directories.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Callable

from PIL import ImageFont

from svgcharts.errors import MeasurementError

LOGGER = logging.getLogger(__name__)

_GENERIC_FONT_FILES = {
    "sans-serif": [
        "DejaVuSans.ttf",
        "LiberationSans-Regular.ttf",
        "Arial.ttf",
        "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
        "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
    ],
    "serif": ["DejaVuSerif.ttf", "LiberationSerif-Regular.ttf", "Times New Roman.ttf"],
    "monospace": ["DejaVuSansMono.ttf", "LiberationMono-Regular.ttf", "Courier New.ttf"],
    "arial": ["Arial.ttf", "arial.ttf", "LiberationSans-Regular.ttf"],
    "helvetica": ["Helvetica.ttc", "LiberationSans-Regular.ttf"],
    "roboto": ["Roboto-Regular.ttf"],
}

_REGISTERED_FONTS: dict[str, Path] = {}


@dataclass(frozen=True)
class TextSize:
    width: float
    height: float


TextMeasurer = Callable[[str, float, str], TextSize]


def register_font(family: str, path: Path | str) -> None:
    """Map a font family name to a TrueType/OpenType file."""
    _REGISTERED_FONTS[family.strip().lower()] = Path(path)
    _find_font.cache_clear()


def _split_families(font_family: str) -> list[str]:
    return [name.strip().strip("'\"") for name in font_family.split(",") if name.strip()]


def _candidates(family: str) -> list[str]:
    key = family.lower()
    candidates: list[str] = []
    registered = _REGISTERED_FONTS.get(key)
    if registered is not None:
        candidates.append(str(registered))
    candidates.extend(_GENERIC_FONT_FILES.get(key, []))
    if key not in _GENERIC_FONT_FILES:
        candidates.append(f"{family}.ttf")
    return candidates


@lru_cache(maxsize=256)
def _load_font(source: str, size: float) -> ImageFont.FreeTypeFont:
    return ImageFont.truetype(source, size)


@lru_cache(maxsize=64)
def _find_font(font_family: str, size: float) -> ImageFont.FreeTypeFont | None:
    """First loadable font for the family list; misses are cached as None."""
    for family in _split_families(font_family):
        for source in _candidates(family):
            try:
                font = _load_font(source, size)
            except OSError:
                continue
            LOGGER.debug("Resolved font family %r to %s", family, source)
            return font
    return None


def _resolve_font(font_family: str, size: float) -> ImageFont.FreeTypeFont:
    font = _find_font(font_family, size)
    if font is not None:
        return font
    raise MeasurementError(
        code="E3001_FONT_NOT_FOUND",
        message=f"No font file found for family '{font_family}'.",
        hint="Install the font or call register_font(family, path).",
    )


def measure_text(font_family: str, font_size: float, text: str) -> TextSize:
    """Return the width and line height of ``text`` rendered in the family."""
    if font_size <= 0:
        raise MeasurementError(
            code="E3002_FONT_SIZE",
            message=f"Font size must be positive, got {font_size}.",
            hint="Use a positive font size.",
        )
    font = _resolve_font(font_family, float(font_size))
    if not text:
        return TextSize(width=0.0, height=0.0)
    ascent, descent = font.getmetrics()
    return TextSize(width=float(font.getlength(text)), height=float(ascent + descent))
