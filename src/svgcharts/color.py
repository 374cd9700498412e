from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from svgcharts.errors import ChartError


def _clamp_channel(value: Any) -> int:
    return max(0, min(255, int(value)))


@dataclass(frozen=True)
class Color:
    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    @classmethod
    def white(cls) -> "Color":
        return cls(255, 255, 255)

    @classmethod
    def black(cls) -> "Color":
        return cls(0, 0, 0)

    @classmethod
    def transparent(cls) -> "Color":
        return cls(0, 0, 0, 0)

    @classmethod
    def from_hex(cls, hex_color: str) -> "Color":
        value = hex_color.strip().lstrip("#")
        if len(value) in (3, 4):
            value = "".join(ch * 2 for ch in value)
        if len(value) not in (6, 8):
            raise ChartError(
                code="E2001_COLOR_INVALID",
                message=f"Invalid hex color '{hex_color}'.",
                hint="Use #rgb, #rrggbb or #rrggbbaa.",
            )
        try:
            channels = [int(value[i : i + 2], 16) for i in range(0, len(value), 2)]
        except ValueError as exc:
            raise ChartError(
                code="E2001_COLOR_INVALID",
                message=f"Invalid hex color '{hex_color}'.",
                hint="Use #rgb, #rrggbb or #rrggbbaa.",
            ) from exc
        return cls(*channels)

    @classmethod
    def parse(cls, value: Any) -> "Color":
        if isinstance(value, Color):
            return value
        if isinstance(value, str):
            if value.strip().lower() in {"none", "transparent"}:
                return cls.transparent()
            return cls.from_hex(value)
        if isinstance(value, (list, tuple)) and len(value) in (3, 4):
            return cls(*(_clamp_channel(channel) for channel in value))
        raise ChartError(
            code="E2002_COLOR_TYPE",
            message=f"Unsupported color value: {value!r}",
            hint="Provide a hex string or an [r, g, b, a] list.",
        )

    def with_alpha(self, alpha: int) -> "Color":
        return replace(self, a=_clamp_channel(alpha))

    def is_transparent(self) -> bool:
        return self.a == 0

    @property
    def opacity(self) -> float:
        return round(self.a / 255.0, 3)

    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def blend(self, background: "Color") -> "Color":
        """Source-over composition of this color on an opaque background."""
        alpha = self.a / 255.0
        return Color(
            r=round(self.r * alpha + background.r * (1 - alpha)),
            g=round(self.g * alpha + background.g * (1 - alpha)),
            b=round(self.b * alpha + background.b * (1 - alpha)),
            a=255,
        )
