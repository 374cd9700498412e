from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Align(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @classmethod
    def parse(cls, value: Any, default: "Align") -> "Align":
        try:
            return cls(str(value).lower())
        except ValueError:
            return default


class Position(str, Enum):
    LEFT = "left"
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class Box:
    """Four-sided inset, or a drawn region when read as left/top/right/bottom."""

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @classmethod
    def uniform(cls, value: float) -> "Box":
        return cls(left=value, top=value, right=value, bottom=value)

    @classmethod
    def parse(cls, value: Any) -> "Box":
        if value is None:
            return cls()
        if isinstance(value, Box):
            return value
        if isinstance(value, (int, float)):
            return cls.uniform(float(value))
        if isinstance(value, dict):
            return cls(
                left=float(value.get("left", 0.0)),
                top=float(value.get("top", 0.0)),
                right=float(value.get("right", 0.0)),
                bottom=float(value.get("bottom", 0.0)),
            )
        left, top, right, bottom = (float(item) for item in value)
        return cls(left=left, top=top, right=right, bottom=bottom)

    def add(self, other: "Box") -> "Box":
        return Box(
            left=self.left + other.left,
            top=self.top + other.top,
            right=self.right + other.right,
            bottom=self.bottom + other.bottom,
        )

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top


@dataclass(frozen=True)
class Point:
    x: float
    y: float


def is_missing(value: Any) -> bool:
    if value is None:
        return True
    try:
        number = float(value)
    except (TypeError, ValueError):
        return True
    return not math.isfinite(number)


def format_float(value: float) -> str:
    """Integers without decimals, otherwise at most two decimals."""
    rounded = round(float(value), 2)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.2f}".rstrip("0").rstrip(".")


def fmt(value: float) -> str:
    text = f"{float(value):.2f}".rstrip("0").rstrip(".")
    if text in {"-0", ""}:
        return "0"
    return text
