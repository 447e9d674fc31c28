# ─────────────────────────────────────────────────────────────────────────────
# Array Shapes — declarative structural constraints for array fields
# ─────────────────────────────────────────────────────────────────────────────
# Each shape reports the first structural problem it finds as a short
# sentence (the engine prefixes the field path), or None when the array
# conforms. One problem per field keeps error counts exact.
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from soundgarden.validation.engine import is_integral, is_number


@dataclass(frozen=True)
class Channel:
    """Inclusive range for one color channel."""

    name: str
    minimum: float
    maximum: float


HSB_CHANNELS = (
    Channel("hue", 0, 360),
    Channel("saturation", 0, 100),
    Channel("brightness", 0, 100),
)

RGB_CHANNELS = (
    Channel("red", 0, 255),
    Channel("green", 0, 255),
    Channel("blue", 0, 255),
)


def _count_problem(length: int, min_items: int, max_items: int | None, noun: str) -> str | None:
    if length < min_items:
        return f"expected at least {min_items} {noun}, got {length}"
    if max_items is not None and length > max_items:
        return f"expected at most {max_items} {noun}, got {length}"
    return None


@dataclass(frozen=True)
class ColorList:
    """N colors, each a triple of numbers with per-channel ranges."""

    min_items: int
    max_items: int
    channels: tuple[Channel, ...]
    integer_channels: bool = False

    def problem(self, value: list[Any]) -> str | None:
        count = _count_problem(len(value), self.min_items, self.max_items, "colors")
        if count is not None:
            return count
        arity = len(self.channels)
        for i, color in enumerate(value):
            if not isinstance(color, list) or len(color) != arity:
                return f"color {i} must be an array of exactly {arity} numbers, got {color!r}"
            for channel, component in zip(self.channels, color, strict=True):
                if not is_number(component):
                    return f"color {i} {channel.name} must be a number, got {component!r}"
                if self.integer_channels and not is_integral(component):
                    return f"color {i} {channel.name} must be an integer, got {component}"
                if not channel.minimum <= component <= channel.maximum:
                    return (
                        f"color {i} {channel.name} must be within "
                        f"{channel.minimum}-{channel.maximum}, got {component}"
                    )
        return None

    def describe(self) -> str:
        names = "/".join(c.name for c in self.channels)
        kind = "integer" if self.integer_channels else "number"
        return f"{self.min_items}-{self.max_items} [{names}] {kind} triples"


@dataclass(frozen=True)
class Span:
    """A [min, max] pair inside an inclusive range, with min <= max."""

    lower: float
    upper: float

    def problem(self, value: list[Any]) -> str | None:
        if len(value) != 2:
            return f"expected exactly 2 numbers [min, max], got {len(value)}"
        low, high = value
        if not (is_number(low) and is_number(high)):
            return f"expected numbers, got {value!r}"
        if not (math.isfinite(low) and math.isfinite(high)):
            return f"expected finite numbers, got {value!r}"
        if low < self.lower or high > self.upper or high < self.lower or low > self.upper:
            return f"range {value} must lie within {self.lower}-{self.upper}"
        if low > high:
            return f"min {low} exceeds max {high}"
        return None

    def describe(self) -> str:
        return f"[min, max] within {self.lower}-{self.upper}"


@dataclass(frozen=True)
class NumberList:
    """A list of numbers, each within an inclusive range."""

    min_items: int
    max_items: int | None
    lower: float
    upper: float
    integer: bool = True

    def problem(self, value: list[Any]) -> str | None:
        count = _count_problem(len(value), self.min_items, self.max_items, "values")
        if count is not None:
            return count
        for i, item in enumerate(value):
            if not is_number(item):
                return f"item {i} must be a number, got {item!r}"
            if self.integer and not is_integral(item):
                return f"item {i} must be an integer, got {item}"
            if not self.lower <= item <= self.upper:
                return f"item {i} must be within {self.lower}-{self.upper}, got {item}"
        return None

    def describe(self) -> str:
        upper = "" if self.max_items is None else f"-{self.max_items}"
        kind = "integers" if self.integer else "numbers"
        return f"{self.min_items}{upper} {kind} within {self.lower}-{self.upper}"
