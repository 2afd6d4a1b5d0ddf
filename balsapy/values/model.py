"""Typed template values."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum
from typing import Final

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1


class ValueType(StrEnum):
    """Template value types; the enum value is the keyword used in templates."""

    STRING = "string"
    COLOR = "color"
    INTEGER = "int"
    FLOAT = "float"


@dataclass(frozen=True, slots=True)
class StringValue:
    text: str

    @property
    def value_type(self) -> ValueType:
        return ValueType.STRING

    def to_text(self) -> str:
        return self.text

    def __str__(self) -> str:
        return f'"{self.text}"'


@dataclass(frozen=True, slots=True)
class ColorValue:
    """A CSS color: hex code, `rgb()`/`hsl()` form or color name."""

    text: str

    @property
    def value_type(self) -> ValueType:
        return ValueType.COLOR

    def to_text(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class IntegerValue:
    """A 64-bit signed integer."""

    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"IntegerValue expects an int, got {type(self.value).__name__}")
        if not INT64_MIN <= self.value <= INT64_MAX:
            raise ValueError(f"IntegerValue {self.value} does not fit in 64 bits")

    @property
    def value_type(self) -> ValueType:
        return ValueType.INTEGER

    def to_text(self) -> str:
        return str(self.value)

    def __str__(self) -> str:
        return str(self.value)


def format_float(value: float) -> str:
    """Plain decimal text for `value`, with no exponent and no trailing `.0`.

    Digits are the shortest that round-trip, so `0.1` stays `0.1`.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return format(Decimal(repr(value)), "f").removesuffix(".0")


@dataclass(frozen=True, slots=True)
class FloatValue:
    """A 64-bit float."""

    value: float

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise TypeError(f"FloatValue expects a float, got {type(self.value).__name__}")
        object.__setattr__(self, "value", float(self.value))

    @property
    def value_type(self) -> ValueType:
        return ValueType.FLOAT

    def to_text(self) -> str:
        return format_float(self.value)

    def __str__(self) -> str:
        return format_float(self.value)


type Value = StringValue | ColorValue | IntegerValue | FloatValue
