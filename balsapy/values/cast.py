"""Directional casts between template value types.

The same table is used for literals at compile time and for runtime
parameters at render time:

    string -> string   identity
    string -> color    only if the text is a valid CSS color
    color  -> string   unwraps the color text
    color  -> color    identity
    int    -> int      identity
    int    -> float    only if the integer fits in 32 bits
    float  -> float    identity

Every other pair fails with `InvalidTypeCast`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

from balsapy.values.model import (
    ColorValue,
    FloatValue,
    IntegerValue,
    StringValue,
    Value,
    ValueType,
)
from balsapy.values.validators import is_valid_color

INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1

type ColorValidator = Callable[[str], bool]


class InvalidTypeCast(Exception):
    """A value of type `from_type` cannot be cast to `to_type`."""

    def __init__(self, value: Value, from_type: ValueType, to_type: ValueType) -> None:
        self.value = value
        self.from_type = from_type
        self.to_type = to_type
        super().__init__(f"failed to cast value `{value}` of type `{from_type}` to type `{to_type}`")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvalidTypeCast):
            return NotImplemented
        return (self.value, self.from_type, self.to_type) == (other.value, other.from_type, other.to_type)

    def __hash__(self) -> int:
        return hash((self.value, self.from_type, self.to_type))


def cast_value(
    value: Value,
    target: ValueType,
    *,
    color_validator: ColorValidator = is_valid_color,
) -> Value:
    """Cast `value` to `target`, raising `InvalidTypeCast` when the pair is not allowed."""
    match value, target:
        case StringValue(), ValueType.STRING:
            return value
        case StringValue(text=text), ValueType.COLOR if color_validator(text):
            return ColorValue(text)
        case ColorValue(text=text), ValueType.STRING:
            return StringValue(text)
        case ColorValue(), ValueType.COLOR:
            return value
        case IntegerValue(), ValueType.INTEGER:
            return value
        case IntegerValue(value=number), ValueType.FLOAT if INT32_MIN <= number <= INT32_MAX:
            return FloatValue(float(number))
        case FloatValue(), ValueType.FLOAT:
            return value

    raise InvalidTypeCast(value, value.value_type, target)


def can_cast(
    value: Value,
    target: ValueType,
    *,
    color_validator: ColorValidator = is_valid_color,
) -> bool:
    try:
        cast_value(value, target, color_validator=color_validator)
    except InvalidTypeCast:
        return False
    return True
