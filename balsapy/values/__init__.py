"""Template values, types and casts."""

from balsapy.values.cast import (
    INT32_MAX,
    INT32_MIN,
    ColorValidator,
    InvalidTypeCast,
    can_cast,
    cast_value,
)
from balsapy.values.model import (
    INT64_MAX,
    INT64_MIN,
    ColorValue,
    FloatValue,
    IntegerValue,
    StringValue,
    Value,
    ValueType,
    format_float,
)
from balsapy.values.validators import CSS_COLOR_NAMES, is_valid_color

__all__ = [
    "CSS_COLOR_NAMES",
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
    "ColorValidator",
    "ColorValue",
    "FloatValue",
    "IntegerValue",
    "InvalidTypeCast",
    "StringValue",
    "Value",
    "ValueType",
    "can_cast",
    "cast_value",
    "format_float",
    "is_valid_color",
]
