"""Runtime parameters supplied to a render."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Protocol, runtime_checkable

from balsapy.values import ColorValue, FloatValue, IntegerValue, StringValue, Value

type PythonScalar = str | int | float

_VALUE_TYPES = (StringValue, ColorValue, IntegerValue, FloatValue)


def to_value(obj: Value | PythonScalar) -> Value:
    """Wrap a plain Python scalar as a template value (`str` becomes a string, never a color)."""
    if isinstance(obj, _VALUE_TYPES):
        return obj
    if isinstance(obj, bool):
        raise TypeError("bool is not a template value type")
    if isinstance(obj, str):
        return StringValue(obj)
    if isinstance(obj, int):
        return IntegerValue(obj)
    if isinstance(obj, float):
        return FloatValue(obj)
    raise TypeError(f"Unsupported template parameter type: {type(obj).__name__}")


class TemplateParameters(Mapping[str, Value]):
    """Immutable name -> value mapping built fluently.

    Every builder method returns a new instance:

        TemplateParameters().string("title", "Hello").int("year", 2022)
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, Value] | None = None) -> None:
        checked: dict[str, Value] = {}
        for key, value in (values or {}).items():
            if not isinstance(value, _VALUE_TYPES):
                raise TypeError(f"Parameter `{key}` must be a template value, got {type(value).__name__}")
            checked[key] = value
        self._values: Mapping[str, Value] = MappingProxyType(checked)

    @classmethod
    def from_python(cls, values: Mapping[str, Value | PythonScalar]) -> TemplateParameters:
        return cls({key: to_value(value) for key, value in values.items()})

    def value(self, key: str, value: Value) -> TemplateParameters:
        return TemplateParameters({**self._values, key: value})

    def string(self, key: str, value: str) -> TemplateParameters:
        return self.value(key, StringValue(value))

    def color(self, key: str, value: str) -> TemplateParameters:
        """Add a color; the text is validated when it is cast during rendering."""
        return self.value(key, ColorValue(value))

    def int(self, key: str, value: int) -> TemplateParameters:
        return self.value(key, IntegerValue(value))

    def float(self, key: str, value: float) -> TemplateParameters:
        return self.value(key, FloatValue(value))

    def __getitem__(self, key: str) -> Value:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        items = ", ".join(f"{key}={value}" for key, value in self._values.items())
        return f"TemplateParameters({items})"


@runtime_checkable
class AsParameters(Protocol):
    """Objects that can describe themselves as template parameters."""

    def as_parameters(self) -> Mapping[str, Value]: ...


def resolve_parameters(source: AsParameters | Mapping[str, Value | PythonScalar] | None) -> Mapping[str, Value]:
    """Normalise the accepted parameter sources into a value mapping."""
    if source is None:
        return TemplateParameters()
    if isinstance(source, TemplateParameters):
        return source
    if isinstance(source, AsParameters):
        return source.as_parameters()
    if isinstance(source, Mapping):
        return TemplateParameters.from_python(source)
    raise TypeError(f"Cannot use {type(source).__name__} as template parameters")
