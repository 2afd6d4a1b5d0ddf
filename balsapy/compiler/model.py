"""Compiled template representation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from balsapy.text import TextRange
from balsapy.values import Value, ValueType


@dataclass(frozen=True, slots=True)
class ParameterDescription:
    """A typed placeholder; `default_value` is already cast to `value_type`."""

    name: str
    value_type: ValueType
    default_value: Value | None = None


@dataclass(frozen=True, slots=True)
class ReplaceWithParameter:
    parameter: ParameterDescription


@dataclass(frozen=True, slots=True)
class ReplaceWithNothing:
    pass


type ReplaceWith = ReplaceWithParameter | ReplaceWithNothing


@dataclass(frozen=True, slots=True)
class ReplacementInstruction:
    """Replace the source span `range` with `replace_with` when rendering."""

    range: TextRange
    replace_with: ReplaceWith

    @property
    def parameter(self) -> ParameterDescription | None:
        if isinstance(self.replace_with, ReplaceWithParameter):
            return self.replace_with.parameter
        return None


def _freeze_scope(scope: Mapping[str, Value]) -> Mapping[str, Value]:
    return MappingProxyType(dict(scope))


@dataclass(frozen=True, slots=True)
class CompiledTemplate:
    """Global constant scope plus ordered replacement instructions.

    Invariant: instructions are sorted by start offset and do not overlap.
    """

    global_scope: Mapping[str, Value] = field(default_factory=dict)
    replacements: tuple[ReplacementInstruction, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "global_scope", _freeze_scope(self.global_scope))
        object.__setattr__(self, "replacements", tuple(self.replacements))

        previous: ReplacementInstruction | None = None
        for instruction in self.replacements:
            if previous is not None and (
                instruction.range.start_offset < previous.range.start_offset
                or previous.range.overlaps(instruction.range)
            ):
                raise ValueError(
                    f"Replacement instructions must be ordered and non-overlapping: "
                    f"{previous.range!r} then {instruction.range!r}"
                )
            previous = instruction

    def __hash__(self) -> int:
        return hash((tuple(sorted(self.global_scope.items())), self.replacements))

    @property
    def parameters(self) -> tuple[ParameterDescription, ...]:
        """Parameter descriptions in source order."""
        return tuple(
            instruction.parameter for instruction in self.replacements if instruction.parameter is not None
        )
