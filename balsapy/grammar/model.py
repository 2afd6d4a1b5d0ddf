"""Syntax produced by the template grammar."""

from __future__ import annotations

from dataclasses import dataclass

from balsapy.text import TextRange
from balsapy.values import Value, ValueType


@dataclass(frozen=True, slots=True)
class IdentifierExpression:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class TypeExpression:
    value_type: ValueType

    def __str__(self) -> str:
        return str(self.value_type)


@dataclass(frozen=True, slots=True)
class ValueExpression:
    value: Value

    def __str__(self) -> str:
        return str(self.value)


# Syntactic classification only; the compiler decides which kind is valid where.
type Expression = IdentifierExpression | TypeExpression | ValueExpression

type BlockOption = tuple[str, Expression]


@dataclass(frozen=True, slots=True)
class ParameterBlock:
    """`{{ name : type, key: value, ... }}` before validation."""

    name: Expression
    value_type: Expression
    options: tuple[BlockOption, ...] | None = None


@dataclass(frozen=True, slots=True)
class Declaration:
    """One `name : type = value` entry of a declaration block."""

    identifier: Expression
    value_type: Expression
    value: Expression


@dataclass(frozen=True, slots=True)
class DeclarationBlock:
    """`{{@ name : type = value, ... }}` before validation."""

    declarations: tuple[Declaration, ...]


@dataclass(frozen=True, slots=True)
class Block[T]:
    """A block payload plus the span of the whole block, braces included."""

    range: TextRange
    payload: T


type TemplateBlock = Block[ParameterBlock] | Block[DeclarationBlock]
