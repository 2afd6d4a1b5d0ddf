"""Compile-time and render-time errors."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Literal

from balsapy.diagnostics import (
    COMPILE_INVALID_EXPRESSION,
    COMPILE_INVALID_IDENTIFIER_FOR_DECLARATION_BLOCK,
    COMPILE_INVALID_IDENTIFIER_FOR_PARAMETER_BLOCK,
    COMPILE_INVALID_PARAMETER,
    COMPILE_INVALID_TYPE_CAST,
    COMPILE_INVALID_TYPE_EXPRESSION,
    RENDER_INVALID_PARAMETER_TYPE,
    RENDER_MISSING_PARAMETER,
    TEMPLATE_PARSE_FAIL,
    Diagnostic,
    DiagnosticSpec,
)
from balsapy.text import TextRange, TextSize
from balsapy.values import InvalidTypeCast, Value, ValueType

if TYPE_CHECKING:
    from balsapy.grammar.model import Expression

type BlockKind = Literal["parameter", "declaration"]


class BalsaError(Exception):
    """Base class for every template error."""

    spec: ClassVar[DiagnosticSpec]

    def __init__(self, message: str, range: TextRange) -> None:
        super().__init__(message)
        self.message = message
        self.range = range

    def to_diagnostic(self) -> Diagnostic:
        return Diagnostic.from_spec(self.spec, self.range, message=self.message)


class TemplateCompileError(BalsaError):
    """A template failed to parse or compile."""

    @property
    def position(self) -> TextSize:
        """Character offset of the block that failed."""
        return self.range.start

    def __str__(self) -> str:
        return f"{self.message} at position {self.range.start_offset}"


class TemplateParseError(TemplateCompileError):
    spec = TEMPLATE_PARSE_FAIL

    def __init__(self, position: TextSize) -> None:
        super().__init__("parser failed", TextRange.empty(position))


class InvalidIdentifierError(TemplateCompileError):
    def __init__(self, expression: Expression, range: TextRange, *, block_kind: BlockKind) -> None:
        self.expression = expression
        self.block_kind = block_kind
        super().__init__(f"`{expression}` is not a valid identifier in a {block_kind} block", range)

    @property
    def spec(self) -> DiagnosticSpec:
        if self.block_kind == "parameter":
            return COMPILE_INVALID_IDENTIFIER_FOR_PARAMETER_BLOCK
        return COMPILE_INVALID_IDENTIFIER_FOR_DECLARATION_BLOCK


class InvalidTypeExpressionError(TemplateCompileError):
    spec = COMPILE_INVALID_TYPE_EXPRESSION

    def __init__(self, expression: Expression, range: TextRange) -> None:
        self.expression = expression
        super().__init__(f"`{expression}` is not a valid type", range)


class InvalidExpressionError(TemplateCompileError):
    spec = COMPILE_INVALID_EXPRESSION

    def __init__(self, expression: Expression, range: TextRange) -> None:
        self.expression = expression
        super().__init__(f"`{expression}` is not a valid value", range)


class InvalidParameterError(TemplateCompileError):
    spec = COMPILE_INVALID_PARAMETER

    def __init__(self, key: str, range: TextRange) -> None:
        self.key = key
        super().__init__(f"unknown parameter option `{key}`", range)


class InvalidTypeCastError(TemplateCompileError):
    spec = COMPILE_INVALID_TYPE_CAST

    def __init__(self, cast: InvalidTypeCast, range: TextRange) -> None:
        self.cast = cast
        super().__init__(str(cast), range)


class TemplateRenderError(BalsaError):
    """A compiled template could not be rendered with the given parameters."""

    def __init__(self, message: str, name: str, range: TextRange) -> None:
        self.name = name
        super().__init__(message, range)


class MissingParameterError(TemplateRenderError):
    spec = RENDER_MISSING_PARAMETER

    def __init__(self, name: str, range: TextRange) -> None:
        super().__init__(f"missing parameter `{name}`", name, range)


class InvalidParameterTypeError(TemplateRenderError):
    spec = RENDER_INVALID_PARAMETER_TYPE

    def __init__(
        self,
        name: str,
        received_value: Value,
        received_type: ValueType,
        expected_type: ValueType,
        range: TextRange,
    ) -> None:
        self.received_value = received_value
        self.received_type = received_type
        self.expected_type = expected_type
        super().__init__(
            f"parameter `{name}` expected type `{expected_type}` but received `{received_value}` "
            f"of type `{received_type}`",
            name,
            range,
        )
