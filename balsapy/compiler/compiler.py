"""Compile scanned template blocks into replacement instructions."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Final

from balsapy.compiler.model import (
    CompiledTemplate,
    ParameterDescription,
    ReplacementInstruction,
    ReplaceWithNothing,
    ReplaceWithParameter,
)
from balsapy.compiler.options import CompileOptions
from balsapy.errors import (
    BlockKind,
    InvalidExpressionError,
    InvalidIdentifierError,
    InvalidParameterError,
    InvalidTypeCastError,
    InvalidTypeExpressionError,
)
from balsapy.grammar import (
    Block,
    DeclarationBlock,
    Expression,
    IdentifierExpression,
    ParameterBlock,
    TemplateBlock,
    TypeExpression,
    ValueExpression,
    parse_template,
)
from balsapy.text import TextRange
from balsapy.values import InvalidTypeCast, Value, ValueType, cast_value

logger = logging.getLogger(__name__)

DEFAULT_VALUE_OPTION: Final[str] = "defaultValue"


class Compiler:
    """Validates blocks in source order and collects the compiled template.

    Fails on the first invalid block. A `Compiler` is used for one compilation
    only; `compile_blocks` creates a fresh one each time.
    """

    def __init__(self, options: CompileOptions | None = None) -> None:
        self._options = options or CompileOptions()
        self._global_scope: dict[str, Value] = {}
        self._replacements: list[ReplacementInstruction] = []

    @property
    def options(self) -> CompileOptions:
        return self._options

    @classmethod
    def compile_blocks(
        cls,
        blocks: Iterable[TemplateBlock],
        options: CompileOptions | None = None,
    ) -> CompiledTemplate:
        compiler = cls(options)
        for block in blocks:
            compiler.compile_block(block)
        return compiler.finish()

    def compile_block(self, block: TemplateBlock) -> None:
        match block.payload:
            case ParameterBlock():
                self._compile_parameter_block(block)
            case DeclarationBlock():
                self._compile_declaration_block(block)
            case _:
                raise TypeError(f"Unexpected block payload: {block.payload!r}")

    def finish(self) -> CompiledTemplate:
        return CompiledTemplate(
            global_scope=self._global_scope,
            replacements=tuple(self._replacements),
        )

    def _compile_parameter_block(self, block: Block[ParameterBlock]) -> None:
        payload = block.payload
        name = _expect_identifier(payload.name, block.range, block_kind="parameter")
        value_type = _expect_type(payload.value_type, block.range)

        default_value: Value | None = None
        for key, option in payload.options or ():
            if key != DEFAULT_VALUE_OPTION:
                raise InvalidParameterError(key, block.range)
            literal = _expect_value(option, block.range)
            default_value = self._cast(literal, value_type, block.range)

        self._replacements.append(
            ReplacementInstruction(
                range=block.range,
                replace_with=ReplaceWithParameter(
                    ParameterDescription(name=name, value_type=value_type, default_value=default_value)
                ),
            )
        )

    def _compile_declaration_block(self, block: Block[DeclarationBlock]) -> None:
        for declaration in block.payload.declarations:
            name = _expect_identifier(declaration.identifier, block.range, block_kind="declaration")
            value_type = _expect_type(declaration.value_type, block.range)
            literal = _expect_value(declaration.value, block.range)
            value = self._cast(literal, value_type, block.range)

            if name in self._global_scope:
                logger.debug("Declaration `%s` overrides an earlier declaration", name)
            self._global_scope[name] = value

        if self._options.elide_declaration_blocks:
            self._replacements.append(ReplacementInstruction(range=block.range, replace_with=ReplaceWithNothing()))

    def _cast(self, value: Value, value_type: ValueType, range: TextRange) -> Value:
        try:
            return cast_value(value, value_type, color_validator=self._options.color_validator)
        except InvalidTypeCast as exc:
            raise InvalidTypeCastError(exc, range) from exc


def _expect_identifier(expression: Expression, range: TextRange, *, block_kind: BlockKind) -> str:
    if isinstance(expression, IdentifierExpression):
        return expression.name
    raise InvalidIdentifierError(expression, range, block_kind=block_kind)


def _expect_type(expression: Expression, range: TextRange) -> ValueType:
    if isinstance(expression, TypeExpression):
        return expression.value_type
    raise InvalidTypeExpressionError(expression, range)


def _expect_value(expression: Expression, range: TextRange) -> Value:
    if isinstance(expression, ValueExpression):
        return expression.value
    raise InvalidExpressionError(expression, range)


def compile_text(text: str, options: CompileOptions | None = None) -> CompiledTemplate:
    """Scan and compile template source text."""
    compiled = Compiler.compile_blocks(parse_template(text), options)
    logger.debug(
        "Compiled template: %d instruction(s), %d global declaration(s)",
        len(compiled.replacements),
        len(compiled.global_scope),
    )
    return compiled
