"""Template grammar built from the generic combinators.

Surface syntax (`ws` is any run of spaces, tabs and newlines):

    parameter block    "{{" ws expr ws ":" ws expr (ws "," ws option)* ws "}}"
    option             identifier ws ":" ws expr
    declaration block  "{{@" ws decl (ws "," ws decl)* ws "}}"
    decl               expr ws ":" ws expr ws "=" ws expr

Everything outside blocks is literal text. A `{` that does not start a block
is literal text too.
"""

from __future__ import annotations

import logging
import string
from functools import cache
from typing import Any, Final

from balsapy.combinators import (
    MalformedInput,
    Parser,
    ParseToken,
    char_parser,
    either,
    end_of_input,
    fmap,
    fmap_chain,
    fmap_result,
    key_sep_value,
    left,
    many,
    middle,
    not_followed_by,
    one_to_many,
    optional,
    right,
    separated_list1,
    spanned,
    string_parser,
    take_until_char,
    take_while_chars,
)
from balsapy.errors import TemplateParseError
from balsapy.grammar.model import (
    Block,
    BlockOption,
    Declaration,
    DeclarationBlock,
    Expression,
    IdentifierExpression,
    ParameterBlock,
    TemplateBlock,
    TypeExpression,
    ValueExpression,
)
from balsapy.text import ZERO, TextRange
from balsapy.values import INT64_MAX, IntegerValue, StringValue, Value, ValueType

logger = logging.getLogger(__name__)

WHITESPACE_CHARS: Final[frozenset[str]] = frozenset(" \t\n\r")
IDENTIFIER_CHARS: Final[frozenset[str]] = frozenset(string.ascii_letters + string.digits + "_-")
DIGIT_CHARS: Final[frozenset[str]] = frozenset(string.digits)

# Tried in this order.
TYPE_KEYWORDS: Final[tuple[ValueType, ...]] = (
    ValueType.STRING,
    ValueType.COLOR,
    ValueType.INTEGER,
    ValueType.FLOAT,
)

PARAMETER_BLOCK_OPEN: Final[str] = "{{"
DECLARATION_BLOCK_OPEN: Final[str] = "{{@"
BLOCK_CLOSE: Final[str] = "}}"


def whitespace() -> Parser[str | None]:
    return optional(take_while_chars(WHITESPACE_CHARS))


def separator(value: str) -> Parser[str]:
    """A punctuation character with optional whitespace on both sides."""
    return middle(whitespace(), char_parser(value), whitespace())


def identifier() -> Parser[str]:
    return take_while_chars(IDENTIFIER_CHARS)


def string_literal() -> Parser[str]:
    """Text between double quotes, taken verbatim (no escapes)."""
    quote = char_parser('"')
    return fmap(middle(quote, optional(take_until_char('"')), quote), lambda text: text or "")


def _parse_int64(digits: str) -> int:
    number = int(digits)
    if number > INT64_MAX:
        raise ValueError(f"integer literal {digits} does not fit in 64 bits")
    return number


def integer_literal() -> Parser[int]:
    return fmap_result(take_while_chars(DIGIT_CHARS), _parse_int64)


def type_keyword() -> Parser[ValueType]:
    def keyword(value_type: ValueType) -> Parser[ValueType]:
        matched = left(string_parser(value_type.value), not_followed_by(IDENTIFIER_CHARS))
        return fmap(matched, lambda _: value_type)

    return either(*(keyword(value_type) for value_type in TYPE_KEYWORDS))


def value_literal() -> Parser[Value]:
    return either(
        fmap(string_literal(), StringValue),
        fmap(integer_literal(), IntegerValue),
    )


def expression() -> Parser[Expression]:
    """Value literal, else type keyword, else identifier."""
    return either(
        fmap(value_literal(), ValueExpression),
        fmap(type_keyword(), TypeExpression),
        fmap(identifier(), IdentifierExpression),
    )


def _block(open_tag: str, body: Parser[Any]) -> Parser[Any]:
    return middle(
        left(string_parser(open_tag), whitespace()),
        body,
        left(whitespace(), string_parser(BLOCK_CLOSE)),
    )


def parameter_block() -> Parser[Block[ParameterBlock]]:
    name_and_type = key_sep_value(expression(), separator(":"), expression())
    option = key_sep_value(identifier(), separator(":"), expression())
    options = optional(one_to_many(right(separator(","), option)))

    def build(pair: tuple[Expression, Expression], parsed_options: list[BlockOption] | None) -> ParameterBlock:
        name, value_type = pair
        return ParameterBlock(
            name=name,
            value_type=value_type,
            options=tuple(parsed_options) if parsed_options is not None else None,
        )

    body = fmap_chain(name_and_type, options, build)
    return fmap(spanned(_block(PARAMETER_BLOCK_OPEN, body)), _to_block)


def declaration() -> Parser[Declaration]:
    name_and_type = key_sep_value(expression(), separator(":"), expression())

    def build(pair: tuple[Expression, Expression], value: Expression) -> Declaration:
        name, value_type = pair
        return Declaration(identifier=name, value_type=value_type, value=value)

    return fmap_chain(name_and_type, right(separator("="), expression()), build)


def declaration_block() -> Parser[Block[DeclarationBlock]]:
    body = fmap(
        separated_list1(declaration(), separator(",")),
        lambda declarations: DeclarationBlock(tuple(declarations)),
    )
    return fmap(spanned(_block(DECLARATION_BLOCK_OPEN, body)), _to_block)


def _to_block[T](token: ParseToken[T]) -> Block[T]:
    return Block(range=token.range, payload=token.value)


def template_block() -> Parser[TemplateBlock]:
    return either(parameter_block(), declaration_block())


def literal_text() -> Parser[None]:
    """Text up to the next `{`, or a lone `{` that did not open a block."""
    return fmap(either(take_until_char("{"), char_parser("{")), lambda _: None)


def document() -> Parser[tuple[TemplateBlock, ...]]:
    items = many(either(template_block(), literal_text()))
    blocks = fmap(items, lambda parsed: tuple(item for item in parsed if item is not None))
    return left(blocks, end_of_input())


@cache
def _document_parser() -> Parser[tuple[TemplateBlock, ...]]:
    return document()


def parse_template(text: str) -> tuple[TemplateBlock, ...]:
    """Scan a template and return its blocks in source order.

    Raises `TemplateParseError` when a block has the right shape but invalid
    content (for example an integer literal that overflows 64 bits).
    """
    result = _document_parser().parse(text, 0)
    if isinstance(result, MalformedInput):
        raise TemplateParseError(result.position)
    if not isinstance(result, ParseToken):
        raise TemplateParseError(ZERO)

    logger.debug("Scanned %d block(s) in %d characters", len(result.value), len(text))
    return result.value


def literal_ranges(text: str, blocks: tuple[TemplateBlock, ...]) -> list[TextRange]:
    """Non-empty spans of literal text between (and around) the given blocks."""
    ranges: list[TextRange] = []
    cursor = 0
    for block in blocks:
        if block.range.start_offset > cursor:
            ranges.append(TextRange.from_offsets(cursor, block.range.start_offset))
        cursor = block.range.end_offset
    if cursor < len(text):
        ranges.append(TextRange.from_offsets(cursor, len(text)))
    return ranges
