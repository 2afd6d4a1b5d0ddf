"""Parser object and the core sequencing/alternation combinators.

A parser is a function `(source, position) -> ParseToken | ParseFailure`. The
source string is never sliced: the text still to be parsed is
`source[position:]`, and after a success it continues at `token.end`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from balsapy.combinators.result import (
    NOT_MATCHED,
    MalformedInput,
    NotMatched,
    ParseFailure,
    ParseResult,
    ParseToken,
    merge_ranges,
)
from balsapy.text import TextRange

type ParseFn[T] = Callable[[str, int], ParseResult[T]]


@dataclass(frozen=True, slots=True)
class Parser[T]:
    """A composable parser."""

    run: ParseFn[T]
    name: str = "parser"

    def parse(self, source: str, position: int = 0) -> ParseResult[T]:
        return self.run(source, position)

    def __call__(self, source: str, position: int = 0) -> ParseResult[T]:
        return self.run(source, position)

    def __repr__(self) -> str:
        return f"Parser({self.name})"


def combine(left: Any, right: Any) -> Any:
    """Default value-merge rule used by `chain`.

    - two strings are concatenated
    - a value followed by a list is prepended to it
    - a value followed by `None` becomes a one element list
    """
    if isinstance(left, str) and isinstance(right, str):
        return left + right
    if right is None:
        return [left]
    if isinstance(right, list):
        return [left, *right]
    raise TypeError(f"Cannot combine {type(left).__name__} with {type(right).__name__}")


def fmap[T, O](parser: Parser[T], function: Callable[[T], O]) -> Parser[O]:
    """Transform a successful token's value; the span is unchanged."""

    def run(source: str, position: int) -> ParseResult[O]:
        result = parser.run(source, position)
        if isinstance(result, ParseFailure):
            return result
        return ParseToken(function(result.value), result.range)

    return Parser(run, name=parser.name)


def spanned[T](parser: Parser[T]) -> Parser[ParseToken[T]]:
    """Expose the whole token (value + span) as the value, for nodes that record their span."""

    def run(source: str, position: int) -> ParseResult[ParseToken[T]]:
        result = parser.run(source, position)
        if isinstance(result, ParseFailure):
            return result
        return ParseToken(result, result.range)

    return Parser(run, name=parser.name)


def fmap_result[T, O](parser: Parser[T], function: Callable[[T], O]) -> Parser[O]:
    """Like `fmap`, but `function` may raise `ValueError`.

    The error becomes `MalformedInput` at the start of the matched span.
    """

    def run(source: str, position: int) -> ParseResult[O]:
        result = parser.run(source, position)
        if isinstance(result, ParseFailure):
            return result
        try:
            value = function(result.value)
        except ValueError:
            return MalformedInput(result.range.start)
        return ParseToken(value, result.range)

    return Parser(run, name=parser.name)


def fmap_chain[L, R, O](
    left_parser: Parser[L],
    right_parser: Parser[R],
    combinator: Callable[[L, R], O],
) -> Parser[O]:
    """Run `left_parser` then `right_parser`, merging both values with `combinator`."""

    def run(source: str, position: int) -> ParseResult[O]:
        left_result = left_parser.run(source, position)
        if isinstance(left_result, ParseFailure):
            return left_result
        right_result = right_parser.run(source, left_result.end)
        if isinstance(right_result, ParseFailure):
            return right_result
        return ParseToken(
            combinator(left_result.value, right_result.value),
            merge_ranges(left_result.range, right_result.range),
        )

    return Parser(run, name=f"{left_parser.name} {right_parser.name}")


def chain(
    left_parser: Parser[Any],
    right_parser: Parser[Any],
    merge: Callable[[Any, Any], Any] = combine,
) -> Parser[Any]:
    """Run two parsers in sequence and merge their values with `merge` (see `combine`)."""
    return fmap_chain(left_parser, right_parser, merge)


def either[T](*alternatives: Parser[T]) -> Parser[T]:
    """Ordered alternation.

    The next alternative is only tried when the previous one did not match;
    `MalformedInput` is returned as soon as any alternative reports it.
    """
    if not alternatives:
        raise ValueError("either() needs at least one alternative")

    def run(source: str, position: int) -> ParseResult[T]:
        for alternative in alternatives:
            result = alternative.run(source, position)
            if isinstance(result, NotMatched):
                continue
            return result
        return NOT_MATCHED

    return Parser(run, name=" | ".join(alternative.name for alternative in alternatives))


def left[L](left_parser: Parser[L], right_parser: Parser[Any]) -> Parser[L]:
    """Sequence two parsers, keeping the left value."""
    return fmap_chain(left_parser, right_parser, lambda kept, _: kept)


def right[R](left_parser: Parser[Any], right_parser: Parser[R]) -> Parser[R]:
    """Sequence two parsers, keeping the right value."""
    return fmap_chain(left_parser, right_parser, lambda _, kept: kept)


def middle[M](left_parser: Parser[Any], middle_parser: Parser[M], right_parser: Parser[Any]) -> Parser[M]:
    """Sequence three parsers, keeping the middle value; the span covers all three."""
    return right(left_parser, left(middle_parser, right_parser))


def optional[T](parser: Parser[T]) -> Parser[T | None]:
    """Turn `NotMatched` into a zero-width `None` token; `MalformedInput` still fails."""

    def run(source: str, position: int) -> ParseResult[T | None]:
        result = parser.run(source, position)
        if isinstance(result, NotMatched):
            return ParseToken(None, TextRange.from_offsets(position, position))
        return result

    return Parser(run, name=f"{parser.name}?")
