"""Repetition and list combinators."""

from __future__ import annotations

from typing import Any

from balsapy.combinators.parser import Parser, chain, fmap, fmap_chain, optional, right
from balsapy.combinators.result import (
    NOT_MATCHED,
    NotMatched,
    ParseFailure,
    ParseResult,
    ParseToken,
)
from balsapy.text import TextRange


class ParserStalled(RuntimeError):
    """A repeated parser succeeded without consuming input."""


def many[T](parser: Parser[T]) -> Parser[list[T]]:
    """Zero or more repetitions.

    Stops at the first `NotMatched`; any `MalformedInput` aborts the whole
    repetition.
    """

    def run(source: str, position: int) -> ParseResult[list[T]]:
        values: list[T] = []
        end = position
        while True:
            result = parser.run(source, end)
            if isinstance(result, NotMatched):
                break
            if isinstance(result, ParseFailure):
                return result
            if result.end <= end:
                raise ParserStalled(f"Parser {parser.name!r} stopped making progress at offset {end}")
            values.append(result.value)
            end = result.end
        return ParseToken(values, TextRange.from_offsets(position, end))

    return Parser(run, name=f"{parser.name}*")


def one_to_many[T](parser: Parser[T]) -> Parser[list[T]]:
    """As `many`, but at least one repetition is required."""
    repeated = many(parser)

    def run(source: str, position: int) -> ParseResult[list[T]]:
        result = repeated.run(source, position)
        if isinstance(result, ParseToken) and not result.value:
            return NOT_MATCHED
        return result

    return Parser(run, name=f"{parser.name}+")


def delimited_list[T](item: Parser[T], delimiter: Parser[Any]) -> Parser[list[T]]:
    """Zero or more `item`s separated by `delimiter`; an empty list is a success."""
    items = optional(chain(item, many(right(delimiter, item))))
    return fmap(items, lambda values: values if values is not None else [])


def separated_list1[T](item: Parser[T], delimiter: Parser[Any]) -> Parser[list[T]]:
    """One or more `item`s separated by `delimiter`."""
    return chain(item, many(right(delimiter, item)))


def key_sep_value[K, V](key: Parser[K], delimiter: Parser[Any], value: Parser[V]) -> Parser[tuple[K, V]]:
    """Parse `<key><delimiter><value>` into a `(key, value)` pair."""
    return fmap_chain(key, right(delimiter, value), lambda k, v: (k, v))
