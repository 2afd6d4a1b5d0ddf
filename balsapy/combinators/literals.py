"""Character-level matchers."""

from __future__ import annotations

from collections.abc import Iterable

from balsapy.combinators.parser import Parser
from balsapy.combinators.result import NOT_MATCHED, ParseResult, ParseToken
from balsapy.text import TextRange


def char_parser(value: str) -> Parser[str]:
    """Match exactly one character."""
    if len(value) != 1:
        raise ValueError(f"char_parser expects a single character, got {value!r}")

    def run(source: str, position: int) -> ParseResult[str]:
        if source.startswith(value, position):
            return ParseToken(value, TextRange.from_offsets(position, position + 1))
        return NOT_MATCHED

    return Parser(run, name=repr(value))


def string_parser(value: str) -> Parser[str]:
    """Match an exact string."""
    if not value:
        raise ValueError("string_parser expects a non-empty string")

    def run(source: str, position: int) -> ParseResult[str]:
        if source.startswith(value, position):
            return ParseToken(value, TextRange.from_offsets(position, position + len(value)))
        return NOT_MATCHED

    return Parser(run, name=repr(value))


def take_while_chars(allowed_chars: Iterable[str]) -> Parser[str]:
    """Take characters while they are in `allowed_chars`; at least one is required."""
    allowed = frozenset(allowed_chars)

    def run(source: str, position: int) -> ParseResult[str]:
        end = position
        length = len(source)
        while end < length and source[end] in allowed:
            end += 1
        if end == position:
            return NOT_MATCHED
        return ParseToken(source[position:end], TextRange.from_offsets(position, end))

    return Parser(run, name="take_while")


def take_until_char(terminator: str) -> Parser[str]:
    """Take characters up to (not including) `terminator` or the end of input.

    At least one character is required.
    """
    if len(terminator) != 1:
        raise ValueError(f"take_until_char expects a single character, got {terminator!r}")

    def run(source: str, position: int) -> ParseResult[str]:
        end = source.find(terminator, position)
        if end == -1:
            end = len(source)
        if end <= position:
            return NOT_MATCHED
        return ParseToken(source[position:end], TextRange.from_offsets(position, end))

    return Parser(run, name=f"until {terminator!r}")


def not_followed_by(disallowed_chars: Iterable[str]) -> Parser[None]:
    """Zero-width check that the next character is not in `disallowed_chars`."""
    disallowed = frozenset(disallowed_chars)

    def run(source: str, position: int) -> ParseResult[None]:
        if position < len(source) and source[position] in disallowed:
            return NOT_MATCHED
        return ParseToken(None, TextRange.from_offsets(position, position))

    return Parser(run, name="boundary")


def end_of_input() -> Parser[None]:
    def run(source: str, position: int) -> ParseResult[None]:
        if position >= len(source):
            return ParseToken(None, TextRange.from_offsets(position, position))
        return NOT_MATCHED

    return Parser(run, name="EOF")
