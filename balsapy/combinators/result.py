"""Parse tokens and parse failures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from balsapy.text import TextRange, TextSize


@dataclass(frozen=True, slots=True)
class ParseToken[T]:
    """A parsed value tagged with the source span it was derived from."""

    value: T
    range: TextRange

    @property
    def end(self) -> int:
        """Offset where the remaining (unparsed) text begins."""
        return self.range.end_offset


class ParseFailure:
    """Base for the two ways a parser can fail."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class NotMatched(ParseFailure):
    """Nothing was recognised; no input consumed, alternatives may be tried."""

    def __repr__(self) -> str:
        return "NotMatched"


@dataclass(frozen=True, slots=True)
class MalformedInput(ParseFailure):
    """The input has the right shape but invalid content; never falls back."""

    position: TextSize


NOT_MATCHED: Final[NotMatched] = NotMatched()

type ParseResult[T] = ParseToken[T] | ParseFailure


def merge_ranges(first: TextRange, last: TextRange) -> TextRange:
    """Span of a sequence: from the start of its first part to the end of its last."""
    return first.cover(last)


def is_failure(result: ParseResult[object]) -> bool:
    return isinstance(result, ParseFailure)
