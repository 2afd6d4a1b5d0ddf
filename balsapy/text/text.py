"""Character offsets and spans into template source text."""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """A non-negative character count or offset."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")

    def __repr__(self) -> str:
        return f"TextSize({self.value})"


ZERO: Final[TextSize] = TextSize(0)


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """Half-open span `[start_offset, end_offset)` of a template source.

    Offsets count code points, so `source[range.start_offset : range.end_offset]`
    is the spanned text. Block spans include their braces.
    """

    start_offset: int
    end_offset: int

    def __post_init__(self):
        if self.start_offset < 0:
            raise ValueError("TextRange offsets cannot be negative")
        if self.start_offset > self.end_offset:
            raise ValueError(f"TextRange start > end: {self.start_offset} > {self.end_offset}")

    @staticmethod
    def empty(offset: TextSize) -> "TextRange":
        """Zero-width span, used for failures reported at a single position."""
        return TextRange(offset.value, offset.value)

    @staticmethod
    def from_offsets(start: int, end: int) -> "TextRange":
        return TextRange(start, end)

    @property
    def start(self) -> TextSize:
        return TextSize(self.start_offset)

    def overlaps(self, other: "TextRange") -> bool:
        """True when the spans share at least one character."""
        return self.start_offset < other.end_offset and other.start_offset < self.end_offset

    def cover(self, other: "TextRange") -> "TextRange":
        return TextRange(
            min(self.start_offset, other.start_offset),
            max(self.end_offset, other.end_offset),
        )

    def line_column(self, source: str) -> tuple[int, int]:
        """1-based line and column of the span start within `source`."""
        line = source.count("\n", 0, self.start_offset) + 1
        column = self.start_offset - source.rfind("\n", 0, self.start_offset)
        return line, column

    def __repr__(self) -> str:
        return f"TextRange({self.start_offset}, {self.end_offset})"


def slice_text_range(source: str, range: TextRange) -> str:
    return source[range.start_offset : range.end_offset]
