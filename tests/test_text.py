import pytest

from balsapy.combinators import merge_ranges
from balsapy.text import ZERO, TextRange, TextSize, slice_text_range


def test_text_size_rejects_negative_values() -> None:
    assert ZERO == TextSize(0)
    with pytest.raises(ValueError, match="negative"):
        TextSize(-1)


def test_text_range_constructors_agree() -> None:
    assert TextRange.empty(TextSize(4)) == TextRange.from_offsets(4, 4)
    assert TextRange.from_offsets(2, 5).start == TextSize(2)


def test_text_range_rejects_inverted_span() -> None:
    with pytest.raises(ValueError, match="start > end"):
        TextRange.from_offsets(5, 2)
    with pytest.raises(ValueError, match="negative"):
        TextRange(-1, 2)


def test_merged_ranges_cover_both_parts() -> None:
    first = TextRange.from_offsets(0, 4)
    second = TextRange.from_offsets(6, 9)

    assert merge_ranges(first, second) == TextRange.from_offsets(0, 9)
    assert first.cover(second) == second.cover(first)


def test_adjacent_ranges_do_not_overlap() -> None:
    assert not TextRange.from_offsets(0, 4).overlaps(TextRange.from_offsets(4, 9))
    assert TextRange.from_offsets(0, 5).overlaps(TextRange.from_offsets(4, 9))


def test_line_column_is_one_based() -> None:
    source = "first\nsecond {{ x : int }}"

    assert TextRange.from_offsets(0, 1).line_column(source) == (1, 1)
    assert TextRange.from_offsets(13, 26).line_column(source) == (2, 8)


def test_slice_text_range_indexes_characters() -> None:
    source = "héllo {{ x : int }}"

    assert slice_text_range(source, TextRange.from_offsets(6, 19)) == "{{ x : int }}"
