import pytest

from balsapy.combinators import (
    NOT_MATCHED,
    MalformedInput,
    NotMatched,
    Parser,
    ParserStalled,
    ParseToken,
    chain,
    char_parser,
    delimited_list,
    either,
    end_of_input,
    fmap,
    fmap_chain,
    fmap_result,
    is_failure,
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
from balsapy.text import TextRange, TextSize


def _always_malformed() -> Parser[str]:
    return Parser(lambda source, position: MalformedInput(TextSize(position)), name="malformed")


def _digits() -> Parser[str]:
    return take_while_chars("0123456789")


def test_char_parser_matches_one_character() -> None:
    result = char_parser("a").parse("abc")

    assert result == ParseToken("a", TextRange.from_offsets(0, 1))
    assert char_parser("a").parse("bca") is NOT_MATCHED


def test_char_parser_requires_single_character() -> None:
    with pytest.raises(ValueError, match="single character"):
        char_parser("ab")


def test_string_parser_respects_position() -> None:
    parser = string_parser("{{")

    assert parser.parse("a{{b", 1) == ParseToken("{{", TextRange.from_offsets(1, 3))
    assert parser.parse("a{{b", 0) is NOT_MATCHED


def test_string_parser_rejects_empty_string() -> None:
    with pytest.raises(ValueError, match="non-empty"):
        string_parser("")


def test_take_while_requires_one_character() -> None:
    assert _digits().parse("123abc") == ParseToken("123", TextRange.from_offsets(0, 3))
    assert _digits().parse("abc") is NOT_MATCHED


def test_take_until_char_stops_before_terminator_or_end() -> None:
    parser = take_until_char("{")

    assert parser.parse("ab{c") == ParseToken("ab", TextRange.from_offsets(0, 2))
    assert parser.parse("abc") == ParseToken("abc", TextRange.from_offsets(0, 3))
    assert parser.parse("{abc") is NOT_MATCHED


def test_fmap_keeps_span() -> None:
    result = fmap(_digits(), int).parse("42!")

    assert result == ParseToken(42, TextRange.from_offsets(0, 2))


def test_fmap_result_turns_value_error_into_malformed_input() -> None:
    def reject(text: str) -> int:
        raise ValueError(text)

    result = fmap_result(_digits(), reject).parse("ab12", 2)

    assert result == MalformedInput(TextSize(2))


def test_spanned_exposes_the_token() -> None:
    result = spanned(_digits()).parse("12")

    assert isinstance(result, ParseToken)
    assert result.value == ParseToken("12", TextRange.from_offsets(0, 2))


def test_chain_combines_values_and_merges_spans() -> None:
    letters = take_while_chars("abc")

    assert chain(letters, _digits()).parse("ab12") == ParseToken("ab12", TextRange.from_offsets(0, 4))
    assert chain(letters, optional(_digits())).parse("ab") == ParseToken(["ab"], TextRange.from_offsets(0, 2))


def test_chain_propagates_first_failure() -> None:
    assert chain(char_parser("a"), char_parser("b")).parse("ac") is NOT_MATCHED
    assert chain(char_parser("a"), _always_malformed()).parse("ac") == MalformedInput(TextSize(1))


def test_fmap_chain_uses_custom_combinator() -> None:
    parser = fmap_chain(_digits(), right(char_parser("+"), _digits()), lambda a, b: int(a) + int(b))

    assert parser.parse("2+40") == ParseToken(42, TextRange.from_offsets(0, 4))


def test_left_right_middle_keep_one_value_but_cover_full_span() -> None:
    quote = char_parser('"')

    assert left(_digits(), char_parser(";")).parse("1;") == ParseToken("1", TextRange.from_offsets(0, 2))
    assert right(char_parser("#"), _digits()).parse("#7") == ParseToken("7", TextRange.from_offsets(0, 2))
    assert middle(quote, _digits(), quote).parse('"99"') == ParseToken("99", TextRange.from_offsets(0, 4))


def test_either_tries_alternatives_in_order() -> None:
    parser = either(string_parser("int"), string_parser("in"))

    assert parser.parse("int") == ParseToken("int", TextRange.from_offsets(0, 3))
    assert parser.parse("in") == ParseToken("in", TextRange.from_offsets(0, 2))
    assert parser.parse("out") is NOT_MATCHED


def test_either_does_not_fall_back_after_malformed_input() -> None:
    parser = either(_always_malformed(), char_parser("a"))

    assert parser.parse("a") == MalformedInput(TextSize(0))


def test_either_requires_alternatives() -> None:
    with pytest.raises(ValueError, match="at least one"):
        either()


def test_optional_turns_not_matched_into_empty_token() -> None:
    assert optional(char_parser("a")).parse("b", 0) == ParseToken(None, TextRange.from_offsets(0, 0))
    assert optional(_always_malformed()).parse("b") == MalformedInput(TextSize(0))


def test_many_collects_until_not_matched() -> None:
    parser = many(left(_digits(), optional(char_parser(","))))

    assert parser.parse("1,2,3x") == ParseToken(["1", "2", "3"], TextRange.from_offsets(0, 5))
    assert parser.parse("x") == ParseToken([], TextRange.from_offsets(0, 0))


def test_many_aborts_on_malformed_input() -> None:
    assert many(_always_malformed()).parse("abc") == MalformedInput(TextSize(0))


def test_many_raises_when_inner_parser_does_not_consume() -> None:
    with pytest.raises(ParserStalled, match="stopped making progress"):
        many(optional(char_parser("a"))).parse("b")


def test_one_to_many_requires_one_match() -> None:
    parser = one_to_many(char_parser("a"))

    assert parser.parse("aab") == ParseToken(["a", "a"], TextRange.from_offsets(0, 2))
    assert parser.parse("b") is NOT_MATCHED


def test_delimited_list_accepts_empty_and_populated_lists() -> None:
    parser = delimited_list(_digits(), char_parser(","))

    assert parser.parse("") == ParseToken([], TextRange.from_offsets(0, 0))
    assert parser.parse("1,22,333") == ParseToken(["1", "22", "333"], TextRange.from_offsets(0, 8))


def test_delimited_list_leaves_trailing_delimiter_unconsumed() -> None:
    result = delimited_list(_digits(), char_parser(",")).parse("1,2,")

    assert isinstance(result, ParseToken)
    assert result.value == ["1", "2"]
    assert result.end == 3


def test_separated_list1_requires_first_item() -> None:
    parser = separated_list1(_digits(), char_parser(","))

    assert parser.parse("4,5").value == ["4", "5"]
    assert parser.parse(",5") is NOT_MATCHED


def test_key_sep_value_returns_pair() -> None:
    parser = key_sep_value(take_while_chars("abc"), char_parser("="), _digits())

    assert parser.parse("abc=12") == ParseToken(("abc", "12"), TextRange.from_offsets(0, 6))


def test_not_followed_by_is_zero_width() -> None:
    keyword = left(string_parser("int"), not_followed_by("abcdefghijklmnopqrstuvwxyz"))

    assert keyword.parse("int ") == ParseToken("int", TextRange.from_offsets(0, 3))
    assert keyword.parse("integer") is NOT_MATCHED


def test_end_of_input_only_matches_at_end() -> None:
    assert end_of_input().parse("ab", 2) == ParseToken(None, TextRange.from_offsets(2, 2))
    assert end_of_input().parse("ab", 1) is NOT_MATCHED


def test_failures_are_recognised() -> None:
    assert is_failure(NOT_MATCHED)
    assert is_failure(MalformedInput(TextSize(3)))
    assert not is_failure(ParseToken("x", TextRange.from_offsets(0, 1)))
    assert isinstance(NOT_MATCHED, NotMatched)
