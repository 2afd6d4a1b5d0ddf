"""Generic position-tracking parser combinators."""

from balsapy.combinators.literals import (
    char_parser,
    end_of_input,
    not_followed_by,
    string_parser,
    take_until_char,
    take_while_chars,
)
from balsapy.combinators.parser import (
    ParseFn,
    Parser,
    chain,
    combine,
    either,
    fmap,
    fmap_chain,
    fmap_result,
    left,
    middle,
    optional,
    right,
    spanned,
)
from balsapy.combinators.repeat import (
    ParserStalled,
    delimited_list,
    key_sep_value,
    many,
    one_to_many,
    separated_list1,
)
from balsapy.combinators.result import (
    NOT_MATCHED,
    MalformedInput,
    NotMatched,
    ParseFailure,
    ParseResult,
    ParseToken,
    is_failure,
    merge_ranges,
)

__all__ = [
    "NOT_MATCHED",
    "MalformedInput",
    "NotMatched",
    "ParseFailure",
    "ParseFn",
    "ParseResult",
    "ParseToken",
    "Parser",
    "ParserStalled",
    "chain",
    "char_parser",
    "combine",
    "delimited_list",
    "either",
    "end_of_input",
    "fmap",
    "fmap_chain",
    "fmap_result",
    "is_failure",
    "key_sep_value",
    "left",
    "many",
    "merge_ranges",
    "middle",
    "not_followed_by",
    "one_to_many",
    "optional",
    "right",
    "separated_list1",
    "spanned",
    "string_parser",
    "take_until_char",
    "take_while_chars",
]
