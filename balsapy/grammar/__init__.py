"""Template grammar (blocks, expressions, literals)."""

from balsapy.grammar.grammar import (
    IDENTIFIER_CHARS,
    TYPE_KEYWORDS,
    WHITESPACE_CHARS,
    declaration,
    declaration_block,
    document,
    expression,
    identifier,
    integer_literal,
    literal_ranges,
    literal_text,
    parameter_block,
    parse_template,
    string_literal,
    template_block,
    type_keyword,
    value_literal,
    whitespace,
)
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

__all__ = [
    "IDENTIFIER_CHARS",
    "TYPE_KEYWORDS",
    "WHITESPACE_CHARS",
    "Block",
    "BlockOption",
    "Declaration",
    "DeclarationBlock",
    "Expression",
    "IdentifierExpression",
    "ParameterBlock",
    "TemplateBlock",
    "TypeExpression",
    "ValueExpression",
    "declaration",
    "declaration_block",
    "document",
    "expression",
    "identifier",
    "integer_literal",
    "literal_ranges",
    "literal_text",
    "parameter_block",
    "parse_template",
    "string_literal",
    "template_block",
    "type_keyword",
    "value_literal",
    "whitespace",
]
