"""Typed placeholder template engine."""

from balsapy.compiler import CompiledTemplate, CompileOptions, ParameterDescription
from balsapy.errors import (
    BalsaError,
    InvalidExpressionError,
    InvalidIdentifierError,
    InvalidParameterError,
    InvalidParameterTypeError,
    InvalidTypeCastError,
    InvalidTypeExpressionError,
    MissingParameterError,
    TemplateCompileError,
    TemplateParseError,
    TemplateRenderError,
)
from balsapy.parameters import AsParameters, TemplateParameters
from balsapy.pipeline import (
    Balsa,
    Template,
    TemplateBuilder,
    compile_template,
    load_template_text,
    render_template,
)
from balsapy.values import (
    ColorValue,
    FloatValue,
    IntegerValue,
    InvalidTypeCast,
    StringValue,
    Value,
    ValueType,
    is_valid_color,
)

__all__ = [
    "AsParameters",
    "Balsa",
    "BalsaError",
    "ColorValue",
    "CompileOptions",
    "CompiledTemplate",
    "FloatValue",
    "IntegerValue",
    "InvalidExpressionError",
    "InvalidIdentifierError",
    "InvalidParameterError",
    "InvalidParameterTypeError",
    "InvalidTypeCast",
    "InvalidTypeCastError",
    "InvalidTypeExpressionError",
    "MissingParameterError",
    "ParameterDescription",
    "StringValue",
    "Template",
    "TemplateBuilder",
    "TemplateCompileError",
    "TemplateParameters",
    "TemplateParseError",
    "TemplateRenderError",
    "Value",
    "ValueType",
    "compile_template",
    "is_valid_color",
    "load_template_text",
    "render_template",
]
