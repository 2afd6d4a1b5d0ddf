"""Diagnostics."""

from balsapy.diagnostics.codes import (
    COMPILE_INVALID_EXPRESSION,
    COMPILE_INVALID_IDENTIFIER_FOR_DECLARATION_BLOCK,
    COMPILE_INVALID_IDENTIFIER_FOR_PARAMETER_BLOCK,
    COMPILE_INVALID_PARAMETER,
    COMPILE_INVALID_TYPE_CAST,
    COMPILE_INVALID_TYPE_EXPRESSION,
    RENDER_INVALID_PARAMETER_TYPE,
    RENDER_MISSING_PARAMETER,
    TEMPLATE_PARSE_FAIL,
    DiagnosticSpec,
    Severity,
)
from balsapy.diagnostics.diagnostic import Diagnostic
from balsapy.diagnostics.report import format_diagnostic, has_errors

__all__ = [
    "COMPILE_INVALID_EXPRESSION",
    "COMPILE_INVALID_IDENTIFIER_FOR_DECLARATION_BLOCK",
    "COMPILE_INVALID_IDENTIFIER_FOR_PARAMETER_BLOCK",
    "COMPILE_INVALID_PARAMETER",
    "COMPILE_INVALID_TYPE_CAST",
    "COMPILE_INVALID_TYPE_EXPRESSION",
    "RENDER_INVALID_PARAMETER_TYPE",
    "RENDER_MISSING_PARAMETER",
    "TEMPLATE_PARSE_FAIL",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "format_diagnostic",
    "has_errors",
]
