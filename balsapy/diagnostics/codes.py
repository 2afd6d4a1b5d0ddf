"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


TEMPLATE_PARSE_FAIL: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TEMPLATE_PARSE_FAIL",
    message="Malformed template block.",
    hint="Check literals inside `{{ ... }}` blocks, e.g. integers must fit in 64 bits.",
    severity="error",
    category="parser",
)

COMPILE_INVALID_IDENTIFIER_FOR_PARAMETER_BLOCK: Final[DiagnosticSpec] = DiagnosticSpec(
    code="COMPILE_INVALID_IDENTIFIER_FOR_PARAMETER_BLOCK",
    message="Parameter block name must be an identifier.",
    hint="Use a bare name made of letters, digits, `_` or `-`, e.g. `{{ title : string }}`.",
    severity="error",
    category="compiler",
)

COMPILE_INVALID_IDENTIFIER_FOR_DECLARATION_BLOCK: Final[DiagnosticSpec] = DiagnosticSpec(
    code="COMPILE_INVALID_IDENTIFIER_FOR_DECLARATION_BLOCK",
    message="Declaration name must be an identifier.",
    hint='Use a bare name, e.g. `{{@ accent : color = "red" }}`.',
    severity="error",
    category="compiler",
)

COMPILE_INVALID_TYPE_EXPRESSION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="COMPILE_INVALID_TYPE_EXPRESSION",
    message="Expected a type.",
    hint="Valid types are `string`, `color`, `int` and `float`.",
    severity="error",
    category="compiler",
)

COMPILE_INVALID_EXPRESSION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="COMPILE_INVALID_EXPRESSION",
    message="Expected a literal value.",
    hint='Values are quoted strings (`"text"`) or integers (`42`).',
    severity="error",
    category="compiler",
)

COMPILE_INVALID_PARAMETER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="COMPILE_INVALID_PARAMETER",
    message="Unknown parameter block option.",
    hint="The only supported option is `defaultValue`.",
    severity="error",
    category="compiler",
)

COMPILE_INVALID_TYPE_CAST: Final[DiagnosticSpec] = DiagnosticSpec(
    code="COMPILE_INVALID_TYPE_CAST",
    message="Literal value cannot be cast to the declared type.",
    severity="error",
    category="compiler",
)

RENDER_MISSING_PARAMETER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RENDER_MISSING_PARAMETER",
    message="Missing template parameter.",
    hint="Pass a value for the parameter or give it a `defaultValue`.",
    severity="error",
    category="renderer",
)

RENDER_INVALID_PARAMETER_TYPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RENDER_INVALID_PARAMETER_TYPE",
    message="Template parameter has the wrong type.",
    severity="error",
    category="renderer",
)
