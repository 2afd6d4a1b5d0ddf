"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from balsapy.diagnostics.diagnostic import Diagnostic


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def format_diagnostic(diagnostic: Diagnostic, source: str | None = None) -> str:
    """Render a diagnostic as `line:column: CODE message` (offset only without source)."""
    offset = diagnostic.range.start_offset
    if source is None:
        location = f"@{offset}"
    else:
        line, column = diagnostic.range.line_column(source)
        location = f"{line}:{column}"

    text = f"{location}: {diagnostic.severity} {diagnostic.code} {diagnostic.message}"
    if diagnostic.hint:
        text += f" (hint: {diagnostic.hint})"
    return text
