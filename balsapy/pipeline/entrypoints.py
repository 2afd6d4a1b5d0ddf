"""Compile/render entrypoints over one raw template text."""

from __future__ import annotations

from collections.abc import Mapping

from balsapy.compiler import CompiledTemplate, CompileOptions, compile_text
from balsapy.renderer import render_compiled
from balsapy.values import ColorValidator, Value, is_valid_color


def compile_template(raw_text: str, options: CompileOptions | None = None) -> CompiledTemplate:
    """Parse and compile `raw_text`; raises `TemplateCompileError` on the first problem."""
    return compile_text(raw_text, options)


def render_template(
    raw_text: str,
    compiled: CompiledTemplate,
    parameters: Mapping[str, Value],
    *,
    color_validator: ColorValidator = is_valid_color,
) -> str:
    """Render `raw_text` using instructions compiled from that same text."""
    return render_compiled(raw_text, compiled, parameters, color_validator=color_validator)
