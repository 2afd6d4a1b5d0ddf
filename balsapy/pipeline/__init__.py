"""Template loading, compile/render entrypoints and the `Balsa` builder."""

from balsapy.pipeline.entrypoints import compile_template, render_template
from balsapy.pipeline.load import load_template_text
from balsapy.pipeline.template import Balsa, Template, TemplateBuilder

__all__ = [
    "Balsa",
    "Template",
    "TemplateBuilder",
    "compile_template",
    "load_template_text",
    "render_template",
]
