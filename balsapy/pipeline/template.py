"""Compile-once/render-many template carriers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from balsapy.compiler import CompiledTemplate, CompileOptions, ParameterDescription
from balsapy.parameters import AsParameters, PythonScalar, resolve_parameters
from balsapy.pipeline.entrypoints import compile_template
from balsapy.pipeline.load import load_template_text
from balsapy.renderer import Renderer
from balsapy.values import Value


@dataclass(frozen=True, slots=True)
class Template:
    """A compiled template bound to its source text."""

    source_text: str
    compiled: CompiledTemplate
    options: CompileOptions = field(default_factory=CompileOptions)

    @property
    def parameters(self) -> tuple[ParameterDescription, ...]:
        return self.compiled.parameters

    @property
    def global_scope(self) -> Mapping[str, Value]:
        return self.compiled.global_scope

    def render(self, parameters: Mapping[str, Value | PythonScalar] | None = None) -> str:
        renderer = Renderer(
            self.source_text,
            self.compiled,
            color_validator=self.options.color_validator,
        )
        return renderer.render(resolve_parameters(parameters))

    def render_struct(self, obj: AsParameters) -> str:
        if not isinstance(obj, AsParameters):
            raise TypeError(f"{type(obj).__name__} does not implement as_parameters()")
        return self.render(obj.as_parameters())


@dataclass(frozen=True, slots=True)
class TemplateBuilder:
    source_text: str
    options: CompileOptions = field(default_factory=CompileOptions)

    def with_options(self, options: CompileOptions) -> TemplateBuilder:
        return TemplateBuilder(self.source_text, options)

    def build(self) -> Template:
        compiled = compile_template(self.source_text, self.options)
        return Template(self.source_text, compiled, self.options)


class Balsa:
    """Entry point for building templates.

        template = Balsa.from_file("page.html").build()
        html = template.render(TemplateParameters().string("title", "Home"))
    """

    @staticmethod
    def from_string(text: str) -> TemplateBuilder:
        return TemplateBuilder(text)

    @staticmethod
    def from_file(path: str | Path) -> TemplateBuilder:
        return TemplateBuilder(load_template_text(path))
