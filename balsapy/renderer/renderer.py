"""Replay compiled replacement instructions over the raw template text."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from balsapy.compiler import (
    CompiledTemplate,
    ParameterDescription,
    ReplacementInstruction,
    ReplaceWithNothing,
    ReplaceWithParameter,
)
from balsapy.errors import InvalidParameterTypeError, MissingParameterError
from balsapy.values import ColorValidator, InvalidTypeCast, Value, cast_value, is_valid_color

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RenderContext:
    """Per-render state: output pieces and the read cursor into the raw text."""

    raw_template: str
    parameters: Mapping[str, Value]
    color_validator: ColorValidator
    cursor: int = 0
    output: list[str] = field(default_factory=list)

    def apply(self, instruction: ReplacementInstruction) -> None:
        self._copy_until(instruction.range.start_offset)
        # The block's own text is never copied.
        self.cursor = max(self.cursor, instruction.range.end_offset)

        match instruction.replace_with:
            case ReplaceWithParameter(parameter=parameter):
                self.output.append(self._resolve(parameter, instruction).to_text())
            case ReplaceWithNothing():
                pass

    def finish(self) -> str:
        self._copy_until(len(self.raw_template))
        return "".join(self.output)

    def _copy_until(self, offset: int) -> None:
        if self.cursor < offset:
            self.output.append(self.raw_template[self.cursor : offset])
            self.cursor = offset

    def _resolve(self, parameter: ParameterDescription, instruction: ReplacementInstruction) -> Value:
        value = self.parameters.get(parameter.name)
        if value is None:
            value = parameter.default_value
        if value is None:
            raise MissingParameterError(parameter.name, instruction.range)

        try:
            return cast_value(value, parameter.value_type, color_validator=self.color_validator)
        except InvalidTypeCast as exc:
            raise InvalidParameterTypeError(
                parameter.name,
                received_value=value,
                received_type=value.value_type,
                expected_type=parameter.value_type,
                range=instruction.range,
            ) from exc


class Renderer:
    """Renders one compiled template; safe to reuse and to share between threads."""

    def __init__(
        self,
        raw_template: str,
        compiled_template: CompiledTemplate,
        *,
        color_validator: ColorValidator = is_valid_color,
    ) -> None:
        self._raw_template = raw_template
        self._compiled_template = compiled_template
        self._color_validator = color_validator

    @property
    def raw_template(self) -> str:
        return self._raw_template

    @property
    def compiled_template(self) -> CompiledTemplate:
        return self._compiled_template

    def render(self, parameters: Mapping[str, Value]) -> str:
        context = RenderContext(
            raw_template=self._raw_template,
            parameters=parameters,
            color_validator=self._color_validator,
        )
        for instruction in self._compiled_template.replacements:
            context.apply(instruction)
        output = context.finish()

        logger.debug(
            "Rendered %d instruction(s) into %d characters",
            len(self._compiled_template.replacements),
            len(output),
        )
        return output


def render_compiled(
    raw_template: str,
    compiled_template: CompiledTemplate,
    parameters: Mapping[str, Value],
    *,
    color_validator: ColorValidator = is_valid_color,
) -> str:
    return Renderer(raw_template, compiled_template, color_validator=color_validator).render(parameters)
