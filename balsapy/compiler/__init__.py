"""Template compiler."""

from balsapy.compiler.compiler import DEFAULT_VALUE_OPTION, Compiler, compile_text
from balsapy.compiler.model import (
    CompiledTemplate,
    ParameterDescription,
    ReplacementInstruction,
    ReplaceWith,
    ReplaceWithNothing,
    ReplaceWithParameter,
)
from balsapy.compiler.options import CompileOptions

__all__ = [
    "DEFAULT_VALUE_OPTION",
    "CompileOptions",
    "CompiledTemplate",
    "Compiler",
    "ParameterDescription",
    "ReplaceWith",
    "ReplaceWithNothing",
    "ReplaceWithParameter",
    "ReplacementInstruction",
    "compile_text",
]
