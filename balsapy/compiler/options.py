"""Compiler configuration options."""

from dataclasses import dataclass

from balsapy.values import ColorValidator, is_valid_color


@dataclass(frozen=True, slots=True)
class CompileOptions:
    """Feature flags controlling compilation and the casts it performs."""

    # Emit a `ReplaceWithNothing` instruction for each declaration block so its
    # source text is dropped from render output. Off by default: declaration
    # blocks are kept verbatim.
    elide_declaration_blocks: bool = False
    color_validator: ColorValidator = is_valid_color
