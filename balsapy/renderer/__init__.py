"""Template renderer."""

from balsapy.renderer.renderer import RenderContext, Renderer, render_compiled

__all__ = [
    "RenderContext",
    "Renderer",
    "render_compiled",
]
