"""Rendering helpers for measuring and rendering on a character grid."""

from .lib import (
    RenderConfig,
    create_console,
    measure,
    render_markup,
    render_segments,
    render_text,
    segments_to_text,
)

__all__ = [
    "RenderConfig",
    "create_console",
    "measure",
    "render_segments",
    "segments_to_text",
    "render_text",
    "render_markup",
]
