"""termflex - flex layout for terminal character grids.

Example:
    >>> from rich.text import Text
    >>> from termflex import FlexBox, FlexJustify, render_text
    >>> render_text(FlexBox([Text("AB")], justify=FlexJustify.END), 10)
    '        AB\\n'
"""

from termflex.flex import FlexBox, FlexSpacing, calculate_spacing
from termflex.render import (
    RenderConfig,
    create_console,
    measure,
    render_markup,
    render_segments,
    render_text,
)
from termflex.schema import FlexAlign, FlexDirection, FlexJustify, FlexWrap
from termflex.translation import (
    PipelineConfigurationError,
    TranslationContext,
    TranslationError,
    TranslationMiddleware,
    UnhandledNodeError,
    create_context,
    register_translator,
)
from termflex.vdom import TreeNode, parse_markup

__version__ = "0.1.0"

__all__ = [
    "FlexBox",
    "FlexSpacing",
    "calculate_spacing",
    "FlexDirection",
    "FlexJustify",
    "FlexAlign",
    "FlexWrap",
    "TreeNode",
    "parse_markup",
    "TranslationError",
    "PipelineConfigurationError",
    "UnhandledNodeError",
    "TranslationMiddleware",
    "TranslationContext",
    "register_translator",
    "create_context",
    "RenderConfig",
    "create_console",
    "measure",
    "render_segments",
    "render_text",
    "render_markup",
]
