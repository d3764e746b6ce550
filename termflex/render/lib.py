"""Rendering helpers for the terminal grid.

Wraps rich's console so callers can ask the two questions every renderable
answers, `measure(width)` and `render(width)`, without managing console
options themselves.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import IO, TYPE_CHECKING

from rich.console import Console, ConsoleOptions, RenderableType
from rich.measure import Measurement
from rich.segment import Segment

from termflex.config import EnvVar, get_environment, get_render_width
from termflex.core import get_logger

if TYPE_CHECKING:
    from termflex.translation import TranslationContext

logger = get_logger(__name__)


@dataclass
class RenderConfig:
    """Configuration for a render pass.

    Attributes:
        width: Available width in cells. None uses TERMFLEX_WIDTH or 80.
        height: Available height in lines, passed to renderables as a hint.
        no_color: Strip colour and style from the output.
    """

    width: int | None = None
    height: int | None = None
    no_color: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.width is not None and self.width < 1:
            raise ValueError(f"Width must be positive, got {self.width}")
        if self.height is not None and self.height < 1:
            raise ValueError(f"Height must be positive, got {self.height}")

    @classmethod
    def from_environment(cls, width: int | None = None) -> RenderConfig:
        """Build a config from TERMFLEX_* variables, `width` taking priority."""
        return cls(
            width=get_render_width(width),
            no_color=get_environment(EnvVar.TERMFLEX_NO_COLOR),
        )


def create_console(
    config: RenderConfig | None = None, file: IO[str] | None = None
) -> Console:
    """Create a console sized from the render configuration.

    Args:
        config: Render configuration; defaults come from the environment.
        file: Output stream. None renders into an in-memory buffer.

    Returns:
        A rich Console sized to the configured width.
    """
    config = config or RenderConfig.from_environment()
    return Console(
        width=config.width or get_render_width(),
        height=config.height,
        file=file if file is not None else io.StringIO(),
        color_system=None if config.no_color else "auto",
        no_color=config.no_color,
        legacy_windows=False,
        highlight=False,
    )


def _options(console: Console, width: int) -> ConsoleOptions:
    return console.options.update(width=width, height=None)


def measure(
    renderable: RenderableType, width: int, console: Console | None = None
) -> Measurement:
    """Measure a renderable against `width` available cells.

    Returns:
        Measurement(minimum, maximum), both within [0, width].
    """
    console = console or create_console(RenderConfig(width=max(1, width), no_color=True))
    return Measurement.get(console, _options(console, width), renderable)


def render_segments(
    renderable: RenderableType, width: int, console: Console | None = None
) -> list[Segment]:
    """Render a renderable at `width` cells into a list of segments."""
    console = console or create_console(RenderConfig(width=max(1, width), no_color=True))
    return list(console.render(renderable, _options(console, width)))


def segments_to_text(segments: list[Segment]) -> str:
    """Concatenate segment text, dropping style and control codes."""
    return "".join(segment.text for segment in segments if not segment.control)


def render_text(
    renderable: RenderableType, width: int, console: Console | None = None
) -> str:
    """Render a renderable at `width` cells to plain text."""
    return segments_to_text(render_segments(renderable, width, console))


def render_markup(
    source: str,
    width: int | None = None,
    context: TranslationContext | None = None,
) -> str:
    """Parse, translate and render markup to plain text.

    Args:
        source: HTML-like markup.
        width: Render width; None uses TERMFLEX_WIDTH or 80.
        context: Translation pipeline; None builds the configured one.

    Returns:
        The rendered grid as text, one line per row.

    Raises:
        TranslationError: If the tree cannot be translated.
    """
    from termflex.translation import create_context
    from termflex.vdom import parse_markup

    context = context or create_context()
    renderable = context.translate(parse_markup(source))
    render_width = get_render_width(width)
    logger.debug("Rendering %r at width %d", renderable, render_width)
    return render_text(renderable, render_width)


__all__ = [
    "RenderConfig",
    "create_console",
    "measure",
    "render_segments",
    "segments_to_text",
    "render_text",
    "render_markup",
]
