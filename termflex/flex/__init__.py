"""Flex layout engine.

Example usage:
    >>> from rich.text import Text
    >>> from termflex.flex import FlexBox
    >>> from termflex.schema import FlexDirection
    >>> box = FlexBox([Text("A"), Text("B")], direction=FlexDirection.COLUMN, gap=1)
"""

from .lib import (
    FlexBox,
    FlexSpacing,
    Grid,
    align_line,
    calculate_spacing,
    normalize_grid,
)

__all__ = [
    "FlexBox",
    "FlexSpacing",
    "Grid",
    "align_line",
    "calculate_spacing",
    "normalize_grid",
]
