"""Tree node model and markup parsing."""

from .html import parse_markup
from .lib import NodeKind, TreeNode, element, text

__all__ = [
    "NodeKind",
    "TreeNode",
    "element",
    "text",
    "parse_markup",
]
