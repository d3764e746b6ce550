"""Built-in translation middleware; importing registers them."""

from termflex.translators.lib import (
    BLOCK_TAGS,
    INLINE_STYLES,
    AlignTranslator,
    FlexBoxTranslator,
    InlineTranslator,
    PanelTranslator,
    RowsTranslator,
    TextTranslator,
    convert_children,
)

__all__ = [
    "BLOCK_TAGS",
    "INLINE_STYLES",
    "convert_children",
    "FlexBoxTranslator",
    "AlignTranslator",
    "PanelTranslator",
    "RowsTranslator",
    "InlineTranslator",
    "TextTranslator",
]
