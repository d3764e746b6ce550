"""Schema module - authoritative flex layout vocabulary.

Example usage:
    >>> from termflex.schema import FlexJustify, parse_justify
    >>> parse_justify("SpaceBetween") is FlexJustify.SPACE_BETWEEN
    True
"""

from .lib import (
    ALIGN_LOOKUP,
    DIRECTION_LOOKUP,
    HORIZONTAL_LOOKUP,
    JUSTIFY_LOOKUP,
    VERTICAL_LOOKUP,
    WRAP_LOOKUP,
    FlexAlign,
    FlexDirection,
    FlexJustify,
    FlexWrap,
    HorizontalAlign,
    VerticalAlign,
    parse_align,
    parse_bool,
    parse_direction,
    parse_enum,
    parse_int,
    parse_justify,
    parse_non_negative_int,
    parse_positive_int,
    parse_wrap,
)

__all__ = [
    "FlexDirection",
    "FlexJustify",
    "FlexAlign",
    "FlexWrap",
    "HorizontalAlign",
    "VerticalAlign",
    "DIRECTION_LOOKUP",
    "JUSTIFY_LOOKUP",
    "ALIGN_LOOKUP",
    "WRAP_LOOKUP",
    "HORIZONTAL_LOOKUP",
    "VERTICAL_LOOKUP",
    "parse_enum",
    "parse_direction",
    "parse_justify",
    "parse_align",
    "parse_wrap",
    "parse_int",
    "parse_non_negative_int",
    "parse_positive_int",
    "parse_bool",
]
