"""Authoritative schema for flex layout attributes.

This module is the single source of truth for the flex vocabulary. It
provides:
- The layout enumerations (direction, justify, align, wrap)
- One explicit lookup table per enumeration for attribute strings
- Lenient attribute parsers that resolve bad input to documented defaults

Attribute values arrive as free-form strings from markup. Nothing here
raises on malformed input: unknown strings resolve to the default.
"""

from enum import Enum
from typing import TypeVar

E = TypeVar("E", bound=Enum)


class FlexDirection(str, Enum):
    """Main axis of a flex layout.

    - ROW: Items are laid out horizontally, left to right
    - COLUMN: Items are laid out vertically, top to bottom
    """

    ROW = "row"
    COLUMN = "column"


class FlexJustify(str, Enum):
    """Main-axis distribution of free space (CSS justify-content).

    - START: Pack items at the start
    - END: Pack items at the end
    - CENTER: Center items
    - SPACE_BETWEEN: First item at the start, last at the end
    - SPACE_AROUND: Equal space on both sides of every item
    - SPACE_EVENLY: Equal space between items and at the edges
    """

    START = "start"
    END = "end"
    CENTER = "center"
    SPACE_BETWEEN = "space-between"
    SPACE_AROUND = "space-around"
    SPACE_EVENLY = "space-evenly"


class FlexAlign(str, Enum):
    """Cross-axis alignment (CSS align-items).

    STRETCH has no cell-level meaning and lays out like START.
    """

    START = "start"
    END = "end"
    CENTER = "center"
    STRETCH = "stretch"


class FlexWrap(str, Enum):
    """Whether main-axis overflow creates additional flex lines."""

    NO_WRAP = "nowrap"
    WRAP = "wrap"


class HorizontalAlign(str, Enum):
    """Horizontal placement used by the align element."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VerticalAlign(str, Enum):
    """Vertical placement used by the align element."""

    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


# === LOOKUP TABLES ===
# Keys are lower-case. Each table accepts the member name with and without
# separators plus the common CSS spellings.

DIRECTION_LOOKUP: dict[str, FlexDirection] = {
    "row": FlexDirection.ROW,
    "horizontal": FlexDirection.ROW,
    "column": FlexDirection.COLUMN,
    "col": FlexDirection.COLUMN,
    "vertical": FlexDirection.COLUMN,
}

JUSTIFY_LOOKUP: dict[str, FlexJustify] = {
    "start": FlexJustify.START,
    "flex-start": FlexJustify.START,
    "end": FlexJustify.END,
    "flex-end": FlexJustify.END,
    "center": FlexJustify.CENTER,
    "spacebetween": FlexJustify.SPACE_BETWEEN,
    "space-between": FlexJustify.SPACE_BETWEEN,
    "space_between": FlexJustify.SPACE_BETWEEN,
    "spacearound": FlexJustify.SPACE_AROUND,
    "space-around": FlexJustify.SPACE_AROUND,
    "space_around": FlexJustify.SPACE_AROUND,
    "spaceevenly": FlexJustify.SPACE_EVENLY,
    "space-evenly": FlexJustify.SPACE_EVENLY,
    "space_evenly": FlexJustify.SPACE_EVENLY,
}

ALIGN_LOOKUP: dict[str, FlexAlign] = {
    "start": FlexAlign.START,
    "flex-start": FlexAlign.START,
    "end": FlexAlign.END,
    "flex-end": FlexAlign.END,
    "center": FlexAlign.CENTER,
    "stretch": FlexAlign.STRETCH,
}

WRAP_LOOKUP: dict[str, FlexWrap] = {
    "nowrap": FlexWrap.NO_WRAP,
    "no-wrap": FlexWrap.NO_WRAP,
    "no_wrap": FlexWrap.NO_WRAP,
    "wrap": FlexWrap.WRAP,
}

HORIZONTAL_LOOKUP: dict[str, HorizontalAlign] = {
    "left": HorizontalAlign.LEFT,
    "center": HorizontalAlign.CENTER,
    "right": HorizontalAlign.RIGHT,
}

VERTICAL_LOOKUP: dict[str, VerticalAlign] = {
    "top": VerticalAlign.TOP,
    "middle": VerticalAlign.MIDDLE,
    "center": VerticalAlign.MIDDLE,
    "bottom": VerticalAlign.BOTTOM,
}


# === ATTRIBUTE PARSING ===


def parse_enum(lookup: dict[str, E], value: str | None, default: E) -> E:
    """Resolve an attribute string through a lookup table.

    Args:
        lookup: Table mapping lower-case strings to members.
        value: Raw attribute value (may be None).
        default: Member returned for missing or unknown values.

    Returns:
        The matched member, or `default`.
    """
    if not value:
        return default
    return lookup.get(value.strip().lower(), default)


def parse_direction(value: str | None) -> FlexDirection:
    """Parse a direction attribute, defaulting to ROW."""
    return parse_enum(DIRECTION_LOOKUP, value, FlexDirection.ROW)


def parse_justify(value: str | None) -> FlexJustify:
    """Parse a justify attribute, defaulting to START."""
    return parse_enum(JUSTIFY_LOOKUP, value, FlexJustify.START)


def parse_align(value: str | None) -> FlexAlign:
    """Parse an align attribute, defaulting to START."""
    return parse_enum(ALIGN_LOOKUP, value, FlexAlign.START)


def parse_wrap(value: str | None) -> FlexWrap:
    """Parse a wrap attribute, defaulting to NO_WRAP."""
    return parse_enum(WRAP_LOOKUP, value, FlexWrap.NO_WRAP)


def parse_int(value: str | None, default: int | None = None) -> int | None:
    """Parse a base-10 integer, returning `default` when impossible."""
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


def parse_non_negative_int(value: str | None, default: int = 0) -> int:
    """Parse an integer and clamp negatives to zero."""
    parsed = parse_int(value, default)
    return max(0, parsed if parsed is not None else default)


def parse_positive_int(value: str | None) -> int | None:
    """Parse a strictly positive integer.

    Returns:
        The integer, or None when missing, unparseable or not positive.
    """
    parsed = parse_int(value)
    if parsed is None or parsed <= 0:
        return None
    return parsed


def parse_bool(value: str | None, default: bool = False) -> bool:
    """Parse a boolean attribute.

    Recognizes true/false, 1/0, yes/no (case-insensitive). A present but
    empty attribute (``<div data-expand>``) counts as true.
    """
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in ("", "true", "1", "yes"):
        return True
    if normalized in ("false", "0", "no"):
        return False
    return default


__all__ = [
    # Enums
    "FlexDirection",
    "FlexJustify",
    "FlexAlign",
    "FlexWrap",
    "HorizontalAlign",
    "VerticalAlign",
    # Lookup tables
    "DIRECTION_LOOKUP",
    "JUSTIFY_LOOKUP",
    "ALIGN_LOOKUP",
    "WRAP_LOOKUP",
    "HORIZONTAL_LOOKUP",
    "VERTICAL_LOOKUP",
    # Parsing
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
