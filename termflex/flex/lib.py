"""Flex layout renderable for fixed-width character grids.

FlexBox lays out child renderables along one axis using a CSS-like
flexbox model (direction, wrap, justify, align, gap) and composes their
rendered cell grids into a single segment stream.

It speaks rich's console protocol: measurement goes through
`__rich_measure__` and rendering through `__rich_console__`, so any rich
renderable can be an item and a FlexBox can be nested anywhere rich
accepts a renderable.

Output is never truncated: content wider than the available space is
emitted as-is and cropping is left to the host surface.
"""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from rich.console import Console, ConsoleOptions, RenderableType, RenderResult
from rich.measure import Measurement
from rich.segment import Segment

from termflex.schema import FlexAlign, FlexDirection, FlexJustify, FlexWrap

# A rendered item: one list of segments per output row, without line breaks
Grid = list[list[Segment]]


# =============================================================================
# Spacing
# =============================================================================


@dataclass(frozen=True)
class FlexSpacing:
    """Free space split along the main axis.

    Attributes:
        leading: Space before the first item.
        between: Extra space between adjacent items (on top of the gap).
        trailing: Space after the last item.
    """

    leading: int = 0
    between: int = 0
    trailing: int = 0


def calculate_spacing(justify: FlexJustify, free_space: int, count: int) -> FlexSpacing:
    """Distribute main-axis free space according to `justify`.

    The leading and between slots follow the integer formulas of each
    policy. Whatever they leave over goes to the trailing slot, so
    ``leading + between * (count - 1) + trailing == free_space`` always.

    Args:
        justify: Distribution policy.
        free_space: Unused cells (or lines) on the main axis.
        count: Number of items sharing the space.

    Returns:
        FlexSpacing for the line.
    """
    if free_space <= 0 or count <= 0:
        return FlexSpacing()

    leading = 0
    between = 0

    if justify == FlexJustify.END:
        leading = free_space
    elif justify == FlexJustify.CENTER:
        leading = free_space // 2
    elif justify == FlexJustify.SPACE_BETWEEN:
        if count > 1:
            between = free_space // (count - 1)
        else:
            leading = free_space // 2
    elif justify == FlexJustify.SPACE_AROUND:
        if count > 1:
            leading = free_space // (2 * count)
            between = free_space // count
        else:
            leading = free_space // 2
    elif justify == FlexJustify.SPACE_EVENLY:
        leading = between = free_space // (count + 1)

    trailing = free_space - leading - between * (count - 1)
    return FlexSpacing(leading, between, trailing)


# =============================================================================
# Grid helpers
# =============================================================================


def _blank(cells: int) -> Segment:
    """A run of blank cells."""
    return Segment(" " * cells)


def _line_width(line: list[Segment]) -> int:
    return Segment.get_line_length(line)


def _grid_width(grid: Grid) -> int:
    return max((_line_width(line) for line in grid), default=0)


def normalize_grid(grid: Grid, width: int, height: int, align: FlexAlign) -> Grid:
    """Pad a rendered item to a uniform width x height block.

    Every line is right-padded to `width`; missing rows are added as blank
    lines above, below or around the content according to `align`.

    Returns:
        A new grid; the input is left untouched.
    """
    padded: Grid = []
    for line in grid:
        line_width = _line_width(line)
        if line_width < width:
            padded.append([*line, _blank(width - line_width)])
        else:
            padded.append(list(line))

    missing = height - len(padded)
    if missing <= 0:
        return padded

    if align == FlexAlign.END:
        top = missing
    elif align == FlexAlign.CENTER:
        top = missing // 2
    else:
        # START and STRETCH
        top = 0
    bottom = missing - top

    return (
        [[_blank(width)] for _ in range(top)]
        + padded
        + [[_blank(width)] for _ in range(bottom)]
    )


def align_line(line: list[Segment], width: int, align: FlexAlign) -> list[Segment]:
    """Place a single line horizontally within `width` cells."""
    pad = max(0, width - _line_width(line))
    if pad == 0:
        return list(line)
    if align == FlexAlign.END:
        return [_blank(pad), *line]
    if align == FlexAlign.CENTER:
        left = pad // 2
        right = pad - left
        return ([_blank(left)] if left else []) + [*line, _blank(right)]
    return [*line, _blank(pad)]


# =============================================================================
# FlexBox
# =============================================================================


class FlexBox:
    """A renderable that lays out items with a one-dimensional flex model.

    Example:
        >>> from rich.console import Console
        >>> from rich.text import Text
        >>> box = FlexBox([Text("A"), Text("B")], justify=FlexJustify.SPACE_BETWEEN)
        >>> Console(width=10).print(box)
        A        B

    Args:
        items: Child renderables, laid out in order.
        direction: Main axis.
        justify: Main-axis distribution of free space.
        align: Cross-axis alignment.
        wrap: Whether row overflow starts new flex lines.
        gap: Cells (row) or lines (column) between adjacent items.
            Negative values are clamped to 0.
        width: Explicit width; caps the width offered by the parent.
        height: Explicit height; sets the column main-axis extent.

    Raises:
        TypeError: If `items` is None.
    """

    def __init__(
        self,
        items: Sequence[RenderableType],
        direction: FlexDirection = FlexDirection.ROW,
        justify: FlexJustify = FlexJustify.START,
        align: FlexAlign = FlexAlign.START,
        wrap: FlexWrap = FlexWrap.NO_WRAP,
        gap: int = 0,
        width: int | None = None,
        height: int | None = None,
    ) -> None:
        if items is None:
            raise TypeError("FlexBox items must not be None")
        self._items: tuple[RenderableType, ...] = tuple(items)
        self._direction = direction
        self._justify = justify
        self._align = align
        self._wrap = wrap
        self._gap = max(0, gap)
        self._width = width
        self._height = height

    @property
    def items(self) -> tuple[RenderableType, ...]:
        return self._items

    @property
    def direction(self) -> FlexDirection:
        return self._direction

    @property
    def justify(self) -> FlexJustify:
        return self._justify

    @property
    def align(self) -> FlexAlign:
        return self._align

    @property
    def wrap(self) -> FlexWrap:
        return self._wrap

    @property
    def gap(self) -> int:
        return self._gap

    @property
    def width(self) -> int | None:
        return self._width

    @property
    def height(self) -> int | None:
        return self._height

    def __repr__(self) -> str:
        return (
            f"FlexBox(items={len(self._items)}, direction={self._direction.value}, "
            f"justify={self._justify.value}, align={self._align.value}, "
            f"wrap={self._wrap.value}, gap={self._gap}, "
            f"width={self._width}, height={self._height})"
        )

    def _effective_width(self, max_width: int) -> int:
        if self._width is not None:
            return min(self._width, max_width)
        return max_width

    def _item_options(self, options: ConsoleOptions, width: int) -> ConsoleOptions:
        return options.update(width=width, height=None)

    # -------------------------------------------------------------------------
    # Measurement
    # -------------------------------------------------------------------------

    def __rich_measure__(self, console: Console, options: ConsoleOptions) -> Measurement:
        effective = self._effective_width(options.max_width)
        if not self._items:
            return Measurement(0, 0)

        item_options = self._item_options(options, effective)
        measurements = [
            Measurement.get(console, item_options, item) for item in self._items
        ]
        minimum = max(m.minimum for m in measurements)
        if self._direction == FlexDirection.ROW:
            maximum = sum(m.maximum for m in measurements)
            maximum += self._gap * (len(measurements) - 1)
        else:
            maximum = max(m.maximum for m in measurements)

        return Measurement(min(minimum, effective), min(maximum, effective))

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        if not self._items:
            return
        effective = self._effective_width(options.max_width)
        item_options = self._item_options(options, effective)

        if self._direction == FlexDirection.ROW:
            rows = self._render_row(console, item_options, effective)
        else:
            rows = self._render_column(console, item_options, effective)

        new_line = Segment.line()
        for row in rows:
            yield from row
            yield new_line

    def _render_grid(
        self, console: Console, options: ConsoleOptions, item: RenderableType
    ) -> Grid:
        return console.render_lines(item, options, pad=False)

    def partition(
        self, console: Console, options: ConsoleOptions, width: int
    ) -> list[list[RenderableType]]:
        """Split items into flex lines that fit `width`.

        NO_WRAP always yields a single line. WRAP fills lines greedily; an
        item too wide for any line is placed alone on its own line.
        """
        if self._wrap == FlexWrap.NO_WRAP:
            return [list(self._items)]

        lines: list[list[RenderableType]] = []
        current: list[RenderableType] = []
        current_width = 0

        for item in self._items:
            item_width = Measurement.get(console, options, item).maximum
            gap_before = self._gap if current else 0

            if current and current_width + gap_before + item_width > width:
                lines.append(current)
                current = [item]
                current_width = item_width
            else:
                current.append(item)
                current_width += gap_before + item_width

        if current:
            lines.append(current)
        return lines

    def _render_row(
        self, console: Console, options: ConsoleOptions, width: int
    ) -> Iterator[list[Segment]]:
        for line_items in self.partition(console, options, width):
            yield from self._render_flex_line(console, options, line_items, width)

    def _render_flex_line(
        self,
        console: Console,
        options: ConsoleOptions,
        line_items: list[RenderableType],
        width: int,
    ) -> Iterator[list[Segment]]:
        grids = [self._render_grid(console, options, item) for item in line_items]
        widths = [_grid_width(grid) for grid in grids]

        line_height = max((len(grid) for grid in grids), default=0)
        if line_height == 0:
            return

        content_width = sum(widths) + self._gap * (len(line_items) - 1)
        free_space = max(0, width - content_width)
        spacing = calculate_spacing(self._justify, free_space, len(line_items))

        blocks = [
            normalize_grid(grid, item_width, line_height, self._align)
            for grid, item_width in zip(grids, widths)
        ]
        separator = self._gap + spacing.between
        last = len(blocks) - 1

        for row_index in range(line_height):
            row: list[Segment] = []
            if spacing.leading:
                row.append(_blank(spacing.leading))
            for index, block in enumerate(blocks):
                if row_index < len(block):
                    row.extend(block[row_index])
                else:
                    row.append(_blank(widths[index]))
                if index < last and separator:
                    row.append(_blank(separator))
            if spacing.trailing:
                row.append(_blank(spacing.trailing))
            yield row

    def _render_column(
        self, console: Console, options: ConsoleOptions, width: int
    ) -> Iterator[list[Segment]]:
        grids = [self._render_grid(console, options, item) for item in self._items]
        heights = [len(grid) for grid in grids]

        content_height = sum(heights) + self._gap * (len(grids) - 1)
        target_height = self._height if self._height is not None else content_height
        free_space = max(0, target_height - content_height)
        spacing = calculate_spacing(self._justify, free_space, len(grids))

        blank_row = [_blank(width)] if width > 0 else []
        separator = self._gap + spacing.between

        yield from _repeat(blank_row, spacing.leading)
        for index, grid in enumerate(grids):
            if index:
                yield from _repeat(blank_row, separator)
            for line in grid:
                yield align_line(line, width, self._align)
        yield from _repeat(blank_row, spacing.trailing)


def _repeat(row: list[Segment], count: int) -> Iterable[list[Segment]]:
    return (list(row) for _ in range(count))


__all__ = [
    "FlexBox",
    "FlexSpacing",
    "Grid",
    "align_line",
    "calculate_spacing",
    "normalize_grid",
]
