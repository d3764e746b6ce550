"""Unit tests for the flex layout engine."""

import pytest
from rich.console import Group
from rich.segment import Segment
from rich.text import Text

from termflex.flex import (
    FlexBox,
    FlexSpacing,
    align_line,
    calculate_spacing,
    normalize_grid,
)
from termflex.render import measure, render_segments, render_text
from termflex.schema import FlexAlign, FlexDirection, FlexJustify, FlexWrap


def render_lines(renderable, width: int = 40) -> list[str]:
    """Render to plain text and split into rows."""
    return render_text(renderable, width).splitlines()


def texts(*values: str) -> list[Text]:
    return [Text(value) for value in values]


def tall_item() -> Group:
    return Group(*texts("T1", "T2", "T3"))


# =============================================================================
# Construction
# =============================================================================


class TestConstruction:
    """Tests for FlexBox construction."""

    @pytest.mark.unit
    def test_none_items_rejected(self):
        with pytest.raises(TypeError):
            FlexBox(None)

    @pytest.mark.unit
    def test_empty_items_allowed(self):
        assert FlexBox([]).items == ()

    @pytest.mark.unit
    def test_defaults(self):
        box = FlexBox([])
        assert box.direction is FlexDirection.ROW
        assert box.justify is FlexJustify.START
        assert box.align is FlexAlign.START
        assert box.wrap is FlexWrap.NO_WRAP
        assert box.gap == 0
        assert box.width is None
        assert box.height is None

    @pytest.mark.unit
    @pytest.mark.parametrize("gap", [0, 1, 3, 100])
    def test_non_negative_gap_kept(self, gap):
        assert FlexBox([], gap=gap).gap == gap

    @pytest.mark.unit
    @pytest.mark.parametrize("gap", [-1, -5])
    def test_negative_gap_clamped(self, gap):
        assert FlexBox([], gap=gap).gap == 0

    @pytest.mark.unit
    def test_items_are_fixed(self):
        items = texts("A")
        box = FlexBox(items)
        items.append(Text("B"))
        assert len(box.items) == 1


# =============================================================================
# Measurement
# =============================================================================


class TestMeasure:
    """Tests for __rich_measure__."""

    @pytest.mark.unit
    def test_empty(self):
        assert tuple(measure(FlexBox([]), 40)) == (0, 0)

    @pytest.mark.unit
    def test_row_sums_item_widths(self):
        box = FlexBox(texts("AAAA", "BB"))
        result = measure(box, 40)
        assert result.maximum == 6
        assert result.minimum == 4

    @pytest.mark.unit
    def test_row_includes_gaps(self):
        box = FlexBox(texts("AAAA", "BB"), gap=3)
        assert measure(box, 40).maximum == 9

    @pytest.mark.unit
    def test_row_capped_at_available_width(self):
        box = FlexBox(texts("AAAA", "BB"))
        assert tuple(measure(box, 5)) == (4, 5)

    @pytest.mark.unit
    def test_column_takes_widest_item(self):
        box = FlexBox(texts("AAAA", "BBBBBB"), direction=FlexDirection.COLUMN)
        assert measure(box, 40).maximum == 6

    @pytest.mark.unit
    def test_column_ignores_item_count(self):
        box = FlexBox(
            texts("AAA", "BBBBB", "CC", "DDDD"),
            direction=FlexDirection.COLUMN,
            gap=4,
        )
        assert measure(box, 40).maximum == 5

    @pytest.mark.unit
    def test_explicit_width_caps_measurement(self):
        box = FlexBox(texts("A" * 8, "B" * 8), width=10)
        result = measure(box, 40)
        assert result.maximum == 10
        assert result.minimum == 8


# =============================================================================
# Spacing
# =============================================================================


class TestCalculateSpacing:
    """Tests for main-axis spacing."""

    @pytest.mark.unit
    def test_start(self):
        assert calculate_spacing(FlexJustify.START, 8, 2) == FlexSpacing(0, 0, 8)

    @pytest.mark.unit
    def test_end(self):
        assert calculate_spacing(FlexJustify.END, 8, 2) == FlexSpacing(8, 0, 0)

    @pytest.mark.unit
    def test_center_odd(self):
        assert calculate_spacing(FlexJustify.CENTER, 7, 1) == FlexSpacing(3, 0, 4)

    @pytest.mark.unit
    def test_space_between(self):
        assert calculate_spacing(FlexJustify.SPACE_BETWEEN, 18, 3) == FlexSpacing(0, 9, 0)

    @pytest.mark.unit
    def test_space_between_remainder_trails(self):
        assert calculate_spacing(FlexJustify.SPACE_BETWEEN, 5, 3) == FlexSpacing(0, 2, 1)

    @pytest.mark.unit
    def test_space_between_single_item_centers(self):
        assert calculate_spacing(FlexJustify.SPACE_BETWEEN, 8, 1) == FlexSpacing(4, 0, 4)

    @pytest.mark.unit
    def test_space_around(self):
        assert calculate_spacing(FlexJustify.SPACE_AROUND, 10, 2) == FlexSpacing(2, 5, 3)

    @pytest.mark.unit
    def test_space_around_single_item_centers(self):
        assert calculate_spacing(FlexJustify.SPACE_AROUND, 9, 1) == FlexSpacing(4, 0, 5)

    @pytest.mark.unit
    def test_space_evenly(self):
        assert calculate_spacing(FlexJustify.SPACE_EVENLY, 9, 2) == FlexSpacing(3, 3, 3)
        assert calculate_spacing(FlexJustify.SPACE_EVENLY, 10, 3) == FlexSpacing(2, 2, 4)

    @pytest.mark.unit
    @pytest.mark.parametrize("justify", list(FlexJustify))
    def test_no_free_space(self, justify):
        assert calculate_spacing(justify, 0, 3) == FlexSpacing(0, 0, 0)
        assert calculate_spacing(justify, -4, 3) == FlexSpacing(0, 0, 0)

    @pytest.mark.unit
    @pytest.mark.parametrize("justify", list(FlexJustify))
    def test_spacing_sums_to_free_space(self, justify):
        for free_space in range(0, 30):
            for count in range(1, 7):
                s = calculate_spacing(justify, free_space, count)
                assert min(s.leading, s.between, s.trailing) >= 0
                assert s.leading + s.between * (count - 1) + s.trailing == free_space


# =============================================================================
# Grid helpers
# =============================================================================


class TestGridHelpers:
    """Tests for cross-axis normalization helpers."""

    @pytest.mark.unit
    def test_normalize_pads_width_and_height(self):
        grid = [[Segment("AB")], [Segment("C")]]
        result = normalize_grid(grid, 3, 4, FlexAlign.START)
        assert ["".join(s.text for s in line) for line in result] == [
            "AB ",
            "C  ",
            "   ",
            "   ",
        ]

    @pytest.mark.unit
    def test_normalize_end_pads_top(self):
        result = normalize_grid([[Segment("A")]], 1, 3, FlexAlign.END)
        assert ["".join(s.text for s in line) for line in result] == [" ", " ", "A"]

    @pytest.mark.unit
    def test_normalize_center_extra_row_below(self):
        result = normalize_grid([[Segment("A")]], 1, 4, FlexAlign.CENTER)
        assert ["".join(s.text for s in line) for line in result] == [" ", "A", " ", " "]

    @pytest.mark.unit
    def test_normalize_does_not_mutate_input(self):
        grid = [[Segment("A")]]
        normalize_grid(grid, 3, 2, FlexAlign.START)
        assert grid == [[Segment("A")]]

    @pytest.mark.unit
    def test_align_line(self):
        line = [Segment("AB")]
        assert "".join(s.text for s in align_line(line, 5, FlexAlign.START)) == "AB   "
        assert "".join(s.text for s in align_line(line, 5, FlexAlign.END)) == "   AB"
        assert "".join(s.text for s in align_line(line, 5, FlexAlign.CENTER)) == " AB  "
        assert "".join(s.text for s in align_line(line, 5, FlexAlign.STRETCH)) == "AB   "

    @pytest.mark.unit
    def test_align_line_overflow_untouched(self):
        line = [Segment("ABCDEF")]
        assert align_line(line, 4, FlexAlign.END) == line


# =============================================================================
# Row rendering
# =============================================================================


class TestRowRender:
    """Tests for row direction rendering."""

    @pytest.mark.unit
    def test_empty_renders_nothing(self):
        assert render_segments(FlexBox([]), 40) == []

    @pytest.mark.unit
    def test_two_items_on_one_line(self):
        lines = render_lines(FlexBox(texts("AAA", "BBB")))
        assert lines == ["AAABBB" + " " * 34]

    @pytest.mark.unit
    def test_gap_inserts_padding(self):
        lines = render_lines(FlexBox(texts("A", "B"), gap=3))
        assert lines[0].startswith("A   B")
        assert len(lines[0]) == 40

    @pytest.mark.unit
    def test_justify_end(self):
        box = FlexBox(texts("AB"), justify=FlexJustify.END)
        assert render_lines(box, 10) == ["        AB"]

    @pytest.mark.unit
    def test_justify_center(self):
        box = FlexBox(texts("AB"), justify=FlexJustify.CENTER)
        assert render_lines(box, 10) == ["    AB    "]

    @pytest.mark.unit
    def test_justify_space_between(self):
        box = FlexBox(texts("A", "B", "C"), justify=FlexJustify.SPACE_BETWEEN)
        assert render_lines(box, 21) == ["A" + " " * 9 + "B" + " " * 9 + "C"]

    @pytest.mark.unit
    def test_justify_space_between_single_item_centers(self):
        box = FlexBox(texts("AB"), justify=FlexJustify.SPACE_BETWEEN)
        assert render_lines(box, 10) == ["    AB    "]

    @pytest.mark.unit
    def test_justify_space_around(self):
        box = FlexBox(texts("A", "B"), justify=FlexJustify.SPACE_AROUND)
        assert render_lines(box, 12) == ["  A     B   "]

    @pytest.mark.unit
    def test_justify_space_evenly(self):
        box = FlexBox(texts("A", "B"), justify=FlexJustify.SPACE_EVENLY)
        assert render_lines(box, 11) == ["   A   B   "]

    @pytest.mark.unit
    def test_explicit_width_narrows_layout(self):
        box = FlexBox(texts("AB"), justify=FlexJustify.END, width=6)
        assert render_lines(box, 40) == ["    AB"]

    @pytest.mark.unit
    def test_segments_are_padding_text_and_line_breaks(self):
        box = FlexBox(texts("AB"), justify=FlexJustify.END)
        segments = render_segments(box, 10)
        assert segments[0] == Segment(" " * 8)
        assert segments[1].text == "AB"
        assert segments[-1] == Segment.line()
        assert len(segments) == 3

    @pytest.mark.unit
    def test_rendering_is_deterministic(self):
        box = FlexBox(
            [tall_item(), *texts("S", "LONGER")],
            justify=FlexJustify.SPACE_AROUND,
            align=FlexAlign.CENTER,
            gap=1,
        )
        assert render_segments(box, 30) == render_segments(box, 30)

    @pytest.mark.unit
    def test_narrow_item_lines_padded_to_item_width(self):
        box = FlexBox([Group(*texts("LONG", "X")), Text("Z")])
        lines = render_lines(box, 10)
        assert lines == ["LONGZ     ", "X         "]

    @pytest.mark.unit
    def test_nested_flexbox(self):
        inner = FlexBox(texts("A", "B"), direction=FlexDirection.COLUMN, width=3)
        lines = render_lines(FlexBox([inner, Text("C")]), 10)
        assert lines == ["A  C      ", "B         "]


class TestRowCrossAxis:
    """Tests for cross-axis alignment within a flex line."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "align,row",
        [
            (FlexAlign.START, 0),
            (FlexAlign.STRETCH, 0),
            (FlexAlign.CENTER, 1),
            (FlexAlign.END, 2),
        ],
    )
    def test_short_item_position(self, align, row):
        box = FlexBox([tall_item(), Text("S")], align=align)
        lines = render_lines(box)
        assert len(lines) == 3
        for index, line in enumerate(lines):
            assert ("S" in line) == (index == row)
            assert line.startswith(f"T{index + 1}")


class TestRowWrap:
    """Tests for flex line partitioning."""

    @pytest.mark.unit
    def test_no_wrap_keeps_one_line_when_overflowing(self):
        box = FlexBox(texts("AAAA", "BBBB", "CCCC"), wrap=FlexWrap.NO_WRAP)
        assert render_lines(box, 10) == ["AAAABBBBCCCC"]

    @pytest.mark.unit
    def test_wrap_moves_overflow_to_next_line(self):
        box = FlexBox(texts("AAAA", "BBBB", "CCCC"), wrap=FlexWrap.WRAP)
        assert render_lines(box, 9) == ["AAAABBBB ", "CCCC     "]

    @pytest.mark.unit
    def test_wrap_accounts_for_gap(self):
        box = FlexBox(texts("AAA", "BBB", "CCC"), wrap=FlexWrap.WRAP, gap=2)
        assert render_lines(box, 10) == ["AAA  BBB  ", "CCC       "]

    @pytest.mark.unit
    def test_wrap_exact_fit_shares_line(self, console):
        items = texts("aaa", "bbb", "ccc", "ddd")
        box = FlexBox(items, wrap=FlexWrap.WRAP, gap=1)
        lines = box.partition(console, console.options.update(width=7), 7)
        assert lines == [items[:2], items[2:]]

    @pytest.mark.unit
    def test_oversized_item_placed_alone(self, console):
        items = texts("AB", "ABCDEFGH", "C")
        box = FlexBox(items, wrap=FlexWrap.WRAP)
        lines = box.partition(console, console.options.update(width=5), 5)
        assert lines == [[items[0]], [items[1]], [items[2]]]

    @pytest.mark.unit
    def test_no_wrap_partition_is_single_line(self, console):
        items = texts("AAAA", "BBBB", "CCCC")
        box = FlexBox(items)
        assert box.partition(console, console.options.update(width=3), 3) == [items]

    @pytest.mark.unit
    def test_justify_applies_per_flex_line(self):
        box = FlexBox(
            texts("AAAA", "BBBB", "CC"),
            wrap=FlexWrap.WRAP,
            justify=FlexJustify.END,
        )
        assert render_lines(box, 9) == [" AAAABBBB", "       CC"]


# =============================================================================
# Column rendering
# =============================================================================


class TestColumnRender:
    """Tests for column direction rendering."""

    @pytest.mark.unit
    def test_items_on_separate_lines(self):
        box = FlexBox(texts("AAA", "BBB"), direction=FlexDirection.COLUMN)
        assert render_lines(box, 5) == ["AAA  ", "BBB  "]

    @pytest.mark.unit
    def test_gap_inserts_blank_lines(self):
        box = FlexBox(texts("AAA", "BBB"), direction=FlexDirection.COLUMN, gap=2)
        lines = render_lines(box)
        assert len(lines) == 4
        assert lines[0].startswith("AAA")
        assert lines[1].strip() == ""
        assert lines[2].strip() == ""
        assert lines[3].startswith("BBB")

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "align,expected",
        [
            (FlexAlign.START, "AB        "),
            (FlexAlign.STRETCH, "AB        "),
            (FlexAlign.END, "        AB"),
            (FlexAlign.CENTER, "    AB    "),
        ],
    )
    def test_horizontal_alignment(self, align, expected):
        box = FlexBox(texts("AB"), direction=FlexDirection.COLUMN, align=align)
        assert render_lines(box, 10) == [expected]

    @pytest.mark.unit
    def test_no_height_means_no_free_space(self):
        box = FlexBox(texts("A", "B"), direction=FlexDirection.COLUMN, justify=FlexJustify.END)
        assert render_lines(box, 3) == ["A  ", "B  "]

    @pytest.mark.unit
    def test_justify_end_with_height(self):
        box = FlexBox(
            texts("A", "B"),
            direction=FlexDirection.COLUMN,
            justify=FlexJustify.END,
            height=5,
        )
        assert render_lines(box, 3) == ["   ", "   ", "   ", "A  ", "B  "]

    @pytest.mark.unit
    def test_justify_center_with_height(self):
        box = FlexBox(
            texts("A", "B"),
            direction=FlexDirection.COLUMN,
            justify=FlexJustify.CENTER,
            height=6,
        )
        assert render_lines(box, 3) == ["   ", "   ", "A  ", "B  ", "   ", "   "]

    @pytest.mark.unit
    def test_justify_space_between_with_height(self):
        box = FlexBox(
            texts("A", "B"),
            direction=FlexDirection.COLUMN,
            justify=FlexJustify.SPACE_BETWEEN,
            height=5,
        )
        assert render_lines(box, 3) == ["A  ", "   ", "   ", "   ", "B  "]

    @pytest.mark.unit
    def test_height_smaller_than_content_never_truncates(self):
        box = FlexBox(
            texts("A", "B", "C"),
            direction=FlexDirection.COLUMN,
            height=1,
        )
        assert render_lines(box, 1) == ["A", "B", "C"]

    @pytest.mark.unit
    def test_multi_line_items_keep_their_lines(self):
        box = FlexBox([tall_item(), Text("S")], direction=FlexDirection.COLUMN, gap=1)
        assert render_lines(box, 4) == ["T1  ", "T2  ", "T3  ", "    ", "S   "]
