"""Tests for the built-in translators."""

import pytest
from rich.align import Align
from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from termflex.flex import FlexBox
from termflex.render import render_markup
from termflex.schema import FlexAlign, FlexDirection, FlexJustify, FlexWrap
from termflex.translation import (
    TranslationContext,
    TranslationMiddleware,
    UnhandledNodeError,
    create_context,
)
from termflex.vdom import element, text

from .lib import (
    AlignTranslator,
    FlexBoxTranslator,
    InlineTranslator,
    PanelTranslator,
    RowsTranslator,
    TextTranslator,
    convert_children,
)


def flexbox(attributes: dict[str, str] | None = None, *children):
    return element("div", {"class": "flexbox", **(attributes or {})}, *children)


class FlexBoxFallback(TranslationMiddleware):
    """Handles flexbox elements the flexbox translator gave up on."""

    name = "fallback"

    def translate(self, context, call_next, node):
        if node.has_class("flexbox"):
            return Text("fallback")
        return call_next(node)


@pytest.fixture
def context() -> TranslationContext:
    return create_context()


# =============================================================================
# convert_children
# =============================================================================


class TestConvertChildren:
    """Tests for child conversion."""

    @pytest.mark.unit
    def test_converts_in_order(self, context):
        result = convert_children([text("A"), text("B")], context)
        assert [item.plain for item in result] == ["A", "B"]

    @pytest.mark.unit
    def test_skips_blank_text(self, context):
        result = convert_children([text("  "), text("A"), text("\n")], context)
        assert [item.plain for item in result] == ["A"]

    @pytest.mark.unit
    def test_failure_returns_none(self):
        context = TranslationContext([TextTranslator()])
        assert convert_children([text("A"), element("span")], context) is None


# =============================================================================
# FlexBoxTranslator
# =============================================================================


class TestFlexBoxTranslator:
    """Tests for flexbox element translation."""

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["flexbox", "FlexBox", " FLEXBOX "])
    def test_matches_class_case_insensitively(self, context, value):
        node = element("div", {"class": value}, text("A"))
        assert isinstance(context.translate(node), FlexBox)

    @pytest.mark.unit
    def test_ignores_other_classes(self, context):
        node = element("div", {"class": "flexbox-like"}, text("A"))
        with pytest.raises(UnhandledNodeError):
            context.translate(node)

    @pytest.mark.unit
    def test_defaults(self, context):
        box = context.translate(flexbox(None, text("A")))
        assert box.direction is FlexDirection.ROW
        assert box.justify is FlexJustify.START
        assert box.align is FlexAlign.START
        assert box.wrap is FlexWrap.NO_WRAP
        assert box.gap == 0
        assert box.width is None
        assert box.height is None

    @pytest.mark.unit
    def test_parses_attributes(self, context):
        node = flexbox(
            {
                "data-direction": "Column",
                "data-justify": "SpaceBetween",
                "data-align": "center",
                "data-wrap": "WRAP",
                "data-gap": "2",
                "data-width": "30",
                "data-height": "5",
            },
            text("A"),
        )
        box = context.translate(node)
        assert box.direction is FlexDirection.COLUMN
        assert box.justify is FlexJustify.SPACE_BETWEEN
        assert box.align is FlexAlign.CENTER
        assert box.wrap is FlexWrap.WRAP
        assert box.gap == 2
        assert box.width == 30
        assert box.height == 5

    @pytest.mark.unit
    def test_malformed_attributes_use_defaults(self, context):
        node = flexbox(
            {
                "data-direction": "diagonal",
                "data-justify": "bogus",
                "data-align": "",
                "data-wrap": "sometimes",
                "data-gap": "lots",
                "data-width": "0",
                "data-height": "-5",
            },
            text("A"),
        )
        box = context.translate(node)
        assert box.direction is FlexDirection.ROW
        assert box.justify is FlexJustify.START
        assert box.align is FlexAlign.START
        assert box.wrap is FlexWrap.NO_WRAP
        assert box.gap == 0
        assert box.width is None
        assert box.height is None

    @pytest.mark.unit
    def test_negative_gap_is_zero(self, context):
        assert context.translate(flexbox({"data-gap": "-3"})).gap == 0

    @pytest.mark.unit
    def test_children_translated_in_order(self, context):
        box = context.translate(flexbox(None, text("A"), text(" "), text("B")))
        assert [item.plain for item in box.items] == ["A", "B"]

    @pytest.mark.unit
    def test_nested_flexbox(self, context):
        box = context.translate(flexbox(None, flexbox(None, text("A"))))
        assert isinstance(box.items[0], FlexBox)

    @pytest.mark.unit
    def test_failed_child_delegates_whole_node(self):
        context = TranslationContext(
            [FlexBoxTranslator(), TextTranslator(), FlexBoxFallback()]
        )
        result = context.translate(flexbox(None, text("A"), element("span")))
        assert result.plain == "fallback"

    @pytest.mark.unit
    def test_failed_child_without_fallback_is_unhandled(self):
        context = TranslationContext([FlexBoxTranslator(), TextTranslator()])
        node = flexbox(None, element("span"))
        with pytest.raises(UnhandledNodeError) as excinfo:
            context.translate(node)
        assert excinfo.value.node is node


# =============================================================================
# Other translators
# =============================================================================


class TestAlignTranslator:
    """Tests for align element translation."""

    @pytest.mark.unit
    def test_attributes(self, context):
        node = element(
            "div",
            {
                "class": "align",
                "data-horizontal": "Center",
                "data-vertical": "bottom",
                "data-width": "12",
                "data-height": "3",
            },
            text("A"),
        )
        result = context.translate(node)
        assert isinstance(result, Align)
        assert result.align == "center"
        assert result.vertical == "bottom"
        assert result.width == 12
        assert result.height == 3

    @pytest.mark.unit
    def test_defaults(self, context):
        result = context.translate(element("div", {"class": "align"}, text("A")))
        assert result.align == "left"
        assert result.vertical == "top"
        assert result.width is None


class TestPanelTranslator:
    """Tests for panel element translation."""

    @pytest.mark.unit
    def test_title_and_expand(self, context):
        node = element(
            "div", {"class": "panel", "data-title": "Info", "data-expand": ""}, text("A")
        )
        result = context.translate(node)
        assert isinstance(result, Panel)
        assert result.title == "Info"
        assert result.expand is True

    @pytest.mark.unit
    def test_defaults(self, context):
        result = PanelTranslator().translate(
            context, context.translate, element("div", {"class": "panel"})
        )
        assert result.title is None
        assert result.expand is False


class TestRowsTranslator:
    """Tests for vertical stacking."""

    @pytest.mark.unit
    @pytest.mark.parametrize("tag", ["div", "section", "p", "li"])
    def test_unclassed_block_elements(self, context, tag):
        assert isinstance(context.translate(element(tag, None, text("A"))), Group)

    @pytest.mark.unit
    def test_rows_class(self, context):
        node = element("nav", {"class": "rows"}, text("A"))
        assert isinstance(context.translate(node), Group)

    @pytest.mark.unit
    def test_classed_block_delegates(self, context):
        with pytest.raises(UnhandledNodeError):
            context.translate(element("div", {"class": "card"}, text("A")))

    @pytest.mark.unit
    def test_unknown_element_delegates(self, context):
        with pytest.raises(UnhandledNodeError):
            context.translate(element("widget", None, text("A")))

    @pytest.mark.unit
    def test_document_wrapper(self, context):
        node = element("html", None, element("body", None, element("p", None, text("A"))))
        assert isinstance(context.translate(node), Group)


class TestInlineTranslator:
    """Tests for inline element translation."""

    @pytest.mark.unit
    @pytest.mark.parametrize("tag", ["span", "b", "em", "code", "a"])
    def test_unclassed_inline_becomes_text(self, context, tag):
        result = context.translate(element(tag, None, text("left")))
        assert isinstance(result, Text)
        assert result.plain == "left"

    @pytest.mark.unit
    def test_nested_styles(self, context):
        node = element(
            "span",
            None,
            text("a "),
            element("b", None, text("bold")),
            element("em", None, element("strong", None, text("x"))),
        )
        result = context.translate(node)
        assert result.plain == "a boldx"
        assert [(s.start, s.end, s.style) for s in result.spans] == [
            (2, 6, "bold"),
            (6, 7, "italic bold"),
        ]

    @pytest.mark.unit
    def test_br_breaks_running_text(self, context):
        node = element("span", None, text("a"), element("br"), text("b"))
        assert context.translate(node).plain == "a\nb"

    @pytest.mark.unit
    def test_standalone_br_is_empty_line(self, context):
        assert context.translate(element("br")).plain == ""

    @pytest.mark.unit
    def test_classed_inline_delegates(self, context):
        with pytest.raises(UnhandledNodeError):
            context.translate(element("span", {"class": "badge"}, text("A")))

    @pytest.mark.unit
    def test_block_child_delegates(self):
        context = TranslationContext([InlineTranslator(), TextTranslator(), FlexBoxFallback()])
        node = element("span", None, flexbox(None, text("A")))
        with pytest.raises(UnhandledNodeError) as excinfo:
            context.translate(node)
        assert excinfo.value.node is node


class TestTextTranslator:
    """Tests for text node translation."""

    @pytest.mark.unit
    def test_text_node(self, context):
        result = context.translate(text("hello"))
        assert isinstance(result, Text)
        assert result.plain == "hello"

    @pytest.mark.unit
    def test_element_delegates(self):
        context = TranslationContext([TextTranslator()])
        with pytest.raises(UnhandledNodeError):
            context.translate(element("div"))

    @pytest.mark.unit
    def test_precedence_follows_order(self):
        context = TranslationContext([AlignTranslator(), TextTranslator()])
        assert context.translate(text("A")).plain == "A"


# =============================================================================
# End to end
# =============================================================================


class TestMarkupRendering:
    """Tests rendering markup through the default pipeline."""

    @pytest.mark.unit
    def test_space_between(self):
        source = """
        <div class="flexbox" data-justify="space-between">
            <div>A</div>
            <div>B</div>
        </div>
        """
        assert render_markup(source, width=10) == "A        B\n"

    @pytest.mark.unit
    def test_column_with_gap(self):
        source = '<div class="flexbox" data-direction="column" data-gap="1">A<p>B</p></div>'
        assert render_markup(source, width=5).splitlines() == ["A    ", "     ", "B    "]

    @pytest.mark.unit
    def test_wrap(self):
        source = (
            '<div class="flexbox" data-wrap="wrap">'
            "<p>AAAA</p><p>BBBB</p><p>CCCC</p>"
            "</div>"
        )
        assert render_markup(source, width=9).splitlines() == ["AAAABBBB ", "CCCC     "]

    @pytest.mark.unit
    def test_inline_children_in_flexbox(self):
        source = """
        <div class="flexbox" data-justify="space-between">
          <span>left</span><span>right</span>
        </div>
        """
        assert render_markup(source, width=20) == "left" + " " * 11 + "right\n"

    @pytest.mark.unit
    def test_document_wrapper(self):
        source = "<html><head><title>t</title></head><body><p>hi</p></body></html>"
        assert render_markup(source, width=10) == "hi\n"

    @pytest.mark.unit
    def test_unknown_element_fails(self):
        with pytest.raises(UnhandledNodeError):
            render_markup('<div class="flexbox"><widget>A</widget></div>', width=10)
