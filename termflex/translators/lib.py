"""Built-in translation middleware.

Registered in default precedence order:

    flexbox  <div class="flexbox" data-direction=... data-gap=...>
    align    <div class="align" data-horizontal=... data-vertical=...>
    panel    <div class="panel" data-title=... data-expand>
    rows     <div class="rows">, or any unclassed block element
    inline   <span>, <b>, <em>, <br> and other unclassed inline elements
    text     character data

Translators never raise for malformed attributes; unknown values resolve to
documented defaults. When a child cannot be translated the whole node is
handed to the next middleware instead of being rendered partially.
"""

from collections.abc import Iterable

from rich.align import Align
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from termflex.core import get_logger
from termflex.flex import FlexBox
from termflex.schema import (
    HORIZONTAL_LOOKUP,
    VERTICAL_LOOKUP,
    HorizontalAlign,
    VerticalAlign,
    parse_align,
    parse_bool,
    parse_direction,
    parse_enum,
    parse_justify,
    parse_non_negative_int,
    parse_positive_int,
    parse_wrap,
)
from termflex.translation import (
    TranslationContext,
    TranslationDelegate,
    TranslationError,
    TranslationMiddleware,
    register_translator,
)
from termflex.vdom import TreeNode

logger = get_logger(__name__)

# Unclassed elements stacked vertically by the rows translator
BLOCK_TAGS = frozenset(
    {
        "html",
        "body",
        "main",
        "section",
        "article",
        "header",
        "footer",
        "nav",
        "aside",
        "div",
        "p",
        "ul",
        "ol",
        "li",
    }
)

# Unclassed elements flowed into a single Text, with the style they contribute
INLINE_STYLES: dict[str, str] = {
    "span": "",
    "a": "underline",
    "b": "bold",
    "strong": "bold",
    "i": "italic",
    "em": "italic",
    "u": "underline",
    "s": "strike",
    "del": "strike",
    "code": "",
    "kbd": "",
    "small": "",
    "mark": "reverse",
    "label": "",
    "abbr": "",
    "sub": "",
    "sup": "",
    "br": "",
}


def _is_unclassed(node: TreeNode) -> bool:
    return not (node.get_attribute("class") or "").strip()


def convert_children(
    children: Iterable[TreeNode], context: TranslationContext
) -> list[RenderableType] | None:
    """Translate child nodes through the pipeline.

    Blank text children are skipped.

    Returns:
        The translated children in order, or None if any child failed.
    """
    converted: list[RenderableType] = []
    for child in children:
        if child.is_blank:
            continue
        try:
            converted.append(context.translate(child))
        except TranslationError as exc:
            logger.debug("Child %s not translated: %s", child, exc)
            return None
    return converted


@register_translator
class FlexBoxTranslator(TranslationMiddleware):
    """Translate `class="flexbox"` elements into FlexBox renderables.

    Attributes (all optional, case-insensitive values):
        data-direction: row | column
        data-justify: start | end | center | space-between | space-around | space-evenly
        data-align: start | end | center | stretch
        data-wrap: nowrap | wrap
        data-gap: non-negative integer
        data-width, data-height: positive integers
    """

    name = "flexbox"

    def translate(
        self,
        context: TranslationContext,
        call_next: TranslationDelegate,
        node: TreeNode,
    ) -> RenderableType:
        if not node.has_class("flexbox"):
            return call_next(node)

        items = convert_children(node.children, context)
        if items is None:
            logger.debug("Delegating %s: a child could not be translated", node)
            return call_next(node)

        return FlexBox(
            items,
            direction=parse_direction(node.get_attribute("data-direction")),
            justify=parse_justify(node.get_attribute("data-justify")),
            align=parse_align(node.get_attribute("data-align")),
            wrap=parse_wrap(node.get_attribute("data-wrap")),
            gap=parse_non_negative_int(node.get_attribute("data-gap")),
            width=parse_positive_int(node.get_attribute("data-width")),
            height=parse_positive_int(node.get_attribute("data-height")),
        )


@register_translator
class AlignTranslator(TranslationMiddleware):
    """Translate `class="align"` elements into rich Align renderables."""

    name = "align"

    def translate(
        self,
        context: TranslationContext,
        call_next: TranslationDelegate,
        node: TreeNode,
    ) -> RenderableType:
        if not node.has_class("align"):
            return call_next(node)

        items = convert_children(node.children, context)
        if items is None:
            return call_next(node)

        horizontal = parse_enum(
            HORIZONTAL_LOOKUP, node.get_attribute("data-horizontal"), HorizontalAlign.LEFT
        )
        vertical = parse_enum(
            VERTICAL_LOOKUP, node.get_attribute("data-vertical"), VerticalAlign.TOP
        )
        return Align(
            Group(*items),
            align=horizontal.value,
            vertical=vertical.value,
            width=parse_positive_int(node.get_attribute("data-width")),
            height=parse_positive_int(node.get_attribute("data-height")),
        )


@register_translator
class PanelTranslator(TranslationMiddleware):
    """Translate `class="panel"` elements into bordered rich Panels."""

    name = "panel"

    def translate(
        self,
        context: TranslationContext,
        call_next: TranslationDelegate,
        node: TreeNode,
    ) -> RenderableType:
        if not node.has_class("panel"):
            return call_next(node)

        items = convert_children(node.children, context)
        if items is None:
            return call_next(node)

        return Panel(
            Group(*items),
            title=node.get_attribute("data-title") or None,
            expand=parse_bool(node.get_attribute("data-expand")),
        )


@register_translator
class RowsTranslator(TranslationMiddleware):
    """Stack children vertically.

    Handles `class="rows"` and block elements that carry no class.
    """

    name = "rows"

    def _accepts(self, node: TreeNode) -> bool:
        if node.has_class("rows"):
            return True
        return (
            node.is_element
            and node.tag in BLOCK_TAGS
            and _is_unclassed(node)
        )

    def translate(
        self,
        context: TranslationContext,
        call_next: TranslationDelegate,
        node: TreeNode,
    ) -> RenderableType:
        if not self._accepts(node):
            return call_next(node)

        items = convert_children(node.children, context)
        if items is None:
            return call_next(node)
        return Group(*items)


@register_translator
class InlineTranslator(TranslationMiddleware):
    """Flow unclassed inline elements into one rich Text.

    Text descendants are appended in order, styled by the inline elements
    that enclose them; `br` becomes a line break. An inline element holding
    anything other than text and inline elements is delegated.
    """

    name = "inline"

    def _accepts(self, node: TreeNode) -> bool:
        return node.is_element and node.tag in INLINE_STYLES and _is_unclassed(node)

    def _append(self, content: Text, node: TreeNode, style: str) -> bool:
        if node.is_text:
            content.append(node.text, style=style or None)
            return True
        if not self._accepts(node):
            return False
        if node.tag == "br":
            content.append("\n")
            return True

        nested = " ".join(part for part in (style, INLINE_STYLES[node.tag]) if part)
        return all(self._append(content, child, nested) for child in node.children)

    def translate(
        self,
        context: TranslationContext,
        call_next: TranslationDelegate,
        node: TreeNode,
    ) -> RenderableType:
        if not self._accepts(node):
            return call_next(node)
        if node.tag == "br":
            # A break outside running text is an empty line
            return Text()

        content = Text()
        if not self._append(content, node, ""):
            logger.debug("Delegating %s: holds a block element", node)
            return call_next(node)
        return content


@register_translator
class TextTranslator(TranslationMiddleware):
    """Translate text nodes into rich Text."""

    name = "text"

    def translate(
        self,
        context: TranslationContext,
        call_next: TranslationDelegate,
        node: TreeNode,
    ) -> RenderableType:
        if not node.is_text:
            return call_next(node)
        return Text(node.text)


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
