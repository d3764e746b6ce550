"""Markup to tree node parser.

Converts HTML-like markup into immutable TreeNode trees so layouts can be
authored as text, e.g.::

    <div class="flexbox" data-justify="space-between">
      <span>left</span><span>right</span>
    </div>
"""

from html.parser import HTMLParser
from typing import Any

from .lib import NodeKind, TreeNode

# Tags whose content never reaches the output
SKIP_TAGS = {
    "script",
    "style",
    "head",
    "title",
    "meta",
    "link",
    "noscript",
    "template",
}

# Self-closing tags
VOID_TAGS = {
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
}


class TreeBuilder(HTMLParser):
    """HTML parser that accumulates a mutable hierarchy of dicts."""

    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.root: dict[str, Any] = {"tag": "div", "attributes": {}, "children": []}
        self.stack: list[dict[str, Any]] = [self.root]
        self.skip_depth = 0

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag in SKIP_TAGS:
            if tag not in VOID_TAGS:
                self.skip_depth += 1
            return
        if self.skip_depth:
            return

        node: dict[str, Any] = {
            "tag": tag,
            "attributes": {key: value or "" for key, value in attrs},
            "children": [],
        }
        self.stack[-1]["children"].append(node)

        if tag not in VOID_TAGS:
            self.stack.append(node)

    def handle_endtag(self, tag: str) -> None:
        if tag in SKIP_TAGS:
            if tag not in VOID_TAGS and self.skip_depth:
                self.skip_depth -= 1
            return
        if self.skip_depth or tag in VOID_TAGS:
            return

        # Pop up to the matching open tag; stray end tags are ignored
        for depth in range(len(self.stack) - 1, 0, -1):
            if self.stack[depth]["tag"] == tag:
                del self.stack[depth:]
                break

    def handle_data(self, data: str) -> None:
        if self.skip_depth:
            return
        collapsed = " ".join(data.split())
        if collapsed:
            self.stack[-1]["children"].append({"text": collapsed})

    def get_tree(self) -> TreeNode:
        """Freeze the accumulated hierarchy into TreeNodes."""
        children = self.root["children"]
        if len(children) == 1 and "tag" in children[0]:
            return _freeze(children[0])
        return _freeze(self.root)


def _freeze(raw: dict[str, Any]) -> TreeNode:
    if "text" in raw:
        return TreeNode(kind=NodeKind.TEXT, text=raw["text"])
    return TreeNode(
        kind=NodeKind.ELEMENT,
        tag=raw["tag"],
        attributes=raw["attributes"],
        children=tuple(_freeze(child) for child in raw["children"]),
    )


def parse_markup(source: str) -> TreeNode:
    """Parse markup into a TreeNode tree.

    Args:
        source: HTML-like markup.

    Returns:
        The single top-level element, or a `div` wrapping every top-level
        node when there is more than one (or only text).
    """
    builder = TreeBuilder()
    builder.feed(source)
    builder.close()
    return builder.get_tree()


__all__ = ["parse_markup", "TreeBuilder"]
