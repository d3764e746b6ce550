"""Tree node model consumed by the translation pipeline.

A TreeNode is an immutable value produced upstream (by the markup parser or
by a host component model). Nodes are either elements, carrying a tag, a
string attribute map and ordered children, or text nodes carrying content.
"""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, Field, field_validator


class NodeKind(str, Enum):
    """Kind of a tree node."""

    ELEMENT = "element"
    TEXT = "text"


class TreeNode(BaseModel):
    """Recursive, immutable node of the UI tree.

    Attributes:
        kind: Element or text.
        tag: Lower-case element tag name (None for text nodes).
        text: Text content (empty for elements).
        attributes: Read-only, string-keyed attribute map.
        children: Ordered child nodes.
    """

    kind: NodeKind = Field(..., description="Element or text node")
    tag: str | None = Field(default=None, description="Element tag name")
    text: str = Field(default="", description="Content of a text node")
    attributes: Mapping[str, str] = Field(
        default_factory=dict,
        validate_default=True,
        description="String-keyed attribute map",
    )
    children: tuple["TreeNode", ...] = Field(
        default=(),
        description="Ordered child nodes",
    )

    model_config = {
        "frozen": True,
    }

    @field_validator("attributes", mode="after")
    @classmethod
    def freeze_attributes(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @property
    def is_element(self) -> bool:
        return self.kind == NodeKind.ELEMENT

    @property
    def is_text(self) -> bool:
        return self.kind == NodeKind.TEXT

    @property
    def is_blank(self) -> bool:
        """True for text nodes holding only whitespace."""
        return self.is_text and not self.text.strip()

    def get_attribute(self, key: str, default: str | None = None) -> str | None:
        """Get an attribute value, or `default` when absent."""
        return self.attributes.get(key, default)

    def has_attribute(self, key: str) -> bool:
        return key in self.attributes

    def has_class(self, name: str) -> bool:
        """Check whether this is an element whose class equals `name`.

        The comparison ignores case and surrounding whitespace.
        """
        if not self.is_element:
            return False
        value = self.attributes.get("class")
        return value is not None and value.strip().lower() == name.lower()

    def __str__(self) -> str:
        if self.is_text:
            preview = self.text if len(self.text) <= 20 else self.text[:17] + "..."
            return f"text({preview!r})"
        attrs = " ".join(f'{key}="{value}"' for key, value in self.attributes.items())
        head = f"{self.tag or 'element'} {attrs}".strip()
        return f"<{head}> ({len(self.children)} children)"


def element(
    tag: str,
    attributes: dict[str, str] | None = None,
    *children: TreeNode,
) -> TreeNode:
    """Build an element node.

    Example:
        >>> node = element("div", {"class": "flexbox"}, text("A"), text("B"))
        >>> len(node.children)
        2
    """
    return TreeNode(
        kind=NodeKind.ELEMENT,
        tag=tag.lower(),
        attributes=dict(attributes or {}),
        children=tuple(children),
    )


def text(value: str) -> TreeNode:
    """Build a text node."""
    return TreeNode(kind=NodeKind.TEXT, text=value)


__all__ = [
    "NodeKind",
    "TreeNode",
    "element",
    "text",
]
