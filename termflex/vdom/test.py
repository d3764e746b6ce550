"""Unit tests for the tree node model."""

import pytest
from pydantic import ValidationError

from termflex.vdom import NodeKind, TreeNode, element, text


class TestTreeNode:
    """Tests for TreeNode."""

    @pytest.mark.unit
    def test_minimal_element(self):
        node = TreeNode(kind=NodeKind.ELEMENT, tag="div")
        assert node.is_element
        assert not node.is_text
        assert node.attributes == {}
        assert node.children == ()

    @pytest.mark.unit
    def test_nested_children(self):
        node = element("div", {"class": "flexbox"}, text("A"), element("span", None, text("B")))
        assert len(node.children) == 2
        assert node.children[0].text == "A"
        assert node.children[1].children[0].text == "B"

    @pytest.mark.unit
    def test_frozen(self):
        node = text("A")
        with pytest.raises(ValidationError):
            node.text = "B"

    @pytest.mark.unit
    def test_attributes_read_only(self):
        node = element("div", {"class": "flexbox"})
        with pytest.raises(TypeError):
            node.attributes["class"] = "rows"
        assert node.has_class("flexbox")

    @pytest.mark.unit
    def test_attributes_detached_from_source(self):
        source = {"data-gap": "1"}
        node = TreeNode(kind=NodeKind.ELEMENT, tag="div", attributes=source)
        source["data-gap"] = "9"
        assert node.get_attribute("data-gap") == "1"

    @pytest.mark.unit
    def test_default_attributes_read_only(self):
        node = TreeNode(kind=NodeKind.ELEMENT, tag="div")
        with pytest.raises(TypeError):
            node.attributes["x"] = "y"

    @pytest.mark.unit
    def test_kind_required(self):
        with pytest.raises(ValidationError):
            TreeNode(tag="div")

    @pytest.mark.unit
    def test_element_lowercases_tag(self):
        assert element("DIV").tag == "div"


class TestAttributes:
    """Tests for attribute helpers."""

    @pytest.mark.unit
    def test_get_attribute(self):
        node = element("div", {"data-gap": "2"})
        assert node.get_attribute("data-gap") == "2"
        assert node.get_attribute("data-wrap") is None
        assert node.get_attribute("data-wrap", "nowrap") == "nowrap"
        assert node.has_attribute("data-gap")

    @pytest.mark.unit
    def test_has_class_case_insensitive(self):
        assert element("div", {"class": "FlexBox"}).has_class("flexbox")
        assert element("div", {"class": " flexbox "}).has_class("flexbox")

    @pytest.mark.unit
    def test_has_class_requires_exact_value(self):
        assert not element("div", {"class": "flexbox wide"}).has_class("flexbox")
        assert not element("div").has_class("flexbox")

    @pytest.mark.unit
    def test_text_node_never_has_class(self):
        assert not text("flexbox").has_class("flexbox")

    @pytest.mark.unit
    def test_is_blank(self):
        assert text("  \n ").is_blank
        assert not text(" a ").is_blank
        assert not element("div").is_blank


class TestStr:
    """Tests for the human-readable form used in error messages."""

    @pytest.mark.unit
    def test_element_str(self):
        node = element("div", {"class": "mystery"}, text("x"))
        assert str(node) == '<div class="mystery"> (1 children)'

    @pytest.mark.unit
    def test_text_str_truncates(self):
        assert str(text("short")) == "text('short')"
        assert str(text("a" * 30)).endswith("...')")
