"""Tests for the markup parser."""

import pytest

from termflex.vdom import NodeKind, parse_markup


class TestParseMarkup:
    """Tests for parse_markup."""

    @pytest.mark.unit
    def test_single_root_returned(self):
        node = parse_markup('<div class="flexbox" data-gap="2"><span>A</span></div>')
        assert node.kind == NodeKind.ELEMENT
        assert node.tag == "div"
        assert node.attributes == {"class": "flexbox", "data-gap": "2"}
        assert node.children[0].tag == "span"
        assert node.children[0].children[0].text == "A"

    @pytest.mark.unit
    def test_multiple_roots_wrapped(self):
        node = parse_markup("<span>A</span><span>B</span>")
        assert node.tag == "div"
        assert [child.tag for child in node.children] == ["span", "span"]

    @pytest.mark.unit
    def test_plain_text_wrapped(self):
        node = parse_markup("hello")
        assert node.tag == "div"
        assert node.children[0].text == "hello"

    @pytest.mark.unit
    def test_whitespace_collapsed_and_blank_dropped(self):
        node = parse_markup("<p>\n   two   words \n</p>\n")
        assert len(node.children) == 1
        assert node.children[0].text == "two words"

    @pytest.mark.unit
    def test_attribute_names_lower_cased(self):
        node = parse_markup('<DIV Data-Direction="Column"></DIV>')
        assert node.get_attribute("data-direction") == "Column"

    @pytest.mark.unit
    def test_valueless_attribute(self):
        node = parse_markup('<div class="panel" data-expand></div>')
        assert node.get_attribute("data-expand") == ""

    @pytest.mark.unit
    def test_skipped_content(self):
        node = parse_markup("<div><style>p { x: y }</style><script>1 < 2</script>A</div>")
        assert len(node.children) == 1
        assert node.children[0].text == "A"

    @pytest.mark.unit
    def test_void_tags_do_not_nest(self):
        node = parse_markup("<div><br>A</div>")
        assert [child.kind for child in node.children] == [NodeKind.ELEMENT, NodeKind.TEXT]
        assert node.children[0].children == ()

    @pytest.mark.unit
    def test_unclosed_tags_closed_by_parent(self):
        node = parse_markup("<div><p>A</div><span>B</span>")
        assert node.tag == "div"
        assert node.children[0].tag == "div"
        assert node.children[1].tag == "span"
