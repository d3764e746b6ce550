"""Tests for the translation pipeline."""

import pytest
from rich.text import Text

from termflex.vdom import element, text

from .lib import (
    PipelineConfigurationError,
    TranslationContext,
    TranslationError,
    TranslationMiddleware,
    UnhandledNodeError,
    create_context,
    get_translator,
    list_translators,
)


class Recorder(TranslationMiddleware):
    """Middleware that records every node it sees and optionally handles it."""

    def __init__(self, name: str = "recorder", handles: bool = False, log=None):
        self._name = name
        self.handles = handles
        self.log = log if log is not None else []

    @property
    def name(self) -> str:
        return self._name

    def translate(self, context, call_next, node):
        self.log.append(self._name)
        if self.handles:
            return Text(self._name)
        return call_next(node)


class Children(TranslationMiddleware):
    """Middleware translating every element into a list of its children."""

    name = "children"

    def translate(self, context, call_next, node):
        if not node.is_element:
            return call_next(node)
        return [context.translate(child) for child in node.children]


class Texts(TranslationMiddleware):
    name = "texts"

    def translate(self, context, call_next, node):
        if not node.is_text:
            return call_next(node)
        return Text(node.text)


# =============================================================================
# Errors
# =============================================================================


class TestErrors:
    """Tests for the exception hierarchy."""

    @pytest.mark.unit
    def test_hierarchy(self):
        assert issubclass(PipelineConfigurationError, TranslationError)
        assert issubclass(UnhandledNodeError, TranslationError)

    @pytest.mark.unit
    def test_unhandled_carries_node(self):
        node = element("div")
        error = UnhandledNodeError(node)
        assert error.node is node
        assert "div" in str(error)


# =============================================================================
# TranslationContext
# =============================================================================


class TestTranslationContext:
    """Tests for middleware dispatch."""

    @pytest.mark.unit
    def test_none_rejected(self):
        with pytest.raises(TypeError):
            TranslationContext(None)

    @pytest.mark.unit
    def test_empty_rejected(self):
        with pytest.raises(PipelineConfigurationError):
            TranslationContext([])

    @pytest.mark.unit
    def test_unrecognized_node_raises(self):
        context = TranslationContext([Recorder()])
        node = text("x")
        with pytest.raises(UnhandledNodeError) as excinfo:
            context.translate(node)
        assert excinfo.value.node is node

    @pytest.mark.unit
    def test_delegation_walks_in_order(self):
        log: list[str] = []
        context = TranslationContext(
            [Recorder("a", log=log), Recorder("b", log=log), Recorder("c", handles=True, log=log)]
        )
        result = context.translate(text("x"))
        assert log == ["a", "b", "c"]
        assert result.plain == "c"

    @pytest.mark.unit
    def test_earlier_middleware_wins(self):
        log: list[str] = []
        context = TranslationContext(
            [Recorder("first", handles=True, log=log), Recorder("second", handles=True, log=log)]
        )
        assert context.translate(text("x")).plain == "first"
        assert log == ["first"]

    @pytest.mark.unit
    def test_recursive_translation_restarts_at_head(self):
        context = TranslationContext([Children(), Texts()])
        node = element("div", None, text("A"), element("div", None, text("B")))
        result = context.translate(node)
        assert result[0].plain == "A"
        assert result[1][0].plain == "B"

    @pytest.mark.unit
    def test_middleware_is_immutable_tuple(self):
        middleware = [Texts()]
        context = TranslationContext(middleware)
        middleware.append(Children())
        assert context.names == ["texts"]

    @pytest.mark.unit
    def test_repr(self):
        assert repr(TranslationContext([Texts()])) == "TranslationContext(['texts'])"


# =============================================================================
# Registry
# =============================================================================


class TestRegistry:
    """Tests for translator registration and lookup."""

    @pytest.mark.unit
    def test_builtin_translators_registered(self):
        names = list_translators()
        for name in ("flexbox", "align", "panel", "rows", "inline", "text"):
            assert name in names

    @pytest.mark.unit
    def test_get_translator(self):
        assert get_translator("flexbox").name == "flexbox"

    @pytest.mark.unit
    def test_get_translator_returns_new_instance(self):
        assert get_translator("text") is not get_translator("text")

    @pytest.mark.unit
    def test_unknown_translator(self):
        with pytest.raises(KeyError, match="Available"):
            get_translator("nope")

    @pytest.mark.unit
    def test_create_context_default_order(self):
        assert create_context().names == ["flexbox", "align", "panel", "rows", "inline", "text"]

    @pytest.mark.unit
    def test_create_context_explicit_names(self):
        assert create_context(["Text", "flexbox"]).names == ["text", "flexbox"]

    @pytest.mark.unit
    def test_create_context_comma_string(self):
        assert create_context("rows, text").names == ["rows", "text"]

    @pytest.mark.unit
    def test_create_context_from_environment(self, monkeypatch):
        monkeypatch.setenv("TERMFLEX_TRANSLATORS", "text,flexbox")
        assert create_context().names == ["text", "flexbox"]

    @pytest.mark.unit
    def test_create_context_empty(self):
        with pytest.raises(PipelineConfigurationError):
            create_context([])

    @pytest.mark.unit
    def test_create_context_unknown_name(self):
        with pytest.raises(KeyError):
            create_context(["flexbox", "missing"])
