"""Tests for rendering helpers."""

import pytest
from rich.segment import Segment
from rich.text import Text

from termflex.translation import TranslationContext, UnhandledNodeError
from termflex.translators import TextTranslator

from .lib import (
    RenderConfig,
    create_console,
    measure,
    render_markup,
    render_segments,
    render_text,
    segments_to_text,
)


class TestRenderConfig:
    """Tests for RenderConfig validation."""

    @pytest.mark.unit
    def test_defaults(self):
        config = RenderConfig()
        assert config.width is None
        assert config.height is None
        assert config.no_color is False

    @pytest.mark.unit
    @pytest.mark.parametrize("field", ["width", "height"])
    def test_non_positive_sizes_rejected(self, field):
        with pytest.raises(ValueError):
            RenderConfig(**{field: 0})

    @pytest.mark.unit
    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("TERMFLEX_WIDTH", "64")
        monkeypatch.setenv("TERMFLEX_NO_COLOR", "true")
        config = RenderConfig.from_environment()
        assert config.width == 64
        assert config.no_color is True

    @pytest.mark.unit
    def test_explicit_width_beats_environment(self, monkeypatch):
        monkeypatch.setenv("TERMFLEX_WIDTH", "64")
        assert RenderConfig.from_environment(width=20).width == 20


class TestCreateConsole:
    """Tests for console construction."""

    @pytest.mark.unit
    def test_uses_configured_width(self):
        assert create_console(RenderConfig(width=33)).width == 33

    @pytest.mark.unit
    def test_default_width(self):
        assert create_console().width == 80

    @pytest.mark.unit
    def test_no_color(self):
        console = create_console(RenderConfig(width=10, no_color=True))
        assert console.color_system is None


class TestHelpers:
    """Tests for measure and render helpers."""

    @pytest.mark.unit
    def test_measure_text(self):
        result = measure(Text("hello world"), 40)
        assert tuple(result) == (5, 11)

    @pytest.mark.unit
    def test_measure_clamped_to_width(self):
        assert measure(Text("hello world"), 8).maximum == 8

    @pytest.mark.unit
    def test_render_segments_end_with_line(self):
        segments = render_segments(Text("hi"), 10)
        assert segments[-1] == Segment.line()

    @pytest.mark.unit
    def test_render_text(self):
        assert render_text(Text("hi"), 10) == "hi\n"

    @pytest.mark.unit
    def test_render_with_existing_console(self, console):
        assert render_text(Text("hi"), 5, console) == "hi\n"

    @pytest.mark.unit
    def test_segments_to_text_skips_control(self):
        from rich.segment import ControlType

        segments = [Segment("a"), Segment("", None, [(ControlType.BELL,)]), Segment("b")]
        assert segments_to_text(segments) == "ab"


class TestRenderMarkup:
    """Tests for the markup to text convenience path."""

    @pytest.mark.unit
    def test_flexbox_markup(self):
        source = '<div class="flexbox" data-justify="end">AB</div>'
        assert render_markup(source, width=10) == "        AB\n"

    @pytest.mark.unit
    def test_width_from_environment(self, monkeypatch):
        monkeypatch.setenv("TERMFLEX_WIDTH", "6")
        source = '<div class="flexbox" data-justify="center">AB</div>'
        assert render_markup(source) == "  AB  \n"

    @pytest.mark.unit
    def test_custom_context(self):
        context = TranslationContext([TextTranslator()])

        with pytest.raises(UnhandledNodeError):
            render_markup("<p>hi</p>", width=10, context=context)
