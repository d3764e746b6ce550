"""Tests for configuration management."""

import pytest

from .lib import (
    DEFAULT_RENDER_WIDTH,
    EnvConfig,
    EnvVar,
    get_environment,
    get_environment_info,
    get_render_width,
    get_translator_order,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("TERMFLEX_LOG_LEVEL", raising=False)
        assert get_environment(EnvVar.TERMFLEX_LOG_LEVEL) == "WARNING"

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("TERMFLEX_WIDTH", "99")
        assert get_environment(EnvVar.TERMFLEX_WIDTH, override=50) == 50

    @pytest.mark.unit
    def test_int_type_conversion(self, monkeypatch):
        """Integer type conversion from string."""
        monkeypatch.setenv("TERMFLEX_WIDTH", "120")
        result = get_environment(EnvVar.TERMFLEX_WIDTH)
        assert result == 120
        assert isinstance(result, int)

    @pytest.mark.unit
    def test_invalid_int_returns_default(self, monkeypatch):
        """Unparseable integers fall back to the default."""
        monkeypatch.setenv("TERMFLEX_WIDTH", "wide")
        assert get_environment(EnvVar.TERMFLEX_WIDTH) is None

    @pytest.mark.unit
    def test_bool_type_conversion(self, monkeypatch):
        """Boolean type conversion for true and false values."""
        for value in ("true", "1", "yes", "TRUE"):
            monkeypatch.setenv("TERMFLEX_NO_COLOR", value)
            assert get_environment(EnvVar.TERMFLEX_NO_COLOR) is True
        for value in ("false", "0", "no", "No"):
            monkeypatch.setenv("TERMFLEX_NO_COLOR", value)
            assert get_environment(EnvVar.TERMFLEX_NO_COLOR) is False

    @pytest.mark.unit
    def test_unrecognized_bool_returns_default(self, monkeypatch):
        monkeypatch.setenv("TERMFLEX_NO_COLOR", "maybe")
        assert get_environment(EnvVar.TERMFLEX_NO_COLOR) is False


class TestIntrospection:
    """Tests for metadata and listing helpers."""

    @pytest.mark.unit
    def test_environment_info(self):
        info = get_environment_info(EnvVar.TERMFLEX_TRANSLATORS)
        assert isinstance(info, EnvConfig)
        assert info.name == "TERMFLEX_TRANSLATORS"
        assert info.category == "translation"

    @pytest.mark.unit
    def test_list_all(self):
        assert set(list_environment_variables()) == set(EnvVar)

    @pytest.mark.unit
    def test_list_by_category(self):
        render_vars = list_environment_variables("render")
        assert EnvVar.TERMFLEX_WIDTH in render_vars
        assert EnvVar.TERMFLEX_TRANSLATORS not in render_vars


class TestTranslatorOrder:
    """Tests for get_translator_order."""

    @pytest.mark.unit
    def test_default_order(self, monkeypatch):
        monkeypatch.delenv("TERMFLEX_TRANSLATORS", raising=False)
        assert get_translator_order() == ["flexbox", "align", "panel", "rows", "inline", "text"]

    @pytest.mark.unit
    def test_env_order_normalized(self, monkeypatch):
        monkeypatch.setenv("TERMFLEX_TRANSLATORS", " Text, ,FLEXBOX,text ")
        assert get_translator_order() == ["text", "flexbox"]

    @pytest.mark.unit
    def test_list_override(self, monkeypatch):
        monkeypatch.setenv("TERMFLEX_TRANSLATORS", "text")
        assert get_translator_order(["rows", "text"]) == ["rows", "text"]


class TestRenderWidth:
    """Tests for get_render_width."""

    @pytest.mark.unit
    def test_default(self, monkeypatch):
        monkeypatch.delenv("TERMFLEX_WIDTH", raising=False)
        assert get_render_width() == DEFAULT_RENDER_WIDTH

    @pytest.mark.unit
    def test_env_value(self, monkeypatch):
        monkeypatch.setenv("TERMFLEX_WIDTH", "33")
        assert get_render_width() == 33

    @pytest.mark.unit
    def test_non_positive_ignored(self, monkeypatch):
        monkeypatch.setenv("TERMFLEX_WIDTH", "0")
        assert get_render_width() == DEFAULT_RENDER_WIDTH
