"""Tests for core logging module."""

import logging
from io import StringIO

import pytest

from .lib import _resolve_level, get_logger, setup_logging


class TestLogging:
    """Test core logging API."""

    @pytest.mark.unit
    def test_get_logger(self) -> None:
        """Verify logger instance creation."""
        logger = get_logger("test")
        assert logger.name == "test"
        assert isinstance(logger, logging.Logger)

    @pytest.mark.unit
    def test_get_logger_default_name(self) -> None:
        """Verify default logger name."""
        logger = get_logger()
        assert logger.name == "termflex"

    @pytest.mark.unit
    def test_setup_logging(self) -> None:
        """Verify logging setup accepts a level name."""
        stream = StringIO()
        setup_logging(level="debug", stream=stream)
        logger = get_logger("test_setup")
        logger.debug("test message")

        # basicConfig is a no-op when logging was already configured,
        # so only the API contract is checked here.
        assert logger.level == logging.NOTSET


class TestResolveLevel:
    """Level name resolution."""

    @pytest.mark.unit
    def test_numeric_passthrough(self) -> None:
        assert _resolve_level(logging.ERROR) == logging.ERROR

    @pytest.mark.unit
    def test_name_case_insensitive(self) -> None:
        assert _resolve_level("Debug") == logging.DEBUG
        assert _resolve_level(" info ") == logging.INFO

    @pytest.mark.unit
    def test_unknown_name_falls_back_to_warning(self) -> None:
        assert _resolve_level("chatty") == logging.WARNING
