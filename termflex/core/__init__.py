"""Core utilities shared by every termflex module."""

from .log import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
