"""Core logging implementation for termflex.

Library modules only ever ask for a logger; handlers are installed by the
host (or the CLI) through `setup_logging`.
"""

import logging
import sys
from typing import Optional

__all__ = ["get_logger", "setup_logging"]

DEFAULT_LOGGER_NAME = "termflex"


def _resolve_level(level: int | str) -> int:
    """Turn a level name such as "debug" into its numeric value.

    Unknown names fall back to WARNING.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def setup_logging(level: int | str = logging.INFO, stream=sys.stderr) -> None:
    """Configure basic logging.

    Args:
        level: Logging level, numeric or by name.
        stream: Output stream.
    """
    logging.basicConfig(
        level=_resolve_level(level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=stream,
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Name of the logger.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name or DEFAULT_LOGGER_NAME)
