"""Centralized environment configuration management for termflex.

Provides a unified interface for all environment variables with:
- Single `get_environment()` function for all configuration
- Type-safe enum with metadata (default, type, description)
- Consistent resolution: override > environment > default

Example:
    >>> from termflex.config import EnvVar, get_environment
    >>>
    >>> width = get_environment(EnvVar.TERMFLEX_WIDTH)  # Returns int | None
    >>> order = get_translator_order()  # ["flexbox", "align", ...]
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, overload

DEFAULT_TRANSLATOR_ORDER = "flexbox,align,panel,rows,inline,text"
DEFAULT_RENDER_WIDTH = 80

# =============================================================================
# Environment Variable Configuration
# =============================================================================


@dataclass(frozen=True)
class EnvConfig:
    """Metadata for an environment variable.

    Attributes:
        name: Environment variable name (e.g., "TERMFLEX_WIDTH").
        default: Default value if not set in environment.
        var_type: Python type for value conversion (str, int, bool).
        description: Human-readable description.
        category: Grouping category for documentation.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"


class EnvVar(Enum):
    """All environment variables used by termflex.

    Categories:
        - render: Output surface configuration
        - translation: Translation pipeline configuration
        - logging: Diagnostics
    """

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------
    TERMFLEX_WIDTH = EnvConfig(
        name="TERMFLEX_WIDTH",
        default=None,  # Falls back to DEFAULT_RENDER_WIDTH
        var_type=int,
        description="Render width in cells",
        category="render",
    )
    TERMFLEX_NO_COLOR = EnvConfig(
        name="TERMFLEX_NO_COLOR",
        default=False,
        var_type=bool,
        description="Disable colour output",
        category="render",
    )

    # -------------------------------------------------------------------------
    # Translation
    # -------------------------------------------------------------------------
    TERMFLEX_TRANSLATORS = EnvConfig(
        name="TERMFLEX_TRANSLATORS",
        default=DEFAULT_TRANSLATOR_ORDER,
        var_type=str,
        description="Comma-separated translator names, highest precedence first",
        category="translation",
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    TERMFLEX_LOG_LEVEL = EnvConfig(
        name="TERMFLEX_LOG_LEVEL",
        default="WARNING",
        var_type=str,
        description="Log level for the CLI (DEBUG, INFO, WARNING, ERROR)",
        category="logging",
    )


# =============================================================================
# Type Conversion Helpers
# =============================================================================


def _parse_bool(value: str) -> bool | None:
    """Parse string to boolean.

    Recognizes: true/false, 1/0, yes/no (case-insensitive).
    Returns None for unrecognized values.
    """
    normalized = value.lower().strip()
    if normalized in ("true", "1", "yes"):
        return True
    if normalized in ("false", "0", "no"):
        return False
    return None


def _convert_value(value: str | None, var_type: type, default: Any) -> Any:
    """Convert string value to target type.

    Args:
        value: Raw string value from environment (or None).
        var_type: Target Python type.
        default: Default value if conversion fails or value is None.

    Returns:
        Converted value or default.
    """
    if value is None:
        return default

    if var_type is str:
        return value

    if var_type is int:
        try:
            return int(value)
        except ValueError:
            return default

    if var_type is bool:
        result = _parse_bool(value)
        return result if result is not None else default

    # Unknown type, return as-is
    return value


# =============================================================================
# Main Interface
# =============================================================================


@overload
def get_environment(env_var: EnvVar, override: int) -> int: ...
@overload
def get_environment(env_var: EnvVar, override: str) -> str: ...
@overload
def get_environment(env_var: EnvVar, override: bool) -> bool: ...
@overload
def get_environment(env_var: EnvVar, override: None = None) -> Any: ...


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Get environment variable value with type conversion.

    Resolution priority:
        1. Explicit override parameter (highest)
        2. Environment variable value
        3. Default from EnvConfig (lowest)

    Args:
        env_var: Environment variable enum member.
        override: Optional override value (bypasses env lookup).

    Returns:
        Value converted to the appropriate type (str, int or bool).
    """
    config: EnvConfig = env_var.value

    if override is not None:
        return override

    raw_value = os.environ.get(config.name)
    return _convert_value(raw_value, config.var_type, config.default)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    """Get metadata for an environment variable."""
    return env_var.value


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """List all environment variables, optionally filtered by category.

    Args:
        category: Filter by category (render, translation, logging).
                 None returns all variables.

    Returns:
        List of EnvVar enum members.
    """
    if category is None:
        return list(EnvVar)

    return [var for var in EnvVar if var.value.category == category]


# =============================================================================
# Convenience Functions
# =============================================================================


def get_translator_order(
    override: str | list[str] | tuple[str, ...] | None = None,
) -> list[str]:
    """Get the configured translator names, highest precedence first.

    Resolution: override > TERMFLEX_TRANSLATORS > DEFAULT_TRANSLATOR_ORDER

    Names are lower-cased and blanks dropped; duplicates keep their first
    position.
    """
    if isinstance(override, (list, tuple)):
        raw_names = override
    else:
        raw_names = get_environment(EnvVar.TERMFLEX_TRANSLATORS, override).split(",")

    names: list[str] = []
    for raw in raw_names:
        name = raw.strip().lower()
        if name and name not in names:
            names.append(name)
    return names


def get_render_width(override: int | None = None) -> int:
    """Get the render width in cells.

    Resolution: override > TERMFLEX_WIDTH > DEFAULT_RENDER_WIDTH.
    Non-positive values are ignored.
    """
    width = get_environment(EnvVar.TERMFLEX_WIDTH, override)
    if width is None or width < 1:
        return DEFAULT_RENDER_WIDTH
    return width


__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Convenience functions
    "get_translator_order",
    "get_render_width",
    # Introspection
    "list_environment_variables",
    # Defaults
    "DEFAULT_TRANSLATOR_ORDER",
    "DEFAULT_RENDER_WIDTH",
]
