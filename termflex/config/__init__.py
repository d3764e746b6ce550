"""Centralized configuration management for termflex.

Provides unified access to all configuration via the `get_environment()` function.

Environment Variable Categories:
    render: Output width and colour handling
    translation: Translator registration order
    logging: CLI log level
"""

from .lib import (
    DEFAULT_RENDER_WIDTH,
    DEFAULT_TRANSLATOR_ORDER,
    EnvConfig,
    EnvVar,
    get_environment,
    get_environment_info,
    get_render_width,
    get_translator_order,
    list_environment_variables,
)

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
