"""Middleware pipeline translating tree nodes into renderables."""

from termflex.translation.lib import (
    PipelineConfigurationError,
    TranslationContext,
    TranslationDelegate,
    TranslationError,
    TranslationMiddleware,
    UnhandledNodeError,
    create_context,
    get_translator,
    list_translators,
    register_translator,
)

__all__ = [
    "TranslationError",
    "PipelineConfigurationError",
    "UnhandledNodeError",
    "TranslationDelegate",
    "TranslationMiddleware",
    "TranslationContext",
    "register_translator",
    "get_translator",
    "list_translators",
    "create_context",
]
