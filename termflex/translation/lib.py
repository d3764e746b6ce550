"""Translation pipeline from tree nodes to renderables.

A TranslationContext holds an ordered tuple of middleware. Translating a
node walks the tuple by index: each middleware either returns a renderable
or hands the node to `call_next`, which continues with the following
middleware. Past the last middleware sits a terminal handler that raises
UnhandledNodeError.

Earlier middleware take precedence: the first one that accepts a node wins.
Middleware own their children and translate them recursively through
`context.translate`.

Example:
    >>> from termflex.vdom import parse_markup
    >>> context = create_context()
    >>> renderable = context.translate(parse_markup('<div class="flexbox">AB</div>'))
"""

import functools
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

from rich.console import RenderableType

from termflex.config import get_translator_order
from termflex.core import get_logger
from termflex.vdom import TreeNode

logger = get_logger(__name__)

TranslationDelegate = Callable[[TreeNode], RenderableType]


# =============================================================================
# Errors
# =============================================================================


class TranslationError(Exception):
    """Base exception for translation failures."""


class PipelineConfigurationError(TranslationError):
    """Raised when a pipeline is built without any middleware."""


class UnhandledNodeError(TranslationError):
    """Raised when no middleware accepts a node.

    Attributes:
        node: The node that reached the end of the pipeline.
    """

    def __init__(self, node: TreeNode):
        super().__init__(f"No translation middleware handled {node}")
        self.node = node


# =============================================================================
# Middleware
# =============================================================================


class TranslationMiddleware(ABC):
    """Abstract base class for translation middleware.

    Subclasses must implement:
        - name: Identifier used for registration and ordering
        - translate: Convert a node or delegate it to `call_next`

    Example:
        >>> class Upper(TranslationMiddleware):
        ...     name = "upper"
        ...     def translate(self, context, call_next, node):
        ...         if not node.is_text:
        ...             return call_next(node)
        ...         return Text(node.text.upper())
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Middleware identifier string."""
        ...

    @abstractmethod
    def translate(
        self,
        context: "TranslationContext",
        call_next: TranslationDelegate,
        node: TreeNode,
    ) -> RenderableType:
        """Translate `node` or delegate it.

        Args:
            context: The pipeline, used to translate child nodes.
            call_next: Continues with the next middleware.
            node: The node to translate.

        Returns:
            A rich renderable.

        Raises:
            TranslationError: If neither this middleware nor any later one
                can translate the node.
        """
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class TranslationContext:
    """An ordered, immutable pipeline of translation middleware.

    Args:
        middleware: Middleware in precedence order.

    Raises:
        TypeError: If `middleware` is None.
        PipelineConfigurationError: If `middleware` is empty.
    """

    def __init__(self, middleware: Sequence[TranslationMiddleware]):
        if middleware is None:
            raise TypeError("middleware must not be None")
        self._middleware: tuple[TranslationMiddleware, ...] = tuple(middleware)
        if not self._middleware:
            raise PipelineConfigurationError(
                "A translation pipeline needs at least one middleware"
            )

    @property
    def middleware(self) -> tuple[TranslationMiddleware, ...]:
        return self._middleware

    @property
    def names(self) -> list[str]:
        return [m.name for m in self._middleware]

    def translate(self, node: TreeNode) -> RenderableType:
        """Translate a node, starting at the first middleware.

        Raises:
            UnhandledNodeError: If no middleware accepts the node.
        """
        return self._dispatch(0, node)

    def _dispatch(self, index: int, node: TreeNode) -> RenderableType:
        if index >= len(self._middleware):
            raise UnhandledNodeError(node)
        middleware = self._middleware[index]
        call_next = functools.partial(self._dispatch, index + 1)
        return middleware.translate(self, call_next, node)

    def __repr__(self) -> str:
        return f"TranslationContext({self.names})"


# =============================================================================
# Registry
# =============================================================================

# Translator registry - populated by termflex.translators on import
_registry: dict[str, type[TranslationMiddleware]] = {}


def register_translator(
    translator_cls: type[TranslationMiddleware],
) -> type[TranslationMiddleware]:
    """Register a middleware class in the registry.

    Uses a temporary instance to retrieve the middleware name.

    Args:
        translator_cls: The middleware class to register.

    Returns:
        The class (for decorator chaining).
    """
    _registry[translator_cls().name] = translator_cls
    return translator_cls


def get_translator(name: str) -> TranslationMiddleware:
    """Get a middleware instance by name.

    Args:
        name: The middleware identifier (e.g., "flexbox", "text").

    Returns:
        TranslationMiddleware: An instance of the requested middleware.

    Raises:
        KeyError: If no middleware with the given name is registered.
    """
    if name not in _registry:
        _import_translators()
        if name not in _registry:
            available = ", ".join(_registry.keys()) or "(none)"
            raise KeyError(f"Unknown translator '{name}'. Available: {available}")
    return _registry[name]()


def list_translators() -> list[str]:
    """List all registered middleware names in registration order."""
    _import_translators()
    return list(_registry.keys())


def create_context(
    names: str | list[str] | tuple[str, ...] | None = None,
) -> TranslationContext:
    """Build a pipeline from registered middleware names.

    Args:
        names: Middleware names in precedence order, as a list or a
            comma-separated string. None uses TERMFLEX_TRANSLATORS.

    Returns:
        TranslationContext over the named middleware.

    Raises:
        KeyError: If a name is not registered.
        PipelineConfigurationError: If no names are given.
    """
    order = get_translator_order(names)
    logger.debug("Building translation pipeline: %s", ", ".join(order) or "(empty)")
    return TranslationContext([get_translator(name) for name in order])


def _import_translators() -> None:
    """Import the built-in translators to trigger registration."""
    import importlib

    importlib.import_module("termflex.translators")


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
