"""Directive registry for handler lookup and registration.

The registry maps directive names to their handlers. The HTML renderer
consults it for every directive node; names with no handler are ignored,
so documents written for a newer directive vocabulary still render.

Thread Safety:
DirectiveRegistry is immutable after creation. Safe to share.
Use DirectiveRegistryBuilder for mutable construction.

Example:
    >>> builder = create_registry_with_defaults()
    >>> builder.register(HighlightDirective())
    >>> registry = builder.build()
    >>> registry.get("highlight")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stylemark.directives.protocol import DirectiveHandler


class DirectiveRegistry:
    """Immutable registry of directive handlers.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_handlers", "_by_name")

    def __init__(
        self,
        handlers: tuple[DirectiveHandler, ...],
        by_name: dict[str, DirectiveHandler],
    ) -> None:
        """Initialize registry with pre-built mappings.

        Use DirectiveRegistryBuilder to create instances.
        """
        self._handlers = handlers
        self._by_name = by_name

    def get(self, name: str) -> DirectiveHandler | None:
        """Get handler for directive name.

        Args:
            name: Directive name (e.g., "color", "section")

        Returns:
            Handler if registered, None otherwise
        """
        return self._by_name.get(name)

    def has(self, name: str) -> bool:
        """Check if directive name is registered."""
        return name in self._by_name

    @property
    def names(self) -> frozenset[str]:
        """Get all registered directive names."""
        return frozenset(self._by_name.keys())

    @property
    def handlers(self) -> tuple[DirectiveHandler, ...]:
        """Get all registered handlers."""
        return self._handlers

    def __contains__(self, name: str) -> bool:
        """Support 'name in registry' syntax."""
        return self.has(name)

    def __len__(self) -> int:
        """Number of registered directive names."""
        return len(self._by_name)


class DirectiveRegistryBuilder:
    """Mutable builder for DirectiveRegistry.

    Example:
        >>> builder = DirectiveRegistryBuilder()
        >>> builder.register(StyleDirective())
        >>> registry = builder.build()
    """

    __slots__ = ("_handlers", "_by_name")

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._handlers: list[DirectiveHandler] = []
        self._by_name: dict[str, DirectiveHandler] = {}

    def register(self, handler: DirectiveHandler) -> DirectiveRegistryBuilder:
        """Register a directive handler.

        Args:
            handler: Handler implementing DirectiveHandler protocol

        Returns:
            Self for chaining

        Raises:
            TypeError: If handler lacks ``names`` or ``apply``
            ValueError: If handler name conflicts with existing registration
        """
        if not hasattr(handler, "names"):
            msg = f"Handler {type(handler).__name__} missing 'names' attribute"
            raise TypeError(msg)

        if not callable(getattr(handler, "apply", None)):
            msg = f"Handler {type(handler).__name__} missing 'apply' method"
            raise TypeError(msg)

        for name in handler.names:
            if name in self._by_name:
                existing = self._by_name[name]
                msg = f"Directive '{name}' already registered by {type(existing).__name__}"
                raise ValueError(msg)
            self._by_name[name] = handler

        self._handlers.append(handler)
        return self

    def register_all(self, handlers: list[DirectiveHandler]) -> DirectiveRegistryBuilder:
        """Register multiple handlers."""
        for handler in handlers:
            self.register(handler)
        return self

    def build(self) -> DirectiveRegistry:
        """Build immutable registry from registered handlers."""
        return DirectiveRegistry(
            handlers=tuple(self._handlers),
            by_name=dict(self._by_name),
        )

    def __len__(self) -> int:
        """Number of registered handlers."""
        return len(self._handlers)


def _builtin_handlers() -> list[DirectiveHandler]:
    from stylemark.directives.builtins import (
        EndDirective,
        PopDirective,
        PushDirective,
        ResetDirective,
        SectionDirective,
        StyleDirective,
    )

    return [
        StyleDirective(),
        ResetDirective(),
        PushDirective(),
        PopDirective(),
        SectionDirective(),
        EndDirective(),
    ]


# Cached singleton, immutable so shared across threads
_DEFAULT_REGISTRY: DirectiveRegistry | None = None


def create_default_registry() -> DirectiveRegistry:
    """Get the default directive registry (cached singleton).

    Returns:
        Registry with the builtin vocabulary:
        - Style: color, background-color, font-size, font-family, reset
        - Scopes: push, pop, section, end
    """
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = DirectiveRegistryBuilder().register_all(_builtin_handlers()).build()
    return _DEFAULT_REGISTRY


def create_registry_with_defaults() -> DirectiveRegistryBuilder:
    """Create a builder pre-populated with the builtin directives.

    Use this to extend the default set with custom directives:

        >>> builder = create_registry_with_defaults()
        >>> builder.register(MyCustomDirective())
        >>> registry = builder.build()
    """
    return DirectiveRegistryBuilder().register_all(_builtin_handlers())
