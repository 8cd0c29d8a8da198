"""Render configuration for Stylemark.

RenderConfig is an immutable bundle of the HTML renderer's options. A
ContextVar holds the ambient default so applications can configure
rendering once per thread or task instead of passing options around.

Usage:
    # Explicit config
    renderer = HtmlRenderer(RenderConfig(safe=True))

    # Ambient config, picked up by renderers created inside the block
    with render_config_context(RenderConfig(sourcepos=True)):
        html = HtmlRenderer().render(doc)

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field

from stylemark.utils.text import escape_xml


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        softbreak: Output substituted for soft line breaks. Use "<br />"
            to make them hard breaks or " " to ignore source wrapping.
        esc: Escaper applied to text content and attribute values
        safe: Strip potentially unsafe link/image destinations and replace
            raw HTML with a placeholder comment
        sourcepos: Attach data-sourcepos attributes to nodes that carry
            a source range

    """

    softbreak: str = "\n"
    esc: Callable[[str], str] = field(default=escape_xml)
    safe: bool = False
    sourcepos: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = RenderConfig.from_dict({"safe": True, "theme": "dark"})
            >>> config.safe
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get the ambient render configuration for this thread/context."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set the ambient render configuration for the current context."""
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset the ambient configuration to the defaults."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(safe=True)):
        ...     assert get_render_config().safe
        >>> get_render_config().safe
        False

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
