"""
Stylemark — directive-styled HTML rendering for Markdown document trees.

Renders a parsed document tree to HTML. Inline directives embedded in the
document (``!color red``, ``!push``/``!pop``, ``!section``/``!end``) set an
ambient style that is attached to the following block elements, or open
styled containers.

Quick Start:
    >>> from stylemark import builder as b, render
    >>> doc = b.document(
    ...     b.directive("color", "red"),
    ...     b.paragraph(b.text("Hello")),
    ... )
    >>> render(doc)
    '<p style="color:red;">Hello</p>\\n'

Safe Mode:
    >>> render(doc, safe=True)  # drops javascript: links, omits raw HTML

Custom Directives:
    >>> from stylemark import HtmlRenderer, create_registry_with_defaults
    >>>
    >>> builder = create_registry_with_defaults()
    >>> builder.register(MyDirective())
    >>> renderer = HtmlRenderer(directive_registry=builder.build())
"""

from typing import Any

from stylemark.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from stylemark.directives import (
    DirectiveHandler,
    DirectiveRegistry,
    DirectiveRegistryBuilder,
    SectionArgs,
    create_default_registry,
    create_registry_with_defaults,
    parse_section_args,
)
from stylemark.errors import DirectiveDiagnostic, NodeError, RenderError, StylemarkError
from stylemark.location import SourceLocation
from stylemark.nodes import CONTAINER_TYPES, NODE_TYPES, Node
from stylemark.renderers.html import HtmlRenderer, RenderContext
from stylemark.renderers.protocol import ASTRenderer
from stylemark.sanitize import is_potentially_unsafe
from stylemark.scopes import ScopeFrame, ScopeKind, StyleScope
from stylemark.utils.text import escape_xml
from stylemark.walker import NodeWalker, WalkEvent, walk

__version__ = "0.1.0"


def render(
    doc: Node,
    *,
    config: RenderConfig | None = None,
    directive_registry: DirectiveRegistry | None = None,
    **overrides: Any,
) -> str:
    """Render a document tree to HTML.

    Args:
        doc: Document node
        config: Render options (defaults to the ambient config)
        directive_registry: Custom directive registry (uses defaults if None)
        **overrides: RenderConfig fields to override, e.g. ``safe=True``

    Returns:
        HTML string

    Example:
        >>> render(doc, sourcepos=True)
    """
    renderer = HtmlRenderer(config, directive_registry=directive_registry, **overrides)
    return renderer.render(doc)


__all__ = [
    # Rendering
    "render",
    "HtmlRenderer",
    "RenderContext",
    "ASTRenderer",
    # Configuration
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Tree
    "Node",
    "NODE_TYPES",
    "CONTAINER_TYPES",
    "SourceLocation",
    "walk",
    "NodeWalker",
    "WalkEvent",
    # Styles and directives
    "StyleScope",
    "ScopeKind",
    "ScopeFrame",
    "DirectiveHandler",
    "DirectiveRegistry",
    "DirectiveRegistryBuilder",
    "SectionArgs",
    "create_default_registry",
    "create_registry_with_defaults",
    "parse_section_args",
    # Safety
    "escape_xml",
    "is_potentially_unsafe",
    # Errors
    "StylemarkError",
    "NodeError",
    "RenderError",
    "DirectiveDiagnostic",
    "__version__",
]
