"""DirectiveHandler protocol for inline authoring directives.

A directive node (``!color red``, ``!push``, ``!section .note``) carries a
name and a raw argument string. During rendering the HTML renderer looks
the name up in its DirectiveRegistry and calls the handler's ``apply``,
which may change the ambient style, open or close scopes, or emit tags.

Thread Safety:
Handlers must be stateless. All mutable state lives in the RenderContext
passed to ``apply``, which belongs to a single render call.

Example:
    >>> class HighlightDirective:
    ...     names = ("highlight",)
    ...
    ...     def apply(self, node, renderer, ctx):
    ...         ctx.scope.set("background-color", "yellow")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from stylemark.nodes import Node
    from stylemark.renderers.html import HtmlRenderer, RenderContext


@runtime_checkable
class DirectiveHandler(Protocol):
    """Protocol for directive implementations.

    Attributes:
        names: Directive names this handler responds to.
               Example: ("color", "background-color") for style properties

    """

    names: ClassVar[tuple[str, ...]]

    def apply(self, node: Node, renderer: HtmlRenderer, ctx: RenderContext) -> None:
        """Interpret a directive node.

        Args:
            node: The directive node (``node.directive`` is the name,
                ``node.args`` the raw argument string)
            renderer: Renderer providing tag/text emission helpers
            ctx: Per-render state (ambient style, scope stack, output)
        """
        ...
