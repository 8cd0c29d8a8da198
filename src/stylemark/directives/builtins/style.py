"""Style property directives.

``!color red``, ``!background-color #eee``, ``!font-size 12pt`` and
``!font-family serif`` set one property of the ambient style to the raw
argument string. ``!reset`` clears the ambient style.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from stylemark.nodes import Node
    from stylemark.renderers.html import HtmlRenderer, RenderContext


class StyleDirective:
    """Set an ambient style property named after the directive."""

    names: ClassVar[tuple[str, ...]] = (
        "color",
        "background-color",
        "font-size",
        "font-family",
    )

    def apply(self, node: Node, renderer: HtmlRenderer, ctx: RenderContext) -> None:
        assert node.directive is not None
        ctx.scope.set(node.directive, node.args or "")


class ResetDirective:
    """Clear the ambient style."""

    names: ClassVar[tuple[str, ...]] = ("reset",)

    def apply(self, node: Node, renderer: HtmlRenderer, ctx: RenderContext) -> None:
        ctx.scope.clear()
