"""``!push`` and ``!pop``: save and restore the ambient style.

A pop only matches a push; it never closes a section or block quote.
An unmatched pop leaves the ambient style alone and is reported inline.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from stylemark.scopes import ScopeKind

if TYPE_CHECKING:
    from stylemark.nodes import Node
    from stylemark.renderers.html import HtmlRenderer, RenderContext


class PushDirective:
    """Save a snapshot of the ambient style."""

    names: ClassVar[tuple[str, ...]] = ("push",)

    def apply(self, node: Node, renderer: HtmlRenderer, ctx: RenderContext) -> None:
        ctx.scope.push(ScopeKind.PUSH)


class PopDirective:
    """Restore the ambient style saved by the matching push."""

    names: ClassVar[tuple[str, ...]] = ("pop",)

    def apply(self, node: Node, renderer: HtmlRenderer, ctx: RenderContext) -> None:
        if not ctx.scope.pop_matching(ScopeKind.PUSH):
            renderer.report_unbalanced(node, ctx)
