"""``!section`` and ``!end``: styled container blocks.

``!section`` opens a ``<div>`` carrying the classes, id and style given in
its arguments, layered over the current ambient style. The ambient style
is then cleared, so content inside the section starts unstyled.
``!end`` closes the innermost section and restores the style that was in
effect before it opened. Pushes left open inside the section are
discarded by ``!end``.

Example:
    !section .note #intro color: red;
    ...content...
    !end

renders ``<div class="note" id="intro" style="color:red;">...</div>``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from stylemark.directives.options import parse_section_args
from stylemark.scopes import ScopeKind

if TYPE_CHECKING:
    from stylemark.nodes import Node
    from stylemark.renderers.html import HtmlRenderer, RenderContext

_UNPOPPED = frozenset((ScopeKind.PUSH,))


class SectionDirective:
    """Open a styled ``<div>`` container."""

    names: ClassVar[tuple[str, ...]] = ("section",)

    def apply(self, node: Node, renderer: HtmlRenderer, ctx: RenderContext) -> None:
        ctx.scope.push(ScopeKind.SECTION)
        section = parse_section_args(node.args)

        attrs: list[tuple[str, str]] = []
        if section.classes:
            attrs.append(("class", " ".join(section.classes)))
        if section.id:
            attrs.append(("id", section.id))
        attrs.extend(renderer.style_attrs(ctx.scope.styles | section.styles))

        renderer.cr(ctx)
        renderer.tag(ctx, "div", attrs)
        ctx.scope.clear()


class EndDirective:
    """Close the innermost section."""

    names: ClassVar[tuple[str, ...]] = ("end",)

    def apply(self, node: Node, renderer: HtmlRenderer, ctx: RenderContext) -> None:
        ctx.scope.discard(_UNPOPPED)
        if ctx.scope.top_kind is not ScopeKind.SECTION:
            renderer.report_unbalanced(node, ctx)
            return
        renderer.tag(ctx, "/div")
        ctx.scope.pop_matching(ScopeKind.SECTION)
