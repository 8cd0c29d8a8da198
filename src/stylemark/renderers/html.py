"""HTML renderer with directive-driven styling.

Renders a document tree to HTML in a single pass. Besides the usual
CommonMark elements, the renderer interprets style directives: the
ambient style they build up is attached as a ``style`` attribute to the
next paragraph, heading, list, block quote or code block.

Thread Safety:
All per-render state is encapsulated in RenderContext, created fresh for each
render() call. Multiple threads can safely share a single HtmlRenderer instance
and call render() concurrently without synchronization.

Safe Mode:
With ``safe=True`` link and image destinations using script-capable
schemes are dropped (see stylemark.sanitize) and raw HTML is replaced
by a placeholder comment.
"""

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from stylemark.config import RenderConfig, get_render_config
from stylemark.directives.registry import DirectiveRegistry, create_default_registry
from stylemark.errors import DirectiveDiagnostic
from stylemark.nodes import STYLED_BLOCK_TYPES, Node
from stylemark.renderers.base import OutputContext, Renderer
from stylemark.sanitize import is_potentially_unsafe
from stylemark.scopes import ScopeKind, StyleScope, format_styles
from stylemark.stringbuilder import NULL_BUILDER, StringBuilder
from stylemark.utils.logger import get_logger, log_diagnostic

logger = get_logger(__name__)

RAW_HTML_PLACEHOLDER = "<!-- raw HTML omitted -->"

# Frames a closing block quote may discard on its way to its own frame
_INSIDE_QUOTE = frozenset((ScopeKind.PUSH, ScopeKind.SECTION))


@dataclass(slots=True)
class RenderContext(OutputContext):
    """Per-render mutable state.

    Created fresh for each render() call, ensuring thread safety when
    sharing HtmlRenderer instances across threads.

    Attributes:
        sb: Output buffer
        scope: Ambient style and scope stack
        disable_tags: Nesting depth of image alt-text collection; tags
            are discarded while positive
        diagnostics: Unbalanced directives found so far
    """

    scope: StyleScope = field(default_factory=StyleScope)
    disable_tags: int = 0
    diagnostics: list[DirectiveDiagnostic] = field(default_factory=list)

    @property
    def tag_sink(self) -> StringBuilder:
        """Where tags go: the output buffer, or nowhere inside alt text."""
        return NULL_BUILDER if self.disable_tags > 0 else self.sb


class HtmlRenderer(Renderer[RenderContext]):
    """Render a document tree to HTML.

    Usage:
        >>> from stylemark import builder as b
        >>> doc = b.document(b.directive("color", "red"), b.paragraph(b.text("Hi")))
        >>> HtmlRenderer().render(doc)
        '<p style="color:red;">Hi</p>\\n'

    Thread Safety:
        Each render() call creates an independent RenderContext, ensuring
        no shared mutable state between concurrent renders.
    """

    __slots__ = ("_directive_registry", "_last_context")

    def __init__(
        self,
        config: RenderConfig | None = None,
        *,
        directive_registry: DirectiveRegistry | None = None,
        **overrides: Any,
    ) -> None:
        """Initialize renderer.

        Args:
            config: Render options (defaults to the ambient config)
            directive_registry: Directive handlers (defaults to the builtins)
            **overrides: Individual RenderConfig fields to override,
                e.g. ``safe=True``

        Raises:
            TypeError: If an override is not a RenderConfig field
        """
        config = config or get_render_config()
        if overrides:
            config = dataclasses.replace(config, **overrides)
        super().__init__(config)
        self._directive_registry = directive_registry or create_default_registry()
        self._last_context: RenderContext | None = None

    @property
    def directive_registry(self) -> DirectiveRegistry:
        return self._directive_registry

    def create_context(self) -> RenderContext:
        return RenderContext()

    def finish(self, ctx: RenderContext) -> None:
        if ctx.scope.depth:
            logger.debug("%d scope(s) still open at end of document", ctx.scope.depth)
        # Note: not thread-safe for get_diagnostics()
        self._last_context = ctx

    def get_diagnostics(self) -> list[DirectiveDiagnostic]:
        """Get the directive diagnostics collected during the last render.

        Returns:
            Diagnostics from the most recent render() call; empty if
            render() hasn't been called
        """
        if self._last_context is None:
            return []
        return self._last_context.diagnostics.copy()

    # =========================================================================
    # Tags and attributes
    # =========================================================================

    def tag(
        self,
        ctx: RenderContext,
        name: str,
        attrs: list[tuple[str, str]] | None = None,
        selfclosing: bool = False,
    ) -> None:
        """Write a start, end (``"/name"``) or self-closing tag.

        Attribute values must already be escaped.
        """
        sb = ctx.tag_sink
        sb.append("<").append(name)
        for attr_name, value in attrs or ():
            sb.append(f' {attr_name}="{value}"')
        if selfclosing:
            sb.append(" /")
        sb.append(">")

    def style_attrs(self, styles: Mapping[str, str]) -> list[tuple[str, str]]:
        """Style attribute for a style mapping, empty when there is nothing to set."""
        serialized = format_styles(styles)
        return [("style", self.esc(serialized))] if serialized else []

    def attrs(self, node: Node, ctx: RenderContext) -> list[tuple[str, str]]:
        """Common attributes: source position and, for styled blocks, ambient style."""
        att: list[tuple[str, str]] = []
        if self._config.sourcepos and node.sourcepos is not None:
            att.append(("data-sourcepos", node.sourcepos.sourcepos()))
        if node.type in STYLED_BLOCK_TYPES:
            att.extend(self.style_attrs(ctx.scope.styles))
        return att

    def report_unbalanced(self, node: Node, ctx: RenderContext) -> None:
        """Insert a visible error block for a directive with nothing to close."""
        name = node.directive or ""
        message = f"unbalanced !{name} directive"
        self.tag(ctx, "div", [("class", "error")])
        self.out(ctx, f"error: unbalanced <code>!{name}</code> directive")
        self.tag(ctx, "/div")
        diagnostic = DirectiveDiagnostic(name, message, node.sourcepos)
        ctx.diagnostics.append(diagnostic)
        log_diagnostic(logger, diagnostic)

    # =========================================================================
    # Document and directives
    # =========================================================================

    def visit_document(self, node: Node, entering: bool, ctx: RenderContext) -> None:
        if entering:
            ctx.scope.reset()

    def visit_directive(self, node: Node, entering: bool, ctx: RenderContext) -> None:
        name = node.directive or ""
        handler = self._directive_registry.get(name)
        if handler is None:
            logger.debug("Ignoring unknown directive %r", name)
            return
        handler.apply(node, self, ctx)

    # =========================================================================
    # Inline nodes
    # =========================================================================

    def visit_text(self, node: Node, entering: bool, ctx: RenderContext) -> None:
        self.out(ctx, node.literal)

    def visit_softbreak(self, node: Node, entering: bool, ctx: RenderContext) -> None:
        self.lit(ctx, self._config.softbreak)

    def visit_linebreak(self, node: Node, entering: bool, ctx: RenderContext) -> None:
        self.tag(ctx, "br", [], selfclosing=True)
        self.cr(ctx)

    def visit_link(self, node: Node, entering: bool, ctx: RenderContext) -> None:
        if not entering:
            self.tag(ctx, "/a")
            return
        attrs = self.attrs(node, ctx)
        if not (self._config.safe and is_potentially_unsafe(node.destination)):
            attrs.append(("href", self.esc(node.destination or "")))
        if node.title:
            attrs.append(("title", self.esc(node.title)))
        self.tag(ctx, "a", attrs)

    def visit_image(self, node: Node, entering: bool, ctx: RenderContext) -> None:
        # Children are walked with tags disabled, leaving only their
        # escaped text between the alt quotes
        if entering:
            if ctx.disable_tags == 0:
                if self._config.safe and is_potentially_unsafe(node.destination):
                    self.lit(ctx, '<img src="" alt="')
                else:
                    self.lit(ctx, f'<img src="{self.esc(node.destination or "")}" alt="')
            ctx.disable_tags += 1
        else:
            ctx.disable_tags -= 1
            if ctx.disable_tags == 0:
                if node.title:
                    self.lit(ctx, f'" title="{self.esc(node.title)}')
                self.lit(ctx, '" />')

    def visit_emph(self, node: Node, entering: bool, ctx: RenderContext) -> None:
        self.tag(ctx, "em" if entering else "/em")

    def visit_strong(self, node: Node, entering: bool, ctx: RenderContext) -> None:
        self.tag(ctx, "strong" if entering else "/strong")

    def visit_code(self, node: Node, entering: bool, ctx: RenderContext) -> None:
        self.tag(ctx, "code")
        self.out(ctx, node.literal)
        self.tag(ctx, "/code")

    def visit_html_inline(self, node: Node, entering: bool, ctx: RenderContext) -> None:
        self.lit(ctx, RAW_HTML_PLACEHOLDER if self._config.safe else node.literal or "")

    def visit_custom_inline(self, node: Node, entering: bool, ctx: RenderContext) -> None:
        if entering and node.on_enter:
            self.lit(ctx, node.on_enter)
        elif not entering and node.on_exit:
            self.lit(ctx, node.on_exit)

    # =========================================================================
    # Block nodes
    # =========================================================================

    def visit_paragraph(self, node: Node, entering: bool, ctx: RenderContext) -> None:
        # Tight list items show their paragraph content without <p>
        grandparent = node.parent.parent if node.parent is not None else None
        if grandparent is not None and grandparent.type == "list" and grandparent.list_tight:
            return
        if entering:
            self.cr(ctx)
            self.tag(ctx, "p", self.attrs(node, ctx))
        else:
            self.tag(ctx, "/p")
            self.cr(ctx)

    def visit_heading(self, node: Node, entering: bool, ctx: RenderContext) -> None:
        tagname = f"h{min(max(node.level or 1, 1), 6)}"
        if entering:
            self.cr(ctx)
            self.tag(ctx, tagname, self.attrs(node, ctx))
        else:
            self.tag(ctx, "/" + tagname)
            self.cr(ctx)

    def visit_code_block(self, node: Node, entering: bool, ctx: RenderContext) -> None:
        attrs = self.attrs(node, ctx)
        info_words = node.info.split() if node.info else []
        if info_words:
            cls = self.esc(info_words[0])
            if not cls.startswith("language-"):
                cls = "language-" + cls
            attrs.append(("class", cls))
        self.cr(ctx)
        self.tag(ctx, "pre")
        self.tag(ctx, "code", attrs)
        self.out(ctx, node.literal)
        self.tag(ctx, "/code")
        self.tag(ctx, "/pre")
        self.cr(ctx)

    def visit_thematic_break(self, node: Node, entering: bool, ctx: RenderContext) -> None:
        self.cr(ctx)
        self.tag(ctx, "hr", self.attrs(node, ctx), selfclosing=True)
        self.cr(ctx)

    def visit_block_quote(self, node: Node, entering: bool, ctx: RenderContext) -> None:
        if entering:
            # The quote itself takes the outer style; its content starts unstyled
            attrs = self.attrs(node, ctx)
            ctx.scope.push(ScopeKind.BLOCK_QUOTE)
            ctx.scope.clear()
            self.cr(ctx)
            self.tag(ctx, "blockquote", attrs)
            self.cr(ctx)
        else:
            if not ctx.scope.pop_matching(ScopeKind.BLOCK_QUOTE, _INSIDE_QUOTE):
                logger.debug("Block quote closed without its scope frame")
            self.cr(ctx)
            self.tag(ctx, "/blockquote")
            self.cr(ctx)

    def visit_list(self, node: Node, entering: bool, ctx: RenderContext) -> None:
        tagname = "ul" if node.list_type == "bullet" else "ol"
        if entering:
            attrs = self.attrs(node, ctx)
            start = node.list_start
            if tagname == "ol" and start is not None and start != 1:
                attrs.append(("start", str(start)))
            self.cr(ctx)
            self.tag(ctx, tagname, attrs)
            self.cr(ctx)
        else:
            self.cr(ctx)
            self.tag(ctx, "/" + tagname)
            self.cr(ctx)

    def visit_item(self, node: Node, entering: bool, ctx: RenderContext) -> None:
        if entering:
            self.tag(ctx, "li", self.attrs(node, ctx))
        else:
            self.tag(ctx, "/li")
            self.cr(ctx)

    def visit_html_block(self, node: Node, entering: bool, ctx: RenderContext) -> None:
        self.cr(ctx)
        self.lit(ctx, RAW_HTML_PLACEHOLDER if self._config.safe else node.literal or "")
        self.cr(ctx)

    def visit_custom_block(self, node: Node, entering: bool, ctx: RenderContext) -> None:
        self.cr(ctx)
        if entering and node.on_enter:
            self.lit(ctx, node.on_enter)
        elif not entering and node.on_exit:
            self.lit(ctx, node.on_exit)
        self.cr(ctx)
