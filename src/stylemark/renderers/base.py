"""Generic event-driven renderer.

Renderer walks a document tree and hands every traversal event to a
``visit_<type>`` method looked up by node type. Subclasses implement the
visitors and a ``create_context`` factory for their per-render state.

Thread Safety:
All per-render state lives in the context object created by each
render() call. Renderer instances hold only configuration and can be
shared across threads.

"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from stylemark.config import RenderConfig
from stylemark.errors import RenderError
from stylemark.nodes import NODE_TYPES, Node
from stylemark.stringbuilder import StringBuilder
from stylemark.walker import walk


@dataclass(slots=True)
class OutputContext:
    """Per-render output state shared by all renderers."""

    sb: StringBuilder = field(default_factory=StringBuilder)


C = TypeVar("C", bound=OutputContext)


class Renderer(Generic[C]):
    """Base renderer: tree walk, visitor dispatch and text output helpers."""

    __slots__ = ("_config", "_visitors")

    def __init__(self, config: RenderConfig) -> None:
        self._config = config
        self._visitors: dict[str, Callable[[Node, bool, C], None]] = {}
        for node_type in NODE_TYPES:
            visitor = getattr(self, f"visit_{node_type}", None)
            if visitor is not None:
                self._visitors[node_type] = visitor

    @property
    def config(self) -> RenderConfig:
        return self._config

    def create_context(self) -> C:
        raise NotImplementedError

    def finish(self, ctx: C) -> None:
        """Hook called after the walk completes."""

    def render(self, node: Node) -> str:
        """Render a document tree to a string.

        Args:
            node: Tree root; must be a document node

        Returns:
            Rendered output

        Raises:
            RenderError: If node is not a document or contains a node type
                this renderer has no visitor for
        """
        if node.type != "document":
            raise RenderError(f"cannot render a {node.type} node as a document root")

        ctx = self.create_context()
        for event in walk(node):
            self.dispatch(event.node, event.entering, ctx)
        self.finish(ctx)
        return ctx.sb.build()

    def dispatch(self, node: Node, entering: bool, ctx: C) -> None:
        visitor = self._visitors.get(node.type)
        if visitor is None:
            raise RenderError(f"{type(self).__name__} has no visitor for {node.type} nodes")
        visitor(node, entering, ctx)

    # =========================================================================
    # Output helpers
    # =========================================================================

    def esc(self, s: str) -> str:
        return self._config.esc(s)

    def lit(self, ctx: C, s: str) -> None:
        """Write s unescaped."""
        ctx.sb.append(s)

    def out(self, ctx: C, s: str | None) -> None:
        """Write s escaped."""
        if s:
            ctx.sb.append(self.esc(s))

    def cr(self, ctx: C) -> None:
        """Start a new line unless the output already ends with one."""
        if ctx.sb.last_char != "\n":
            ctx.sb.append("\n")
