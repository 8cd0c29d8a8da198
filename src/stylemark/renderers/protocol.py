"""ASTRenderer protocol — stable interface for tree renderers.

Any renderer that implements ``render(node) -> str`` conforms to this protocol.
The built-in ``HtmlRenderer`` is the reference implementation.

Example:
    from stylemark.renderers.protocol import ASTRenderer

    def render_page(renderer: ASTRenderer, doc: Node) -> str:
        return renderer.render(doc)

"""

from typing import Protocol

from stylemark.nodes import Node


class ASTRenderer(Protocol):
    """Protocol for tree renderers."""

    def render(self, node: Node) -> str:
        """Render a document tree to a string.

        Args:
            node: The document node to render.

        Returns:
            Rendered string output.

        """
        ...
