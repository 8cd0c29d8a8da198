"""Exception classes for Stylemark.

Rendering itself never raises for document content: unbalanced directives
are reported inline and collected as diagnostics. Exceptions here signal
misuse of the node model or the renderer API.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stylemark.location import SourceLocation


class StylemarkError(Exception):
    """Base exception for all Stylemark errors.

    Subclass this for specific error categories.
    """

    pass


class NodeError(StylemarkError):
    """Invalid document tree construction.

    Raised for unknown node types, children appended to leaf nodes, and
    nodes that are linked into a second parent.
    """

    def __init__(self, node_type: str, message: str) -> None:
        """Initialize node error.

        Args:
            node_type: Type tag of the offending node
            message: Description of the problem
        """
        self.node_type = node_type
        super().__init__(f"{node_type} node: {message}")


class RenderError(StylemarkError):
    """Error during HTML rendering.

    Raised when the renderer is handed a tree it cannot walk, such as a
    root that is not a document or a node type without a visitor.
    """

    pass


@dataclass(frozen=True, slots=True)
class DirectiveDiagnostic:
    """A recovered directive problem found during rendering.

    Attributes:
        directive: Directive name (e.g. "pop", "end")
        message: Human-readable explanation
        location: Source range of the directive node, if known
    """

    directive: str
    message: str
    location: SourceLocation | None = None

    def __str__(self) -> str:
        where = f"{self.location}: " if self.location else ""
        return f"{where}!{self.directive}: {self.message}"
