"""Document tree nodes consumed by the Stylemark renderers.

A tree is made of ``Node`` objects tagged with a type from a fixed
vocabulary. Nodes hold a parent back-reference and an ordered list of
children, plus the fields specific to their type:

Node types
├── block containers: document, block_quote, list, item, paragraph,
│   heading, custom_block
├── block leaves: code_block, thematic_break, html_block
├── inline containers: emph, strong, link, image, custom_inline
├── inline leaves: text, softbreak, linebreak, code, html_inline
└── directive (leaf): an inline authoring command such as ``!color red``

Trees are normally produced by a parser; ``stylemark.builder`` offers
helpers for building them by hand. Renderers only read nodes.

Thread Safety:
Nodes are mutable while a tree is being built. Once built, a tree may be
rendered from several threads at once because renderers never write to it.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, TypeAlias

from stylemark.errors import NodeError
from stylemark.location import SourceLocation

NodeType: TypeAlias = Literal[
    "document",
    "text",
    "softbreak",
    "linebreak",
    "link",
    "image",
    "emph",
    "strong",
    "paragraph",
    "heading",
    "directive",
    "code",
    "code_block",
    "thematic_break",
    "block_quote",
    "list",
    "item",
    "html_inline",
    "html_block",
    "custom_inline",
    "custom_block",
]

NODE_TYPES: frozenset[str] = frozenset(
    (
        "document",
        "text",
        "softbreak",
        "linebreak",
        "link",
        "image",
        "emph",
        "strong",
        "paragraph",
        "heading",
        "directive",
        "code",
        "code_block",
        "thematic_break",
        "block_quote",
        "list",
        "item",
        "html_inline",
        "html_block",
        "custom_inline",
        "custom_block",
    )
)

# Visited twice by the walker (entering and leaving)
CONTAINER_TYPES: frozenset[str] = frozenset(
    (
        "document",
        "block_quote",
        "list",
        "item",
        "paragraph",
        "heading",
        "emph",
        "strong",
        "link",
        "image",
        "custom_inline",
        "custom_block",
    )
)

# Receive the ambient style attribute
STYLED_BLOCK_TYPES: frozenset[str] = frozenset(
    ("paragraph", "code_block", "block_quote", "list", "heading")
)

ListType: TypeAlias = Literal["bullet", "ordered"]


@dataclass(slots=True, eq=False, repr=False)
class Node:
    """A node in the document tree.

    Attributes:
        type: Node type tag (one of NODE_TYPES)
        literal: Literal text (text, code, code_block, html_*)
        destination: Link or image URL
        title: Link or image title
        level: Heading level (1-6)
        list_type: "bullet" or "ordered"
        list_start: First number of an ordered list
        list_tight: True when list items are not separated by blank lines
        directive: Directive name (e.g. "color", "push", "section")
        args: Raw directive argument string
        on_enter: Literal output for custom nodes when entering
        on_exit: Literal output for custom nodes when leaving
        info: Code block info string
        sourcepos: Source range of the node
        parent: Parent node (set by append_child)
        children: Child nodes in document order

    """

    type: NodeType
    literal: str | None = None
    destination: str | None = None
    title: str | None = None
    level: int | None = None
    list_type: ListType | None = None
    list_start: int | None = None
    list_tight: bool = False
    directive: str | None = None
    args: str | None = None
    on_enter: str | None = None
    on_exit: str | None = None
    info: str | None = None
    sourcepos: SourceLocation | None = None
    parent: Node | None = field(default=None, init=False)
    children: list[Node] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        if self.type not in NODE_TYPES:
            raise NodeError(str(self.type), "unknown node type")

    def __repr__(self) -> str:
        return f"Node({self.type!r}, children={len(self.children)})"

    @property
    def is_container(self) -> bool:
        """True if the walker visits this node entering and leaving."""
        return self.type in CONTAINER_TYPES

    @property
    def first_child(self) -> Node | None:
        return self.children[0] if self.children else None

    @property
    def last_child(self) -> Node | None:
        return self.children[-1] if self.children else None

    def append_child(self, child: Node) -> Node:
        """Link child as the last child of this node.

        Returns:
            The child, for chaining in builders

        Raises:
            NodeError: If this node cannot hold children or child already
                has a parent
        """
        if not self.is_container:
            raise NodeError(self.type, "leaf nodes cannot have children")
        if child.parent is not None:
            raise NodeError(child.type, "node already belongs to a tree")
        child.parent = self
        self.children.append(child)
        return child
