"""Helpers for building document trees in code.

Each helper creates one node, links the given children under it and
returns it, so trees read top-down:

    >>> from stylemark import builder as b
    >>> doc = b.document(
    ...     b.directive("color", "red"),
    ...     b.paragraph(b.text("Hello "), b.strong(b.text("world"))),
    ... )

Parsers normally produce trees; these helpers exist for tests, examples
and programs that generate documents directly.
"""

from __future__ import annotations

from stylemark.location import SourceLocation
from stylemark.nodes import Node, NodeType


def node(node_type: NodeType, *children: Node, **fields: object) -> Node:
    """Create a node of any type and append children to it."""
    result = Node(node_type, **fields)  # type: ignore[arg-type]
    for child in children:
        result.append_child(child)
    return result


def document(*children: Node) -> Node:
    return node("document", *children)


def text(literal: str) -> Node:
    return Node("text", literal=literal)


def softbreak() -> Node:
    return Node("softbreak")


def linebreak() -> Node:
    return Node("linebreak")


def emph(*children: Node) -> Node:
    return node("emph", *children)


def strong(*children: Node) -> Node:
    return node("strong", *children)


def link(destination: str, *children: Node, title: str | None = None) -> Node:
    return node("link", *children, destination=destination, title=title)


def image(destination: str, *children: Node, title: str | None = None) -> Node:
    """Create an image; children become its alt text."""
    return node("image", *children, destination=destination, title=title)


def code(literal: str) -> Node:
    return Node("code", literal=literal)


def html_inline(literal: str) -> Node:
    return Node("html_inline", literal=literal)


def directive(name: str, args: str | None = None, *, sourcepos: SourceLocation | None = None) -> Node:
    """Create a directive node such as ``!color red`` (name="color", args="red")."""
    return Node("directive", directive=name, args=args, sourcepos=sourcepos)


def custom_inline(*children: Node, on_enter: str = "", on_exit: str = "") -> Node:
    return node("custom_inline", *children, on_enter=on_enter, on_exit=on_exit)


def paragraph(*children: Node, sourcepos: SourceLocation | None = None) -> Node:
    return node("paragraph", *children, sourcepos=sourcepos)


def heading(level: int, *children: Node, sourcepos: SourceLocation | None = None) -> Node:
    return node("heading", *children, level=level, sourcepos=sourcepos)


def code_block(literal: str, info: str | None = None, *, sourcepos: SourceLocation | None = None) -> Node:
    return Node("code_block", literal=literal, info=info, sourcepos=sourcepos)


def thematic_break(*, sourcepos: SourceLocation | None = None) -> Node:
    return Node("thematic_break", sourcepos=sourcepos)


def block_quote(*children: Node, sourcepos: SourceLocation | None = None) -> Node:
    return node("block_quote", *children, sourcepos=sourcepos)


def bullet_list(*items: Node, tight: bool = True) -> Node:
    return node("list", *items, list_type="bullet", list_tight=tight)


def ordered_list(*items: Node, start: int = 1, tight: bool = True) -> Node:
    return node("list", *items, list_type="ordered", list_start=start, list_tight=tight)


def item(*children: Node) -> Node:
    return node("item", *children)


def html_block(literal: str) -> Node:
    return Node("html_block", literal=literal)


def custom_block(*children: Node, on_enter: str = "", on_exit: str = "") -> Node:
    return node("custom_block", *children, on_enter=on_enter, on_exit=on_exit)
