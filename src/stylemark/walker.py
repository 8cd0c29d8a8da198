"""Depth-first traversal of a document tree.

The walker produces one event per leaf node and two events per container
node (entering, then leaving after all children). Renderers consume
these events to emit start and end tags.

Example:

    for event in walk(doc):
        if event.entering and event.node.type == "text":
            print(event.node.literal)

The walk is iterative, so deeply nested trees do not hit the
interpreter's recursion limit.

Thread Safety:
    A NodeWalker holds cursor state and must not be shared across
    threads. walk() creates a fresh walker per call.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from stylemark.nodes import Node


@dataclass(frozen=True, slots=True)
class WalkEvent:
    """A single traversal step."""

    node: Node
    entering: bool


class NodeWalker:
    """Resumable depth-first cursor over a tree.

    Usage:
        >>> walker = NodeWalker(doc)
        >>> while (event := walker.next()) is not None:
        ...     handle(event.node, event.entering)

    """

    __slots__ = ("_root", "_stack", "_done")

    def __init__(self, root: Node) -> None:
        self._root = root
        self._stack: list[tuple[Node, bool]] = [(root, True)]
        self._done = False

    @property
    def root(self) -> Node:
        return self._root

    def next(self) -> WalkEvent | None:
        """Return the next event, or None once the walk is finished."""
        if not self._stack:
            self._done = True
            return None

        node, entering = self._stack.pop()
        if entering and node.is_container:
            self._stack.append((node, False))
            # Reversed so the first child is popped first
            for child in reversed(node.children):
                self._stack.append((child, True))
        return WalkEvent(node, entering)

    def resume_at(self, node: Node, entering: bool) -> None:
        """Restart the walk from node.

        Only nodes inside the root's subtree are visited; once the walk
        climbs back to the root it stops.
        """
        stack: list[tuple[Node, bool]] = [(node, entering)]
        current = node
        while current is not self._root and current.parent is not None:
            parent = current.parent
            index = parent.children.index(current)
            # Pending events are pushed outermost first so they pop last
            pending = [(parent, False)]
            pending.extend((sibling, True) for sibling in reversed(parent.children[index + 1 :]))
            stack[:0] = pending
            current = parent
        self._stack = stack
        self._done = False

    def __iter__(self) -> Iterator[WalkEvent]:
        while (event := self.next()) is not None:
            yield event


def walk(root: Node) -> Iterator[WalkEvent]:
    """Yield traversal events for root and its descendants in document order."""
    return iter(NodeWalker(root))
