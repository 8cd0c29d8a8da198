"""Ambient style and the scope stack behind style directives.

Directives such as ``!color red`` change the *ambient style*: the
property mapping attached to the next block-level element. Constructs
that limit how far a style change reaches (``!push``/``!pop``,
``!section``/``!end`` and block quotes) save the ambient style in a
ScopeFrame tagged with their kind, and restore it when they close.

Example:
    >>> scope = StyleScope()
    >>> scope.set("color", "red")
    >>> scope.push(ScopeKind.PUSH)
    >>> scope.set("color", "blue")
    >>> scope.pop_matching(ScopeKind.PUSH)
    True
    >>> scope.styles
    {'color': 'red'}

Thread Safety:
    StyleScope is mutable and belongs to a single render call.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum


class ScopeKind(Enum):
    """Kind of construct that saved a scope frame."""

    PUSH = "push"
    SECTION = "section"
    BLOCK_QUOTE = "block_quote"


@dataclass(frozen=True, slots=True)
class ScopeFrame:
    """Saved ambient style, tagged with the construct that saved it."""

    kind: ScopeKind
    saved_styles: Mapping[str, str]


def format_styles(styles: Mapping[str, str]) -> str:
    """Serialize a style mapping as ``name:value;`` pairs in insertion order."""
    return "".join(f"{name}:{value};" for name, value in styles.items())


class StyleScope:
    """Ambient style mapping plus the stack of saved frames.

    The top of the stack is the most recently opened scope. A frame is
    removed either by the close operation matching its kind or discarded
    when an enclosing scope closes over it.
    """

    __slots__ = ("_styles", "_frames")

    def __init__(self) -> None:
        self._styles: dict[str, str] = {}
        self._frames: list[ScopeFrame] = []

    @property
    def styles(self) -> dict[str, str]:
        """Copy of the ambient style mapping."""
        return dict(self._styles)

    @property
    def depth(self) -> int:
        return len(self._frames)

    @property
    def top_kind(self) -> ScopeKind | None:
        return self._frames[-1].kind if self._frames else None

    @property
    def frames(self) -> tuple[ScopeFrame, ...]:
        return tuple(self._frames)

    def set(self, name: str, value: str) -> None:
        self._styles[name] = value

    def clear(self) -> None:
        """Clear the ambient style."""
        self._styles = {}

    def reset(self) -> None:
        """Clear the ambient style and drop every frame."""
        self._styles = {}
        self._frames = []

    def snapshot(self) -> dict[str, str]:
        """Return an independent copy of the ambient style."""
        return dict(self._styles)

    def restore(self, snapshot: Mapping[str, str]) -> None:
        """Replace the ambient style with a copy of snapshot."""
        self._styles = dict(snapshot)

    def push(self, kind: ScopeKind) -> None:
        """Save the ambient style in a new frame of the given kind."""
        self._frames.append(ScopeFrame(kind, self.snapshot()))

    def discard(self, kinds: frozenset[ScopeKind]) -> int:
        """Drop frames of the given kinds from the top without restoring.

        Returns:
            Number of frames dropped
        """
        dropped = 0
        while self._frames and self._frames[-1].kind in kinds:
            self._frames.pop()
            dropped += 1
        return dropped

    def pop_matching(
        self, kind: ScopeKind, skip_kinds: frozenset[ScopeKind] = frozenset()
    ) -> bool:
        """Close the innermost scope of the given kind.

        Frames whose kind is in skip_kinds are discarded first. If the
        frame then on top has the requested kind it is removed and the
        ambient style restored from it.

        Returns:
            False for an unbalanced close (empty stack or a different kind
            on top); the ambient style is left unchanged in that case
        """
        self.discard(skip_kinds)
        if not self._frames or self._frames[-1].kind is not kind:
            return False
        frame = self._frames.pop()
        self.restore(frame.saved_styles)
        return True
