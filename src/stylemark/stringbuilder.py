"""StringBuilder for O(n) string accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation. The builder also remembers the last
character written so block-level output can decide whether a line break
is needed before the next tag.

NullBuilder is the discarding counterpart: the HTML renderer points its
tag emitter at one while image alt text is being collected, so only the
escaped text of the image's children reaches the real output.

Thread Safety:
StringBuilder instances are local to each render() call.
The shared NULL_BUILDER keeps no state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> _ = sb.append("<h1>").append("Hello").append("</h1>")
            >>> sb.build()
            '<h1>Hello</h1>'
            >>> sb.last_char
            '>'

    """

    __slots__ = ("_parts", "_last")

    def __init__(self) -> None:
        """Initialize empty StringBuilder.

        An empty builder reports a newline as its last character so that
        output never starts with a blank line.
        """
        self._parts: list[str] = []
        self._last = "\n"

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
            self._last = s[-1]
        return self

    @property
    def last_char(self) -> str:
        """Last character written, or newline for an empty builder."""
        return self._last

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)

    def __bool__(self) -> bool:
        """Return True if any parts have been appended."""
        return bool(self._parts)


class NullBuilder(StringBuilder):
    """StringBuilder that drops everything appended to it."""

    __slots__ = ()

    def append(self, s: str) -> StringBuilder:
        return self


NULL_BUILDER = NullBuilder()
