"""Source position ranges attached to tree nodes.

The external parser records where each block started and ended. The HTML
renderer turns that range into a ``data-sourcepos`` attribute when the
``sourcepos`` option is enabled.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source range of a node.

    All positions are 1-indexed (lineno and col_offset start at 1).

    Attributes:
        lineno: Starting line number
        col_offset: Starting column
        end_lineno: Ending line number (defaults to the start line)
        end_col_offset: Ending column (defaults to the start column)

    Examples:
            >>> loc = SourceLocation(1, 1, 2, 5)
            >>> loc.sourcepos()
            '1:1-2:5'

    """

    lineno: int
    col_offset: int
    end_lineno: int | None = None
    end_col_offset: int | None = None

    def __str__(self) -> str:
        return f"{self.lineno}:{self.col_offset}"

    def sourcepos(self) -> str:
        """Format the range as ``start_line:start_col-end_line:end_col``."""
        end_lineno = self.lineno if self.end_lineno is None else self.end_lineno
        end_col = self.col_offset if self.end_col_offset is None else self.end_col_offset
        return f"{self.lineno}:{self.col_offset}-{end_lineno}:{end_col}"

    def span_to(self, end: SourceLocation) -> SourceLocation:
        """Create a new location spanning from this location to end."""
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col_offset,
            end_lineno=end.end_lineno or end.lineno,
            end_col_offset=end.end_col_offset or end.col_offset,
        )

    @classmethod
    def from_pairs(
        cls, start: tuple[int, int], end: tuple[int, int]
    ) -> SourceLocation:
        """Build a location from ``(line, col)`` pairs as parsers usually report them."""
        return cls(start[0], start[1], end[0], end[1])
