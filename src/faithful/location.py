"""Source positions and spans recorded by the upstream tokenizer.

Provides Position and Span, the coordinates every token carries.
The renderer compares and subtracts these to reproduce source layout.

Thread Safety:
Position and Span are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A (line, column) coordinate in source text.

    Lines are 1-indexed and columns 0-indexed unless the tokenizer says
    otherwise (see ``RenderConfig.column_base``). Ordering follows reading
    order: line first, then column.

    Examples:
            >>> Position(1, 4) < Position(2, 0)
            True
            >>> str(Position(3, 7))
            '3:7'

    """

    line: int
    column: int

    def __str__(self) -> str:
        """Format as "line:column" for error messages."""
        return f"{self.line}:{self.column}"


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open source extent of a token or delimiter.

    Attributes:
        start: Position of the first character
        end: Position just past the last character

    """

    start: Position
    end: Position

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"

    def to(self, other: Span) -> Span:
        """Create a span from this span's start to other's end."""
        return Span(self.start, other.end)

    @classmethod
    def from_coords(
        cls, start_line: int, start_column: int, end_line: int, end_column: int
    ) -> Span:
        """Build a span from raw coordinates.

        Example:
            >>> Span.from_coords(1, 0, 1, 3)
            Span(start=Position(line=1, column=0), end=Position(line=1, column=3))
        """
        return cls(Position(start_line, start_column), Position(end_line, end_column))
