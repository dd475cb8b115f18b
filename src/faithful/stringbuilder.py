"""StringBuilder for O(n) string accumulation.

Default in-memory sink for the faithful renderer. Appends to a list,
joins once at the end: O(n) total vs O(n²) for repeated string
concatenation. Renders emit many short whitespace and token fragments,
so this matters for large token trees.

Thread Safety:
StringBuilder instances are local to each render call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator that also serves as a TextSink.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.write("foo")
            3
            >>> _ = sb.append("  ").append("bar")
            >>> sb.build()
            'foo  bar'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def write(self, s: str) -> int:
        """Append a string, file-style.

        Returns:
            Number of characters written
        """
        if s:
            self._parts.append(s)
        return len(s)

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)

    def clear(self) -> StringBuilder:
        """Clear all accumulated parts."""
        self._parts.clear()
        return self

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        """Return True if any parts have been appended."""
        return bool(self._parts)
