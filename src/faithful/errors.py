"""Exception classes for faithful.

Provides standardized exceptions for error handling throughout faithful.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from faithful.location import Position


class FaithfulError(Exception):
    """Base exception for all faithful errors.

    Subclass this for specific error categories.
    """

    pass


class InconsistentSpanError(FaithfulError):
    """Reconciliation was asked to move the cursor backward.

    Raised when a token starts before the end of the previously emitted
    token (overlapping or out-of-order spans from the tokenizer), or when
    a token on a new line starts left of the first column.
    """

    def __init__(self, previous: Position, target: Position) -> None:
        """Initialize with both offending positions.

        Args:
            previous: Cursor position after the last emitted text
            target: Start position of the token being rendered
        """
        self.previous = previous
        self.target = target
        super().__init__(f"Inconsistent span: cannot move from {previous} to {target}")


class SinkError(FaithfulError):
    """The output sink refused or failed a write.

    The original exception is chained as ``__cause__``.
    """

    pass


class RenderError(FaithfulError):
    """Error during rendering not tied to a single span.

    Raised when the token tree is nested deeper than the configured
    or interpreter limit allows.
    """

    pass
