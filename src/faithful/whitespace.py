"""Whitespace reconciliation between two source positions.

Given where the output currently is and where the next token starts,
computes the newlines and spaces that move the output there:

- same line: ``target.column - previous.column`` spaces
- otherwise: one newline per line advanced, then indentation from the
  first column up to ``target.column``

The direction is checked before any subtraction. A backward move means
the tokenizer produced overlapping or out-of-order spans and raises
InconsistentSpanError instead of producing garbage.

"""

from __future__ import annotations

from faithful.config import RenderConfig, resolve_config
from faithful.errors import InconsistentSpanError
from faithful.location import Position
from faithful.protocols import TextSink


def whitespace_between(
    previous: Position,
    target: Position,
    *,
    newline: str = "\n",
    column_base: int = 0,
) -> str:
    """Compute the filler that moves the cursor from previous to target.

    Args:
        previous: Current cursor position
        target: Start position of the next token or delimiter
        newline: Line terminator to emit per line advanced
        column_base: Index of the first column

    Returns:
        The whitespace string (possibly empty)

    Raises:
        InconsistentSpanError: If target precedes previous in reading order,
            or a new line would need indentation left of column_base

    Example:
        >>> whitespace_between(Position(1, 3), Position(1, 5))
        '  '
        >>> whitespace_between(Position(1, 3), Position(2, 2))
        '\\n  '
    """
    if target < previous:
        raise InconsistentSpanError(previous, target)

    if target.line == previous.line:
        return " " * (target.column - previous.column)

    indent = target.column - column_base
    if indent < 0:
        raise InconsistentSpanError(previous, target)
    return newline * (target.line - previous.line) + " " * indent


def reconcile(
    sink: TextSink,
    previous: Position,
    target: Position,
    *,
    config: RenderConfig | None = None,
) -> None:
    """Write the whitespace that moves the cursor from previous to target.

    Nothing is written when the positions coincide. Sink exceptions
    propagate unchanged; the renderer wraps them in SinkError.

    Raises:
        InconsistentSpanError: See whitespace_between()
    """
    cfg = resolve_config(config)
    filler = whitespace_between(
        previous, target, newline=cfg.newline, column_base=cfg.column_base
    )
    if filler:
        sink.write(filler)
