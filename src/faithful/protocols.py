"""Protocols for faithful.

Defines the contract for output sinks the renderer writes into.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TextSink(Protocol):
    """Protocol for text sinks.

    ``io.StringIO``, open text files, ``sys.stdout`` and
    ``faithful.stringbuilder.StringBuilder`` all conform.

    Thread Safety:
        Sinks are owned by the caller. The renderer writes to a sink from
        the calling thread only.

    """

    def write(self, s: str, /) -> Any:
        """Write a chunk of text.

        Implementations signal failure by raising OSError or ValueError
        (e.g. a closed file); the renderer reports both as SinkError.
        """
        ...
