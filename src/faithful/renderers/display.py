"""Lazily rendered, layout-preserving view of a token stream.

``faithful.render()`` returns a FaithfulDisplay. Nothing is rendered until
the object is converted to text, and every conversion renders from the
same materialized stream, so repeated conversions are identical.

Example:
    >>> display = render(stream)
    >>> str(display) == f"{display}"
    True

"""

from __future__ import annotations

from collections.abc import Iterable

from faithful.config import RenderConfig
from faithful.protocols import TextSink
from faithful.renderers.faithful import FaithfulRenderer
from faithful.stringbuilder import StringBuilder
from faithful.tokens import TokenStream, TokenTree


class FaithfulDisplay:
    """Displayable wrapper around a token stream.

    The stream is materialized once, on construction; one-shot iterators
    are therefore safe to pass. When no config is given, the config active
    at conversion time is used.

    """

    __slots__ = ("_stream", "_config")

    def __init__(
        self, stream: Iterable[TokenTree], config: RenderConfig | None = None
    ) -> None:
        self._stream = TokenStream.of(stream)
        self._config = config

    @property
    def stream(self) -> TokenStream:
        """The stream this display renders."""
        return self._stream

    def write_to(self, sink: TextSink) -> None:
        """Render into an arbitrary sink."""
        FaithfulRenderer(sink, self._config).render(self._stream)

    def __str__(self) -> str:
        sb = StringBuilder()
        self.write_to(sb)
        return sb.build()

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def __repr__(self) -> str:
        return f"FaithfulDisplay({self._stream!r})"
