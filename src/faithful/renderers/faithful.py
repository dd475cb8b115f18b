"""Layout-preserving renderer for token trees.

Walks a token tree while tracking a cursor: the source position the
output has reached. Before each token or delimiter is written, the
whitespace needed to move the cursor to the token's recorded start is
reconciled, so the output reproduces the original indentation, spacing
and blank lines instead of a canonical formatting.

Example:
    >>> from faithful.stringbuilder import StringBuilder
    >>> sb = StringBuilder()
    >>> end = FaithfulRenderer(sb).render(stream)
    >>> sb.build()
    'foo  bar'

Thread Safety:
Renderer instances hold the per-call cursor depth and the caller's sink.
Create one per render call. Token trees are read-only and may be shared.

"""

from __future__ import annotations

from collections.abc import Iterable

from faithful.config import RenderConfig, resolve_config
from faithful.errors import RenderError, SinkError
from faithful.location import Position
from faithful.protocols import TextSink
from faithful.tokens import Group, Ident, Literal, Punct, TokenStream, TokenTree
from faithful.utils.logger import get_logger
from faithful.whitespace import reconcile

logger = get_logger(__name__)


class _CheckedSink:
    """Sink wrapper reporting write failures as SinkError."""

    __slots__ = ("_sink",)

    def __init__(self, sink: TextSink) -> None:
        self._sink = sink

    def write(self, s: str) -> None:
        try:
            self._sink.write(s)
        except (OSError, ValueError) as exc:
            logger.debug("Sink %r rejected a write", self._sink, exc_info=True)
            raise SinkError(f"Sink write failed: {exc}") from exc


class FaithfulRenderer:
    """Render token trees into a sink, preserving source layout.

    Dispatches on token kind with a single match statement. Leaves emit
    their text; groups emit their delimiters around a recursive render of
    their stream.

    """

    __slots__ = ("_sink", "_config", "_depth")

    def __init__(self, sink: TextSink, config: RenderConfig | None = None) -> None:
        self._sink = _CheckedSink(sink)
        self._config = resolve_config(config)
        self._depth = 0

    def render(self, stream: Iterable[TokenTree]) -> Position | None:
        """Render a whole stream, seeding the cursor at its first token.

        The first token is written without leading whitespace.

        Returns:
            Final cursor position, or None for an empty stream
        """
        stream = TokenStream.of(stream)
        if not stream:
            return None
        return self.render_stream(stream, stream[0].span.start)

    def render_stream(self, stream: Iterable[TokenTree], cursor: Position) -> Position:
        """Render a stream starting from an explicit cursor.

        Used to embed a sub-render inside a larger document: whitespace
        before the first token is reconciled against ``cursor``.

        Returns:
            Cursor after the last token (``cursor`` itself for an empty stream)

        Raises:
            InconsistentSpanError: On a backward move
            SinkError: If the sink fails a write
            RenderError: If the tree is nested too deeply
        """
        try:
            return self._render_stream(stream, cursor)
        except RecursionError as exc:
            logger.debug("Token tree exceeded the interpreter recursion limit")
            raise RenderError("Token tree is nested too deeply to render") from exc

    def _render_stream(self, stream: Iterable[TokenTree], cursor: Position) -> Position:
        for token in stream:
            cursor = self._render_token(token, cursor)
        return cursor

    def _render_token(self, token: TokenTree, cursor: Position) -> Position:
        match token:
            case Ident(text=text, span=span) | Literal(text=text, span=span):
                return self._render_leaf(text, span.start, span.end, cursor)
            case Punct(char=char, span=span):
                return self._render_leaf(char, span.start, span.end, cursor)
            case Group():
                return self._render_group(token, cursor)
            case _:
                raise TypeError(f"Cannot render {type(token).__name__!r} as a token tree")

    def _render_leaf(
        self, text: str, start: Position, end: Position, cursor: Position
    ) -> Position:
        reconcile(self._sink, cursor, start, config=self._config)
        self._sink.write(text)
        return end

    def _render_group(self, group: Group, cursor: Position) -> Position:
        max_depth = self._config.max_depth
        if max_depth is not None and self._depth >= max_depth:
            logger.debug("Group at %s exceeds max_depth=%d", group.span_open.start, max_depth)
            raise RenderError(
                f"Group at {group.span_open.start} exceeds max_depth={max_depth}"
            )

        delimiter = group.delimiter
        reconcile(self._sink, cursor, group.span_open.start, config=self._config)
        if delimiter.open:
            self._sink.write(delimiter.open)

        self._depth += 1
        try:
            inner = self._render_stream(group.stream, group.span_open.end)
        finally:
            self._depth -= 1

        reconcile(self._sink, inner, group.span_close.start, config=self._config)
        if delimiter.close:
            self._sink.write(delimiter.close)
        return group.span_close.end
