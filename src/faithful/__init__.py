"""
faithful — Layout-Preserving Token Tree Rendering

Renders a token tree back into text, reproducing the original layout
(indentation, inter-token spacing, blank lines) from the spans the
tokenizer recorded, instead of re-formatting it. Whitespace-sensitive
grammars and custom downstream parsers get the source back as written.

Quick Start:
    >>> from faithful import Ident, Span, TokenStream, render
    >>> stream = TokenStream.of([
    ...     Ident("foo", Span.from_coords(1, 0, 1, 3)),
    ...     Ident("bar", Span.from_coords(2, 2, 2, 5)),
    ... ])
    >>> print(render(stream))
    foo
      bar

    >>> # Or write straight into a sink
    >>> import io
    >>> out = io.StringIO()
    >>> render_into(stream, out)

Installation:
    pip install faithful             # zero runtime dependencies
"""

from collections.abc import Iterable

from faithful.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from faithful.errors import FaithfulError, InconsistentSpanError, RenderError, SinkError
from faithful.location import Position, Span
from faithful.protocols import TextSink
from faithful.renderers.display import FaithfulDisplay
from faithful.renderers.faithful import FaithfulRenderer
from faithful.serialization import from_dict, from_json, to_dict, to_json
from faithful.stringbuilder import StringBuilder
from faithful.tokens import Delimiter, Group, Ident, Literal, Punct, TokenStream, TokenTree
from faithful.whitespace import reconcile, whitespace_between

__version__ = "0.1.0"


def render(
    stream: Iterable[TokenTree],
    *,
    config: RenderConfig | None = None,
) -> FaithfulDisplay:
    """Create a layout-preserving display of a token stream.

    Rendering happens when the result is converted to text. The stream is
    never consumed: convert the result, or call render() again on the same
    stream, as often as needed.

    Args:
        stream: TokenStream, sequence or iterable of token trees
        config: Render configuration (uses the active context config if None)

    Returns:
        FaithfulDisplay whose str() is the rendered text

    Example:
        >>> str(render([]))
        ''
    """
    return FaithfulDisplay(stream, config)


def render_into(
    stream: Iterable[TokenTree],
    sink: TextSink,
    *,
    config: RenderConfig | None = None,
) -> None:
    """Render a token stream directly into a sink.

    Args:
        stream: TokenStream, sequence or iterable of token trees
        sink: Any object with a write(str) method
        config: Render configuration (uses the active context config if None)

    Raises:
        InconsistentSpanError: If a token starts before the cursor
        SinkError: If the sink fails a write (earlier writes are not undone)
        RenderError: If the tree is nested too deeply
    """
    FaithfulRenderer(sink, config).render(stream)


def render_stream(
    stream: Iterable[TokenTree],
    sink: TextSink,
    cursor: Position,
    *,
    config: RenderConfig | None = None,
) -> Position:
    """Render a stream from an explicit starting cursor.

    For embedding a sub-render in a larger document: whitespace before the
    first token is reconciled against ``cursor``, and the returned position
    lets the caller continue from where the stream ended.

    Returns:
        Cursor after the last token (``cursor`` for an empty stream)
    """
    return FaithfulRenderer(sink, config).render_stream(stream, cursor)


__all__ = [
    # Main API
    "render",
    "render_into",
    "render_stream",
    "FaithfulDisplay",
    "FaithfulRenderer",
    "reconcile",
    "whitespace_between",
    # Token model
    "Delimiter",
    "Group",
    "Ident",
    "Literal",
    "Punct",
    "TokenStream",
    "TokenTree",
    "Position",
    "Span",
    # Sinks
    "StringBuilder",
    "TextSink",
    # Configuration
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Errors
    "FaithfulError",
    "InconsistentSpanError",
    "RenderError",
    "SinkError",
]
