"""Token tree definitions consumed by the faithful renderer.

An upstream tokenizer produces a TokenStream of token trees. Each leaf
carries its text and span; each Group carries its delimiter, the spans
of both delimiters and the nested stream.

Token Hierarchy:
TokenTree
├── Ident        identifier text
├── Literal      source-formatted literal text
├── Punct        single punctuation character
└── Group        delimited (or invisible) nested TokenStream

Thread Safety:
All token types and TokenStream are frozen (immutable) and safe to share
across threads. Iterating a TokenStream never consumes it.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import overload

from faithful.location import Span


class Delimiter(Enum):
    """Bracket style of a Group.

    NONE is an invisible grouping: it scopes precedence upstream but renders
    no characters of its own.

    """

    PARENTHESIS = ("(", ")")
    BRACE = ("{", "}")
    BRACKET = ("[", "]")
    NONE = ("", "")

    @property
    def open(self) -> str:
        """Opening character ("" for NONE)."""
        return self.value[0]

    @property
    def close(self) -> str:
        """Closing character ("" for NONE)."""
        return self.value[1]


@dataclass(frozen=True, slots=True)
class Ident:
    """An identifier or keyword."""

    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class Literal:
    """A literal, already formatted as it appeared in source (``3.14``, ``"s"``)."""

    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class Punct:
    """A single punctuation character.

    Multi-character operators arrive as consecutive Punct tokens.

    """

    char: str
    span: Span

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            msg = f"Punct expects a single character, got {self.char!r}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Group:
    """A delimited sequence of token trees.

    Attributes:
        delimiter: Bracket style (Delimiter.NONE renders no brackets)
        span_open: Span of the opening delimiter
        span_close: Span of the closing delimiter
        stream: Tokens between the delimiters

    For Delimiter.NONE the delimiter spans are zero-width markers around
    the contents.

    """

    delimiter: Delimiter
    span_open: Span
    span_close: Span
    stream: TokenStream

    @property
    def span(self) -> Span:
        """Span from the opening delimiter's start to the closing delimiter's end."""
        return self.span_open.to(self.span_close)


type TokenTree = Ident | Literal | Punct | Group


@dataclass(frozen=True, slots=True)
class TokenStream:
    """An ordered, re-iterable sequence of token trees.

    Insertion order is source order. The stream wraps a tuple, so it can be
    traversed any number of times (and from several threads) without being
    consumed or copied.

    Usage:
            >>> stream = TokenStream.of([Ident("foo", Span.from_coords(1, 0, 1, 3))])
            >>> len(stream)
            1
            >>> [t.text for t in stream] == [t.text for t in stream]
            True

    """

    tokens: tuple[TokenTree, ...] = ()

    @classmethod
    def of(cls, tokens: Iterable[TokenTree]) -> TokenStream:
        """Materialize any iterable of token trees into a stream.

        Returns ``tokens`` itself when it is already a TokenStream. One-shot
        iterators are drained exactly once.
        """
        if isinstance(tokens, TokenStream):
            return tokens
        return cls(tuple(tokens))

    def __iter__(self) -> Iterator[TokenTree]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __bool__(self) -> bool:
        return bool(self.tokens)

    @overload
    def __getitem__(self, index: int) -> TokenTree: ...

    @overload
    def __getitem__(self, index: slice) -> TokenStream: ...

    def __getitem__(self, index: int | slice) -> TokenTree | TokenStream:
        if isinstance(index, slice):
            return TokenStream(self.tokens[index])
        return self.tokens[index]

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        return f"TokenStream({len(self.tokens)} tokens)"
