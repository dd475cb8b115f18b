"""Shared fixtures for faithful tests.

Provides a tiny tokenizer standing in for the upstream lexer: lines are
1-indexed, columns 0-indexed, layout may use spaces and newlines only.
"""

from collections.abc import Callable

import pytest

from faithful.location import Position, Span
from faithful.tokens import Delimiter, Group, Ident, Literal, Punct, TokenStream, TokenTree

_OPENERS = {"(": Delimiter.PARENTHESIS, "[": Delimiter.BRACKET, "{": Delimiter.BRACE}
_CLOSERS = {")": Delimiter.PARENTHESIS, "]": Delimiter.BRACKET, "}": Delimiter.BRACE}


def tokenize(source: str) -> TokenStream:
    """Lex identifiers, numbers, double-quoted strings, brackets and punctuation."""
    stack: list[tuple[Delimiter, Span, list[TokenTree]]] = []
    current: list[TokenTree] = []
    line, col = 1, 0
    i, n = 0, len(source)

    while i < n:
        ch = source[i]
        if ch == "\n":
            line, col = line + 1, 0
            i += 1
            continue
        if ch == " ":
            col += 1
            i += 1
            continue

        start = Position(line, col)
        if ch.isalpha() or ch == "_":
            j = i + 1
            while j < n and (source[j].isalnum() or source[j] == "_"):
                j += 1
            kind: type[Ident] | type[Literal] = Ident
        elif ch.isdigit():
            j = i + 1
            while j < n and (source[j].isdigit() or source[j] == "."):
                j += 1
            kind = Literal
        elif ch == '"':
            j = source.index('"', i + 1) + 1
            kind = Literal
        elif ch in _OPENERS:
            col += 1
            i += 1
            stack.append((_OPENERS[ch], Span(start, Position(line, col)), current))
            current = []
            continue
        elif ch in _CLOSERS:
            delimiter, span_open, parent = stack.pop()
            assert delimiter is _CLOSERS[ch], f"mismatched {ch!r} at {start}"
            col += 1
            i += 1
            span_close = Span(start, Position(line, col))
            parent.append(Group(delimiter, span_open, span_close, TokenStream(tuple(current))))
            current = parent
            continue
        else:
            col += 1
            i += 1
            current.append(Punct(ch, Span(start, Position(line, col))))
            continue

        text = source[i:j]
        col += j - i
        i = j
        current.append(kind(text, Span(start, Position(line, col))))

    assert not stack, "unclosed group"
    return TokenStream(tuple(current))


@pytest.fixture(scope="session")
def lex() -> Callable[[str], TokenStream]:
    """Tokenizer fixture for round-trip tests."""
    return tokenize

