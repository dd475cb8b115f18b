"""Lex a snippet, then render it back with its original layout."""

from faithful import Delimiter, Group, Ident, Punct, Span, TokenStream, render

# f(
#     x,
#     y
# )
args = Group(
    Delimiter.PARENTHESIS,
    Span.from_coords(1, 1, 1, 2),
    Span.from_coords(4, 0, 4, 1),
    TokenStream.of([
        Ident("x", Span.from_coords(2, 4, 2, 5)),
        Punct(",", Span.from_coords(2, 5, 2, 6)),
        Ident("y", Span.from_coords(3, 4, 3, 5)),
    ]),
)
stream = TokenStream.of([Ident("f", Span.from_coords(1, 0, 1, 1)), args])
print(render(stream))
