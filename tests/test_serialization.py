"""Tests for faithful.serialization — token tree JSON round-trip."""

import json

import pytest

from faithful import render
from faithful.location import Position, Span
from faithful.serialization import from_dict, from_json, to_dict, to_json
from faithful.tokens import Delimiter, Group, Ident, Literal, Punct, TokenStream


def _sample() -> TokenStream:
    """``f(x, 1.5)`` followed by ``"s"`` on the next line."""
    args = Group(
        Delimiter.PARENTHESIS,
        Span.from_coords(1, 1, 1, 2),
        Span.from_coords(1, 8, 1, 9),
        TokenStream.of(
            [
                Ident("x", Span.from_coords(1, 2, 1, 3)),
                Punct(",", Span.from_coords(1, 3, 1, 4)),
                Literal("1.5", Span.from_coords(1, 5, 1, 8)),
            ]
        ),
    )
    return TokenStream.of(
        [
            Ident("f", Span.from_coords(1, 0, 1, 1)),
            args,
            Literal('"s"', Span.from_coords(2, 0, 2, 3)),
        ]
    )


class TestRoundTrip:
    """Verify round-trip serialization for all token types."""

    def test_stream(self) -> None:
        stream = _sample()
        assert from_dict(to_dict(stream)) == stream

    def test_json(self) -> None:
        stream = _sample()
        assert from_json(to_json(stream)) == stream

    @pytest.mark.parametrize("delimiter", list(Delimiter))
    def test_every_delimiter(self, delimiter: Delimiter) -> None:
        group = Group(delimiter, Span.from_coords(1, 0, 1, 1), Span.from_coords(1, 1, 1, 2), TokenStream())
        assert from_dict(to_dict(group)) == group

    def test_restored_stream_renders_identically(self) -> None:
        stream = _sample()
        assert str(render(from_json(to_json(stream)))) == str(render(stream)) == 'f(x, 1.5)\n"s"'  # type: ignore[arg-type]


class TestFormat:
    """Shape of the serialized data."""

    def test_discriminators(self) -> None:
        data = to_dict(Punct(";", Span.from_coords(3, 4, 3, 5)))
        assert data == {
            "_type": "Punct",
            "char": ";",
            "span": {
                "_type": "Span",
                "start": {"_type": "Position", "line": 3, "column": 4},
                "end": {"_type": "Position", "line": 3, "column": 5},
            },
        }

    def test_delimiter_by_name(self) -> None:
        data = to_dict(_sample()[1])  # type: ignore[arg-type]
        assert data["delimiter"] == "PARENTHESIS"
        assert data["stream"]["_type"] == "TokenStream"

    def test_json_is_deterministic(self) -> None:
        assert to_json(_sample()) == to_json(_sample())
        parsed = json.loads(to_json(_sample()))
        assert list(parsed) == sorted(parsed)

    def test_restored_positions_are_positions(self) -> None:
        restored = from_json(to_json(Ident("a", Span.from_coords(1, 0, 1, 1))))
        assert isinstance(restored, Ident)
        assert restored.span.start == Position(1, 0)


class TestErrors:
    def test_missing_type(self) -> None:
        with pytest.raises(ValueError, match="Missing"):
            from_dict({"text": "a"})

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown token type"):
            from_dict({"_type": "Comment"})

    def test_unknown_delimiter(self) -> None:
        data = to_dict(_sample()[1])  # type: ignore[arg-type]
        data["delimiter"] = "ANGLE"
        with pytest.raises(ValueError, match="Unknown delimiter"):
            from_dict(data)
