"""Token tree serialization — JSON round-trip for token streams.

Converts token trees to/from JSON-compatible dicts. Useful for:
- Handing token trees over from a tokenizer running in another process
- Storing token fixtures next to the source they were lexed from
- Debugging and inspection

All output is deterministic (sorted keys) for stable fixtures.

Example:
    from faithful.serialization import to_json, from_json

    json_str = to_json(stream)
    restored = from_json(json_str)
    assert stream == restored

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from faithful.location import Position, Span
from faithful.tokens import Delimiter, Group, Ident, Literal, Punct, TokenStream

type Serializable = Ident | Literal | Punct | Group | TokenStream

# Registry of type names to classes for deserialization
_TOKEN_TYPES: dict[str, type] = {
    "Ident": Ident,
    "Literal": Literal,
    "Punct": Punct,
    "Group": Group,
    "TokenStream": TokenStream,
}


def to_dict(node: Serializable) -> dict[str, Any]:
    """Convert a token tree or stream to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    Recursively serializes nested streams, spans and positions.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))

    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, (Ident, Literal, Punct, Group, TokenStream)):
        return to_dict(value)
    if isinstance(value, Span):
        return {
            "_type": "Span",
            "start": _serialize_value(value.start),
            "end": _serialize_value(value.end),
        }
    if isinstance(value, Position):
        return {"_type": "Position", "line": value.line, "column": value.column}
    if isinstance(value, Delimiter):
        return value.name
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int
    return value


def from_dict(data: dict[str, Any]) -> Serializable:
    """Reconstruct a token tree or stream from a dict.

    Uses the ``_type`` discriminator to determine the class.

    Raises:
        ValueError: If ``_type`` is missing or unknown, or a delimiter
            name is not recognized.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized token"
        raise ValueError(msg)

    token_cls = _TOKEN_TYPES.get(type_name)
    if token_cls is None:
        msg = f"Unknown token type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(token_cls):
        if f.name not in data:
            continue
        kwargs[f.name] = _deserialize_value(data[f.name], f.name)

    return token_cls(**kwargs)


def _deserialize_value(value: Any, field_name: str = "") -> Any:
    """Deserialize a single field value."""
    if field_name == "delimiter":
        try:
            return Delimiter[value]
        except KeyError:
            msg = f"Unknown delimiter: {value!r}"
            raise ValueError(msg) from None
    if isinstance(value, dict):
        type_name = value.get("_type")
        if type_name == "Position":
            return Position(line=value["line"], column=value["column"])
        if type_name == "Span":
            return Span(
                start=_deserialize_value(value["start"]),
                end=_deserialize_value(value["end"]),
            )
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(node: Serializable, *, indent: int | None = None) -> str:
    """Serialize a token tree or stream to a JSON string.

    Output is deterministic (sorted keys).

    """
    return json.dumps(to_dict(node), sort_keys=True, indent=indent)


def from_json(data: str) -> Serializable:
    """Deserialize a token tree or stream from a JSON string."""
    return from_dict(json.loads(data))
