"""Type validation and per-node type normalization."""

from __future__ import annotations

from typing import Any

from openapi_jsonschema.errors import InvalidTypeError
from openapi_jsonschema.schema.options import ConversionOptions
from openapi_jsonschema.schema.types import SchemaNode

__all__ = ["VALID_TYPES", "validate_type", "normalize_types"]

VALID_TYPES: frozenset[str] = frozenset({"integer", "number", "string", "boolean", "object", "array"})

# Legacy marker for integer-backed enumerations
_ENUM_SENTINEL = "enum"


def validate_type(type_value: Any, path: str = "/") -> None:
    """Raise InvalidTypeError unless ``type_value`` is absent or a JSON Schema primitive.

    A list is accepted when every member is a primitive or ``"null"``, which
    is what an already-normalized node carries.
    """
    if type_value is None:
        return
    if isinstance(type_value, str):
        if type_value not in VALID_TYPES:
            raise InvalidTypeError(type_value, path=path)
        return
    if isinstance(type_value, list):
        for member in type_value:
            if member != "null" and member not in VALID_TYPES:
                raise InvalidTypeError(member, path=path)
        return
    raise InvalidTypeError(type_value, path=path)


def _is_nullable(node: SchemaNode) -> bool:
    return node.get("nullable") is True


def normalize_types(node: SchemaNode, options: ConversionOptions) -> SchemaNode:
    """Rewrite type, format and nullability of a single node. Mutates in place.

    A nullable ``oneOf``/``anyOf`` gets a ``{"type": "null"}`` alternative
    appended unless an equal alternative is already there.
    """
    nullable = _is_nullable(node)
    if "type" not in node and not nullable:
        return node

    # A union cannot carry nullability for combinators, so null becomes an alternative
    if nullable:
        for keyword in ("oneOf", "anyOf"):
            alternatives = node.get(keyword)
            if isinstance(alternatives, list) and {"type": "null"} not in alternatives:
                alternatives.append({"type": "null"})

    type_value = node.get("type")

    if type_value == "string" and node.get("format") == "date" and options.date_to_date_time:
        node["format"] = "date-time"

    if nullable:
        if isinstance(type_value, str) and type_value != "null":
            node["type"] = [type_value, "null"]
        elif isinstance(type_value, list) and "null" not in type_value:
            type_value.append("null")

    if node.get("type") == _ENUM_SENTINEL:
        node["type"] = [_ENUM_SENTINEL, "integer"]

    return node
