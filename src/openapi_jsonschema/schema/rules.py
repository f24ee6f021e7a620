"""Rule exceptions applied across a converted property map.

Each pass walks the whole subtree below a ``properties`` mapping and widens
the ``type`` of every schema node it reaches. The passes only ever add
members to a type, so running one twice has no further effect.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from openapi_jsonschema.schema.types import NodeKind, SchemaNode, kind_of

__all__ = [
    "convert_enums_to_integer",
    "make_all_properties_nullable",
    "add_integer_type_if_string",
]


def _walk(tree: dict[str, Any], visit: Callable[[SchemaNode], None]) -> None:
    """Apply ``visit`` to every mapping below ``tree``, children first."""
    for value in list(tree.values()):
        kind = kind_of(value)
        if kind is NodeKind.OBJECT:
            _walk(value, visit)
            visit(value)
        elif kind is NodeKind.ARRAY:
            for item in value:
                if isinstance(item, dict):
                    _walk(item, visit)
                    visit(item)


def _widen(node: SchemaNode, member: str) -> None:
    type_value = node.get("type")
    if isinstance(type_value, str):
        if type_value != member:
            node["type"] = [type_value, member]
    elif isinstance(type_value, list) and member not in type_value:
        type_value.append(member)


def _enum_to_integer(node: SchemaNode) -> None:
    # A property literally named "enum" inside a properties map is a mapping, not a list
    if not isinstance(node.get("enum"), list):
        return
    del node["enum"]
    _widen(node, "integer")


def _nullable(node: SchemaNode) -> None:
    _widen(node, "null")


def _string_accepts_integer(node: SchemaNode) -> None:
    type_value = node.get("type")
    if type_value == "string" or (isinstance(type_value, list) and "string" in type_value):
        _widen(node, "integer")


def convert_enums_to_integer(properties: dict[str, Any]) -> dict[str, Any]:
    """Drop ``enum`` from every node and let it accept integers instead."""
    _walk(properties, _enum_to_integer)
    return properties


def make_all_properties_nullable(properties: dict[str, Any]) -> dict[str, Any]:
    """Let every typed node accept null."""
    _walk(properties, _nullable)
    return properties


def add_integer_type_if_string(properties: dict[str, Any]) -> dict[str, Any]:
    """Let every string-typed node accept integers as well."""
    _walk(properties, _string_accepts_integer)
    return properties
