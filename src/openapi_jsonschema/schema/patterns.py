"""Translation of the ``x-patternProperties`` vendor extension."""

from __future__ import annotations

from openapi_jsonschema.schema.types import SchemaNode

__all__ = ["VENDOR_PATTERN_PROPERTIES", "translate_pattern_properties"]

VENDOR_PATTERN_PROPERTIES = "x-patternProperties"


def translate_pattern_properties(node: SchemaNode) -> SchemaNode:
    """Move ``x-patternProperties`` to ``patternProperties``. Mutates in place.

    When ``additionalProperties`` is the very schema object used for one of the
    patterns, it is redundant with the pattern and becomes ``False``. Any other
    ``additionalProperties`` value, including an absent one, is kept as is.
    """
    node["patternProperties"] = node.pop(VENDOR_PATTERN_PROPERTIES)
    return _reconcile_additional_properties(node)


def _reconcile_additional_properties(node: SchemaNode) -> SchemaNode:
    additional = node.get("additionalProperties")
    if not isinstance(additional, dict):
        return node

    patterns = node["patternProperties"]
    if any(schema is additional for schema in patterns.values()):
        node["additionalProperties"] = False
    return node
