"""Conversion of a whole OpenAPI document."""

from __future__ import annotations

import logging
from typing import Any

from openapi_jsonschema.errors import ConversionFailedError, MalformedSchemaError
from openapi_jsonschema.schema.converter import convert_schema, pointer, prepare_for_conversion
from openapi_jsonschema.schema.options import JSON_SCHEMA_DRAFT_04, ConversionOptions
from openapi_jsonschema.schema.types import RESULT_ERRORS, ConversionResult, NodeKind, kind_of

__all__ = ["convert_document", "process_tree", "try_convert_document"]

logger = logging.getLogger(__name__)


def convert_document(doc: dict[str, Any] | None, options: ConversionOptions | None = None) -> dict[str, Any]:
    """Convert every schema in ``components.schemas`` and under ``paths``.

    The rest of the document is left as it is. The document must be a
    mapping; its overall shape is not validated further.
    """
    doc, options = prepare_for_conversion(doc, options)
    if doc is None:
        raise ConversionFailedError(reason="Document is empty after preparation")
    if not isinstance(doc, dict):
        raise MalformedSchemaError(path="/", expected="object", actual=type(doc).__name__)

    components = doc.get("components")
    if isinstance(components, dict) and isinstance(components.get("schemas"), dict):
        schemas = components["schemas"]
        for name in list(schemas):
            schema = schemas[name]
            path = pointer("/components/schemas", name)
            if not isinstance(schema, dict):
                raise MalformedSchemaError(path=path, expected="object", actual=type(schema).__name__)
            schemas[name] = convert_schema(schema, options, path=path)
            logger.debug("Converted component schema '%s'", name)

    paths = doc.get("paths")
    if isinstance(paths, dict):
        for route, item in paths.items():
            if isinstance(item, dict):
                process_tree(item, options, path=pointer("/paths", route))

    doc["$schema"] = JSON_SCHEMA_DRAFT_04
    return doc


def process_tree(tree: dict[str, Any], options: ConversionOptions, *, path: str = "") -> dict[str, Any]:
    """Convert every mapping found under a ``schema`` key below ``tree``. Mutates in place."""
    for key in list(tree):
        value = tree[key]
        kind = kind_of(value)
        if kind is NodeKind.OBJECT:
            if key == "schema":
                tree[key] = convert_schema(value, options, path=pointer(path, key))
            else:
                tree[key] = process_tree(value, options, path=pointer(path, key))
        elif kind is NodeKind.ARRAY:
            for i, item in enumerate(value):
                if isinstance(item, dict):
                    process_tree(item, options, path=pointer(path, key, i))
    return tree


def try_convert_document(doc: dict[str, Any] | None, options: ConversionOptions | None = None) -> ConversionResult:
    """Like ``convert_document`` but reports failure as a result value."""
    try:
        return ConversionResult.success(convert_document(doc, options))
    except RESULT_ERRORS as e:
        return ConversionResult.failure(e)
