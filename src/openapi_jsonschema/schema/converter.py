"""Recursive conversion of an OpenAPI schema node into JSON Schema draft-04."""

from __future__ import annotations

import copy
import logging
from typing import Any

from openapi_jsonschema.errors import ConversionFailedError, MalformedSchemaError
from openapi_jsonschema.schema.normalizer import normalize_types, validate_type
from openapi_jsonschema.schema.options import JSON_SCHEMA_DRAFT_04, ConversionOptions
from openapi_jsonschema.schema.patterns import VENDOR_PATTERN_PROPERTIES, translate_pattern_properties
from openapi_jsonschema.schema.rules import (
    add_integer_type_if_string,
    convert_enums_to_integer,
    make_all_properties_nullable,
)
from openapi_jsonschema.schema.types import RESULT_ERRORS, ConversionResult, NodeKind, SchemaNode, kind_of

__all__ = [
    "prepare_for_conversion",
    "convert_schema",
    "convert_properties",
    "clean_required",
    "strip_not_supported",
    "convert_schema_to_json_schema",
    "try_convert_schema",
]

logger = logging.getLogger(__name__)


def pointer(path: str, *segments: Any) -> str:
    """Append segments to a JSON Pointer, escaping ``~`` and ``/``."""
    for segment in segments:
        path += "/" + str(segment).replace("~", "~0").replace("/", "~1")
    return path


def _malformed(path: str, expected: str, value: Any) -> MalformedSchemaError:
    return MalformedSchemaError(path=path or "/", expected=expected, actual=type(value).__name__)


def prepare_for_conversion(
    schema: SchemaNode | None, options: ConversionOptions | None = None
) -> tuple[SchemaNode | None, ConversionOptions]:
    """Resolve options for a top-level call and clone the schema if requested."""
    options = (options or ConversionOptions()).prepare()
    if options.clone_schema and schema is not None:
        schema = copy.deepcopy(schema)
    return schema, options


def convert_schema(node: SchemaNode, options: ConversionOptions, *, path: str = "") -> SchemaNode:
    """Convert one schema node and everything below it. Mutates and returns ``node``.

    The node is not cloned and gets no ``$schema`` marker; top-level callers
    should go through ``convert_schema_to_json_schema`` instead.
    """
    _convert_structures(node, options, path)

    if "properties" in node:
        properties = node["properties"]
        if not isinstance(properties, dict):
            raise _malformed(pointer(path, "properties"), "object", properties)
        converted = convert_properties(properties, options, path=pointer(path, "properties"))
        node["properties"] = converted

        if isinstance(node.get("required"), list):
            node["required"] = clean_required(node["required"], converted)
            if not node["required"]:
                del node["required"]

        if not converted:
            del node["properties"]

    if "properties" in node:
        _apply_rule_exceptions(node["properties"], options)

    validate_type(node.get("type"), path=path or "/")
    normalize_types(node, options)

    if options.support_pattern_properties and isinstance(node.get(VENDOR_PATTERN_PROPERTIES), dict):
        translate_pattern_properties(node)

    return strip_not_supported(node, options.not_supported)


def _convert_structures(node: SchemaNode, options: ConversionOptions, path: str) -> None:
    for key in options.structural_keys:
        if key not in node:
            continue
        value = node[key]
        kind = kind_of(value)
        if kind is NodeKind.ARRAY:
            for i, item in enumerate(value):
                if isinstance(item, dict):
                    value[i] = convert_schema(item, options, path=pointer(path, key, i))
        elif kind is NodeKind.OBJECT:
            node[key] = convert_schema(value, options, path=pointer(path, key))
        elif kind in (NodeKind.BOOLEAN, NodeKind.NULL):
            continue
        else:
            raise _malformed(pointer(path, key), "object or array", value)


def _apply_rule_exceptions(properties: dict[str, Any], options: ConversionOptions) -> None:
    if options.enum_to_integer:
        convert_enums_to_integer(properties)
    if options.nullable_everywhere:
        make_all_properties_nullable(properties)
    if options.string_accepts_integer:
        add_integer_type_if_string(properties)


def convert_properties(
    properties: dict[str, Any], options: ConversionOptions, *, path: str = "/properties"
) -> dict[str, Any]:
    """Convert each property schema, dropping those flagged by ``options.removal_flags``."""
    converted: dict[str, Any] = {}
    for name, prop in properties.items():
        if isinstance(prop, dict) and _should_remove(prop, options.removal_flags):
            logger.debug("Dropping property '%s' flagged for removal", name)
            continue
        if not isinstance(prop, dict):
            raise _malformed(pointer(path, name), "object", prop)
        converted[name] = convert_schema(prop, options, path=pointer(path, name))
    return converted


def _should_remove(prop: SchemaNode, remove_props: tuple[str, ...]) -> bool:
    return any(prop.get(flag) is True for flag in remove_props)


def clean_required(required: list[Any], properties: dict[str, Any]) -> list[Any]:
    """Keep only the required names that still have a property."""
    return [name for name in required if name in properties]


def strip_not_supported(node: SchemaNode, not_supported: tuple[str, ...] | list[str]) -> SchemaNode:
    """Remove unsupported keys from the node's own top level. Mutates in place."""
    for key in not_supported:
        node.pop(key, None)
    return node


def convert_schema_to_json_schema(
    schema: SchemaNode | None, options: ConversionOptions | None = None
) -> SchemaNode:
    """Convert a standalone schema and mark it as JSON Schema draft-04."""
    schema, options = prepare_for_conversion(schema, options)
    if schema is None:
        raise ConversionFailedError()
    if not isinstance(schema, dict):
        raise _malformed("", "object", schema)

    result = convert_schema(schema, options)
    result["$schema"] = JSON_SCHEMA_DRAFT_04
    return result


def try_convert_schema(schema: SchemaNode | None, options: ConversionOptions | None = None) -> ConversionResult:
    """Like ``convert_schema_to_json_schema`` but reports failure as a result value."""
    try:
        return ConversionResult.success(convert_schema_to_json_schema(schema, options))
    except RESULT_ERRORS as e:
        return ConversionResult.failure(e)
