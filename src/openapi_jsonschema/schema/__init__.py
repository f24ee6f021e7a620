"""Schema conversion system -- public API.

Re-exports all public classes, functions, and types from schema submodules.

Example usage::

    from openapi_jsonschema.schema import ConversionOptions, convert_document
    from openapi_jsonschema.schema import SchemaSetExporter, load_document
"""

from __future__ import annotations

from openapi_jsonschema.schema.converter import (
    clean_required,
    convert_properties,
    convert_schema,
    convert_schema_to_json_schema,
    prepare_for_conversion,
    strip_not_supported,
    try_convert_schema,
)
from openapi_jsonschema.schema.document import convert_document, process_tree, try_convert_document
from openapi_jsonschema.schema.exporter import SchemaSetExporter
from openapi_jsonschema.schema.loader import load_document, parse_document
from openapi_jsonschema.schema.normalizer import VALID_TYPES, normalize_types, validate_type
from openapi_jsonschema.schema.options import (
    DEFAULT_NOT_SUPPORTED,
    DEFAULT_STRUCTURAL_KEYS,
    JSON_SCHEMA_DRAFT_04,
    ConversionOptions,
    resolve_not_supported,
)
from openapi_jsonschema.schema.patterns import translate_pattern_properties
from openapi_jsonschema.schema.rules import (
    add_integer_type_if_string,
    convert_enums_to_integer,
    make_all_properties_nullable,
)
from openapi_jsonschema.schema.types import ConversionResult, NodeKind, SchemaNode, kind_of

__all__ = [
    "ConversionOptions",
    "ConversionResult",
    "NodeKind",
    "SchemaNode",
    "SchemaSetExporter",
    "DEFAULT_NOT_SUPPORTED",
    "DEFAULT_STRUCTURAL_KEYS",
    "JSON_SCHEMA_DRAFT_04",
    "VALID_TYPES",
    "kind_of",
    "resolve_not_supported",
    "prepare_for_conversion",
    "convert_schema",
    "convert_properties",
    "clean_required",
    "strip_not_supported",
    "convert_schema_to_json_schema",
    "try_convert_schema",
    "convert_document",
    "process_tree",
    "try_convert_document",
    "validate_type",
    "normalize_types",
    "translate_pattern_properties",
    "convert_enums_to_integer",
    "make_all_properties_nullable",
    "add_integer_type_if_string",
    "load_document",
    "parse_document",
]
