"""openapi-jsonschema - Convert OpenAPI 3.0 schemas to JSON Schema draft-04."""

from __future__ import annotations

# Conversion
from openapi_jsonschema.schema import (
    ConversionOptions,
    ConversionResult,
    SchemaSetExporter,
    convert_document,
    convert_schema,
    convert_schema_to_json_schema,
    load_document,
    parse_document,
    try_convert_document,
    try_convert_schema,
)

# Config
from openapi_jsonschema.config import Config

# Errors
from openapi_jsonschema.errors import (
    ConfigError,
    ConfigNotFoundError,
    ConversionError,
    ConversionFailedError,
    DocumentNotFoundError,
    DocumentParseError,
    ErrorCodes,
    InvalidTypeError,
    MalformedSchemaError,
)

__version__ = "0.1.0"

__all__ = [
    # Conversion
    "ConversionOptions",
    "ConversionResult",
    "SchemaSetExporter",
    "convert_schema",
    "convert_schema_to_json_schema",
    "convert_document",
    "try_convert_schema",
    "try_convert_document",
    "load_document",
    "parse_document",
    # Config
    "Config",
    # Errors
    "ErrorCodes",
    "ConversionError",
    "InvalidTypeError",
    "ConversionFailedError",
    "MalformedSchemaError",
    "DocumentNotFoundError",
    "DocumentParseError",
    "ConfigError",
    "ConfigNotFoundError",
]
