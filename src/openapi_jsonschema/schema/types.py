"""Type definitions and data structures for the schema conversion system."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from openapi_jsonschema.errors import (
    ConversionError,
    ConversionFailedError,
    InvalidTypeError,
    MalformedSchemaError,
)

__all__ = [
    "SchemaNode",
    "NodeKind",
    "kind_of",
    "ConversionResult",
    "RESULT_ERRORS",
]

SchemaNode = dict[str, Any]

# Errors a ConversionResult may carry.
RESULT_ERRORS: tuple[type[ConversionError], ...] = (
    InvalidTypeError,
    ConversionFailedError,
    MalformedSchemaError,
)


class NodeKind(str, Enum):
    """The JSON value space a schema tree is built from."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    # Any other leaf, e.g. a date from a YAML parser
    OPAQUE = "opaque"


def kind_of(value: Any) -> NodeKind:
    """Classify a tree value. Values JSON cannot represent are OPAQUE leaves."""
    if value is None:
        return NodeKind.NULL
    # bool is a subclass of int, so it must be checked first
    if isinstance(value, bool):
        return NodeKind.BOOLEAN
    if isinstance(value, dict):
        return NodeKind.OBJECT
    if isinstance(value, list):
        return NodeKind.ARRAY
    if isinstance(value, str):
        return NodeKind.STRING
    if isinstance(value, (int, float)):
        return NodeKind.NUMBER
    return NodeKind.OPAQUE


@dataclass
class ConversionResult:
    """Outcome of a conversion: either a schema or one of the closed set of conversion errors."""

    ok: bool
    schema: SchemaNode | None = None
    error: Union[InvalidTypeError, ConversionFailedError, MalformedSchemaError, None] = None

    @classmethod
    def success(cls, schema: SchemaNode) -> ConversionResult:
        return cls(ok=True, schema=schema)

    @classmethod
    def failure(cls, error: ConversionError) -> ConversionResult:
        if not isinstance(error, RESULT_ERRORS):
            raise TypeError(f"{type(error).__name__} is not a conversion result error")
        return cls(ok=False, error=error)  # type: ignore[arg-type]

    def unwrap(self) -> SchemaNode:
        """Return the converted schema or raise the captured error."""
        if not self.ok:
            assert self.error is not None
            raise self.error
        assert self.schema is not None
        return self.schema
