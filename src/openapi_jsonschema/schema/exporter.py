"""SchemaSetExporter: exports the component schemas of a document as standalone JSON Schemas."""

from __future__ import annotations

import copy
import logging
from typing import Any

from openapi_jsonschema.schema.converter import convert_schema_to_json_schema
from openapi_jsonschema.schema.options import ConversionOptions
from openapi_jsonschema.schema.types import SchemaNode

__all__ = ["SchemaSetExporter"]

logger = logging.getLogger(__name__)


def _component_schemas(doc: dict[str, Any]) -> dict[str, Any]:
    components = doc.get("components") or {}
    return components.get("schemas") or {}


class SchemaSetExporter:
    """Stateless transformer that turns component schemas into self-contained JSON Schemas.

    Every exported schema carries the full converted ``components.schemas``
    map, so ``#/components/schemas/...`` references inside it still resolve.
    By default all rule exceptions are enabled.
    """

    def __init__(self, options: ConversionOptions | None = None) -> None:
        self._options = options if options is not None else ConversionOptions.permissive()

    @property
    def options(self) -> ConversionOptions:
        return self._options

    def export(self, doc: dict[str, Any]) -> list[SchemaNode]:
        """Convert each component schema, embedding the converted components in each result."""
        components = self.parse_component_schemas(doc)
        return [self.to_json_schema(schema, components) for schema in _component_schemas(doc).values()]

    def to_json_schema(self, schema: SchemaNode, components: dict[str, Any] | None = None) -> SchemaNode:
        """Convert one schema and attach a private copy of ``components``."""
        result = convert_schema_to_json_schema(schema, self._options)
        if components is not None:
            result["components"] = copy.deepcopy(components)
        return result

    def parse_component_schemas(self, doc: dict[str, Any]) -> dict[str, dict[str, SchemaNode]]:
        """Convert every component schema separately, keyed by name under ``schemas``."""
        schemas: dict[str, SchemaNode] = {}
        for name, schema in _component_schemas(doc).items():
            schemas[name] = convert_schema_to_json_schema(schema, self._options)
            logger.debug("Converted component schema '%s' for export", name)
        return {"schemas": schemas}
