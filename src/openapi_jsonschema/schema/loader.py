"""Loading OpenAPI documents from YAML or JSON sources."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from openapi_jsonschema.errors import DocumentNotFoundError, DocumentParseError

__all__ = ["load_document", "parse_document"]

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class _DocumentLoader(yaml.SafeLoader):
    """SafeLoader that keeps dates as strings so documents stay JSON-compatible."""


_DocumentLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def parse_document(content: str, source: str = "<string>") -> dict[str, Any]:
    """Parse YAML or JSON text into a document mapping."""
    try:
        parsed = yaml.load(content, Loader=_DocumentLoader)
    except yaml.YAMLError as e:
        raise DocumentParseError(message=f"Invalid YAML in {source}: {e}", cause=e) from e

    if parsed is None:
        raise DocumentParseError(message=f"Document {source} is empty")

    if not isinstance(parsed, dict):
        raise DocumentParseError(message=f"Document {source} must be a mapping, got {type(parsed).__name__}")

    return parsed


def load_document(path: str | Path) -> dict[str, Any]:
    """Read and parse a document file. JSON is accepted since it is a subset of YAML."""
    file_path = Path(path)
    if not file_path.exists():
        raise DocumentNotFoundError(document_path=str(file_path))
    return parse_document(file_path.read_text(encoding="utf-8"), source=str(file_path))
