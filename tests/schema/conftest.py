"""Shared pytest fixtures for schema conversion tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from openapi_jsonschema.schema.options import ConversionOptions


@pytest.fixture
def options() -> ConversionOptions:
    """Returns default options, prepared the way a top-level call prepares them."""
    return ConversionOptions().prepare()


@pytest.fixture
def user_document() -> dict[str, Any]:
    """Returns a small OpenAPI document with one component schema and one path."""
    return {
        "openapi": "3.0.0",
        "info": {"version": "1.0.0", "title": "Sample API"},
        "paths": {
            "/users": {
                "get": {
                    "summary": "Get all users",
                    "responses": {
                        "200": {
                            "description": "A list of users",
                            "content": {
                                "application/json": {
                                    "schema": {
                                        "type": "array",
                                        "items": {"$ref": "#/components/schemas/User"},
                                    }
                                }
                            },
                        }
                    },
                }
            }
        },
        "components": {
            "schemas": {
                "User": {
                    "type": "object",
                    "required": ["id"],
                    "properties": {
                        "id": {"type": "integer", "readOnly": True},
                        "name": {"type": "string", "nullable": True, "example": "Alice"},
                    },
                }
            }
        },
    }


@pytest.fixture
def document_file(tmp_path: Path) -> Path:
    """Writes a YAML OpenAPI document to a temp file."""
    path = tmp_path / "openapi.yaml"
    path.write_text(
        """
openapi: 3.0.0
info:
  title: Pets
  version: 1.0.0
paths:
  /pets:
    post:
      requestBody:
        content:
          application/json:
            schema:
              type: object
              properties:
                born:
                  type: string
                  format: date
                  example: 2020-01-01
components:
  schemas:
    Pet:
      type: object
      properties:
        name:
          type: string
          nullable: true
"""
    )
    return path
