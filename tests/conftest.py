"""Shared pytest fixtures for jsonapi-openapi-lint tests."""

import copy
import json
from pathlib import Path
from typing import Any

import pytest

MOCK_API_DOCUMENT = {
    "openapi": "3.1.0",
    "info": {
        "title": "User Information API",
        "version": "1.0.0",
        "description": "API for retrieving user information",
    },
    "paths": {
        "/users/{userId}": {
            "get": {
                "responses": {
                    "400": {
                        "content": {
                            "application/vnd.api+json": {
                                "schema": {"$ref": "#/components/schemas/JsonApiError"},
                            }
                        }
                    }
                }
            }
        }
    },
    "components": {
        "schemas": {
            "JsonApiError": {
                "type": "object",
                "properties": {
                    "errors": {
                        "type": "array",
                        "items": {"$ref": "#/components/schemas/ErrorObject"},
                    }
                },
            },
            "ErrorObject": {
                "type": "object",
                "properties": {
                    "id": {"type": "string"},
                    "links": {
                        "type": "object",
                        "properties": {"about": {"type": "string", "format": "uri"}},
                    },
                    "status": {"type": "string"},
                    "code": {"type": "string"},
                    "title": {"type": "string"},
                    "detail": {"type": "string"},
                    "source": {
                        "type": "object",
                        "properties": {
                            "pointer": {"type": "string"},
                            "parameter": {"type": "string"},
                            "header": {"type": "string"},
                        },
                    },
                    "meta": {"type": "object", "additionalProperties": True},
                },
                "required": ["detail"],
            },
        }
    },
}


@pytest.fixture(autouse=True)
def clear_resolver_env(monkeypatch):
    """Keep JSONAPI_LINT_* variables from the outer environment out of the tests."""
    for name in ("JSONAPI_LINT_DEFINITIONS_PREFIX", "JSONAPI_LINT_PRUNE_DEFINITIONS", "JSONAPI_LINT_MERGE_SIBLINGS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def mock_api_document() -> dict[str, Any]:
    """A fresh copy of the mock OpenAPI document for every test.

    Resolution deletes inlined components from the root, so a document must
    never be shared between resolutions.
    """
    return copy.deepcopy(MOCK_API_DOCUMENT)


@pytest.fixture
def error_object_schema() -> dict[str, Any]:
    return copy.deepcopy(MOCK_API_DOCUMENT["components"]["schemas"]["ErrorObject"])


@pytest.fixture
def create_json_file(tmp_path: Path):
    """Factory fixture for creating temporary JSON files.

    Usage:
        def test_example(create_json_file):
            file = create_json_file("test.json", {"key": "value"})
            result = dereference_file(file)
    """

    def _create(name: str, content: Any) -> Path:
        file = tmp_path / name
        file.parent.mkdir(parents=True, exist_ok=True)
        file.write_text(json.dumps(content))
        return file

    return _create
