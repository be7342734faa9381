"""
Schema Validation Utilities

Validates serialized puzzle results before they are emitted as JSON.

- Cheap structural checks first (required fields, schema version)
- Full JSON Schema validation with jsonschema against result.schema.json
- Fail fast on any violation
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

from puzzle_toolkit.errors import PuzzleError

RESULT_SCHEMA_VERSION = 1

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ResultValidationError(PuzzleError):
    """Raised when a serialized result fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_result(data: dict[str, Any]) -> None:
    """
    Validate a serialized PuzzleResult.

    Args:
        data: Output of PuzzleResult.to_dict()

    Raises:
        ResultValidationError: If data is invalid
    """
    required = ["schema_version", "puzzle", "answers"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ResultValidationError(
            f"Missing required fields: {missing}",
            errors=[f"Missing field: {f}" for f in missing],
        )

    version = data.get("schema_version")
    if version != RESULT_SCHEMA_VERSION:
        raise ResultValidationError(
            f"Unsupported result schema version: {version} (expected {RESULT_SCHEMA_VERSION})",
            path="schema_version",
        )

    try:
        jsonschema.validate(data, _load_schema("result"))
    except jsonschema.ValidationError as e:
        raise ResultValidationError(
            f"Schema validation failed: {e.message}",
            path=".".join(str(p) for p in e.absolute_path),
            errors=[e.message],
        ) from e
