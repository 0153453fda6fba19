"""
Schema Validation Utilities

Validates JSON artifacts (clause sequences and layouts) against the
bundled JSON Schemas, plus ordering rules a schema cannot express.

- `validate_clauses()` and `validate_layout()` functions
- Fail fast on any schema violation
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Schema version constants
CLAUSES_SCHEMA_VERSION = 1
LAYOUT_SCHEMA_VERSION = 1


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


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_clauses(data: dict[str, Any]) -> None:
    """
    Validate a serialized clause sequence.

    Besides the schema, sequence indices must be unique and increasing.

    Args:
        data: Clause payload to validate

    Raises:
        ValidationError: If data is invalid
    """
    _validate_schema(data, "clauses")

    indices = [c["sequence_index"] for c in data["clauses"]]
    for position, (prev, current) in enumerate(zip(indices, indices[1:]), start=1):
        if current <= prev:
            raise ValidationError(
                f"sequence_index must increase: {current} after {prev}",
                path=f"clauses.{position}.sequence_index",
            )


def validate_layout(data: dict[str, Any]) -> None:
    """
    Validate a serialized layout.

    Besides the schema, page indices must run 0..n-1 in order.

    Args:
        data: Layout payload to validate

    Raises:
        ValidationError: If data is invalid
    """
    _validate_schema(data, "layout")

    for position, page in enumerate(data["pages"]):
        if page["index"] != position:
            raise ValidationError(
                f"Page index {page['index']} at position {position}",
                path=f"pages.{position}.index",
            )


def _validate_schema(data: Any, schema_name: str) -> None:
    """Run jsonschema and convert every error into one ValidationError."""
    if not isinstance(data, dict):
        raise ValidationError(f"{schema_name} payload must be an object, got {type(data).__name__}")

    validator = jsonschema.Draft7Validator(_load_schema(schema_name))
    errors = sorted(validator.iter_errors(data), key=lambda e: list(e.absolute_path))
    if errors:
        first = errors[0]
        raise ValidationError(
            f"Schema validation failed: {first.message}",
            path=".".join(str(p) for p in first.absolute_path),
            errors=[e.message for e in errors],
        )
