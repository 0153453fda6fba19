"""JSON Schemas for clause and layout artifacts."""

from .validator import (
    CLAUSES_SCHEMA_VERSION,
    LAYOUT_SCHEMA_VERSION,
    ValidationError,
    validate_clauses,
    validate_layout,
)

__all__ = [
    "CLAUSES_SCHEMA_VERSION",
    "LAYOUT_SCHEMA_VERSION",
    "ValidationError",
    "validate_clauses",
    "validate_layout",
]
