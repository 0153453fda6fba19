"""
Legal Draft Toolkit Core Package

JSON artifacts exchanged with collaborators outside the toolkit: the
clause sequence shown in a review UI and the fixed layout handed to a
file writer. Every payload carries a schema_version and is validated
before it is turned back into models.
"""

from .schemas import ValidationError, validate_clauses, validate_layout
from .serialization import (
    deserialize_clauses,
    deserialize_layout,
    dump_json,
    load_json,
    serialize_clauses,
    serialize_layout,
)

__all__ = [
    "ValidationError",
    "validate_clauses",
    "validate_layout",
    "serialize_clauses",
    "deserialize_clauses",
    "serialize_layout",
    "deserialize_layout",
    "dump_json",
    "load_json",
]
