"""
Serialization Utilities

Provides to/from JSON utilities for clause sequences and layouts, the
artifacts handed to a review UI or to whatever emits the final file.

- `serialize_*` and `deserialize_*` functions for each artifact
- Validation via schemas before deserialization
- `dump_json()` / `load_json()` for files
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Sequence

from legal_toolkit.builder.layout.models import FontWeight, LayoutResult, Page, PlacedRun
from legal_toolkit.review.models import ClauseUnit, Provenance

from .schemas.validator import (
    CLAUSES_SCHEMA_VERSION,
    LAYOUT_SCHEMA_VERSION,
    validate_clauses,
    validate_layout,
)


# ─────────────────────────────────────────────────────────────────────────────
# Clause Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_clauses(clauses: Sequence[ClauseUnit]) -> dict[str, Any]:
    """
    Serialize a clause sequence to a dictionary.

    Args:
        clauses: Clauses from segment_document()

    Returns:
        Dictionary suitable for JSON serialization
    """
    return {
        "schema_version": CLAUSES_SCHEMA_VERSION,
        "clauses": [
            {
                "sequence_index": c.sequence_index,
                "text": c.text,
                "provenance": c.provenance.value,
                "matched_patterns": list(c.matched_patterns),
                "has_user_words": c.has_user_words,
                "has_user_phrases": c.has_user_phrases,
            }
            for c in sorted(clauses, key=lambda c: c.sequence_index)
        ],
    }


def deserialize_clauses(data: dict[str, Any], *, validate: bool = True) -> tuple[ClauseUnit, ...]:
    """
    Deserialize a clause sequence from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate against schema first

    Returns:
        Tuple of ClauseUnits

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_clauses(data)

    return tuple(
        ClauseUnit(
            text=item["text"],
            provenance=Provenance(item["provenance"]),
            sequence_index=item["sequence_index"],
            matched_patterns=tuple(item.get("matched_patterns", [])),
            has_user_words=item.get("has_user_words", False),
            has_user_phrases=item.get("has_user_phrases", False),
        )
        for item in data["clauses"]
    )


# ─────────────────────────────────────────────────────────────────────────────
# Layout Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_layout(layout: LayoutResult) -> dict[str, Any]:
    """
    Serialize a layout to a dictionary.

    The output is the fixed-layout artifact: every run already wrapped
    and positioned, so a consumer only has to draw strings.
    """
    return {
        "schema_version": LAYOUT_SCHEMA_VERSION,
        "pages": [_serialize_page(page) for page in layout.pages],
        "warnings": list(layout.warnings),
    }


def _serialize_page(page: Page) -> dict[str, Any]:
    return {
        "index": page.index,
        "width": page.width,
        "height": page.height,
        "runs": [
            {
                "text": run.text,
                "x": run.x,
                "y": run.y,
                "font_size": run.font_size,
                "font_weight": run.font_weight.value,
            }
            for run in page.runs
        ],
    }


def deserialize_layout(data: dict[str, Any], *, validate: bool = True) -> LayoutResult:
    """
    Deserialize a layout from a dictionary.

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_layout(data)

    pages = tuple(
        Page(
            index=p["index"],
            width=p["width"],
            height=p["height"],
            runs=tuple(
                PlacedRun(
                    text=r["text"],
                    x=r["x"],
                    y=r["y"],
                    font_size=r["font_size"],
                    font_weight=FontWeight(r["font_weight"]),
                )
                for r in p["runs"]
            ),
        )
        for p in data["pages"]
    )
    return LayoutResult(pages=pages, warnings=list(data.get("warnings", [])))


# ─────────────────────────────────────────────────────────────────────────────
# File Helpers
# ─────────────────────────────────────────────────────────────────────────────

def dump_json(data: dict[str, Any], path: Path) -> None:
    """Write a payload as indented UTF-8 JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def load_json(path: Path) -> dict[str, Any]:
    """Read a JSON payload."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
