"""
Tests for JSON Schema validation of artifacts.
"""

import pytest

from legal_toolkit.core import ValidationError, validate_clauses, validate_layout


def _clause(index, text="Clause text.", provenance="user_sourced"):
    return {"sequence_index": index, "text": text, "provenance": provenance}


def _page(index, runs=None):
    return {"index": index, "width": 200, "height": 200, "runs": runs or []}


class TestValidateClauses:
    """Tests for validate_clauses()."""

    def test_validate_when_valid_then_no_error(self):
        validate_clauses({"schema_version": 1, "clauses": [_clause(0), _clause(1, provenance="model_added")]})

    def test_validate_when_wrong_schema_version_then_raises(self):
        with pytest.raises(ValidationError):
            validate_clauses({"schema_version": 2, "clauses": []})

    def test_validate_when_empty_text_then_raises_with_path(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_clauses({"schema_version": 1, "clauses": [_clause(0, text="")]})

        assert exc_info.value.path == "clauses.0.text"

    def test_validate_when_unknown_provenance_then_raises(self):
        with pytest.raises(ValidationError):
            validate_clauses({"schema_version": 1, "clauses": [_clause(0, provenance="ai")]})

    def test_validate_when_indices_not_increasing_then_raises(self):
        with pytest.raises(ValidationError, match="must increase") as exc_info:
            validate_clauses({"schema_version": 1, "clauses": [_clause(0), _clause(2), _clause(2)]})

        assert exc_info.value.path == "clauses.2.sequence_index"

    def test_validate_when_not_object_then_raises(self):
        with pytest.raises(ValidationError, match="must be an object"):
            validate_clauses([])


class TestValidateLayout:
    """Tests for validate_layout()."""

    def test_validate_when_valid_then_no_error(self):
        run = {"text": "Deed", "x": 80, "y": 180, "font_size": 20, "font_weight": "bold"}
        validate_layout({"schema_version": 1, "pages": [_page(0, [run]), _page(1)]})

    def test_validate_when_no_pages_then_raises(self):
        with pytest.raises(ValidationError):
            validate_layout({"schema_version": 1, "pages": []})

    def test_validate_when_page_out_of_order_then_raises(self):
        with pytest.raises(ValidationError, match="Page index 1 at position 0"):
            validate_layout({"schema_version": 1, "pages": [_page(1), _page(0)]})

    def test_validate_when_unexpected_run_field_then_collects_errors(self):
        run = {"text": "x", "x": 0, "y": 0, "font_size": 10, "font_weight": "normal", "color": "red"}

        with pytest.raises(ValidationError) as exc_info:
            validate_layout({"schema_version": 1, "pages": [_page(0, [run])]})

        assert exc_info.value.errors
