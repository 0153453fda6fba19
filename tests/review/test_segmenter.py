"""
Unit tests for clause segmentation.

Covers blank-line and heading boundaries, coverage of the input and
determinism of segment_document().
"""

import pytest

from legal_toolkit.review import (
    Provenance,
    is_clause_heading,
    segment_document,
    split_clauses,
)


def _non_blank_lines(text):
    return [line.strip() for line in text.splitlines() if line.strip()]


class TestIsClauseHeading:
    """Tests for the segmenter's heading boundary test."""

    @pytest.mark.parametrize("line", [
        "GOVERNING LAW",
        "1. DEFINITIONS",
        "12.  Termination",
        "  RENT AGREEMENT  ",
    ])
    def test_is_clause_heading_when_heading_then_true(self, line):
        assert is_clause_heading(line)

    @pytest.mark.parametrize("line", [
        "DISCLAIMER: Review before use.",
        "The Tenant shall pay rent.",
        "1.DEFINITIONS",
        "1. definitions",
        "",
        "   ",
    ])
    def test_is_clause_heading_when_prose_then_false(self, line):
        assert not is_clause_heading(line)

    def test_is_clause_heading_when_colon_heading_then_false(self):
        """Punctuation keeps a short caps line out of the segmenter's heading set."""
        assert not is_clause_heading("DISCLAIMER:")


class TestSplitClauses:
    """Tests for split_clauses()."""

    def test_split_when_blank_lines_then_splits_on_each(self):
        # Arrange
        text = "first para\nstill first\n\nsecond para\n\n\nthird para"

        # Act
        clauses = split_clauses(text)

        # Assert
        assert clauses == ["first para\nstill first", "second para", "third para"]

    def test_split_when_heading_without_blank_line_then_heading_opens_next_clause(self):
        text = "Intro line\nGOVERNING LAW\nLaws of Pakistan apply."

        clauses = split_clauses(text)

        assert clauses == ["Intro line", "GOVERNING LAW\nLaws of Pakistan apply."]

    def test_split_when_consecutive_headings_then_each_heading_closes_previous(self):
        text = "PART ONE\n1. DEFINITIONS\nTerms used below."

        clauses = split_clauses(text)

        assert clauses == ["PART ONE", "1. DEFINITIONS\nTerms used below."]

    def test_split_when_lines_indented_then_lines_are_stripped(self):
        text = "   indented line   \n\ttabbed line\t"

        clauses = split_clauses(text)

        assert clauses == ["indented line\ntabbed line"]

    def test_split_when_crlf_line_endings_then_same_as_lf(self):
        assert split_clauses("a line\r\n\r\nb line") == split_clauses("a line\n\nb line")

    @pytest.mark.parametrize("text", ["", "\n\n", "   \n \t \n"])
    def test_split_when_blank_input_then_no_clauses(self, text):
        assert split_clauses(text) == []

    def test_split_when_sample_contract_then_six_clauses(self, sample_contract):
        clauses = split_clauses(sample_contract)

        assert len(clauses) == 6
        assert clauses[1] == "RENT AGREEMENT"
        assert clauses[3].startswith("1. DEFINITIONS\n")
        assert clauses[5].startswith("3. GOVERNING LAW\n")

    def test_split_when_any_text_then_clause_lines_cover_input_in_order(self, sample_contract):
        """Every non-blank line lands in exactly one clause, in order."""
        text = sample_contract + "\nTRAILING HEADING\ntrailing body\n\n\nlast words"

        clauses = split_clauses(text)

        rejoined = [line for clause in clauses for line in clause.split("\n")]
        assert rejoined == _non_blank_lines(text)

    def test_split_when_clause_built_then_never_contains_blank_line(self, sample_contract):
        for clause in split_clauses(sample_contract):
            assert "" not in [line.strip() for line in clause.split("\n")]


class TestSegmentDocument:
    """Tests for segment_document()."""

    def test_segment_when_sample_then_indices_are_sequential(self, sample_contract, key_terms):
        clauses = segment_document(sample_contract, key_terms)

        assert [c.sequence_index for c in clauses] == list(range(6))

    def test_segment_when_sample_then_flags_boilerplate_only(self, sample_contract, key_terms, extra_notes):
        # Act
        clauses = segment_document(sample_contract, key_terms, extra_notes)

        # Assert
        flagged = [c.sequence_index for c in clauses if c.provenance is Provenance.MODEL_ADDED]
        assert flagged == [0, 5]
        assert clauses[5].matched_patterns == ("governing_law", "governed_by")

    def test_segment_when_repeated_then_identical(self, sample_contract, key_terms, extra_notes):
        first = segment_document(sample_contract, key_terms, extra_notes)
        second = segment_document(sample_contract, key_terms, extra_notes)

        assert first == second

    def test_segment_when_empty_text_then_no_clauses(self, key_terms):
        assert segment_document("", key_terms) == ()

    def test_segment_when_no_user_input_then_short_plain_clause_stays_user_sourced(self):
        clauses = segment_document("Signed at Karachi.")

        assert clauses[0].provenance is Provenance.USER_SOURCED
