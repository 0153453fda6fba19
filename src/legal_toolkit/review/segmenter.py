"""
Module: review.segmenter

Purpose:
    Split generated document text into clause units.

Key Functions:
    - split_clauses(): Blank-line and heading-boundary segmentation
    - segment_document(): Split, then classify every clause

Algorithm:
    Single left-to-right pass over lines:
    1. Blank line -> close the buffer (if non-empty)
    2. Heading line -> close the buffer, heading opens the next clause
    3. Other line -> append to buffer
    4. End of input -> close the buffer

Dependencies:
    - review.patterns: is_clause_heading
    - review.classifier: classify_clause
    - review.vocabulary: build_vocabulary

Used By:
    - builder.controller: Review step of the build pipeline
    - cli: `review` command
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from .classifier import classify_clause
from .models import ClauseUnit
from .patterns import is_clause_heading
from .vocabulary import build_vocabulary

logger = logging.getLogger(__name__)


def split_clauses(text: str) -> List[str]:
    """
    Split text into clause texts.

    Lines are stripped of surrounding whitespace. A clause never contains a
    blank line, and a heading line is always the first line of its clause.

    Args:
        text: Raw document text (any line endings)

    Returns:
        Clause texts in document order (empty for blank input)

    Example:
        >>> split_clauses("Intro line\\nGOVERNING LAW\\nLaws of Pakistan.")
        ['Intro line', 'GOVERNING LAW\\nLaws of Pakistan.']
    """
    clauses: List[str] = []
    buffer: List[str] = []

    def close() -> None:
        if buffer:
            clauses.append("\n".join(buffer))
            buffer.clear()

    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line:
            close()
            continue
        if is_clause_heading(line):
            close()
        buffer.append(line)

    close()
    return clauses


def segment_document(
    text: str,
    key_terms: str = "",
    extra_notes: str = "",
) -> Tuple[ClauseUnit, ...]:
    """
    Segment and classify a generated document.

    Builds a fresh ReferenceVocabulary from the user's fields, splits the
    text and labels each clause.

    Args:
        text: Generated document text
        key_terms: User's "key terms" field
        extra_notes: User's "additional notes" field

    Returns:
        Tuple of ClauseUnits with sequence_index 0..n-1

    Example:
        >>> clauses = segment_document(contract_text, key_terms="rent 50000 monthly")
        >>> [c.provenance.value for c in clauses]
        ['user_sourced', 'model_added', ...]
    """
    vocabulary = build_vocabulary(key_terms, extra_notes)

    units = []
    for index, clause_text in enumerate(split_clauses(text)):
        signals = classify_clause(clause_text, vocabulary)
        units.append(ClauseUnit(
            text=clause_text,
            provenance=signals.provenance,
            sequence_index=index,
            matched_patterns=signals.matched_patterns,
            has_user_words=signals.has_user_words,
            has_user_phrases=signals.has_user_phrases,
        ))

    model_added = sum(1 for u in units if u.is_model_added)
    logger.info(f"Segmented {len(units)} clauses ({model_added} model-added)")
    return tuple(units)
