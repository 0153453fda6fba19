"""
Module: review.classifier

Purpose:
    Label each clause as user-sourced or model-added by comparing it with
    the user's own vocabulary and a bank of standard-clause patterns.

    A clause is only flagged as model-added on a boilerplate match or
    sufficient length, and only when nothing from the user's input
    appears in it. Ambiguous clauses stay user-sourced.

Key Functions:
    - classify_clause(): Gather signals and decide provenance

Dependencies:
    - review.vocabulary: tokenize, normalize_text
    - review.patterns: match_standard_patterns

Used By:
    - review.segmenter.segment_document(): Labels every closed clause
"""

from __future__ import annotations

import logging

from legal_toolkit.common.thresholds import CLASSIFICATION

from .models import ClauseSignals, Provenance, ReferenceVocabulary
from .patterns import match_standard_patterns
from .vocabulary import normalize_text, tokenize

logger = logging.getLogger(__name__)


def classify_clause(text: str, vocabulary: ReferenceVocabulary) -> ClauseSignals:
    """
    Classify a single clause.

    Rules:
    1. has_user_words: any clause token (length > 2) is a vocabulary token
    2. has_user_phrases: any vocabulary phrase occurs in the normalized clause
    3. matched_patterns: every boilerplate rule the clause matches
    4. MODEL_ADDED iff no user words/phrases AND (boilerplate OR length > 100)

    Args:
        text: Clause text
        vocabulary: Reference vocabulary for this run

    Returns:
        ClauseSignals with the final provenance

    Example:
        >>> vocab = build_vocabulary("rent 50000 monthly")
        >>> classify_clause("The monthly rent shall be ...", vocab).provenance
        <Provenance.USER_SOURCED: 'user_sourced'>
    """
    has_user_words = any(
        len(token) >= CLASSIFICATION.min_token_length and token in vocabulary.tokens
        for token in tokenize(text)
    )

    normalized = normalize_text(text)
    has_user_phrases = any(phrase in normalized for phrase in vocabulary.phrases)

    matched = match_standard_patterns(text)
    traceable = has_user_words or has_user_phrases

    if not traceable and (matched or len(text) > CLASSIFICATION.model_added_min_length):
        provenance = Provenance.MODEL_ADDED
    else:
        provenance = Provenance.USER_SOURCED

    logger.debug(
        f"Classified clause ({len(text)} chars) as {provenance.value}: "
        f"words={has_user_words} phrases={has_user_phrases} patterns={list(matched)}"
    )

    return ClauseSignals(
        has_user_words=has_user_words,
        has_user_phrases=has_user_phrases,
        matched_patterns=matched,
        length=len(text),
        provenance=provenance,
    )
