"""
Module: review

Purpose:
    Clause segmentation and provenance classification for generated
    legal text, plus the reduction of a reviewed clause list back to text.

Key Functions:
    - segment_document(): Main entry point (split + classify)
    - split_clauses(): Segmentation only
    - classify_clause(): Provenance for one clause
    - build_vocabulary(): Reference vocabulary from user fields
    - flatten_clauses(): Retained clauses back to text

Key Classes:
    - ClauseUnit: One reviewable clause
    - Provenance: USER_SOURCED / MODEL_ADDED
    - ReferenceVocabulary: Normalized user words and phrases

Used By:
    - builder.controller: Build pipeline
    - cli: `review` command
"""

from .models import ClauseSignals, ClauseUnit, Provenance, ReferenceVocabulary
from .vocabulary import build_vocabulary, normalize_text, tokenize
from .patterns import STANDARD_CLAUSE_RULES, is_clause_heading, match_standard_patterns
from .classifier import classify_clause
from .segmenter import segment_document, split_clauses
from .reducer import flatten_clauses, model_added_indices, unknown_indices

__all__ = [
    # Models
    "ClauseSignals",
    "ClauseUnit",
    "Provenance",
    "ReferenceVocabulary",
    # Vocabulary
    "build_vocabulary",
    "normalize_text",
    "tokenize",
    # Patterns
    "STANDARD_CLAUSE_RULES",
    "is_clause_heading",
    "match_standard_patterns",
    # Functions
    "classify_clause",
    "segment_document",
    "split_clauses",
    "flatten_clauses",
    "model_added_indices",
    "unknown_indices",
]
