"""
Module: review.models

Purpose:
    Data models for clause review.
    Immutable dataclasses representing clauses, their provenance and the
    vocabulary derived from the user's own input.

Key Classes:
    - Provenance: User-sourced vs model-added label
    - ClauseUnit: One reviewable clause
    - ClauseSignals: Raw classifier evidence for one clause
    - ReferenceVocabulary: Normalized words/phrases from user input

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - review.segmenter: Creates ClauseUnits
    - review.classifier: Creates ClauseSignals
    - review.reducer: Flattens ClauseUnits
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Tuple


class Provenance(str, Enum):
    """Where a clause most likely came from."""

    USER_SOURCED = "user_sourced"
    MODEL_ADDED = "model_added"


@dataclass(frozen=True)
class ReferenceVocabulary:
    """
    Normalized vocabulary built from the user's free-text fields (immutable).

    Attributes:
        tokens: Lowercased words stripped of non-word characters, length > 2
        phrases: Adjacent word pairs joined by a single space, length >= 6

    Example:
        >>> vocab = build_vocabulary("rent 50000 monthly")
        >>> sorted(vocab.tokens)
        ['50000', 'monthly', 'rent']
        >>> sorted(vocab.phrases)
        ['50000 monthly', 'rent 50000']
    """

    tokens: FrozenSet[str] = frozenset()
    phrases: FrozenSet[str] = frozenset()

    @property
    def is_empty(self) -> bool:
        """True when the user supplied nothing usable."""
        return not self.tokens and not self.phrases


@dataclass(frozen=True)
class ClauseSignals:
    """
    Evidence gathered by the classifier for a single clause.

    Attributes:
        has_user_words: A clause token appears in the vocabulary
        has_user_phrases: A vocabulary phrase appears in the clause
        matched_patterns: Names of standard-clause rules that matched
        length: Character length of the clause text
        provenance: Final label derived from the signals above
    """

    has_user_words: bool
    has_user_phrases: bool
    matched_patterns: Tuple[str, ...]
    length: int
    provenance: Provenance

    @property
    def is_standard_clause(self) -> bool:
        """True if any boilerplate rule matched."""
        return bool(self.matched_patterns)


@dataclass(frozen=True)
class ClauseUnit:
    """
    A contiguous, blank-line-delimited span of document text (immutable).

    Attributes:
        text: Lines of the source covered by this clause, stripped, joined by "\\n"
        provenance: Classifier label
        sequence_index: Zero-based position in document order
        matched_patterns: Standard-clause rules that fired (for reviewers)
        has_user_words: Classifier signal, kept for display
        has_user_phrases: Classifier signal, kept for display

    Example:
        >>> clause = ClauseUnit("GOVERNING LAW", Provenance.MODEL_ADDED, 0)
        >>> clause.is_model_added
        True
    """

    text: str
    provenance: Provenance
    sequence_index: int
    matched_patterns: Tuple[str, ...] = field(default=())
    has_user_words: bool = False
    has_user_phrases: bool = False

    @property
    def is_model_added(self) -> bool:
        return self.provenance is Provenance.MODEL_ADDED

    @property
    def first_line(self) -> str:
        """First line of the clause, used as a short label in listings."""
        return self.text.split("\n", 1)[0]
