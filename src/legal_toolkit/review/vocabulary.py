"""
Module: review.vocabulary

Purpose:
    Text normalization shared by the classifier and the reference
    vocabulary, plus construction of the vocabulary itself.

Key Functions:
    - tokenize(): Lowercase, split and strip a text into words
    - normalize_text(): Lowercase and collapse whitespace
    - build_vocabulary(): Build ReferenceVocabulary from user fields

Dependencies:
    - re (std)
    - review.models: ReferenceVocabulary

Used By:
    - review.classifier: Token/phrase membership tests
    - review.segmenter: Vocabulary built once per run
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Set

from legal_toolkit.common.thresholds import CLASSIFICATION

from .models import ReferenceVocabulary

logger = logging.getLogger(__name__)

_SPLIT_PATTERN = re.compile(r"[\s,;:]+")
_NON_WORD_PATTERN = re.compile(r"\W+")
_WHITESPACE_PATTERN = re.compile(r"\s+")


def tokenize(text: str) -> List[str]:
    """
    Split text into normalized words.

    Lowercases, splits on runs of whitespace/commas/semicolons/colons and
    strips non-word characters from each piece. Empty pieces are dropped;
    short words are kept so callers can apply their own length rule.

    Args:
        text: Raw text

    Returns:
        Normalized words in original order

    Example:
        >>> tokenize("Rent: Rs. 50,000 (monthly)")
        ['rent', 'rs', '50', '000', 'monthly']
    """
    words = []
    for piece in _SPLIT_PATTERN.split(text.lower()):
        word = _NON_WORD_PATTERN.sub("", piece)
        if word:
            words.append(word)
    return words


def normalize_text(text: str) -> str:
    """Lowercase text and collapse whitespace runs to single spaces."""
    return _WHITESPACE_PATTERN.sub(" ", text.lower()).strip()


def build_vocabulary(key_terms: str, extra_notes: str = "") -> ReferenceVocabulary:
    """
    Build the reference vocabulary from the user's free-text fields.

    Phrases are taken within a field, never across the boundary between
    key terms and extra notes.

    Args:
        key_terms: "Key terms" field as typed by the user
        extra_notes: Optional "additional notes" field

    Returns:
        ReferenceVocabulary with tokens and phrases
    """
    tokens: Set[str] = set()
    phrases: Set[str] = set()

    for field_text in _non_empty(key_terms, extra_notes):
        words = tokenize(field_text)
        tokens.update(w for w in words if len(w) >= CLASSIFICATION.min_token_length)
        for first, second in zip(words, words[1:]):
            phrase = f"{first} {second}"
            if len(phrase) >= CLASSIFICATION.min_phrase_length:
                phrases.add(phrase)

    logger.debug(f"Built vocabulary with {len(tokens)} tokens and {len(phrases)} phrases")
    return ReferenceVocabulary(tokens=frozenset(tokens), phrases=frozenset(phrases))


def _non_empty(*fields: str) -> Iterable[str]:
    return (f for f in fields if f and f.strip())
