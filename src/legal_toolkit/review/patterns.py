"""
Module: review.patterns

Purpose:
    Regex patterns for clause segmentation and boilerplate detection.
    Plain ordered rule lists, evaluated eagerly.

Key Functions:
    - is_clause_heading(): Heading boundary test used by the segmenter
    - match_standard_patterns(): Names of boilerplate rules a clause matches

Dependencies:
    - re (std)

Used By:
    - review.segmenter: Heading boundaries
    - review.classifier: Standard-clause detection
"""

from __future__ import annotations

import re
from typing import List, Pattern, Tuple

from legal_toolkit.common.thresholds import SEGMENTATION

# Heading boundary patterns (segmenter only; layout keeps its own test)
UPPER_WORDS_PATTERN = re.compile(r"[A-Z ]+")
NUMBERED_HEADING_PATTERN = re.compile(r"^[0-9]+\.\s+[A-Z]")
CAPS_HEADING_PATTERN = re.compile(r"^[A-Z][A-Z\s]+$")


def _rule(name: str, regex: str) -> Tuple[str, Pattern[str]]:
    return name, re.compile(regex, re.IGNORECASE)


# Legal boilerplate bank: (rule name, pattern). Order is display order.
STANDARD_CLAUSE_RULES: List[Tuple[str, Pattern[str]]] = [
    # Heading words
    _rule("whereas", r"\bwhereas\b"),
    _rule("now_therefore", r"\bnow,?\s+therefore\b"),
    _rule("in_witness", r"\bin\s+witness\b"),
    _rule("disclaimer", r"\bdisclaimer\b"),
    _rule("governing_law", r"\bgoverning\s+law\b"),
    _rule("dispute_resolution", r"\bdispute\s+resolution\b"),
    _rule("termination", r"\btermination\b"),
    _rule("obligations", r"\bobligations\b"),
    _rule("definitions", r"\bdefinitions\b"),
    _rule("severability", r"\bseverability\b"),
    _rule("force_majeure", r"\bforce\s+majeure\b"),
    _rule("entire_agreement", r"\bentire\s+agreement\b"),
    _rule("amendment", r"\bamendments?\b"),
    _rule("waiver", r"\bwaiver\b"),
    _rule("notices", r"\bnotices\b"),
    _rule("assignment", r"\bassignment\b"),
    _rule("indemnification", r"\bindemnification\b"),
    # Boilerplate phrases
    _rule("governed_by", r"\bthis\s+agreement\s+shall\s+be\s+governed\b"),
    _rule("any_dispute", r"\bany\s+dispute\s+arising\b"),
    _rule("parties_hereto", r"\bthe\s+parties\s+hereto\b"),
]


def is_clause_heading(line: str) -> bool:
    """
    Check whether a line starts a new clause.

    A line is a heading boundary if it is short and entirely upper-case
    letters and spaces, a numbered clause head ("1. DEFINITIONS"), or an
    all-caps line starting with a letter.

    Args:
        line: A single non-blank line (surrounding whitespace ignored)

    Returns:
        True if the line opens a new clause

    Example:
        >>> is_clause_heading("1. Definitions")
        True
        >>> is_clause_heading("DISCLAIMER:")
        False
    """
    stripped = line.strip()
    if not stripped:
        return False
    if len(stripped) < SEGMENTATION.heading_max_length and UPPER_WORDS_PATTERN.fullmatch(stripped):
        return True
    if NUMBERED_HEADING_PATTERN.match(stripped):
        return True
    return CAPS_HEADING_PATTERN.match(stripped) is not None


def match_standard_patterns(text: str) -> Tuple[str, ...]:
    """
    Return the names of every boilerplate rule the text matches.

    All rules are evaluated; the result keeps rule order.

    Example:
        >>> match_standard_patterns("GOVERNING LAW\\nThis Agreement shall be governed by...")
        ('governing_law', 'governed_by')
    """
    return tuple(name for name, pattern in STANDARD_CLAUSE_RULES if pattern.search(text))
