"""
Module: review.reducer

Purpose:
    Project a reviewed clause sequence back to plain text.

Key Functions:
    - flatten_clauses(): Join retained clauses with blank lines
    - model_added_indices(): Indices a reviewer would exclude to drop all flagged clauses

Dependencies:
    - review.models: ClauseUnit

Used By:
    - builder.controller: Text handed to the layout engine
"""

from __future__ import annotations

import logging
from typing import AbstractSet, FrozenSet, Iterable, Sequence

from .models import ClauseUnit

logger = logging.getLogger(__name__)

CLAUSE_SEPARATOR = "\n\n"


def flatten_clauses(
    clauses: Sequence[ClauseUnit],
    excluded: Iterable[int] = (),
) -> str:
    """
    Join the retained clauses into a single text.

    Pure projection: the clause sequence is not modified, so an excluded
    clause can be restored by calling again with a smaller exclusion set.
    Indices that name no clause are ignored.

    Args:
        clauses: Clause sequence from segment_document()
        excluded: sequence_index values to drop

    Returns:
        Retained clause texts in sequence order, separated by a blank line

    Example:
        >>> flatten_clauses(clauses, excluded={1})
        'First clause\\n\\nThird clause'
    """
    excluded_set: AbstractSet[int] = frozenset(excluded)
    ordered = sorted(clauses, key=lambda c: c.sequence_index)
    retained = [c.text for c in ordered if c.sequence_index not in excluded_set]

    logger.debug(f"Flattened {len(retained)}/{len(ordered)} clauses")
    return CLAUSE_SEPARATOR.join(retained)


def model_added_indices(clauses: Iterable[ClauseUnit]) -> FrozenSet[int]:
    """Return the sequence indices of every clause flagged as model-added."""
    return frozenset(c.sequence_index for c in clauses if c.is_model_added)


def unknown_indices(clauses: Iterable[ClauseUnit], excluded: Iterable[int]) -> FrozenSet[int]:
    """Return excluded indices that name no clause in the sequence."""
    known = {c.sequence_index for c in clauses}
    return frozenset(i for i in excluded if i not in known)
