"""Centralized threshold and magic number configuration.

This module contains the hardcoded thresholds used by clause segmentation
and provenance classification.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SegmentationThresholds:
    """Thresholds for splitting generated text into clauses."""

    heading_max_length: int = 100  # Upper-case lines at or above this are prose, not headings


@dataclass(frozen=True)
class ClassificationThresholds:
    """Thresholds for user-sourced vs model-added classification."""

    min_token_length: int = 3  # Tokens shorter than this never count as user words
    min_phrase_length: int = 6  # Two-word phrases shorter than this are too generic
    model_added_min_length: int = 100  # Unmatched clauses longer than this are model-added


SEGMENTATION = SegmentationThresholds()
CLASSIFICATION = ClassificationThresholds()
