"""Shared constants and thresholds used across review and builder."""

from .thresholds import (
    ClassificationThresholds,
    SegmentationThresholds,
    CLASSIFICATION,
    SEGMENTATION,
)

__all__ = [
    "ClassificationThresholds",
    "SegmentationThresholds",
    "CLASSIFICATION",
    "SEGMENTATION",
]
