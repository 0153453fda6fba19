"""
Module: builder.config

Purpose:
    Configuration dataclass for the document building pipeline. Immutable
    configuration with validation on construction.

Key Classes:
    - DocumentType: Document kinds offered to users
    - BuilderConfig: Main configuration for building a document

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - builder.controller: Main build controller
    - cli: Argument mapping
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import FrozenSet, Optional, Union

from .layout.config import DEFAULT_TITLE, LayoutConfig


class DocumentType(str, Enum):
    """Document types users can request a draft for."""

    RENT_AGREEMENT = "Rent Agreement"
    EMPLOYMENT_CONTRACT = "Employment Contract"
    LEGAL_NOTICE = "Legal Notice (Pre-litigation)"
    NDA = "Non-Disclosure Agreement (NDA)"
    PARTNERSHIP_AGREEMENT = "Partnership Agreement"


@dataclass(frozen=True)
class BuilderConfig:
    """
    Configuration for building a document (immutable).

    Attributes:
        title: Page header, a DocumentType or free text ("Legal Document" if empty)
        key_terms: User's key terms, used for provenance classification
        extra_notes: User's additional notes, used for provenance classification
        excluded: Clause sequence indices removed by the reviewer
        exclude_model_added: Also remove every clause flagged as model-added
        output_path: Where to write the PDF (None = bytes only)
        layout: Page layout configuration

    Example:
        >>> config = BuilderConfig(
        ...     title=DocumentType.RENT_AGREEMENT,
        ...     key_terms="rent 50000 monthly",
        ...     excluded=frozenset({3}),
        ... )
    """

    title: Union[str, DocumentType] = DEFAULT_TITLE
    key_terms: str = ""
    extra_notes: str = ""

    # Review
    excluded: FrozenSet[int] = frozenset()
    exclude_model_added: bool = False

    # Output
    output_path: Optional[Path] = None
    layout: LayoutConfig = field(default_factory=LayoutConfig)

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        negative = sorted(i for i in self.excluded if i < 0)
        if negative:
            raise ValueError(f"excluded indices must be non-negative: {negative}")

    @property
    def resolved_title(self) -> str:
        """Title text as it is drawn on the first page."""
        if isinstance(self.title, DocumentType):
            return self.title.value
        return self.title or DEFAULT_TITLE
