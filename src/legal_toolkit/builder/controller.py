"""
Module: builder.controller

Purpose:
    Orchestrate the complete document building pipeline.
    Segment → Classify → Exclude → Flatten → Layout → Render

Key Functions:
    - build_document(): Main entry point for building a document

Key Classes:
    - BuildResult: Complete build result
    - BuildError: Exception for build failures

Dependencies:
    - review: Clause segmentation and reduction
    - builder.layout: Pagination
    - builder.output: PDF rendering

Used By:
    - cli: `render` command
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import FrozenSet, List, Optional, Tuple

from legal_toolkit.review import (
    ClauseUnit,
    flatten_clauses,
    model_added_indices,
    segment_document,
    unknown_indices,
)

from .config import BuilderConfig
from .layout import LayoutResult, TextMeasurer, layout_document
from .output import render_to_bytes

logger = logging.getLogger(__name__)


class BuildError(Exception):
    """Error during build pipeline."""
    pass


@dataclass(frozen=True)
class BuildResult:
    """
    Complete build result (immutable).

    Attributes:
        clauses: Clause sequence with provenance labels
        excluded: Indices actually removed (reviewer + model-added)
        reviewed_text: Text handed to the layout engine
        layout: Paginated layout
        pdf_bytes: Rendered PDF
        pdf_path: Path of the written PDF (if requested)
        metadata: Build metadata dictionary
        warnings: Any warnings during build

    Example:
        >>> result = build_document(text, config)
        >>> print(f"Generated {result.page_count} pages from {len(result.clauses)} clauses")
    """

    clauses: Tuple[ClauseUnit, ...]
    excluded: FrozenSet[int]
    reviewed_text: str
    layout: LayoutResult
    pdf_bytes: bytes
    pdf_path: Optional[Path]
    metadata: dict
    warnings: Tuple[str, ...]

    @property
    def page_count(self) -> int:
        return self.layout.page_count


def build_document(
    text: str,
    config: BuilderConfig,
    *,
    measure: Optional[TextMeasurer] = None,
) -> BuildResult:
    """
    Build a document from generated text.

    Pipeline:
    1. Segment and classify clauses
    2. Resolve exclusions (reviewer indices, optionally all model-added)
    3. Flatten retained clauses (raw text is laid out when nothing is excluded)
    4. Paginate
    5. Render PDF, optionally writing it to config.output_path

    Args:
        text: Generated document text
        config: Build configuration
        measure: Optional width function for layout (defaults to ReportLab)

    Returns:
        BuildResult with clauses, layout and PDF

    Raises:
        BuildError: If the PDF cannot be written

    Example:
        >>> config = BuilderConfig(
        ...     title=DocumentType.RENT_AGREEMENT,
        ...     key_terms="rent 50000 monthly",
        ...     output_path=Path("output/rent.pdf"),
        ... )
        >>> result = build_document(generated_text, config)
    """
    warnings: List[str] = []
    start_time = time.perf_counter()
    title = config.resolved_title

    logger.info(f"Starting build for {title!r} ({len(text)} chars)")

    # 1. Review
    clauses = segment_document(text, config.key_terms, config.extra_notes)

    # 2. Exclusions
    unknown = unknown_indices(clauses, config.excluded)
    if unknown:
        message = f"Ignoring unknown clause indices: {sorted(unknown)}"
        logger.warning(message)
        warnings.append(message)

    excluded = frozenset(config.excluded) - unknown
    if config.exclude_model_added:
        excluded |= model_added_indices(clauses)

    # 3. Flatten
    if excluded:
        reviewed_text = flatten_clauses(clauses, excluded)
        logger.info(f"Excluded {len(excluded)} of {len(clauses)} clauses")
    else:
        reviewed_text = text

    # 4. Layout
    layout = layout_document(title, reviewed_text, config.layout, measure)
    warnings.extend(layout.warnings)

    # 5. Render
    pdf_bytes = render_to_bytes(layout, config=config.layout, title=title)
    pdf_path = None
    if config.output_path is not None:
        pdf_path = _write_pdf(pdf_bytes, config.output_path)

    duration = time.perf_counter() - start_time
    metadata = {
        "title": title,
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "clause_count": len(clauses),
        "model_added_count": len(model_added_indices(clauses)),
        "excluded": sorted(excluded),
        "page_count": layout.page_count,
        "duration_seconds": round(duration, 3),
    }

    logger.info(f"Build complete: {layout.page_count} pages in {duration:.2f}s")

    return BuildResult(
        clauses=clauses,
        excluded=excluded,
        reviewed_text=reviewed_text,
        layout=layout,
        pdf_bytes=pdf_bytes,
        pdf_path=pdf_path,
        metadata=metadata,
        warnings=tuple(warnings),
    )


def _write_pdf(pdf_bytes: bytes, output_path: Path) -> Path:
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(pdf_bytes)
    except OSError as e:
        raise BuildError(f"Failed to write PDF to {output_path}: {e}") from e
    logger.info(f"Wrote {len(pdf_bytes)} bytes to {output_path}")
    return output_path
