"""
Module: builder.layout.models

Purpose:
    Data models for page layout.
    Immutable dataclasses representing placed text runs and pages.

Key Classes:
    - FontWeight: Normal or bold
    - PlacedRun: Text positioned on a page
    - Page: Complete page layout
    - LayoutResult: Final layout output

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.paginator: Creates Pages
    - builder.output.renderer: Draws Pages
    - core.serialization: JSON artifacts
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class FontWeight(str, Enum):
    """Font weight of a placed run."""

    NORMAL = "normal"
    BOLD = "bold"


@dataclass(frozen=True)
class PlacedRun:
    """
    A single line of text positioned on a page (immutable).

    Coordinates follow PDF conventions: origin bottom-left, ``y`` is the
    text baseline.

    Attributes:
        text: Text to draw, already wrapped
        x: Left edge
        y: Baseline
        font_size: Font size in points
        font_weight: NORMAL for body text, BOLD for title and headings

    Example:
        >>> run = PlacedRun("1. DEFINITIONS", x=50, y=761.89, font_size=14, font_weight=FontWeight.BOLD)
        >>> run.is_bold
        True
    """

    text: str
    x: float
    y: float
    font_size: float
    font_weight: FontWeight = FontWeight.NORMAL

    @property
    def is_bold(self) -> bool:
        return self.font_weight is FontWeight.BOLD


@dataclass(frozen=True)
class Page:
    """
    Complete layout for a single page.

    Attributes:
        index: Page number (0-indexed)
        width: Page width in points
        height: Page height in points
        runs: Placed runs in placement order

    Example:
        >>> page = Page(index=0, width=595.28, height=841.89, runs=(r1, r2))
        >>> page.run_count
        2
    """

    index: int
    width: float
    height: float
    runs: tuple[PlacedRun, ...] = ()

    @property
    def run_count(self) -> int:
        """Number of runs on this page."""
        return len(self.runs)

    @property
    def is_empty(self) -> bool:
        """Check if page has no runs."""
        return len(self.runs) == 0

    @property
    def texts(self) -> list[str]:
        """Run texts in placement order."""
        return [run.text for run in self.runs]


@dataclass(frozen=True)
class LayoutResult:
    """
    Final layout output with diagnostics.

    Attributes:
        pages: Tuple of Pages, never empty for engine output
        warnings: Overflow notices (oversized title, heading or word)

    Example:
        >>> result = layout_document("Rent Agreement", text)
        >>> result.page_count
        2
    """

    pages: tuple[Page, ...]
    warnings: list[str] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        """Number of pages in layout."""
        return len(self.pages)

    @property
    def total_runs(self) -> int:
        """Total number of placed runs across all pages."""
        return sum(p.run_count for p in self.pages)

    def iter_runs(self):
        """Yield (page_index, run) pairs in document order."""
        for page in self.pages:
            for run in page.runs:
                yield page.index, run
