"""
Module: builder.layout.paginator

Purpose:
    Lay text lines out onto fixed-size pages with word wrapping,
    heading emphasis and automatic page breaks.

Key Functions:
    - layout_document(): Main layout function
    - wrap_words(): Greedy word wrap against a measured width
    - is_layout_heading(): Heading test used for rendering

Algorithm:
    1. Page 0 gets the title, centered, then the cursor drops by the title block
    2. Blank line -> cursor drops by one blank line, nothing placed
    3. Heading -> extra spacing (not on the first line), one bold run
    4. Body -> greedy wrap, one run per wrapped line
    5. Before every placement: if the cursor is below the bottom margin,
       start a new page

Dependencies:
    - builder.layout.config: LayoutConfig
    - builder.layout.metrics: TextMeasurer, reportlab_measure
    - builder.layout.models: PlacedRun, Page, LayoutResult

Used By:
    - builder.controller: Main build controller
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence, Union

from .config import DEFAULT_TITLE, LayoutConfig
from .metrics import TextMeasurer, reportlab_measure
from .models import FontWeight, LayoutResult, Page, PlacedRun

logger = logging.getLogger(__name__)

HEADING_MAX_LENGTH = 100
NUMBERED_HEADING_PATTERN = re.compile(r"^[0-9]+\.\s+[A-Z]")
CAPS_HEADING_PATTERN = re.compile(r"^[A-Z][A-Z\s]+$")


class _LayoutCursor:
    """
    Vertical writing position plus the pages built so far.

    Pages are append-only: once a page is closed its runs are frozen into
    a Page and never revisited.
    """

    def __init__(self, config: LayoutConfig) -> None:
        self._config = config
        self._pages: List[Page] = []
        self._runs: List[PlacedRun] = []
        self.page_index = 0
        self.y = config.top_y

    def ensure_room(self) -> None:
        """Break to a new page if the cursor is below the bottom margin."""
        if self.y < self._config.margin_bottom:
            self.new_page()

    def new_page(self) -> None:
        self._pages.append(self._close_page())
        self.page_index += 1
        self._runs = []
        self.y = self._config.top_y
        logger.debug(f"Page break: starting page {self.page_index}")

    def place(self, text: str, x: float, font_size: float, font_weight: FontWeight) -> PlacedRun:
        run = PlacedRun(text=text, x=x, y=self.y, font_size=font_size, font_weight=font_weight)
        self._runs.append(run)
        return run

    def advance(self, amount: float) -> None:
        self.y -= amount

    def finish(self) -> tuple[Page, ...]:
        """Close the current page and return every page."""
        self._pages.append(self._close_page())
        return tuple(self._pages)

    def _close_page(self) -> Page:
        return Page(
            index=self.page_index,
            width=self._config.page_width,
            height=self._config.page_height,
            runs=tuple(self._runs),
        )


def is_layout_heading(line: str) -> bool:
    """
    Check whether a (stripped) line is rendered as a heading.

    A heading is shorter than 100 characters and is either unchanged by
    upper-casing, a numbered head ("1. DEFINITIONS") or an all-caps line.

    Example:
        >>> is_layout_heading("DISCLAIMER:")
        True
        >>> is_layout_heading("The Tenant shall pay rent.")
        False
    """
    if len(line) >= HEADING_MAX_LENGTH:
        return False
    return (
        line == line.upper()
        or NUMBERED_HEADING_PATTERN.match(line) is not None
        or CAPS_HEADING_PATTERN.match(line) is not None
    )


def wrap_words(
    line: str,
    max_width: float,
    measure: TextMeasurer,
    font_name: str,
    font_size: float,
) -> List[str]:
    """
    Greedily wrap a line on whitespace.

    Each candidate run is measured as a whole; a word that would push the
    run past ``max_width`` starts the next run. A single word wider than
    ``max_width`` becomes its own run.

    Args:
        line: Text to wrap
        max_width: Usable width in points
        measure: Width function
        font_name: Font used for measurement
        font_size: Font size used for measurement

    Returns:
        Wrapped runs; empty only for a blank line

    Example:
        >>> wrap_words("aa bb cc", 5, lambda t, s, f: len(t), "Helvetica", 11)
        ['aa bb', 'cc']
    """
    runs: List[str] = []
    current = ""

    for word in line.split():
        candidate = f"{current} {word}" if current else word
        if current and measure(candidate, font_size, font_name) > max_width:
            runs.append(current)
            current = word
        else:
            current = candidate

    if current:
        runs.append(current)
    return runs


def layout_document(
    title: str,
    body: Union[str, Sequence[str]],
    config: Optional[LayoutConfig] = None,
    measure: Optional[TextMeasurer] = None,
) -> LayoutResult:
    """
    Lay a titled document out onto pages.

    Every non-blank input line appears, in order, as one or more runs.
    Oversized content is placed anyway and reported in ``warnings``.

    Args:
        title: Document title ("Legal Document" when empty)
        body: Body text, either one string or a sequence of lines
        config: Layout configuration (defaults to A4)
        measure: Width function (defaults to ReportLab metrics)

    Returns:
        LayoutResult with at least one page

    Example:
        >>> result = layout_document("Rent Agreement", "1. DEFINITIONS\\nThe Tenant ...")
        >>> result.pages[0].runs[0].text
        'Rent Agreement'
    """
    config = config or LayoutConfig()
    measure = measure or reportlab_measure
    warnings: List[str] = []

    lines = body.splitlines() if isinstance(body, str) else list(body)
    cursor = _LayoutCursor(config)

    _place_title(cursor, title or DEFAULT_TITLE, config, measure, warnings)

    is_first_line = True
    content_lines = 0

    for raw_line in lines:
        line = raw_line.strip()
        if not line:
            cursor.advance(config.blank_line_height)
            continue

        cursor.ensure_room()

        if is_layout_heading(line):
            if not is_first_line:
                cursor.advance(config.heading_spacing)
                cursor.ensure_room()
            width = measure(line, config.heading_size, config.bold_font)
            if width > config.available_width:
                _warn(warnings, f"Heading overflows page {cursor.page_index}: {line[:40]!r}")
            cursor.place(line, config.margin_left, config.heading_size, FontWeight.BOLD)
            cursor.advance(config.heading_line_height)
        else:
            runs = wrap_words(line, config.available_width, measure, config.body_font, config.body_size)
            for run_text in runs:
                cursor.ensure_room()
                if measure(run_text, config.body_size, config.body_font) > config.available_width:
                    _warn(warnings, f"Word overflows page {cursor.page_index}: {run_text[:40]!r}")
                cursor.place(run_text, config.margin_left, config.body_size, FontWeight.NORMAL)
                cursor.advance(config.body_line_height)

        is_first_line = False
        content_lines += 1

    pages = cursor.finish()
    logger.info(f"Laid out {content_lines} lines onto {len(pages)} pages")
    return LayoutResult(pages=pages, warnings=warnings)


def _place_title(
    cursor: _LayoutCursor,
    title: str,
    config: LayoutConfig,
    measure: TextMeasurer,
    warnings: List[str],
) -> None:
    """Center the title on the first baseline of page 0."""
    title_width = measure(title, config.title_size, config.bold_font)
    if title_width > config.page_width:
        _warn(warnings, f"Title wider than page: {title_width:.1f}pt > {config.page_width:.1f}pt")
    x = max(0.0, (config.page_width - title_width) / 2)
    cursor.place(title, x, config.title_size, FontWeight.BOLD)
    cursor.advance(config.title_block_height)


def _warn(warnings: List[str], message: str) -> None:
    logger.warning(message)
    warnings.append(message)
