"""
Module: builder.output.renderer

Purpose:
    Render LayoutResult to PDF using ReportLab.
    Each Page becomes one PDF page with its runs drawn at their
    baselines. Layout coordinates are already PDF points, so no
    conversion happens here.

Key Functions:
    - render_to_pdf(): Write a PDF file
    - render_to_bytes(): Build the PDF in memory

Dependencies:
    - reportlab: PDF generation
    - builder.layout.models: LayoutResult, Page

Used By:
    - builder.controller: Pipeline orchestration
    - cli: `render` command
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import BinaryIO, Optional, Union

from reportlab.pdfgen import canvas

from legal_toolkit.builder.layout.config import LayoutConfig
from legal_toolkit.builder.layout.models import FontWeight, LayoutResult, Page, PlacedRun

logger = logging.getLogger(__name__)


def render_to_pdf(
    layout: LayoutResult,
    output_path: Path,
    *,
    config: Optional[LayoutConfig] = None,
    title: Optional[str] = None,
) -> None:
    """
    Render layout result to a PDF file.

    Args:
        layout: Layout result from layout_document()
        output_path: Path to write PDF
        config: Layout configuration (font names)
        title: Optional PDF metadata title

    Returns:
        None

    Raises:
        OSError: If PDF cannot be written

    Example:
        >>> render_to_pdf(layout, Path("output/rent-agreement.pdf"))
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    _render(layout, str(output_path), config or LayoutConfig(), title)
    logger.info(f"Rendered {layout.page_count} pages to {output_path}")


def render_to_bytes(
    layout: LayoutResult,
    *,
    config: Optional[LayoutConfig] = None,
    title: Optional[str] = None,
) -> bytes:
    """
    Render layout result to PDF bytes.

    Example:
        >>> data = render_to_bytes(layout)
        >>> data[:5]
        b'%PDF-'
    """
    buf = io.BytesIO()
    _render(layout, buf, config or LayoutConfig(), title)
    logger.debug(f"Rendered {layout.page_count} pages in memory ({buf.tell()} bytes)")
    return buf.getvalue()


def _render(
    layout: LayoutResult,
    target: Union[str, BinaryIO],
    config: LayoutConfig,
    title: Optional[str],
) -> None:
    if layout.page_count == 0:
        logger.warning("Empty layout, creating empty PDF")

    first = layout.pages[0] if layout.pages else None
    pagesize = (first.width, first.height) if first else (config.page_width, config.page_height)

    c = canvas.Canvas(target, pagesize=pagesize)
    if title:
        c.setTitle(title)

    for page in layout.pages:
        c.setPageSize((page.width, page.height))
        _render_page(c, page, config)
        c.showPage()

    c.save()


def _render_page(c: canvas.Canvas, page: Page, config: LayoutConfig) -> None:
    """Draw every run of a single page."""
    for run in page.runs:
        _draw_run(c, run, config)


def _draw_run(c: canvas.Canvas, run: PlacedRun, config: LayoutConfig) -> None:
    font_name = config.bold_font if run.font_weight is FontWeight.BOLD else config.body_font
    c.setFont(font_name, run.font_size)
    c.drawString(run.x, run.y, run.text)
