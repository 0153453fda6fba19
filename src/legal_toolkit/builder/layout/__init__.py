"""
Module: builder.layout

Purpose:
    Page layout for generated documents.
    Converts a title and body lines into positioned text runs on pages.

Key Functions:
    - layout_document(): Main entry point for layout
    - wrap_words(): Greedy measured word wrap
    - reportlab_measure(): Default text width function

Key Classes:
    - LayoutConfig: Configuration for page layout
    - PlacedRun: Positioned text
    - Page: Single page layout
    - LayoutResult: All pages plus warnings

Dependencies:
    - reportlab: Font metrics

Used By:
    - builder.controller: Main build controller
"""

from .config import DEFAULT_TITLE, LayoutConfig
from .models import FontWeight, PlacedRun, Page, LayoutResult
from .metrics import TextMeasurer, reportlab_measure
from .paginator import is_layout_heading, layout_document, wrap_words

__all__ = [
    # Config
    "DEFAULT_TITLE",
    "LayoutConfig",
    # Models
    "FontWeight",
    "PlacedRun",
    "Page",
    "LayoutResult",
    # Metrics
    "TextMeasurer",
    "reportlab_measure",
    # Functions
    "is_layout_heading",
    "layout_document",
    "wrap_words",
]
