"""
Module: builder.layout.metrics

Purpose:
    Text width measurement for the layout engine.
    Measurement is injected into the paginator so layout can be tested
    without font files; the default uses ReportLab's AFM metrics for the
    standard PDF fonts.

Key Functions:
    - reportlab_measure(): Exact width of a string in a standard font

Dependencies:
    - reportlab.pdfbase.pdfmetrics: Font metrics

Used By:
    - builder.layout.paginator: Default TextMeasurer
"""

from __future__ import annotations

from typing import Callable

from reportlab.pdfbase import pdfmetrics

# (text, font_size, font_name) -> width in points
TextMeasurer = Callable[[str, float, str], float]


def reportlab_measure(text: str, font_size: float, font_name: str) -> float:
    """
    Measure text width using ReportLab font metrics.

    Args:
        text: Text to measure
        font_size: Font size in points
        font_name: Registered font name, e.g. "Helvetica-Bold"

    Returns:
        Width in points

    Example:
        >>> reportlab_measure("Agreement", 11, "Helvetica") > 0
        True
    """
    return pdfmetrics.stringWidth(text, font_name, font_size)
