"""
Module: builder.layout.config

Purpose:
    Configuration for the page layout engine.
    Defines page dimensions, margins, font sizes and vertical spacing.

Key Classes:
    - LayoutConfig: Immutable layout configuration

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.paginator: Text placement
    - builder.output.renderer: Page size and font names
"""

from __future__ import annotations

from dataclasses import dataclass


# Standard A4 page dimensions in PDF points (1/72 inch)
DEFAULT_PAGE_WIDTH_PT = 595.28
DEFAULT_PAGE_HEIGHT_PT = 841.89

DEFAULT_TITLE = "Legal Document"


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for page layout (immutable).

    All lengths are PDF points. Y coordinates grow upwards from the page
    bottom, so the cursor starts at ``top_y`` and decreases.

    Attributes:
        page_width: Page width
        page_height: Page height
        margin_top: Distance from page top to the first baseline
        margin_bottom: Lowest baseline allowed for a placed run
        margin_left: Left text edge
        margin_right: Right margin used for wrapping
        title_size: Font size of the document title
        title_block_height: Cursor advance after the title
        heading_size: Font size of heading lines
        heading_gap: Extra advance after a heading (on top of heading_size)
        heading_spacing: Extra space before a heading that is not the first line
        body_size: Font size of wrapped body text
        line_gap: Extra advance after a body run (on top of body_size)
        body_font: Font name for body text
        bold_font: Font name for the title and headings

    Example:
        >>> config = LayoutConfig()
        >>> config.available_width
        495.28  # page_width - margins
    """

    # Page dimensions
    page_width: float = DEFAULT_PAGE_WIDTH_PT
    page_height: float = DEFAULT_PAGE_HEIGHT_PT

    # Margins
    margin_top: float = 50
    margin_bottom: float = 50
    margin_left: float = 50
    margin_right: float = 50

    # Title
    title_size: float = 20
    title_block_height: float = 30

    # Headings
    heading_size: float = 14
    heading_gap: float = 4
    heading_spacing: float = 10

    # Body
    body_size: float = 11
    line_gap: float = 4

    # Fonts (ReportLab standard Type 1 names)
    body_font: str = "Helvetica"
    bold_font: str = "Helvetica-Bold"

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_width <= 0:
            raise ValueError(f"page_width must be positive: {self.page_width}")
        if self.page_height <= 0:
            raise ValueError(f"page_height must be positive: {self.page_height}")
        if self.available_width <= 0:
            raise ValueError("Margins exceed page width")
        if self.available_height <= 0:
            raise ValueError("Margins exceed page height")
        for name in ("title_size", "heading_size", "body_size"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive: {getattr(self, name)}")
        for name in ("title_block_height", "heading_gap", "heading_spacing", "line_gap"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative: {getattr(self, name)}")

    @property
    def available_width(self) -> float:
        """Width available for wrapped text (excluding margins)."""
        return self.page_width - self.margin_left - self.margin_right

    @property
    def available_height(self) -> float:
        """Height between the top and bottom margins."""
        return self.page_height - self.margin_top - self.margin_bottom

    @property
    def top_y(self) -> float:
        """Baseline of the first run on a fresh page."""
        return self.page_height - self.margin_top

    @property
    def body_line_height(self) -> float:
        """Cursor advance after one body run."""
        return self.body_size + self.line_gap

    @property
    def heading_line_height(self) -> float:
        """Cursor advance after one heading run."""
        return self.heading_size + self.heading_gap

    @property
    def blank_line_height(self) -> float:
        """Cursor advance for a blank source line."""
        return self.body_size
