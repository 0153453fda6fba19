"""
Module: builder

Purpose:
    Building pipeline that turns generated legal text into a paginated
    PDF, applying the reviewer's clause exclusions first.

Key Functions:
    - build_document(): Main entry point for document generation
    - layout_document(): Pagination only

Key Classes:
    - BuilderConfig: Configuration for building
    - DocumentType: Document kinds offered to users
    - LayoutConfig: Page geometry and typography

Dependencies:
    - reportlab: Font metrics and PDF generation
    - legal_toolkit.review: Clause segmentation

Used By:
    - legal_toolkit.cli: Command line interface
"""

from .config import BuilderConfig, DocumentType
from .layout import LayoutConfig, LayoutResult, layout_document
from .controller import build_document, BuildResult, BuildError

__all__ = [
    # Config
    "BuilderConfig",
    "DocumentType",
    "LayoutConfig",
    # Layout
    "LayoutResult",
    "layout_document",
    # Controller
    "build_document",
    "BuildResult",
    "BuildError",
]
