"""
Unit tests for PDF rendering.

Real PDFs are inspected with pypdf; canvas calls are checked with a
patched ReportLab Canvas.
"""

import io
from unittest.mock import call, patch

from pypdf import PdfReader

from legal_toolkit.builder.layout import layout_document
from legal_toolkit.builder.output import render_to_bytes, render_to_pdf


class TestRenderToBytes:
    """Tests for render_to_bytes()."""

    def test_render_when_layout_then_pdf_with_one_page_per_layout_page(self, small_config, stub_measure):
        # Arrange
        layout = layout_document("Deed", "\n".join(f"line {i}" for i in range(30)), small_config, stub_measure)

        # Act
        data = render_to_bytes(layout, config=small_config, title="Deed")

        # Assert
        assert data.startswith(b"%PDF")
        reader = PdfReader(io.BytesIO(data))
        assert len(reader.pages) == layout.page_count

    def test_render_when_layout_then_page_size_matches_layout(self, small_config, stub_measure):
        layout = layout_document("Deed", "alpha", small_config, stub_measure)

        reader = PdfReader(io.BytesIO(render_to_bytes(layout, config=small_config)))

        box = reader.pages[0].mediabox
        assert float(box.width) == 200
        assert float(box.height) == 200

    def test_render_when_sample_contract_then_text_extractable(self, sample_contract):
        layout = layout_document("Rent Agreement", sample_contract)

        reader = PdfReader(io.BytesIO(render_to_bytes(layout, title="Rent Agreement")))

        text = reader.pages[0].extract_text()
        assert "Rent Agreement" in text
        assert "GOVERNING LAW" in text
        assert reader.metadata.title == "Rent Agreement"


class TestCanvasCalls:
    """Tests for font selection and run placement."""

    @patch("reportlab.pdfgen.canvas.Canvas")
    def test_render_when_heading_and_body_then_bold_and_normal_fonts(self, mock_canvas_cls, small_config, stub_measure):
        # Arrange
        layout = layout_document("Deed", "1. DEFINITIONS\nterms follow", small_config, stub_measure)
        mock_canvas = mock_canvas_cls.return_value

        # Act
        render_to_bytes(layout, config=small_config)

        # Assert
        assert mock_canvas.setFont.call_args_list == [
            call("Helvetica-Bold", 20),
            call("Helvetica-Bold", 14),
            call("Helvetica", 10),
        ]
        assert mock_canvas.drawString.call_args_list == [
            call(80, 180, "Deed"),
            call(20, 150, "1. DEFINITIONS"),
            call(20, 132, "terms follow"),
        ]
        assert mock_canvas.showPage.call_count == 1
        mock_canvas.save.assert_called_once()

    @patch("reportlab.pdfgen.canvas.Canvas")
    def test_render_when_no_title_then_metadata_untouched(self, mock_canvas_cls, small_config, stub_measure):
        layout = layout_document("Deed", "", small_config, stub_measure)

        render_to_bytes(layout, config=small_config)

        mock_canvas_cls.return_value.setTitle.assert_not_called()


class TestRenderToPdf:
    """Tests for render_to_pdf()."""

    def test_render_when_nested_output_path_then_directories_created(self, tmp_path, small_config, stub_measure):
        layout = layout_document("Deed", "alpha\nbeta", small_config, stub_measure)
        output_path = tmp_path / "out" / "nested" / "deed.pdf"

        render_to_pdf(layout, output_path, config=small_config)

        assert output_path.exists()
        assert len(PdfReader(output_path).pages) == 1
