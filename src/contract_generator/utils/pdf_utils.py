"""
PDF utility functions for inspecting contract templates and outputs.
"""

from io import BytesIO
from pathlib import Path

from PyPDF2 import PdfReader

from ..document.template import load_template


def _open_reader(pdf_input: bytes | str | Path) -> PdfReader:
    if isinstance(pdf_input, bytes):
        return PdfReader(BytesIO(pdf_input))
    return PdfReader(str(pdf_input))


def pdf_page_count(pdf_input: bytes | str | Path) -> int:
    """
    Get the number of pages in a PDF.

    Args:
        pdf_input: PDF as bytes, file path string, or Path object

    Returns:
        Number of pages in the PDF
    """
    return len(_open_reader(pdf_input).pages)


def list_form_fields(pdf_input: bytes | str | Path) -> dict[str, list[dict]]:
    """
    List the named form fields of a PDF with their widget rectangles.

    Args:
        pdf_input: PDF as bytes, file path string, or Path object

    Returns:
        Mapping of field name to widgets, each ``{"page", "x", "y", "width", "height"}``
    """
    data = pdf_input if isinstance(pdf_input, bytes) else Path(pdf_input).read_bytes()
    template = load_template(data)
    if template.form is None:
        return {}

    return {
        form_field.name: [
            {
                "page": widget.page_index,
                "x": widget.rect.x,
                "y": widget.rect.y,
                "width": widget.rect.width,
                "height": widget.rect.height,
            }
            for widget in form_field.widgets
        ]
        for form_field in template.form.fields
    }
