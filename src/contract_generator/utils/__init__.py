"""
Utility functions for the contract generator.
"""

from .date_utils import add_years, format_spanish_date
from .image_utils import decode_data_url
from .pdf_utils import list_form_fields, pdf_page_count

__all__ = [
    "add_years",
    "format_spanish_date",
    "decode_data_url",
    "list_form_fields",
    "pdf_page_count",
]
