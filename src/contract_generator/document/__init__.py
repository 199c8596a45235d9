"""
PDF composition stages: template loading, fonts, signature, form filling and layout.
"""

from .filler import fill_form
from .fonts import Font, ResolvedFonts, resolve_fonts
from .form import Form, FormField
from .layout import (
    LayoutSettings,
    capture_layout_boxes,
    fit_within,
    resolve_signature_placement,
    resolve_text_origin,
)
from .signature import SignatureImage, draw_lateral_signatures
from .template import Template, TemplatePage, load_template

__all__ = [
    "fill_form",
    "Font",
    "ResolvedFonts",
    "resolve_fonts",
    "Form",
    "FormField",
    "LayoutSettings",
    "capture_layout_boxes",
    "fit_within",
    "resolve_signature_placement",
    "resolve_text_origin",
    "SignatureImage",
    "draw_lateral_signatures",
    "Template",
    "TemplatePage",
    "load_template",
]
