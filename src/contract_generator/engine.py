"""
Contract composition engine.

Turns a PDF template, a handwritten signature and the contract values into
the final flattened contract document. The stages run strictly in order on a
template owned by this call:

1. Load the template (or a blank page)
2. Resolve the regular and bold fonts
3. Draw the lateral signature on every page but the last
4. Capture the signature/data boxes, fill the form and flatten it
5. Draw the main signature and the signer caption on the last page
6. Serialize the document
"""

import logging

from .document.filler import fill_form
from .document.fonts import ResolvedFonts, resolve_fonts
from .document.layout import (
    LayoutSettings,
    capture_layout_boxes,
    resolve_signature_placement,
    resolve_text_origin,
)
from .document.signature import SignatureImage, draw_lateral_signatures
from .document.template import Template, load_template
from .exceptions import ContractError, ContractGenerationError
from .schemas.contract import ComposedContract, ContractFields, ContractLayout
from .schemas.geometry import Point

logger = logging.getLogger(__name__)


def _draw_caption(
    template: Template,
    origin: Point,
    fields: ContractFields,
    fonts: ResolvedFonts,
    settings: LayoutSettings,
) -> None:
    page = template.last_page
    page.draw_text(fields.legal_name, origin.x, origin.y, fonts.bold, settings.caption_font_size)
    if fields.id_number:
        page.draw_text(
            f"DNI: {fields.id_number}",
            origin.x,
            origin.y - settings.caption_line_spacing,
            fonts.regular,
            settings.caption_font_size,
        )


def compose_contract(
    template_bytes: bytes | None,
    signature_image_bytes: bytes,
    fields: ContractFields,
    regular_font_bytes: bytes | None = None,
    bold_font_bytes: bytes | None = None,
    settings: LayoutSettings | None = None,
) -> ComposedContract:
    """
    Compose a signed contract document.

    Args:
        template_bytes: PDF template, or None to use a blank page
        signature_image_bytes: Signature raster image (PNG, JPEG, ...)
        fields: Values written into the template
        regular_font_bytes: Optional TrueType file for regular text
        bold_font_bytes: Optional TrueType file for bold text
        settings: Layout settings (defaults to the configured ones)

    Returns:
        ComposedContract with the document bytes and the layout used

    Raises:
        InvalidContractRequest: If the signature is missing or not an image
        ContractGenerationError: For any failure while composing
    """
    settings = settings or LayoutSettings.from_config()

    # Validate inputs before doing any work
    signature = SignatureImage.from_bytes(signature_image_bytes)

    try:
        template = load_template(template_bytes)
        fonts = resolve_fonts(regular_font_bytes, bold_font_bytes)

        lateral = draw_lateral_signatures(template, signature, settings)

        boxes = capture_layout_boxes(template.form, settings)
        filled = {}
        if template.form is not None and template.form.fields:
            filled = fill_form(template.form, fields, fonts)
        else:
            logger.info("Template has no form fields, skipping form filling")

        placement = resolve_signature_placement(boxes.signature_box, signature, settings)
        template.last_page.draw_image(signature.image, placement)

        text_origin = resolve_text_origin(boxes.data_box, placement, settings)
        _draw_caption(template, text_origin, fields, fonts, settings)

        document_bytes = template.save()
    except ContractError:
        raise
    except Exception as e:
        logger.exception("Contract composition failed")
        raise ContractGenerationError() from e

    layout = ContractLayout(
        page_count=len(template.pages),
        lateral_signatures=lateral,
        signature=placement,
        text_origin=text_origin,
        boxes=boxes,
        filled_fields=filled,
        regular_font=fonts.regular.name,
        bold_font=fonts.bold.name,
    )
    logger.info(
        "Composed contract: %d page(s), signature at (%.1f, %.1f) %.1fx%.1f",
        layout.page_count,
        placement.x,
        placement.y,
        placement.width,
        placement.height,
    )
    return ComposedContract(document_bytes=document_bytes, layout=layout)
