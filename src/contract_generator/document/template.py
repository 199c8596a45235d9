"""
Editable contract template.

A ``Template`` wraps the pages of a PDF read with PyPDF2. Drawing does not
touch the PDF directly: every page keeps a queue of overlay operations that
are rendered with reportlab when the template is saved, and each overlay page
is then merged onto its template page. Flattened widget appearances are
merged first, as one-XObject stamp pages.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from io import BytesIO
from typing import Callable, List, Optional

from PyPDF2 import PageObject, PdfReader, PdfWriter
from PyPDF2.generic import DecodedStreamObject, DictionaryObject, IndirectObject, NameObject
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from ..exceptions import TemplateParseError
from ..schemas.geometry import Placement, Rect
from .fonts import Font
from .form import Form, parse_form

logger = logging.getLogger(__name__)

# Page size of the blank fallback document (US Letter, in points)
BLANK_PAGE_SIZE = (612.0, 792.0)

DrawOperation = Callable[[canvas.Canvas], None]


@dataclass
class TemplatePage:
    """One template page and the overlay operations queued for it."""

    index: int
    pdf_page: PageObject
    width: float
    height: float
    operations: List[DrawOperation] = field(default_factory=list)
    stamps: List[PageObject] = field(default_factory=list)

    def draw_image(self, image, placement: Placement) -> None:
        """Queue ``image`` (a PIL image) at ``placement``, rotated about its lower-left corner."""

        def _draw(canv: canvas.Canvas) -> None:
            canv.saveState()
            canv.translate(placement.x, placement.y)
            if placement.rotation:
                canv.rotate(placement.rotation)
            canv.drawImage(
                ImageReader(image),
                0,
                0,
                width=placement.width,
                height=placement.height,
                mask="auto",
            )
            canv.restoreState()

        self.operations.append(_draw)

    def draw_text(self, text: str, x: float, y: float, font: Font, size: float) -> None:
        def _draw(canv: canvas.Canvas) -> None:
            canv.setFont(font.name, size)
            canv.drawString(x, y, text)

        self.operations.append(_draw)

    def stamp_appearance(self, appearance: IndirectObject, rect: Rect) -> None:
        """Queue a form XObject (a widget appearance) to be painted into ``rect``."""
        self.stamps.append(_appearance_stamp(appearance, rect, self.width, self.height))


def _appearance_matrix(appearance, rect: Rect) -> tuple:
    """
    Matrix that maps the appearance bounding box, after its own ``/Matrix``,
    onto ``rect``.
    """
    x1, y1, x2, y2 = (float(v) for v in appearance.get("/BBox", [0, 0, rect.width, rect.height]))
    a, b, c, d, e, f = (float(v) for v in appearance.get("/Matrix", [1, 0, 0, 1, 0, 0]))
    corners = [(a * x + c * y + e, b * x + d * y + f) for x in (x1, x2) for y in (y1, y2)]
    left = min(x for x, _ in corners)
    bottom = min(y for _, y in corners)
    width = max(x for x, _ in corners) - left
    height = max(y for _, y in corners) - bottom

    scale_x = rect.width / width if width else 1.0
    scale_y = rect.height / height if height else 1.0
    return (scale_x, 0, 0, scale_y, rect.x - left * scale_x, rect.y - bottom * scale_y)


def _appearance_stamp(appearance: IndirectObject, rect: Rect, width: float, height: float) -> PageObject:
    stamp = PageObject.create_blank_page(width=width, height=height)
    stamp[NameObject("/Resources")] = DictionaryObject(
        {NameObject("/XObject"): DictionaryObject({NameObject("/FlatAP"): appearance})}
    )
    matrix = " ".join(f"{value:.4f}" for value in _appearance_matrix(appearance.get_object(), rect))
    content = DecodedStreamObject()
    content.set_data(f"q {matrix} cm /FlatAP Do Q".encode("ascii"))
    stamp[NameObject("/Contents")] = content
    return stamp


class Template:
    """
    An editable contract document.

    Created once per generation call and owned by that call: stages receive
    it, mutate it and return without keeping a reference.
    """

    def __init__(self, pages: List[TemplatePage], form: Optional[Form] = None):
        if not pages:
            raise TemplateParseError("Contract template has no pages")
        self.pages = pages
        self.form = form

    @property
    def last_page(self) -> TemplatePage:
        return self.pages[-1]

    @property
    def other_pages(self) -> List[TemplatePage]:
        """Every page except the signing (last) page."""
        return self.pages[:-1]

    @classmethod
    def blank(cls) -> "Template":
        width, height = BLANK_PAGE_SIZE
        page = PageObject.create_blank_page(width=width, height=height)
        return cls([TemplatePage(0, page, width, height)])

    def render_overlay(self) -> PdfReader:
        """Draw every queued operation on an overlay with one page per template page."""

        buffer = BytesIO()
        canv = canvas.Canvas(buffer, invariant=1)
        for page in self.pages:
            canv.setPageSize((page.width, page.height))
            for operation in page.operations:
                operation(canv)
            canv.showPage()
        canv.save()
        buffer.seek(0)
        return PdfReader(buffer)

    def save(self) -> bytes:
        """Merge the overlay onto the template pages and serialize the document."""

        overlay_reader = self.render_overlay()
        writer = PdfWriter()
        for page in self.pages:
            for stamp in page.stamps:
                page.pdf_page.merge_page(stamp)
            if page.operations:
                page.pdf_page.merge_page(overlay_reader.pages[page.index])
            writer.add_page(page.pdf_page)

        output = BytesIO()
        writer.write(output)
        return output.getvalue()


def _page_size(page: PageObject) -> tuple[float, float]:
    return (
        float(page.mediabox.right) - float(page.mediabox.left),
        float(page.mediabox.top) - float(page.mediabox.bottom),
    )


def load_template(template_bytes: bytes | None) -> Template:
    """
    Parse template bytes into an editable ``Template``.

    Args:
        template_bytes: Raw PDF bytes, or None when no template is stored

    Returns:
        The parsed template, or a one-page blank template without a form

    Raises:
        TemplateParseError: If the bytes are not a readable PDF
    """
    if not template_bytes:
        logger.warning("Template not available, using a blank one-page document")
        return Template.blank()

    try:
        reader = PdfReader(BytesIO(template_bytes))
        pages = []
        for index, pdf_page in enumerate(reader.pages):
            width, height = _page_size(pdf_page)
            pages.append(TemplatePage(index, pdf_page, width, height))
        form = parse_form(pages)
    except Exception as e:
        raise TemplateParseError(f"Unreadable contract template: {e}") from e

    logger.info(
        "Loaded template with %d page(s) and %d form field(s)",
        len(pages),
        len(form.fields) if form else 0,
    )
    return Template(pages, form)
