"""
AcroForm access for contract templates.

Fields are read from the widget annotations of each page. Flattening turns
every widget into page content: values set in this run are drawn on the page
overlay inside the widget rectangle, untouched widgets have their appearance
stream stamped on the page. The widget annotations are then removed and the
form is no longer addressable.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional

from PyPDF2.generic import (
    ArrayObject,
    DictionaryObject,
    IndirectObject,
    NameObject,
    StreamObject,
    TextStringObject,
)
from reportlab.pdfbase.pdfmetrics import stringWidth

from ..schemas.geometry import Rect

if TYPE_CHECKING:
    from .fonts import Font
    from .template import TemplatePage

logger = logging.getLogger(__name__)

TEXT_FIELD = "/Tx"
# Horizontal padding between the widget border and the text
TEXT_PADDING = 2.0
MIN_FONT_SIZE = 4.0
MAX_AUTO_FONT_SIZE = 12.0
LINE_HEIGHT = 1.15
# /Q quadding values
ALIGN_LEFT, ALIGN_CENTER, ALIGN_RIGHT = 0, 1, 2
# /Ff and /F bits
MULTILINE_FLAG = 1 << 12
HIDDEN_FLAG = 1 << 1
# Guard against cyclic /Parent chains in broken files
MAX_FIELD_DEPTH = 32


def _resolve(obj):
    return obj.get_object() if obj is not None and hasattr(obj, "get_object") else obj


def _field_chain(annotation: DictionaryObject) -> List[DictionaryObject]:
    """The widget annotation followed by its ancestor field dictionaries."""
    chain = []
    node = annotation
    while node is not None and len(chain) < MAX_FIELD_DEPTH:
        chain.append(node)
        node = _resolve(node.get("/Parent"))
    return chain


def _inherited(chain: List[DictionaryObject], key: str):
    for node in chain:
        if key in node:
            return _resolve(node[key])
    return None


def _parse_font_size(default_appearance) -> float:
    """Font size from a ``/DA`` string such as ``/Helv 10 Tf 0 g``; 0 means auto."""
    if not default_appearance:
        return 0.0
    parts = str(default_appearance).split()
    if "Tf" in parts:
        index = parts.index("Tf")
        if index > 0:
            try:
                return float(parts[index - 1])
            except ValueError:
                return 0.0
    return 0.0


def _int_value(value, default: int = 0) -> int:
    try:
        return int(value) if value is not None else default
    except (TypeError, ValueError):
        return default


def _normal_appearance(annotation: DictionaryObject) -> Optional[IndirectObject]:
    """
    Reference to the appearance stream the widget currently shows.

    Buttons keep one normal appearance per state; the one named by ``/AS`` is
    used. Only indirect streams are returned, so they can be shared with the
    output document.
    """
    appearances = _resolve(annotation.get("/AP"))
    if not appearances or "/N" not in appearances:
        return None

    normal = appearances.raw_get("/N")
    resolved = _resolve(normal)
    if not isinstance(resolved, StreamObject):
        state = annotation.get("/AS")
        if state is None or not isinstance(resolved, DictionaryObject) or state not in resolved:
            return None
        normal = resolved.raw_get(state)
    return normal if isinstance(normal, IndirectObject) else None


def _aligned_x(rect: Rect, text_width: float, alignment: int) -> float:
    if alignment == ALIGN_CENTER:
        return rect.x + (rect.width - text_width) / 2
    if alignment == ALIGN_RIGHT:
        return rect.x + rect.width - TEXT_PADDING - text_width
    return rect.x + TEXT_PADDING


@dataclass
class Widget:
    """One visual occurrence of a field on a page."""

    page_index: int
    rect: Rect
    font_size: float = 0.0
    appearance: Optional[IndirectObject] = None
    hidden: bool = False


@dataclass
class FormField:
    """
    A named form field and the value it will be flattened with.

    ``value`` starts as the text the template already holds. Fields changed
    with ``set_text`` are redrawn on flatten; the others keep their own
    appearance.
    """

    name: str
    field_type: Optional[str]
    dictionary: DictionaryObject
    widgets: List[Widget] = field(default_factory=list)
    value: Optional[str] = None
    font: Optional["Font"] = None
    font_size: Optional[float] = None
    alignment: int = ALIGN_LEFT
    multiline: bool = False
    modified: bool = False

    @property
    def is_text(self) -> bool:
        return self.field_type == TEXT_FIELD

    @property
    def rect(self) -> Optional[Rect]:
        """Rectangle of the first widget, if the field has one."""
        return self.widgets[0].rect if self.widgets else None

    def set_text(self, value: str) -> None:
        self.value = value
        self.modified = True
        self.dictionary[NameObject("/V")] = TextStringObject(value)

    def update_appearance(self, font: "Font") -> None:
        """
        Compute how the current value is rendered with ``font``.

        The size starts from the widget's default appearance (or the box
        height for auto-sized fields) and shrinks until the text fits the
        widget width.

        Raises:
            KeyError: If ``font`` is not registered with reportlab
        """
        if not self.widgets:
            raise ValueError(f"Field '{self.name}' has no widget to render into")

        widget = self.widgets[0]
        size = widget.font_size or min(widget.rect.height * 0.7, MAX_AUTO_FONT_SIZE)
        text_width = stringWidth(self.value or "", font.name, size)
        available = widget.rect.width - 2 * TEXT_PADDING
        if text_width > available > 0:
            size = max(size * available / text_width, MIN_FONT_SIZE)

        self.font = font
        self.font_size = size


class Form:
    """Named fields of a template, addressable until the form is flattened."""

    def __init__(self, pages: List["TemplatePage"], fields: Dict[str, FormField]):
        self._pages = pages
        self._fields = fields
        self.flattened = False

    @property
    def fields(self) -> List[FormField]:
        return list(self._fields.values())

    @property
    def field_names(self) -> List[str]:
        return list(self._fields)

    def try_get_field(self, name: str) -> Optional[FormField]:
        """Return the field called ``name``, or None if the template has no such field."""
        return self._fields.get(name)

    def flatten(self, fallback_font: "Font") -> None:
        """
        Turn every field into static page content.

        Fields changed in this run are drawn from their value. Untouched
        widgets keep what they show: their normal appearance stream is stamped
        onto the page, and text fields without one are drawn from their
        value. Values whose appearance was never computed use
        ``fallback_font``. Widget annotations are then removed from the pages
        and the field index is cleared.
        """
        stamped = drawn = 0
        for form_field in self._fields.values():
            for widget in form_field.widgets:
                if widget.hidden:
                    continue
                page = self._pages[widget.page_index]
                if not form_field.modified and widget.appearance is not None:
                    page.stamp_appearance(widget.appearance, widget.rect)
                    stamped += 1
                elif form_field.is_text and form_field.value:
                    self._draw_value(page, form_field, widget, fallback_font)
                    drawn += 1

        for page in self._pages:
            _remove_widgets(page)

        self._fields = {}
        self.flattened = True
        logger.debug("Form flattened: %d appearance(s) stamped, %d value(s) drawn", stamped, drawn)

    @staticmethod
    def _draw_value(page: "TemplatePage", form_field: FormField, widget: Widget, fallback_font: "Font") -> None:
        font = form_field.font or fallback_font
        rect = widget.rect
        size = form_field.font_size or widget.font_size or min(rect.height * 0.7, MAX_AUTO_FONT_SIZE)

        if form_field.multiline:
            lines = form_field.value.splitlines()
            baseline = rect.y + rect.height - TEXT_PADDING - size
        else:
            lines = [" ".join(form_field.value.splitlines())]
            baseline = rect.y + max((rect.height - size) * 0.5, 0) + 0.5

        for line in lines:
            x = _aligned_x(rect, stringWidth(line, font.name, size), form_field.alignment)
            page.draw_text(line, x, baseline, font, size)
            baseline -= size * LINE_HEIGHT


def _remove_widgets(page: "TemplatePage") -> None:
    annotations = _resolve(page.pdf_page.get("/Annots"))
    if not annotations:
        return
    kept = ArrayObject(
        item for item in annotations if _resolve(item).get("/Subtype") != "/Widget"
    )
    if kept:
        page.pdf_page[NameObject("/Annots")] = kept
    else:
        del page.pdf_page["/Annots"]


def parse_form(pages: List["TemplatePage"]) -> Optional[Form]:
    """
    Collect the named fields from the widget annotations of ``pages``.

    Returns:
        The form, or None when the template has no widgets at all
    """
    fields: Dict[str, FormField] = {}
    has_widgets = False

    for page in pages:
        annotations = _resolve(page.pdf_page.get("/Annots")) or []
        for item in annotations:
            annotation = _resolve(item)
            if annotation.get("/Subtype") != "/Widget":
                continue
            has_widgets = True

            chain = _field_chain(annotation)
            titled = [node for node in chain if "/T" in node]
            if not titled:
                continue
            name = ".".join(str(node["/T"]) for node in reversed(titled))

            rect = _resolve(annotation.get("/Rect"))
            if not rect or len(rect) != 4:
                continue

            form_field = fields.get(name)
            if form_field is None:
                field_type = _inherited(chain, "/FT")
                field_type = str(field_type) if field_type is not None else None
                value = _inherited(chain, "/V")
                form_field = FormField(
                    name=name,
                    field_type=field_type,
                    dictionary=titled[0],
                    value=str(value) if field_type == TEXT_FIELD and value is not None else None,
                    alignment=_int_value(_inherited(chain, "/Q"), ALIGN_LEFT),
                    multiline=bool(_int_value(_inherited(chain, "/Ff")) & MULTILINE_FLAG),
                )
                fields[name] = form_field
            form_field.widgets.append(
                Widget(
                    page_index=page.index,
                    rect=Rect.from_pdf_array(rect),
                    font_size=_parse_font_size(_inherited(chain, "/DA")),
                    appearance=_normal_appearance(annotation),
                    hidden=bool(_int_value(annotation.get("/F")) & HIDDEN_FLAG),
                )
            )

    if not has_widgets:
        return None
    logger.debug("Found form fields: %s", list(fields))
    return Form(pages, fields)
