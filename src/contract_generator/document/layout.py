"""
Placement of the main signature and the signer caption on the last page.

Templates may define two text fields that carry layout intent instead of
content: a signature box and a data box. Their rectangles must be captured
before the form is flattened; without them fixed coordinates are used.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Optional

from ..config import Config
from ..schemas.contract import LayoutBoxes
from ..schemas.geometry import Placement, Point, Rect

if TYPE_CHECKING:
    from .form import Form
    from .signature import SignatureImage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutSettings:
    """
    Coordinates, scales and per-template calibration offsets.

    ``signature_box_correction`` and ``data_box_correction`` compensate for
    the offset between the box fields and the printed signature area of a
    given template; calibrate them per template.
    """

    signature_box_field: str = "box_firma"
    data_box_field: str = "box_datos"
    lateral_scale: float = 0.5
    lateral_x: float = 45
    lateral_y: float = 100
    main_scale: float = 0.6
    default_x: float = 310
    default_y: float = 450
    signature_box_correction: float = -120
    data_box_correction: float = -120
    data_box_top_inset: float = 10
    text_gap: float = 20
    caption_font_size: float = 10
    caption_line_spacing: float = 12

    @classmethod
    def from_config(cls, config: type[Config] | Config = Config) -> "LayoutSettings":
        return cls(
            signature_box_field=config.SIGNATURE_BOX_FIELD,
            data_box_field=config.DATA_BOX_FIELD,
            lateral_scale=config.LATERAL_SCALE,
            lateral_x=config.LATERAL_X,
            lateral_y=config.LATERAL_Y,
            main_scale=config.MAIN_SCALE,
            default_x=config.DEFAULT_SIGNATURE_X,
            default_y=config.DEFAULT_SIGNATURE_Y,
            signature_box_correction=config.SIGNATURE_BOX_CORRECTION,
            data_box_correction=config.DATA_BOX_CORRECTION,
            data_box_top_inset=config.DATA_BOX_TOP_INSET,
            text_gap=config.TEXT_GAP,
            caption_font_size=config.CAPTION_FONT_SIZE,
            caption_line_spacing=config.CAPTION_LINE_SPACING,
        )

    def with_overrides(self, **changes) -> "LayoutSettings":
        return replace(self, **changes)


def fit_within(box: Rect, image_width: float, image_height: float) -> Placement:
    """
    Fit an image inside ``box`` keeping its aspect ratio, centred, no cropping.

    Args:
        box: Target rectangle
        image_width: Intrinsic image width (any unit)
        image_height: Intrinsic image height (same unit)

    Returns:
        Placement whose size fits the box and whose centre is the box centre
    """
    box_ratio = box.width / box.height
    image_ratio = image_width / image_height

    if image_ratio > box_ratio:
        width = box.width
        height = box.width / image_ratio
    else:
        height = box.height
        width = box.height * image_ratio

    return Placement(
        x=box.x + (box.width - width) / 2,
        y=box.y + (box.height - height) / 2,
        width=width,
        height=height,
    )


def resolve_signature_placement(
    signature_box: Optional[Rect],
    signature: "SignatureImage",
    settings: LayoutSettings,
) -> Placement:
    """Placement of the main signature on the last page."""
    if signature_box is None or signature_box.width <= 0 or signature_box.height <= 0:
        view = signature.scale(settings.main_scale)
        return Placement(settings.default_x, settings.default_y, view.width, view.height)

    fitted = fit_within(signature_box, signature.width, signature.height)
    return fitted.shifted(dy=settings.signature_box_correction)


def resolve_text_origin(
    data_box: Optional[Rect],
    signature: Placement,
    settings: LayoutSettings,
) -> Point:
    """Baseline origin of the signer caption."""
    if data_box is not None:
        return Point(
            data_box.x,
            data_box.y + data_box.height - settings.data_box_top_inset + settings.data_box_correction,
        )
    return Point(signature.x, signature.y - settings.text_gap)


def capture_layout_boxes(form: Optional["Form"], settings: LayoutSettings) -> LayoutBoxes:
    """
    Read the signature and data box rectangles from ``form``.

    Must run before the form is flattened, which removes the widgets.
    """
    if form is None:
        return LayoutBoxes()

    boxes = {}
    for key, field_name in (
        ("signature_box", settings.signature_box_field),
        ("data_box", settings.data_box_field),
    ):
        form_field = form.try_get_field(field_name)
        if form_field is None or form_field.rect is None:
            logger.debug("Layout field '%s' not found, using fallback geometry", field_name)
            continue
        boxes[key] = form_field.rect
        logger.debug("Layout field '%s' at %s", field_name, form_field.rect)

    return LayoutBoxes(**boxes)
