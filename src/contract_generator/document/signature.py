"""
Handwritten signature image and the lateral marks drawn on contract pages.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from io import BytesIO
from typing import TYPE_CHECKING, List

from PIL import Image

from ..exceptions import InvalidSignatureError
from ..schemas.geometry import Placement

if TYPE_CHECKING:
    from .layout import LayoutSettings
    from .template import Template

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignatureView:
    """A scaled view of a signature; it shares the pixels of its source."""

    image: Image.Image
    width: float
    height: float


class SignatureImage:
    """
    Decoded signature raster.

    Attributes:
        image: The decoded image (converted to RGBA so transparency survives)
        width: Intrinsic width in pixels
        height: Intrinsic height in pixels
    """

    def __init__(self, image: Image.Image):
        self.image = image
        self.width, self.height = image.size

    @classmethod
    def from_bytes(cls, image_bytes: bytes) -> "SignatureImage":
        """
        Decode raster image bytes (PNG, JPEG, ...).

        Raises:
            InvalidSignatureError: If the bytes are empty or not a decodable image
        """
        if not image_bytes:
            raise InvalidSignatureError("Signature image is empty")
        try:
            image = Image.open(BytesIO(image_bytes))
            image.load()
        except Exception as e:
            raise InvalidSignatureError(f"Invalid signature image: {e}") from e
        if image.width == 0 or image.height == 0:
            raise InvalidSignatureError("Signature image has no pixels")
        return cls(image.convert("RGBA"))

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def scale(self, factor: float) -> SignatureView:
        return SignatureView(self.image, self.width * factor, self.height * factor)


def draw_lateral_signatures(
    template: "Template",
    signature: SignatureImage,
    settings: "LayoutSettings",
) -> List[Placement]:
    """
    Draw the signature, rotated 90 degrees, near the left margin of every
    page except the last one.

    Returns:
        The placements drawn, in page order (empty for one-page templates)
    """
    view = signature.scale(settings.lateral_scale)
    placement = Placement(
        x=settings.lateral_x,
        y=settings.lateral_y,
        width=view.width,
        height=view.height,
        rotation=90,
    )

    placements = []
    for page in template.other_pages:
        page.draw_image(view.image, placement)
        placements.append(placement)

    logger.debug("Drew lateral signature on %d page(s)", len(placements))
    return placements
