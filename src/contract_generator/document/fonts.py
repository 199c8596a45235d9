"""
Font resolution for contract text.

Custom TrueType fonts are embedded through reportlab's ``TTFont``; whenever a
font file is missing or cannot be embedded, the standard Helvetica family is
used instead so resolution never fails.
"""

import hashlib
import logging
from dataclasses import dataclass
from io import BytesIO

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

logger = logging.getLogger(__name__)

STANDARD_REGULAR = "Helvetica"
STANDARD_BOLD = "Helvetica-Bold"


@dataclass(frozen=True)
class Font:
    """A font usable on the overlay canvas, referenced by its registered name."""

    name: str
    embedded: bool = False


@dataclass(frozen=True)
class ResolvedFonts:
    regular: Font
    bold: Font


def embed_font(font_bytes: bytes) -> Font:
    """
    Register a TrueType font under a name derived from its content.

    The reportlab registry is process wide, so the same file is registered
    only once and later calls reuse it.

    Raises:
        TTFError: If the bytes are not a usable TrueType font
    """
    name = "Contract-" + hashlib.sha1(font_bytes).hexdigest()[:16]
    if name not in pdfmetrics.getRegisteredFontNames():
        pdfmetrics.registerFont(TTFont(name, BytesIO(font_bytes)))
    return Font(name, embedded=True)


def _resolve_weight(font_bytes: bytes | None, standard_name: str, weight: str) -> Font | None:
    if not font_bytes:
        return None
    try:
        return embed_font(font_bytes)
    except Exception as e:
        logger.warning("Could not embed %s font, using %s: %s", weight, standard_name, e)
        return Font(standard_name)


def resolve_fonts(regular_bytes: bytes | None = None, bold_bytes: bytes | None = None) -> ResolvedFonts:
    """
    Resolve the regular and bold fonts for a contract.

    Args:
        regular_bytes: TrueType file for the regular weight, if available
        bold_bytes: TrueType file for the bold weight, if available

    Returns:
        Two usable fonts. Without a bold file the bold role reuses an embedded
        regular font; otherwise each weight falls back to Helvetica.
    """
    regular = _resolve_weight(regular_bytes, STANDARD_REGULAR, "regular") or Font(STANDARD_REGULAR)
    bold = _resolve_weight(bold_bytes, STANDARD_BOLD, "bold")

    if bold is None:
        bold = regular if regular.embedded else Font(STANDARD_BOLD)

    logger.debug("Resolved fonts: regular=%s bold=%s", regular.name, bold.name)
    return ResolvedFonts(regular=regular, bold=bold)
