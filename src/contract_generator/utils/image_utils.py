"""
Image utility functions for signature payloads.
"""

import base64
import binascii
import re

from ..exceptions import InvalidSignatureError

DATA_URL_PATTERN = re.compile(r"^data:[^,]*?;base64,(.+)$", re.IGNORECASE | re.DOTALL)


def decode_data_url(value: str) -> bytes:
    """
    Decode a base64 data URL (``data:image/png;base64,...``) or a bare base64 string.

    Args:
        value: Data URL or base64 string as sent by the signature pad

    Returns:
        The decoded bytes

    Raises:
        InvalidSignatureError: If the payload is empty or not valid base64
    """
    payload = (value or "").strip()
    match = DATA_URL_PATTERN.match(payload)
    if match:
        payload = match.group(1)

    # Drop whitespace/line breaks and restore stripped padding
    payload = re.sub(r"\s+", "", payload)
    if not payload:
        raise InvalidSignatureError("Signature payload is empty")
    payload += "=" * (-len(payload) % 4)

    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidSignatureError("Unable to decode signature image") from e
