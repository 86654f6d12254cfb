"""Utilities for parsing and building inline image data URIs."""

import base64
import logging
import re
from typing import Tuple

logger = logging.getLogger(__name__)

# Only base64 image payloads are accepted, e.g. ``data:image/png;base64,iVBOR...``
DATA_URI_PATTERN = re.compile(r"data:(image/\w+);base64,(.+)")


class MalformedImageError(ValueError):
    """Raised when an inline image is not a ``data:<mime>;base64,<payload>`` URI."""

    pass


def parse_data_uri(uri: str) -> Tuple[str, str]:
    """Split a data URI into ``(mime_type, base64_payload)``.

    The payload is returned exactly as it appears in the URI; it is not
    decoded or re-encoded.

    Raises:
        MalformedImageError: If *uri* does not match the expected pattern.
    """
    match = DATA_URI_PATTERN.fullmatch(uri) if isinstance(uri, str) else None
    if not match:
        preview = uri[:40] if isinstance(uri, str) else type(uri).__name__
        raise MalformedImageError(f"Not a base64 image data URI: {preview!r}")
    return match.group(1), match.group(2)


def build_data_uri(mime_type: str, payload: str) -> str:
    """Join a MIME type and base64 payload into a data URI."""
    return f"data:{mime_type};base64,{payload}"


def encode_image_bytes(data: bytes, mime_type: str) -> str:
    """Base64-encode raw image bytes into a data URI."""
    payload = base64.b64encode(data).decode("ascii")
    logger.debug("Encoded %d bytes of %s as data URI", len(data), mime_type)
    return build_data_uri(mime_type, payload)
