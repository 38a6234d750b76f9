"""Base64 data URL round trip used across the compressor boundary."""

import base64
import binascii

from intake.compression.exceptions import ImageDecodeError

_PREFIX = "data:"
_MARKER = ";base64,"


def encode_data_url(content: bytes, mime_type: str) -> str:
    payload = base64.b64encode(content).decode("ascii")
    return f"{_PREFIX}{mime_type}{_MARKER}{payload}"


def decode_data_url(data_url: str) -> tuple[str, bytes]:
    """Split a data URL into its mimetype and decoded bytes.

    Raises:
        ImageDecodeError: if the URL is not a base64 data URL.
    """
    if not data_url.startswith(_PREFIX) or _MARKER not in data_url:
        raise ImageDecodeError("Expected a base64 data URL")
    header, payload = data_url[len(_PREFIX):].split(_MARKER, 1)
    try:
        content = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ImageDecodeError(f"Invalid base64 payload: {exc}") from exc
    return header, content
