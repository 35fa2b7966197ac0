"""Data URL helpers for uploaded and generated images."""

import base64
import logging
from pathlib import PurePath

from fastapi import UploadFile

from ..exceptions import FileReadError


logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/octet-stream"

SUFFIX_MIME_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".webp": "image/webp",
    ".gif": "image/gif",
}


def detect_mime_type(data: bytes, filename: str | None = None) -> str:
    """Detect an image MIME type from magic bytes, falling back to the filename suffix."""
    if data[:8] == b'\x89PNG\r\n\x1a\n':
        return "image/png"
    if data[:3] == b'\xff\xd8\xff':
        return "image/jpeg"
    if data[:4] == b'RIFF' and data[8:12] == b'WEBP':
        return "image/webp"
    if data[:6] in (b'GIF87a', b'GIF89a'):
        return "image/gif"

    if filename:
        suffix = PurePath(filename).suffix.lower()
        return SUFFIX_MIME_TYPES.get(suffix, DEFAULT_MIME_TYPE)
    return DEFAULT_MIME_TYPE


def encode_data_url(data: bytes, mime_type: str) -> str:
    """Encode raw bytes as a base64 data URL."""
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


async def file_to_data_url(upload: UploadFile) -> str:
    """Read an uploaded file and return it as a base64 data URL.

    The declared content type wins when it is an image type; otherwise the
    type is sniffed from the file contents.

    Raises:
        FileReadError: the file could not be read or was empty
    """
    try:
        data = await upload.read()
    except (OSError, ValueError) as e:
        raise FileReadError(f"Could not read {upload.filename or 'upload'}: {e}") from e

    if not data:
        raise FileReadError(f"{upload.filename or 'upload'} is empty")

    content_type = upload.content_type
    if content_type and content_type.startswith("image/"):
        mime_type = content_type
    else:
        mime_type = detect_mime_type(data, upload.filename)

    logger.debug("Encoded %s (%d bytes, %s)", upload.filename, len(data), mime_type)
    return encode_data_url(data, mime_type)


def strip_data_url_prefix(data_url: str) -> str:
    """Return the base64 payload of a data URL.

    Strings without a ``data:`` prefix are assumed to be raw base64 already.
    """
    if data_url.startswith("data:") and "," in data_url:
        return data_url.split(",", 1)[1]
    return data_url


def png_data_url(image_base64: str) -> str:
    """Wrap a base64 PNG payload in a displayable data URL."""
    return f"data:image/png;base64,{image_base64}"
