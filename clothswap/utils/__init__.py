"""Encoding utilities."""

from .encoding import (
    detect_mime_type,
    encode_data_url,
    file_to_data_url,
    png_data_url,
    strip_data_url_prefix,
)

__all__ = [
    "detect_mime_type",
    "encode_data_url",
    "file_to_data_url",
    "png_data_url",
    "strip_data_url_prefix",
]
