"""Unit tests for data URL encoding helpers."""

import base64

import pytest
from fastapi import UploadFile

from clothswap.exceptions import FileReadError
from clothswap.utils.encoding import (
    detect_mime_type,
    encode_data_url,
    file_to_data_url,
    png_data_url,
    strip_data_url_prefix,
)


class BrokenFile:
    """File object whose reads always fail."""

    def read(self, size=-1):
        raise OSError("device unavailable")


class TestDetectMimeType:
    """Tests for magic-byte MIME detection."""

    def test_png(self, minimal_png_bytes):
        assert detect_mime_type(minimal_png_bytes) == "image/png"

    def test_jpeg(self, minimal_jpeg_bytes):
        assert detect_mime_type(minimal_jpeg_bytes) == "image/jpeg"

    def test_webp(self):
        data = b'RIFF\x24\x00\x00\x00WEBPVP8 '
        assert detect_mime_type(data) == "image/webp"

    def test_gif(self):
        assert detect_mime_type(b'GIF89a\x01\x00') == "image/gif"

    @pytest.mark.parametrize("filename,expected", [
        ("photo.JPG", "image/jpeg"),
        ("photo.webp", "image/webp"),
        ("notes.txt", "application/octet-stream"),
    ])
    def test_falls_back_to_suffix(self, filename, expected):
        """Unknown contents use the filename suffix."""
        assert detect_mime_type(b'not an image', filename) == expected

    def test_unknown_without_filename(self):
        assert detect_mime_type(b'???') == "application/octet-stream"


class TestFileToDataUrl:
    """Tests for reading uploads into data URLs."""

    @pytest.mark.asyncio
    async def test_encodes_with_declared_type(self, make_upload, minimal_png_bytes):
        upload = make_upload(minimal_png_bytes, "model.png", "image/png")

        data_url = await file_to_data_url(upload)

        assert data_url.startswith("data:image/png;base64,")
        _, encoded = data_url.split(",", 1)
        assert base64.b64decode(encoded) == minimal_png_bytes

    @pytest.mark.asyncio
    async def test_sniffs_type_when_not_declared(self, make_upload, minimal_jpeg_bytes):
        upload = make_upload(minimal_jpeg_bytes, "upload")

        data_url = await file_to_data_url(upload)

        assert data_url.startswith("data:image/jpeg;base64,")

    @pytest.mark.asyncio
    async def test_non_image_declared_type_is_ignored(self, make_upload, minimal_png_bytes):
        """A generic declared type does not override the sniffed one."""
        upload = make_upload(minimal_png_bytes, "blob", "application/octet-stream")

        data_url = await file_to_data_url(upload)

        assert data_url.startswith("data:image/png;base64,")

    @pytest.mark.asyncio
    async def test_non_image_is_not_rejected(self, make_upload):
        """No validation beyond the picker's accept filter."""
        upload = make_upload(b"plain text", "notes.txt")

        data_url = await file_to_data_url(upload)

        assert data_url.startswith("data:application/octet-stream;base64,")

    @pytest.mark.asyncio
    async def test_read_failure_raises(self):
        upload = UploadFile(file=BrokenFile(), filename="model.png")

        with pytest.raises(FileReadError, match="device unavailable"):
            await file_to_data_url(upload)

    @pytest.mark.asyncio
    async def test_empty_file_raises(self, make_upload):
        with pytest.raises(FileReadError, match="empty"):
            await file_to_data_url(make_upload(b"", "empty.png"))


class TestDataUrlHelpers:
    """Tests for prefix stripping and result URLs."""

    def test_strip_prefix(self):
        assert strip_data_url_prefix("data:image/jpeg;base64,QUJD") == "QUJD"

    def test_strip_prefix_leaves_raw_base64(self):
        assert strip_data_url_prefix("QUJD") == "QUJD"

    def test_png_data_url(self):
        assert png_data_url("R") == "data:image/png;base64,R"

    def test_encode_then_strip_yields_payload(self, minimal_png_bytes, png_base64):
        data_url = encode_data_url(minimal_png_bytes, "image/png")

        assert strip_data_url_prefix(data_url) == png_base64
