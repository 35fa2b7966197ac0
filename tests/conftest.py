# Test fixtures and configuration
import base64
import io
import sys
from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from fastapi import UploadFile
from starlette.datastructures import Headers

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from clothswap.shell import SwapController


@pytest.fixture
def minimal_png_bytes():
    """Minimal valid PNG image bytes."""
    return bytes([
        0x89, 0x50, 0x4E, 0x47, 0x0D, 0x0A, 0x1A, 0x0A,  # PNG signature
        0x00, 0x00, 0x00, 0x0D, 0x49, 0x48, 0x44, 0x52,  # IHDR chunk
        0x00, 0x00, 0x00, 0x01, 0x00, 0x00, 0x00, 0x01,  # 1x1 dimensions
        0x08, 0x02, 0x00, 0x00, 0x00, 0x90, 0x77, 0x53,
        0xDE, 0x00, 0x00, 0x00, 0x0C, 0x49, 0x44, 0x41,  # IDAT chunk
        0x54, 0x08, 0xD7, 0x63, 0xF8, 0xCF, 0xC0, 0x00,
        0x00, 0x00, 0x03, 0x00, 0x01, 0x00, 0x05, 0xFE,
        0xD4, 0xAA, 0x00, 0x00, 0x00, 0x00, 0x49, 0x45,  # IEND chunk
        0x4E, 0x44, 0xAE, 0x42, 0x60, 0x82
    ])


@pytest.fixture
def minimal_jpeg_bytes():
    """JPEG magic bytes followed by filler."""
    return b'\xff\xd8\xff\xe0' + b'\x00' * 32


@pytest.fixture
def png_base64(minimal_png_bytes):
    return base64.b64encode(minimal_png_bytes).decode()


@pytest.fixture
def make_upload():
    """Build an UploadFile the way FastAPI hands one to an endpoint."""
    def _make(data: bytes, filename: str = "image.png", content_type: str | None = None):
        headers = Headers({"content-type": content_type}) if content_type else None
        return UploadFile(file=io.BytesIO(data), filename=filename, headers=headers)
    return _make


@pytest.fixture
def swap_client():
    """Stand-in for the remote image-swap client."""
    client = AsyncMock()
    client.swap_clothing = AsyncMock(return_value="R")
    client.is_configured = True
    return client


@pytest.fixture
def controller(swap_client):
    return SwapController(swap_client)
