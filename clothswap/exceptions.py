"""Errors raised by the clothing swap service."""


class ClothSwapError(RuntimeError):
    """Base class for service errors."""


class FileReadError(ClothSwapError):
    """An uploaded file could not be read or encoded."""


class RemoteSwapError(ClothSwapError):
    """The image generation service failed or returned no image."""


class SwapInProgressError(ClothSwapError):
    """A swap was requested while another one is still in flight."""
