"""External service clients."""

from .gemini_client import GeminiSwapClient

__all__ = ["GeminiSwapClient"]
