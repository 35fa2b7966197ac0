"""Data models for the clothing swap service."""

from .state import SwapState, SwapStatus

__all__ = [
    "SwapState",
    "SwapStatus",
]
