"""In-memory swap state."""

from enum import Enum

from pydantic import BaseModel, computed_field


class SwapStatus(str, Enum):
    """Where the application is in the upload/swap cycle."""

    IDLE = "idle"
    AWAITING_SWAP = "awaiting-swap"
    SUCCESS = "success"
    ERROR = "error"


class SwapState(BaseModel):
    """The two inputs, the result, and request status."""

    # Inputs (data URLs)
    model_image: str | None = None
    clothing_image: str | None = None

    # Output (data URL)
    result_image: str | None = None

    # Request status
    is_loading: bool = False
    error: str | None = None

    @computed_field
    @property
    def can_swap(self) -> bool:
        """Swap is enabled only with both images and nothing in flight."""
        return bool(self.model_image and self.clothing_image) and not self.is_loading

    @computed_field
    @property
    def status(self) -> SwapStatus:
        if self.is_loading:
            return SwapStatus.AWAITING_SWAP
        if self.error:
            return SwapStatus.ERROR
        if self.result_image:
            return SwapStatus.SUCCESS
        return SwapStatus.IDLE
