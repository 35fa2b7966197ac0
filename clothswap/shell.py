"""Application shell: owns the swap state and wires uploads to the remote client."""

import logging
from typing import Protocol

from fastapi import UploadFile

from .exceptions import FileReadError, SwapInProgressError
from .models import SwapState
from .utils.encoding import file_to_data_url, png_data_url, strip_data_url_prefix


logger = logging.getLogger(__name__)

MISSING_INPUT_MESSAGE = "Please upload both a model and a clothing image."
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."


class ImageSwapClient(Protocol):
    async def swap_clothing(self, model_image_b64: str, clothing_image_b64: str) -> str: ...


class SwapController:
    """Single-user controller for the upload and swap cycle.

    State is only touched from event handlers running on the event loop, so
    the in-flight check and the loading flag are set before the first await
    and need no lock.
    """

    def __init__(self, client: ImageSwapClient):
        self.client = client
        self.state = SwapState()
        # Bumped on every input change; a swap response is only kept if it
        # still matches the inputs it was computed from.
        self._revision = 0

    async def upload_model_image(self, upload: UploadFile) -> SwapState:
        return await self._upload(upload, "model_image", "Failed to read model image.")

    async def upload_clothing_image(self, upload: UploadFile) -> SwapState:
        return await self._upload(upload, "clothing_image", "Failed to read clothing image.")

    async def _upload(self, upload: UploadFile, field: str, failure_message: str) -> SwapState:
        try:
            data_url = await file_to_data_url(upload)
        except FileReadError as e:
            logger.warning("%s %s", failure_message, e)
            self.state.error = failure_message
            return self.state

        setattr(self.state, field, data_url)
        self.state.result_image = None
        self.state.error = None
        self._revision += 1
        logger.info("Stored %s from %s", field, upload.filename)
        return self.state

    async def swap(self) -> SwapState:
        """Run one clothing swap against the remote service.

        Raises:
            SwapInProgressError: a swap is already awaiting its response
        """
        state = self.state
        if state.is_loading:
            raise SwapInProgressError("A swap is already in progress.")

        if not state.model_image or not state.clothing_image:
            state.error = MISSING_INPUT_MESSAGE
            return state

        state.is_loading = True
        state.error = None
        state.result_image = None
        revision = self._revision

        try:
            model_raw = strip_data_url_prefix(state.model_image)
            clothing_raw = strip_data_url_prefix(state.clothing_image)

            generated = await self.client.swap_clothing(model_raw, clothing_raw)

            if revision == self._revision:
                state.result_image = png_data_url(generated)
                logger.info("Swap completed")
            else:
                logger.info("Inputs changed during swap, discarding result")
        except Exception as e:
            logger.exception("Swap failed")
            if revision == self._revision:
                state.error = str(e) or UNKNOWN_ERROR_MESSAGE
        finally:
            state.is_loading = False

        return state
