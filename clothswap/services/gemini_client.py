"""Gemini API client for clothing swap image generation."""

import base64
import binascii
import logging
from typing import Any

import httpx

from ..config import GeminiConfig
from ..exceptions import RemoteSwapError
from ..utils.encoding import detect_mime_type


logger = logging.getLogger(__name__)

INVALID_RESPONSE_MESSAGE = "Image service returned an invalid response"


SWAP_PROMPT = """You are a virtual try-on assistant. The first image shows a model. The second image shows a clothing item.

Generate a photorealistic image of the model from the first image wearing the clothing item from the second image.

Keep the model's face, hair, body shape, skin tone, pose and the background exactly as they are. Only the clothing should change. Match the lighting and shadows of the first image so the clothing looks naturally worn.

Return only the edited image."""


class GeminiSwapClient:
    """Client for the Gemini ``generateContent`` endpoint, used for clothing swaps."""

    def __init__(
        self,
        config: GeminiConfig,
        api_key: str | None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config
        self.api_key = api_key
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.config.timeout,
                transport=self._transport,
            )
        return self._client

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def swap_clothing(self, model_image_b64: str, clothing_image_b64: str) -> str:
        """Generate an image of the model wearing the clothing.

        Args:
            model_image_b64: Base64 model photo, without a data URL prefix
            clothing_image_b64: Base64 clothing photo, without a data URL prefix

        Returns:
            Base64-encoded generated image

        Raises:
            RemoteSwapError: the call failed or no image came back
        """
        if not self.is_configured:
            raise RemoteSwapError("GEMINI_API_KEY is not configured")

        payload = self._build_request(model_image_b64, clothing_image_b64)

        logger.info("Requesting clothing swap from %s", self.config.model)
        try:
            response = await self.client.post(
                self.config.generate_url,
                json=payload,
                headers={"x-goog-api-key": self.api_key},
            )
        except httpx.HTTPError as e:
            raise RemoteSwapError(f"Image service request failed: {e}") from e

        if not response.is_success:
            raise RemoteSwapError(self._error_message(response))

        try:
            data = response.json()
        except ValueError as e:
            raise RemoteSwapError(INVALID_RESPONSE_MESSAGE) from e

        return self._extract_image(data)

    def _build_request(self, model_image_b64: str, clothing_image_b64: str) -> dict[str, Any]:
        """Build the generateContent body: both images inline, then the instruction."""
        return {
            "contents": [
                {
                    "role": "user",
                    "parts": [
                        self._inline_part(model_image_b64),
                        self._inline_part(clothing_image_b64),
                        {"text": SWAP_PROMPT},
                    ],
                }
            ],
            "generationConfig": {
                "responseModalities": ["IMAGE", "TEXT"],
            },
        }

    def _inline_part(self, image_b64: str) -> dict[str, Any]:
        try:
            head = base64.b64decode(image_b64[:64], validate=False)
        except (ValueError, binascii.Error):
            head = b""
        mime_type = detect_mime_type(head)
        if not mime_type.startswith("image/"):
            mime_type = "image/png"
        return {"inline_data": {"mime_type": mime_type, "data": image_b64}}

    def _error_message(self, response: httpx.Response) -> str:
        """Pull the service's own error message out of a failed response."""
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict):
            error = body.get("error")
            if isinstance(error, dict) and error.get("message"):
                return error["message"]

        text = response.text.strip()
        if text:
            return f"Image service error {response.status_code}: {text[:500]}"
        return f"Image service error {response.status_code}"

    def _extract_image(self, data: Any) -> str:
        """Return the first inline image payload of the first candidate."""
        if not isinstance(data, dict):
            raise RemoteSwapError(INVALID_RESPONSE_MESSAGE)

        candidates = data.get("candidates") or []
        if not isinstance(candidates, list):
            raise RemoteSwapError(INVALID_RESPONSE_MESSAGE)
        text_reply = ""

        if candidates:
            candidate = candidates[0]
            if not isinstance(candidate, dict):
                raise RemoteSwapError(INVALID_RESPONSE_MESSAGE)
            content = candidate.get("content") or {}
            parts = (content.get("parts") or []) if isinstance(content, dict) else None
            if not isinstance(parts, list):
                raise RemoteSwapError(INVALID_RESPONSE_MESSAGE)
            for part in parts:
                if not isinstance(part, dict):
                    raise RemoteSwapError(INVALID_RESPONSE_MESSAGE)
                inline = part.get("inlineData") or part.get("inline_data")
                if isinstance(inline, dict) and inline.get("data"):
                    return inline["data"]
                if isinstance(part.get("text"), str):
                    text_reply += part["text"]

        feedback = data.get("promptFeedback")
        block_reason = feedback.get("blockReason") if isinstance(feedback, dict) else None
        if block_reason:
            raise RemoteSwapError(f"Image generation was blocked. Reason: {block_reason}")
        if text_reply:
            raise RemoteSwapError(f"The model did not return an image: {text_reply.strip()[:300]}")
        raise RemoteSwapError("The model did not return an image")

    async def close(self):
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
