"""Google Generative Language API client (Gemini text + Imagen images)."""

import base64
import binascii
from typing import Any, Dict, List, Optional

import httpx

from .base import BaseProvider
from ..utils.logger import get_logger
from ..utils.errors import ProviderError, AuthenticationError, RateLimitError

logger = get_logger(__name__)

PROVIDER = "gemini"


class GeminiClient(BaseProvider):
    """Client for Gemini text generation and Imagen image generation."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout: float = 120.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Gemini client.

        Args:
            api_key: Generative Language API key
            base_url: API root (v1beta)
            timeout: Request timeout in seconds
            transport: Optional httpx transport override
        """
        super().__init__(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )

    def _get_default_headers(self) -> dict:
        """Get default headers for Gemini requests."""
        return {
            "x-goog-api-key": self.api_key,
            "Content-Type": "application/json",
        }

    async def generate_text(
        self,
        model: str,
        system_instruction: str,
        message: str,
    ) -> Optional[str]:
        """
        Run a single-turn completion with a system instruction.

        Args:
            model: Text model id (e.g. gemini-2.5-flash)
            system_instruction: Instruction placed in systemInstruction
            message: The only user message

        Returns:
            Concatenated text of the first candidate, or None if the model
            returned no text
        """
        self._ensure_client()

        payload = {
            "systemInstruction": {"parts": [{"text": system_instruction}]},
            "contents": [
                {"role": "user", "parts": [{"text": message}]},
            ],
        }

        response = await self.client.post(
            f"{self.base_url}/models/{model}:generateContent",
            json=payload,
        )
        self._handle_response_errors(response)

        data = response.json()
        text = self._extract_text(data)

        logger.info(
            "Text generation complete",
            extra={
                "model": model,
                "has_text": text is not None,
                "block_reason": data.get("promptFeedback", {}).get("blockReason"),
            }
        )

        return text

    async def generate_images(
        self,
        model: str,
        prompt: str,
        number_of_images: int = 1,
        output_mime_type: str = "image/jpeg",
        aspect_ratio: str = "1:1",
    ) -> List[bytes]:
        """
        Generate images from a prompt.

        Returns:
            Decoded image payloads, possibly empty

        Raises:
            ProviderError: On HTTP errors, undecodable payloads, or when every
                returned image was removed by the safety filter
        """
        self._ensure_client()

        payload = {
            "instances": [{"prompt": prompt}],
            "parameters": {
                "sampleCount": number_of_images,
                "aspectRatio": aspect_ratio,
                "outputOptions": {"mimeType": output_mime_type},
            },
        }

        logger.info(
            f"Submitting to {model}",
            extra={
                "model": model,
                "prompt": prompt[:100],
                "aspect_ratio": aspect_ratio,
                "number_of_images": number_of_images,
            }
        )

        response = await self.client.post(
            f"{self.base_url}/models/{model}:predict",
            json=payload,
        )
        self._handle_response_errors(response)

        predictions = response.json().get("predictions") or []

        images: List[bytes] = []
        filtered: List[str] = []
        for prediction in predictions:
            encoded = prediction.get("bytesBase64Encoded")
            if encoded:
                try:
                    images.append(base64.b64decode(encoded))
                except (binascii.Error, ValueError) as e:
                    raise ProviderError(PROVIDER, f"Invalid image payload: {e}")
            elif prediction.get("raiFilteredReason"):
                filtered.append(prediction["raiFilteredReason"])

        if not images and filtered:
            logger.warning(
                "All images removed by safety filter",
                extra={"model": model, "reasons": filtered}
            )
            raise ProviderError(PROVIDER, f"Safety filter blocked the image: {filtered[0]}")

        logger.info(
            "Image generation complete",
            extra={
                "model": model,
                "images": len(images),
                "filtered": len(filtered),
            }
        )

        return images

    @staticmethod
    def _extract_text(data: Dict[str, Any]) -> Optional[str]:
        """Join the text parts of the first candidate."""
        candidates = data.get("candidates") or []
        if not candidates:
            return None

        parts = candidates[0].get("content", {}).get("parts") or []
        texts = [part["text"] for part in parts if part.get("text") and not part.get("thought")]
        if not texts:
            return None
        return "".join(texts)

    def _handle_response_errors(self, response: httpx.Response):
        """Handle HTTP response errors."""
        if response.status_code in (401, 403):
            raise AuthenticationError(PROVIDER)
        elif response.status_code == 429:
            retry_after = response.headers.get("Retry-After")
            raise RateLimitError(
                PROVIDER,
                int(retry_after) if retry_after and retry_after.isdigit() else None
            )
        elif response.status_code >= 400:
            try:
                error_message = response.json().get("error", {}).get("message", response.text)
            except ValueError:
                error_message = response.text

            logger.error(
                f"Gemini request failed: {response.status_code}",
                extra={
                    "status": response.status_code,
                    "response": response.text[:500],
                }
            )

            raise ProviderError(
                PROVIDER,
                error_message,
                response.status_code
            )
