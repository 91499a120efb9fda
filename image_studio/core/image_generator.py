"""Image generation: render a prompt with the image model."""

from typing import List, Protocol

from ..models.enums import AspectRatio
from ..models.schemas import ImageHandle
from ..utils.images import decode_image
from ..utils.logger import get_logger
from ..utils.errors import (
    GenerationError,
    NoImageProducedError,
    SafetyRejectedError,
)

logger = get_logger(__name__)

SAFETY_INDICATOR = "safety"
DEFAULT_FAILURE_MESSAGE = "Failed to generate image."


class ImageModelClient(Protocol):
    async def generate_images(
        self,
        model: str,
        prompt: str,
        number_of_images: int,
        output_mime_type: str,
        aspect_ratio: str,
    ) -> List[bytes]:
        ...


def to_user_message(error: Exception) -> str:
    """Map a provider failure to the message shown to the user."""
    message = str(error) or DEFAULT_FAILURE_MESSAGE
    if SAFETY_INDICATOR in message.lower():
        return SafetyRejectedError.MESSAGE
    return message


class ImageGenerator:
    """Requests exactly one image per call from the image model."""

    def __init__(
        self,
        image_client: ImageModelClient,
        model_name: str = "imagen-4.0-generate-001",
        output_mime_type: str = "image/jpeg",
    ):
        """
        Initialize image generator.

        Args:
            image_client: Client exposing generate_images()
            model_name: Image model id
            output_mime_type: Encoding requested from the model
        """
        self.client = image_client
        self.model_name = model_name
        self.output_mime_type = output_mime_type

    async def request_image(self, prompt: str, aspect_ratio: AspectRatio) -> ImageHandle:
        """
        Generate a single image for the prompt.

        Args:
            prompt: Enhanced prompt
            aspect_ratio: Requested aspect ratio, passed through unchanged

        Returns:
            ImageHandle wrapping the decoded payload

        Raises:
            NoImageProducedError: The model returned no images
            SafetyRejectedError: The provider reported a safety block
            GenerationError: Any other failure, with a user-facing message
        """
        aspect_ratio = AspectRatio(aspect_ratio)

        logger.info(
            f"Generating image with {self.model_name}",
            extra={
                "model": self.model_name,
                "aspect_ratio": aspect_ratio.value,
                "prompt": prompt[:200],
            }
        )

        try:
            images = await self.client.generate_images(
                model=self.model_name,
                prompt=prompt,
                number_of_images=1,
                output_mime_type=self.output_mime_type,
                aspect_ratio=aspect_ratio.value,
            )

            if not images:
                raise NoImageProducedError()

            image_bytes = images[0]
            width, height, _ = decode_image(image_bytes)

        except GenerationError as e:
            logger.error(
                f"Generation failed for {self.model_name}: {e}",
                extra={"model": self.model_name, "error": str(e)}
            )
            raise
        except Exception as e:
            message = to_user_message(e)
            logger.error(
                f"Generation failed for {self.model_name}: {e}",
                extra={
                    "model": self.model_name,
                    "error": str(e),
                    "error_type": type(e).__name__,
                    "user_message": message,
                }
            )
            if message == SafetyRejectedError.MESSAGE:
                raise SafetyRejectedError() from e
            raise GenerationError(message) from e

        logger.info(
            "Image generated",
            extra={
                "model": self.model_name,
                "size_kb": round(len(image_bytes) / 1024, 1),
                "width": width,
                "height": height,
            }
        )

        return ImageHandle(
            image_bytes=image_bytes,
            mime_type=self.output_mime_type,
            width=width,
            height=height,
            prompt_used=prompt,
        )
