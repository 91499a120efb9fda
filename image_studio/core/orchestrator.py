"""Orchestrator sequencing prompt enhancement and image generation."""

import time

from .prompt_enhancer import PromptEnhancer
from .image_generator import ImageGenerator
from ..models.enums import ImageStyle, AspectRatio
from ..models.schemas import GenerationRequest, ImageHandle
from ..utils.logger import get_logger

logger = get_logger(__name__)


class Orchestrator:
    """Runs enhance -> generate for one request."""

    def __init__(self, enhancer: PromptEnhancer, generator: ImageGenerator):
        self.enhancer = enhancer
        self.generator = generator

    async def generate_image(self, request: GenerationRequest) -> ImageHandle:
        """
        Generate an image for a request.

        The enhancement step cannot fail; generation failures propagate
        unchanged as GenerationError.
        """
        start_time = time.time()

        enhanced = await self.enhancer.enhance_detailed(request.prompt, request.style)
        if enhanced.degraded:
            logger.info(
                "Continuing with fallback prompt",
                extra={"style": request.style.value}
            )

        image = await self.generator.request_image(enhanced.enhanced, request.aspect_ratio)

        logger.info(
            "Generation pipeline complete",
            extra={
                "style": request.style.value,
                "aspect_ratio": request.aspect_ratio.value,
                "enhancement_degraded": enhanced.degraded,
                "processing_time_seconds": round(time.time() - start_time, 2),
            }
        )

        return image

    async def generate(
        self,
        prompt: str,
        style: ImageStyle = ImageStyle.NONE,
        aspect_ratio: AspectRatio = AspectRatio.SQUARE,
    ) -> ImageHandle:
        request = GenerationRequest(prompt=prompt, style=style, aspect_ratio=aspect_ratio)
        return await self.generate_image(request)
