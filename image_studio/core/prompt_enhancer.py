"""Prompt enhancement: translate and enrich the user's prompt before rendering."""

from typing import Optional, Protocol

from ..models.enums import ImageStyle
from ..models.schemas import EnhancedPrompt
from ..utils.logger import get_logger

logger = get_logger(__name__)


SYSTEM_INSTRUCTION_TEMPLATE = """You are an expert AI image prompt specialist.
Your task is to translate the user's input to English (if in Arabic or other languages) and refine it into a high-quality image generation prompt.

Rules:
1. If the input is in Arabic, translate it accurately to English first.
2. Add descriptive details about lighting, texture, and composition that match the requested style: "{style}".
3. Keep the prompt concise (under 70 words) but vivid.
4. Return ONLY the enhanced prompt text. Do not add quotation marks or labels."""


class TextModelClient(Protocol):
    async def generate_text(
        self, model: str, system_instruction: str, message: str
    ) -> Optional[str]:
        ...


def build_system_instruction(style: ImageStyle) -> str:
    return SYSTEM_INSTRUCTION_TEMPLATE.format(style=ImageStyle(style).value)


def fallback_prompt(prompt: str, style: ImageStyle) -> str:
    """Local composition used when the text model is unavailable."""
    style = ImageStyle(style)
    if style != ImageStyle.NONE:
        return f"{prompt}, in {style.value} style, high quality, 4k detail"
    return prompt


class PromptEnhancer:
    """Rewrites user prompts into English image prompts with a text model."""

    def __init__(self, text_client: TextModelClient, model_name: str = "gemini-2.5-flash"):
        """
        Initialize prompt enhancer.

        Args:
            text_client: Client exposing generate_text()
            model_name: Text model used for rewriting
        """
        self.client = text_client
        self.model_name = model_name

    async def enhance(self, prompt: str, style: ImageStyle) -> str:
        """Return the enhanced prompt. Never raises."""
        result = await self.enhance_detailed(prompt, style)
        return result.enhanced

    async def enhance_detailed(self, prompt: str, style: ImageStyle) -> EnhancedPrompt:
        """
        Enhance a prompt, reporting whether the fallback was used.

        Model failures are absorbed: the prompt is composed locally instead
        and the result is marked degraded.
        """
        style = ImageStyle(style)

        try:
            text = await self.client.generate_text(
                model=self.model_name,
                system_instruction=build_system_instruction(style),
                message=prompt,
            )
        except Exception as e:
            enhanced = fallback_prompt(prompt, style)
            logger.warning(
                f"Prompt enhancement failed, using fallback: {e}",
                extra={
                    "model": self.model_name,
                    "style": style.value,
                    "error": str(e),
                    "original_prompt": prompt[:200],
                    "enhanced_prompt": enhanced[:500],
                }
            )
            return EnhancedPrompt(original=prompt, enhanced=enhanced, style=style, degraded=True)

        enhanced = (text or "").strip() or prompt

        logger.info(
            "Prompt enhanced",
            extra={
                "model": self.model_name,
                "style": style.value,
                "original_prompt": prompt[:200],
                "enhanced_prompt": enhanced[:500],
            }
        )

        return EnhancedPrompt(original=prompt, enhanced=enhanced, style=style)
