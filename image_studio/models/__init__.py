"""Data models and schemas for the Image Studio service."""

from .schemas import (
    GenerationRequest,
    EnhancedPrompt,
    ImageHandle,
    GenerationResult,
)
from .enums import (
    ImageStyle,
    AspectRatio,
    GenerationState,
)
from .catalog import (
    CatalogOption,
    STYLE_OPTIONS,
    ASPECT_RATIO_OPTIONS,
)

__all__ = [
    "GenerationRequest",
    "EnhancedPrompt",
    "ImageHandle",
    "GenerationResult",
    "ImageStyle",
    "AspectRatio",
    "GenerationState",
    "CatalogOption",
    "STYLE_OPTIONS",
    "ASPECT_RATIO_OPTIONS",
]
