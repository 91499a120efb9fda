"""Pydantic schemas for data validation."""

from typing import Optional
from pydantic import BaseModel, Field, field_validator
from datetime import datetime

from .enums import ImageStyle, AspectRatio, GenerationState
from ..utils.images import to_data_uri


class GenerationRequest(BaseModel):
    """One user submission: prompt, style and aspect ratio."""
    prompt: str
    style: ImageStyle = ImageStyle.NONE
    aspect_ratio: AspectRatio = AspectRatio.SQUARE

    class Config:
        frozen = True

    @field_validator("prompt")
    @classmethod
    def prompt_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("prompt must not be empty")
        return value


class EnhancedPrompt(BaseModel):
    """Result of prompt enhancement."""
    original: str
    enhanced: str
    style: ImageStyle
    degraded: bool = False  # True when the local fallback was used
    timestamp: datetime = Field(default_factory=datetime.utcnow)


class ImageHandle(BaseModel):
    """Generated image bytes plus what is needed to display them."""
    image_bytes: bytes
    mime_type: str = "image/jpeg"
    width: int
    height: int
    prompt_used: str
    timestamp: datetime = Field(default_factory=datetime.utcnow)

    class Config:
        frozen = True

    @property
    def data_uri(self) -> str:
        return to_data_uri(self.image_bytes, self.mime_type)


class GenerationResult(BaseModel):
    """Snapshot of a generation session as seen by the view layer."""
    state: GenerationState = GenerationState.IDLE
    image: Optional[ImageHandle] = None
    error: Optional[str] = None
    current_prompt: Optional[str] = None

    @property
    def loading(self) -> bool:
        return self.state == GenerationState.LOADING
