"""Enumerations for the Image Studio service."""

from enum import Enum


class ImageStyle(str, Enum):
    """Visual style used to steer prompt rewriting."""
    NONE = "None"
    REALISTIC = "Realistic"
    CARTOON = "Cartoon"
    FANTASY = "Fantasy"
    ARTISTIC = "Artistic"
    THREE_D = "3D Render"
    CINEMATIC = "Cinematic"
    ANIME = "Anime"
    OIL_PAINTING = "Oil Painting"


class AspectRatio(str, Enum):
    """Aspect ratio passed through to the image model."""
    SQUARE = "1:1"
    PORTRAIT_3_4 = "3:4"
    PORTRAIT_9_16 = "9:16"
    LANDSCAPE_4_3 = "4:3"
    LANDSCAPE_16_9 = "16:9"


class GenerationState(str, Enum):
    """Lifecycle state of a generation session."""
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"
