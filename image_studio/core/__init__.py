"""Core business logic components."""

from .prompt_enhancer import PromptEnhancer
from .image_generator import ImageGenerator
from .orchestrator import Orchestrator
from .session import GenerationSession, SessionStore

__all__ = [
    "PromptEnhancer",
    "ImageGenerator",
    "Orchestrator",
    "GenerationSession",
    "SessionStore",
]
