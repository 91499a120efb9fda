"""Prompt-enhanced text-to-image generation service."""

__version__ = "1.0.0"
