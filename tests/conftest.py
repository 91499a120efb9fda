"""Pytest configuration and shared fixtures."""

import asyncio
from io import BytesIO
from typing import List, Optional

import pytest
from PIL import Image

from image_studio.core import PromptEnhancer, ImageGenerator, Orchestrator


class FakeTextClient:
    """Stands in for the text model; records every call."""

    def __init__(self, text: Optional[str] = None, error: Optional[Exception] = None):
        self.text = text
        self.error = error
        self.calls: List[dict] = []

    async def generate_text(self, model, system_instruction, message):
        self.calls.append({
            "model": model,
            "system_instruction": system_instruction,
            "message": message,
        })
        if self.error is not None:
            raise self.error
        return self.text


class FakeImageClient:
    """Stands in for the image model; optionally blocks until released."""

    def __init__(
        self,
        images: Optional[List[bytes]] = None,
        error: Optional[Exception] = None,
        gate: Optional[asyncio.Event] = None,
    ):
        self.images = images or []
        self.error = error
        self.gate = gate
        self.calls: List[dict] = []

    async def generate_images(self, model, prompt, number_of_images, output_mime_type, aspect_ratio):
        self.calls.append({
            "model": model,
            "prompt": prompt,
            "number_of_images": number_of_images,
            "output_mime_type": output_mime_type,
            "aspect_ratio": aspect_ratio,
        })
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return list(self.images)


def make_jpeg(width: int = 8, height: int = 6, color: str = "red") -> bytes:
    buffer = BytesIO()
    Image.new("RGB", (width, height), color).save(buffer, format="JPEG")
    return buffer.getvalue()


@pytest.fixture
def jpeg_bytes():
    """A small but real JPEG payload."""
    return make_jpeg()


@pytest.fixture
def text_client():
    return FakeTextClient(text="a vivid red apple on a wooden table, soft light")


@pytest.fixture
def image_client(jpeg_bytes):
    return FakeImageClient(images=[jpeg_bytes])


@pytest.fixture
def enhancer(text_client):
    return PromptEnhancer(text_client, model_name="text-model")


@pytest.fixture
def generator(image_client):
    return ImageGenerator(image_client, model_name="image-model")


@pytest.fixture
def orchestrator(enhancer, generator):
    return Orchestrator(enhancer=enhancer, generator=generator)


# Sample test data
@pytest.fixture
def sample_prompt():
    """Sample prompt for testing."""
    return "a red apple"


@pytest.fixture
def arabic_prompt():
    """Arabic prompt (sunset over Alexandria with Qaitbay citadel)."""
    return "غروب شمس ساحر على شاطئ بحر الإسكندرية مع قلعة قايتباي في الخلفية"
