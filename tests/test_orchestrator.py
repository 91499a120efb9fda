"""End-to-end tests of the enhance -> generate pipeline."""

import pytest
from pydantic import ValidationError

from image_studio.core import PromptEnhancer, ImageGenerator, Orchestrator
from image_studio.models import GenerationRequest, ImageStyle, AspectRatio
from image_studio.utils.errors import GenerationError, NoImageProducedError, SafetyRejectedError

from .conftest import FakeImageClient, FakeTextClient


def build(text_client, image_client) -> Orchestrator:
    return Orchestrator(
        enhancer=PromptEnhancer(text_client),
        generator=ImageGenerator(image_client),
    )


@pytest.mark.asyncio
async def test_enhanced_prompt_reaches_image_model(orchestrator, image_client, jpeg_bytes, sample_prompt):
    request = GenerationRequest(prompt=sample_prompt, style=ImageStyle.NONE, aspect_ratio=AspectRatio.SQUARE)

    handle = await orchestrator.generate_image(request)

    assert handle.image_bytes == jpeg_bytes
    assert image_client.calls[0]["prompt"] == "a vivid red apple on a wooden table, soft light"
    assert image_client.calls[0]["aspect_ratio"] == "1:1"


@pytest.mark.asyncio
async def test_text_model_failure_falls_back_to_literal_prompt(jpeg_bytes, sample_prompt):
    image_client = FakeImageClient(images=[jpeg_bytes])
    orchestrator = build(FakeTextClient(error=RuntimeError("quota exceeded")), image_client)

    await orchestrator.generate(sample_prompt, ImageStyle.NONE, AspectRatio.SQUARE)

    assert image_client.calls[0]["prompt"] == "a red apple"


@pytest.mark.asyncio
async def test_text_model_failure_with_style_uses_composed_prompt(jpeg_bytes, sample_prompt):
    image_client = FakeImageClient(images=[jpeg_bytes])
    orchestrator = build(FakeTextClient(error=RuntimeError("down")), image_client)

    await orchestrator.generate(sample_prompt, ImageStyle.THREE_D, AspectRatio.PORTRAIT_3_4)

    assert image_client.calls[0]["prompt"] == "a red apple, in 3D Render style, high quality, 4k detail"
    assert image_client.calls[0]["aspect_ratio"] == "3:4"


@pytest.mark.asyncio
async def test_zero_images_fails_generation(text_client, sample_prompt):
    orchestrator = build(text_client, FakeImageClient(images=[]))

    with pytest.raises(NoImageProducedError, match="No image was generated"):
        await orchestrator.generate(sample_prompt)


@pytest.mark.asyncio
async def test_safety_failure_propagates_rewritten(text_client, sample_prompt):
    orchestrator = build(text_client, FakeImageClient(error=Exception("Blocked: Safety violation")))

    with pytest.raises(SafetyRejectedError) as exc_info:
        await orchestrator.generate(sample_prompt)

    assert isinstance(exc_info.value, GenerationError)
    assert str(exc_info.value) == "The prompt triggered safety filters. Please modify your description."


def test_request_rejects_blank_prompt():
    with pytest.raises(ValidationError):
        GenerationRequest(prompt="   ")


def test_request_is_immutable(sample_prompt):
    request = GenerationRequest(prompt=sample_prompt)

    with pytest.raises(ValidationError):
        request.prompt = "something else"
