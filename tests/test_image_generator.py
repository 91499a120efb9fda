"""Tests for the image requestor and its failure classification."""

import pytest

from image_studio.core import ImageGenerator
from image_studio.core.image_generator import to_user_message
from image_studio.models import AspectRatio
from image_studio.utils.errors import (
    GenerationError,
    NoImageProducedError,
    ProviderError,
    SafetyRejectedError,
)

from .conftest import FakeImageClient, make_jpeg


@pytest.mark.asyncio
async def test_requests_exactly_one_jpeg_with_ratio(generator, image_client, jpeg_bytes):
    handle = await generator.request_image("a red apple", AspectRatio.LANDSCAPE_16_9)

    assert image_client.calls == [{
        "model": "image-model",
        "prompt": "a red apple",
        "number_of_images": 1,
        "output_mime_type": "image/jpeg",
        "aspect_ratio": "16:9",
    }]
    assert handle.image_bytes == jpeg_bytes
    assert handle.prompt_used == "a red apple"


@pytest.mark.asyncio
async def test_handle_exposes_dimensions_and_data_uri():
    generator = ImageGenerator(FakeImageClient(images=[make_jpeg(16, 9)]))

    handle = await generator.request_image("wide", AspectRatio.LANDSCAPE_16_9)

    assert (handle.width, handle.height) == (16, 9)
    assert handle.mime_type == "image/jpeg"
    assert handle.data_uri.startswith("data:image/jpeg;base64,")


@pytest.mark.asyncio
async def test_zero_images_raises_no_image_produced():
    generator = ImageGenerator(FakeImageClient(images=[]))

    with pytest.raises(NoImageProducedError) as exc_info:
        await generator.request_image("a red apple", AspectRatio.SQUARE)

    assert str(exc_info.value) == "No image was generated. Please try a different prompt."


@pytest.mark.asyncio
@pytest.mark.parametrize("message", [
    "Blocked: Safety violation",
    "gemini error: Safety filter blocked the image: person generation",
    "request rejected by SAFETY settings",
])
async def test_safety_errors_are_rewritten(message):
    generator = ImageGenerator(FakeImageClient(error=RuntimeError(message)))

    with pytest.raises(SafetyRejectedError) as exc_info:
        await generator.request_image("a red apple", AspectRatio.SQUARE)

    assert str(exc_info.value) == (
        "The prompt triggered safety filters. Please modify your description."
    )


@pytest.mark.asyncio
async def test_other_errors_pass_message_through():
    error = ProviderError("gemini", "model overloaded", 503)
    generator = ImageGenerator(FakeImageClient(error=error))

    with pytest.raises(GenerationError) as exc_info:
        await generator.request_image("a red apple", AspectRatio.SQUARE)

    assert str(exc_info.value) == "gemini error: model overloaded"
    assert exc_info.value.__cause__ is error


@pytest.mark.asyncio
async def test_does_not_retry():
    client = FakeImageClient(error=RuntimeError("timeout"))
    generator = ImageGenerator(client)

    with pytest.raises(GenerationError):
        await generator.request_image("a red apple", AspectRatio.SQUARE)

    assert len(client.calls) == 1


@pytest.mark.asyncio
async def test_undecodable_payload_is_a_generation_error():
    generator = ImageGenerator(FakeImageClient(images=[b"not an image"]))

    with pytest.raises(GenerationError) as exc_info:
        await generator.request_image("a red apple", AspectRatio.SQUARE)

    assert "Failed to decode image" in str(exc_info.value)


def test_message_falls_back_when_error_is_blank():
    assert to_user_message(RuntimeError()) == "Failed to generate image."
