"""Image processing utilities."""

import base64
from io import BytesIO
from typing import Tuple
from PIL import Image

from .logger import get_logger
from .errors import ImageProcessingError

logger = get_logger(__name__)


def base64_to_bytes(base64_string: str) -> bytes:
    """
    Convert base64 string to bytes.

    Args:
        base64_string: Base64 encoded image, optionally as a data URI

    Returns:
        Image bytes
    """
    # Remove data URL prefix if present
    if "," in base64_string:
        base64_string = base64_string.split(",", 1)[1]

    return base64.b64decode(base64_string)


def bytes_to_base64(image_bytes: bytes) -> str:
    """Convert image bytes to base64 string."""
    return base64.b64encode(image_bytes).decode('utf-8')


def to_data_uri(image_bytes: bytes, mime_type: str = "image/jpeg") -> str:
    """Wrap image bytes in an embeddable data URI."""
    return f"data:{mime_type};base64,{bytes_to_base64(image_bytes)}"


def decode_image(image_bytes: bytes) -> Tuple[int, int, str]:
    """
    Decode image bytes and read their dimensions.

    Args:
        image_bytes: Raw image bytes

    Returns:
        Tuple of (width, height, format)

    Raises:
        ImageProcessingError: If the bytes are not a readable image
    """
    if not image_bytes:
        raise ImageProcessingError("Image payload is empty")

    try:
        with Image.open(BytesIO(image_bytes)) as image:
            image.verify()
            width, height = image.size
            image_format = image.format or "UNKNOWN"
    except Exception as e:
        logger.error(
            f"Failed to decode image: {e}",
            extra={"size_bytes": len(image_bytes), "error": str(e)}
        )
        raise ImageProcessingError(f"Failed to decode image: {e}")

    return width, height, image_format
