"""Custom exception classes for the image studio service."""


class ImageStudioError(Exception):
    """Base exception for all service errors."""
    pass


class ConfigurationError(ImageStudioError):
    """Configuration or initialization errors."""
    pass


class APIError(ImageStudioError):
    """Base class for API-related errors."""
    pass


class ProviderError(APIError):
    """Generic provider API error with status code."""

    def __init__(self, provider: str, message: str, status_code: int = None):
        self.provider = provider
        self.status_code = status_code
        super().__init__(f"{provider} error: {message}")


class AuthenticationError(ProviderError):
    """API authentication failed."""

    def __init__(self, provider: str):
        super().__init__(provider, "Authentication failed", 401)


class RateLimitError(ProviderError):
    """API rate limit exceeded."""

    def __init__(self, provider: str, retry_after: int = None):
        self.retry_after = retry_after
        message = "Rate limit exceeded"
        if retry_after:
            message += f", retry after {retry_after}s"
        super().__init__(provider, message, 429)


class EnhancementError(ImageStudioError):
    """Errors during prompt enhancement."""
    pass


class GenerationError(ImageStudioError):
    """Image generation failed. The message is shown to the user as-is."""
    pass


class NoImageProducedError(GenerationError):
    """The image model returned zero images."""

    MESSAGE = "No image was generated. Please try a different prompt."

    def __init__(self, message: str = MESSAGE):
        super().__init__(message)


class SafetyRejectedError(GenerationError):
    """The prompt was blocked by the provider's safety filters."""

    MESSAGE = "The prompt triggered safety filters. Please modify your description."

    def __init__(self, message: str = MESSAGE):
        super().__init__(message)


class ImageProcessingError(ImageStudioError):
    """Error processing image data."""
    pass
