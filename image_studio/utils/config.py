"""Configuration management for the Image Studio service."""

import os
from pathlib import Path
from typing import Optional, Union
import yaml
from pydantic import BaseModel, Field
from dotenv import load_dotenv

from .errors import ConfigurationError
from .logger import get_logger

logger = get_logger(__name__)

# Load environment variables
load_dotenv()

DEFAULT_CONFIG_PATH = Path("config/models.yaml")


class TextModelConfig(BaseModel):
    """Text-generation model used to rewrite prompts."""
    name: str = "gemini-2.5-flash"


class ImageModelConfig(BaseModel):
    """Image-generation model used to render the rewritten prompt."""
    name: str = "imagen-4.0-generate-001"
    output_mime_type: str = "image/jpeg"


class Config(BaseModel):
    """Main application configuration."""

    # API Keys
    gemini_api_key: str = Field(..., alias="GEMINI_API_KEY")

    # Application Settings
    app_env: str = Field(default="development", alias="APP_ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Provider Settings
    gemini_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        alias="GEMINI_BASE_URL",
    )
    timeout_gemini_seconds: float = Field(default=120.0, alias="TIMEOUT_GEMINI_SECONDS")

    # Sessions
    session_ttl_seconds: int = Field(default=3600, alias="SESSION_TTL_SECONDS")

    # Model Configuration
    text_model: TextModelConfig = Field(default_factory=TextModelConfig)
    image_model: ImageModelConfig = Field(default_factory=ImageModelConfig)

    class Config:
        populate_by_name = True


# Global config instance
_config: Optional[Config] = None


def load_config(path: Union[str, Path, None] = None) -> Config:
    """
    Load configuration from environment and the models YAML file.

    Args:
        path: Location of models.yaml (defaults to config/models.yaml)

    Returns:
        Config instance

    Raises:
        ConfigurationError: If configuration is invalid
    """
    global _config

    models_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH

    try:
        if not models_path.exists():
            raise ConfigurationError(f"models.yaml not found at {models_path}")

        with open(models_path, "r", encoding="utf-8") as f:
            models_config = yaml.safe_load(f) or {}

        # Merge environment variables with YAML config
        config_data = {
            **os.environ,
            **models_config,
        }

        _config = Config(**config_data)

        logger.info(
            "Configuration loaded successfully",
            extra={
                "text_model": _config.text_model.name,
                "image_model": _config.image_model.name,
                "environment": _config.app_env,
            }
        )

        return _config

    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Failed to load configuration: {e}")


def get_config() -> Config:
    """
    Get the current configuration instance.

    Raises:
        ConfigurationError: If config not loaded
    """
    if _config is None:
        raise ConfigurationError("Configuration not loaded. Call load_config() first.")
    return _config
