"""
Settings management for the custom resource handler using Pydantic.

Values are read from environment variables (and an optional ``.env`` file),
which is how the Lambda function's configuration reaches the handler.
"""

from functools import lru_cache
from typing import TypeVar

from pydantic_settings import BaseSettings

T = TypeVar("T", bound=BaseSettings)

DEFAULT_CALLBACK_WARNING = (
    "Automatic GitHub configuration failed. "
    "Please manually paste the Role ARN in Makebind chat."
)


class Settings(BaseSettings):
    """
    Base settings class.

    Settings are automatically loaded from environment variables.
    """

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",  # Allow extra .env fields
    }


class ResourceSettings(Settings):
    """
    Runtime configuration of the OIDC custom resource handler.

    Attributes:
        LOG_LEVEL: Level applied to the package logger on each invocation
        HTTP_TIMEOUT: Timeout in seconds for outbound calls; None leaves the
            Lambda execution limit as the only bound
        CALLBACK_WARNING: Text attached as CallbackWarning when the
            notification callback fails
    """

    LOG_LEVEL: str = "INFO"
    HTTP_TIMEOUT: float | None = None
    CALLBACK_WARNING: str = DEFAULT_CALLBACK_WARNING


@lru_cache
def get_settings(settings_class: type[T] = Settings) -> T:
    """
    Get cached settings instance.

    Settings are cached to avoid re-reading environment variables on every
    warm invocation.

    Args:
        settings_class: Settings class to instantiate (default: Settings)

    Returns:
        Cached settings instance
    """
    return settings_class()
