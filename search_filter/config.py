"""
Configuration module for search-filter.

Uses Pydantic Settings for environment variable support and validation.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, ValidationError, field_validator
from typing import Optional, Literal
from pathlib import Path

from .utils import ConfigurationError


class Settings(BaseSettings):
    """
    Application configuration with environment variable support.

    All settings can be overridden via environment variables or .env file.
    """

    # Provider credentials
    google_api_key: str = Field(..., description="Google API key")
    google_search_engine_id: str = Field(
        ...,
        description="Custom Search Engine id (cx)"
    )

    # Search settings
    default_max_results: int = Field(
        default=20,
        gt=0,
        description="Result cap used when none is given on the command line"
    )
    request_timeout: float = Field(
        default=30.0,
        gt=0,
        description="HTTP request timeout (seconds)"
    )

    # Logging settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging level"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional log file path"
    )
    json_logs: bool = Field(
        default=False,
        description="Output logs as JSON"
    )

    model_config = {
        "env_file": [
            ".env",
            Path(__file__).parent / ".env",
        ],
        "env_file_encoding": "utf-8",
        "extra": "ignore"
    }

    @field_validator("google_api_key", "google_search_engine_id", mode="before")
    @classmethod
    def validate_required(cls, v: Optional[str]) -> str:
        """Reject empty and placeholder credentials."""
        if v is None or not str(v).strip():
            raise ValueError("must be set to a non-empty value")
        v = str(v).strip()
        if v.startswith("your-") or v == "xxx":
            raise ValueError("must be set to a real value, not a placeholder")
        return v


def get_settings(**overrides) -> Settings:
    """
    Load application settings.

    Raises:
        ConfigurationError: If required settings are missing or invalid
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        fields = ", ".join(
            str(err["loc"][0]) for err in e.errors() if err.get("loc")
        )
        raise ConfigurationError(
            f"Invalid or missing configuration ({fields}): set GOOGLE_API_KEY "
            f"and GOOGLE_SEARCH_ENGINE_ID in the environment or a .env file"
        ) from e
