"""
Application settings and configuration management.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from tubelist import __version__

DEFAULT_ENDPOINT = "https://www.googleapis.com/youtube/v3"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = Field(default="tubelist")
    app_version: str = Field(default=__version__)
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # YouTube API
    youtube_api_key: str = Field(default="")
    youtube_api_endpoint: str = Field(default=DEFAULT_ENDPOINT)

    # Requests
    request_timeout: float = Field(default=30.0, gt=0)
    default_max_results: int = Field(default=20, ge=0, le=50)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    @field_validator("youtube_api_endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        """Require an http(s) base URL and strip the trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid API endpoint: {v}")
        return v.rstrip("/")

    def api_key(self) -> str:
        """API key sent as the ``key`` query parameter."""
        return self.youtube_api_key

    def endpoint(self) -> str:
        """Base URL that request paths are appended to."""
        return self.youtube_api_endpoint

    @property
    def has_api_key(self) -> bool:
        """Check if an API key is configured."""
        return bool(self.youtube_api_key.strip())

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
