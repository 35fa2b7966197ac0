"""Configuration management for the clothing swap service."""

import logging

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class GeminiConfig(BaseModel):
    """Gemini image generation settings."""
    model: str = "gemini-2.5-flash-image-preview"
    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    timeout: float = 120.0  # image generation is slow

    @property
    def generate_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/models/{self.model}:generateContent"


class ServerConfig(BaseModel):
    """HTTP server settings."""
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"


class AppConfig(BaseSettings):
    """Main application configuration."""

    # Credential (loaded from .env / GEMINI_API_KEY)
    gemini_api_key: str | None = None

    # Sub-configs
    gemini: GeminiConfig = Field(default_factory=GeminiConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

    class Config:
        env_file = ".env"
        env_prefix = ""
        env_nested_delimiter = "__"
        extra = "ignore"


def load_config() -> AppConfig:
    """Load configuration from environment and defaults."""
    return AppConfig()


def configure_logging(level: str = "INFO") -> None:
    """Set up root logging for the service."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
