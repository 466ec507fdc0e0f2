"""Configuration using pydantic-settings."""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings read from the environment (or a local .env file)."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    port: int = Field(gt=0, lt=65536)
    host: str = "0.0.0.0"  # nosec B104 - Required for container deployment
    log_level: str = "INFO"

    # Sent as X-Funtranslations-Api-Secret when set
    api_token: str | None = None
    pokemon_api_base_url: str = "https://pokeapi.co/api/v2"
    translation_api_base_url: str = "https://api.funtranslations.com/translate"
    request_timeout: float = Field(default=5.0, gt=0)
    description_language: str = "en"

    # Cache settings (unbounded by default, the Pokemon universe is small)
    cache_ttl_seconds: float | None = Field(default=None, gt=0)
    cache_max_size: int | None = Field(default=None, gt=0)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: str) -> None:
    """Configure application logging for the given level name."""
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    logging.root.setLevel(log_level)
    logger.info(f"Logging configured: level={logging.getLevelName(log_level)}")
