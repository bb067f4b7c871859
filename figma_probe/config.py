"""Application configuration management."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Keys
    figma_access_token: str = ""

    # Targets
    figma_file_id: Optional[str] = None
    figma_node_id: Optional[str] = None

    # Application
    log_level: str = "INFO"

    # HTTP Settings
    figma_api_base_url: str = "https://api.figma.com/v1"
    request_timeout: float = 30.0
    max_retries: int = 3

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
