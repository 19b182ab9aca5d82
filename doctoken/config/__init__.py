"""
Configuration package for doctoken.
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

MDN_GLOBAL_OBJECTS_URL = (
    "https://developer.mozilla.org/en-US/docs/Web/JavaScript/Reference/Global_Objects/"
)


class Settings(BaseSettings):
    """Application settings."""

    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None
    WARN_UNKNOWN_TAGLETS: bool = True
    EXTERN_DOCS_URL: str = MDN_GLOBAL_OBJECTS_URL
    FILE_PREFIX: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
