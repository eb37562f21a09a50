"""Configuration using pydantic-settings.

Values come from ``FLATODT_*`` environment variables or a ``.env`` file.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from flatodt import __version__

DEFAULT_GENERATOR = f"flatodt/{__version__}"

_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """flatodt settings loaded from the environment.

    Environment variables:
    - FLATODT_INITIAL_CREATOR: default ``meta:initial-creator`` for new documents
    - FLATODT_GENERATOR: value of ``meta:generator``
    - FLATODT_LOG_LEVEL / FLATODT_JSON_LOGS: logging setup used by the CLI
    - FLATODT_PRETTY_PRINT: indent the serialized XML
    """

    model_config = SettingsConfigDict(
        env_prefix="FLATODT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Document defaults
    initial_creator: str | None = None
    generator: str = DEFAULT_GENERATOR

    # Output
    pretty_print: bool = True

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
