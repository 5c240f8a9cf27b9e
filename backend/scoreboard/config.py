"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default: the scoreboard runs with no environment at all
    - get_settings() is cached (lru_cache), single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - SCOREBOARD_ prefix keeps the process environment unambiguous
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMATS = ("json", "text")


class Settings(BaseSettings):
    """Scoreboard settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SCOREBOARD_", env_file=".env", case_sensitive=False,
    )

    # Concurrency
    serialize_mutations: bool = True

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v: str) -> str:
        if isinstance(v, str):
            v = v.strip().lower()
        if v not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {', '.join(LOG_FORMATS)}")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
