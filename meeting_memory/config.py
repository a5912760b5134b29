from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings

from meeting_memory.analysis_config import AssigneeMatching


class Settings(BaseSettings):
    """Application settings validated via Pydantic.

    Values are loaded from environment variables and/or a .env file.
    """

    # Analysis
    lookahead_window: int = 5
    default_duration_minutes: int = 45
    assignee_matching: AssigneeMatching = AssigneeMatching.SUBSTRING

    # App config
    max_upload_bytes: int = 5 * 1024 * 1024
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Gracefully handles missing .env files (e.g. in CI/testing) by falling
    back to environment variables and defaults.
    """
    try:
        return Settings()
    except Exception:
        # If .env is missing or unreadable, build settings from env vars only.
        return Settings(_env_file=None)  # type: ignore[call-arg]


settings = get_settings()
