"""
Configuration settings for the Record Tracker.

Uses Pydantic Settings to load environment variables for logging and the
console session defaults (menu title, prompt, end-of-input guard).
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("WARNING", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Console session
    tracker_title: str = Field("Record Tracker v1.0", alias="TRACKER_TITLE")
    tracker_prompt: str = Field("> ", alias="TRACKER_PROMPT")
    tracker_max_empty_reads: int = Field(0, ge=0, alias="TRACKER_MAX_EMPTY_READS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
