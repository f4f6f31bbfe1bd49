"""Process settings via Pydantic Settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables and a ``.env`` file.

    All variables are prefixed with ``REVIEW_`` (e.g. ``REVIEW_LOG_LEVEL``).
    Provider credentials live here; analysis thresholds live in the TOML
    config handled by :mod:`reviewengine.config.manager`.
    """

    model_config = SettingsConfigDict(
        env_prefix="REVIEW_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # AI orchestration
    ai_enabled: bool = True
    ai_timeout: float = 30.0  # seconds, per provider call
    default_model: str = "gemini-2.0-flash-001"

    # OpenAI
    openai_api_key: str | None = None
    openai_base_url: str | None = None

    # Gemini (OpenAI-compatible endpoint)
    gemini_api_key: str | None = None
    gemini_base_url: str | None = None

    # Claude via the agent SDK (uses the local Claude Code session)
    claude_enabled: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"  # "json" or "text"
