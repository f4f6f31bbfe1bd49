"""Shared pytest fixtures for the reviewengine test suite."""

from __future__ import annotations

import pytest

from reviewengine.config import EngineConfig, Settings


@pytest.fixture(autouse=True)
def _clear_provider_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep real provider keys in the developer's shell out of every test."""
    for var in ("OPENAI_API_KEY", "GEMINI_API_KEY"):
        monkeypatch.delenv(var, raising=False)
    for var in (
        "REVIEW_OPENAI_API_KEY",
        "REVIEW_GEMINI_API_KEY",
        "REVIEW_CLAUDE_ENABLED",
        "REVIEW_DEFAULT_MODEL",
        "REVIEW_AI_ENABLED",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def test_settings() -> Settings:
    """Settings instance with test defaults, ignoring any .env file on disk."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        log_level="DEBUG",
        log_format="text",
    )


@pytest.fixture
def engine_config() -> EngineConfig:
    return EngineConfig()
