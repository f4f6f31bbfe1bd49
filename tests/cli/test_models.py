"""Tests for the models subcommand."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from typer.testing import CliRunner

from reviewengine.cli.app import app
from reviewengine.providers.catalog import FALLBACK_MODEL_IDS


def test_list_without_providers(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(app, ["models", "list"])
    assert result.exit_code == 0
    assert "No provider configured" in result.output
    for model_id in FALLBACK_MODEL_IDS:
        assert model_id in result.output


def test_list_with_gemini(cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "g-test")
    result = cli_runner.invoke(app, ["models", "list"])
    assert result.exit_code == 0
    assert "No provider configured" not in result.output
    assert "gemini-pro" in result.output
    assert "gpt-4-turbo" not in result.output


def test_info(cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REVIEW_OPENAI_API_KEY", "sk-test")
    result = cli_runner.invoke(app, ["models", "info", "gpt-4-turbo"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["provider"] == "openai"
    assert data["max_tokens"] == 128000


def test_info_unknown(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(app, ["models", "info", "gpt-4-turbo"])
    assert result.exit_code == 1
    assert "not configured" in result.output


def test_health_without_providers(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(app, ["models", "health"])
    assert result.exit_code == 0
    assert "healthy" in result.output


def test_health_failing_probe(
    cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("REVIEW_OPENAI_API_KEY", "sk-test")
    provider = MagicMock()
    provider.probe = AsyncMock(return_value=False)
    provider.close = AsyncMock()
    with (
        patch("reviewengine.ai.orchestrator.load_provider"),
        patch("reviewengine.ai.orchestrator.get_provider", return_value=provider),
    ):
        result = cli_runner.invoke(app, ["models", "health"])
    assert result.exit_code == 1
    assert "unhealthy" in result.output
