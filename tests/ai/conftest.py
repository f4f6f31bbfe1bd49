"""Shared fixtures for AI orchestration tests."""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from reviewengine.providers.models import ProviderConfig, ProviderKind


@pytest.fixture
def mock_provider() -> MagicMock:
    """CompletionProvider double with async complete/probe/close."""
    provider = MagicMock()
    provider.kind = ProviderKind.openai
    provider.complete = AsyncMock(return_value="The code looks solid.")
    provider.probe = AsyncMock(return_value=True)
    provider.close = AsyncMock()
    return provider


@pytest.fixture
def patch_provider_factory(mock_provider: MagicMock) -> Iterator[MagicMock]:
    """Route every provider lookup in the orchestrator to mock_provider."""
    with (
        patch("reviewengine.ai.orchestrator.load_provider"),
        patch(
            "reviewengine.ai.orchestrator.get_provider", return_value=mock_provider
        ) as mock_get,
    ):
        yield mock_get


@pytest.fixture
def openai_configs() -> dict[ProviderKind, ProviderConfig]:
    return {ProviderKind.openai: ProviderConfig(kind=ProviderKind.openai, api_key="sk")}
