"""Tests for AiOrchestrator dispatch, fallback, and health checks."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from reviewengine.ai.orchestrator import DEFAULT_CONFIDENCE, AiOrchestrator, heuristic_remarks
from reviewengine.ai.prompts import get_template
from reviewengine.config import EngineConfig, Settings
from reviewengine.providers.catalog import FALLBACK_MODEL_IDS
from reviewengine.providers.errors import (
    ProviderAuthError,
    ProviderTimeoutError,
    UnsupportedModelError,
)
from reviewengine.providers.models import ProviderConfig, ProviderKind

_LEAKY = 'Connection c = ConexaoFactory.empresta("db");\n'

Configs = dict[ProviderKind, ProviderConfig]


class TestFallback:
    @pytest.mark.asyncio
    async def test_no_providers_configured(self) -> None:
        orchestrator = AiOrchestrator({}, EngineConfig(default_model="gpt-4-turbo"))
        result = await orchestrator.analyze(_LEAKY, "src/Dao.java")
        assert result.success is True
        assert result.fallback is True
        assert result.confidence is None
        assert result.narrative.startswith("## Code analysis - Dao.java")
        assert "1 checkout(s) but 0 release(s)" in result.narrative

    @pytest.mark.asyncio
    async def test_disabled_skips_provider(
        self, openai_configs: Configs, patch_provider_factory: MagicMock
    ) -> None:
        orchestrator = AiOrchestrator(openai_configs, EngineConfig(ai_enabled=False))
        result = await orchestrator.analyze("x", "a.py", "gpt-4-turbo")
        assert result.fallback is True
        patch_provider_factory.assert_not_called()

    @pytest.mark.asyncio
    async def test_disabled_does_not_validate_model(self, openai_configs: Configs) -> None:
        orchestrator = AiOrchestrator(openai_configs, EngineConfig(ai_enabled=False))
        result = await orchestrator.analyze("x", "a.py", "llama-3")
        assert result.fallback is True

    @pytest.mark.asyncio
    async def test_fallback_is_deterministic(self) -> None:
        orchestrator = AiOrchestrator({})
        first = await orchestrator.suggest(_LEAKY, "Dao.java")
        second = await orchestrator.suggest(_LEAKY, "Dao.java")
        assert first.narrative == second.narrative

    @pytest.mark.asyncio
    async def test_unconfigured_kind_falls_back(
        self, openai_configs: Configs, patch_provider_factory: MagicMock
    ) -> None:
        orchestrator = AiOrchestrator(openai_configs)
        result = await orchestrator.analyze("x", "a.py", "gemini-pro")
        assert result.fallback is True
        assert result.model == "gemini-pro"
        patch_provider_factory.assert_not_called()

    @pytest.mark.asyncio
    async def test_provider_failure_falls_back(
        self,
        openai_configs: Configs,
        patch_provider_factory: MagicMock,
        mock_provider: MagicMock,
    ) -> None:
        mock_provider.complete.side_effect = ProviderTimeoutError("slow")
        result = await AiOrchestrator(openai_configs).analyze(_LEAKY, "Dao.java", "gpt-4-turbo")
        assert result.success is True
        assert result.fallback is True
        assert result.confidence is None

    @pytest.mark.asyncio
    async def test_provider_construction_failure_falls_back(
        self, openai_configs: Configs, patch_provider_factory: MagicMock
    ) -> None:
        patch_provider_factory.side_effect = ProviderAuthError("no key")
        result = await AiOrchestrator(openai_configs).analyze("x", "a.py", "gpt-4-turbo")
        assert result.fallback is True


class TestDispatch:
    @pytest.mark.asyncio
    async def test_success(
        self,
        openai_configs: Configs,
        patch_provider_factory: MagicMock,
        mock_provider: MagicMock,
    ) -> None:
        result = await AiOrchestrator(openai_configs).analyze(
            "class A {}", "src/A.java", "gpt-4-turbo"
        )
        assert result.success is True
        assert result.fallback is False
        assert result.narrative == "The code looks solid."
        assert result.confidence == DEFAULT_CONFIDENCE
        assert result.provider is ProviderKind.openai
        assert result.model == "gpt-4-turbo"

        args, kwargs = mock_provider.complete.call_args
        assert "class A {}" in args[0]
        assert kwargs["model"] == "gpt-4-turbo"
        assert kwargs["system_prompt"] == get_template("analysis").system_prompt

    @pytest.mark.asyncio
    async def test_default_model_used(
        self,
        openai_configs: Configs,
        patch_provider_factory: MagicMock,
        mock_provider: MagicMock,
    ) -> None:
        orchestrator = AiOrchestrator(openai_configs, EngineConfig(default_model="gpt-3.5-turbo"))
        result = await orchestrator.analyze("x", "a.py")
        assert result.model == "gpt-3.5-turbo"
        assert mock_provider.complete.call_args.kwargs["model"] == "gpt-3.5-turbo"

    @pytest.mark.asyncio
    async def test_unsupported_model_raises(self, openai_configs: Configs) -> None:
        with pytest.raises(UnsupportedModelError):
            await AiOrchestrator(openai_configs).analyze("x", "a.py", "llama-3")

    @pytest.mark.asyncio
    async def test_review_passes_criteria(
        self,
        openai_configs: Configs,
        patch_provider_factory: MagicMock,
        mock_provider: MagicMock,
    ) -> None:
        await AiOrchestrator(openai_configs).review(
            "x", "a.py", "gpt-4-turbo", criteria="no globals"
        )
        assert "Criteria: no globals" in mock_provider.complete.call_args.args[0]

    @pytest.mark.asyncio
    async def test_provider_instance_cached(
        self, openai_configs: Configs, patch_provider_factory: MagicMock
    ) -> None:
        orchestrator = AiOrchestrator(openai_configs)
        await orchestrator.analyze("x", "a.py", "gpt-4-turbo")
        await orchestrator.suggest("x", "a.py", "gpt-4-turbo")
        patch_provider_factory.assert_called_once()


class TestHealth:
    @pytest.mark.asyncio
    async def test_disabled_is_healthy(self, openai_configs: Configs) -> None:
        assert await AiOrchestrator(openai_configs, EngineConfig(ai_enabled=False)).check_health()

    @pytest.mark.asyncio
    async def test_nothing_configured_is_healthy(self) -> None:
        assert await AiOrchestrator({}).check_health() is True

    @pytest.mark.asyncio
    async def test_probe_ok(
        self, openai_configs: Configs, patch_provider_factory: MagicMock
    ) -> None:
        assert await AiOrchestrator(openai_configs).check_health() is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "probe",
        [AsyncMock(return_value=False), AsyncMock(side_effect=ProviderAuthError("bad key"))],
    )
    async def test_probe_failure(
        self,
        openai_configs: Configs,
        patch_provider_factory: MagicMock,
        mock_provider: MagicMock,
        probe: AsyncMock,
    ) -> None:
        mock_provider.probe = probe
        assert await AiOrchestrator(openai_configs).check_health() is False


class TestModels:
    def test_fallback_model_list(self) -> None:
        assert AiOrchestrator({}).available_models() == list(FALLBACK_MODEL_IDS)

    def test_configured_models(self, openai_configs: Configs) -> None:
        orchestrator = AiOrchestrator(openai_configs)
        assert orchestrator.available_models() == ["gpt-4-turbo", "gpt-3.5-turbo"]
        info = orchestrator.get_model_info("gpt-4-turbo")
        assert info is not None
        assert info.provider is ProviderKind.openai
        assert orchestrator.get_model_info("gemini-pro") is None

    def test_from_settings(self) -> None:
        settings = Settings(_env_file=None, gemini_api_key="g")  # type: ignore[call-arg]
        orchestrator = AiOrchestrator.from_settings(settings)
        assert orchestrator.registry.kinds == frozenset({ProviderKind.gemini})


@pytest.mark.asyncio
async def test_close_releases_providers(
    openai_configs: Configs, patch_provider_factory: MagicMock, mock_provider: MagicMock
) -> None:
    orchestrator = AiOrchestrator(openai_configs)
    await orchestrator.analyze("x", "a.py", "gpt-4-turbo")
    await orchestrator.close()
    mock_provider.close.assert_awaited_once()


class TestHeuristicRemarks:
    def test_no_checkouts(self) -> None:
        remarks = heuristic_remarks("int x = 1;", EngineConfig())
        assert remarks == ["No pooled-resource checkouts detected.", "Estimated complexity 1 (Good)."]

    def test_balanced(self) -> None:
        code = _LEAKY + "ConexaoFactory.devolve(c);\n"
        assert heuristic_remarks(code, EngineConfig())[0] == (
            "1 checkout(s) with matching release(s)."
        )

    def test_empty_code(self) -> None:
        assert heuristic_remarks("", EngineConfig())[1] == "Estimated complexity 1 (Good)."
