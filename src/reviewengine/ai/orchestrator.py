"""AiOrchestrator — dispatch to one provider, fall back to templated output.

Each request is ``DISPATCHED -> PROVIDER_OK | PROVIDER_ERROR -> RESULT``.
There are no retries: one failed provider call produces the fallback
narrative. The only error a caller ever sees is UnsupportedModelError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from reviewengine.ai.models import AiAnalysisResult
from reviewengine.ai.prompts import PromptTemplate, get_template
from reviewengine.analysis import patterns
from reviewengine.analysis.report import complexity_label
from reviewengine.config.engine import EngineConfig
from reviewengine.logging import get_logger
from reviewengine.providers.base import CompletionProvider
from reviewengine.providers.catalog import ModelRegistry
from reviewengine.providers.models import ProviderConfig, ProviderDescriptor, ProviderKind
from reviewengine.providers.profiles import configured_providers
from reviewengine.providers.registry import get_provider, load_provider

if TYPE_CHECKING:
    from reviewengine.config.settings import Settings

_log = get_logger("reviewengine.ai.orchestrator")

# Providers report no confidence of their own.
DEFAULT_CONFIDENCE = 0.8


class AiOrchestrator:
    """Routes AI requests to configured providers with a deterministic fallback."""

    def __init__(
        self,
        provider_configs: dict[ProviderKind, ProviderConfig],
        config: EngineConfig | None = None,
    ) -> None:
        self._config = config or EngineConfig()
        self._provider_configs = dict(provider_configs) if self._config.ai_enabled else {}
        self._registry = ModelRegistry(
            self._provider_configs, enabled=self._config.ai_enabled
        )
        self._providers: dict[ProviderKind, CompletionProvider] = {}

    @classmethod
    def from_settings(
        cls, settings: Settings, config: EngineConfig | None = None
    ) -> AiOrchestrator:
        config = config or EngineConfig.from_sources(settings)
        return cls(configured_providers(settings), config)

    @property
    def registry(self) -> ModelRegistry:
        return self._registry

    # -- Public operations ----------------------------------------------------

    async def analyze(
        self, code: str, file_path: str, requested_model: str | None = None
    ) -> AiAnalysisResult:
        """Natural-language analysis of one file."""
        return await self._run("analysis", code, file_path, requested_model)

    async def suggest(
        self, code: str, file_path: str, requested_model: str | None = None
    ) -> AiAnalysisResult:
        """Prioritized improvement suggestions for one file."""
        return await self._run("suggestions", code, file_path, requested_model)

    async def review(
        self,
        code: str,
        file_path: str,
        requested_model: str | None = None,
        criteria: str | None = None,
    ) -> AiAnalysisResult:
        """Graded code review against optional *criteria*."""
        return await self._run(
            "review", code, file_path, requested_model, criteria=criteria
        )

    def available_models(self) -> list[str]:
        return self._registry.available_models()

    def get_model_info(self, model_id: str) -> ProviderDescriptor | None:
        return self._registry.get(model_id)

    async def check_health(self) -> bool:
        """True when disabled, or when every configured provider answers a probe."""
        if not self._config.ai_enabled:
            return True

        healthy = True
        for kind, provider_config in self._provider_configs.items():
            try:
                ok = await self._provider_for(provider_config).probe()
            except Exception as exc:  # noqa: BLE001
                _log.warning("Provider %s is unavailable: %s", kind.value, exc)
                ok = False
            healthy = healthy and ok
        return healthy

    async def close(self) -> None:
        for provider in self._providers.values():
            await provider.close()
        self._providers.clear()

    # -- Internals ------------------------------------------------------------

    def _provider_for(self, provider_config: ProviderConfig) -> CompletionProvider:
        kind = provider_config.kind
        if kind not in self._providers:
            load_provider(kind)
            self._providers[kind] = get_provider(provider_config)
        return self._providers[kind]

    async def _run(
        self,
        task: str,
        code: str,
        file_path: str,
        requested_model: str | None,
        *,
        criteria: str | None = None,
    ) -> AiAnalysisResult:
        template = get_template(task)
        model_id = requested_model or self._config.default_model

        if not self._config.ai_enabled or not self._provider_configs or not model_id:
            return self._fallback(template, code, file_path, model_id)

        kind = ProviderKind.for_model(model_id)
        provider_config = self._provider_configs.get(kind)
        if provider_config is None:
            _log.info(
                "No %s provider configured for %s; using fallback", kind.value, model_id
            )
            return self._fallback(template, code, file_path, model_id)

        prompt = template.build_prompt(
            kind, code=code, file_path=file_path, criteria=criteria
        )
        _log.info("Running %s with %s for %s", task, model_id, file_path)
        try:
            provider = self._provider_for(provider_config)
            text = await provider.complete(
                prompt, model=model_id, system_prompt=template.system_prompt
            )
        except Exception as exc:  # noqa: BLE001
            _log.warning(
                "Provider %s failed for %s: %s",
                kind.value,
                file_path,
                exc,
                extra={"file_path": file_path, "model": model_id, "provider": kind.value},
            )
            return self._fallback(template, code, file_path, model_id)

        return AiAnalysisResult(
            success=True,
            narrative=text,
            confidence=DEFAULT_CONFIDENCE,
            model=model_id,
            provider=kind,
        )

    def _fallback(
        self,
        template: PromptTemplate,
        code: str,
        file_path: str,
        model_id: str | None,
    ) -> AiAnalysisResult:
        narrative = template.render_fallback(
            file_path=file_path, remarks=heuristic_remarks(code, self._config)
        )
        return AiAnalysisResult(
            success=True, narrative=narrative, model=model_id, fallback=True
        )


def heuristic_remarks(code: str, config: EngineConfig) -> list[str]:
    """Two deterministic remarks derived from the regex heuristics."""
    text = code or ""
    checkouts = patterns.count_checkouts(text, config)
    releases = patterns.count_releases(text, config)
    if checkouts == 0 and releases == 0:
        balance = "No pooled-resource checkouts detected."
    elif checkouts == releases:
        balance = f"{checkouts} checkout(s) with matching release(s)."
    else:
        balance = (
            f"{checkouts} checkout(s) but {releases} release(s): "
            "check for resource leaks."
        )
    complexity = patterns.estimate_complexity(text) if text.strip() else 1
    label = complexity_label(complexity, config.complexity_threshold)
    return [balance, f"Estimated complexity {complexity} ({label})."]
