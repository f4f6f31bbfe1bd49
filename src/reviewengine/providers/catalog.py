"""Static model catalog and the process-wide registry of usable models."""

from __future__ import annotations

from collections.abc import Iterable

from reviewengine.providers.models import ProviderDescriptor, ProviderKind

MODEL_CATALOG: tuple[ProviderDescriptor, ...] = (
    ProviderDescriptor(
        id="gemini-2.0-flash-001",
        name="Gemini 2.0 Flash",
        provider=ProviderKind.gemini,
        description="Google model for code analysis and text generation",
        version="2.0",
        type="multimodal",
        max_tokens=32768,
    ),
    ProviderDescriptor(
        id="gemini-pro",
        name="Gemini Pro",
        provider=ProviderKind.gemini,
        description="Google model for complex tasks",
        version="1.0",
        max_tokens=30720,
    ),
    ProviderDescriptor(
        id="gpt-4-turbo",
        name="GPT-4 Turbo",
        provider=ProviderKind.openai,
        description="GPT-4 tuned for throughput and cost",
        version="turbo",
        max_tokens=128000,
    ),
    ProviderDescriptor(
        id="gpt-3.5-turbo",
        name="GPT-3.5 Turbo",
        provider=ProviderKind.openai,
        description="Fast, inexpensive GPT-3.5",
        version="turbo",
        max_tokens=4096,
    ),
    ProviderDescriptor(
        id="claude-sonnet-4-20250514",
        name="Claude Sonnet 4",
        provider=ProviderKind.claude,
        description="Anthropic model via the Claude agent SDK",
        version="4",
        max_tokens=200000,
    ),
)

# Returned when nothing is configured so model pickers stay populated offline.
FALLBACK_MODEL_IDS: tuple[str, ...] = (
    "gemini-2.0-flash-001",
    "gemini-pro",
    "gpt-4-turbo",
    "gpt-3.5-turbo",
)


class ModelRegistry:
    """Descriptors of the models offered by the configured providers.

    Built once at startup and only read afterwards.
    """

    def __init__(self, kinds: Iterable[ProviderKind], *, enabled: bool = True) -> None:
        self._enabled = enabled
        self._kinds = frozenset(kinds) if enabled else frozenset()
        self._models: dict[str, ProviderDescriptor] = {
            d.id: d for d in MODEL_CATALOG if d.provider in self._kinds
        }

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def kinds(self) -> frozenset[ProviderKind]:
        return self._kinds

    def is_configured(self, kind: ProviderKind) -> bool:
        return kind in self._kinds

    def available_models(self) -> list[str]:
        """Ids of available configured models, or the static fallback list."""
        ids = [d.id for d in self._models.values() if d.available]
        if not ids:
            return list(FALLBACK_MODEL_IDS)
        return ids

    def get(self, model_id: str) -> ProviderDescriptor | None:
        return self._models.get(model_id)
