"""Provider kinds, descriptors, and per-provider connection config."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from reviewengine.providers.errors import UnsupportedModelError


class ProviderKind(StrEnum):
    """Closed set of AI completion backends, one per model-id family."""

    openai = "openai"
    gemini = "gemini"
    claude = "claude"

    @property
    def model_prefix(self) -> str:
        return _MODEL_PREFIXES[self]

    @classmethod
    def for_model(cls, model_id: str) -> ProviderKind:
        """Resolve *model_id* to its provider.

        Raises:
            UnsupportedModelError: If no provider owns the id's prefix.
        """
        for kind, prefix in _MODEL_PREFIXES.items():
            if model_id.startswith(prefix):
                return kind
        raise UnsupportedModelError(model_id)


_MODEL_PREFIXES: dict[ProviderKind, str] = {
    ProviderKind.openai: "gpt",
    ProviderKind.gemini: "gemini",
    ProviderKind.claude: "claude",
}


class ProviderDescriptor(BaseModel):
    """Static metadata for one model offered by a provider."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    provider: ProviderKind
    description: str = ""
    version: str = ""
    type: str = "text"
    max_tokens: int
    available: bool = True


class ProviderConfig(BaseModel):
    """Connection settings handed to a provider factory."""

    kind: ProviderKind
    api_key: str | None = None
    base_url: str | None = None
    timeout: float = 30.0
    default_headers: dict[str, str] = Field(default_factory=dict)
