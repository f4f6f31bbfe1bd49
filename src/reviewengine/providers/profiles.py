"""Built-in provider profiles and resolution against Settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from reviewengine.providers.auth import ApiKeyStrategy
from reviewengine.providers.models import ProviderConfig, ProviderKind

if TYPE_CHECKING:
    from reviewengine.config.settings import Settings


@dataclass(frozen=True)
class ProviderProfile:
    """Endpoint and credential conventions for one provider kind."""

    kind: ProviderKind
    base_url: str | None = None
    api_key_env: str | None = None
    description: str = ""
    auth_type: str = "api_key"


BUILT_IN_PROFILES: dict[ProviderKind, ProviderProfile] = {
    ProviderKind.openai: ProviderProfile(
        kind=ProviderKind.openai,
        base_url=None,
        api_key_env="OPENAI_API_KEY",
        description="OpenAI direct API",
    ),
    ProviderKind.gemini: ProviderProfile(
        kind=ProviderKind.gemini,
        base_url="https://generativelanguage.googleapis.com/v1beta/openai/",
        api_key_env="GEMINI_API_KEY",
        description="Google Gemini via OpenAI-compatible endpoint",
    ),
    ProviderKind.claude: ProviderProfile(
        kind=ProviderKind.claude,
        api_key_env=None,
        description="Claude agent SDK (uses the active Claude Code session)",
        auth_type="session",
    ),
}


def get_profile(kind: ProviderKind) -> ProviderProfile:
    return BUILT_IN_PROFILES[kind]


def _explicit_settings(kind: ProviderKind, settings: Settings) -> tuple[str | None, str | None]:
    """Return ``(api_key, base_url)`` overrides from *settings* for *kind*."""
    if kind == ProviderKind.openai:
        return settings.openai_api_key, settings.openai_base_url
    if kind == ProviderKind.gemini:
        return settings.gemini_api_key, settings.gemini_base_url
    return None, None


def resolve_provider_config(
    kind: ProviderKind, settings: Settings
) -> ProviderConfig | None:
    """Build the connection config for *kind*, or ``None`` if unconfigured.

    API-key providers count as configured when a key resolves (explicit
    setting, profile env var, or a localhost endpoint). The SDK provider is
    opt-in through ``claude_enabled``.
    """
    profile = get_profile(kind)

    if profile.auth_type == "session":
        if not settings.claude_enabled:
            return None
        return ProviderConfig(kind=kind, timeout=settings.ai_timeout)

    explicit_key, base_url_override = _explicit_settings(kind, settings)
    base_url = base_url_override or profile.base_url
    strategy = ApiKeyStrategy(
        explicit_key=explicit_key,
        env_var=profile.api_key_env,
        base_url=base_url,
    )
    if not strategy.is_valid():
        return None
    return ProviderConfig(
        kind=kind,
        api_key=strategy.get_credentials()["api_key"],
        base_url=base_url,
        timeout=settings.ai_timeout,
    )


def configured_providers(settings: Settings) -> dict[ProviderKind, ProviderConfig]:
    """All provider kinds with usable configuration, in enum order."""
    configs: dict[ProviderKind, ProviderConfig] = {}
    for kind in ProviderKind:
        config = resolve_provider_config(kind, settings)
        if config is not None:
            configs[kind] = config
    return configs
