"""Provider registry — maps provider kinds to factory callables."""

from __future__ import annotations

import importlib
from collections.abc import Callable

from reviewengine.logging import get_logger
from reviewengine.providers.base import CompletionProvider
from reviewengine.providers.models import ProviderConfig, ProviderKind

_log = get_logger("reviewengine.providers.registry")

# Module-level registry: provider kind -> factory(config) -> CompletionProvider
_REGISTRY: dict[ProviderKind, Callable[[ProviderConfig], CompletionProvider]] = {}

# Implementation subpackage for each kind; importing it registers the factory.
_PROVIDER_MODULES: dict[ProviderKind, str] = {
    ProviderKind.openai: "reviewengine.providers.openai",
    ProviderKind.gemini: "reviewengine.providers.openai",
    ProviderKind.claude: "reviewengine.providers.sdk",
}


def register_provider(
    kind: ProviderKind, factory: Callable[[ProviderConfig], CompletionProvider]
) -> None:
    """Register a factory function under the given provider kind."""
    _REGISTRY[kind] = factory


def load_provider(kind: ProviderKind) -> None:
    """Import the implementation module for *kind* so it self-registers.

    A missing optional dependency leaves the kind unregistered.
    """
    if kind in _REGISTRY:
        return
    try:
        importlib.import_module(_PROVIDER_MODULES[kind])
    except ImportError as exc:
        _log.warning("Provider %s unavailable: %s", kind.value, exc)


def get_provider(config: ProviderConfig) -> CompletionProvider:
    """Look up and instantiate the provider for ``config.kind``.

    Raises:
        KeyError: If no provider is registered for the kind.
    """
    if config.kind not in _REGISTRY:
        registered = [k.value for k in _REGISTRY]
        raise KeyError(
            f"Provider '{config.kind.value}' is not registered. "
            f"Available providers: {registered}"
        )
    return _REGISTRY[config.kind](config)


def list_providers() -> list[ProviderKind]:
    """Return the kinds of all currently registered providers."""
    return list(_REGISTRY.keys())
