"""AI completion providers, registry, and error hierarchy."""

from __future__ import annotations

from reviewengine.providers.base import CompletionProvider
from reviewengine.providers.errors import (
    ProviderAPIError,
    ProviderAuthError,
    ProviderError,
    ProviderTimeoutError,
    UnsupportedModelError,
)
from reviewengine.providers.models import (
    ProviderConfig,
    ProviderDescriptor,
    ProviderKind,
)

__all__ = [
    "CompletionProvider",
    "ProviderAPIError",
    "ProviderAuthError",
    "ProviderConfig",
    "ProviderDescriptor",
    "ProviderError",
    "ProviderKind",
    "ProviderTimeoutError",
    "UnsupportedModelError",
]
