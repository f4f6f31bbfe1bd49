"""Claude agent SDK completion provider."""

from __future__ import annotations

from reviewengine.providers.models import ProviderKind
from reviewengine.providers.registry import register_provider
from reviewengine.providers.sdk.provider import ClaudeSDKProvider

# Auto-register on import.
register_provider(ProviderKind.claude, ClaudeSDKProvider)

__all__ = ["ClaudeSDKProvider"]
