"""OpenAI-compatible completion provider (serves both OpenAI and Gemini)."""

from __future__ import annotations

from reviewengine.providers.models import ProviderKind
from reviewengine.providers.openai.provider import OpenAICompatibleProvider
from reviewengine.providers.registry import register_provider

# Auto-register on import.
register_provider(ProviderKind.openai, OpenAICompatibleProvider)
register_provider(ProviderKind.gemini, OpenAICompatibleProvider)

__all__ = ["OpenAICompatibleProvider"]
