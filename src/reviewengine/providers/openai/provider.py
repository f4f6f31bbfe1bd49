"""OpenAICompatibleProvider — Chat Completions backend for OpenAI and Gemini."""

from __future__ import annotations

import httpx
import openai
from openai import AsyncOpenAI

from reviewengine.logging import get_logger
from reviewengine.providers.errors import (
    ProviderAPIError,
    ProviderAuthError,
    ProviderError,
    ProviderTimeoutError,
)
from reviewengine.providers.models import ProviderConfig, ProviderKind

_log = get_logger("reviewengine.providers.openai.provider")


def _translate(exc: openai.APIError) -> ProviderError:
    """Map an openai SDK exception onto the provider error hierarchy."""
    if isinstance(exc, openai.AuthenticationError | openai.PermissionDeniedError):
        return ProviderAuthError(str(exc))
    if isinstance(exc, openai.APIStatusError):
        return ProviderAPIError(str(exc), status_code=exc.status_code)
    if isinstance(exc, openai.APITimeoutError):
        return ProviderTimeoutError(str(exc))
    return ProviderError(str(exc))


class OpenAICompatibleProvider:
    """Single-shot completions through the OpenAI Chat Completions API (or compatible)."""

    def __init__(self, config: ProviderConfig, client: AsyncOpenAI | None = None) -> None:
        if config.api_key is None:
            raise ProviderAuthError(f"No API key configured for {config.kind.value}")
        self._kind = config.kind
        # One attempt per call: the orchestrator falls back instead of retrying.
        self._client = client or AsyncOpenAI(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=httpx.Timeout(config.timeout),
            max_retries=0,
            default_headers=config.default_headers or None,
        )

    @property
    def kind(self) -> ProviderKind:
        return self._kind

    async def complete(
        self,
        prompt: str,
        *,
        model: str,
        system_prompt: str | None = None,
    ) -> str:
        """Send one chat completion request and return the reply text."""
        messages = [{"role": "user", "content": prompt}]
        if system_prompt is not None:
            messages.insert(0, {"role": "system", "content": system_prompt})

        _log.debug("Calling %s model %s", self._kind.value, model)
        try:
            response = await self._client.chat.completions.create(
                model=model,
                messages=messages,  # type: ignore[arg-type]
            )
        except openai.APIError as exc:
            raise _translate(exc) from exc

        content = response.choices[0].message.content if response.choices else None
        if not content or not content.strip():
            raise ProviderAPIError(f"{model} returned an empty completion")
        return content

    async def probe(self) -> bool:
        """List models as a cheap authenticated round-trip."""
        try:
            await self._client.models.list()
        except openai.APIError as exc:
            raise _translate(exc) from exc
        return True

    async def close(self) -> None:
        await self._client.close()
