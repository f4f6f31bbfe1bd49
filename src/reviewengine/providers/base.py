"""CompletionProvider Protocol — contract for all provider implementations."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from reviewengine.providers.models import ProviderKind


@runtime_checkable
class CompletionProvider(Protocol):
    """A text-completion backend reachable through one provider kind."""

    @property
    def kind(self) -> ProviderKind:
        """The provider variant this instance serves."""
        ...

    async def complete(
        self,
        prompt: str,
        *,
        model: str,
        system_prompt: str | None = None,
    ) -> str:
        """Return the completion text for *prompt*.

        Raises a ProviderError subclass on any failure.
        """
        ...

    async def probe(self) -> bool:
        """Lightweight reachability check. May raise ProviderError."""
        ...

    async def close(self) -> None:
        """Release transport resources."""
        ...
