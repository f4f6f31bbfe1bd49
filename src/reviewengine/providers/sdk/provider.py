"""ClaudeSDKProvider — one-shot completions through claude-agent-sdk."""

from __future__ import annotations

import asyncio
import importlib.util
from typing import Any

from claude_agent_sdk import (
    AssistantMessage,
    ClaudeAgentOptions,
    ClaudeSDKError,
    CLIConnectionError,
    CLIJSONDecodeError,
    CLINotFoundError,
    ProcessError,
    TextBlock,
    query as sdk_query,
)

from reviewengine.logging import get_logger
from reviewengine.providers.errors import (
    ProviderAPIError,
    ProviderAuthError,
    ProviderError,
    ProviderTimeoutError,
)
from reviewengine.providers.models import ProviderConfig, ProviderKind

_log = get_logger("reviewengine.providers.sdk.provider")


def _extract_text(message: Any) -> str:
    """Text blocks of an AssistantMessage; other message types yield nothing."""
    if isinstance(message, AssistantMessage):
        return "\n".join(
            block.text for block in message.content if isinstance(block, TextBlock)
        )
    return ""


class ClaudeSDKProvider:
    """Completions from a tool-less, single-turn Claude SDK session."""

    def __init__(self, config: ProviderConfig) -> None:
        self._timeout = config.timeout

    @property
    def kind(self) -> ProviderKind:
        return ProviderKind.claude

    def _options(self, model: str, system_prompt: str | None) -> ClaudeAgentOptions:
        kwargs: dict[str, object] = {
            "model": model,
            "allowed_tools": [],
            "max_turns": 1,
        }
        if system_prompt is not None:
            kwargs["system_prompt"] = system_prompt
        return ClaudeAgentOptions(**kwargs)  # type: ignore[arg-type]

    async def _collect(self, prompt: str, options: ClaudeAgentOptions) -> str:
        parts: list[str] = []
        async for message in sdk_query(prompt=prompt, options=options):
            text = _extract_text(message)
            if text:
                parts.append(text)
        return "\n".join(parts)

    async def complete(
        self,
        prompt: str,
        *,
        model: str,
        system_prompt: str | None = None,
    ) -> str:
        """Run one query and return the concatenated assistant text."""
        options = self._options(model, system_prompt)
        _log.debug("Calling claude model %s", model)
        try:
            text = await asyncio.wait_for(
                self._collect(prompt, options), timeout=self._timeout
            )
        except TimeoutError as exc:
            raise ProviderTimeoutError(
                f"{model} did not answer within {self._timeout}s"
            ) from exc
        except CLINotFoundError as exc:
            raise ProviderAuthError(str(exc)) from exc
        except ProcessError as exc:
            raise ProviderAPIError(
                str(exc), status_code=getattr(exc, "exit_code", None)
            ) from exc
        except (CLIConnectionError, CLIJSONDecodeError, ClaudeSDKError) as exc:
            raise ProviderError(str(exc)) from exc

        if not text.strip():
            raise ProviderAPIError(f"{model} returned an empty completion")
        return text

    async def probe(self) -> bool:
        """Return ``True`` if ``claude_agent_sdk`` is importable."""
        return importlib.util.find_spec("claude_agent_sdk") is not None

    async def close(self) -> None:
        """Nothing to release: every query owns its own session."""
