"""Shared fixtures and factories for OpenAI provider tests."""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from openai.types.chat import ChatCompletion, ChatCompletionMessage
from openai.types.chat.chat_completion import Choice


@pytest.fixture
def mock_async_openai() -> MagicMock:
    """MagicMock of AsyncOpenAI with create, models.list and close as AsyncMocks."""
    client = MagicMock()
    client.chat.completions.create = AsyncMock()
    client.models.list = AsyncMock()
    client.close = AsyncMock()
    return client


def _completion(content: str | None, *, choices: bool = True) -> ChatCompletion:
    """Minimal non-streaming ChatCompletion carrying *content*."""
    return ChatCompletion(
        id="cmpl-1",
        choices=[
            Choice(
                finish_reason="stop",
                index=0,
                message=ChatCompletionMessage(role="assistant", content=content),
            )
        ]
        if choices
        else [],
        created=1700000000,
        model="gpt-4-turbo",
        object="chat.completion",
    )


def _mock_response(status_code: int) -> httpx.Response:
    return httpx.Response(status_code=status_code, request=httpx.Request("GET", "http://test"))


@pytest.fixture
def make_completion() -> Callable[..., ChatCompletion]:
    return _completion


@pytest.fixture
def make_response() -> Callable[[int], httpx.Response]:
    return _mock_response
