"""Shared exception hierarchy for all provider implementations."""

from __future__ import annotations


class ProviderError(Exception):
    """Base exception for all provider errors."""


class ProviderAuthError(ProviderError):
    """Authentication or credential errors."""


class ProviderAPIError(ProviderError):
    """Errors from the underlying LLM API (rate limits, server errors, empty replies)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ProviderTimeoutError(ProviderError):
    """Request timeout errors."""


class UnsupportedModelError(ValueError):
    """A model id matches no known provider prefix.

    Not a ProviderError: it signals a caller or configuration mistake and is
    never converted into a fallback result.
    """

    def __init__(self, model_id: str) -> None:
        super().__init__(f"Unsupported model: {model_id!r}")
        self.model_id = model_id
