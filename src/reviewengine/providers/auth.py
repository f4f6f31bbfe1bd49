"""API-key credential resolution for HTTP providers."""

from __future__ import annotations

import os
from collections.abc import Iterator
from urllib.parse import urlparse

from reviewengine.providers.errors import ProviderAuthError

# Self-hosted OpenAI-compatible servers accept any bearer token.
LOCAL_PLACEHOLDER_KEY = "not-needed"
_LOCAL_HOSTS = frozenset({"localhost", "127.0.0.1", "::1"})


def is_local_endpoint(base_url: str | None) -> bool:
    if not base_url:
        return False
    parsed = urlparse(base_url)
    return parsed.scheme == "http" and parsed.hostname in _LOCAL_HOSTS


class ApiKeyStrategy:
    """Pick the first non-blank key among the Settings value and the profile env var.

    A provider pointed at a local endpoint resolves to a placeholder key.
    """

    def __init__(
        self,
        *,
        explicit_key: str | None = None,
        env_var: str | None = None,
        base_url: str | None = None,
    ) -> None:
        self._explicit_key = explicit_key
        self._env_var = env_var
        self._base_url = base_url

    def _candidates(self) -> Iterator[str | None]:
        yield self._explicit_key
        if self._env_var:
            yield os.environ.get(self._env_var)
        if is_local_endpoint(self._base_url):
            yield LOCAL_PLACEHOLDER_KEY

    def _resolve(self) -> str | None:
        return next(
            (value.strip() for value in self._candidates() if value and value.strip()),
            None,
        )

    def get_credentials(self) -> dict[str, str]:
        """Return ``{"api_key": <key>}`` or raise ProviderAuthError."""
        key = self._resolve()
        if key is None:
            source = self._env_var or "provider"
            raise ProviderAuthError(
                f"No API key found; set {source} or the matching REVIEW_* setting"
            )
        return {"api_key": key}

    def is_valid(self) -> bool:
        return self._resolve() is not None
