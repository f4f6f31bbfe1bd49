"""Configuration: env settings, persistent TOML keys, and engine tunables."""

from __future__ import annotations

from reviewengine.config.engine import EngineConfig
from reviewengine.config.settings import Settings

__all__ = ["EngineConfig", "Settings"]
