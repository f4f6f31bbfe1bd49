"""EngineConfig — the explicit tunables passed into the analysis engine."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from reviewengine.config.keys import CONFIG_KEYS

if TYPE_CHECKING:
    from reviewengine.config.settings import Settings

# Pooled-connection factory convention: ``conn = ConexaoFactory.empresta(...)``
DEFAULT_CHECKOUT_PATTERN = r"(\w+)\s*=\s*\w*[Cc]onexao\w*\.empresta\s*\("
DEFAULT_RELEASE_PATTERN = r"\w*[Cc]onexao\w*\.devolve\s*\(([^)]+)\)"

DEFAULT_LAYER_SUFFIXES: Mapping[str, str] = MappingProxyType(
    {"service": "Service", "controller": "Controller"}
)


@dataclass(frozen=True)
class EngineConfig:
    """Analysis thresholds and AI switches, built once at startup."""

    complexity_threshold: int = 15
    critical_imbalance: int = 5
    min_score: float = 70.0
    root_namespace: str = "com.sinqia"
    layer_suffixes: Mapping[str, str] = field(
        default_factory=lambda: DEFAULT_LAYER_SUFFIXES
    )
    checkout_pattern: str = DEFAULT_CHECKOUT_PATTERN
    release_pattern: str = DEFAULT_RELEASE_PATTERN
    ai_enabled: bool = True
    ai_timeout: float = 30.0
    default_model: str | None = None

    @classmethod
    def from_sources(
        cls,
        settings: Settings,
        overrides: Mapping[str, object] | None = None,
    ) -> EngineConfig:
        """Combine env *settings* with merged TOML *overrides*.

        *overrides* is the dict returned by ``load_config``; ``None`` values
        fall back to the dataclass defaults. A TOML ``default_model`` wins
        over the env default.
        """
        values = dict(overrides or {})
        kwargs: dict[str, object] = {
            "ai_enabled": settings.ai_enabled,
            "ai_timeout": settings.ai_timeout,
            "default_model": settings.default_model,
        }
        for key, key_def in CONFIG_KEYS.items():
            raw = values.get(key)
            if raw is None:
                continue
            kwargs[key] = key_def.type_(raw)
        return cls(**kwargs)  # type: ignore[arg-type]
