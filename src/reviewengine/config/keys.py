"""Persistent analysis tunables: names, types, defaults and bounds."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConfigKey:
    """One TOML-persisted tunable of the review engine."""

    name: str
    type_: type
    default: object
    description: str
    minimum: float | None = None
    maximum: float | None = None

    def check(self, value: float) -> None:
        """Raise ValueError when numeric *value* is outside the key's bounds."""
        if self.minimum is not None and value < self.minimum:
            raise ValueError(f"{self.name} must be at least {self.minimum:g}")
        if self.maximum is not None and value > self.maximum:
            raise ValueError(f"{self.name} must be at most {self.maximum:g}")


CONFIG_KEYS: dict[str, ConfigKey] = {
    key.name: key
    for key in (
        ConfigKey(
            name="default_model",
            type_=str,
            default=None,
            description="Model id used for AI enrichment when none is given",
        ),
        ConfigKey(
            name="complexity_threshold",
            type_=int,
            default=15,
            description="Complexity above which a complexity warning is raised",
            minimum=1,
        ),
        ConfigKey(
            name="critical_imbalance",
            type_=int,
            default=5,
            description="Checkout/release difference above which a leak is CRITICAL",
            minimum=0,
        ),
        ConfigKey(
            name="min_score",
            type_=float,
            default=70.0,
            description="Score below which reports recommend a general quality pass",
            minimum=0,
            maximum=100,
        ),
        ConfigKey(
            name="root_namespace",
            type_=str,
            default="com.sinqia",
            description="Package prefix every declared package must start with",
        ),
    )
}
