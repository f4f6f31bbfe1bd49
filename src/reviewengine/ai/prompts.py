"""PromptTemplate dataclass, YAML loader, and template registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from reviewengine.analysis.patterns import detect_language
from reviewengine.providers.models import ProviderKind

BUILTIN_TEMPLATES_PATH = Path(__file__).resolve().parent / "templates" / "prompts.yaml"

_REQUIRED_FIELDS = ("system_prompt", "prompt", "fallback")


class TemplateValidationError(Exception):
    """Raised when the prompt YAML file fails validation."""


@dataclass(frozen=True)
class PromptTemplate:
    """One AI task: provider prompt plus the deterministic fallback text."""

    name: str
    description: str
    system_prompt: str
    prompt: str
    fallback: str
    provider_notes: dict[ProviderKind, str] = field(default_factory=dict)

    def build_prompt(
        self,
        kind: ProviderKind,
        *,
        code: str,
        file_path: str,
        criteria: str | None = None,
    ) -> str:
        """Substitute inputs into the fixed template and add the provider note."""
        text = self.prompt.format(
            code=code,
            file_path=file_path,
            file_name=_file_name(file_path),
            language=_fence_language(file_path),
            criteria=criteria or "general quality standards",
        )
        note = self.provider_notes.get(kind)
        if note:
            text = f"{text.rstrip()}\n\n{note}\n"
        return text

    def render_fallback(self, *, file_path: str, remarks: list[str]) -> str:
        bullets = "\n".join(f"- {r}" for r in remarks) if remarks else "- None"
        return self.fallback.format(file_name=_file_name(file_path), remarks=bullets)


def _file_name(file_path: str) -> str:
    return file_path.replace("\\", "/").rsplit("/", 1)[-1]


def _fence_language(file_path: str) -> str:
    language = detect_language(file_path)
    return "" if language == "unknown" else language


def load_prompt_templates(path: Path) -> dict[str, PromptTemplate]:
    """Parse and validate a prompt YAML file."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise TemplateValidationError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(data, dict) or not isinstance(data.get("tasks"), dict):
        raise TemplateValidationError(f"{path}: missing 'tasks' mapping")

    notes: dict[ProviderKind, str] = {}
    for key, note in (data.get("provider_notes") or {}).items():
        try:
            notes[ProviderKind(key)] = str(note)
        except ValueError as exc:
            raise TemplateValidationError(
                f"{path}: unknown provider {key!r} in provider_notes"
            ) from exc

    templates: dict[str, PromptTemplate] = {}
    for name, entry in data["tasks"].items():
        missing = [f for f in _REQUIRED_FIELDS if not entry.get(f)]
        if missing:
            raise TemplateValidationError(
                f"{path}: task {name!r} is missing {', '.join(missing)}"
            )
        templates[name] = PromptTemplate(
            name=name,
            description=str(entry.get("description", "")),
            system_prompt=str(entry["system_prompt"]).strip(),
            prompt=str(entry["prompt"]),
            fallback=str(entry["fallback"]),
            provider_notes=notes,
        )
    return templates


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

_TEMPLATES: dict[str, PromptTemplate] = {}


def get_template(name: str) -> PromptTemplate:
    """Return the built-in template *name*, loading the YAML on first use.

    Raises:
        KeyError: If no task of that name exists.
    """
    if not _TEMPLATES:
        _TEMPLATES.update(load_prompt_templates(BUILTIN_TEMPLATES_PATH))
    if name not in _TEMPLATES:
        available = ", ".join(sorted(_TEMPLATES))
        raise KeyError(f"Prompt template {name!r} not found. Available: {available}")
    return _TEMPLATES[name]


def list_templates() -> list[str]:
    if not _TEMPLATES:
        _TEMPLATES.update(load_prompt_templates(BUILTIN_TEMPLATES_PATH))
    return sorted(_TEMPLATES)
