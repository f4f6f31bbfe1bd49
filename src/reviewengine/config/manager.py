"""Layered TOML configuration: built-in defaults, user file, project file.

Later layers win. Files are read with ``tomllib`` on every call so edits made
between commands are picked up without caching.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

import tomli_w

from reviewengine.config.keys import CONFIG_KEYS, ConfigKey

DEFAULT_SOURCE = "default"


def user_config_path() -> Path:
    return Path.home() / ".config" / "reviewengine" / "config.toml"


def project_config_path(cwd: str = ".") -> Path:
    """``.reviewengine.toml`` in the project root *cwd*."""
    return Path(cwd).resolve() / ".reviewengine.toml"


def _layers(cwd: str) -> list[tuple[str, Path]]:
    """``(source, path)`` pairs in increasing precedence."""
    return [("user", user_config_path()), ("project", project_config_path(cwd))]


def _lookup(key: str) -> ConfigKey:
    try:
        return CONFIG_KEYS[key]
    except KeyError:
        raise KeyError(f"Unknown config key: {key}") from None


def _read_toml(path: Path) -> dict[str, object]:
    if not path.is_file():
        return {}
    with path.open("rb") as fh:
        return tomllib.load(fh)


def _write_toml(path: Path, data: dict[str, object]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as fh:
        tomli_w.dump(data, fh)


def parse_value(key: str, raw: str) -> object:
    """Convert command-line text to the declared type of *key*.

    Raises:
        KeyError: *key* is not a known config key.
        ValueError: *raw* is not a valid value for the key.
    """
    key_def = _lookup(key)
    text = raw.strip()
    try:
        value = key_def.type_(text)
    except ValueError:
        raise ValueError(
            f"{key} expects {key_def.type_.__name__}, got {raw!r}"
        ) from None
    if isinstance(value, int | float):
        key_def.check(value)
    return value


def load_config(cwd: str = ".") -> dict[str, object]:
    """Every known key resolved through defaults, user file, project file.

    Unknown keys found in the files are ignored.
    """
    merged: dict[str, object] = {name: k.default for name, k in CONFIG_KEYS.items()}
    for _, path in _layers(cwd):
        merged.update(
            (name, value)
            for name, value in _read_toml(path).items()
            if name in CONFIG_KEYS
        )
    return merged


def get_config(key: str, cwd: str = ".") -> object:
    _lookup(key)
    return load_config(cwd)[key]


def resolve_config_source(key: str, cwd: str = ".") -> str:
    """Name of the layer that supplies *key*: project, user, or default."""
    _lookup(key)
    for source, path in reversed(_layers(cwd)):
        if key in _read_toml(path):
            return source
    return DEFAULT_SOURCE


def set_config(key: str, value: str, *, project: bool = False, cwd: str = ".") -> Path:
    """Persist *key* in the user file, or the project file with *project*.

    Validation happens before anything is written. Returns the file written.
    """
    parsed = parse_value(key, value)
    path = project_config_path(cwd) if project else user_config_path()
    data = _read_toml(path)
    data[key] = parsed
    _write_toml(path, data)
    return path


def unset_config(key: str, *, project: bool = False, cwd: str = ".") -> bool:
    """Drop *key* from one layer. Returns False when it was not set there."""
    _lookup(key)
    path = project_config_path(cwd) if project else user_config_path()
    data = _read_toml(path)
    if key not in data:
        return False
    del data[key]
    _write_toml(path, data)
    return True
