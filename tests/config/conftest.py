"""Config tests write TOML under tmp_path, never under the real home."""

from __future__ import annotations

from pathlib import Path

import pytest

_MODULES = ("reviewengine.config.manager", "reviewengine.cli.commands.config")


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def patch_config_paths(
    tmp_path: Path, project_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> dict[str, Path]:
    """Redirect the user and project config files; returns them by layer name."""
    files = {
        "user": tmp_path / "home" / ".config" / "reviewengine" / "config.toml",
        "project": project_dir / ".reviewengine.toml",
    }
    for module in _MODULES:
        monkeypatch.setattr(f"{module}.user_config_path", lambda: files["user"])
        monkeypatch.setattr(
            f"{module}.project_config_path", lambda cwd=".": files["project"]
        )
    return files
