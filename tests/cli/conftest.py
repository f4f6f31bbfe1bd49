"""Shared fixtures for CLI tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

LEAKY_SOURCE = """\
package com.sinqia.dao;

public class PagamentoDao {
    public void salvar() {
        Connection conn = ConexaoFactory.empresta("db");
        conn.execute();
    }
}
"""

CLEAN_SOURCE = """\
package com.sinqia.model;

public class Pagamento {
    private Long id;
}
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Typer CliRunner instance for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_cli(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Iterator[None]:
    """Run commands from an empty directory with no user config and quiet logs."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("REVIEW_LOG_LEVEL", "WARNING")
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    with patch(
        "reviewengine.config.manager.user_config_path",
        return_value=tmp_path / "no-user-config.toml",
    ):
        yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def source_files(tmp_path: Path) -> dict[str, Path]:
    """A leaky DAO and a clean model class written to disk."""
    leaky = tmp_path / "PagamentoDao.java"
    leaky.write_text(LEAKY_SOURCE)
    clean = tmp_path / "Pagamento.java"
    clean.write_text(CLEAN_SOURCE)
    return {"leaky": leaky, "clean": clean}
