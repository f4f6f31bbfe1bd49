"""Shared source fixtures for analysis tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

BALANCED_SOURCE = """\
package com.sinqia.pagamentos.service;

public class PagamentoService {
    public void processar(Long id) {
        Connection a = ConexaoFactory.empresta("db");
        Connection b = ConexaoFactory.empresta("db");
        Connection c = ConexaoFactory.empresta("db");
        if (id == null) {
            return;
        }
        ConexaoFactory.devolve(a);
        ConexaoFactory.devolve(b);
        ConexaoFactory.devolve(c);
    }
}
"""

LEAKY_SOURCE = """\
package com.sinqia.pagamentos.dao;

public class PagamentoDao {
    public void salvar() {
        Connection conn = ConexaoFactory.empresta("db");
        conn.execute();
    }
}
"""


def branching_source(tokens: int) -> str:
    """A class with *tokens* ``if`` statements and nothing else of note."""
    body = "\n".join(f"        if (x > {i}) {{ y++; }}" for i in range(tokens))
    return f"public class Branchy {{\n    void run(int x) {{\n{body}\n    }}\n}}\n"


@pytest.fixture
def balanced_source() -> str:
    return BALANCED_SOURCE


@pytest.fixture
def leaky_source() -> str:
    return LEAKY_SOURCE


@pytest.fixture
def make_branching() -> Callable[[int], str]:
    return branching_source
