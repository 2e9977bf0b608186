"""Shared fixtures."""

import pytest

from sqlqb import QueryBuilder


@pytest.fixture
def qb() -> QueryBuilder:
    return QueryBuilder("T")


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config directory at a temp dir and clear env overrides."""
    monkeypatch.setenv("SQLQB_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.delenv("SQLQB_OUTPUT", raising=False)
    monkeypatch.delenv("SQLQB_STRICT", raising=False)
    return tmp_path / "config"
