"""Shared pytest fixtures for sqlbrick unit and integration tests."""
from __future__ import annotations

import sqlite3
from collections.abc import Iterator

import pytest

from sqlbrick import DialectFactory


@pytest.fixture()
def isolated_registry(monkeypatch: pytest.MonkeyPatch) -> type[DialectFactory]:
    """DialectFactory whose registrations are undone after the test."""
    monkeypatch.setattr(DialectFactory, "_dialects", dict(DialectFactory._dialects))
    monkeypatch.setattr(DialectFactory, "_instances", dict(DialectFactory._instances))
    return DialectFactory


@pytest.fixture()
def sqlite_conn() -> Iterator[sqlite3.Connection]:
    """Fresh in-memory SQLite connection."""
    conn = sqlite3.connect(":memory:")
    conn.row_factory = sqlite3.Row
    yield conn
    conn.close()
