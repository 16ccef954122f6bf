"""PostgreSQL dialect."""
from __future__ import annotations

from sqlbrick.compile.base import PlaceholderDialect


class PostgresDialect(PlaceholderDialect):
    """Numbered placeholders.

    Parameter style: ``$1``, ``$2``, ... – compatible with ``asyncpg``,
    ``psycopg`` server-side binding and node-postgres style query configs.
    """

    @property
    def dialect_name(self) -> str:
        return "postgres"

    def render_placeholder(self, index: int) -> str:
        return f"${index}"
