"""SQLite dialect."""
from __future__ import annotations

from sqlbrick.compile.mysql import MySQLDialect


class SQLiteDialect(MySQLDialect):
    """Positional ``?`` placeholders for Python's built-in ``sqlite3``.

    Rendering is identical to :class:`MySQLDialect`; only the name differs
    so compiled queries report the backend they were built for.
    """

    @property
    def dialect_name(self) -> str:
        return "sqlite"
