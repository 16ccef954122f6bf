"""MySQL dialect."""
from __future__ import annotations

from sqlbrick.compile.base import PlaceholderDialect


class MySQLDialect(PlaceholderDialect):
    """Unnumbered placeholders.

    Parameter style: ``?`` repeated once per bound value.  The ordinal is
    validated but not rendered; values are matched by position.
    """

    @property
    def dialect_name(self) -> str:
        return "mysql"

    def render_placeholder(self, index: int) -> str:
        return "?"
