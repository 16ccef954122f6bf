"""Named-parameter dialect."""
from __future__ import annotations

from sqlbrick.compile.base import PlaceholderDialect


class NamedDialect(PlaceholderDialect):
    """Named placeholders ``:param_1``, ``:param_2``, ...

    Used by the SQLAlchemy adapter, whose ``text()`` construct only binds
    named parameters.  Use :meth:`param_name` to build the matching keys.
    """

    @property
    def dialect_name(self) -> str:
        return "named"

    @staticmethod
    def param_name(index: int) -> str:
        return f"param_{index}"

    def render_placeholder(self, index: int) -> str:
        return f":{self.param_name(index)}"
