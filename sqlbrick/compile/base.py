"""Dialect abstractions: CompiledQuery and the PlaceholderDialect ABC.

The Template Method pattern (GoF) is used:
- ``PlaceholderDialect.placeholder`` validates the parameter ordinal and
  delegates the token shape to ``render_placeholder``.
- ``PostgresDialect``, ``MySQLDialect``, ``SQLiteDialect`` and
  ``NamedDialect`` override the dialect-specific step.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from sqlbrick.errors import CompilationError


@dataclass(frozen=True)
class CompiledQuery:
    """The output of rendering a fragment for one dialect.

    Attributes:
        sql: Statement text with dialect placeholders, newlines removed.
        params: Bound values aligned 1:1 with placeholders.  Grouped
            sequence members appear as a single ``list`` value.
        dialect: The target dialect name (e.g. ``'postgres'``).
        name: Prepared statement name, or ``None``.
    """

    sql: str
    params: list[Any] = field(default_factory=list)
    dialect: str = "postgres"
    name: str | None = None

    def as_tuple(self) -> tuple[str, list[Any]]:
        """Return ``(sql, params)`` ready for ``cursor.execute``."""
        return self.sql, list(self.params)

    def as_config(self) -> dict[str, Any]:
        """Return a ``{"text", "values", "name"}`` query config mapping.

        ``name`` is omitted when the statement is unnamed.
        """
        config: dict[str, Any] = {"text": self.sql, "values": list(self.params)}
        if self.name is not None:
            config["name"] = self.name
        return config


class PlaceholderDialect(ABC):
    """Abstract base for placeholder rendering styles.

    The flattener calls :meth:`placeholder` once per bound value with a
    1-based ordinal that is global across the whole fragment tree.
    """

    @property
    @abstractmethod
    def dialect_name(self) -> str:
        """Return the canonical dialect name (``'postgres'``, ``'mysql'`` ...)."""

    @abstractmethod
    def render_placeholder(self, index: int) -> str:
        """Return the placeholder token for the ``index``-th bound value.

        Args:
            index: 1-based parameter ordinal, already validated.

        Returns:
            Dialect-specific placeholder string.
        """

    def placeholder(self, index: int) -> str:
        """Validate ``index`` and return its placeholder token.

        Raises:
            CompilationError: If ``index`` is lower than 1.
        """
        if index < 1:
            raise CompilationError(
                f"Placeholder index can't be less than 1, received: {index}.",
                dialect=self.dialect_name,
            )
        return self.render_placeholder(index)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
