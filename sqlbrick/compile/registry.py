"""Dialect registry (Open/Closed Principle).

``DialectFactory``
    Central registry for :class:`~sqlbrick.compile.base.PlaceholderDialect`
    implementations.  Register a new dialect once; ``Fragment.compile`` and
    ``Builder`` look it up by target name.

Usage::

    from sqlbrick.compile.registry import DialectFactory

    @DialectFactory.register("oracle")
    class OracleDialect(PlaceholderDialect):
        ...
"""

from __future__ import annotations

from collections.abc import Callable
from typing import ClassVar

from sqlbrick.compile.base import PlaceholderDialect
from sqlbrick.errors import CompilationError


class DialectFactory:
    """Registry mapping dialect target names to :class:`PlaceholderDialect` classes.

    Dialects are stateless, so :meth:`create` hands out one shared instance
    per registered class.

    Example::

        @DialectFactory.register("oracle")
        class OracleDialect(PlaceholderDialect):
            ...

        dialect = DialectFactory.create("oracle")
    """

    _dialects: ClassVar[dict[str, type[PlaceholderDialect]]] = {}
    _instances: ClassVar[dict[str, PlaceholderDialect]] = {}

    @classmethod
    def register(
        cls, name: str
    ) -> Callable[[type[PlaceholderDialect]], type[PlaceholderDialect]]:
        """Decorator that registers a dialect class under ``name``.

        Args:
            name: The dialect target name (e.g. ``"postgres"``).

        Returns:
            A decorator that registers and returns the dialect class.
        """

        def decorator(dialect_cls: type[PlaceholderDialect]) -> type[PlaceholderDialect]:
            cls.register_class(name, dialect_cls)
            return dialect_cls

        return decorator

    @classmethod
    def register_class(cls, name: str, dialect_cls: type[PlaceholderDialect]) -> None:
        """Register a dialect class without using the decorator form.

        Re-registering a name replaces the previous class.

        Args:
            name: The dialect target name.
            dialect_cls: The :class:`PlaceholderDialect` subclass to register.
        """
        cls._dialects[name] = dialect_cls
        cls._instances.pop(name, None)

    @classmethod
    def create(cls, name: str) -> PlaceholderDialect:
        """Return the dialect registered for ``name``.

        Args:
            name: The dialect target name.

        Returns:
            A :class:`PlaceholderDialect` instance.

        Raises:
            CompilationError: If no dialect is registered for ``name``.
        """
        instance = cls._instances.get(name)
        if instance is not None:
            return instance
        dialect_cls = cls._dialects.get(name)
        if dialect_cls is None:
            registered = sorted(cls._dialects)
            raise CompilationError(
                f"Unsupported dialect target: {name!r}. Registered targets: {registered}.",
                dialect=name,
            )
        instance = cls._instances[name] = dialect_cls()
        return instance

    @classmethod
    def registered_targets(cls) -> list[str]:
        """Return the sorted list of registered dialect target names."""
        return sorted(cls._dialects)
