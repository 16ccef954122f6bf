"""The Fragment: an immutable node of literal segments and interleaved slots.

A fragment is built once (by :func:`sqlbrick.sql` or directly) and never
mutated afterwards.  Rendering is lazy: ``text``, ``sql`` and ``values``
each walk the tree on first access and cache their own result on the
instance, so callbacks embedded in slots run once per getter::

    query = sql(Segments(["SELECT * FROM cars WHERE name = ", ""]), "Volvo")
    query.text    # 'SELECT * FROM cars WHERE name = $1'
    query.sql     # 'SELECT * FROM cars WHERE name = ?'
    query.values  # ['Volvo']

``join_by`` and ``set_name`` are copy-on-write: they return ``self`` when the
value is unchanged, otherwise a new fragment sharing the same segments and
slots.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from sqlbrick.compile.base import CompiledQuery, PlaceholderDialect
from sqlbrick.compile.collector import ValueCollector
from sqlbrick.compile.flattener import TextFlattener
from sqlbrick.compile.mysql import MySQLDialect
from sqlbrick.compile.postgres import PostgresDialect
from sqlbrick.compile.registry import DialectFactory
from sqlbrick.errors import InvalidArgument

logger = logging.getLogger(__name__)

#: Default target of ``Fragment.compile``.
NUMBERED_TARGET = "postgres"

# Fixed dialects behind ``text`` and ``sql``; registry changes only affect ``compile``.
_NUMBERED = PostgresDialect()
_UNNUMBERED = MySQLDialect()

_VALUES_KEY = "values"


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


class Fragment:
    """Describes SQL statement text with interleaved values.

    Args:
        segments: Literal text pieces.  In template form there is one more
            segment than there are slots.
        slots: Values between the segments.  Each is a scalar, a
            :class:`Fragment`, a ``list``/``tuple`` of those, or a callable
            taking the owning fragment and returning one of those.
        delimiter: Text placed between directly adjacent fragment results
            from the same slot set or sequence slot.
        name: Optional prepared statement name.

    Raises:
        InvalidArgument: If ``segments`` is not a sequence of strings,
            ``slots`` is not a sequence, ``delimiter`` is not a string or
            ``name`` is neither ``None`` nor a string.
    """

    __slots__ = ("_segments", "_slots", "_delimiter", "_name", "_joined", "_cache")

    def __init__(
        self,
        segments: Sequence[str] = (),
        slots: Sequence[Any] = (),
        delimiter: str = "",
        name: str | None = None,
    ) -> None:
        if not _is_sequence(segments):
            raise InvalidArgument.for_value(
                "Fragment 1st argument (segments)", "a sequence of strings", segments
            )
        for segment in segments:
            if not isinstance(segment, str):
                raise InvalidArgument.for_value("Fragment segment", "a string", segment)
        if not _is_sequence(slots):
            raise InvalidArgument.for_value("Fragment 2nd argument (slots)", "a sequence", slots)
        if not isinstance(delimiter, str):
            raise InvalidArgument.for_value("Fragment 3rd argument (delimiter)", "a string", delimiter)
        if name is not None and not isinstance(name, str):
            raise InvalidArgument.for_value("Fragment name", "a string", name)

        self._segments: tuple[str, ...] = (
            segments if isinstance(segments, tuple) else tuple(segments)
        )
        self._slots: tuple[Any, ...] = slots if isinstance(slots, tuple) else tuple(slots)
        self._delimiter = delimiter
        self._name = name
        self._joined = False
        self._cache: dict[str, Any] = {}

    @classmethod
    def join(cls, items: Sequence[Any], delimiter: str = ",") -> Fragment:
        """Build a fragment listing ``items`` separated by ``delimiter``.

        No literal text is contributed; every pair of adjacent items is
        separated by the delimiter, which ``join_by`` can later replace::

            Fragment.join([raw("a"), raw("b")]).text            # 'a,b'
            Fragment.join([raw("a"), 1]).join_by(" + ").text    # 'a + $1'
        """
        if not _is_sequence(items):
            raise InvalidArgument.for_value("Fragment.join items", "a sequence", items)
        fragment = cls(("",) * (len(items) + 1), items, delimiter)
        fragment._joined = True
        return fragment

    # ------------------------------------------------------------------
    # Rendered output
    # ------------------------------------------------------------------

    @property
    def text(self) -> str:
        """Statement with numbered placeholders (``$1``, ``$2``, ...)."""
        return self._render("text", _NUMBERED)

    @property
    def sql(self) -> str:
        """Statement with unnumbered placeholders (``?``)."""
        return self._render("sql", _UNNUMBERED)

    @property
    def values(self) -> list[Any]:
        """Bound values in placeholder order.

        Each access returns a new list, and grouped values are new lists too;
        the cached result stays untouched.
        """
        cached = self._memoize(_VALUES_KEY, lambda: tuple(ValueCollector().collect(self)))
        # Slot-level lists are always groups built by the collector.
        return [list(value) if isinstance(value, list) else value for value in cached]

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def delimiter(self) -> str:
        return self._delimiter

    def compile(self, target: str = NUMBERED_TARGET) -> CompiledQuery:
        """Render for any registered dialect.

        Args:
            target: Dialect name registered with
                :class:`~sqlbrick.compile.registry.DialectFactory`.

        Returns:
            :class:`~sqlbrick.compile.base.CompiledQuery` carrying the text,
            the bound values and this fragment's name.

        Raises:
            CompilationError: If ``target`` is not registered.
        """
        text = self._render(f"compile:{target}", DialectFactory.create(target))
        return CompiledQuery(sql=text, params=self.values, dialect=target, name=self._name)

    # ------------------------------------------------------------------
    # Copy-on-write setters
    # ------------------------------------------------------------------

    def join_by(self, delimiter: str) -> Fragment:
        """Return a fragment joining adjacent statements with ``delimiter``.

        Raises:
            InvalidArgument: If ``delimiter`` is not a string.
        """
        if not isinstance(delimiter, str):
            raise InvalidArgument.for_value("Fragment delimiter", "a string", delimiter)
        if delimiter == self._delimiter:
            return self
        return self._replace(delimiter=delimiter)

    def set_name(self, name: str) -> Fragment:
        """Return a fragment carrying prepared statement ``name``.

        Raises:
            InvalidArgument: If ``name`` is not a string.
        """
        if not isinstance(name, str):
            raise InvalidArgument.for_value("Fragment name", "a string", name)
        if name == self._name:
            return self
        return self._replace(name=name)

    def _replace(self, **changes: Any) -> Fragment:
        clone = object.__new__(type(self))
        clone._segments = self._segments
        clone._slots = self._slots
        clone._delimiter = changes.get("delimiter", self._delimiter)
        clone._name = changes.get("name", self._name)
        clone._joined = self._joined
        clone._cache = {}
        return clone

    # ------------------------------------------------------------------
    # Memoization
    # ------------------------------------------------------------------

    def _render(self, key: str, dialect: PlaceholderDialect) -> str:
        return self._memoize(key, lambda: TextFlattener(dialect).flatten(self))

    def _memoize(self, key: str, compute: Callable[[], Any]) -> Any:
        # Key presence is the "computed" flag; any value, None included, is cacheable.
        if key in self._cache:
            return self._cache[key]
        logger.debug("Rendering %s for %r", key, self)
        result = compute()
        self._cache[key] = result
        return result

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return (
            f"Fragment(segments={self._segments!r}, slots={len(self._slots)}, "
            f"delimiter={self._delimiter!r}, name={self._name!r})"
        )
