"""sqlbrick – Composable parameterized SQL fragments.

Write the statement, not the parameters.

Public API
----------
``sql`` / ``build``
    Dual-mode builder.  Tag mode takes a :class:`Segments` tuple followed by
    one value per gap; join mode takes any items and separates them with
    ``","``.

``raw``
    Verbatim, unescaped text fragment.

``Fragment``
    The immutable node type.  ``text`` renders ``$n`` placeholders, ``sql``
    renders ``?`` placeholders, ``values`` lists the bound values.

Example::

    from sqlbrick import Segments, raw, sql

    adults = sql(Segments(["age >= ", ""]), 18)
    query = sql(
        Segments(["SELECT * FROM ", " WHERE ", " AND id = ANY(", ")"]),
        raw("people"),
        adults,
        [1, 2, 3],
    )
    query.text    # 'SELECT * FROM people WHERE age >= $1 AND id = ANY($2)'
    query.values  # [18, [1, 2, 3]]

Extensibility
-------------
New placeholder styles can be registered via::

    from sqlbrick.compile.registry import DialectFactory

    @DialectFactory.register("oracle")
    class OracleDialect(PlaceholderDialect):
        ...

After registration, ``Fragment.compile("oracle")`` picks it up.
"""

from __future__ import annotations

from sqlbrick.builder import Builder, Segments, build, raw, sql
from sqlbrick.compile.base import CompiledQuery, PlaceholderDialect
from sqlbrick.compile.converters import to_sqlalchemy
from sqlbrick.compile.registry import DialectFactory
from sqlbrick.compile.resolver import SKIP
from sqlbrick.errors import CompilationError, InvalidArgument, SQLBrickError
from sqlbrick.fragment import Fragment
from sqlbrick.schema.profile import BuilderProfile

__all__ = [
    # Construction
    "sql",
    "build",
    "raw",
    "Builder",
    "Segments",
    "SKIP",
    # Types
    "Fragment",
    "CompiledQuery",
    # Configuration
    "BuilderProfile",
    # Dialects
    "DialectFactory",
    "PlaceholderDialect",
    # Adapters
    "to_sqlalchemy",
    # Errors
    "SQLBrickError",
    "InvalidArgument",
    "CompilationError",
]
