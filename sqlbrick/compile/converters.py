"""Adapters handing rendered fragments to external libraries.

SQLAlchemy converter
--------------------
:func:`to_sqlalchemy` renders a fragment with named placeholders and returns
a :class:`sqlalchemy.sql.expression.TextClause` with every value bound.

Install the optional dependency before using this module::

    pip install "sqlbrick[sqlalchemy]"

Example::

    from sqlalchemy import create_engine
    from sqlbrick import Segments, sql
    from sqlbrick.compile.converters import to_sqlalchemy

    engine = create_engine("sqlite:///mydb.db")
    query = sql(Segments(["SELECT * FROM people WHERE age >= ", ""]), 18)
    with engine.connect() as conn:
        rows = conn.execute(to_sqlalchemy(query)).all()
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlbrick.compile.named import NamedDialect
from sqlbrick.fragment import Fragment

if TYPE_CHECKING:
    from sqlalchemy import TextClause


def to_sqlalchemy(fragment: Fragment) -> TextClause:
    """Convert ``fragment`` to a bound SQLAlchemy ``text()`` construct.

    Placeholders are named ``param_1``, ``param_2``, ... in placeholder
    order.  Grouped sequence values are bound as a single list parameter.

    Args:
        fragment: The fragment to convert.

    Returns:
        A ``TextClause`` ready for ``Connection.execute``.
    """
    from sqlalchemy import bindparam, text

    compiled = fragment.compile("named")
    params = [
        bindparam(NamedDialect.param_name(index), value)
        for index, value in enumerate(compiled.params, start=1)
    ]
    return text(compiled.sql).bindparams(*params)
