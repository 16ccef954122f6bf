"""Pydantic model configuring a :class:`~sqlbrick.builder.Builder`.

The profile fixes the defaults a builder applies to every fragment it
creates, so an application can keep one configured builder around::

    from sqlbrick import Builder, BuilderProfile, raw

    sql = Builder(BuilderProfile(join_delimiter=", ", target="sqlite"))
    compiled = sql.compile(sql(raw("a"), raw("b")))   # dialect 'sqlite'

Profiles are frozen; use ``model_copy(update=...)`` to derive variants.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BuilderProfile(BaseModel):
    """Defaults for fragments built by one :class:`Builder`.

    Attributes:
        join_delimiter: Delimiter given to fragments created in join mode
            (``sql(a, b, c)``).  Tag-mode fragments always start with ``""``.
        target: Dialect used by :meth:`Builder.compile` when no target is
            passed.  Must be registered with
            :class:`~sqlbrick.compile.registry.DialectFactory`; the builder
            checks it at construction time.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, strict=True)

    join_delimiter: str = ","
    target: str = "postgres"
