"""Fragment construction: template (tag) mode, join mode and ``raw``.

The builder is a single callable with two call shapes:

Tag mode
    The first argument is a :class:`Segments` tuple (the literal pieces of a
    template) followed by one value per gap::

        sql(Segments(["SELECT * FROM cars WHERE name = ", ""]), 123)
        # text: SELECT * FROM cars WHERE name = $1

    On interpreters with template strings, a template object is accepted
    directly and split into its strings and interpolation values::

        sql(t"SELECT * FROM cars WHERE name = {name}")

Join mode
    Any other call shape.  The arguments become the slots of a fragment that
    separates adjacent items with the profile's join delimiter (``","`` by
    default)::

        sql(raw("a"), raw("b"), 3).text          # 'a,b,$1'
        sql(raw("a"), raw("b")).join_by(" + ")   # 'a + b'

``raw`` inserts text verbatim.  It is NOT escaped; never pass user input.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from sqlbrick.compile.base import CompiledQuery
from sqlbrick.compile.registry import DialectFactory
from sqlbrick.errors import InvalidArgument
from sqlbrick.fragment import Fragment
from sqlbrick.schema.profile import BuilderProfile

logger = logging.getLogger(__name__)


class Segments(tuple):
    """Literal segments captured from one template invocation.

    A plain tuple of strings marked as template literals; passing one as the
    first argument of the builder selects tag mode.  ``raw`` exposes the
    literal form, as template capture mechanisms conventionally do.
    """

    __slots__ = ()

    def __new__(cls, strings: Iterable[str] = ()) -> Segments:
        if isinstance(strings, (str, bytes)):
            raise InvalidArgument.for_value("Segments", "an iterable of strings", strings)
        return super().__new__(cls, strings)

    @property
    def raw(self) -> tuple[str, ...]:
        return tuple(self)

    def __repr__(self) -> str:
        return f"Segments({list(self)!r})"


def _is_template(value: Any) -> bool:
    return hasattr(value, "strings") and hasattr(value, "interpolations")


class Builder:
    """Dual-mode fragment factory.

    Args:
        profile: Builder defaults; ``BuilderProfile()`` when omitted.

    Raises:
        CompilationError: If ``profile.target`` is not a registered dialect.
    """

    def __init__(self, profile: BuilderProfile | None = None) -> None:
        self._profile = profile or BuilderProfile()
        DialectFactory.create(self._profile.target)

    @property
    def profile(self) -> BuilderProfile:
        return self._profile

    def __call__(self, *args: Any) -> Fragment:
        if args and isinstance(args[0], Segments):
            return Fragment(args[0], args[1:])
        if args and _is_template(args[0]):
            if len(args) > 1:
                raise InvalidArgument(
                    f"Template string call takes no extra values, received {len(args) - 1}.",
                    value=args[1:],
                    expected="a single template",
                )
            return self.template(args[0])
        return Fragment.join(args, self._profile.join_delimiter)

    def template(self, template: Any) -> Fragment:
        """Build a tag-mode fragment from a template string object.

        Only interpolation values are used; conversions and format specs are
        ignored because every value is bound, never formatted.
        """
        segments = Segments(template.strings)
        slots = [interpolation.value for interpolation in template.interpolations]
        logger.debug("Built fragment from template with %d slots", len(slots))
        return Fragment(segments, slots)

    def raw(self, text: str) -> Fragment:
        """Return a fragment inserting ``text`` verbatim with no values.

        Raises:
            InvalidArgument: If ``text`` is not a string.
        """
        if not isinstance(text, str):
            raise InvalidArgument.for_value("raw text", "a string", text)
        return Fragment((text,))

    def compile(self, fragment: Fragment, target: str | None = None) -> CompiledQuery:
        """Render ``fragment`` for ``target`` (the profile's target by default).

        Raises:
            InvalidArgument: If ``fragment`` is not a :class:`Fragment`.
            CompilationError: If ``target`` is not registered.
        """
        if not isinstance(fragment, Fragment):
            raise InvalidArgument.for_value("Builder.compile fragment", "a Fragment", fragment)
        return fragment.compile(target or self._profile.target)


#: Default builder: ``","`` join delimiter, ``postgres`` target.
sql = Builder()
build = sql
raw = sql.raw
