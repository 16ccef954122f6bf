"""Fragment tree -> ordered bound values.

``ValueCollector`` mirrors :class:`~sqlbrick.compile.flattener.TextFlattener`
slot for slot.  The one asymmetry is inside sequence slots: the flattener
joins adjacent fragments with a delimiter, while the collector folds
adjacent scalars into one grouped ``list`` value.  A slot holding a plain
list therefore binds as a single array parameter (``x = ANY($1)``).
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlbrick.compile.resolver import FragmentRun, SlotKind, group_sequence, resolve

if TYPE_CHECKING:
    from sqlbrick.fragment import Fragment


class ValueCollector:
    """Collects bound values in placeholder order."""

    def collect(self, fragment: Fragment) -> list[Any]:
        values: list[Any] = []
        self._collect(fragment, values)
        return values

    def _collect(self, fragment: Fragment, values: list[Any]) -> None:
        for slot in fragment._slots:
            kind, value = resolve(slot, fragment)
            if kind is SlotKind.FRAGMENT:
                self._collect(value, values)
            elif kind is SlotKind.SEQUENCE:
                self._collect_sequence(fragment, value, values)
            elif kind is SlotKind.SCALAR:
                values.append(value)

    def _collect_sequence(self, owner: Fragment, elements: Any, values: list[Any]) -> None:
        for run in group_sequence(elements, owner):
            if isinstance(run, FragmentRun):
                self._collect(run.fragment, values)
            else:
                values.append(run.values)
