"""Fragment tree -> statement text.

``TextFlattener`` walks literal segments and slots together and emits one
dialect placeholder per bound value.  The walk mirrors
:class:`~sqlbrick.compile.collector.ValueCollector` exactly:

* a fragment slot is flattened inline with the same counter;
* a sequence slot goes through
  :func:`~sqlbrick.compile.resolver.group_sequence`; fragment runs are
  inlined and joined by the owner's delimiter when directly adjacent, and
  each scalar group renders a single placeholder;
* a scalar slot renders one placeholder;
* ``SKIP`` renders nothing.

Two slot results with no literal text between them are separated by the
owner's delimiter when both are fragments, or always for fragments built
in join mode.  All ``\\n`` characters are removed from the final text.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlbrick.compile.base import PlaceholderDialect
from sqlbrick.compile.context import PlaceholderCounter
from sqlbrick.compile.resolver import FragmentRun, SlotKind, group_sequence, resolve

if TYPE_CHECKING:
    from sqlbrick.fragment import Fragment


class TextFlattener:
    """Renders a fragment tree to text for one placeholder dialect.

    Args:
        dialect: Placeholder style used for every bound value.
    """

    def __init__(self, dialect: PlaceholderDialect) -> None:
        self._dialect = dialect

    def flatten(self, fragment: Fragment) -> str:
        """Render ``fragment`` with a fresh counter and strip newlines."""
        text = self._flatten(fragment, PlaceholderCounter())
        return text.replace("\n", "")

    # ------------------------------------------------------------------
    # Recursive walk
    # ------------------------------------------------------------------

    def _flatten(self, fragment: Fragment, counter: PlaceholderCounter) -> str:
        segments = fragment._segments
        slots = fragment._slots
        parts: list[str] = []
        previous: SlotKind | None = None

        for i in range(max(len(segments), len(slots))):
            if i < len(segments) and segments[i]:
                parts.append(segments[i])
                previous = None
            if i >= len(slots):
                continue

            kind, value = resolve(slots[i], fragment)
            if kind is SlotKind.SKIP:
                continue
            if previous is not None and (
                fragment._joined or (previous is SlotKind.FRAGMENT and kind is SlotKind.FRAGMENT)
            ):
                parts.append(fragment._delimiter)
            parts.append(self._render_slot(fragment, kind, value, counter))
            previous = kind

        return "".join(parts)

    def _render_slot(
        self,
        owner: Fragment,
        kind: SlotKind,
        value: Any,
        counter: PlaceholderCounter,
    ) -> str:
        if kind is SlotKind.FRAGMENT:
            return self._flatten(value, counter)
        if kind is SlotKind.SEQUENCE:
            return self._flatten_sequence(owner, value, counter)
        return self._dialect.placeholder(counter.advance())

    def _flatten_sequence(
        self,
        owner: Fragment,
        elements: Any,
        counter: PlaceholderCounter,
    ) -> str:
        parts: list[str] = []
        for run in group_sequence(elements, owner):
            if isinstance(run, FragmentRun):
                if run.adjacent:
                    parts.append(owner._delimiter)
                parts.append(self._flatten(run.fragment, counter))
            else:
                parts.append(self._dialect.placeholder(counter.advance()))
        return "".join(parts)
