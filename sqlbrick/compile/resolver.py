"""Lazy slot resolution and sequence grouping.

Every slot value is resolved exactly once per rendering pass into a
:class:`Resolved` pair tagged with a :class:`SlotKind`.  Callables are
invoked with the fragment that owns the slot, so a shared callback can tell
which enclosing statement is being rendered::

    def name_condition(query):
        return "Andrew" if query is first_query else sql(...)

:func:`group_sequence` is the single left-to-right pass over a sequence slot
used by both the text flattener and the value collector.  Sharing it keeps
the two walks aligned: each :class:`ValueGroup` is one placeholder in the
text and one bound value in the value list.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, NamedTuple, Union

if TYPE_CHECKING:
    from sqlbrick.fragment import Fragment


class _SkipType(enum.Enum):
    SKIP = "SKIP"

    def __repr__(self) -> str:
        return "SKIP"


#: Slot value that renders nothing and binds nothing.  ``None`` is an
#: ordinary value (SQL ``NULL``); return ``SKIP`` from a callback to omit
#: the slot entirely.
SKIP = _SkipType.SKIP


class SlotKind(enum.Enum):
    """What a resolved slot value is, for exhaustive dispatch."""

    FRAGMENT = "fragment"
    SEQUENCE = "sequence"
    SCALAR = "scalar"
    SKIP = "skip"


class Resolved(NamedTuple):
    kind: SlotKind
    value: Any


@dataclass
class FragmentRun:
    """A fragment element of a sequence slot.

    Attributes:
        fragment: The resolved fragment.
        adjacent: ``True`` when the previous element was also a fragment,
            i.e. the owner's delimiter goes in front of this one.
    """

    fragment: Fragment
    adjacent: bool = False


@dataclass
class ValueGroup:
    """A run of consecutive scalar elements bound as one list value."""

    values: list[Any] = field(default_factory=list)


SequenceRun = Union[FragmentRun, ValueGroup]


def classify(value: Any) -> Resolved:
    """Tag an already-resolved value with its :class:`SlotKind`.

    ``list`` and ``tuple`` are sequences; ``str``, ``bytes``, ``dict`` and
    every other object are scalars.
    """
    from sqlbrick.fragment import Fragment

    if isinstance(value, Fragment):
        return Resolved(SlotKind.FRAGMENT, value)
    if isinstance(value, (list, tuple)):
        return Resolved(SlotKind.SEQUENCE, value)
    if value is SKIP:
        return Resolved(SlotKind.SKIP, value)
    return Resolved(SlotKind.SCALAR, value)


def resolve(value: Any, owner: Fragment) -> Resolved:
    """Resolve a slot value, calling it with ``owner`` if it is callable.

    The result of a callable is not called again, even if it is itself
    callable.  Exceptions raised by the callable propagate unchanged.

    Args:
        value: Raw slot value.
        owner: Fragment whose slot (or sequence slot) holds ``value``.

    Returns:
        The tagged resolved value.
    """
    if callable(value):
        value = value(owner)
    return classify(value)


def group_sequence(elements: Any, owner: Fragment) -> list[SequenceRun]:
    """Split a sequence slot into fragment runs and scalar groups.

    Rules, applied left to right:

    * a fragment element becomes a :class:`FragmentRun`; it is ``adjacent``
      when the previous element was a fragment too;
    * a scalar element that is first, or follows a fragment, opens a new
      :class:`ValueGroup`;
    * a scalar element following a scalar joins the open group.

    Nested sequences are scalars here (bound as array values) and ``SKIP``
    elements are dropped.  An empty sequence yields one empty group so that
    ``ANY(${[]})`` still renders a placeholder.

    Args:
        elements: The resolved sequence.
        owner: Fragment owning the sequence slot; passed to callables.
    """
    if not elements:
        return [ValueGroup()]

    runs: list[SequenceRun] = []
    previous_fragment = False
    for element in elements:
        kind, value = resolve(element, owner)
        if kind is SlotKind.SKIP:
            continue
        if kind is SlotKind.FRAGMENT:
            runs.append(FragmentRun(value, adjacent=previous_fragment))
            previous_fragment = True
        elif runs and not previous_fragment:
            runs[-1].values.append(value)  # type: ignore[union-attr]
        else:
            runs.append(ValueGroup([value]))
            previous_fragment = False
    return runs
