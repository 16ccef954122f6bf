"""Test fixtures: template capture helper and sample people rows."""

from __future__ import annotations

from typing import Any

from sqlbrick import Fragment, Segments, sql

PEOPLE_ROWS: list[tuple[str, int]] = [
    ("Peter", 25),
    ("Wendy", 24),
    ("Andrew", 32),
]


def tag(template: str, *values: Any) -> Fragment:
    """Build a tag-mode fragment from a ``{}``-delimited template.

    Stands in for a template capture mechanism::

        tag("SELECT * FROM cars WHERE name = {}", 123)

    Args:
        template: Statement text with one ``{}`` per value.
        values: Slot values, in order.

    Returns:
        The tag-mode fragment.
    """
    segments = template.split("{}")
    if len(segments) != len(values) + 1:
        raise ValueError(
            f"Template has {len(segments) - 1} gaps but {len(values)} values were given."
        )
    return sql(Segments(segments), *values)
