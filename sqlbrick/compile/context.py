"""Per-pass rendering state.

A single :class:`PlaceholderCounter` is created per rendering pass and
threaded through every nested fragment, so the Nth placeholder emitted
anywhere in the tree (pre-order, left to right) carries ordinal N.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PlaceholderCounter:
    """Monotonic 1-based parameter ordinal for one rendering pass."""

    value: int = 0

    def advance(self) -> int:
        """Advance and return the ordinal of the next placeholder."""
        self.value += 1
        return self.value
