"""Save/restore history of picker viewport positions.

Owners push the current view before drilling into a nested list and pop it when
backing out, so selection and scroll position come back exactly as they were.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ViewSnapshot:
    """Selection index plus inclusive visible bounds captured at push time."""

    selected: int
    min: int
    max: int

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.selected, self.min, self.max)


class ViewStack:
    """Unbounded LIFO of :class:`ViewSnapshot` records.

    Balance is the caller's responsibility: popping an empty stack raises
    ``IndexError`` instead of inventing a default view.
    """

    def __init__(self) -> None:
        self._entries: list[ViewSnapshot] = []

    def push(self, snapshot: ViewSnapshot) -> None:
        """Record ``snapshot`` on top of the stack."""
        self._entries.append(snapshot)

    def pop(self) -> ViewSnapshot:
        """Remove and return the most recently pushed snapshot."""
        if not self._entries:
            raise IndexError("pop from empty view stack")
        return self._entries.pop()

    def depth(self) -> int:
        """Return how many snapshots are currently held."""
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
