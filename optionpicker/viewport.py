"""Selection cursor and visible-window state for the option list.

``Viewport`` is an immutable record. Every transition takes the current record
and returns the next one; the owning widget stores whatever comes back.

Resizing only moves the bottom bound. The selection may sit outside the window
until the next move scrolls it back one row at a time.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace

from .view_stack import ViewSnapshot


@dataclass(frozen=True)
class Viewport:
    """Selected option index plus inclusive visible bounds."""

    selected: int = 0
    min: int = 0
    max: int = 0

    def contains_selection(self) -> bool:
        """Return whether the selected index lies within ``[min, max]``."""
        return self.min <= self.selected <= self.max

    def snapshot(self) -> ViewSnapshot:
        return ViewSnapshot(selected=self.selected, min=self.min, max=self.max)

    @classmethod
    def from_snapshot(cls, snapshot: ViewSnapshot) -> Viewport:
        return cls(selected=snapshot.selected, min=snapshot.min, max=snapshot.max)


def reset(height: int) -> Viewport:
    """Return a viewport at the top of a list shown ``height`` rows tall."""
    return Viewport(selected=0, min=0, max=height - 1)


def resize(viewport: Viewport, height: int) -> Viewport:
    """Set the bottom bound for a new visible ``height``.

    ``selected`` and ``min`` are left alone on purpose.
    """
    return replace(viewport, max=height - 1)


def fit_window(viewport: Viewport, height: int) -> Viewport:
    """Resize the window to ``height`` rows from its top, sliding it to keep the selection visible.

    Used when a saved view is restored under a different height.
    """
    fitted = replace(viewport, max=viewport.min + height - 1)
    if height <= 0 or fitted.contains_selection():
        return fitted
    lo = viewport.selected - height + 1 if viewport.selected > fitted.max else viewport.selected
    return Viewport(selected=viewport.selected, min=lo, max=lo + height - 1)


def move_down(viewport: Viewport, option_count: int) -> Viewport:
    """Advance selection one row, scrolling the window by one when it overflows."""
    if option_count <= 0:
        return viewport
    selected = min(viewport.selected + 1, option_count - 1)
    lo, hi = viewport.min, viewport.max
    if selected > hi:
        lo += 1
        hi += 1
    return Viewport(selected=selected, min=lo, max=hi)


def move_up(viewport: Viewport, option_count: int) -> Viewport:
    """Move selection back one row, scrolling the window by one when needed."""
    if option_count <= 0:
        return viewport
    selected = max(viewport.selected - 1, 0)
    lo, hi = viewport.min, viewport.max
    if selected < lo:
        lo -= 1
        hi -= 1
    return Viewport(selected=selected, min=lo, max=hi)


def visible_rows(viewport: Viewport, options: Sequence[str]) -> list[tuple[int, str]]:
    """Return ``(index, label)`` pairs inside the window, in ascending order."""
    first = max(0, viewport.min)
    last = min(viewport.max, len(options) - 1)
    return [(index, options[index]) for index in range(first, last + 1)]


__all__ = [
    "Viewport",
    "reset",
    "resize",
    "fit_window",
    "move_down",
    "move_up",
    "visible_rows",
]
