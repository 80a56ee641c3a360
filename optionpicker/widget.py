"""Selectable, scrollable option list widget.

The widget owns the option labels, an immutable :class:`Viewport` record that
is replaced on every transition, and a :class:`ViewStack` for saving and
restoring scroll position across nested lists. It never draws to the terminal
itself; ``render`` returns text for the host to compose into its frame.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from . import viewport as vp
from .ansi import display_width
from .events import KeyEvent, ResizeEvent
from .ids import next_id
from .keymap import KeyMap, default_keymap
from .styles import Styles, default_styles
from .view_stack import ViewSnapshot, ViewStack
from .viewport import Viewport

_LOG = logging.getLogger("optionpicker.widget")

MARGIN_BOTTOM = 5
DEFAULT_CURSOR = ">"


class OptionPicker:
    """Single-selection list with a fixed-height sliding window.

    Attributes the owner may set directly: ``options``, ``height``,
    ``auto_height``, ``cursor``, ``keymap``, ``styles`` and ``focused``.
    ``height`` is recomputed from the terminal on resize while
    ``auto_height`` is enabled.
    """

    def __init__(self) -> None:
        self.id = next_id()
        self.options: list[str] = []
        self.keymap: KeyMap = default_keymap()
        self.styles: Styles = default_styles()
        self.cursor = DEFAULT_CURSOR
        self.height = 0
        self.auto_height = True
        self.focused = True
        self.viewport = Viewport()
        self._views = ViewStack()

    @property
    def selected(self) -> int:
        return self.viewport.selected

    @property
    def min(self) -> int:
        return self.viewport.min

    @property
    def max(self) -> int:
        return self.viewport.max

    def set_options(self, options: Iterable[str]) -> None:
        """Replace the option list and scroll back to the first row."""
        self.options = [str(option) for option in options]
        self.viewport = vp.reset(self.height)

    def resize(self, height: int) -> None:
        """Apply a new visible height without moving the selection."""
        self.height = height
        self.viewport = vp.resize(self.viewport, height)
        _LOG.debug("picker %d resized height=%d viewport=%s", self.id, height, self.viewport)

    def move_down(self) -> bool:
        previous = self.viewport
        self.viewport = vp.move_down(previous, len(self.options))
        return self.viewport != previous

    def move_up(self) -> bool:
        previous = self.viewport
        self.viewport = vp.move_up(previous, len(self.options))
        return self.viewport != previous

    def update(self, event: object) -> bool:
        """Apply one input event and return whether it was consumed.

        Resize events set the visible height (derived from the terminal when
        ``auto_height`` is on). Key events matching the up/down bindings move
        the selection. Everything else is ignored.
        """
        if isinstance(event, ResizeEvent):
            height = event.height - MARGIN_BOTTOM if self.auto_height else self.height
            self.resize(height)
            return True
        if not isinstance(event, KeyEvent):
            return False
        if self.keymap.down.matches(event):
            moved = self.move_down()
        elif self.keymap.up.matches(event):
            moved = self.move_up()
        else:
            return False
        if moved:
            _LOG.debug("picker %d key=%s viewport=%s", self.id, event.key, self.viewport)
        return True

    def push_view(self) -> None:
        """Save the current selection and window on the view stack."""
        self._views.push(self.viewport.snapshot())

    def pop_view(self) -> tuple[int, int, int]:
        """Remove the latest saved view and return ``(selected, min, max)``.

        Raises ``IndexError`` when nothing was pushed.
        """
        return self._views.pop().as_tuple()

    def restore_view(self) -> ViewSnapshot:
        """Pop the latest saved view and make it the live viewport."""
        snapshot = self._views.pop()
        self.viewport = Viewport.from_snapshot(snapshot)
        _LOG.debug("picker %d restored view depth=%d viewport=%s", self.id, len(self._views), self.viewport)
        return snapshot

    def view_depth(self) -> int:
        return self._views.depth()

    def visible_rows(self) -> list[tuple[int, str]]:
        """Return ``(index, label)`` pairs currently inside the window."""
        return vp.visible_rows(self.viewport, self.options)

    def render(self) -> str:
        """Return the visible rows as newline-terminated lines."""
        if not self.options:
            return self.styles.empty.string()

        cursor_style = self.styles.cursor if self.focused else self.styles.disabled_cursor
        padding = " " * (display_width(self.cursor) + 1)
        out: list[str] = []
        for index, label in self.visible_rows():
            if index == self.viewport.selected:
                out.append(cursor_style.render(self.cursor) + self.styles.selected.render(f" {label}"))
            else:
                out.append(padding + self.styles.option.render(label))
            out.append("\n")
        return "".join(out)

    def check_selection(self, event: object) -> tuple[bool, str]:
        """Return ``(True, label)`` when ``event`` confirms the highlighted option."""
        if not self.options:
            return False, ""
        if not self.keymap.select.matches(event):
            return False, ""
        return True, self.options[self._clamped_selected()]

    def _clamped_selected(self) -> int:
        return max(0, min(self.viewport.selected, len(self.options) - 1))


def new_picker() -> OptionPicker:
    """Return a picker with empty options, default bindings and styles."""
    return OptionPicker()


__all__ = ["OptionPicker", "new_picker", "MARGIN_BOTTOM", "DEFAULT_CURSOR"]
