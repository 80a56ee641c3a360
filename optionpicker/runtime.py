"""Interactive host loop for running a picker in the terminal.

Polls terminal size, forwards resize and key events to the widget, draws the
frame, and resolves confirmed selections. Options whose labels contain the
separator are browsed as a hierarchy: confirming a group drills into it and the
back keys return to the parent with its scroll position restored.
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from . import viewport as vp
from .ansi import clip_ansi_line
from .events import KeyEvent, ResizeEvent
from .input import read_key
from .terminal import TerminalController
from .widget import OptionPicker

_LOG = logging.getLogger("optionpicker.runtime")

QUIT_KEYS = frozenset({"q", "esc", "ctrl+c"})
BACK_KEYS = frozenset({"left", "h", "backspace"})
KEY_POLL_MS = 100


class OptionTree:
    """Ordered group/leaf structure built from separator-delimited paths.

    A name may be both a leaf and a group (``a`` next to ``a/b``); it is then
    listed twice, once plain and once with the trailing separator.
    """

    def __init__(self, paths: Iterable[str], separator: str = "/") -> None:
        self.separator = separator
        self._children: dict[tuple[str, ...], list[tuple[str, bool]]] = {(): []}
        self._leaf_paths: dict[tuple[str, ...], str] = {}
        for path in paths:
            self._add(path)

    def _add(self, path: str) -> None:
        raw_parts = path.split(self.separator) if self.separator else [path]
        parts = [part for part in raw_parts if part] or [path]
        prefix: tuple[str, ...] = ()
        for depth, part in enumerate(parts):
            is_group = depth < len(parts) - 1
            siblings = self._children.setdefault(prefix, [])
            if (part, is_group) not in siblings:
                siblings.append((part, is_group))
            node = prefix + (part,)
            if is_group:
                self._children.setdefault(node, [])
            else:
                self._leaf_paths.setdefault(node, path)
            prefix = node

    def is_group(self, node: tuple[str, ...]) -> bool:
        return node in self._children and node != ()

    def leaf_path(self, node: tuple[str, ...]) -> str | None:
        """Return the option string that produced leaf ``node``, verbatim."""
        return self._leaf_paths.get(node)

    def labels(self, prefix: tuple[str, ...]) -> list[str]:
        """Return display labels under ``prefix``; groups carry a trailing separator."""
        return [part + (self.separator if is_group else "") for part, is_group in self._children.get(prefix, [])]


class HierarchyBrowser:
    """Drive one picker through an :class:`OptionTree` using its view stack."""

    def __init__(self, picker: OptionPicker, tree: OptionTree) -> None:
        self.picker = picker
        self.tree = tree
        self.path: list[str] = []
        picker.set_options(tree.labels(()))

    def breadcrumb(self) -> str:
        return self.tree.separator.join(self.path) + (self.tree.separator if self.path else "")

    def activate(self, label: str) -> str | None:
        """Enter ``label`` when it is a group, otherwise return its original option."""
        sep = self.tree.separator
        if sep and label.endswith(sep):
            node = tuple(self.path) + (label[: -len(sep)],)
            if self.tree.is_group(node):
                self.picker.push_view()
                self.path = list(node)
                self.picker.set_options(self.tree.labels(node))
                _LOG.debug("entered %s depth=%d", self.breadcrumb(), self.picker.view_depth())
                return None
        node = tuple(self.path) + (label,)
        return self.tree.leaf_path(node) or sep.join(node)

    def back(self) -> bool:
        """Return to the parent group; ``False`` at the top level.

        The restored window is refitted to the current height, which may have
        changed while the child list was shown.
        """
        if self.picker.view_depth() == 0:
            return False
        self.path.pop()
        self.picker.options = self.tree.labels(tuple(self.path))
        self.picker.restore_view()
        self.picker.viewport = vp.fit_window(self.picker.viewport, self.picker.height)
        return True


@dataclass(frozen=True)
class FrameLayout:
    """Static text drawn around the picker rows."""

    title: str = ""
    show_help: bool = True


def compose_frame(browser: HierarchyBrowser, layout: FrameLayout, columns: int) -> str:
    """Build the full screen text for the current picker state."""
    picker = browser.picker
    lines: list[str] = []
    heading = layout.title
    crumb = browser.breadcrumb()
    if crumb:
        heading = f"{heading} {crumb}".strip()
    lines.append(picker.styles.disabled_cursor.render(heading) if heading else "")
    lines.append("")
    body = picker.render()
    lines.extend(body.rstrip("\n").split("\n"))
    if layout.show_help:
        entries = [f"{key} {desc}" for key, desc in picker.keymap.help_entries()]
        if picker.view_depth():
            entries.append("h back")
        entries.append("q quit")
        lines.append("")
        lines.append(picker.styles.disabled_cursor.render(" • ".join(entries)))
    return "\n".join(clip_ansi_line(line, columns) for line in lines)


def run_picker(
    browser: HierarchyBrowser,
    terminal: TerminalController,
    stdin_fd: int,
    *,
    layout: FrameLayout = FrameLayout(),
    key_reader: Callable[[int, int | None], str] = read_key,
    terminal_size: Callable[[], os.terminal_size] = lambda: shutil.get_terminal_size((80, 24)),
) -> str | None:
    """Run the picker until an option is confirmed or the user quits.

    Returns the confirmed option path, or ``None`` when cancelled.
    """
    picker = browser.picker
    last_size: tuple[int, int] | None = None
    dirty = True

    with terminal.raw_mode():
        while True:
            size = terminal_size()
            if (size.columns, size.lines) != last_size:
                last_size = (size.columns, size.lines)
                picker.update(ResizeEvent(width=size.columns, height=size.lines))
                dirty = True

            if dirty:
                terminal.draw(compose_frame(browser, layout, size.columns))
                dirty = False

            key = key_reader(stdin_fd, KEY_POLL_MS)
            if not key:
                continue
            event = KeyEvent(key)

            did_select, label = picker.check_selection(event)
            if did_select:
                chosen = browser.activate(label)
                if chosen is not None:
                    _LOG.info("selected %s", chosen)
                    return chosen
                dirty = True
                continue
            if key in QUIT_KEYS:
                _LOG.info("cancelled")
                return None
            if key in BACK_KEYS and browser.back():
                dirty = True
                continue
            if picker.update(event):
                dirty = True


def build_browser(picker: OptionPicker, options: Sequence[str], separator: str) -> HierarchyBrowser:
    """Wrap ``picker`` in a browser over ``options`` split on ``separator``."""
    return HierarchyBrowser(picker, OptionTree(options, separator))
