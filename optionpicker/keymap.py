"""Declarative key bindings for picker actions.

A binding is a set of equivalent key names plus help text. Matching is exact on
the normalized key name carried by :class:`~optionpicker.events.KeyEvent`.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace

from .events import KeyEvent


@dataclass(frozen=True)
class KeyBinding:
    """Mapping from one or more key names to a single picker action."""

    keys: tuple[str, ...]
    help_key: str = ""
    help_desc: str = ""
    enabled: bool = True

    def matches(self, event: object) -> bool:
        """Return whether ``event`` is a key press bound to this action."""
        if not self.enabled or not isinstance(event, KeyEvent):
            return False
        return event.key in self.keys

    def with_keys(self, keys: Iterable[str]) -> KeyBinding:
        """Return a copy bound to ``keys``; help text follows the first key."""
        normalized = tuple(key for key in keys if key)
        help_key = normalized[0] if normalized else self.help_key
        return replace(self, keys=normalized, help_key=help_key)


@dataclass(frozen=True)
class KeyMap:
    """Bindings for every action the picker reacts to."""

    down: KeyBinding
    up: KeyBinding
    select: KeyBinding

    def help_entries(self) -> tuple[tuple[str, str], ...]:
        """Return ``(key, description)`` pairs for enabled bindings."""
        return tuple(
            (binding.help_key, binding.help_desc)
            for binding in (self.up, self.down, self.select)
            if binding.enabled and binding.keys
        )


def default_keymap() -> KeyMap:
    """Return the stock vi-and-arrow key bindings."""
    return KeyMap(
        down=KeyBinding(keys=("j", "down", "ctrl+n"), help_key="j", help_desc="down"),
        up=KeyBinding(keys=("k", "up", "ctrl+p"), help_key="k", help_desc="up"),
        select=KeyBinding(keys=("enter",), help_key="enter", help_desc="select"),
    )


def keymap_with_overrides(base: KeyMap, overrides: Mapping[str, Iterable[str]]) -> KeyMap:
    """Rebind named actions (``down``, ``up``, ``select``); unknown names are ignored."""
    changes: dict[str, KeyBinding] = {}
    for action in ("down", "up", "select"):
        keys = overrides.get(action)
        if keys is None:
            continue
        changes[action] = getattr(base, action).with_keys(keys)
    return replace(base, **changes)


__all__ = ["KeyBinding", "KeyMap", "default_keymap", "keymap_with_overrides"]
