"""Input events understood by the picker widget."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class KeyEvent:
    """One decoded key press, named like ``"j"``, ``"down"`` or ``"ctrl+n"``."""

    key: str


@dataclass(frozen=True)
class ResizeEvent:
    """New terminal size in cells."""

    width: int
    height: int

