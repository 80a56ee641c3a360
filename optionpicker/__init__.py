"""Selectable, scrollable option list widget for terminal UIs."""

from .events import KeyEvent, ResizeEvent
from .keymap import KeyBinding, KeyMap, default_keymap
from .styles import Styles, TextStyle, default_styles, resolve_styles
from .view_stack import ViewSnapshot, ViewStack
from .viewport import Viewport
from .widget import OptionPicker, new_picker

__all__ = [
    "KeyEvent",
    "ResizeEvent",
    "KeyBinding",
    "KeyMap",
    "default_keymap",
    "Styles",
    "TextStyle",
    "default_styles",
    "resolve_styles",
    "ViewSnapshot",
    "ViewStack",
    "Viewport",
    "OptionPicker",
    "new_picker",
]
