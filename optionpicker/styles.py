"""ANSI style sets used to decorate picker rows.

Palettes are UI-only SGR prefixes. A ``plain`` palette with empty prefixes is
used when colour is disabled so rendered rows carry no escape sequences.
"""

from __future__ import annotations

from dataclasses import dataclass

RESET = "\033[0m"
EMPTY_MESSAGE = "Bummer. No Options Provided."
EMPTY_PADDING_LEFT = 2


@dataclass(frozen=True)
class TextStyle:
    """SGR prefix plus optional left padding and preset text."""

    sgr: str = ""
    padding_left: int = 0
    text: str = ""

    def render(self, text: str) -> str:
        """Return ``text`` wrapped in this style's escape codes."""
        pad = " " * max(0, self.padding_left)
        if not self.sgr:
            return f"{pad}{text}"
        return f"{pad}{self.sgr}{text}{RESET}"

    def string(self) -> str:
        """Render the preset text."""
        return self.render(self.text)


@dataclass(frozen=True)
class Styles:
    """Semantic styles for every part of the picker."""

    name: str
    disabled_cursor: TextStyle
    cursor: TextStyle
    option: TextStyle
    selected: TextStyle
    empty: TextStyle


DEFAULT_STYLES = Styles(
    name="default",
    disabled_cursor=TextStyle(sgr="\033[38;5;247m"),
    cursor=TextStyle(sgr="\033[38;5;212m"),
    option=TextStyle(),
    selected=TextStyle(sgr="\033[1;38;5;212m"),
    empty=TextStyle(sgr="\033[38;5;240m", padding_left=EMPTY_PADDING_LEFT, text=EMPTY_MESSAGE),
)

OCEAN_STYLES = Styles(
    name="ocean",
    disabled_cursor=TextStyle(sgr="\033[2;38;5;110m"),
    cursor=TextStyle(sgr="\033[38;5;45m"),
    option=TextStyle(sgr="\033[38;5;153m"),
    selected=TextStyle(sgr="\033[1;38;5;45m"),
    empty=TextStyle(sgr="\033[2;38;5;110m", padding_left=EMPTY_PADDING_LEFT, text=EMPTY_MESSAGE),
)

PLAIN_STYLES = Styles(
    name="plain",
    disabled_cursor=TextStyle(),
    cursor=TextStyle(),
    option=TextStyle(),
    selected=TextStyle(),
    empty=TextStyle(padding_left=EMPTY_PADDING_LEFT, text=EMPTY_MESSAGE),
)

_STYLES: dict[str, Styles] = {
    DEFAULT_STYLES.name: DEFAULT_STYLES,
    OCEAN_STYLES.name: OCEAN_STYLES,
}


def available_style_names() -> tuple[str, ...]:
    """Return selectable non-plain palette names."""
    return tuple(sorted(_STYLES.keys()))


def normalize_style_name(name: str | None) -> str:
    """Return a valid palette name, falling back to default."""
    if not name:
        return DEFAULT_STYLES.name
    candidate = str(name).strip().lower()
    if candidate in _STYLES:
        return candidate
    return DEFAULT_STYLES.name


def resolve_styles(name: str | None, *, no_color: bool = False) -> Styles:
    """Return concrete style set for requested palette and colour mode."""
    if no_color:
        return PLAIN_STYLES
    return _STYLES[normalize_style_name(name)]


def default_styles() -> Styles:
    return DEFAULT_STYLES


__all__ = [
    "TextStyle",
    "Styles",
    "DEFAULT_STYLES",
    "OCEAN_STYLES",
    "PLAIN_STYLES",
    "available_style_names",
    "normalize_style_name",
    "resolve_styles",
    "default_styles",
]
