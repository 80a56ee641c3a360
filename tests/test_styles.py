from __future__ import annotations

import unittest

from optionpicker.ansi import clip_ansi_line, display_width, strip_ansi
from optionpicker.styles import (
    DEFAULT_STYLES,
    OCEAN_STYLES,
    PLAIN_STYLES,
    TextStyle,
    available_style_names,
    normalize_style_name,
    resolve_styles,
)


class StyleResolutionTests(unittest.TestCase):
    def test_available_names_exclude_plain(self) -> None:
        self.assertEqual(available_style_names(), ("default", "ocean"))

    def test_unknown_or_blank_names_fall_back_to_default(self) -> None:
        self.assertEqual(normalize_style_name(None), "default")
        self.assertEqual(normalize_style_name("  "), "default")
        self.assertEqual(normalize_style_name("nope"), "default")
        self.assertEqual(normalize_style_name(" OCEAN "), "ocean")

    def test_no_color_always_resolves_plain(self) -> None:
        self.assertIs(resolve_styles("ocean", no_color=True), PLAIN_STYLES)
        self.assertIs(resolve_styles("ocean"), OCEAN_STYLES)
        self.assertIs(resolve_styles(None), DEFAULT_STYLES)


class TextStyleTests(unittest.TestCase):
    def test_plain_style_adds_only_padding(self) -> None:
        self.assertEqual(TextStyle(padding_left=2).render("x"), "  x")

    def test_colored_style_resets_after_text(self) -> None:
        self.assertEqual(TextStyle(sgr="\033[1m").render("x"), "\033[1mx\033[0m")

    def test_string_renders_preset_text(self) -> None:
        style = TextStyle(padding_left=1, text="empty")

        self.assertEqual(style.string(), " empty")


class AnsiTests(unittest.TestCase):
    def test_display_width_ignores_escapes_and_counts_wide_chars(self) -> None:
        self.assertEqual(display_width("\033[1mab\033[0m"), 2)
        self.assertEqual(display_width("日本"), 4)
        self.assertEqual(display_width("é"), 1)

    def test_clip_keeps_escapes_and_drops_overflow(self) -> None:
        clipped = clip_ansi_line("\033[1mabcdef\033[0m", 3)

        self.assertEqual(clipped, "\033[1mabc\033[0m")
        self.assertEqual(strip_ansi(clipped), "abc")

    def test_clip_never_splits_wide_character(self) -> None:
        self.assertEqual(clip_ansi_line("a日b", 2), "a")
        self.assertEqual(clip_ansi_line("abc", 0), "")


if __name__ == "__main__":
    unittest.main()
