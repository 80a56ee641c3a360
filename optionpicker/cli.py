"""Command-line front door for optionpicker.

Collects options from arguments or stdin, applies saved preferences, and runs
the interactive picker on the controlling terminal. The chosen option is
printed to stdout so the command composes with shell pipelines.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import replace
from pathlib import Path

from .config import apply_settings, load_picker_settings, save_theme
from .runtime import FrameLayout, build_browser, run_picker
from .styles import available_style_names
from .terminal import TerminalController
from .widget import OptionPicker

TTY_PATH = "/dev/tty"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_LOG_HANDLER: logging.Handler | None = None


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="optionpicker",
        description="Pick one option from a scrollable list in the terminal.",
    )
    parser.add_argument("options", nargs="*", help="options to choose from (default: lines read from stdin)")
    parser.add_argument("--title", default="", help="heading shown above the list")
    parser.add_argument("--height", type=_positive_int, help="fixed number of visible rows")
    parser.add_argument("--cursor", help="glyph drawn next to the selected option")
    parser.add_argument("--theme", choices=available_style_names(), help="colour palette")
    parser.add_argument("--save-theme", action="store_true", help="remember --theme for later runs")
    parser.add_argument("--no-color", action="store_true", help="disable ANSI colours")
    parser.add_argument(
        "--separator",
        default="/",
        help="split options on this string and browse them as nested groups ('' disables)",
    )
    parser.add_argument("--log-file", type=Path, help="write debug logs to this file")
    return parser


def configure_logging(log_file: Path | None) -> None:
    """Send logs to ``log_file``; without one logging stays silent.

    Calling again replaces the handler installed by the previous call.
    """
    global _LOG_HANDLER

    root = logging.getLogger("optionpicker")
    if _LOG_HANDLER is not None:
        root.removeHandler(_LOG_HANDLER)
        _LOG_HANDLER.close()
        _LOG_HANDLER = None

    if log_file is None:
        handler: logging.Handler = logging.NullHandler()
        root.setLevel(logging.NOTSET)
    else:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, mode="a", encoding="utf-8", delay=True)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.setLevel(logging.DEBUG)
    root.addHandler(handler)
    _LOG_HANDLER = handler


def read_options(args: argparse.Namespace, stdin) -> list[str]:
    """Return options from positional args, else from non-blank stdin lines."""
    if args.options:
        return list(args.options)
    if stdin.isatty():
        return []
    return [line.rstrip("\r\n") for line in stdin if line.strip()]


def build_picker(args: argparse.Namespace) -> OptionPicker:
    """Create a picker from saved settings overridden by command-line flags."""
    settings = load_picker_settings()
    if args.theme:
        settings = replace(settings, theme=args.theme)
    if args.cursor:
        settings = replace(settings, cursor=args.cursor)
    if args.height is not None:
        settings = replace(settings, height=args.height)
    return apply_settings(OptionPicker(), settings, no_color=args.no_color)


def _open_tty() -> int:
    """Open the controlling terminal so stdin and stdout stay free for piping."""
    return os.open(TTY_PATH, os.O_RDWR)


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, run the picker, and print the chosen option.

    Returns ``0`` when an option was chosen and ``1`` when cancelled.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_file)
    if args.save_theme:
        if not args.theme:
            parser.error("--save-theme requires --theme")
        save_theme(args.theme)

    options = read_options(args, sys.stdin)
    picker = build_picker(args)
    browser = build_browser(picker, options, args.separator)

    try:
        tty_fd = _open_tty()
    except OSError as exc:
        parser.exit(2, f"optionpicker: cannot open {TTY_PATH}: {exc.strerror}\n")
    try:
        terminal = TerminalController(stdin_fd=tty_fd, stdout_fd=tty_fd)
        chosen = run_picker(browser, terminal, tty_fd, layout=FrameLayout(title=args.title))
    finally:
        os.close(tty_fd)

    if chosen is None:
        return 1
    sys.stdout.write(chosen + "\n")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
