"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into the key names used by
:mod:`optionpicker.keymap` (``"up"``, ``"enter"``, ``"ctrl+n"``, ``"j"``...).
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_CONTROL_NAMES = {
    b"\t": "tab",
    b"\r": "enter",
    b"\n": "enter",
    b"\x08": "backspace",
    b"\x7f": "backspace",
    b"\x00": "ctrl+@",
    b"\x1c": "ctrl+\\",
    b"\x1d": "ctrl+]",
    b"\x1e": "ctrl+^",
    b"\x1f": "ctrl+_",
}

_CSI_FINAL_NAMES = {
    b"A": "up",
    b"B": "down",
    b"C": "right",
    b"D": "left",
    b"H": "home",
    b"F": "end",
}

_CSI_TILDE_NAMES = {
    b"1": "home",
    b"3": "delete",
    b"4": "end",
    b"5": "pgup",
    b"6": "pgdown",
    b"7": "home",
    b"8": "end",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _utf8_length(lead: int) -> int:
    """Return total byte length of a UTF-8 sequence starting with ``lead``."""
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _decode_text(fd: int, ch: bytes) -> str:
    raw = ch
    for _ in range(_utf8_length(ch[0]) - 1):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        raw += nxt
    return raw.decode("utf-8", errors="replace")


def _decode_csi(fd: int) -> str:
    """Decode the remainder of an ``ESC [`` sequence."""
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "esc"
    if seq in _CSI_FINAL_NAMES:
        return _CSI_FINAL_NAMES[seq]
    if seq in _CSI_TILDE_NAMES:
        terminator = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if terminator == b"~":
            return _CSI_TILDE_NAMES[seq]
        if seq == b"1" and terminator == b";":
            # Modified arrows: ESC [ 1 ; <mod> <final>
            _modifier = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
            final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
            if final in _CSI_FINAL_NAMES:
                return _CSI_FINAL_NAMES[final]
        return "esc"
    return "esc"


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Return the next key name, or ``""`` on timeout or end of input."""
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    if ch in _CONTROL_NAMES:
        return _CONTROL_NAMES[ch]
    if ch[0] < 0x1B:
        return f"ctrl+{chr(ch[0] + 0x60)}"
    if ch != b"\x1b":
        return _decode_text(fd, ch)

    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "esc"
    if seq == b"[":
        return _decode_csi(fd)
    if seq == b"O":
        # SS3 arrows sent in application cursor mode.
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final in _CSI_FINAL_NAMES:
            return _CSI_FINAL_NAMES[final]
        return "esc"
    _PENDING_BYTES.append(seq)
    return "esc"
