"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into ``InputEvent`` values.
Handles ESC-sequence timing, xterm modifier parameters, and SGR mouse events.
"""

from __future__ import annotations

import os
import select

from ..events import (
    KEY_DOWN,
    KEY_END,
    KEY_ESC,
    KEY_HOME,
    KEY_LEFT,
    KEY_PAGE_DOWN,
    KEY_PAGE_UP,
    KEY_RIGHT,
    KEY_UP,
    MOD_ALT,
    MOD_CONTROL,
    MOD_NONE,
    MOD_SHIFT,
    SCROLL_DOWN,
    SCROLL_UP,
    InputEvent,
    KeyEvent,
    MouseClick,
    MouseScroll,
)

ESC_SEQUENCE_TIMEOUT_MS = 25
MAX_SEQUENCE_BYTES = 64
_PENDING_BYTES: list[bytes] = []

_ARROW_FINALS = {
    "A": KEY_UP,
    "B": KEY_DOWN,
    "C": KEY_RIGHT,
    "D": KEY_LEFT,
    "H": KEY_HOME,
    "F": KEY_END,
}

_TILDE_CODES = {
    "1": KEY_HOME,
    "7": KEY_HOME,
    "4": KEY_END,
    "8": KEY_END,
    "5": KEY_PAGE_UP,
    "6": KEY_PAGE_DOWN,
}

# SGR mouse button-byte bits.
_MOUSE_SHIFT = 0b0000_0100
_MOUSE_ALT = 0b0000_1000
_MOUSE_CONTROL = 0b0001_0000
_MOUSE_MOTION = 0b0010_0000
_MOUSE_WHEEL = 0b0100_0000


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _xterm_modifiers(param: str) -> int:
    """Decode the xterm modifier parameter (``1 + shift|alt<<1|ctrl<<2``)."""
    try:
        value = int(param) - 1
    except ValueError:
        return MOD_NONE
    if value < 0:
        return MOD_NONE
    return value & (MOD_SHIFT | MOD_ALT | MOD_CONTROL)


def _mouse_modifiers(button: int) -> int:
    modifiers = MOD_NONE
    if button & _MOUSE_SHIFT:
        modifiers |= MOD_SHIFT
    if button & _MOUSE_ALT:
        modifiers |= MOD_ALT
    if button & _MOUSE_CONTROL:
        modifiers |= MOD_CONTROL
    return modifiers


def _decode_sgr_mouse(payload: str, final: str) -> InputEvent | None:
    """Decode ``<btn;col;row`` (1-based cells) into a mouse event."""
    try:
        btn_s, col_s, row_s = payload.split(";")
        button = int(btn_s)
        col = int(col_s) - 1
        row = int(row_s) - 1
    except ValueError:
        return None
    col = max(0, col)
    row = max(0, row)
    modifiers = _mouse_modifiers(button)
    if button & _MOUSE_WHEEL:
        if button & 0b11 == 0:
            return MouseScroll(direction=SCROLL_UP, modifiers=modifiers, row=row, column=col)
        if button & 0b11 == 1:
            return MouseScroll(direction=SCROLL_DOWN, modifiers=modifiers, row=row, column=col)
        return None
    if button & _MOUSE_MOTION:
        return None
    if button & 0b11 == 0 and final == "m":
        return MouseClick(row=row, column=col, modifiers=modifiers)
    return None


def _decode_csi(fd: int) -> InputEvent | None:
    """Read the rest of an ``ESC [`` sequence and decode it."""
    params: list[str] = []
    while True:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return KeyEvent(KEY_ESC)
        ch = part.decode("latin-1")
        if "\x40" <= ch <= "\x7e":
            final = ch
            break
        params.append(ch)
        if len(params) > MAX_SEQUENCE_BYTES:
            return None

    raw = "".join(params)
    if raw.startswith("<"):
        if final not in {"M", "m"}:
            return None
        return _decode_sgr_mouse(raw[1:], final)

    fields = raw.split(";") if raw else []
    if final in _ARROW_FINALS:
        modifiers = _xterm_modifiers(fields[1]) if len(fields) > 1 else MOD_NONE
        return KeyEvent(_ARROW_FINALS[final], modifiers)
    if final == "~" and fields:
        code = _TILDE_CODES.get(fields[0])
        if code is None:
            return None
        modifiers = _xterm_modifiers(fields[1]) if len(fields) > 1 else MOD_NONE
        return KeyEvent(code, modifiers)
    return None


def _read_utf8_tail(fd: int, lead: bytes) -> str:
    """Complete a multi-byte UTF-8 character whose first byte is ``lead``."""
    first = lead[0]
    if first >= 0xF0:
        extra = 3
    elif first >= 0xE0:
        extra = 2
    elif first >= 0xC0:
        extra = 1
    else:
        extra = 0
    data = lead
    for _ in range(extra):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        data += nxt
    return data.decode("utf-8", errors="replace")


def read_event(fd: int, timeout_ms: int | None = None) -> InputEvent | None:
    """Read and decode one input event.

    Returns ``None`` when ``timeout_ms`` elapses without input or when the
    bytes read do not form a recognized event.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return None

        ch = os.read(fd, 1)
        if not ch:
            return None

    if ch == b"\r" or ch == b"\n":
        return KeyEvent("ENTER")
    if ch == b"\t":
        return KeyEvent("TAB")
    if ch in {b"\x08", b"\x7f"}:
        return KeyEvent("BACKSPACE")
    if b"\x01" <= ch <= b"\x1a":
        return KeyEvent(chr(ch[0] + 0x60), MOD_CONTROL)

    if ch != b"\x1b":
        return KeyEvent(_read_utf8_tail(fd, ch))

    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return KeyEvent(KEY_ESC)
    # Meta-b / Meta-f are the readline word motions.
    if seq in {b"b", b"B"}:
        return KeyEvent(KEY_LEFT, MOD_CONTROL)
    if seq in {b"f", b"F"}:
        return KeyEvent(KEY_RIGHT, MOD_CONTROL)
    if seq == b"O":
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final is None:
            return KeyEvent(KEY_ESC)
        code = _ARROW_FINALS.get(final.decode("latin-1"))
        return KeyEvent(code) if code is not None else None
    if seq != b"[":
        _PENDING_BYTES.append(seq)
        return KeyEvent(KEY_ESC)
    return _decode_csi(fd)
