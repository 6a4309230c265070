"""Input event variants consumed by the navigation engine.

``InputEvent`` is one of ``KeyEvent``, ``MouseScroll`` or ``MouseClick``.
Key codes follow the normalized token names used by the input decoder
(``"UP"``, ``"LEFT"``, ``"PAGE_DOWN"``...) or a single printable character.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

MOD_NONE = 0
MOD_SHIFT = 1
MOD_ALT = 2
MOD_CONTROL = 4

KEY_UP = "UP"
KEY_DOWN = "DOWN"
KEY_LEFT = "LEFT"
KEY_RIGHT = "RIGHT"
KEY_HOME = "HOME"
KEY_END = "END"
KEY_PAGE_UP = "PAGE_UP"
KEY_PAGE_DOWN = "PAGE_DOWN"
KEY_ESC = "ESC"

QUIT_KEY = "q"

SCROLL_UP = "up"
SCROLL_DOWN = "down"


@dataclass(frozen=True)
class KeyEvent:
    code: str
    modifiers: int = MOD_NONE

    def has(self, modifier: int) -> bool:
        return bool(self.modifiers & modifier)


@dataclass(frozen=True)
class MouseScroll:
    """Wheel notch; ``row``/``column`` are 0-based terminal cells."""

    direction: str
    modifiers: int = MOD_NONE
    row: int = 0
    column: int = 0

    def has(self, modifier: int) -> bool:
        return bool(self.modifiers & modifier)


@dataclass(frozen=True)
class MouseClick:
    """Left-button release at 0-based terminal cell ``(row, column)``."""

    row: int
    column: int
    modifiers: int = MOD_NONE


InputEvent = Union[KeyEvent, MouseScroll, MouseClick]


def is_quit_event(event: InputEvent) -> bool:
    """Return whether ``event`` is the quit key (``q`` or Ctrl+C)."""
    if not isinstance(event, KeyEvent):
        return False
    if event.code == QUIT_KEY and not event.has(MOD_CONTROL):
        return True
    return event.code == "c" and event.has(MOD_CONTROL)
