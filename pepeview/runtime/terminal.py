"""Terminal control helpers for the viewer session.

Owns raw-mode lifecycle, alternate-screen switching, mouse toggles, and the
audible bell used as the boundary notification.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

_MOUSE_ON = b"\x1b[?1000h\x1b[?1006h"
_MOUSE_OFF = b"\x1b[?1000l\x1b[?1006l"


class TerminalController:
    """Manage terminal mode transitions for the interactive viewer."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Remember the current tty attributes so ``disable_tui_mode`` can restore them."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._mouse_reporting_enabled = False

    def enable_tui_mode(self) -> None:
        """Switch to raw input on a cleared alternate screen and start SGR mouse reports."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        # Alternate screen, clear it, then SGR mouse reporting.
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[2J" + _MOUSE_ON)
        self._mouse_reporting_enabled = True

    def disable_tui_mode(self) -> None:
        """Restore normal terminal state and disable mouse reporting."""
        # Show the caret again before leaving the alternate screen.
        os.write(self.stdout_fd, _MOUSE_OFF + b"\x1b[?25h\x1b[?1049l")
        self._mouse_reporting_enabled = False
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def set_mouse_reporting(self, enabled: bool) -> None:
        """Turn SGR mouse reports on or off; a repeated request writes nothing."""
        desired = bool(enabled)
        if desired == self._mouse_reporting_enabled:
            return
        os.write(self.stdout_fd, _MOUSE_ON if desired else _MOUSE_OFF)
        self._mouse_reporting_enabled = desired

    def bell(self) -> None:
        """Ring the terminal bell."""
        os.write(self.stdout_fd, b"\x07")

    @contextlib.contextmanager
    def raw_mode(self):
        """Run the body in TUI mode, restoring the terminal even when it raises."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
