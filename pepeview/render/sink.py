"""Draw sink that turns render commands into one ANSI write per frame."""

from __future__ import annotations

import os

RESET_SGR = "\033[0m"


class AnsiDrawSink:
    """Buffer cursor/clear/print commands and write them on ``flush``.

    Coordinates are 0-based ``(column, row)`` cells.
    """

    def __init__(self, stdout_fd: int) -> None:
        self.stdout_fd = stdout_fd
        self._out: list[str] = []

    def move_to(self, column: int, row: int) -> None:
        self._out.append(f"\033[{max(0, row) + 1};{max(0, column) + 1}H")

    def clear_line(self) -> None:
        self._out.append("\033[2K")

    def print_text(self, text: str, style: str = "") -> None:
        if not text:
            return
        if style:
            self._out.append(f"{style}{text}{RESET_SGR}")
        else:
            self._out.append(text)

    def hide_caret(self) -> None:
        self._out.append("\033[?25l")

    def show_caret(self) -> None:
        self._out.append("\033[?25h")

    def pending(self) -> str:
        return "".join(self._out)

    def flush(self) -> None:
        if not self._out:
            return
        payload = "".join(self._out)
        self._out.clear()
        os.write(self.stdout_fd, payload.encode("utf-8", errors="replace"))
