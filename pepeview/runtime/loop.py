"""Main interactive event loop for the viewer.

Each iteration refreshes the viewport size, paints the dirty region, resets
the render state, stops if quit was requested, then waits a bounded time for
one input event and hands it to the navigation engine.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from dataclasses import dataclass

from ..events import InputEvent
from ..input import read_event as _read_event
from ..navigation import apply_event, resize_viewport
from ..render import refresh_screen
from ..state import GUTTER_WIDTH, STATUS_BAR_ROWS, ViewerSession
from ..ui_theme import UITheme

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    poll_timeout_ms: int


def usable_viewport(term_columns: int, term_lines: int) -> tuple[int, int]:
    """Return ``(rows, columns)`` left for document text after status bar and gutter."""
    return max(0, term_lines - STATUS_BAR_ROWS), max(0, term_columns - GUTTER_WIDTH)


def run_main_loop(
    session: ViewerSession,
    terminal,
    stdin_fd: int,
    sink,
    theme: UITheme,
    timing: RuntimeLoopTiming,
    *,
    read_event: Callable[[int, int | None], InputEvent | None] = _read_event,
    terminal_size: Callable[..., object] = shutil.get_terminal_size,
) -> int:
    """Run the viewer until a quit event; returns the number of frames painted.

    ``read_event`` and ``terminal_size`` are injectable so the loop can be
    driven by scripted input in tests.
    """
    frames = 0
    with terminal.raw_mode():
        while True:
            term = terminal_size((80, 24))
            rows, columns = usable_viewport(term.columns, term.lines)
            resize_viewport(session, rows, columns)

            if refresh_screen(session, sink, theme):
                frames += 1
            session.render_state.reset()

            if not session.editor_state.running:
                break

            event = read_event(stdin_fd, timing.poll_timeout_ms)
            if event is not None:
                apply_event(session, event)
    logger.debug("event loop finished after %d frames", frames)
    return frames
