"""Runtime composition layer for pepeview.

Builds the session, terminal controller and draw sink, then starts the loop.
"""

from __future__ import annotations

import logging
import sys

from ..document import Document
from ..render import AnsiDrawSink
from ..state import ViewerSession
from ..ui_theme import resolve_theme
from .config import load_boundary_bell, load_poll_timeout_ms, load_theme_name
from .loop import RuntimeLoopTiming, run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def build_session(document: Document | None, terminal: TerminalController | None, bell: bool) -> ViewerSession:
    """Create the session, wiring the boundary notification to the bell when enabled."""
    notify = terminal.bell if (bell and terminal is not None) else None
    return ViewerSession.create(document, notify_boundary=notify)


def run_viewer(
    document: Document | None,
    theme_name: str | None = None,
    no_color: bool = False,
    bell: bool | None = None,
) -> None:
    """Run the interactive viewer on ``document`` (or the placeholder screen)."""
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)

    if theme_name is None:
        theme_name = load_theme_name()
    if bell is None:
        bell = load_boundary_bell()
    theme = resolve_theme(theme_name, no_color=no_color)
    timing = RuntimeLoopTiming(poll_timeout_ms=load_poll_timeout_ms())

    session = build_session(document, terminal, bell)
    logger.info(
        "starting viewer: path=%s lines=%d theme=%s bell=%s",
        document.path if document is not None else None,
        session.editor_state.doc_lines,
        theme.name,
        bell,
    )
    run_main_loop(session, terminal, stdin_fd, AnsiDrawSink(stdout_fd), theme, timing)
    logger.info("viewer stopped")
