"""Vertical cursor and scroll transitions.

All routines share one boundary convention: the caret is at the bottom of
the viewport when ``row == rows - 1``, and ``scroll_y`` always stays within
``[0, EditorState.max_scroll]``. Scrolling requests a full repaint; pure caret
motion records ``last_cursor`` only. A move refused at a document edge calls
``session.notify_boundary``.
"""

from __future__ import annotations

import logging

from ..state import ViewerSession
from .columns import max_column

logger = logging.getLogger(__name__)


def _hit_boundary(session: ViewerSession, what: str) -> None:
    logger.debug("boundary: %s at line %d", what, session.current_line_index)
    session.notify_boundary()


def _last_row_on_page(session: ViewerSession) -> int:
    """Row of the last document line visible at the current scroll offset."""
    editor = session.editor_state
    last_line = max(0, editor.doc_lines - 1)
    return max(0, min(editor.rows - 1, last_line - session.cursor_state.scroll_y))


def move_up(session: ViewerSession) -> None:
    cursor = session.cursor
    state = session.cursor_state
    if cursor.row == 0:
        if state.scroll_y > 0:
            state.scroll_y -= 1
            session.render_state.mark_all()
        else:
            _hit_boundary(session, "move_up")
        return
    session.render_state.remember_cursor(cursor)
    cursor.row -= 1


def move_down(session: ViewerSession) -> None:
    cursor = session.cursor
    state = session.cursor_state
    editor = session.editor_state
    if editor.rows <= 0 or editor.doc_lines == 0:
        return
    if cursor.row >= editor.rows - 1:
        if state.scroll_y < editor.max_scroll:
            state.scroll_y += 1
            session.render_state.mark_all()
        else:
            _hit_boundary(session, "move_down")
        return
    if state.scroll_y + cursor.row + 1 < editor.doc_lines:
        session.render_state.remember_cursor(cursor)
        cursor.row += 1
    else:
        _hit_boundary(session, "move_down")


def page_up(session: ViewerSession) -> None:
    """Scroll a full page up, snapping to the top edge when short of a page."""
    cursor = session.cursor
    state = session.cursor_state
    rows = session.editor_state.rows
    if rows <= 0:
        return
    if state.scroll_y >= rows:
        state.scroll_y -= rows
        session.render_state.mark_all()
        return
    if state.scroll_y == 0 and cursor.row == 0:
        _hit_boundary(session, "page_up")
        return
    if state.scroll_y != 0:
        session.render_state.mark_all()
    else:
        session.render_state.remember_cursor(cursor)
    state.scroll_y = 0
    cursor.row = 0


def page_down(session: ViewerSession) -> None:
    """Scroll a full page down, snapping to the last line when short of a page."""
    cursor = session.cursor
    state = session.cursor_state
    editor = session.editor_state
    if editor.rows <= 0:
        return
    if state.scroll_y + editor.rows <= editor.max_scroll:
        state.scroll_y += editor.rows
        session.render_state.mark_all()
        return

    new_scroll = editor.max_scroll
    new_row = max(0, min(editor.rows - 1, editor.doc_lines - 1 - new_scroll))
    if new_scroll == state.scroll_y and new_row == cursor.row:
        _hit_boundary(session, "page_down")
        return
    if new_scroll != state.scroll_y:
        session.render_state.mark_all()
    else:
        session.render_state.remember_cursor(cursor)
    state.scroll_y = new_scroll
    cursor.row = new_row


def scroll_up(session: ViewerSession) -> None:
    """Wheel up one line, keeping the caret on the same document line if possible."""
    cursor = session.cursor
    state = session.cursor_state
    rows = session.editor_state.rows
    if rows <= 0:
        return
    if state.scroll_y == 0:
        _hit_boundary(session, "scroll_up")
        return
    state.scroll_y -= 1
    session.render_state.mark_all()
    if cursor.row < rows - 1:
        cursor.row += 1


def scroll_down(session: ViewerSession) -> None:
    """Wheel down one line, keeping the caret on the same document line if possible."""
    cursor = session.cursor
    state = session.cursor_state
    editor = session.editor_state
    if editor.rows <= 0:
        return
    if state.scroll_y >= editor.max_scroll:
        _hit_boundary(session, "scroll_down")
        return
    state.scroll_y += 1
    session.render_state.mark_all()
    if cursor.row > 0:
        cursor.row -= 1


def resize_viewport(session: ViewerSession, rows: int, columns: int) -> bool:
    """Apply a new usable viewport size and re-clamp cursor/scroll state.

    Returns ``True`` when the size changed; a change requests a full repaint.
    """
    editor = session.editor_state
    rows = max(0, rows)
    columns = max(0, columns)
    if rows == editor.rows and columns == editor.columns:
        return False

    logger.debug("viewport %dx%d -> %dx%d", editor.columns, editor.rows, columns, rows)
    editor.rows = rows
    editor.columns = columns
    state = session.cursor_state
    cursor = session.cursor
    line_index = state.scroll_y + cursor.row
    state.scroll_y = min(state.scroll_y, editor.max_scroll)
    if rows > 0:
        # Keep the caret's document line on screen when the viewport shrinks.
        if line_index - state.scroll_y > rows - 1:
            state.scroll_y = min(editor.max_scroll, line_index - rows + 1)
        cursor.row = max(0, min(line_index - state.scroll_y, _last_row_on_page(session)))
    else:
        cursor.row = 0
    if session.document is not None:
        cursor.column = min(cursor.column, max_column(session.current_line()))
    else:
        cursor.column = 0

    session.render_state.mark_all()
    session.render_state.modif_status = True
    session.render_state.last_cursor = None
    return True
