"""Event dispatch for the navigation engine.

``apply_event`` is the single entry point: it takes one decoded input event
and the session context, applies the matching cursor/scroll transition and
column adjustment, and requests the cheapest sufficient repaint.
"""

from __future__ import annotations

import logging

from ..events import (
    KEY_DOWN,
    KEY_END,
    KEY_HOME,
    KEY_LEFT,
    KEY_PAGE_DOWN,
    KEY_PAGE_UP,
    KEY_RIGHT,
    KEY_UP,
    MOD_CONTROL,
    MOD_SHIFT,
    SCROLL_DOWN,
    SCROLL_UP,
    InputEvent,
    KeyEvent,
    MouseClick,
    MouseScroll,
    is_quit_event,
)
from ..state import GUTTER_WIDTH, ViewerSession
from .columns import (
    adjust_column_end,
    adjust_column_random,
    adjust_column_start,
    adjust_column_vertical,
    max_column,
)
from .viewport import move_down, move_up, page_down, page_up, scroll_down, scroll_up
from .words import next_word_column, previous_word_column

logger = logging.getLogger(__name__)


def _finish_vertical(session: ViewerSession, modifiers: int) -> None:
    if session.document is not None:
        adjust_column_vertical(session, modifiers)
    else:
        session.cursor.row = 0


def _vertical(session: ViewerSession, upward: bool, page: bool, modifiers: int) -> None:
    if upward:
        move = page_up if page else move_up
    else:
        move = page_down if page else move_down
    move(session)
    _finish_vertical(session, modifiers)


def _wheel(session: ViewerSession, event: MouseScroll) -> None:
    page = event.has(MOD_SHIFT)
    if event.direction == SCROLL_UP:
        move = page_up if page else scroll_up
    elif event.direction == SCROLL_DOWN:
        move = page_down if page else scroll_down
    else:
        return
    move(session)
    _finish_vertical(session, event.modifiers)


def _on_last_document_line(session: ViewerSession) -> bool:
    return session.current_line_index >= session.editor_state.doc_lines - 1


def move_right(session: ViewerSession, modifiers: int) -> None:
    """Plain Right steps one column; Control+Right jumps to the next word.

    At the last column Control+Right continues at the first non-blank
    character of the next line.
    """
    if session.document is None:
        return
    cursor = session.cursor
    state = session.cursor_state
    line = session.current_line()
    last = max_column(line)

    if modifiers & MOD_CONTROL:
        if cursor.column >= last:
            if _on_last_document_line(session):
                session.notify_boundary()
                return
            session.render_state.remember_cursor(cursor)
            move_down(session)
            adjust_column_start(session)
            state.last_column = False
            return
        session.render_state.remember_cursor(cursor)
        cursor.column = next_word_column(line, cursor.column)
    else:
        if cursor.column >= last:
            cursor.column = last
            state.last_column = True
            session.notify_boundary()
            return
        session.render_state.remember_cursor(cursor)
        cursor.column = min(last, cursor.column + 1)

    if cursor.column == last:
        state.last_column = True


def move_left(session: ViewerSession, modifiers: int) -> None:
    """Plain Left steps one column; Control+Left jumps to the previous word.

    At column 0 Control+Left continues at the last character of the previous
    line. Any Left cancels sticky end-of-line.
    """
    state = session.cursor_state
    state.last_column = False
    if session.document is None:
        return
    cursor = session.cursor

    if cursor.column == 0:
        if not modifiers & MOD_CONTROL or session.current_line_index == 0:
            session.notify_boundary()
            return
        session.render_state.remember_cursor(cursor)
        move_up(session)
        adjust_column_end(session)
        return

    session.render_state.remember_cursor(cursor)
    if modifiers & MOD_CONTROL:
        cursor.column = previous_word_column(session.current_line(), cursor.column)
    else:
        cursor.column = max(0, cursor.column - 1)


def move_home(session: ViewerSession) -> None:
    if session.document is None:
        return
    session.render_state.remember_cursor(session.cursor)
    adjust_column_start(session)
    session.cursor_state.last_column = False


def move_end(session: ViewerSession) -> None:
    if session.document is None:
        return
    session.render_state.remember_cursor(session.cursor)
    adjust_column_end(session)
    session.cursor_state.last_column = True


def click_to_document(session: ViewerSession, row: int, column: int) -> tuple[int, int]:
    """Translate a terminal cell into ``(row, column)`` cursor coordinates.

    The row is clamped to the viewport and to the last document line; the
    column drops the gutter and is clamped to the usable width.
    """
    editor = session.editor_state
    last_row = max(0, editor.doc_lines - session.cursor_state.scroll_y - 1)
    doc_row = max(0, min(row, editor.rows - 1, last_row))
    doc_col = max(0, min(column - GUTTER_WIDTH, editor.columns))
    return doc_row, doc_col


def place_cursor(session: ViewerSession, row: int, column: int) -> None:
    """Move the caret to a clicked terminal cell."""
    if session.editor_state.rows <= 0:
        return
    cursor = session.cursor
    session.render_state.remember_cursor(cursor)
    if session.document is None:
        cursor.row = 0
        cursor.column = 0
        return
    cursor.row, cursor.column = click_to_document(session, row, column)
    adjust_column_random(session)


def _apply_key(session: ViewerSession, event: KeyEvent) -> None:
    code = event.code
    modifiers = event.modifiers
    if code == KEY_UP:
        _vertical(session, upward=True, page=event.has(MOD_SHIFT), modifiers=modifiers)
    elif code == KEY_DOWN:
        _vertical(session, upward=False, page=event.has(MOD_SHIFT), modifiers=modifiers)
    elif code == KEY_PAGE_UP:
        _vertical(session, upward=True, page=True, modifiers=modifiers)
    elif code == KEY_PAGE_DOWN:
        _vertical(session, upward=False, page=True, modifiers=modifiers)
    elif code == KEY_RIGHT:
        move_right(session, modifiers)
    elif code == KEY_LEFT:
        move_left(session, modifiers)
    elif code == KEY_HOME:
        move_home(session)
    elif code == KEY_END:
        move_end(session)


def apply_event(session: ViewerSession, event: InputEvent | None) -> None:
    """Apply one input event to the session.

    Unrecognized events are ignored. The status bar is marked dirty whenever
    the caret position or scroll offset changed.
    """
    if event is None:
        return
    if is_quit_event(event):
        logger.debug("quit requested")
        session.editor_state.running = False
        return

    before = (session.cursor_state.scroll_y, session.cursor.row, session.cursor.column)
    if isinstance(event, KeyEvent):
        _apply_key(session, event)
    elif isinstance(event, MouseScroll):
        _wheel(session, event)
    elif isinstance(event, MouseClick):
        place_cursor(session, event.row, event.column)
    else:
        return

    render = session.render_state
    after = (session.cursor_state.scroll_y, session.cursor.row, session.cursor.column)
    if after != before:
        render.modif_status = True
    elif render.last_cursor is not None and not render.modif_all:
        if (render.last_cursor.row, render.last_cursor.column) == (session.cursor.row, session.cursor.column):
            render.last_cursor = None


__all__ = [
    "apply_event",
    "click_to_document",
    "move_end",
    "move_home",
    "move_left",
    "move_right",
    "place_cursor",
]
