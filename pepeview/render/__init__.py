"""Incremental renderer for the viewport, status bar and caret.

Reads the session's ``RenderState`` and repaints only the dirty region:
status bar, all rows, a single row, or just the caret. It never touches the
terminal directly; every command goes through a draw sink (see
``AnsiDrawSink``). Resetting ``RenderState`` is left to the caller.
"""

from __future__ import annotations

import re

from ..document import Document
from ..state import GUTTER_WIDTH, ViewerSession
from ..ui_theme import UITheme
from .sink import AnsiDrawSink

APP_TITLE = "pepeview -- read-only text viewer"
FILLER_TEXT = "~"
BLANK_STATUS = "[blank]"

_CONTROL_RE = re.compile(r"[\x00-\x08\x0a-\x1f\x7f-\x9f]")


def display_text(line: str, max_cols: int) -> str:
    """Return ``line`` made safe for the terminal and clipped to ``max_cols``.

    Replacements are one-for-one so caret columns keep matching string
    offsets: tabs become a space, other control characters become ``?``.
    """
    if max_cols <= 0 or not line:
        return ""
    clipped = line[:max_cols].replace("\t", " ")
    return _CONTROL_RE.sub("?", clipped)


def gutter_label(line_index: int) -> str:
    """Format the 1-based line number for the fixed-width gutter."""
    number = line_index + 1
    width = GUTTER_WIDTH - 1
    if number >= 10**width:
        return f"{number % 10**width:0{width}d} "
    return f"{number:>{width}} "


def build_status_line(left_text: str, width: int, right_text: str = "") -> str:
    usable = max(1, width - 1)
    if usable <= len(right_text):
        return right_text[-usable:]
    left_limit = max(0, usable - len(right_text) - 1) if right_text else usable
    left = left_text[:left_limit]
    gap = " " * (usable - len(left) - len(right_text))
    return f"{left}{gap}{right_text}"


def status_text(session: ViewerSession, width: int) -> str:
    """Compose the status bar: path on the left, position and percent on the right."""
    document = session.document
    if document is None:
        return build_status_line(BLANK_STATUS, width)
    line_index = session.current_line_index
    total = len(document)
    percent = 0 if total == 0 else min(100, (line_index + 1) * 100 // total)
    left = str(document.path) if document.path is not None else ""
    right = f"{line_index + 1}:{session.cursor.column + 1}  {percent:3d}%"
    return build_status_line(left, width, right)


def _paint_document_row(
    sink,
    theme: UITheme,
    document: Document,
    line_index: int,
    row: int,
    columns: int,
) -> None:
    sink.move_to(0, row)
    sink.clear_line()
    if line_index < len(document):
        sink.print_text(gutter_label(line_index), theme.gutter)
        sink.print_text(display_text(document.lines[line_index], columns))
    else:
        sink.print_text(FILLER_TEXT, theme.filler)


def _paint_placeholder(sink, theme: UITheme, rows: int, width: int) -> None:
    title_row = rows // 3
    title = APP_TITLE[: max(0, width - 2)]
    for row in range(rows):
        sink.move_to(0, row)
        sink.clear_line()
        sink.print_text(FILLER_TEXT, theme.filler)
        if row == title_row and title:
            sink.move_to(max(2, (width - len(title)) // 2), row)
            sink.print_text(title, theme.title)


def _place_caret(sink, session: ViewerSession, width: int) -> None:
    cursor = session.cursor
    sink.move_to(min(cursor.column + GUTTER_WIDTH, max(0, width - 1)), cursor.row)
    sink.show_caret()


def refresh_screen(session: ViewerSession, sink, theme: UITheme) -> bool:
    """Paint whatever ``session.render_state`` marks dirty and flush the sink.

    Order: status bar, then either all rows or one row, then the caret. Pure
    caret moves (``last_cursor`` without ``modif_all``) only reposition the
    caret. Returns ``True`` when anything was sent.
    """
    editor = session.editor_state
    render = session.render_state
    rows = editor.rows
    columns = editor.columns
    if rows <= 0 or columns <= 0:
        return False

    width = columns + GUTTER_WIDTH
    painted = False

    if render.modif_status:
        sink.hide_caret()
        sink.move_to(0, rows)
        sink.print_text(status_text(session, width), theme.status_bar)
        painted = True

    if render.modif_all:
        sink.hide_caret()
        if session.document is None:
            _paint_placeholder(sink, theme, rows, width)
        else:
            scroll_y = session.cursor_state.scroll_y
            for row in range(rows):
                _paint_document_row(sink, theme, session.document, scroll_y + row, row, columns)
        painted = True
    elif render.modif_row is not None and 0 <= render.modif_row < rows:
        sink.hide_caret()
        if session.document is None:
            sink.move_to(0, render.modif_row)
            sink.clear_line()
            sink.print_text(FILLER_TEXT, theme.filler)
        else:
            line_index = session.cursor_state.scroll_y + render.modif_row
            _paint_document_row(sink, theme, session.document, line_index, render.modif_row, columns)
        painted = True

    if painted:
        _place_caret(sink, session, width)
    elif render.last_cursor is not None:
        sink.hide_caret()
        _place_caret(sink, session, width)
        painted = True

    sink.flush()
    return painted


__all__ = [
    "APP_TITLE",
    "AnsiDrawSink",
    "build_status_line",
    "display_text",
    "gutter_label",
    "refresh_screen",
    "status_text",
]
