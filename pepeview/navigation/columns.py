"""Column normalization after vertical, edge and random cursor moves.

Each routine re-reads the line under the cursor, updates ``last_padding`` to
that line's indentation, and leaves ``cursor.column`` within
``[0, max_column(line)]``.
"""

from __future__ import annotations

from ..events import MOD_CONTROL
from ..state import ViewerSession

_PADDING_CHARS = " \t\n\x0c\r"


def leading_padding(line: str) -> int:
    """Count leading ASCII whitespace characters of ``line``."""
    return len(line) - len(line.lstrip(_PADDING_CHARS))


def max_column(line: str) -> int:
    """Last valid caret column on ``line`` (0 for an empty line)."""
    return max(0, len(line) - 1)


def adjust_column_vertical(session: ViewerSession, modifiers: int) -> None:
    """Realign the column after an up/down move.

    Without Control the column follows the indentation delta between the
    previous and the new line. Sticky end-of-line overrides both.
    """
    line = session.current_line()
    state = session.cursor_state
    cursor = session.cursor

    padding = leading_padding(line)
    if modifiers & MOD_CONTROL:
        new_column = cursor.column
    else:
        new_column = max(0, cursor.column + padding - state.last_padding)
    state.last_padding = padding

    last = max_column(line)
    if state.last_column:
        cursor.column = last
    else:
        cursor.column = min(last, new_column)


def adjust_column_start(session: ViewerSession) -> None:
    """Place the caret on the first non-blank character of the line."""
    line = session.current_line()
    padding = leading_padding(line)
    session.cursor_state.last_padding = padding
    session.cursor.column = min(padding, max_column(line))


def adjust_column_end(session: ViewerSession) -> None:
    """Place the caret on the last character and drop sticky end-of-line."""
    line = session.current_line()
    session.cursor_state.last_padding = leading_padding(line)
    session.cursor_state.last_column = False
    session.cursor.column = max_column(line)


def adjust_column_random(session: ViewerSession) -> None:
    """Clamp after a direct placement; landing on/after the end turns sticky on."""
    line = session.current_line()
    state = session.cursor_state
    state.last_padding = leading_padding(line)
    last = max_column(line)
    if session.cursor.column >= last:
        session.cursor.column = last
        state.last_column = True
