"""Mutable session state threaded through navigation and rendering.

Everything here is owned by the event loop. Navigation mutates cursor and
scroll state and records what must be repainted; the renderer consumes the
``RenderState`` and the loop resets it after each frame.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from .document import Document

STATUS_BAR_ROWS = 1
GUTTER_WIDTH = 4


@dataclass
class Cursor:
    """Caret position: ``row`` is viewport-relative, ``column`` is absolute."""

    column: int = 0
    row: int = 0

    def copy(self) -> Cursor:
        return Cursor(column=self.column, row=self.row)


@dataclass
class CursorState:
    scroll_y: int = 0
    # Vertical moves keep snapping to end-of-line while set.
    last_column: bool = False
    last_padding: int = 0


@dataclass
class EditorState:
    rows: int = 0
    columns: int = 0
    doc_lines: int = 0
    running: bool = True

    @property
    def max_scroll(self) -> int:
        """Largest valid ``scroll_y`` for the current document and viewport."""
        return max(0, self.doc_lines - max(0, self.rows))


@dataclass
class RenderState:
    """Dirty-region descriptor for the next frame.

    At most one of ``modif_all`` / ``modif_row`` is set; ``mark_all`` and
    ``mark_row`` maintain that.
    """

    modif_all: bool = False
    modif_row: int | None = None
    modif_status: bool = False
    last_cursor: Cursor | None = None

    def mark_all(self) -> None:
        self.modif_all = True
        self.modif_row = None

    def mark_row(self, row: int) -> None:
        if self.modif_all:
            return
        if self.modif_row is not None and self.modif_row != row:
            self.mark_all()
            return
        self.modif_row = row

    def remember_cursor(self, cursor: Cursor) -> None:
        """Record the caret position before a caret-only move.

        The first position recorded in a frame wins so the renderer erases
        from where the caret was actually drawn.
        """
        if self.last_cursor is None:
            self.last_cursor = cursor.copy()

    def is_dirty(self) -> bool:
        return bool(
            self.modif_all
            or self.modif_row is not None
            or self.modif_status
            or self.last_cursor is not None
        )

    def reset(self) -> None:
        self.modif_all = False
        self.modif_row = None
        self.modif_status = False
        self.last_cursor = None


def _no_boundary_notify() -> None:
    return None


@dataclass
class ViewerSession:
    """Session context passed by reference into every navigation call."""

    document: Document | None
    cursor: Cursor = field(default_factory=Cursor)
    cursor_state: CursorState = field(default_factory=CursorState)
    editor_state: EditorState = field(default_factory=EditorState)
    render_state: RenderState = field(default_factory=RenderState)
    notify_boundary: Callable[[], None] = _no_boundary_notify

    @classmethod
    def create(
        cls,
        document: Document | None,
        notify_boundary: Callable[[], None] | None = None,
    ) -> ViewerSession:
        """Build a fresh session whose first frame paints everything."""
        session = cls(document=document)
        if notify_boundary is not None:
            session.notify_boundary = notify_boundary
        session.editor_state.doc_lines = len(document) if document is not None else 0
        session.render_state.mark_all()
        session.render_state.modif_status = True
        return session

    @property
    def current_line_index(self) -> int:
        return self.cursor_state.scroll_y + self.cursor.row

    def current_line(self) -> str:
        if self.document is None:
            return ""
        return self.document.line(self.current_line_index)
