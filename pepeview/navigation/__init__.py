"""Navigation engine: cursor, scroll and column state transitions.

``apply_event`` is the entry point used by the runtime loop; the individual
transitions are exported for composition and tests.
"""

from .columns import (
    adjust_column_end,
    adjust_column_random,
    adjust_column_start,
    adjust_column_vertical,
    leading_padding,
    max_column,
)
from .engine import (
    apply_event,
    click_to_document,
    move_end,
    move_home,
    move_left,
    move_right,
    place_cursor,
)
from .viewport import (
    move_down,
    move_up,
    page_down,
    page_up,
    resize_viewport,
    scroll_down,
    scroll_up,
)
from .words import next_word_column, previous_word_column

__all__ = [
    "adjust_column_end",
    "adjust_column_random",
    "adjust_column_start",
    "adjust_column_vertical",
    "apply_event",
    "click_to_document",
    "leading_padding",
    "max_column",
    "move_down",
    "move_end",
    "move_home",
    "move_left",
    "move_right",
    "move_up",
    "next_word_column",
    "page_down",
    "page_up",
    "place_cursor",
    "previous_word_column",
    "resize_viewport",
    "scroll_down",
    "scroll_up",
]
