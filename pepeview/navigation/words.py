"""Word boundaries for Control+Left / Control+Right.

Words are runs of non-space characters; only ``" "`` separates them, which
keeps tabs and punctuation inside a word.
"""

from __future__ import annotations

from .columns import max_column


def next_word_column(line: str, column: int) -> int:
    """Return the column of the next word start, or the last column."""
    if not line:
        return 0
    last = max_column(line)
    col = min(max(0, column), last)
    if line[col] == " ":
        while col <= last and line[col] == " ":
            col += 1
    else:
        while col < last and line[col] != " ":
            col += 1
        while col < last and line[col] == " ":
            col += 1
    return min(col, last)


def previous_word_column(line: str, column: int) -> int:
    """Return the column of the word start before ``column``, or 0.

    From inside a word this is the start of that word; from a word start it
    is the start of the previous one.
    """
    col = min(max(0, column), len(line))
    while col > 0 and line[col - 1] == " ":
        col -= 1
    while col > 0 and line[col - 1] != " ":
        col -= 1
    return col
