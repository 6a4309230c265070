"""Read-only document model.

Loads a file once, splits it into physical lines with ``\\n`` and ``\\r\\n``
terminators removed, and keeps the result immutable for the session.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Document:
    """Ordered document lines plus the path they were loaded from."""

    path: Path | None
    lines: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.lines)

    def line(self, index: int) -> str:
        """Return line ``index``, or an empty string when it does not exist."""
        if 0 <= index < len(self.lines):
            return self.lines[index]
        return ""


def decode_text(raw: bytes) -> str:
    """Decode file bytes using tolerant encoding fallback order.

    Attempts UTF-8, UTF-8 with BOM, then latin-1; as a final fallback decodes
    with UTF-8 replacement semantics.
    """
    if raw.startswith(b"\xef\xbb\xbf"):
        encodings = ("utf-8-sig", "utf-8", "latin-1")
    else:
        encodings = ("utf-8", "utf-8-sig", "latin-1")
    for encoding in encodings:
        try:
            return raw.decode(encoding)
        except UnicodeDecodeError:
            continue
    return raw.decode("utf-8", errors="replace")


def split_lines(text: str) -> tuple[str, ...]:
    """Split ``text`` on ``\\n`` / ``\\r\\n`` without keeping terminators.

    A lone ``\\r`` is ordinary content. A trailing segment with no terminator
    becomes the last line when it is non-empty.
    """
    if not text:
        return ()
    parts = text.split("\n")
    lines: list[str] = []
    last = len(parts) - 1
    for idx, part in enumerate(parts):
        if idx == last:
            if part:
                lines.append(part)
            break
        if part.endswith("\r"):
            part = part[:-1]
        lines.append(part)
    return tuple(lines)


def load_document(path: Path) -> Document:
    """Read ``path`` into a ``Document``.

    ``OSError`` from the read propagates to the caller; startup treats it as
    fatal.
    """
    raw = path.read_bytes()
    lines = split_lines(decode_text(raw))
    logger.debug("loaded %s: %d bytes, %d lines", path, len(raw), len(lines))
    return Document(path=path, lines=lines)
