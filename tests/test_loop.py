"""Runtime loop tests driven by scripted input and terminal sizes."""

from __future__ import annotations

import contextlib
import os
import unittest
from pathlib import Path
from unittest import mock

from pepeview.document import Document
from pepeview.events import KEY_DOWN, KeyEvent
from pepeview.runtime.app import build_session
from pepeview.runtime.loop import RuntimeLoopTiming, run_main_loop, usable_viewport
from pepeview.state import ViewerSession
from pepeview.ui_theme import DEFAULT_THEME


class _FakeTerminal:
    def __init__(self) -> None:
        self.entered = 0
        self.exited = 0
        self.bells = 0

    @contextlib.contextmanager
    def raw_mode(self):
        self.entered += 1
        try:
            yield
        finally:
            self.exited += 1

    def bell(self) -> None:
        self.bells += 1


def _scripted(events: list):
    remaining = list(events)
    calls: list[tuple[int, int | None]] = []

    def read_event(fd: int, timeout_ms: int | None = None):
        calls.append((fd, timeout_ms))
        return remaining.pop(0)

    return read_event, calls


def _document(count: int) -> Document:
    return Document(path=Path("/tmp/doc.txt"), lines=tuple(f"line {idx}" for idx in range(count)))


class RuntimeLoopTests(unittest.TestCase):
    def test_usable_viewport_reserves_status_row_and_gutter(self) -> None:
        self.assertEqual(usable_viewport(80, 24), (23, 76))
        self.assertEqual(usable_viewport(3, 0), (0, 0))

    def test_loop_paints_only_dirty_frames_until_quit(self) -> None:
        session = ViewerSession.create(_document(10))
        terminal = _FakeTerminal()
        read_event, calls = _scripted([KeyEvent(KEY_DOWN), KeyEvent(KEY_DOWN), None, KeyEvent("q")])

        frames = run_main_loop(
            session,
            terminal,
            9,
            mock.Mock(),
            DEFAULT_THEME,
            RuntimeLoopTiming(poll_timeout_ms=40),
            read_event=read_event,
            terminal_size=lambda fallback: os.terminal_size((44, 6)),
        )

        self.assertEqual(frames, 3)
        self.assertEqual(calls, [(9, 40)] * 4)
        self.assertEqual(session.cursor.row, 2)
        self.assertFalse(session.editor_state.running)
        self.assertEqual((session.editor_state.rows, session.editor_state.columns), (5, 40))
        self.assertEqual((terminal.entered, terminal.exited), (1, 1))

    def test_terminal_resize_triggers_a_full_frame(self) -> None:
        session = ViewerSession.create(_document(10))
        sizes = [os.terminal_size((44, 6)), os.terminal_size((30, 4)), os.terminal_size((30, 4))]
        read_event, _ = _scripted([None, KeyEvent("q")])
        sink = mock.Mock()

        frames = run_main_loop(
            session,
            _FakeTerminal(),
            0,
            sink,
            DEFAULT_THEME,
            RuntimeLoopTiming(poll_timeout_ms=10),
            read_event=read_event,
            terminal_size=lambda fallback: sizes.pop(0),
        )

        self.assertEqual(frames, 2)
        self.assertEqual((session.editor_state.rows, session.editor_state.columns), (3, 26))
        self.assertEqual(sink.flush.call_count, 3)

    def test_terminal_is_restored_when_event_handling_fails(self) -> None:
        session = ViewerSession.create(_document(3))
        terminal = _FakeTerminal()

        def failing_read(fd: int, timeout_ms: int | None = None):
            raise RuntimeError("boom")

        with self.assertRaises(RuntimeError):
            run_main_loop(
                session,
                terminal,
                0,
                mock.Mock(),
                DEFAULT_THEME,
                RuntimeLoopTiming(poll_timeout_ms=10),
                read_event=failing_read,
                terminal_size=lambda fallback: os.terminal_size((44, 6)),
            )

        self.assertEqual((terminal.entered, terminal.exited), (1, 1))

    def test_boundary_bell_is_wired_only_when_enabled(self) -> None:
        terminal = _FakeTerminal()
        quiet = build_session(_document(2), terminal, bell=False)
        loud = build_session(_document(2), terminal, bell=True)

        quiet.notify_boundary()
        self.assertEqual(terminal.bells, 0)
        loud.notify_boundary()
        self.assertEqual(terminal.bells, 1)
        self.assertEqual(loud.editor_state.doc_lines, 2)


if __name__ == "__main__":
    unittest.main()
