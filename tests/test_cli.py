"""CLI argument handling tests.

Verifies how ``pepeview.cli.main`` loads the document and forwards options
to the viewer runtime.
"""

from __future__ import annotations

import logging
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from pepeview import cli


class CliTests(unittest.TestCase):
    def test_main_loads_path_argument(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "target.txt"
            target.write_text("hello\nworld\n", encoding="utf-8")

            with mock.patch.object(sys, "argv", ["pepeview", str(target)]), mock.patch(
                "pepeview.cli.run_viewer"
            ) as run_viewer:
                cli.main()

        run_viewer.assert_called_once()
        document, theme_name, no_color, bell = run_viewer.call_args.args
        self.assertEqual(document.lines, ("hello", "world"))
        self.assertEqual(document.path, target)
        self.assertIsNone(theme_name)
        self.assertFalse(no_color)
        self.assertIsNone(bell)

    def test_main_without_path_opens_placeholder(self) -> None:
        with mock.patch.object(sys, "argv", ["pepeview", "--no-color", "--bell"]), mock.patch(
            "pepeview.cli.run_viewer"
        ) as run_viewer:
            cli.main()

        document, _theme_name, no_color, bell = run_viewer.call_args.args
        self.assertIsNone(document)
        self.assertTrue(no_color)
        self.assertTrue(bell)

    def test_theme_option_is_normalized_and_saved(self) -> None:
        with mock.patch.object(sys, "argv", ["pepeview", "--theme", "OCEAN"]), mock.patch(
            "pepeview.cli.run_viewer"
        ) as run_viewer, mock.patch("pepeview.cli.save_theme_name") as save_theme:
            cli.main()

        save_theme.assert_called_once_with("ocean")
        self.assertEqual(run_viewer.call_args.args[1], "ocean")

    def test_missing_path_exits_with_message(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "nope.txt"
            with mock.patch.object(sys, "argv", ["pepeview", str(missing)]), mock.patch(
                "pepeview.cli.run_viewer"
            ) as run_viewer:
                with self.assertRaises(SystemExit) as ctx:
                    cli.main()

        self.assertEqual(str(ctx.exception), f"Path not found: {missing}")
        run_viewer.assert_not_called()

    def test_directory_path_exits_with_message(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(SystemExit) as ctx:
                cli.open_document(Path(tmp))

        self.assertEqual(str(ctx.exception), f"Not a file: {tmp}")

    def test_log_file_option_attaches_debug_handler(self) -> None:
        package_logger = logging.getLogger("pepeview")
        previous_handlers = list(package_logger.handlers)
        previous_level = package_logger.level
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / "viewer.log"
            try:
                with mock.patch.object(sys, "argv", ["pepeview", "--log-file", str(log_path)]), mock.patch(
                    "pepeview.cli.run_viewer"
                ):
                    cli.main()
                added = [h for h in package_logger.handlers if h not in previous_handlers]
                self.assertEqual(len(added), 1)
                self.assertIsInstance(added[0], logging.FileHandler)
                self.assertEqual(package_logger.level, logging.DEBUG)
            finally:
                for handler in package_logger.handlers[:]:
                    if handler not in previous_handlers:
                        package_logger.removeHandler(handler)
                        handler.close()
                package_logger.setLevel(previous_level)


if __name__ == "__main__":
    unittest.main()
