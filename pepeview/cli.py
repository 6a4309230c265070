"""Command-line front door for pepeview.

Parses CLI options, loads the optional document, and configures logging.
Then dispatches into the interactive viewer runtime.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .document import Document, load_document
from .runtime import run_viewer
from .runtime.config import save_theme_name
from .ui_theme import available_theme_names, normalize_theme_name

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(log_file: str | None) -> None:
    """Send package logs to ``log_file``; without one, logging stays silent."""
    if not log_file:
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger("pepeview")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)


def open_document(path: Path) -> Document:
    """Load ``path`` or abort startup with a one-line message."""
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if path.is_dir():
        raise SystemExit(f"Not a file: {path}")
    try:
        return load_document(path)
    except OSError as exc:
        raise SystemExit(f"Cannot read {path}: {exc.strerror or exc}") from exc


def main() -> None:
    """Parse CLI arguments and launch the viewer on a file.

    Without a path the viewer opens on its placeholder screen.
    """
    parser = argparse.ArgumentParser(
        description="View a text file in the terminal with keyboard and mouse navigation."
    )
    parser.add_argument("path", nargs="?", default=None, help="File to view.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}); remembered for next time.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colors.")
    parser.add_argument("--bell", action="store_true", help="Ring the terminal bell at document edges.")
    parser.add_argument("--log-file", metavar="PATH", default=None, help="Write debug logs to PATH.")
    args = parser.parse_args()

    _configure_logging(args.log_file)

    document = open_document(Path(args.path)) if args.path is not None else None

    theme_name = None
    if args.theme is not None:
        theme_name = normalize_theme_name(args.theme)
        save_theme_name(theme_name)

    run_viewer(document, theme_name, args.no_color, True if args.bell else None)


if __name__ == "__main__":
    main()
