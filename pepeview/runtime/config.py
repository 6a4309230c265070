"""Per-user settings stored as a JSON object under the platform config dir.

Known keys: ``theme``, ``boundary_bell`` and ``poll_timeout_ms``.
A missing or broken file behaves like an empty one.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "pepeview"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_POLL_TIMEOUT_MS = 50
MIN_POLL_TIMEOUT_MS = 10
MAX_POLL_TIMEOUT_MS = 1000


def load_config() -> dict[str, object]:
    """Read the settings object.

    Anything other than a readable file holding a JSON object yields ``{}``;
    read and parse failures are logged as warnings.
    """
    try:
        text = CONFIG_PATH.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError as exc:
        logger.warning("cannot read config %s: %s", CONFIG_PATH, exc)
        return {}
    try:
        data = json.loads(text)
    except ValueError as exc:
        logger.warning("ignoring malformed config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Write ``data`` back as indented JSON.

    Filesystem/serialization errors are logged and otherwise ignored so a
    read-only config directory never stops the viewer.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("cannot write config %s: %s", CONFIG_PATH, exc)


def load_theme_name() -> str | None:
    """Return the saved theme name, or ``None`` when the key is absent or blank."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    """Remember ``theme_name`` for later sessions, keeping the other keys."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)


def load_boundary_bell() -> bool:
    """Return whether hitting a document edge rings the bell.

    Only explicit boolean values are accepted; anything else is ``False``.
    """
    value = load_config().get("boundary_bell")
    return value if isinstance(value, bool) else False


def load_poll_timeout_ms() -> int:
    """Load the input poll timeout, clamped to a sane range.

    Booleans and non-integers fall back to ``DEFAULT_POLL_TIMEOUT_MS``.
    """
    value = load_config().get("poll_timeout_ms")
    if isinstance(value, bool) or not isinstance(value, int):
        return DEFAULT_POLL_TIMEOUT_MS
    return max(MIN_POLL_TIMEOUT_MS, min(MAX_POLL_TIMEOUT_MS, value))
