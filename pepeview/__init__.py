"""Public package surface for pepeview.

Exports ``main`` for programmatic CLI invocation.
Most implementation lives in submodules under ``pepeview``.
"""

from __future__ import annotations

import logging

# Nothing may reach stderr while the terminal is in raw mode.
logging.getLogger(__name__).addHandler(logging.NullHandler())


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = ["main"]
