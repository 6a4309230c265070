"""Chrome palettes for the viewer and the helpers that select one.

Themes are ANSI palettes for the viewer chrome: gutter numbers, filler rows,
the status bar and the placeholder title. Document text is never styled.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the renderer."""

    name: str
    reset: str
    gutter: str
    filler: str
    status_bar: str
    title: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    gutter="\033[33m",
    filler="\033[33m",
    status_bar="\033[30;47m",
    title="\033[34m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    gutter="\033[38;5;73m",
    filler="\033[2;38;5;31m",
    status_bar="\033[38;5;16;48;5;117m",
    title="\033[1;38;5;45m",
)

# Reverse video keeps the status bar visible without colors.
PLAIN_THEME = UITheme(
    name="plain",
    reset="\033[0m",
    gutter="",
    filler="",
    status_bar="\033[7m",
    title="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Names accepted by ``--theme`` and the ``theme`` config key."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Map ``name`` onto a known theme, case-insensitively; unknown names become ``default``."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Pick the palette to render with; ``no_color`` always yields the plain theme."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
