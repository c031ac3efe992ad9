"""UI theme definitions and selection helpers.

Themes are UI-only ANSI palettes (query box, result list, pane chrome).
Syntax highlighting style for previews remains a separate setting.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the renderer."""

    name: str
    divider: str
    reverse: str
    reset: str
    query_prompt_focused: str
    query_prompt_blurred: str
    query_text: str
    query_placeholder: str
    match_count: str
    result_text: str
    result_hit: str
    result_focused_marker: str
    preview_title: str
    preview_dim: str


DEFAULT_THEME = UITheme(
    name="default",
    divider="\033[2m",
    reverse="\033[7m",
    reset="\033[0m",
    query_prompt_focused="\033[1;38;5;81m",
    query_prompt_blurred="\033[2;38;5;250m",
    query_text="\033[1;38;5;252m",
    query_placeholder="\033[2;38;5;250m",
    match_count="\033[38;5;109m",
    result_text="\033[38;5;252m",
    result_hit="\033[1;38;5;39m",
    result_focused_marker="\033[38;5;214m",
    preview_title="\033[1;38;5;229m",
    preview_dim="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    divider="\033[2;38;5;31m",
    reverse="\033[7m",
    reset="\033[0m",
    query_prompt_focused="\033[1;38;5;45m",
    query_prompt_blurred="\033[2;38;5;110m",
    query_text="\033[1;38;5;153m",
    query_placeholder="\033[2;38;5;110m",
    match_count="\033[38;5;73m",
    result_text="\033[38;5;252m",
    result_hit="\033[1;38;5;45m",
    result_focused_marker="\033[38;5;215m",
    preview_title="\033[1;38;5;153m",
    preview_dim="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    divider="",
    reverse="",
    reset="",
    query_prompt_focused="",
    query_prompt_blurred="",
    query_text="",
    query_placeholder="",
    match_count="",
    result_text="",
    result_hit="",
    result_focused_marker="",
    preview_title="",
    preview_dim="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool | None = None) -> UITheme:
    """Return concrete theme for requested name and color mode.

    ``no_color`` defaults to the presence of the ``NO_COLOR`` environment
    variable.
    """
    if no_color is None:
        no_color = bool(os.environ.get("NO_COLOR"))
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]
