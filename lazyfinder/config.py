"""Persistent JSON config helpers.

Holds hidden-file and gitignore preferences, preview and theme settings,
and optional log-file wiring. Malformed or missing config falls back to
defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .highlight import DEFAULT_STYLE
from .preview import DEFAULT_PREVIEW_MAX_LINES

APP_NAME = "lazyfinder"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class FinderConfig:
    show_hidden: bool = False
    skip_gitignored: bool = False
    style: str = DEFAULT_STYLE
    theme: str | None = None
    preview_max_lines: int = DEFAULT_PREVIEW_MAX_LINES
    log_file: Path | None = None
    log_level: int = logging.INFO


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _load_bool(data: dict[str, object], key: str, default: bool) -> bool:
    """Only explicit booleans are accepted; anything else yields ``default``."""
    value = data.get(key)
    return value if isinstance(value, bool) else default


def _load_str(data: dict[str, object], key: str) -> str | None:
    value = data.get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _load_positive_int(data: dict[str, object], key: str, default: int) -> int:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return default
    return value


def _load_log_level(data: dict[str, object]) -> int:
    name = _load_str(data, "log_level")
    if name is None or name.upper() not in LOG_LEVELS:
        return logging.INFO
    return getattr(logging, name.upper())


def load_finder_config() -> FinderConfig:
    """Read the config file into a validated :class:`FinderConfig`."""
    data = load_config()
    log_file = _load_str(data, "log_file")
    return FinderConfig(
        show_hidden=_load_bool(data, "show_hidden", False),
        skip_gitignored=_load_bool(data, "skip_gitignored", False),
        style=_load_str(data, "style") or DEFAULT_STYLE,
        theme=_load_str(data, "theme"),
        preview_max_lines=_load_positive_int(data, "preview_max_lines", DEFAULT_PREVIEW_MAX_LINES),
        log_file=Path(log_file).expanduser() if log_file else None,
        log_level=_load_log_level(data),
    )
