"""Session bootstrap: wires terminal, preview loader, and state into the loop."""

from __future__ import annotations

import shutil
import sys
from pathlib import Path

from ..config import FinderConfig
from ..editor import launch_editor
from ..engine import new_search_state
from ..highlight import highlight_lines, plain_lines
from ..input import read_key
from ..preview import PreviewLoader
from ..render import paint_frame, results_rows
from ..search import Candidate
from ..terminal import TerminalController
from ..ui_theme import PLAIN_THEME, resolve_theme
from .loop import RuntimeLoopCallbacks, run_main_loop

KEY_POLL_TIMEOUT_MS = 250


def run_finder(root: Path, candidates: list[Candidate], config: FinderConfig) -> Path | None:
    """Run one interactive session over ``candidates``.

    Raises ``StartupError`` when the terminal cannot be set up and
    ``EditorLaunchError`` after raw mode is restored when opening fails.
    """
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)

    theme = resolve_theme(config.theme)
    loader = PreviewLoader(
        max_lines=config.preview_max_lines,
        style=config.style,
        highlight=plain_lines if theme is PLAIN_THEME else highlight_lines,
    )
    term = shutil.get_terminal_size((80, 24))
    state = new_search_state(root, candidates, visible_rows=results_rows(term.lines))

    callbacks = RuntimeLoopCallbacks(
        read_key=lambda: read_key(stdin_fd, timeout_ms=KEY_POLL_TIMEOUT_MS),
        terminal_size=lambda: shutil.get_terminal_size((80, 24)),
        paint=lambda lines, clear: paint_frame(lines, stdout_fd, clear),
        open_path=lambda path: launch_editor(path, terminal.disable_tui_mode, terminal.enable_tui_mode),
    )
    with terminal.raw_mode():
        return run_main_loop(state, loader, theme, callbacks)
