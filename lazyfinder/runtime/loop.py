"""Main interactive event loop for the finder.

One key is fully processed (dispatch, re-rank, preview sync, repaint)
before the next is read. This loop is wiring only; terminal and editor
access arrive as callbacks so tests can script a whole session.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..engine import set_visible_rows, sync_preview
from ..keys import ActionKind, dispatch_key
from ..preview import PreviewLoader
from ..render import build_frame, results_rows, split_widths
from ..state import SearchState
from ..ui_theme import UITheme


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected I/O used by ``run_main_loop``.

    ``read_key`` is the only blocking call; it may return ``""`` on timeout
    so resizes get repainted without input.
    """

    read_key: Callable[[], str]
    terminal_size: Callable[[], os.terminal_size]
    paint: Callable[[list[str], bool], None]
    open_path: Callable[[Path], None]


def run_main_loop(
    state: SearchState,
    loader: PreviewLoader,
    theme: UITheme,
    callbacks: RuntimeLoopCallbacks,
) -> Path | None:
    """Run until quit or commit.

    Returns the opened path after the editor callback finishes, or ``None``
    on quit. Editor failures propagate to the caller.
    """
    last_size: tuple[int, int] | None = None
    sync_preview(state, loader)

    while True:
        term = callbacks.terminal_size()
        size = (term.columns, term.lines)
        resized = size != last_size
        if resized:
            last_size = size
            set_visible_rows(state, results_rows(term.lines))
            # Entries already cached keep the width they were rendered at.
            _list_width, loader.width = split_widths(term.columns)
            state.dirty = True

        if state.dirty:
            callbacks.paint(build_frame(state, term.columns, term.lines, theme), resized)
            state.dirty = False

        action = dispatch_key(state, callbacks.read_key())
        if action.kind is ActionKind.QUIT:
            return None
        sync_preview(state, loader)
        if action.kind is ActionKind.OPEN and action.path is not None:
            callbacks.open_path(action.path)
            return action.path
