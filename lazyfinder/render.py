"""Frame composition and painting for the finder screen.

``build_frame`` turns a read-only :class:`SearchState` into exactly
``height`` rows of ``width`` columns: the query box, a divider, and a body
split into the ranked list and the preview pane. ``paint_frame`` writes
those rows to the terminal.
"""

from __future__ import annotations

import os

from .ansi import pad_ansi_line
from .preview import UNAVAILABLE_TEXT
from .search import ScoredMatch
from .state import FocusMode, SearchState
from .ui_theme import UITheme

HEADER_ROWS = 2
LIST_WIDTH_PERCENT = 40
QUERY_PLACEHOLDER = "type to filter files (TAB: focus list, ENTER: open, ESC: quit)"
NO_SELECTION_TITLE = "No file selected"


def results_rows(height: int) -> int:
    """Number of result rows visible for a terminal ``height``."""
    return max(1, height - HEADER_ROWS)


def split_widths(width: int) -> tuple[int, int]:
    """Return ``(list_width, preview_width)``; one column goes to the divider."""
    width = max(3, width)
    list_width = max(1, (width * LIST_WIDTH_PERCENT) // 100)
    return list_width, max(1, width - list_width - 1)


def _query_row(state: SearchState, width: int, theme: UITheme) -> str:
    focused = state.focus is FocusMode.SEARCH_INPUT
    prompt_style = theme.query_prompt_focused if focused else theme.query_prompt_blurred
    if state.query:
        body = f"{theme.query_text}{state.query}{theme.reset}"
        if focused:
            body += f"{theme.reverse} {theme.reset}"
    else:
        body = f"{theme.query_placeholder}{QUERY_PLACEHOLDER}{theme.reset}"
    counter = f"{len(state.results)}/{len(state.candidates)}"
    left = pad_ansi_line(f"{prompt_style}> {theme.reset}{body}", max(0, width - len(counter) - 1))
    return f"{left} {theme.match_count}{counter}{theme.reset}"


def _result_row(match: ScoredMatch, selected: bool, focused: bool, width: int, theme: UITheme) -> str:
    base = theme.reverse if selected else theme.result_text
    if selected and focused:
        marker = f"{theme.result_focused_marker}>{theme.reset}{base}"
    else:
        marker = ">" if selected else " "
    hits = set(match.positions)
    out = [base, marker, " "]
    for idx, ch in enumerate(match.candidate.label):
        if idx in hits:
            out.append(f"{theme.result_hit}{ch}{theme.reset}{base}")
        else:
            out.append(ch)
    return pad_ansi_line("".join(out), width) + theme.reset


def _list_rows(state: SearchState, rows: int, width: int, theme: UITheme) -> list[str]:
    focused = state.focus is FocusMode.RESULTS_LIST
    out: list[str] = []
    visible = state.results[state.scroll_offset : state.scroll_offset + rows]
    for offset, match in enumerate(visible):
        selected = state.scroll_offset + offset == state.selected_index
        out.append(_result_row(match, selected, focused, width, theme))
    while len(out) < rows:
        out.append(" " * width)
    return out


def _preview_rows(state: SearchState, rows: int, width: int, theme: UITheme) -> list[str]:
    if state.selected_path is None:
        title = f"{theme.preview_dim}{NO_SELECTION_TITLE}{theme.reset}"
        lines: tuple[str, ...] = (f"{theme.preview_dim}{UNAVAILABLE_TEXT}{theme.reset}",)
    else:
        label = state.results[state.selected_index].candidate.label if state.results else ""
        title = f"{theme.preview_title}{label}{theme.reset}"
        preview = state.preview_cache.get(state.selected_path)
        if preview is None or not preview.available:
            lines = (f"{theme.preview_dim}{UNAVAILABLE_TEXT}{theme.reset}",)
        else:
            lines = preview.lines
    out = [pad_ansi_line(title, width) + theme.reset]
    for line in lines[: max(0, rows - 1)]:
        out.append(pad_ansi_line(line, width) + theme.reset)
    while len(out) < rows:
        out.append(" " * width)
    return out


def build_frame(state: SearchState, width: int, height: int, theme: UITheme) -> list[str]:
    """Compose every screen row for the current state without mutating it."""
    width = max(3, width)
    height = max(HEADER_ROWS + 1, height)
    body_rows = results_rows(height)
    list_width, preview_width = split_widths(width)

    frame = [
        _query_row(state, width, theme),
        f"{theme.divider}{'─' * width}{theme.reset}",
    ]
    list_rows = _list_rows(state, body_rows, list_width, theme)
    preview_rows = _preview_rows(state, body_rows, preview_width, theme)
    divider = f"{theme.divider}│{theme.reset}"
    for left, right in zip(list_rows, preview_rows):
        frame.append(f"{left}{divider}{right}")
    return frame


def paint_frame(lines: list[str], fd: int, clear: bool = False) -> None:
    """Write ``lines`` to ``fd`` row by row; ``clear`` wipes stale content first."""
    out: list[str] = ["\033[2J" if clear else ""]
    for row, line in enumerate(lines, start=1):
        out.append(f"\033[{row};1H{line}\033[0m\033[K")
    os.write(fd, "".join(out).encode("utf-8", errors="replace"))
