"""State transitions over :class:`SearchState`.

Query edits replace the ranked results wholesale and reset the selection.
Navigation wraps around both ends. ``sync_preview`` runs after every
transition and before rendering; it is the only step that touches files.
"""

from __future__ import annotations

from pathlib import Path

from .preview import Preview, PreviewLoader
from .search import Candidate, ScoredMatch, rank
from .state import SearchState


def new_search_state(root: Path, candidates: list[Candidate], visible_rows: int = 1) -> SearchState:
    """Build the initial state: empty query, every candidate in input order."""
    state = SearchState(root=root, candidates=candidates, visible_rows=max(1, visible_rows))
    state.results = rank("", candidates)
    return state


def selected_match(state: SearchState) -> ScoredMatch | None:
    if not state.results:
        return None
    return state.results[state.selected_index]


def reconcile_scroll(state: SearchState) -> None:
    """Clamp ``scroll_offset`` so the selection is visible."""
    rows = max(1, state.visible_rows)
    previous = state.scroll_offset
    if state.selected_index < state.scroll_offset:
        state.scroll_offset = state.selected_index
    elif state.selected_index >= state.scroll_offset + rows:
        state.scroll_offset = state.selected_index - rows + 1
    max_offset = max(0, len(state.results) - rows)
    state.scroll_offset = max(0, min(state.scroll_offset, max_offset, state.selected_index))
    if state.scroll_offset != previous:
        state.dirty = True


def set_visible_rows(state: SearchState, rows: int) -> None:
    rows = max(1, rows)
    if rows != state.visible_rows:
        state.visible_rows = rows
        state.dirty = True
    reconcile_scroll(state)


def set_query(state: SearchState, query: str) -> bool:
    """Replace the query, re-rank, and reset selection and scroll.

    Returns whether the query actually changed.
    """
    if query == state.query:
        return False
    state.query = query
    state.results = rank(query, state.candidates)
    state.selected_index = 0
    state.scroll_offset = 0
    state.dirty = True
    return True


def append_query_char(state: SearchState, ch: str) -> bool:
    return set_query(state, state.query + ch)


def delete_query_char(state: SearchState) -> bool:
    if not state.query:
        return False
    return set_query(state, state.query[:-1])


def move_selection(state: SearchState, delta: int) -> bool:
    """Move the selection by ``delta`` rows with wraparound at both ends."""
    count = len(state.results)
    if count == 0:
        return False
    previous = state.selected_index
    state.selected_index = (state.selected_index + delta) % count
    reconcile_scroll(state)
    if state.selected_index == previous:
        return False
    state.dirty = True
    return True


def sync_preview(state: SearchState, loader: PreviewLoader) -> Preview | None:
    """Point the preview at the current selection, loading it on a cache miss.

    With no results nothing is selected and the cache is dropped. A load
    failure still produces a cached placeholder, so no candidate is ever
    read twice.
    """
    match = selected_match(state)
    if match is None:
        if state.selected_path is not None or len(state.preview_cache):
            state.dirty = True
        state.selected_path = None
        state.preview_cache.clear()
        return None

    path = match.candidate.path
    if path != state.selected_path:
        state.selected_path = path
        state.dirty = True
    cached = state.preview_cache.get(path)
    if cached is not None:
        return cached
    state.dirty = True
    return state.preview_cache.put(path, loader.load(path))
