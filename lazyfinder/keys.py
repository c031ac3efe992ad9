"""Key dispatch for the finder.

Maps one decoded key token to a transition on :class:`SearchState`.
Focus decides whether printable keys edit the query or navigate the list.
No terminal or file I/O happens here.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from . import engine
from .input import UNKNOWN_KEY
from .state import FocusMode, SearchState

QUIT_KEYS = frozenset({"ESC", "CTRL_C"})


class ActionKind(Enum):
    CONTINUE = "continue"
    QUIT = "quit"
    OPEN = "open"


@dataclass(frozen=True)
class KeyAction:
    kind: ActionKind
    path: Path | None = None


CONTINUE = KeyAction(ActionKind.CONTINUE)
QUIT = KeyAction(ActionKind.QUIT)


def _toggle_focus(state: SearchState) -> None:
    if state.focus is FocusMode.SEARCH_INPUT:
        state.focus = FocusMode.RESULTS_LIST
    else:
        state.focus = FocusMode.SEARCH_INPUT
    state.dirty = True


def _commit(state: SearchState) -> KeyAction:
    match = engine.selected_match(state)
    if match is None:
        return CONTINUE
    return KeyAction(ActionKind.OPEN, match.candidate.path)


def _handle_search_input_key(state: SearchState, key: str) -> KeyAction:
    if key == "BACKSPACE":
        engine.delete_query_char(state)
    elif key == "CTRL_U":
        engine.set_query(state, "")
    elif key == "DOWN":
        engine.move_selection(state, 1)
    elif key == "UP":
        engine.move_selection(state, -1)
    elif len(key) == 1 and key.isprintable():
        engine.append_query_char(state, key)
    return CONTINUE


def _handle_results_list_key(state: SearchState, key: str) -> KeyAction:
    if key == "q":
        return QUIT
    if key in {"DOWN", "j"}:
        engine.move_selection(state, 1)
    elif key in {"UP", "k"}:
        engine.move_selection(state, -1)
    return CONTINUE


def dispatch_key(state: SearchState, key: str) -> KeyAction:
    """Apply ``key`` to ``state`` and report what the loop should do next."""
    if not key:
        return CONTINUE
    if key in QUIT_KEYS:
        return QUIT
    if key == "ENTER":
        return _commit(state)
    if key == "TAB":
        _toggle_focus(state)
        return CONTINUE
    if key.startswith("MOUSE_WHEEL_UP:"):
        engine.move_selection(state, -1)
        return CONTINUE
    if key.startswith("MOUSE_WHEEL_DOWN:"):
        engine.move_selection(state, 1)
        return CONTINUE
    if key.startswith("MOUSE") or key == UNKNOWN_KEY:
        return CONTINUE

    if state.focus is FocusMode.SEARCH_INPUT:
        return _handle_search_input_key(state, key)
    return _handle_results_list_key(state, key)
