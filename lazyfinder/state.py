from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .preview import PreviewCache
from .search import Candidate, ScoredMatch


class FocusMode(Enum):
    SEARCH_INPUT = "search"
    RESULTS_LIST = "results"


@dataclass
class SearchState:
    """Everything the loop mutates and the renderer reads.

    ``selected_index`` stays in ``[0, len(results))``, or 0 with no results.
    ``scroll_offset`` keeps the selection inside the ``visible_rows`` window.
    """

    root: Path
    candidates: list[Candidate]
    query: str = ""
    results: list[ScoredMatch] = field(default_factory=list)
    selected_index: int = 0
    scroll_offset: int = 0
    visible_rows: int = 1
    focus: FocusMode = FocusMode.SEARCH_INPUT
    selected_path: Path | None = None
    preview_cache: PreviewCache = field(default_factory=PreviewCache)
    dirty: bool = True
