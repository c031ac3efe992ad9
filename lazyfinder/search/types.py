"""Value types shared by enumeration, ranking, and the search state."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Candidate:
    """One file eligible for matching.

    ``path`` is the identity (absolute file path); ``label`` is the display
    name the scorer matches against, the root-relative POSIX path.
    """

    path: Path
    label: str


@dataclass(frozen=True)
class ScoredMatch:
    """A candidate that matched the current query.

    ``positions`` indexes the matched characters of ``candidate.label`` in
    ascending order and is only used for highlighting.
    """

    candidate: Candidate
    score: int
    positions: tuple[int, ...] = ()
