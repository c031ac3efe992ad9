"""Search package exports.

Combines candidate enumeration and fuzzy ranking in one import surface.
"""

from __future__ import annotations

from .files import collect_candidates, to_project_relative
from .fuzzy import rank, score_match
from .types import Candidate, ScoredMatch

__all__ = [
    "Candidate",
    "ScoredMatch",
    "collect_candidates",
    "rank",
    "score_match",
    "to_project_relative",
]
