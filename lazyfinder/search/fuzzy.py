from __future__ import annotations

from collections.abc import Iterable

from .types import Candidate, ScoredMatch

MATCH_SCORE = 32
STREAK_BONUS = 24
PREFIX_BONUS = 64
SEPARATOR_BONUS = 16
SEPARATORS = frozenset("_-/.\\")


def score_match(query: str, label: str) -> tuple[int, tuple[int, ...]] | None:
    """Score ``label`` against ``query`` as a case-insensitive subsequence.

    Matching is leftmost-greedy. Every matched character at label index ``i``
    contributes ``MATCH_SCORE + STREAK_BONUS * streak - i``, where ``streak``
    counts the matched characters directly before it, plus ``PREFIX_BONUS``
    at index 0 or ``SEPARATOR_BONUS`` right after one of ``_ - / . \\``.
    Returns ``None`` when some query character cannot be found in order,
    otherwise ``(score, positions)`` with the total floored at zero.
    """
    if not query:
        return 0, ()
    if len(query) > len(label):
        return None

    # Fold per character so positions keep indexing the original label.
    needles = [ch.lower() for ch in query]
    needle_count = len(needles)
    positions: list[int] = []
    score = 0
    streak = 0
    prev_ch = ""
    for idx, ch in enumerate(label):
        if ch.lower() == needles[len(positions)]:
            char_score = MATCH_SCORE + streak * STREAK_BONUS - idx
            if idx == 0:
                char_score += PREFIX_BONUS
            elif prev_ch in SEPARATORS:
                char_score += SEPARATOR_BONUS
            score += char_score
            streak += 1
            positions.append(idx)
            if len(positions) == needle_count:
                return max(0, score), tuple(positions)
        else:
            streak = 0
        prev_ch = ch
    return None


def rank(query: str, candidates: Iterable[Candidate]) -> list[ScoredMatch]:
    """Return candidates matching ``query`` ordered by descending score.

    Ties keep input order, so the empty query (score 0 for everyone) returns
    the candidates unchanged.
    """
    matches: list[ScoredMatch] = []
    for candidate in candidates:
        matched = score_match(query, candidate.label)
        if matched is None:
            continue
        score, positions = matched
        matches.append(ScoredMatch(candidate=candidate, score=score, positions=positions))
    matches.sort(key=lambda match: -match.score)
    return matches
