from __future__ import annotations

import unittest
from pathlib import Path

from lazyfinder.search import Candidate, rank, score_match
from lazyfinder.search.fuzzy import MATCH_SCORE, PREFIX_BONUS, SEPARATOR_BONUS, STREAK_BONUS


def _score(query: str, label: str) -> int | None:
    matched = score_match(query, label)
    return None if matched is None else matched[0]


def _candidates(*labels: str) -> list[Candidate]:
    return [Candidate(path=Path("/project") / label, label=label) for label in labels]


class ScoreMatchTests(unittest.TestCase):
    def test_subsequence_match_reports_one_position_per_query_char(self) -> None:
        matched = score_match("acy", "app_config.yaml")

        self.assertIsNotNone(matched)
        _score, positions = matched
        self.assertEqual(positions, (0, 4, 11))

    def test_missing_or_out_of_order_chars_do_not_match(self) -> None:
        self.assertIsNone(score_match("zzz", "abc.py"))
        self.assertIsNone(score_match("ba", "ab"))
        self.assertIsNone(score_match("app", "banana.rs"))

    def test_query_longer_than_label_is_rejected(self) -> None:
        self.assertIsNone(score_match("abcd", "abc"))

    def test_matching_is_case_insensitive(self) -> None:
        self.assertEqual(score_match("READ", "readme.md"), score_match("read", "ReadMe.md"))

    def test_empty_query_matches_with_zero_score(self) -> None:
        self.assertEqual(score_match("", "anything.txt"), (0, ()))

    def test_score_uses_documented_constants(self) -> None:
        score, positions = score_match("app", "apple.txt")

        expected = (
            (MATCH_SCORE + PREFIX_BONUS)
            + (MATCH_SCORE + STREAK_BONUS - 1)
            + (MATCH_SCORE + 2 * STREAK_BONUS - 2)
        )
        self.assertEqual(positions, (0, 1, 2))
        self.assertEqual(score, expected)

    def test_prefix_match_beats_same_match_shifted_right(self) -> None:
        prefix = _score("app", "apple.txt")
        shifted = _score("app", "xapple.txt")

        self.assertGreater(prefix, shifted)

    def test_separator_boundary_earns_bonus(self) -> None:
        boundary = _score("c", "a_camel")
        inner = _score("c", "abcamel")

        self.assertEqual(boundary - inner, SEPARATOR_BONUS)

    def test_contiguous_run_beats_scattered_match(self) -> None:
        contiguous = _score("abc", "abc.py")
        gapped = _score("abc", "a_x_b_x_c.py")

        self.assertGreater(contiguous, gapped)

    def test_later_positions_score_less(self) -> None:
        early = _score("z", "xz")
        late = _score("z", "xxxxz")

        self.assertGreater(early, late)

    def test_score_is_floored_at_zero(self) -> None:
        label = "x" * 200 + "q"

        self.assertEqual(_score("q", label), 0)

    def test_positions_index_original_label_for_expanding_case_folds(self) -> None:
        # "İ".lower() is two code points; positions must still index the label.
        matched = score_match("x", "İx")

        self.assertIsNotNone(matched)
        self.assertEqual(matched[1], (1,))


class RankTests(unittest.TestCase):
    def test_rank_drops_non_matching_candidates(self) -> None:
        candidates = _candidates("apple.txt", "banana.rs", "app_config.yaml")

        ranked = rank("app", candidates)

        labels = [match.candidate.label for match in ranked]
        self.assertEqual(labels, ["apple.txt", "app_config.yaml"])
        for match in ranked:
            self.assertIsNotNone(score_match("app", match.candidate.label))

    def test_rank_empty_query_keeps_original_order_with_uniform_score(self) -> None:
        candidates = _candidates("b.txt", "a.txt", "c.txt")

        ranked = rank("", candidates)

        self.assertEqual([match.candidate for match in ranked], candidates)
        self.assertEqual({match.score for match in ranked}, {0})

    def test_rank_orders_by_descending_score(self) -> None:
        candidates = _candidates("docs/x_main.txt", "main.py", "src/domain.rs")

        ranked = rank("main", candidates)

        scores = [match.score for match in ranked]
        self.assertEqual(scores, sorted(scores, reverse=True))
        self.assertEqual(ranked[0].candidate.label, "main.py")

    def test_rank_ties_keep_input_order(self) -> None:
        candidates = _candidates("app_config.yaml", "apple.txt")

        ranked = rank("app", candidates)

        self.assertEqual(ranked[0].score, ranked[1].score)
        self.assertEqual([match.candidate.label for match in ranked], ["app_config.yaml", "apple.txt"])

    def test_rank_is_deterministic(self) -> None:
        candidates = _candidates("src/app.py", "tests/test_app.py", "app/__init__.py", "README.md")

        self.assertEqual(rank("ap", candidates), rank("ap", candidates))

    def test_rank_with_no_matches_is_empty(self) -> None:
        candidates = _candidates("apple.txt", "banana.rs", "app_config.yaml")

        self.assertEqual(rank("xyz", candidates), [])


if __name__ == "__main__":
    unittest.main()
