from __future__ import annotations

import random
import unittest
from pathlib import Path

from lazyfinder import engine
from lazyfinder.search import Candidate


def _candidates(count: int) -> list[Candidate]:
    return [Candidate(path=Path(f"/project/file_{idx:02d}.txt"), label=f"file_{idx:02d}.txt") for idx in range(count)]


class SelectionTests(unittest.TestCase):
    def test_initial_state_lists_every_candidate(self) -> None:
        candidates = _candidates(5)

        state = engine.new_search_state(Path("/project"), candidates, visible_rows=3)

        self.assertEqual([match.candidate for match in state.results], candidates)
        self.assertEqual(state.selected_index, 0)
        self.assertEqual(state.scroll_offset, 0)

    def test_move_down_wraps_to_first(self) -> None:
        state = engine.new_search_state(Path("/project"), _candidates(3), visible_rows=10)

        for _ in range(3):
            engine.move_selection(state, 1)

        self.assertEqual(state.selected_index, 0)

    def test_move_up_from_first_wraps_to_last(self) -> None:
        state = engine.new_search_state(Path("/project"), _candidates(4), visible_rows=10)

        engine.move_selection(state, -1)

        self.assertEqual(state.selected_index, 3)

    def test_move_with_no_results_is_noop(self) -> None:
        state = engine.new_search_state(Path("/project"), _candidates(3), visible_rows=10)
        engine.set_query(state, "zzz")

        self.assertFalse(engine.move_selection(state, 1))
        self.assertFalse(engine.move_selection(state, -1))
        self.assertEqual(state.selected_index, 0)

    def test_random_navigation_keeps_selection_and_scroll_in_bounds(self) -> None:
        state = engine.new_search_state(Path("/project"), _candidates(17), visible_rows=4)
        rng = random.Random(7)

        for _ in range(500):
            step = rng.choice([1, -1, 1, 1, -1])
            engine.move_selection(state, step)
            if rng.random() < 0.05:
                engine.set_query(state, rng.choice(["", "1", "file_0", "zz", "f"]))
            count = len(state.results)
            self.assertGreaterEqual(state.selected_index, 0)
            self.assertLess(state.selected_index, max(1, count))
            self.assertLessEqual(state.scroll_offset, state.selected_index)
            self.assertLess(state.selected_index, state.scroll_offset + state.visible_rows)


class QueryTests(unittest.TestCase):
    def test_query_change_resets_selection_and_scroll(self) -> None:
        state = engine.new_search_state(Path("/project"), _candidates(20), visible_rows=5)
        for _ in range(12):
            engine.move_selection(state, 1)
        self.assertGreater(state.scroll_offset, 0)

        engine.append_query_char(state, "1")

        self.assertEqual(state.query, "1")
        self.assertEqual(state.selected_index, 0)
        self.assertEqual(state.scroll_offset, 0)
        self.assertTrue(all("1" in match.candidate.label for match in state.results))

    def test_delete_on_empty_query_is_noop(self) -> None:
        state = engine.new_search_state(Path("/project"), _candidates(3), visible_rows=5)
        engine.move_selection(state, 1)

        self.assertFalse(engine.delete_query_char(state))
        self.assertEqual(state.selected_index, 1)

    def test_delete_restores_wider_results(self) -> None:
        state = engine.new_search_state(Path("/project"), _candidates(12), visible_rows=5)
        engine.append_query_char(state, "1")
        engine.append_query_char(state, "1")
        narrowed = len(state.results)

        engine.delete_query_char(state)

        self.assertEqual(state.query, "1")
        self.assertGreater(len(state.results), narrowed)

    def test_setting_same_query_keeps_selection(self) -> None:
        state = engine.new_search_state(Path("/project"), _candidates(5), visible_rows=5)
        engine.move_selection(state, 2)

        self.assertFalse(engine.set_query(state, ""))
        self.assertEqual(state.selected_index, 2)


class ScrollTests(unittest.TestCase):
    def test_moving_below_window_scrolls_selection_to_bottom(self) -> None:
        state = engine.new_search_state(Path("/project"), _candidates(10), visible_rows=3)

        for _ in range(4):
            engine.move_selection(state, 1)

        self.assertEqual(state.selected_index, 4)
        self.assertEqual(state.scroll_offset, 2)

    def test_moving_above_window_scrolls_selection_to_top(self) -> None:
        state = engine.new_search_state(Path("/project"), _candidates(10), visible_rows=3)
        for _ in range(6):
            engine.move_selection(state, 1)

        engine.move_selection(state, -1)
        engine.move_selection(state, -1)
        engine.move_selection(state, -1)

        self.assertEqual(state.selected_index, 3)
        self.assertEqual(state.scroll_offset, 3)

    def test_wrap_to_last_jumps_window_in_one_step(self) -> None:
        state = engine.new_search_state(Path("/project"), _candidates(10), visible_rows=3)

        engine.move_selection(state, -1)

        self.assertEqual(state.selected_index, 9)
        self.assertEqual(state.scroll_offset, 7)

    def test_shrinking_window_keeps_selection_visible(self) -> None:
        state = engine.new_search_state(Path("/project"), _candidates(10), visible_rows=8)
        for _ in range(7):
            engine.move_selection(state, 1)

        engine.set_visible_rows(state, 2)

        self.assertEqual(state.selected_index, 7)
        self.assertEqual(state.scroll_offset, 6)


if __name__ == "__main__":
    unittest.main()
