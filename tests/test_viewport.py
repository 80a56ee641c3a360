"""Tests for viewport transitions.

Covers one-row scrolling, clamping at both ends, and the lazy reconciliation
left in place after a resize.
"""

from __future__ import annotations

import random
import unittest

from optionpicker import viewport as vp
from optionpicker.viewport import Viewport


class ViewportMoveTests(unittest.TestCase):
    def test_four_moves_down_scroll_window_one_row_per_overflow(self) -> None:
        state = vp.reset(3)
        for _ in range(4):
            state = vp.move_down(state, 5)

        self.assertEqual(state, Viewport(selected=4, min=2, max=4))

    def test_move_down_past_last_option_is_idempotent(self) -> None:
        state = vp.reset(10)
        for _ in range(7):
            state = vp.move_down(state, 3)

        self.assertEqual(state.selected, 2)
        self.assertEqual((state.min, state.max), (0, 9))

    def test_move_up_at_first_option_stays_put(self) -> None:
        state = vp.move_up(vp.reset(4), 6)

        self.assertEqual(state, Viewport(selected=0, min=0, max=3))

    def test_move_up_scrolls_window_back_by_one(self) -> None:
        state = Viewport(selected=3, min=3, max=5)
        state = vp.move_up(state, 10)

        self.assertEqual(state, Viewport(selected=2, min=2, max=4))

    def test_moves_on_empty_list_are_noops(self) -> None:
        state = vp.reset(3)

        self.assertEqual(vp.move_down(state, 0), state)
        self.assertEqual(vp.move_up(state, 0), state)

    def test_transitions_return_new_records(self) -> None:
        state = vp.reset(3)
        moved = vp.move_down(state, 5)

        self.assertEqual(state.selected, 0)
        self.assertEqual(moved.selected, 1)

    def test_random_walk_keeps_selection_in_range_and_visible(self) -> None:
        rng = random.Random(1234)
        for count in (1, 2, 5, 17):
            state = vp.reset(4)
            for _ in range(200):
                if rng.random() < 0.5:
                    state = vp.move_down(state, count)
                else:
                    state = vp.move_up(state, count)
                self.assertGreaterEqual(state.selected, 0)
                self.assertLessEqual(state.selected, count - 1)
                self.assertTrue(state.contains_selection())
                self.assertEqual(state.max - state.min, 3)


class ViewportResizeTests(unittest.TestCase):
    def test_resize_sets_bottom_bound_from_height(self) -> None:
        for height in (1, 2, 7, 40):
            state = vp.resize(Viewport(), height)
            self.assertEqual(state.max - state.min, height - 1)

    def test_resize_leaves_selection_and_top_bound_alone(self) -> None:
        state = Viewport(selected=8, min=5, max=9)
        state = vp.resize(state, 3)

        self.assertEqual(state, Viewport(selected=8, min=5, max=2))
        self.assertFalse(state.contains_selection())

    def test_repeated_resizes_only_overwrite_bottom_bound(self) -> None:
        state = Viewport(selected=1, min=0, max=4)
        state = vp.resize(state, 10)
        state = vp.resize(state, 2)

        self.assertEqual(state, Viewport(selected=1, min=0, max=1))

    def test_shrink_is_reconciled_one_row_per_move(self) -> None:
        state = vp.resize(Viewport(selected=6, min=0, max=9), 3)
        self.assertFalse(state.contains_selection())

        state = vp.move_down(state, 20)
        self.assertEqual(state, Viewport(selected=7, min=1, max=3))


class FitWindowTests(unittest.TestCase):
    def test_window_is_resized_from_its_top(self) -> None:
        state = vp.fit_window(Viewport(selected=3, min=0, max=24), 5)

        self.assertEqual(state, Viewport(selected=3, min=0, max=4))

    def test_window_slides_to_keep_selection_visible(self) -> None:
        self.assertEqual(
            vp.fit_window(Viewport(selected=20, min=0, max=24), 5),
            Viewport(selected=20, min=16, max=20),
        )
        self.assertEqual(
            vp.fit_window(Viewport(selected=2, min=6, max=8), 3),
            Viewport(selected=2, min=2, max=4),
        )

    def test_growing_window_keeps_top_bound(self) -> None:
        state = vp.fit_window(Viewport(selected=7, min=5, max=7), 6)

        self.assertEqual(state, Viewport(selected=7, min=5, max=10))
        self.assertTrue(state.contains_selection())


class VisibleRowsTests(unittest.TestCase):
    def test_rows_are_window_intersected_with_options(self) -> None:
        options = ["a", "b", "c", "d", "e"]

        self.assertEqual(
            vp.visible_rows(Viewport(selected=2, min=1, max=3), options),
            [(1, "b"), (2, "c"), (3, "d")],
        )
        self.assertEqual(
            vp.visible_rows(Viewport(selected=0, min=0, max=9), options[:2]),
            [(0, "a"), (1, "b")],
        )

    def test_rows_are_recomputed_on_every_call(self) -> None:
        state = Viewport(selected=0, min=0, max=1)
        options = ["x", "y", "z"]

        first = vp.visible_rows(state, options)
        second = vp.visible_rows(state, options)

        self.assertEqual(first, second)
        self.assertEqual(list(first), [(0, "x"), (1, "y")])

    def test_empty_options_have_no_rows(self) -> None:
        self.assertEqual(vp.visible_rows(Viewport(max=4), []), [])


if __name__ == "__main__":
    unittest.main()
