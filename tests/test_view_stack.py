from __future__ import annotations

import unittest

from optionpicker.view_stack import ViewSnapshot, ViewStack


class ViewStackTests(unittest.TestCase):
    def test_pop_returns_snapshots_in_lifo_order(self) -> None:
        stack = ViewStack()
        snapshots = [ViewSnapshot(selected=i, min=i, max=i + 4) for i in range(5)]
        for snapshot in snapshots:
            stack.push(snapshot)

        popped = [stack.pop() for _ in snapshots]

        self.assertEqual(popped, list(reversed(snapshots)))
        self.assertEqual(stack.depth(), 0)

    def test_pop_on_empty_stack_raises(self) -> None:
        stack = ViewStack()
        with self.assertRaises(IndexError):
            stack.pop()

        stack.push(ViewSnapshot(1, 0, 2))
        stack.pop()
        with self.assertRaises(IndexError):
            stack.pop()

    def test_depth_tracks_pushes_and_pops(self) -> None:
        stack = ViewStack()
        self.assertEqual(stack.depth(), 0)

        stack.push(ViewSnapshot(0, 0, 2))
        stack.push(ViewSnapshot(3, 1, 3))
        self.assertEqual(len(stack), 2)
        self.assertEqual(stack.depth(), 2)

        stack.pop()
        self.assertEqual(stack.depth(), 1)

    def test_snapshot_tuple_order(self) -> None:
        self.assertEqual(ViewSnapshot(selected=4, min=2, max=6).as_tuple(), (4, 2, 6))


if __name__ == "__main__":
    unittest.main()
