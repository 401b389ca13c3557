import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from stackqueue.stack_from_queues import StackFromQueues


def snapshot(queue):
    return repr(queue)


class TestStackFromQueues(unittest.TestCase):
    def test_new_stack_is_empty(self):
        s = StackFromQueues()
        self.assertEqual(s.size(), 0)
        self.assertTrue(s.is_empty())

    def test_pop_and_peek_on_empty_return_none(self):
        s = StackFromQueues()
        self.assertIsNone(s.pop())
        self.assertIsNone(s.peek())
        self.assertTrue(s.is_empty())

    def test_pop_order_and_sizes(self):
        s = StackFromQueues()
        for value in (8, 6, 3):
            s.push(value)
        for expected, remaining in zip((3, 6, 8), (2, 1, 0)):
            self.assertEqual(s.pop(), expected)
            self.assertEqual(s.size(), remaining)
        self.assertIsNone(s.pop())

    def test_peek_leaves_queues_unchanged(self):
        s = StackFromQueues()
        for value in (1, 2, 3, 4):
            s.push(value)
        primary_before = snapshot(s._primary)
        secondary_before = snapshot(s._secondary)
        self.assertEqual(s.peek(), 4)
        self.assertEqual(snapshot(s._primary), primary_before)
        self.assertEqual(snapshot(s._secondary), secondary_before)
        self.assertEqual(snapshot(s._primary), "Queue([1, 2, 3, 4])")
        self.assertTrue(s._secondary.is_empty())

    def test_peek_after_pop_leaves_queues_unchanged(self):
        s = StackFromQueues()
        for value in (1, 2, 3, 4):
            s.push(value)
        s.pop()
        s.push(5)
        primary_before = snapshot(s._primary)
        self.assertEqual(s.peek(), 5)
        self.assertEqual(snapshot(s._primary), primary_before)
        self.assertEqual(primary_before, "Queue([1, 2, 3, 5])")

    def test_pop_swaps_roles(self):
        s = StackFromQueues()
        s.push(1)
        s.push(2)
        s.push(3)
        old_primary = s._primary
        old_secondary = s._secondary
        self.assertEqual(s.pop(), 3)
        self.assertIs(s._primary, old_secondary)
        self.assertIs(s._secondary, old_primary)
        self.assertEqual(repr(s._primary), "Queue([1, 2])")
        self.assertTrue(s._secondary.is_empty())

    def test_peek_is_idempotent(self):
        s = StackFromQueues()
        s.push("x")
        s.push("y")
        for _ in range(5):
            self.assertEqual(s.peek(), "y")
            self.assertEqual(s.size(), 2)
        self.assertEqual(s.pop(), "y")
        self.assertEqual(s.pop(), "x")

    def test_single_element(self):
        s = StackFromQueues()
        s.push(42)
        self.assertEqual(s.peek(), 42)
        self.assertEqual(s.pop(), 42)
        self.assertTrue(s.is_empty())

    def test_interleaved_push_pop_peek(self):
        s = StackFromQueues()
        s.push(1)
        s.push(2)
        self.assertEqual(s.pop(), 2)
        s.push(3)
        self.assertEqual(s.peek(), 3)
        s.push(4)
        self.assertEqual(s.pop(), 4)
        self.assertEqual(s.pop(), 3)
        self.assertEqual(s.pop(), 1)
        self.assertIsNone(s.pop())

    def test_none_can_be_stored(self):
        s = StackFromQueues()
        s.push(1)
        s.push(None)
        self.assertIsNone(s.peek())
        self.assertEqual(s.size(), 2)
        self.assertIsNone(s.pop())
        self.assertEqual(s.pop(), 1)

    def test_clear_and_reuse(self):
        s = StackFromQueues()
        s.push(1)
        s.push(2)
        s.peek()
        s.clear()
        self.assertTrue(s.is_empty())
        s.push(3)
        self.assertEqual(s.pop(), 3)

    def test_copy_is_independent(self):
        s = StackFromQueues()
        for i in range(4):
            s.push(i)
        clone = s.copy()
        s.pop()
        s.pop()
        self.assertEqual(clone.size(), 4)
        self.assertEqual([clone.pop() for _ in range(4)], [3, 2, 1, 0])

    def test_repr_and_dunders(self):
        s = StackFromQueues()
        s.push(1)
        s.push(2)
        self.assertEqual(repr(s), "StackFromQueues([1, 2])")
        self.assertEqual(str(s), "StackFromQueues(size=2)")
        self.assertEqual(len(s), 2)
        self.assertTrue(s)

    def test_rotation_is_logged_at_debug(self):
        s = StackFromQueues()
        for i in range(3):
            s.push(i)
        with self.assertLogs("stackqueue.stack_from_queues", level="DEBUG") as captured:
            s.pop()
        self.assertIn("rotating 2 elements", captured.output[0])


if __name__ == "__main__":
    unittest.main()
