import sys
import unittest
from collections import deque
from lookahead_iter import LookaheadIter, SizeHinted
from lookahead_iter.size_hint import add_buffered, checked_add, saturating_add


class Hinted:
    def __init__(self, items, hint):
        self.it = iter(items)
        self.hint = hint

    def __iter__(self):
        return self

    def __next__(self):
        return next(self.it)

    def size_hint(self):
        return self.hint


def gen(items):
    yield from items


class TestSizeHint(unittest.TestCase):

    def test_exact_source(self):
        it = LookaheadIter([1, 2])
        self.assertTrue(it.exact)
        self.assertEqual((2, 2), it.size_hint())
        self.assertEqual(1, it.advance())
        self.assertEqual((1, 1), it.size_hint())
        self.assertEqual(2, it.advance())
        self.assertEqual((0, 0), it.size_hint())
        self.assertIsNone(it.advance())
        self.assertEqual((0, 0), it.size_hint())

    def test_exact_source_with_buffer(self):
        it = LookaheadIter(iter(range(5)))
        self.assertEqual((5, 5), it.size_hint())
        it.peek_many(3)
        self.assertEqual((5, 5), it.size_hint())
        it.advance()
        it.advance_if_eq(7)
        self.assertEqual((4, 4), it.size_hint())
        self.assertEqual(4, len(list(it)))

    def test_exact_collections(self):
        for source in ['abc', 'hé!', b'abc', (1, 2, 3), {1, 2, 3}, {1: 1, 2: 2, 3: 3}, deque([1, 2, 3]),
                       reversed([1, 2, 3])]:
            with self.subTest(source=source):
                it = LookaheadIter(source)
                self.assertTrue(it.exact)
                it.peek()
                self.assertEqual((3, 3), it.size_hint())

    def test_unknown_upper_bound(self):
        it = LookaheadIter(gen([1, 2]))
        self.assertFalse(it.exact)
        self.assertEqual((0, None), it.size_hint())
        self.assertEqual(1, it.peek())
        self.assertEqual(1, it.peek_at(0))
        self.assertEqual((1, None), it.size_hint())
        self.assertEqual([1, 2, None], it.peek_many(3))
        self.assertEqual((2, None), it.size_hint())
        self.assertEqual(1, it.advance())
        self.assertEqual((1, None), it.size_hint())
        self.assertEqual(2, it.advance())
        self.assertEqual((0, None), it.size_hint())

    def test_size_hinted_source(self):
        source = Hinted([1, 2, 3], (1, 10))
        self.assertIsInstance(source, SizeHinted)
        it = LookaheadIter(source)
        it.peek_many(2)
        self.assertEqual((3, 12), it.size_hint())
        self.assertFalse(it.exact)

    def test_size_hint_attribute_is_ignored(self):
        class AttrSource:
            size_hint = 5
            def __init__(self, items):
                self.it = iter(items)
            def __iter__(self):
                return self
            def __next__(self):
                return next(self.it)
        it = LookaheadIter(AttrSource([1, 2]))
        self.assertFalse(it.exact)
        self.assertEqual((0, None), it.size_hint())
        self.assertEqual([1, 2], list(it))

    def test_explicit_size_hint(self):
        it = LookaheadIter(gen([1, 2]), size_hint=lambda: (0, 2))
        it.peek()
        self.assertEqual((1, 3), it.size_hint())

    def test_overflow(self):
        it = LookaheadIter(Hinted([1, 2], (sys.maxsize, sys.maxsize)))
        self.assertEqual((sys.maxsize, sys.maxsize), it.size_hint())
        it.peek()
        self.assertEqual((sys.maxsize, None), it.size_hint())

    def test_huge_range(self):
        it = LookaheadIter(range(sys.maxsize * 2))
        self.assertEqual((sys.maxsize, None), it.size_hint())

    def test_nested(self):
        inner = LookaheadIter([1, 2, 3])
        inner.peek_many(2)
        outer = LookaheadIter(inner)
        outer.peek()
        self.assertEqual((3, 3), outer.size_hint())
        self.assertTrue(outer.exact)

    def test_length_hint(self):
        it = LookaheadIter(gen([1, 2, 3]))
        it.peek_many(2)
        self.assertEqual(2, it.__length_hint__())
        self.assertEqual([1, 2, 3], list(it))

    def test_arithmetic(self):
        self.assertEqual(5, saturating_add(2, 3))
        self.assertEqual(sys.maxsize, saturating_add(sys.maxsize, 1))
        self.assertEqual(5, checked_add(2, 3))
        self.assertIsNone(checked_add(None, 3))
        self.assertIsNone(checked_add(sys.maxsize, 1))
        self.assertEqual((4, None), add_buffered((1, None), 3))
        self.assertEqual((4, 6), add_buffered((1, 3), 3))
