"""Bounds on the number of elements an iterator has left to produce."""

import sys
from collections import deque
from typing import Any, Callable, Iterator, Optional, Protocol, Tuple, runtime_checkable

SizeHint = Tuple[int, Optional[int]]
SizeHintFn = Callable[[], SizeHint]

MAX_SIZE = sys.maxsize
UNKNOWN: SizeHint = (0, None)

# CPython iterators whose __length_hint__ is the exact number of remaining elements
_EXACT_ITERATOR_TYPES = frozenset(type(it) for it in (
    iter([]),
    iter(()),
    iter(range(0)),
    iter(range(MAX_SIZE + 1)), # longrange_iterator
    iter(''),
    iter('\u00e9'), # non-ascii str iterator
    iter(b''),
    iter(bytearray()),
    iter({}),
    iter({}.values()),
    iter({}.items()),
    iter(set()),
    iter(deque()),
    reversed([]),
    reversed(()),
    reversed(range(0)),
))


@runtime_checkable
class SizeHinted(Protocol):
    """A source that reports its own remaining-length bounds.

    ``size_hint()`` returns ``(lower, upper)``, where ``upper`` is ``None`` when unknown. The lower bound must be a
    true lower bound on the number of elements produced before exhaustion; the upper bound is only an estimate.
    """
    def size_hint(self) -> SizeHint:
        """Return ``(lower, upper)`` bounds on the remaining number of elements."""


def source_size_hint(source: Any, it: Iterator) -> SizeHintFn:
    """Build a function that reports the remaining-length bounds of a wrapped source.

    Args:
        source: the object originally given to the wrapper.
        it: the iterator obtained from ``source``, which is the one actually consumed.

    Returns:
        A function returning ``(lower, upper)``. Sources implementing :class:`SizeHinted` are asked directly;
        CPython's built-in collection iterators (lists, tuples, ranges, dicts, ...) report their exact length;
        everything else reports ``(0, None)``.
    """
    for obj in (source, it):
        # a non-callable size_hint attribute is ignored
        if callable(getattr(obj, 'size_hint', None)):
            return obj.size_hint
    if type(it) in _EXACT_ITERATOR_TYPES:
        def _exact() -> SizeHint:
            n = it.__length_hint__()
            return (n, n)
        return _exact
    return _unknown


def _unknown() -> SizeHint:
    return UNKNOWN


def saturating_add(a: int, b: int) -> int:
    """Add ``a`` and ``b``, clamping the result at :data:`MAX_SIZE`."""
    return min(a + b, MAX_SIZE)


def checked_add(a: Optional[int], b: int) -> Optional[int]:
    """Add ``a`` and ``b``; ``None`` if ``a`` is unknown or the sum does not fit in :data:`MAX_SIZE`."""
    if a is None:
        return None
    result = a + b
    if result > MAX_SIZE:
        return None
    return result


def add_buffered(hint: SizeHint, buffered: int) -> SizeHint:
    """Extend a source's bounds by ``buffered`` elements that were already pulled from it."""
    lo, hi = hint
    return saturating_add(lo, buffered), checked_add(hi, buffered)
