"""An iterator wrapper that can look ahead any number of elements."""

from collections import deque
from typing import Any, Callable, Deque, Generic, Iterable, Iterator, List, Optional, TypeVar, Union
from warnings import warn

from deprecated import deprecated

from lookahead_iter.errors import NonFusedSourceWarning
from lookahead_iter.size_hint import SizeHint, SizeHintFn, add_buffered, source_size_hint
from lookahead_iter.slot import Slot

T = TypeVar('T')

_EXHAUSTED = object()

_ALIAS_VERSION = '0.3.0'


class LookaheadIter(Generic[T]):
    """An iterator that allows peeking at any number of future elements without consuming them.

    .. versionadded:: 0.1.0

    Elements pulled from the wrapped iterator to satisfy a peek are kept in a buffer, and are handed out by
    :meth:`advance` (or ``next()``) before anything else is pulled. The wrapped iterator is never advanced further
    than the largest lookahead requested so far.

    Absence of an element is signalled by returning ``default`` (``None`` unless given), never by raising. Only
    ``next()`` raises ``StopIteration``, as the iterator protocol requires.

    Example::

        it = LookaheadIter(tokenize(text))
        if it.peek_many(2) == ['(', ')']:
            ...
        while it.advance_if(str.isspace) is not None:
            pass
    """
    def __init__(self, base: Union[Iterator[T], Iterable[T]], *, size_hint: Optional[SizeHintFn] = None):
        """Create a LookaheadIter from an iterator or iterable.

        Args:
            base: the iterator or iterable to wrap. The wrapper takes ownership of it; the iterator should not be
                advanced by anything else afterwards.
            size_hint: an optional function returning ``(lower, upper)`` bounds on the number of elements ``base``
                has left. By default, the bounds are discovered from ``base`` (see :meth:`size_hint`).
        """
        self.base = iter(base)
        self._buffer: Deque[T] = deque()
        self._consumed = 0
        self._exhausted = False
        self._warned_non_fused = False
        if size_hint is None:
            size_hint = source_size_hint(base, self.base)
        assert callable(size_hint), "size_hint must be a function returning (lower, upper)"
        self._source_size_hint = size_hint

    def __getattr__(self, attr: str):
        if attr.startswith('_'):
            raise AttributeError(attr)
        return getattr(self.base, attr)

    def __iter__(self) -> 'LookaheadIter[T]':
        return self

    def __next__(self) -> T:
        item = self.advance(_EXHAUSTED)
        if item is _EXHAUSTED:
            raise StopIteration
        return item

    def __bool__(self) -> bool:
        return self.has_more()

    def __length_hint__(self) -> int:
        return self.size_hint()[0]

    def __repr__(self):
        return f'{self.__class__.__name__}(buffer={list(self._buffer)!r}, base={self.base!r})'

    def _pull(self) -> Any:
        item = next(self.base, _EXHAUSTED)
        if item is _EXHAUSTED:
            self._exhausted = True
        elif self._exhausted and not self._warned_non_fused:
            warn(f'{self.base!r} produced an element after signalling exhaustion', NonFusedSourceWarning)
            self._warned_non_fused = True
        return item

    def _fill(self, count: int) -> int:
        # pull until the buffer holds count elements or the base runs out; returns the buffer length
        buffer = self._buffer
        while len(buffer) < count:
            item = self._pull()
            if item is _EXHAUSTED:
                break
            buffer.append(item)
        return len(buffer)

    def advance(self, default: Any = None) -> Union[T, Any]:
        """Consume and return the next element, or ``default`` if there are none left.

        This is the only operation that removes elements from the sequence.
        """
        if self._buffer:
            item = self._buffer.popleft()
        else:
            item = self._pull()
            if item is _EXHAUSTED:
                return default
        self._consumed += 1
        return item

    def size_hint(self) -> SizeHint:
        """Return ``(lower, upper)`` bounds on the number of elements left, including buffered ones.

        The bounds of the wrapped iterator come from the ``size_hint`` function given to the constructor, or from the
        iterator itself: objects with a ``size_hint()`` method are asked directly, built-in collection iterators (of
        lists, tuples, ranges, strings, dicts, sets, ...) report their exact length, and anything else reports
        ``(0, None)``. The lower bound saturates at ``sys.maxsize`` and the upper bound becomes ``None`` if it does
        not fit.
        """
        return add_buffered(self._source_size_hint(), len(self._buffer))

    @property
    def exact(self) -> bool:
        """Whether the bounds reported by :meth:`size_hint` are exact, as they are for the wrapped iterator."""
        lo, hi = self._source_size_hint()
        return lo == hi

    @property
    def buffered(self) -> int:
        """The number of elements pulled from the wrapped iterator that have not been consumed yet."""
        return len(self._buffer)

    def has_more(self) -> bool:
        """Return whether there is another element to consume. May pull one element from the wrapped iterator."""
        return self._fill(1) > 0

    def peek_at(self, index: int, default: Any = None) -> Union[T, Any]:
        """Return the element ``index`` positions ahead without consuming anything.

        ``peek_at(0)`` is the element the next :meth:`advance` returns. Pulls from the wrapped iterator only as much as
        needed to reach ``index``. Returns ``default`` if the sequence ends before ``index`` or ``index`` is negative.
        """
        if index < 0 or self._fill(index + 1) <= index:
            return default
        return self._buffer[index]

    def peek_range(self, start: int, end: int, default: Any = None) -> List[Union[T, Any]]:
        """Return the elements at lookahead indices ``start`` (inclusive) to ``end`` (exclusive).

        Positions past the end of the sequence are filled with ``default``, so the result always has
        ``end - start`` entries. An empty or inverted range gives an empty list; so does a negative bound, in which
        case nothing is pulled.

        Example::

            it = LookaheadIter([1, 2])
            it.peek_range(1, 3) # [2, None]
            it.peek_range(5, 7) # [None, None]
        """
        if start < 0 or end < 0:
            return []
        available = self._fill(max(end, 1))
        return [self._buffer[i] if i < available else default for i in range(start, end)]

    def peek_at_mut(self, index: int) -> Optional[Slot[T]]:
        """Return a :class:`~lookahead_iter.Slot` for modifying the element ``index`` positions ahead in place.

        .. versionadded:: 0.2.0

        Returns ``None`` if the sequence ends before ``index`` or ``index`` is negative. Values assigned through the
        slot are the ones later returned by :meth:`advance`.
        """
        if index < 0 or self._fill(index + 1) <= index:
            return None
        return Slot(self, self._consumed + index)

    def peek(self, default: Any = None) -> Union[T, Any]:
        """Return the next element without consuming it, or ``default`` if there are none left."""
        return self.peek_at(0, default)

    def peek_mut(self) -> Optional[Slot[T]]:
        """Return a :class:`~lookahead_iter.Slot` for the next element, or ``None`` if there are none left."""
        return self.peek_at_mut(0)

    def peek_many(self, n: int, default: Any = None) -> List[Union[T, Any]]:
        """Return the next ``n`` elements without consuming them, padded with ``default``."""
        return self.peek_range(0, n, default)

    def advance_if(self, predicate: Callable[[T], bool], default: Any = None) -> Union[T, Any]:
        """Consume and return the next element if ``predicate`` holds for it.

        Otherwise the element is put back at the front, as the next one to be consumed, and ``default`` is returned.
        The predicate is called exactly once if there is a next element, and not at all otherwise. The element is
        already consumed while the predicate runs, so a predicate that advances this iterator itself sees the
        elements after it.
        """
        assert callable(predicate), "predicate must be callable"
        item = self.advance(_EXHAUSTED)
        if item is _EXHAUSTED:
            return default
        try:
            matched = predicate(item)
        except BaseException:
            self._unconsume(item)
            raise
        if not matched:
            self._unconsume(item)
            return default
        return item

    def _unconsume(self, item: T) -> None:
        self._buffer.appendleft(item)
        self._consumed -= 1

    def advance_if_eq(self, expected: Any, default: Any = None) -> Union[T, Any]:
        """Consume and return the next element if it is equal to ``expected``, otherwise return ``default``."""
        return self.advance_if(lambda item: item == expected, default)

    @deprecated(version=_ALIAS_VERSION, reason='Use has_more() instead.')
    def has_next(self) -> bool:
        """Alias of :meth:`has_more`."""
        return self.has_more()

    @deprecated(version=_ALIAS_VERSION, reason='Use peek_at() instead.')
    def lift(self, index: int, default: Any = None) -> Union[T, Any]:
        """Alias of :meth:`peek_at`."""
        return self.peek_at(index, default)

    @deprecated(version=_ALIAS_VERSION, reason='Use peek_range() instead.')
    def lift_many(self, start: int, end: int, default: Any = None) -> List[Union[T, Any]]:
        """Alias of :meth:`peek_range`."""
        return self.peek_range(start, end, default)

    @deprecated(version=_ALIAS_VERSION, reason='Use peek_at_mut() instead.')
    def lift_mut(self, index: int) -> Optional[Slot[T]]:
        """Alias of :meth:`peek_at_mut`."""
        return self.peek_at_mut(index)

    @deprecated(version=_ALIAS_VERSION, reason='Use advance_if() instead.')
    def next_if(self, predicate: Callable[[T], bool], default: Any = None) -> Union[T, Any]:
        """Alias of :meth:`advance_if`."""
        return self.advance_if(predicate, default)

    @deprecated(version=_ALIAS_VERSION, reason='Use advance_if_eq() instead.')
    def next_if_eq(self, expected: Any, default: Any = None) -> Union[T, Any]:
        """Alias of :meth:`advance_if_eq`."""
        return self.advance_if_eq(expected, default)


def wrap(it: Union[Iterator[T], Iterable[T]], *, size_hint: Optional[SizeHintFn] = None) -> LookaheadIter[T]:
    """Create a LookaheadIter from an iterator or iterable."""
    return LookaheadIter(it, size_hint=size_hint)
