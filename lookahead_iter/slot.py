"""Handles for modifying elements that are buffered but not yet consumed."""

from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from lookahead_iter.errors import StaleSlotError

if TYPE_CHECKING:
    from lookahead_iter.lookahead import LookaheadIter

T = TypeVar('T')


class Slot(Generic[T]):
    """A mutable view of one buffered element of a :class:`~lookahead_iter.LookaheadIter`.

    .. versionadded:: 0.2.0

    Slots are returned by :meth:`~lookahead_iter.LookaheadIter.peek_at_mut` and
    :meth:`~lookahead_iter.LookaheadIter.peek_mut`. A slot addresses an absolute position in the sequence, so it keeps
    pointing at the same element while earlier elements are consumed. Once its own element has been consumed, the slot
    is stale and any access raises :class:`~lookahead_iter.StaleSlotError`.

    Example::

        it = lookahead_iter.wrap(['a', 'b'])
        it.peek_at_mut(1).value = 'B'
        list(it) # ['a', 'B']
    """
    __slots__ = ('_owner', '_position')

    def __init__(self, owner: 'LookaheadIter[T]', position: int):
        self._owner = owner
        self._position = position

    @property
    def index(self) -> int:
        """The current lookahead index of the element (0 is the next element to be consumed)."""
        index = self._position - self._owner._consumed
        if index < 0:
            raise StaleSlotError(f'element at position {self._position} has already been consumed')
        return index

    @property
    def value(self) -> T:
        """The buffered element."""
        return self._owner._buffer[self.index]

    @value.setter
    def value(self, value: T) -> None:
        self._owner._buffer[self.index] = value

    def update(self, fn: Callable[[T], T]) -> T:
        """Replace the buffered element with ``fn(element)`` and return the new value."""
        index = self.index
        self._owner._buffer[index] = fn(self._owner._buffer[index])
        return self._owner._buffer[index]

    @property
    def stale(self) -> bool:
        """Whether the element has already been consumed."""
        return self._position < self._owner._consumed

    def __repr__(self):
        if self.stale:
            return f'<Slot position={self._position} stale>'
        return f'<Slot position={self._position} value={self.value!r}>'
