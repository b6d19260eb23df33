"""``lookahead-iter`` wraps any iterator so that any number of future elements can be peeked at without consuming them.

Example::

    import lookahead_iter

    it = lookahead_iter.wrap(tokens)
    if it.peek_at(1) == '=':
        name = it.advance()
"""

__version__ = '0.3.0'

from lookahead_iter import errors, size_hint
from lookahead_iter.errors import LookaheadWarning, NonFusedSourceWarning, StaleSlotError
from lookahead_iter.lookahead import LookaheadIter, wrap
from lookahead_iter.size_hint import SizeHinted
from lookahead_iter.slot import Slot

__all__ = [
    'LookaheadIter',
    'LookaheadWarning',
    'NonFusedSourceWarning',
    'SizeHinted',
    'Slot',
    'StaleSlotError',
    'errors',
    'size_hint',
    'wrap',
]
