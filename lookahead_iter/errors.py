"""Exceptions and warnings raised by lookahead_iter."""


class StaleSlotError(LookupError):
    """Raised when a :class:`~lookahead_iter.Slot` refers to an element that has already been consumed."""


class LookaheadWarning(UserWarning):
    """Base class of warnings issued by lookahead_iter."""


class NonFusedSourceWarning(LookaheadWarning):
    """Issued when a wrapped iterator produces elements again after it signalled exhaustion.

    Such iterators are considered broken by the Python iterator protocol. The elements are still passed through,
    so the wrapper is exactly as (non-)fused as the iterator it wraps.
    """
