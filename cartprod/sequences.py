"""Source sequences consumed by Cartesian products.

A product needs three things from each of its sources: pulling the next
item, duplicating the sequence at its current position without replaying any
production that already happened, and a best-effort estimate of what is left.
``SourceSequence`` names that interface; the adapters below provide it for
Python sequences, arbitrary iterables, and unbounded counters.
"""

from __future__ import annotations

import itertools
from abc import abstractmethod
from collections.abc import Iterable, Iterator, MutableSequence, Sequence, Sized
from typing import Any

from cartprod.errors import SequenceError
from cartprod.size_hint import USIZE_MAX, SizeHint, checked_add, saturating_add


class SourceSequence[T](Iterator[T]):
    """Abstract base class for duplicable, self-estimating iterators.

    Subclasses implement ``__next__`` (raising ``StopIteration`` once
    exhausted), ``duplicate`` and ``remaining_estimate``.
    """

    @abstractmethod
    def duplicate(self) -> SourceSequence[T]:
        """Return an independent sequence positioned where this one is.

        Returns
        -------
        SourceSequence[T]
            Sequence that yields the same remaining items as this one.
        """

    @abstractmethod
    def remaining_estimate(self) -> SizeHint:
        """Return bounds on the number of items left.

        Returns
        -------
        SizeHint
            Lower bound and optional upper bound.
        """


class SliceSequence[T](SourceSequence[T]):
    """Sequence over an indexable collection such as a tuple or range.

    Duplicates share the underlying collection and copy only the index, so
    duplication is O(1) and estimates are exact.

    Parameters
    ----------
    items : Sequence[T]
        Collection to walk.
    start : int
        Index of the first item to yield.

    Raises
    ------
    SequenceError
        If ``start`` is negative.

    Examples
    --------
    >>> seq = SliceSequence(range(3))
    >>> next(seq)
    0
    >>> seq.duplicate().remaining_estimate()
    SizeHint(lower=2, upper=2)
    """

    def __init__(self, items: Sequence[T], start: int = 0) -> None:
        if start < 0:
            raise SequenceError(f"start index must be non-negative, got {start}")
        self._items = items
        self._position = start

    def __next__(self) -> T:
        position = self._position
        if position >= len(self._items):
            raise StopIteration
        self._position = position + 1
        return self._items[position]

    def duplicate(self) -> SliceSequence[T]:
        return SliceSequence(self._items, self._position)

    def remaining_estimate(self) -> SizeHint:
        return SizeHint.exact(max(len(self._items) - self._position, 0))


class TeeSequence[T](SourceSequence[T]):
    """Sequence over an arbitrary iterable, duplicated with ``itertools.tee``.

    Items are produced by the wrapped iterable at most once; duplicates
    replay them from the tee buffer. The buffer keeps every item that one
    duplicate has seen and another has not, so a long-lived duplicate that
    never advances holds on to everything pulled since it was made.

    Parameters
    ----------
    iterable : Iterable[T]
        Items to yield.
    size : int | None
        Total number of items, if known. Taken from ``len(iterable)`` when the
        iterable is sized and no size is given.

    Examples
    --------
    >>> seq = TeeSequence(x * x for x in range(3))
    >>> copy = seq.duplicate()
    >>> list(seq), list(copy)
    ([0, 1, 4], [0, 1, 4])
    """

    def __init__(self, iterable: Iterable[T], size: int | None = None) -> None:
        if size is None and isinstance(iterable, Sized):
            size = len(iterable)
        if size is not None and size < 0:
            raise SequenceError(f"size must be non-negative, got {size}")
        self._iterator: Iterator[T] = iter(iterable)
        self._size = size
        self._pulled = 0

    def __next__(self) -> T:
        item = next(self._iterator)
        self._pulled += 1
        return item

    def duplicate(self) -> TeeSequence[T]:
        self._iterator, branch = itertools.tee(self._iterator)
        copy: TeeSequence[T] = TeeSequence(branch, self._size)
        copy._pulled = self._pulled
        return copy

    def remaining_estimate(self) -> SizeHint:
        if self._size is None:
            return SizeHint.unknown()
        return SizeHint.exact(max(self._size - self._pulled, 0))


class CountSequence(SourceSequence[Any]):
    """Unbounded arithmetic progression, like ``itertools.count``.

    Parameters
    ----------
    start : int | float
        First value.
    step : int | float
        Difference between consecutive values.

    Examples
    --------
    >>> seq = CountSequence(10, 5)
    >>> next(seq), next(seq)
    (10, 15)
    >>> seq.remaining_estimate().upper is None
    True
    """

    def __init__(self, start: int | float = 0, step: int | float = 1) -> None:
        self._current = start
        self._step = step

    def __next__(self) -> int | float:
        value = self._current
        self._current = value + self._step
        return value

    def duplicate(self) -> CountSequence:
        return CountSequence(self._current, self._step)

    def remaining_estimate(self) -> SizeHint:
        return SizeHint(USIZE_MAX, None)


# buffer states of a Lookahead
_PENDING = object()
_EXHAUSTED = object()


class Lookahead[T](SourceSequence[T]):
    """One-slot lookahead cursor over a source sequence.

    ``peek`` fetches the current item into the buffer without consuming it;
    ``next`` hands the buffered item out and clears the buffer. Once the
    source is exhausted the cursor stays exhausted without pulling again.

    Parameters
    ----------
    source : SourceSequence[T]
        Sequence to look ahead into. The cursor takes ownership of it.

    Examples
    --------
    >>> cursor = Lookahead(SliceSequence("ab"))
    >>> cursor.peek(), cursor.peek()
    ('a', 'a')
    >>> next(cursor), cursor.peek()
    ('a', 'b')
    """

    def __init__(self, source: SourceSequence[T]) -> None:
        self._source = source
        self._buffer: Any = _PENDING

    def peek(self) -> T:
        """Return the current item without consuming it.

        Raises
        ------
        StopIteration
            If the source is exhausted.
        """
        if self._buffer is _PENDING:
            try:
                self._buffer = next(self._source)
            except StopIteration:
                self._buffer = _EXHAUSTED
        if self._buffer is _EXHAUSTED:
            raise StopIteration
        return self._buffer

    def has_current(self) -> bool:
        """Return whether a current item exists."""
        try:
            self.peek()
        except StopIteration:
            return False
        return True

    def __next__(self) -> T:
        item = self.peek()
        self._buffer = _PENDING
        return item

    def duplicate(self) -> Lookahead[T]:
        copy = Lookahead(self._source.duplicate())
        copy._buffer = self._buffer
        return copy

    def remaining_estimate(self) -> SizeHint:
        if self._buffer is _EXHAUSTED:
            return SizeHint.exact(0)
        hint = self._source.remaining_estimate()
        if self._buffer is _PENDING:
            return hint
        return SizeHint(saturating_add(hint.lower, 1), checked_add(hint.upper, 1))


def as_sequence[T](obj: Iterable[T]) -> SourceSequence[T]:
    """Coerce an iterable to a ``SourceSequence``.

    Source sequences are returned unchanged. Mutable sequences are
    snapshotted into a tuple so later changes by the caller cannot leak into
    an enumeration; other sequences (tuples, ranges, strings) are wrapped
    without copying. Any other iterable is wrapped in a ``TeeSequence``.

    Parameters
    ----------
    obj : Iterable[T]
        Object to coerce.

    Returns
    -------
    SourceSequence[T]
        Sequence yielding the items of ``obj``.

    Raises
    ------
    TypeError
        If ``obj`` is not iterable.

    Examples
    --------
    >>> type(as_sequence([1, 2])).__name__
    'SliceSequence'
    >>> type(as_sequence(iter([1, 2]))).__name__
    'TeeSequence'
    """
    if isinstance(obj, SourceSequence):
        return obj
    if isinstance(obj, MutableSequence):
        return SliceSequence(tuple(obj))
    if isinstance(obj, Sequence):
        return SliceSequence(obj)
    if isinstance(obj, Iterable):
        return TeeSequence(obj)
    raise TypeError(f"cannot build a source sequence from {type(obj).__name__}")
