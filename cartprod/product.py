"""Lazy Cartesian products of homogeneous sequences.

``HomCartProd`` enumerates every tuple that picks one item from each of its
sources, in lexicographic odometer order: the first source is the most
significant digit and the last source changes on every step. Nothing is
materialized; each source is walked by a cursor and, except for the first,
restarted from a saved origin whenever the digit to its left carries.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from cartprod.errors import ArityError
from cartprod.sequences import Lookahead, SourceSequence, as_sequence
from cartprod.size_hint import (
    USIZE_MAX,
    SizeHint,
    checked_add,
    checked_mul,
    saturating_add,
    saturating_mul,
)

logger = logging.getLogger(__name__)


def _take_ownership[T](source: Iterable[T]) -> SourceSequence[T]:
    # a caller-held SourceSequence is duplicated so later pulls through the
    # caller's handle cannot move our cursors
    if isinstance(source, SourceSequence):
        return source.duplicate()
    return as_sequence(source)


class HomCartProd[T](Iterator[tuple[T, ...]]):
    """Cartesian product of two or more sequences of the same item type.

    Repeated items in a source are treated as distinct, so they show up as
    repeated tuples in the product. The iterator is a single forward pass:
    once it raises ``StopIteration`` it keeps raising it. Instances are not
    thread-safe; enumerate concurrently with independent instances over
    independently duplicated sources.

    Parameters
    ----------
    *sources : Iterable[T]
        Source sequences, most significant first. Plain iterables are wrapped
        with ``as_sequence``.
    max_count : int
        Largest representable count. Size estimates saturate (lower bound) or
        become unknown (upper bound) beyond it.

    Raises
    ------
    ArityError
        If fewer than two sources are given.
    ValueError
        If ``max_count`` is smaller than 1.

    Examples
    --------
    >>> list(HomCartProd([0, 1], [0, 1]))
    [(0, 0), (0, 1), (1, 0), (1, 1)]
    >>> it = HomCartProd(range(4), range(3), range(2))
    >>> it.remaining_estimate()
    SizeHint(lower=24, upper=24)
    >>> for a, b, c in it:
    ...     pass
    >>> (a, b, c)
    (3, 2, 1)
    """

    def __init__(self, *sources: Iterable[T], max_count: int = USIZE_MAX) -> None:
        if len(sources) < 2:
            raise ArityError("at least 2", len(sources))
        if max_count < 1:
            raise ValueError(f"max_count must be at least 1, got {max_count}")

        sequences = [_take_ownership(source) for source in sources]
        self._max_count = max_count

        # origin k restarts position k + 1; the first position is walked once
        self._origins: list[SourceSequence[T]] = sequences[1:]
        self._heads: list[Lookahead[T]] = [Lookahead(sequences[0])]
        self._heads.extend(
            Lookahead(origin.duplicate()) for origin in self._origins[:-1]
        )
        self._last: SourceSequence[T] = self._origins[-1].duplicate()
        self._exhausted = False

        logger.debug("Created %d-ary product", len(sequences))

    @property
    def arity(self) -> int:
        """Number of source sequences."""
        return len(self._heads) + 1

    def __next__(self) -> tuple[T, ...]:
        if self._exhausted:
            raise StopIteration
        try:
            return self._step()
        except StopIteration:
            self._exhausted = True
            logger.debug("%d-ary product exhausted", self.arity)
            raise

    def _step(self) -> tuple[T, ...]:
        current = [head.peek() for head in self._heads]

        try:
            return (*current, next(self._last))
        except StopIteration:
            pass

        # the last digit overflowed; find the rightmost digit that can carry
        for position in reversed(range(len(self._heads))):
            head = self._heads[position]
            next(head)
            if head.has_current():
                return self._carry(position, current)

        raise StopIteration

    def _carry(self, position: int, current: list[T]) -> tuple[T, ...]:
        logger.debug("Carry into position %d", position + 1)

        values = current[:position]
        values.append(self._heads[position].peek())
        for index in range(position + 1, len(self._heads)):
            self._heads[index] = Lookahead(self._origins[index - 1].duplicate())
            values.append(self._heads[index].peek())

        self._last = self._origins[-1].duplicate()
        values.append(next(self._last))
        return tuple(values)

    def remaining_estimate(self) -> SizeHint:
        """Return bounds on the number of tuples still to be produced.

        The count is positional: with ``c_i`` items left at head position
        ``i`` (its current item included), ``r`` items left at the last
        position and ``n_j`` the full length of source ``j``, the remaining
        count is ``r + sum((c_i - 1) * prod(n_j for j > i))``. Before the
        first step this equals the product of the sources' lengths. It is
        deliberately not the product of the live cursors' estimates, which
        undercounts once enumeration has started. Lower
        bounds combine with saturating arithmetic and upper bounds with
        checked arithmetic, so an unknown or overflowing upper bound makes
        the result's upper bound unknown.

        Returns
        -------
        SizeHint
            Lower bound and optional upper bound.

        Examples
        --------
        >>> it = HomCartProd([0, 1], [0, 1])
        >>> _ = next(it)
        >>> it.remaining_estimate()
        SizeHint(lower=3, upper=3)
        """
        if self._exhausted:
            return SizeHint.exact(0)

        limit = self._max_count
        heads = [head.remaining_estimate() for head in self._heads]
        if any(hint.upper == 0 for hint in heads):
            return SizeHint.exact(0)

        last = self._last.remaining_estimate()
        lower = min(last.lower, limit)
        upper = last.upper if last.upper is None or last.upper <= limit else None
        weight_lower = 1
        weight_upper: int | None = 1

        for position in reversed(range(len(heads))):
            total = self._origins[position].remaining_estimate()
            weight_lower = saturating_mul(weight_lower, total.lower, limit)
            weight_upper = checked_mul(weight_upper, total.upper, limit)

            hint = heads[position]
            if hint.lower > 1:
                lower = saturating_add(
                    lower, saturating_mul(hint.lower - 1, weight_lower, limit), limit
                )
            if hint.upper != 1:
                later = None if hint.upper is None else hint.upper - 1
                upper = checked_add(upper, checked_mul(later, weight_upper, limit), limit)

        # an empty head makes the whole product empty
        if any(hint.lower == 0 for hint in heads):
            lower = 0
        return SizeHint(lower, upper)

    def size_hint(self) -> SizeHint:
        """Alias of ``remaining_estimate``."""
        return self.remaining_estimate()

    def __length_hint__(self) -> int:
        return self.remaining_estimate().lower


class Hom2CartProd[T](HomCartProd[T]):
    """Cartesian product of exactly two sequences.

    Raises
    ------
    ArityError
        If not given exactly two sources.

    Examples
    --------
    >>> list(Hom2CartProd("ab", "xy"))
    [('a', 'x'), ('a', 'y'), ('b', 'x'), ('b', 'y')]
    """

    def __init__(self, *sources: Iterable[T], max_count: int = USIZE_MAX) -> None:
        if len(sources) != 2:
            raise ArityError("2", len(sources))
        super().__init__(*sources, max_count=max_count)


class Hom3CartProd[T](HomCartProd[T]):
    """Cartesian product of exactly three sequences.

    Raises
    ------
    ArityError
        If not given exactly three sources.

    Examples
    --------
    >>> it = Hom3CartProd(range(2), range(2), range(2))
    >>> next(it), next(it), next(it)
    ((0, 0, 0), (0, 0, 1), (0, 1, 0))
    """

    def __init__(self, *sources: Iterable[T], max_count: int = USIZE_MAX) -> None:
        if len(sources) != 3:
            raise ArityError("3", len(sources))
        super().__init__(*sources, max_count=max_count)


def cart_prod[T](*iterables: Iterable[T], max_count: int = USIZE_MAX) -> HomCartProd[T]:
    """Return a lazy Cartesian product of ``iterables``.

    Same order as ``itertools.product``, but sources are neither materialized
    nor fully consumed up front, so the first source may be unbounded.

    Parameters
    ----------
    *iterables : Iterable[T]
        At least two source sequences.
    max_count : int
        Largest representable count for size estimates.

    Returns
    -------
    HomCartProd[T]
        Iterator over the product tuples.

    Examples
    --------
    >>> from cartprod.sequences import CountSequence
    >>> it = cart_prod(CountSequence(), "ab")
    >>> [next(it) for _ in range(3)]
    [(0, 'a'), (0, 'b'), (1, 'a')]
    """
    return HomCartProd(*iterables, max_count=max_count)
