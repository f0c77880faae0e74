"""Test source sequences and lookahead cursors."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from cartprod.errors import SequenceError
from cartprod.sequences import (
    CountSequence,
    Lookahead,
    SliceSequence,
    SourceSequence,
    TeeSequence,
    as_sequence,
)
from cartprod.size_hint import USIZE_MAX


class TestSliceSequence:
    """Tests for SliceSequence."""

    def test_yields_items(self) -> None:
        """Test items are yielded in order."""
        assert list(SliceSequence((1, 2, 3))) == [1, 2, 3]

    def test_start_offset(self) -> None:
        """Test iteration begins at the start index."""
        assert list(SliceSequence("abcd", start=2)) == ["c", "d"]

    def test_negative_start(self) -> None:
        """Test a negative start index is rejected."""
        with pytest.raises(SequenceError, match="non-negative"):
            SliceSequence([1], start=-1)

    def test_duplicate_is_independent(self) -> None:
        """Test duplicates advance independently."""
        seq = SliceSequence(range(3))
        next(seq)
        copy = seq.duplicate()

        assert list(copy) == [1, 2]
        assert list(seq) == [1, 2]

    def test_estimate_is_exact(self) -> None:
        """Test estimates track consumption exactly."""
        seq = SliceSequence(range(3))
        assert seq.remaining_estimate() == (3, 3)
        next(seq)
        assert seq.remaining_estimate() == (2, 2)
        list(seq)
        assert seq.remaining_estimate() == (0, 0)


class TestTeeSequence:
    """Tests for TeeSequence."""

    def test_duplicate_replays_without_reproducing(self) -> None:
        """Test duplicates see the same items and the source runs once."""
        produced: list[int] = []

        def source() -> Iterator[int]:
            for value in range(3):
                produced.append(value)
                yield value

        seq = TeeSequence(source())
        next(seq)
        copy = seq.duplicate()

        assert list(copy) == [1, 2]
        assert list(seq) == [1, 2]
        assert produced == [0, 1, 2]

    def test_estimate_unsized(self) -> None:
        """Test unsized iterables give an unknown estimate."""
        seq = TeeSequence(iter([1, 2]))

        assert seq.remaining_estimate() == (0, None)

    def test_estimate_sized(self) -> None:
        """Test sized iterables give an exact estimate that tracks pulls."""
        seq = TeeSequence({"a", "b", "c"})
        next(seq)
        copy = seq.duplicate()

        assert seq.remaining_estimate() == (2, 2)
        assert copy.remaining_estimate() == (2, 2)

    def test_explicit_size(self) -> None:
        """Test an explicit size overrides the unknown default."""
        seq = TeeSequence(iter("ab"), size=2)

        assert seq.remaining_estimate() == (2, 2)

    def test_negative_size(self) -> None:
        """Test a negative size is rejected."""
        with pytest.raises(SequenceError):
            TeeSequence(iter(()), size=-1)


class TestCountSequence:
    """Tests for CountSequence."""

    def test_counts(self) -> None:
        """Test values follow start and step."""
        seq = CountSequence(3, -2)

        assert [next(seq) for _ in range(3)] == [3, 1, -1]

    def test_duplicate_continues_from_position(self) -> None:
        """Test duplicates continue from the current value."""
        seq = CountSequence()
        next(seq)
        copy = seq.duplicate()

        assert next(copy) == 1
        assert next(seq) == 1

    def test_estimate_is_unbounded(self) -> None:
        """Test the estimate is saturated with an unknown upper bound."""
        assert CountSequence().remaining_estimate() == (USIZE_MAX, None)


class TestLookahead:
    """Tests for the one-slot lookahead cursor."""

    def test_peek_does_not_consume(self) -> None:
        """Test repeated peeks return the same item."""
        cursor = Lookahead(SliceSequence([1, 2]))

        assert cursor.peek() == 1
        assert cursor.peek() == 1
        assert next(cursor) == 1
        assert cursor.peek() == 2

    def test_peek_exhausted(self) -> None:
        """Test peeking an exhausted cursor raises StopIteration."""
        cursor = Lookahead(SliceSequence([]))

        assert not cursor.has_current()
        with pytest.raises(StopIteration):
            cursor.peek()

    def test_exhausted_source_is_not_pulled_again(self) -> None:
        """Test an exhausted cursor stops pulling from its source."""
        pulls: list[int] = []

        class Flaky(SliceSequence[int]):
            def __next__(self) -> int:
                pulls.append(1)
                return super().__next__()

        cursor = Lookahead(Flaky([]))
        cursor.has_current()
        cursor.has_current()

        assert len(pulls) == 1

    def test_estimate_includes_buffered_item(self) -> None:
        """Test the buffered item counts towards the estimate."""
        cursor = Lookahead(SliceSequence([1, 2, 3]))
        assert cursor.remaining_estimate() == (3, 3)
        cursor.peek()
        assert cursor.remaining_estimate() == (3, 3)
        next(cursor)
        assert cursor.remaining_estimate() == (2, 2)

    def test_estimate_exhausted(self) -> None:
        """Test an exhausted cursor reports zero."""
        cursor = Lookahead(TeeSequence(iter(())))
        cursor.has_current()

        assert cursor.remaining_estimate() == (0, 0)

    def test_duplicate_copies_buffer(self) -> None:
        """Test duplicates keep the buffered item."""
        cursor = Lookahead(TeeSequence(iter([1, 2])))
        cursor.peek()
        copy = cursor.duplicate()

        assert list(copy) == [1, 2]
        assert list(cursor) == [1, 2]


class TestAsSequence:
    """Tests for as_sequence."""

    def test_source_sequence_passthrough(self) -> None:
        """Test source sequences are returned unchanged."""
        seq = CountSequence()

        assert as_sequence(seq) is seq

    def test_list_is_snapshotted(self) -> None:
        """Test lists are copied so later mutation does not leak."""
        items = [1, 2]
        seq = as_sequence(items)
        items.append(3)

        assert list(seq) == [1, 2]

    def test_range_wraps_without_copy(self) -> None:
        """Test immutable sequences are wrapped in a SliceSequence."""
        seq = as_sequence(range(3))

        assert isinstance(seq, SliceSequence)
        assert seq.remaining_estimate() == (3, 3)

    def test_iterator_is_teed(self) -> None:
        """Test plain iterators are wrapped in a TeeSequence."""
        assert isinstance(as_sequence(iter([1])), TeeSequence)

    def test_not_iterable(self) -> None:
        """Test non-iterables are rejected."""
        with pytest.raises(TypeError, match="int"):
            as_sequence(42)  # type: ignore[arg-type]

    def test_results_are_source_sequences(self) -> None:
        """Test every adapter satisfies the SourceSequence interface."""
        for obj in ([1], (1,), "a", iter([1]), {1}):
            assert isinstance(as_sequence(obj), SourceSequence)
