"""Immutable sets of integers stored as disjoint, non-adjacent closed intervals."""

import bisect
from collections.abc import Iterable, Iterator
from functools import reduce
from typing import TYPE_CHECKING, Any

from typing_extensions import override

from intseq.errors import (
    EmptySequenceError,
    NonMonotonicAppend,
    OverlapError,
    as_result,
)
from intseq.interval import Interval

if TYPE_CHECKING:
    from intseq.factory import SequenceFactory


class Sequence:
    """Ordered set of integers kept as maximal closed intervals.

    Consecutive intervals are separated by at least one missing value
    (``interval[i].end + 1 < interval[i + 1].start``). Every operation returns
    a new sequence built by the same factory as ``self``.
    """

    __slots__ = ("_intervals", "_factory")

    def __init__(self, intervals: Iterable[Any], factory: "SequenceFactory"):
        """Build a sequence from validated, ascending intervals.

        Args:
            intervals: Interval objects (or anything with ``start``/``end``)
            factory: Variant policy every interval must satisfy

        Raises:
            ConstraintViolation: If an interval breaks the factory bounds
            OverlapError: If two consecutive intervals overlap or are adjacent
        """
        validated: list[Interval] = []
        for interval in intervals:
            interval = factory.coerce(interval)
            if validated:
                prev = validated[-1]
                if prev.end + 1 >= interval.start:
                    raise OverlapError(
                        f"Adjacent or overlapping intervals [{prev}] and [{interval}]"
                    )
            validated.append(interval)

        self._intervals: tuple[Interval, ...] = tuple(validated)
        self._factory: "SequenceFactory" = factory

    @property
    def factory(self) -> "SequenceFactory":
        return self._factory

    @property
    def intervals(self) -> tuple[Interval, ...]:
        return self._intervals

    @property
    def interval_count(self) -> int:
        return len(self._intervals)

    def is_empty(self) -> bool:
        return not self._intervals

    def length(self) -> int:
        """Total number of integers in the sequence."""
        return sum(interval.size for interval in self._intervals)

    def first_value(self) -> int:
        if not self._intervals:
            raise EmptySequenceError("Integer sequence is empty")
        return self._intervals[0].start

    def last_value(self) -> int:
        if not self._intervals:
            raise EmptySequenceError("Integer sequence is empty")
        return self._intervals[-1].end

    def values(self) -> Iterator[int]:
        """Yield every integer in the sequence in ascending order."""
        for interval in self._intervals:
            yield from range(interval.start, interval.end + 1)

    def contains(self, item: "int | Sequence") -> bool:
        """Membership test for a single value, subset test for a sequence."""
        if isinstance(item, Sequence):
            return self._contains_sequence(item)
        idx = bisect.bisect_right(self._intervals, item, key=lambda ivl: ivl.start)
        return idx > 0 and self._intervals[idx - 1].end >= item

    def _contains_sequence(self, other: "Sequence") -> bool:
        mine, theirs = self._intervals, other._intervals
        i = j = 0
        while i < len(mine) and j < len(theirs):
            if mine[i].end < theirs[j].start:
                i += 1
            elif mine[i].start > theirs[j].start or mine[i].end < theirs[j].end:
                return False
            else:
                j += 1
        return j == len(theirs)

    def overlap(self, other: "Sequence") -> bool:
        """True if the two sequences share at least one value."""
        mine, theirs = self._intervals, other._intervals
        i = j = 0
        while i < len(mine) and j < len(theirs):
            if mine[i].overlaps(theirs[j]):
                return True
            if mine[i].start < theirs[j].start:
                i += 1
            else:
                j += 1
        return False

    def disjoint(self, other: "Sequence") -> bool:
        return not self.overlap(other)

    def intersect(self, other: "Sequence") -> "Sequence":
        """Return the values present in both sequences.

        Algorithm: walks both interval lists in lockstep. Every overlapping
        pair contributes ``[max(starts), min(ends)]``; whichever side ends at
        the produced end is advanced (both on a tie). Pieces cut from two
        valid sequences can never touch, so no merge pass is needed.
        """
        mine, theirs = self._intervals, other._intervals
        pieces: list[Interval] = []
        i = j = 0
        while i < len(mine) and j < len(theirs):
            a, b = mine[i], theirs[j]
            if a.end < b.start:
                i += 1
            elif b.end < a.start:
                j += 1
            else:
                end = min(a.end, b.end)
                pieces.append(self._factory.interval(max(a.start, b.start), end))
                if a.end <= end:
                    i += 1
                if b.end <= end:
                    j += 1
        return self._factory.sequence_of(pieces)

    def union(self, other: "Sequence") -> "Sequence":
        """Return the values present in either sequence.

        Algorithm: merges the two interval lists by start. Each interval is
        checked against the last emitted one; if it overlaps or is adjacent
        (``last.end + 1 >= start``) the last interval is extended instead of
        appending. The same check runs over the whole remaining tail once one
        side is exhausted, so a long run of intervals can cascade into one.
        """
        mine, theirs = self._intervals, other._intervals
        merged: list[Interval] = []

        def emit(interval: Interval) -> None:
            if merged and merged[-1].end + 1 >= interval.start:
                last = merged[-1]
                if not last.contains(interval):
                    merged[-1] = self._factory.interval(last.start, interval.end)
            else:
                merged.append(interval)

        i = j = 0
        while i < len(mine) and j < len(theirs):
            if mine[i].start <= theirs[j].start:
                emit(mine[i])
                i += 1
            else:
                emit(theirs[j])
                j += 1

        for interval in mine[i:]:
            emit(interval)
        for interval in theirs[j:]:
            emit(interval)

        return self._factory.sequence_of(merged)

    def difference(self, other: "Sequence") -> "Sequence":
        """Return the values of this sequence that are not in ``other``.

        Algorithm: for each interval, a cursor walks over the intervals of
        ``other`` that start inside it and emits the fragments left between
        those holes.
        """
        theirs = other._intervals
        pieces: list[Interval] = []
        j = 0
        for interval in self._intervals:
            cursor = interval.start

            # Skip holes that end before our cursor position
            while j < len(theirs) and theirs[j].end < cursor:
                j += 1

            k = j
            while k < len(theirs) and theirs[k].start <= interval.end:
                hole = theirs[k]
                if hole.start > cursor:
                    pieces.append(self._factory.interval(cursor, hole.start - 1))
                cursor = max(cursor, hole.end + 1)
                k += 1

            if cursor <= interval.end:
                pieces.append(self._factory.interval(cursor, interval.end))

        return self._factory.sequence_of(pieces)

    def append(self, value: int) -> "Sequence":
        """Return a new sequence with ``value`` added as the new maximum.

        Raises:
            ConstraintViolation: If the factory does not allow ``value``
            NonMonotonicAppend: If ``value`` is not greater than the last value
        """
        self._factory.check_value(value)
        if not self._intervals:
            return self._factory.singleton(value)

        last = self._intervals[-1]
        if value <= last.end:
            raise NonMonotonicAppend(
                f"Attempt to append value {value} to integer sequence that "
                f"ends at value {last.end}"
            )
        if value == last.end + 1:
            tail = self._factory.interval(last.start, value)
            return self._factory.sequence_of(self._intervals[:-1] + (tail,))
        return self._factory.sequence_of(
            self._intervals + (self._factory.interval(value),)
        )

    @as_result
    def try_append(self, value: int) -> "Sequence":
        return self.append(value)

    def after(self, value: int) -> "Sequence":
        """Return the values strictly greater than ``value``."""
        cut = value + 1
        pieces: list[Interval] = []
        for interval in self._intervals:
            if interval.start >= cut:
                pieces.append(interval)
            elif interval.end >= cut:
                pieces.append(self._factory.interval(cut, interval.end))
        return self._factory.sequence_of(pieces)

    def close(self, last_value: int) -> "Sequence":
        """Return the values less than or equal to ``last_value``."""
        pieces: list[Interval] = []
        for interval in self._intervals:
            if interval.start > last_value:
                break
            if interval.end <= last_value:
                pieces.append(interval)
            else:
                pieces.append(self._factory.interval(interval.start, last_value))
                break
        return self._factory.sequence_of(pieces)

    def equals(self, other: "Sequence") -> bool:
        return self._intervals == other._intervals

    def __contains__(self, item: "int | Sequence") -> bool:
        return self.contains(item)

    def __len__(self) -> int:
        return self.length()

    def __or__(self, other: "Sequence") -> "Sequence":
        return self.union(other)

    def __and__(self, other: "Sequence") -> "Sequence":
        return self.intersect(other)

    def __sub__(self, other: "Sequence") -> "Sequence":
        return self.difference(other)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sequence):
            return NotImplemented
        return self.equals(other)

    @override
    def __hash__(self) -> int:
        return hash(self._intervals)

    @override
    def __str__(self) -> str:
        # Import at runtime to avoid circular dependency
        from intseq.text import format_sequence

        return format_sequence(self)

    @override
    def __repr__(self) -> str:
        return f"Sequence({str(self)!r}, factory={self._factory.name!r})"


def union(*sequences: Sequence) -> Sequence:
    """Union of all sequences (equivalent to chaining ``|``)."""

    if not sequences:
        raise ValueError(
            "union() requires at least one sequence argument.\n"
            "Example: union(seq_a, seq_b, seq_c)"
        )

    def reducer(acc: Sequence, nxt: Sequence) -> Sequence:
        return acc | nxt

    return reduce(reducer, sequences)


def intersection(*sequences: Sequence) -> Sequence:
    """Intersection of all sequences (equivalent to chaining ``&``)."""

    if not sequences:
        raise ValueError(
            "intersection() requires at least one sequence argument.\n"
            "Example: intersection(seq_a, seq_b, seq_c)"
        )

    def reducer(acc: Sequence, nxt: Sequence) -> Sequence:
        return acc & nxt

    return reduce(reducer, sequences)
