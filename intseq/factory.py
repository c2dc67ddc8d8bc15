"""Construction policy shared by every interval and sequence of a variant.

A ``SequenceFactory`` is a plain value: optional lower and upper bounds that
every boundary value must respect. Each ``Sequence`` carries the factory it
was built with and routes every derived interval and sequence back through
it, so operation results keep the variant's constraints.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from intseq.errors import (
    ConstraintViolation,
    InvalidRange,
    OverlapError,
    as_result,
)
from intseq.interval import Interval
from intseq.sequence import Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SequenceFactory:
    """Variant policy for integer sequences.

    Attributes:
        name: Human-readable variant name used in error messages and reprs
        minimum: Smallest allowed value, None for no lower bound
        maximum: Largest allowed value, None for no upper bound
    """

    name: str = "integer"
    minimum: int | None = None
    maximum: int | None = None

    def __post_init__(self) -> None:
        if (
            self.minimum is not None
            and self.maximum is not None
            and self.minimum > self.maximum
        ):
            raise ValueError(
                f"Factory {self.name!r} minimum ({self.minimum}) must be <= "
                f"maximum ({self.maximum})"
            )

    def check_value(self, value: int) -> int:
        """Return ``value`` unchanged, raising ConstraintViolation if out of bounds."""
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidRange(f"Sequence values must be integers, got {value!r}")
        if self.minimum is not None and value < self.minimum:
            raise ConstraintViolation(
                f"Value {value} is below the minimum {self.minimum} "
                f"of {self.name} sequences"
            )
        if self.maximum is not None and value > self.maximum:
            raise ConstraintViolation(
                f"Value {value} is above the maximum {self.maximum} "
                f"of {self.name} sequences"
            )
        return value

    def check(self, interval: Interval) -> Interval:
        self.check_value(interval.start)
        self.check_value(interval.end)
        return interval

    def interval(self, start: int, end: int | None = None) -> Interval:
        """Build a validated interval; ``end=None`` gives ``[start, start]``."""
        if end is None:
            end = start
        return self.check(Interval(start=start, end=end))

    def coerce(self, interval: Any) -> Interval:
        """Validate an interval-like object (anything with ``start`` and ``end``)."""
        if isinstance(interval, Interval):
            return self.check(interval)
        return self.interval(interval.start, interval.end)

    def empty(self) -> Sequence:
        return Sequence((), self)

    def singleton(self, value: int) -> Sequence:
        return Sequence((self.interval(value),), self)

    def sequence(self, pairs: Iterable[Iterable[int]] = ()) -> Sequence:
        """Build a sequence from raw ``(start, end)`` pairs in ascending order.

        Pairs exactly one apart (``start == previous end + 1``) are merged into
        a single interval. Pairs that overlap or touch (``previous end >=
        start``) are rejected.

        Raises:
            InvalidRange: If a pair does not have two values or ends before it starts
            ConstraintViolation: If a value is outside the factory bounds
            OverlapError: If consecutive pairs overlap
        """
        intervals: list[Interval] = []
        for pair in pairs:
            bounds = tuple(pair)
            if len(bounds) != 2:
                raise InvalidRange(
                    f"Interval pair must have exactly 2 values, got {len(bounds)}: "
                    f"{bounds!r}"
                )
            interval = self.interval(bounds[0], bounds[1])
            if intervals:
                prev = intervals[-1]
                if prev.end >= interval.start:
                    raise OverlapError(
                        f"Overlapping intervals [{prev}] and [{interval}]"
                    )
                if interval.start == prev.end + 1:
                    logger.debug("Merging adjacent pairs [%s] and [%s]", prev, interval)
                    intervals[-1] = self.interval(prev.start, interval.end)
                    continue
            intervals.append(interval)
        return Sequence(intervals, self)

    def sequence_of(self, intervals: Iterable[Any]) -> Sequence:
        """Build a sequence from already computed, maximal disjoint intervals.

        No merging happens here: adjacent intervals are an OverlapError just
        like overlapping ones.
        """
        return Sequence(intervals, self)

    def to_sequence(self, values: Iterable[int]) -> Sequence:
        """Collapse ascending individual values into the minimal interval form.

        Example:
            >>> NON_NEGATIVE.to_sequence([1, 2, 3, 6, 9, 10])
            Sequence('1-3,6,9-10', factory='non-negative')
        """
        intervals: list[Interval] = []
        current: Interval | None = None
        for value in values:
            if current is not None and value == current.end + 1:
                current = self.interval(current.start, value)
                continue
            if current is not None:
                intervals.append(current)
            current = self.interval(value)
        if current is not None:
            intervals.append(current)
        return self.sequence_of(intervals)

    def parse(self, text: str) -> Sequence:
        """Parse the comma-separated text notation, e.g. ``"4-17,19-25,27"``."""
        # Import at runtime to avoid circular dependency
        from intseq.text import parse_sequence

        return parse_sequence(text, self)

    @as_result
    def try_sequence(self, pairs: Iterable[Iterable[int]] = ()) -> Sequence:
        return self.sequence(pairs)

    @as_result
    def try_sequence_of(self, intervals: Iterable[Any]) -> Sequence:
        return self.sequence_of(intervals)

    @as_result
    def try_parse(self, text: str) -> Sequence:
        return self.parse(text)


INTEGERS = SequenceFactory()
NON_NEGATIVE = SequenceFactory(name="non-negative", minimum=0)
