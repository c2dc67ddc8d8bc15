from dataclasses import dataclass

from intseq.errors import InvalidRange
from intseq.util import RANGE_SEPARATOR


@dataclass(frozen=True, kw_only=True)
class Interval:
    """Closed range of integers ``[start, end]``."""

    start: int
    end: int

    def __post_init__(self) -> None:
        for bound in (self.start, self.end):
            if not isinstance(bound, int) or isinstance(bound, bool):
                raise InvalidRange(
                    f"Interval bounds must be integers, got {bound!r}"
                )
        if self.start > self.end:
            raise InvalidRange(
                f"Interval start ({self.start}) must be <= end ({self.end})"
            )

    @property
    def size(self) -> int:
        """Number of integers covered by the interval."""
        return self.end - self.start + 1

    def contains(self, other: "Interval") -> bool:
        return self.start <= other.start and self.end >= other.end

    def overlaps(self, other: "Interval") -> bool:
        """True if the two ranges share at least one value.

        Touching at a shared boundary counts as overlap; neighbours that are
        merely adjacent (``other.start == self.end + 1``) do not.
        """
        return self.start <= other.end and other.start <= self.end

    def __str__(self) -> str:
        """Text token: ``v`` for a single value, ``v1-v2`` otherwise."""
        if self.start == self.end:
            return str(self.start)
        return f"{self.start}{RANGE_SEPARATOR}{self.end}"
