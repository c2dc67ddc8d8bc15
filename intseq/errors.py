"""Error taxonomy for interval and sequence construction.

Every failure is a local validation failure: bad input or a broken calling
contract. Errors are raised eagerly. The ``try_*`` entry points on
``SequenceFactory`` and ``Sequence`` report the same failures as
``BuildResult`` records instead of raising.
"""

from dataclasses import dataclass
from enum import Enum
from functools import wraps
from typing import TYPE_CHECKING, Callable, ParamSpec

if TYPE_CHECKING:
    from intseq.sequence import Sequence


class ErrorKind(str, Enum):
    INVALID_RANGE = "invalid_range"
    CONSTRAINT_VIOLATION = "constraint_violation"
    OVERLAP = "overlap"
    NON_MONOTONIC_APPEND = "non_monotonic_append"
    EMPTY_SEQUENCE = "empty_sequence"


class IntSeqError(Exception):
    """Base error for the intseq package."""

    kind: ErrorKind


class InvalidRange(IntSeqError, ValueError):
    """An interval ends before it starts, or an input pair has the wrong arity."""

    kind = ErrorKind.INVALID_RANGE


class ConstraintViolation(IntSeqError, ValueError):
    """A value falls outside the bounds of the sequence factory."""

    kind = ErrorKind.CONSTRAINT_VIOLATION


class OverlapError(IntSeqError, ValueError):
    """Consecutive intervals overlap or touch where merging is not allowed."""

    kind = ErrorKind.OVERLAP


class NonMonotonicAppend(IntSeqError, ValueError):
    """Appended value is not strictly greater than the current last value."""

    kind = ErrorKind.NON_MONOTONIC_APPEND


class EmptySequenceError(IntSeqError, LookupError):
    """First or last value requested from a sequence without intervals."""

    kind = ErrorKind.EMPTY_SEQUENCE


@dataclass(frozen=True)
class BuildResult:
    """Outcome of a non-raising construction.

    Attributes:
        success: True if the sequence was built
        sequence: The built sequence if successful, None if failed
        error: The validation error if failed, None if successful
    """

    success: bool
    sequence: "Sequence | None"
    error: IntSeqError | None

    @property
    def kind(self) -> ErrorKind | None:
        """Error kind of a failed build, None on success."""
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> "Sequence":
        """Return the sequence, re-raising the recorded error on failure."""
        if self.error is not None:
            raise self.error
        if self.sequence is None:
            raise ValueError("BuildResult holds neither a sequence nor an error")
        return self.sequence


_P = ParamSpec("_P")


def as_result(func: "Callable[_P, Sequence]") -> Callable[_P, BuildResult]:
    """Decorator turning a sequence-returning call into a ``BuildResult``.

    Only ``IntSeqError`` is converted; anything else is a bug and propagates.
    """

    @wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> BuildResult:
        try:
            sequence = func(*args, **kwargs)
        except IntSeqError as e:
            return BuildResult(success=False, sequence=None, error=e)
        return BuildResult(success=True, sequence=sequence, error=None)

    return wrapper
