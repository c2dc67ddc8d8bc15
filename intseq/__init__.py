from .errors import (
    BuildResult,
    ConstraintViolation,
    EmptySequenceError,
    ErrorKind,
    IntSeqError,
    InvalidRange,
    NonMonotonicAppend,
    OverlapError,
)
from .factory import INTEGERS, NON_NEGATIVE, SequenceFactory
from .interval import Interval
from .sequence import Sequence, intersection, union
from .text import format_sequence, parse_sequence

__all__ = [
    "Interval",
    "Sequence",
    "SequenceFactory",
    "INTEGERS",
    "NON_NEGATIVE",
    "union",
    "intersection",
    "format_sequence",
    "parse_sequence",
    "ErrorKind",
    "BuildResult",
    "IntSeqError",
    "InvalidRange",
    "ConstraintViolation",
    "OverlapError",
    "NonMonotonicAppend",
    "EmptySequenceError",
]
