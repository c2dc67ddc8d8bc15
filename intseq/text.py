"""Text notation for integer sequences.

A sequence renders as ascending comma-separated tokens, each a single value
or an inclusive range: ``4-17,19-25,27,29-33,35``. Parsing applies the same
validation as raw-pair construction: tokens exactly one apart such as
``1-3,4`` merge into ``1-4``, overlapping or touching tokens are rejected.
"""

import logging
import re

from intseq.errors import InvalidRange
from intseq.factory import NON_NEGATIVE, SequenceFactory
from intseq.interval import Interval
from intseq.sequence import Sequence
from intseq.util import RANGE_SEPARATOR, TOKEN_SEPARATOR

logger = logging.getLogger(__name__)

# A bound may carry its own sign so negative values reach the factory check
_TOKEN = re.compile(
    r"^\s*(-?\d+)\s*(?:{sep}\s*(-?\d+)\s*)?$".format(sep=re.escape(RANGE_SEPARATOR))
)


def format_sequence(sequence: Sequence) -> str:
    """Render ``sequence`` as text; the empty sequence renders as ``""``."""
    return TOKEN_SEPARATOR.join(str(interval) for interval in sequence.intervals)


def parse_token(token: str, factory: SequenceFactory = NON_NEGATIVE) -> Interval:
    match = _TOKEN.match(token)
    if match is None:
        raise InvalidRange(f"Malformed interval token {token!r}")
    start = int(match.group(1))
    end = int(match.group(2)) if match.group(2) is not None else start
    return factory.interval(start, end)


def parse_sequence(text: str, factory: SequenceFactory = NON_NEGATIVE) -> Sequence:
    """Parse the text notation into a sequence built by ``factory``.

    Args:
        text: Comma-separated tokens, e.g. ``"0-4,6-7,9"``; blank text is empty
        factory: Variant policy for the result (non-negative by default)

    Returns:
        The parsed sequence

    Raises:
        InvalidRange: If a token is malformed or its range is inverted
        ConstraintViolation: If a value is outside the factory bounds
        OverlapError: If consecutive tokens overlap or touch
    """
    if not text.strip():
        return factory.empty()

    intervals = [parse_token(token, factory) for token in text.split(TOKEN_SEPARATOR)]
    sequence = factory.sequence((ivl.start, ivl.end) for ivl in intervals)
    logger.debug(
        "Parsed %d tokens into %d %s intervals",
        len(intervals), sequence.interval_count, factory.name,
    )
    return sequence
