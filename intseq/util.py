"""Constants for the text notation of integer sequences.

A sequence renders as tokens joined by ``TOKEN_SEPARATOR``; each token is a
single value or two bounds joined by ``RANGE_SEPARATOR``, e.g.
``4-17,19-25,27``.
"""

TOKEN_SEPARATOR = ","
RANGE_SEPARATOR = "-"
