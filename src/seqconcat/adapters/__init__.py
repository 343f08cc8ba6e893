"""Adapters that present Python objects through the Range protocol.

Usage:
    from seqconcat.adapters import CountingRange, SequenceRange, as_range

    as_range([1, 2, 3])        # SequenceRange, random access
    as_range(iter("abc"))      # IterableRange, single pass
    CountingRange(start=10)    # infinite 10, 11, 12, ...
"""

from seqconcat.adapters.core import as_range
from seqconcat.adapters.iterable import (
    EXHAUSTED,
    UNREACHABLE,
    CountingRange,
    IterableRange,
)
from seqconcat.adapters.sequence import RepeatRange, SequenceRange, advance_offset

__all__ = [
    "as_range",
    "advance_offset",
    "SequenceRange",
    "RepeatRange",
    "IterableRange",
    "CountingRange",
    "EXHAUSTED",
    "UNREACHABLE",
]
