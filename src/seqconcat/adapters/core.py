"""Ownership normalization: turn arbitrary Python objects into ranges."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from seqconcat.adapters.iterable import IterableRange
from seqconcat.adapters.sequence import SequenceRange
from seqconcat.core.capability import Range


def as_range(obj: Any) -> Range:
    """Adapt an object to the Range protocol.

    Tries in order:
    1. Objects already implementing Range (including views) pass through
    2. Sequences (list, tuple, str, range, ...) become SequenceRange
    3. Any other iterable becomes a single-pass IterableRange

    Args:
        obj: Object to adapt.

    Returns:
        A range over the object's elements. Sequences are referenced, not copied.

    Raises:
        TypeError: If obj is neither a range nor iterable.
    """
    if isinstance(obj, Range):
        return obj
    if isinstance(obj, Sequence):
        return SequenceRange(obj)
    if isinstance(obj, Iterable):
        return IterableRange(obj)
    raise TypeError(f"Expecting input ranges, got {type(obj).__name__}")
