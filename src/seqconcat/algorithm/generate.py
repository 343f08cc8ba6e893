"""Fill positions from a zero-argument generator function.

Usage:
    counter = itertools.count(10).__next__
    view = concat(a, b)
    end, fn = generate_range(view, counter)   # a and b now hold 10, 11, 12, ...
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from seqconcat.view import ConcatenatedView, Position, TerminalMarker, WritablePosition, concat

F = TypeVar("F", bound=Callable[[], Any])


def generate(
    first: Position, last: Position | TerminalMarker, fn: F
) -> tuple[Position, F]:
    """Assign fn() to every position in [first, last), in order.

    Args:
        first: Start position; advanced in place.
        last: End position or terminal marker.
        fn: Called once per position.

    Returns:
        Tuple of (first, now equal to last; fn).

    Raises:
        TypeError: If the positions are not writable.
    """
    if not isinstance(first, WritablePosition):
        raise TypeError(f"generate() requires writable positions, got {type(first).__name__}")
    while first != last:
        first.write(fn())
        first.next()
    return first, fn


def generate_range(rng: Any, fn: F) -> tuple[Position | None, F]:
    """Assign fn() to every element of a view or plain mutable sequence.

    Args:
        rng: ConcatenatedView, or any object `concat()` accepts.
        fn: Called once per element.

    Returns:
        Tuple of (reached end position, fn). The position is None when rng was
        not a view: the temporary view built for it does not outlive the call.
    """
    if isinstance(rng, ConcatenatedView):
        return generate(rng.begin(), rng.end(), fn)
    view = concat(rng)
    generate(view.begin(), view.end(), fn)
    return None, fn
