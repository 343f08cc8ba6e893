"""Ranges over in-memory Python sequences.

Positions are integer offsets, so they are cheap, hashable and random access.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def advance_offset(pos: int, n: int, bound: int) -> tuple[int, int]:
    """Move an integer position by `n` without passing `bound`.

    Args:
        pos: Starting offset.
        n: Signed step count.
        bound: Offset that must not be passed in the direction of `n`.

    Returns:
        Tuple of (new offset, unconsumed remainder with the sign of `n`).
    """
    if n >= 0:
        moved = min(n, max(bound - pos, 0))
    else:
        moved = max(n, min(bound - pos, 0))
    return pos + moved, n - moved


class SequenceRange(Generic[T]):
    """Random-access, sized, bounded range over a `Sequence`.

    Writable when the wrapped object is a `MutableSequence`. The sequence is
    referenced, not copied: writes go through to it and its current length is
    read on every terminal_position() call.

    Args:
        seq: Sequence to traverse.
    """

    __slots__ = ("_seq",)

    bounded = True
    infinite = False
    single_pass = False

    def __init__(self, seq: Sequence[T]) -> None:
        self._seq = seq

    @property
    def writable(self) -> bool:
        """True if the underlying sequence supports item assignment."""
        return isinstance(self._seq, MutableSequence)

    @property
    def sequence(self) -> Sequence[T]:
        """The wrapped sequence."""
        return self._seq

    def initial_position(self) -> int:
        return 0

    def terminal_position(self) -> int:
        return len(self._seq)

    def equal(self, first: int, second: int) -> bool:
        return first == second

    def step_forward(self, pos: int) -> int:
        return pos + 1

    def step_backward(self, pos: int) -> int:
        return pos - 1

    def advance(self, pos: int, n: int) -> int:
        return pos + n

    def bounded_advance(self, pos: int, n: int, bound: int) -> tuple[int, int]:
        return advance_offset(pos, n, bound)

    def distance(self, first: int, last: int) -> int:
        return last - first

    def size(self) -> int:
        return len(self._seq)

    def read(self, pos: int) -> T:
        return self._seq[pos]

    def write(self, pos: int, value: Any) -> None:
        if not isinstance(self._seq, MutableSequence):
            raise TypeError(f"{type(self._seq).__name__} does not support item assignment")
        self._seq[pos] = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._seq!r})"


class RepeatRange(Generic[T]):
    """The same value `times` times. Random access, sized, bounded, read-only.

    Args:
        value: Element yielded at every position.
        times: Number of repetitions (non-negative).

    Raises:
        ValueError: If times is negative.
    """

    __slots__ = ("_value", "_times")

    bounded = True
    infinite = False
    single_pass = False

    def __init__(self, value: T, times: int) -> None:
        if times < 0:
            raise ValueError(f"times must be non-negative, got {times}")
        self._value = value
        self._times = times

    def initial_position(self) -> int:
        return 0

    def terminal_position(self) -> int:
        return self._times

    def equal(self, first: int, second: int) -> bool:
        return first == second

    def step_forward(self, pos: int) -> int:
        return pos + 1

    def step_backward(self, pos: int) -> int:
        return pos - 1

    def advance(self, pos: int, n: int) -> int:
        return pos + n

    def bounded_advance(self, pos: int, n: int, bound: int) -> tuple[int, int]:
        return advance_offset(pos, n, bound)

    def distance(self, first: int, last: int) -> int:
        return last - first

    def size(self) -> int:
        return self._times

    def read(self, pos: int) -> T:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r}, times={self._times})"
