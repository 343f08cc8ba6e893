"""Ranges over iterators and unbounded generators.

Neither range here has a real terminal position: `terminal_position()` returns
a token that only means something to the range's own `equal()`.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Generic, TypeVar

from seqconcat.adapters.sequence import advance_offset
from seqconcat.core.errors import ContractViolationError, OutOfRangeError


class _Token:
    """Named singleton used as a terminal position."""

    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name


EXHAUSTED = _Token("EXHAUSTED")
"""Terminal position of an IterableRange: equal to a position once the iterator is drained."""

UNREACHABLE = _Token("UNREACHABLE")
"""Terminal position of an infinite range: never equal to any real position."""

_MISSING = object()

T = TypeVar("T")


class IterableRange(Generic[T]):
    """Single-pass, forward-only range over any iterable.

    Positions count the elements consumed so far. Only the most recent
    position is valid; stepping from an older one is a contract violation.
    The head element is pulled lazily, the first time the range needs to know
    whether it is exhausted or to read it.

    Args:
        iterable: Source of elements. `iter()` is called once, at construction.
    """

    __slots__ = ("_it", "_pos", "_head", "_done")

    bounded = False
    infinite = False
    single_pass = True

    def __init__(self, iterable: Iterable[T]) -> None:
        self._it = iter(iterable)
        self._pos = 0
        self._head: Any = _MISSING
        self._done = False

    def _fetch(self) -> bool:
        """Pull the head element if needed. Returns True if one is available."""
        if self._head is _MISSING and not self._done:
            try:
                self._head = next(self._it)
            except StopIteration:
                self._done = True
        return not self._done

    def initial_position(self) -> int:
        return self._pos

    def terminal_position(self) -> _Token:
        return EXHAUSTED

    def equal(self, first: int | _Token, second: int | _Token) -> bool:
        if first is EXHAUSTED and second is EXHAUSTED:
            return True
        if first is EXHAUSTED or second is EXHAUSTED:
            return not self._fetch()
        return first == second

    def step_forward(self, pos: int) -> int:
        if pos != self._pos:
            raise ContractViolationError(
                f"Stale position {pos} on a single-pass range (current is {self._pos})"
            )
        self._fetch()
        self._head = _MISSING
        self._pos += 1
        return self._pos

    def read(self, pos: int) -> T:
        if pos != self._pos:
            raise ContractViolationError(
                f"Stale position {pos} on a single-pass range (current is {self._pos})"
            )
        if not self._fetch():
            raise OutOfRangeError("Cannot read past the end of an iterable")
        return self._head  # type: ignore[no-any-return]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._it!r})"


class CountingRange:
    """Infinite arithmetic progression start, start + step, start + 2 * step, ...

    Random access toward infinity; positions are element offsets. Stepping
    backward below offset 0 is allowed and yields values before `start`.

    Args:
        start: First value.
        step: Increment between consecutive values.
    """

    __slots__ = ("_start", "_step")

    bounded = False
    infinite = True
    single_pass = False

    def __init__(self, start: int = 0, step: int = 1) -> None:
        self._start = start
        self._step = step

    def initial_position(self) -> int:
        return 0

    def terminal_position(self) -> _Token:
        return UNREACHABLE

    def equal(self, first: int | _Token, second: int | _Token) -> bool:
        if first is UNREACHABLE or second is UNREACHABLE:
            return first is second
        return first == second

    def step_forward(self, pos: int) -> int:
        return pos + 1

    def step_backward(self, pos: int) -> int:
        return pos - 1

    def advance(self, pos: int, n: int) -> int:
        return pos + n

    def bounded_advance(self, pos: int, n: int, bound: int | _Token) -> tuple[int, int]:
        if bound is UNREACHABLE:
            return pos + n, 0
        return advance_offset(pos, n, bound)  # type: ignore[arg-type]

    def distance(self, first: int | _Token, last: int | _Token) -> int:
        if first is UNREACHABLE or last is UNREACHABLE:
            raise OutOfRangeError("Distance to the end of an infinite range is unbounded")
        return last - first  # type: ignore[operator]

    def read(self, pos: int) -> int:
        return self._start + pos * self._step

    def __repr__(self) -> str:
        return f"{type(self).__name__}(start={self._start}, step={self._step})"
