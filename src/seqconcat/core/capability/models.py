"""Range protocols and capability flags.

A *range* is anything exposing the minimal traversal interface in `Range`.
Optional operations are separate protocols; a range supports an operation
when it structurally implements the matching protocol. Positions are plain
values: stepping returns a new position instead of mutating the old one.

Traits that are properties rather than operations are declared as class
attributes on the range:

    class Numbers:
        bounded = True       # terminal_position() is a real position (default)
        infinite = False     # never reaches its terminal position (default False)
        single_pass = False  # elements can be visited only once (default False)
        writable = True      # write() actually stores (default True if present)
"""

from __future__ import annotations

from enum import Flag, auto
from typing import Any, Protocol, runtime_checkable


class Capability(Flag):
    """Traversal capabilities of a range or of a concatenation of ranges."""

    NONE = 0
    BIDIRECTIONAL = auto()  # step_backward
    RANDOM_ACCESS = auto()  # bounded_advance
    DISTANCE = auto()  # distance, piggybacks on RANDOM_ACCESS
    SIZED = auto()  # O(1) size()
    BOUNDED = auto()  # terminal position is a real position
    INFINITE = auto()
    SINGLE_PASS = auto()
    WRITABLE = auto()  # write()


WEAKEST_LINK = (
    Capability.BIDIRECTIONAL
    | Capability.RANDOM_ACCESS
    | Capability.DISTANCE
    | Capability.SIZED
    | Capability.BOUNDED
    | Capability.WRITABLE
)
"""Capabilities a concatenation keeps only when every input has them."""

POISONING = Capability.INFINITE | Capability.SINGLE_PASS
"""Capabilities a concatenation takes on when any single input has them."""


@runtime_checkable
class Range(Protocol):
    """Minimal input requirement: a forward-traversable, readable range."""

    def initial_position(self) -> Any:
        """Position of the first element (equals the terminal position if empty)."""
        ...

    def terminal_position(self) -> Any:
        """One-past-the-last position, or a terminal token for unbounded ranges."""
        ...

    def equal(self, first: Any, second: Any) -> bool:
        """Compare two positions of this range. Either may be the terminal position."""
        ...

    def step_forward(self, pos: Any) -> Any:
        """Return the position following `pos`."""
        ...

    def read(self, pos: Any) -> Any:
        """Return the element at `pos`."""
        ...


@runtime_checkable
class BidirectionalRange(Range, Protocol):
    """Range that can step backward."""

    def step_backward(self, pos: Any) -> Any:
        """Return the position preceding `pos`."""
        ...


@runtime_checkable
class RandomAccessRange(BidirectionalRange, Protocol):
    """Range that can jump by an offset and measure distances."""

    def advance(self, pos: Any, n: int) -> Any:
        """Return `pos` moved by `n` steps, with no bound check."""
        ...

    def bounded_advance(self, pos: Any, n: int, bound: Any) -> tuple[Any, int]:
        """Move `pos` by `n` steps without passing `bound`.

        Args:
            pos: Starting position.
            n: Signed step count. Negative moves backward.
            bound: Position that must not be passed in the direction of travel.

        Returns:
            Tuple of (new position, unconsumed remainder). The remainder has the
            sign of `n` and is 0 when all steps were taken.
        """
        ...

    def distance(self, first: Any, last: Any) -> int:
        """Number of steps from `first` to `last` (negative if `last` precedes)."""
        ...


@runtime_checkable
class SizedRange(Protocol):
    """Range that knows its length in O(1)."""

    def size(self) -> int: ...


@runtime_checkable
class WritableRange(Protocol):
    """Range whose elements can be replaced through a position."""

    def write(self, pos: Any, value: Any) -> None: ...
