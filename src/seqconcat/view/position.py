"""Positions into a concatenated view.

A position is a tagged union: `index` names the active range and `inner` holds
that range's own position. Only one alternative is ever populated, so there
is nothing to disambiguate on dereference.

Invariant:
    For index < N - 1, `inner` is never the terminal position of range `index`.
    Empty ranges are skipped eagerly; only the last range's terminal position
    is a legitimate resting place (the global end).

Which operations exist depends on the inputs (see `position_class`):

    Position                   current, next, equal, copy
    BidirectionalPosition      + prev
    RandomAccessPosition       + advance, distance_to, p + n, p - n, p - q
    Writable*                  + write

Usage:
    pos = view.begin()
    end = view.end()
    while pos != end:
        print(pos.current())
        pos.next()

Lifetime:
    Positions hold a weak reference to their view. The caller keeps the view
    alive for as long as its positions are in use; afterwards every operation
    raises DanglingPositionError.
"""

from __future__ import annotations

import logging
import weakref
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Self

from seqconcat.core.capability import Capability, Range, SizedRange
from seqconcat.core.errors import DanglingPositionError, MismatchedViewError, OutOfRangeError

if TYPE_CHECKING:
    from seqconcat.view.concat import ConcatenatedView

logger = logging.getLogger(__name__)


def _skip_forward(ranges: Sequence[Range], index: int, inner: Any) -> tuple[int, Any]:
    """Boundary skip: move off internal terminal positions, cascading over empty ranges."""
    last = len(ranges) - 1
    while index < last and ranges[index].equal(inner, ranges[index].terminal_position()):
        index += 1
        inner = ranges[index].initial_position()
    return index, inner


def _range_length(rng: Range) -> int:
    if isinstance(rng, SizedRange):
        return rng.size()
    return rng.distance(rng.initial_position(), rng.terminal_position())  # type: ignore[attr-defined]


class Position:
    """Forward position over a concatenation of ranges.

    Created by `ConcatenatedView.begin()` / `end()` or by `copy()`. Mutated in
    place by the stepping operations.

    Args:
        view: Owning view (held weakly).
        index: Active range index.
        inner: Position within the active range.
    """

    __slots__ = ("_view_ref", "index", "inner")

    def __init__(self, view: ConcatenatedView, index: int, inner: Any) -> None:
        self._view_ref = weakref.ref(view)
        self.index = index
        self.inner = inner

    def _view(self) -> ConcatenatedView:
        view = self._view_ref()
        if view is None:
            raise DanglingPositionError("Position used after its view was garbage collected")
        return view

    def _check_same_view(self, view: ConcatenatedView, other: Position | TerminalMarker) -> None:
        if other._view_ref() is not view:
            raise MismatchedViewError("Positions from different views cannot be mixed")

    def _at_end(self, ranges: Sequence[Range]) -> bool:
        last = len(ranges) - 1
        if self.index != last:
            return False
        return ranges[last].equal(self.inner, ranges[last].terminal_position())

    def _move(self, view: ConcatenatedView, index: int, inner: Any) -> None:
        if index != self.index and view.settings.trace_transitions:
            logger.debug("Position moved from range %d to range %d", self.index, index)
        self.index = index
        self.inner = inner

    def _satisfy(self, view: ConcatenatedView) -> None:
        self._move(view, *_skip_forward(view.ranges, self.index, self.inner))

    def current(self) -> Any:
        """Element at this position.

        Raises:
            OutOfRangeError: If this is the end position (debug checks only).
        """
        view = self._view()
        ranges = view.ranges
        if view.settings.debug_checks and self._at_end(ranges):
            raise OutOfRangeError("Cannot dereference the end position")
        return ranges[self.index].read(self.inner)

    def next(self) -> None:
        """Step forward by one element, skipping over empty ranges.

        Raises:
            OutOfRangeError: If already at the end (debug checks only).
        """
        view = self._view()
        ranges = view.ranges
        if view.settings.debug_checks and self._at_end(ranges):
            raise OutOfRangeError("Cannot step past the end of a concatenation")
        self.inner = ranges[self.index].step_forward(self.inner)
        self._satisfy(view)

    def equal(self, other: Position) -> bool:
        """True if both positions have the same active range and inner position.

        Raises:
            MismatchedViewError: If other belongs to a different view (debug checks only).
        """
        view = self._view()
        if view.settings.debug_checks:
            self._check_same_view(view, other)
        return self.index == other.index and view.ranges[self.index].equal(
            self.inner, other.inner
        )

    def copy(self) -> Self:
        """Independent position at the same place in the same view."""
        return type(self)(self._view(), self.index, self.inner)

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Position):
            return self.equal(other)
        if isinstance(other, TerminalMarker):
            return other.equal(self)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(index={self.index}, inner={self.inner!r})"


class BidirectionalPosition(Position):
    """Position over ranges that all support stepping backward."""

    __slots__ = ()

    def prev(self) -> None:
        """Step backward by one element, skipping over empty ranges.

        Raises:
            OutOfRangeError: If at the first element (debug checks only).
        """
        view = self._view()
        ranges = view.ranges
        index, inner = self.index, self.inner
        while index > 0 and ranges[index].equal(inner, ranges[index].initial_position()):
            index -= 1
            inner = ranges[index].terminal_position()

        rng = ranges[index]
        if (
            view.settings.debug_checks
            and index == 0
            and rng.equal(inner, rng.initial_position())
        ):
            raise OutOfRangeError("Cannot step before the beginning of a concatenation")
        self._move(view, index, rng.step_backward(inner))  # type: ignore[attr-defined]


class RandomAccessPosition(BidirectionalPosition):
    """Position over ranges that all support bounded jumps and distances."""

    __slots__ = ()

    def advance(self, n: int) -> None:
        """Jump by n elements (negative jumps backward).

        Raises:
            OutOfRangeError: If the jump leaves the concatenation (debug checks
                only). The position is left unchanged in that case.
        """
        if n == 0:
            return
        view = self._view()
        checked = view.settings.debug_checks
        if n > 0:
            index, inner, rest = self._advance_forward(view.ranges, n, checked)
        else:
            index, inner, rest = self._advance_backward(view.ranges, n, checked)
        if rest != 0:
            raise OutOfRangeError(f"Jump by {n} leaves the concatenation ({rest} steps over)")
        self._move(view, index, inner)

    def _advance_forward(
        self, ranges: Sequence[Range], n: int, checked: bool
    ) -> tuple[int, Any, int]:
        last = len(ranges) - 1
        index, inner = self.index, self.inner
        while True:
            rng = ranges[index]
            if index == last and not checked:
                return index, rng.advance(inner, n), 0  # type: ignore[attr-defined]
            # Bounded walk toward the terminal position even when only the
            # remainder matters; O(n) for ranges that could answer it in O(1).
            inner, n = rng.bounded_advance(inner, n, rng.terminal_position())  # type: ignore[attr-defined]
            if index == last:
                return index, inner, n
            index, inner = _skip_forward(ranges, index, inner)
            if n == 0:
                return index, inner, n

    def _advance_backward(
        self, ranges: Sequence[Range], n: int, checked: bool
    ) -> tuple[int, Any, int]:
        index, inner = self.index, self.inner
        while True:
            rng = ranges[index]
            begin = rng.initial_position()
            if index > 0 and rng.equal(inner, begin):
                index -= 1
                inner = ranges[index].terminal_position()
                continue
            if index == 0 and not checked:
                return index, rng.advance(inner, n), 0  # type: ignore[attr-defined]
            inner, n = rng.bounded_advance(inner, n, begin)  # type: ignore[attr-defined]
            if n == 0 or index == 0:
                return index, inner, n

    def distance_to(self, other: RandomAccessPosition) -> int:
        """Signed number of steps from this position to other.

        Raises:
            MismatchedViewError: If other belongs to a different view (debug checks only).
            OutOfRangeError: If other is the terminal marker of an unbounded view.
        """
        view = self._view()
        if isinstance(other, TerminalMarker):
            raise OutOfRangeError("Distance to the end of an unbounded view is unbounded")
        if view.settings.debug_checks:
            self._check_same_view(view, other)
        if self.index <= other.index:
            return self._distance(view.ranges, self, other)
        return -self._distance(view.ranges, other, self)

    @staticmethod
    def _distance(ranges: Sequence[Range], first: Position, last: Position) -> int:
        if first.index == last.index:
            return ranges[first.index].distance(first.inner, last.inner)  # type: ignore[attr-defined]

        head = ranges[first.index]
        total: int = head.distance(first.inner, head.terminal_position())  # type: ignore[attr-defined]
        for k in range(first.index + 1, last.index):
            total += _range_length(ranges[k])
        tail = ranges[last.index]
        return total + tail.distance(tail.initial_position(), last.inner)  # type: ignore[attr-defined]

    def __add__(self, n: int) -> Self:
        if not isinstance(n, int):
            return NotImplemented
        result = self.copy()
        result.advance(n)
        return result

    __radd__ = __add__

    def __sub__(self, other: int | RandomAccessPosition) -> Any:
        if isinstance(other, RandomAccessPosition):
            return other.distance_to(self)
        if isinstance(other, int):
            result = self.copy()
            result.advance(-other)
            return result
        return NotImplemented

    def __iadd__(self, n: int) -> Self:
        self.advance(n)
        return self

    def __isub__(self, n: int) -> Self:
        self.advance(-n)
        return self


class WritablePosition(Position):
    """Adds element assignment; combined with every traversal tier."""

    __slots__ = ()

    def write(self, value: Any) -> None:
        """Replace the element at this position.

        Raises:
            OutOfRangeError: If this is the end position (debug checks only).
        """
        view = self._view()
        ranges = view.ranges
        if view.settings.debug_checks and self._at_end(ranges):
            raise OutOfRangeError("Cannot write through the end position")
        ranges[self.index].write(self.inner, value)  # type: ignore[attr-defined]


class WritableBidirectionalPosition(WritablePosition, BidirectionalPosition):
    __slots__ = ()


class WritableRandomAccessPosition(WritablePosition, RandomAccessPosition):
    __slots__ = ()


def position_class(caps: Capability) -> type[Position]:
    """Select the position type permitted by a view's propagated capabilities.

    Args:
        caps: Capabilities of the concatenation.

    Returns:
        The most capable position class the inputs allow.
    """
    writable = Capability.WRITABLE in caps
    if Capability.RANDOM_ACCESS in caps:
        return WritableRandomAccessPosition if writable else RandomAccessPosition
    if Capability.BIDIRECTIONAL in caps:
        return WritableBidirectionalPosition if writable else BidirectionalPosition
    return WritablePosition if writable else Position


class TerminalMarker:
    """Lightweight end of a view whose last range has no real terminal position.

    Holds only the last range's terminal position. Equal to a position iff the
    position is on the last range and at that terminal position.

    Args:
        view: Owning view (held weakly).
        terminal: Terminal position of the last range.
    """

    __slots__ = ("_view_ref", "terminal")

    def __init__(self, view: ConcatenatedView, terminal: Any) -> None:
        self._view_ref = weakref.ref(view)
        self.terminal = terminal

    def equal(self, pos: Position) -> bool:
        view = self._view_ref()
        if view is None:
            raise DanglingPositionError("Terminal marker used after its view was garbage collected")
        if view.settings.debug_checks and pos._view_ref() is not view:
            raise MismatchedViewError("Positions from different views cannot be mixed")
        ranges = view.ranges
        last = len(ranges) - 1
        return pos.index == last and ranges[last].equal(pos.inner, self.terminal)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Position):
            return self.equal(other)
        if isinstance(other, TerminalMarker):
            return self._view_ref() is other._view_ref()
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.terminal!r})"
