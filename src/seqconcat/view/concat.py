"""Concatenated view: N ranges presented as one lazy sequence.

Usage:
    view = concat([1, 2], [], (3,))
    list(view)                  # [1, 2, 3]
    len(view)                   # 3 (all inputs sized)
    view[2]                     # 3 (all inputs random access)

    pos = view.begin()
    pos.advance(2)
    pos.current()               # 3
    view.begin().distance_to(view.end())  # 3

    # Traversal operations follow the weakest input:
    mixed = concat([1, 2], iter([3, 4]))
    mixed.begin().prev()        # AttributeError: forward-only position

    # Views are ranges themselves and nest
    nested = concat(view, [4, 5])

Gotcha: positions do not keep their view alive. Keep a reference to the view
while its positions are in use.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from seqconcat.adapters import as_range
from seqconcat.config import ViewSettings, get_settings
from seqconcat.core.capability import (
    Capability,
    Range,
    capabilities_of,
    propagate,
    require_capabilities,
)
from seqconcat.core.errors import OutOfRangeError
from seqconcat.view.position import (
    Position,
    RandomAccessPosition,
    TerminalMarker,
    WritablePosition,
    position_class,
)

logger = logging.getLogger(__name__)


class ConcatenatedView:
    """Lazy concatenation of N ranges, in a fixed order.

    Capabilities are propagated once, here, and decide which position class
    the view hands out. The ranges are stored as given; adapt plain Python
    objects with `concat()` or `seqconcat.adapters.as_range` first.

    Args:
        *ranges: One or more objects implementing the Range protocol.
        settings: Debug/tracing settings. Defaults to `get_settings()`.

    Raises:
        ValueError: If no ranges are given.
        TypeError: If any argument does not implement the Range protocol.
    """

    # Only views that define size() publish SIZED
    _sized = False

    def __init__(self, *ranges: Range, settings: ViewSettings | None = None) -> None:
        if not ranges:
            raise ValueError(f"{type(self).__name__} needs at least one range")
        caps = propagate(capabilities_of(rng) for rng in ranges)
        if self._sized:
            require_capabilities(caps, Capability.SIZED, type(self).__name__)
        else:
            caps &= ~Capability.SIZED
        self._capabilities = caps
        self._ranges: tuple[Range, ...] = ranges
        self._settings = settings or get_settings()
        self._position_cls = position_class(self._capabilities)
        logger.debug(
            "Concatenated %d ranges with capabilities %s", len(ranges), self._capabilities
        )

    @property
    def ranges(self) -> tuple[Range, ...]:
        """The input ranges, in concatenation order."""
        return self._ranges

    @property
    def capabilities(self) -> Capability:
        """Capabilities propagated from the inputs."""
        return self._capabilities

    @property
    def settings(self) -> ViewSettings:
        return self._settings

    def begin(self) -> Position:
        """Position of the first element (equal to end() when the view is empty)."""
        pos = self._position_cls(self, 0, self._ranges[0].initial_position())
        pos._satisfy(self)
        return pos

    def end(self) -> Position | TerminalMarker:
        """End of the view.

        Returns:
            A full position on the last range's terminal position when every
            input is bounded, otherwise a TerminalMarker.
        """
        last = len(self._ranges) - 1
        terminal = self._ranges[last].terminal_position()
        if Capability.BOUNDED in self._capabilities:
            return self._position_cls(self, last, terminal)
        return TerminalMarker(self, terminal)

    def __iter__(self) -> Iterator[Any]:
        pos = self.begin()
        end = self.end()
        while pos != end:
            yield pos.current()
            pos.next()

    def __reversed__(self) -> Iterator[Any]:
        require_capabilities(
            self._capabilities, Capability.BIDIRECTIONAL | Capability.BOUNDED, "reversed()"
        )
        return self._iter_reversed()

    def _iter_reversed(self) -> Iterator[Any]:
        begin = self.begin()
        pos = self.end()
        while pos != begin:
            pos.prev()  # type: ignore[union-attr]
            yield pos.current()  # type: ignore[union-attr]

    def __getitem__(self, index: int) -> Any:
        """Element at an offset from the beginning.

        Requires random access. Negative indices additionally require a sized view.

        Raises:
            IndexError: If index is outside the view.
        """
        require_capabilities(self._capabilities, Capability.RANDOM_ACCESS, "Indexing")
        if not isinstance(index, int):
            raise TypeError(f"{type(self).__name__} indices must be integers, not {type(index).__name__}")
        if index < 0:
            require_capabilities(self._capabilities, Capability.SIZED, "Negative indexing")
            index += len(self)  # type: ignore[arg-type]
            if index < 0:
                raise IndexError("view index out of range")

        pos = self.begin()
        try:
            pos.advance(index)  # type: ignore[attr-defined]
        except OutOfRangeError as e:
            raise IndexError("view index out of range") from e
        if pos == self.end():
            raise IndexError("view index out of range")
        return pos.current()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(rng) for rng in self._ranges)})"

    # Range protocol, so views nest inside other views

    def initial_position(self) -> Position:
        return self.begin()

    def terminal_position(self) -> Position | TerminalMarker:
        return self.end()

    def equal(self, first: Position | TerminalMarker, second: Position | TerminalMarker) -> bool:
        return first == second

    def step_forward(self, pos: Position) -> Position:
        result = pos.copy()
        result.next()
        return result

    def step_backward(self, pos: Position) -> Position:
        result = pos.copy()
        result.prev()  # type: ignore[attr-defined]
        return result

    def advance(self, pos: RandomAccessPosition, n: int) -> RandomAccessPosition:
        return pos + n

    def bounded_advance(
        self, pos: RandomAccessPosition, n: int, bound: RandomAccessPosition | TerminalMarker
    ) -> tuple[RandomAccessPosition, int]:
        result = pos.copy()
        if isinstance(bound, TerminalMarker):
            result.advance(n)
            return result, 0
        room = pos.distance_to(bound)
        moved = min(n, max(room, 0)) if n >= 0 else max(n, min(room, 0))
        result.advance(moved)
        return result, n - moved

    def distance(self, first: RandomAccessPosition, last: RandomAccessPosition) -> int:
        return first.distance_to(last)

    def read(self, pos: Position) -> Any:
        return pos.current()

    def write(self, pos: WritablePosition, value: Any) -> None:
        pos.write(value)


class SizedConcatenatedView(ConcatenatedView):
    """Concatenated view whose inputs all report their size in O(1).

    Raises:
        TypeError: If any input is not sized.
    """

    _sized = True

    def size(self) -> int:
        """Sum of the input sizes."""
        return sum(rng.size() for rng in self._ranges)  # type: ignore[attr-defined]

    def __len__(self) -> int:
        return self.size()


def concat(*objects: Any, settings: ViewSettings | None = None) -> ConcatenatedView:
    """Lazily concatenate objects into one view.

    Every argument is adapted with `as_range` first: sequences are referenced
    (not copied), other iterables are consumed lazily in a single pass, and
    existing ranges and views are used as-is.

    Args:
        *objects: One or more sequences, iterables or ranges.
        settings: Debug/tracing settings for the view.

    Returns:
        SizedConcatenatedView if every input is sized, otherwise ConcatenatedView.

    Raises:
        ValueError: If no objects are given.
        TypeError: If an object is neither a range nor iterable.
    """
    if not objects:
        raise ValueError("concat() needs at least one range")
    ranges = tuple(as_range(obj) for obj in objects)
    if all(Capability.SIZED in capabilities_of(rng) for rng in ranges):
        return SizedConcatenatedView(*ranges, settings=settings)
    return ConcatenatedView(*ranges, settings=settings)
