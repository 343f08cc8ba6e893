"""Concatenated views and their positions."""

from seqconcat.view.concat import ConcatenatedView, SizedConcatenatedView, concat
from seqconcat.view.position import (
    BidirectionalPosition,
    Position,
    RandomAccessPosition,
    TerminalMarker,
    WritableBidirectionalPosition,
    WritablePosition,
    WritableRandomAccessPosition,
    position_class,
)

__all__ = [
    # View
    "ConcatenatedView",
    "SizedConcatenatedView",
    "concat",
    # Positions
    "Position",
    "BidirectionalPosition",
    "RandomAccessPosition",
    "WritablePosition",
    "WritableBidirectionalPosition",
    "WritableRandomAccessPosition",
    "TerminalMarker",
    "position_class",
]
