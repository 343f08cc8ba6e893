"""seqconcat: lazy concatenation of heterogeneous ranges.

Usage:
    from seqconcat import concat

    view = concat([1, 2], [], range(3, 6))
    list(view)            # [1, 2, 3, 4, 5]
    len(view)             # 5
    view[3]               # 4

    pos = view.begin()
    pos += 4
    pos.current()         # 5
    pos.prev()
    pos.current()         # 4

The view supports exactly the traversal operations every input supports:
concatenating a list with a one-shot iterator gives forward-only positions,
and concatenating with an infinite range removes len().
"""

import logging

__version__ = "0.1.0"

# Core primitives
from seqconcat.core import (
    BidirectionalRange,
    Capability,
    ContractViolationError,
    DanglingPositionError,
    MismatchedViewError,
    OutOfRangeError,
    RandomAccessRange,
    Range,
    SizedRange,
    WritableRange,
    capabilities_of,
    propagate,
)

# Adapters
from seqconcat.adapters import (
    CountingRange,
    IterableRange,
    RepeatRange,
    SequenceRange,
    as_range,
)

# Configuration
from seqconcat.config import ViewSettings, get_settings

# Views and positions
from seqconcat.view import (
    BidirectionalPosition,
    ConcatenatedView,
    Position,
    RandomAccessPosition,
    SizedConcatenatedView,
    TerminalMarker,
    WritablePosition,
    concat,
)

# Algorithms
from seqconcat.algorithm import generate, generate_range

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Core
    "Capability",
    "Range",
    "BidirectionalRange",
    "RandomAccessRange",
    "SizedRange",
    "WritableRange",
    "capabilities_of",
    "propagate",
    "ContractViolationError",
    "OutOfRangeError",
    "MismatchedViewError",
    "DanglingPositionError",
    # Adapters
    "as_range",
    "SequenceRange",
    "RepeatRange",
    "IterableRange",
    "CountingRange",
    # Config
    "ViewSettings",
    "get_settings",
    # View
    "concat",
    "ConcatenatedView",
    "SizedConcatenatedView",
    "Position",
    "BidirectionalPosition",
    "RandomAccessPosition",
    "WritablePosition",
    "TerminalMarker",
    # Algorithms
    "generate",
    "generate_range",
]
