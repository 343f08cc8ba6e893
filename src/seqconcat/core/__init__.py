"""Core functionalities: stateless protocols, capability rules and errors.

Architecture Note:
    core/ contains pure, stateless building blocks with no runtime state.
    For the stateful view and its positions, see view/. For turning Python
    objects into ranges, see adapters/.
"""

from seqconcat.core.capability import (
    POISONING,
    WEAKEST_LINK,
    BidirectionalRange,
    Capability,
    RandomAccessRange,
    Range,
    SizedRange,
    WritableRange,
    capabilities_of,
    propagate,
    require_capabilities,
)
from seqconcat.core.errors import (
    ContractViolationError,
    DanglingPositionError,
    MismatchedViewError,
    OutOfRangeError,
)

__all__ = [
    # Capability
    "Capability",
    "WEAKEST_LINK",
    "POISONING",
    "Range",
    "BidirectionalRange",
    "RandomAccessRange",
    "SizedRange",
    "WritableRange",
    "capabilities_of",
    "propagate",
    "require_capabilities",
    # Errors
    "ContractViolationError",
    "OutOfRangeError",
    "MismatchedViewError",
    "DanglingPositionError",
]
