"""Capability functionality: range protocols, flags, detection and propagation."""

from seqconcat.core.capability.core import (
    capabilities_of,
    propagate,
    require_capabilities,
)
from seqconcat.core.capability.models import (
    POISONING,
    WEAKEST_LINK,
    BidirectionalRange,
    Capability,
    RandomAccessRange,
    Range,
    SizedRange,
    WritableRange,
)

__all__ = [
    # Models
    "Capability",
    "WEAKEST_LINK",
    "POISONING",
    "Range",
    "BidirectionalRange",
    "RandomAccessRange",
    "SizedRange",
    "WritableRange",
    # Core
    "capabilities_of",
    "propagate",
    "require_capabilities",
]
