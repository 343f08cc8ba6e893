"""Capability detection and propagation.

Usage:
    caps = propagate(capabilities_of(r) for r in ranges)
    if Capability.RANDOM_ACCESS in caps:
        ...

    # Reject at construction time rather than on first use
    require_capabilities(caps, Capability.SIZED, what="size()")
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from operator import and_, or_

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


def capabilities_of(rng: object) -> Capability:
    """Detect the capabilities of a single range.

    A range that publishes a `capabilities` attribute (such as a concatenated
    view) is trusted as-is. Otherwise the optional protocols and trait
    attributes are inspected.

    Args:
        rng: Object implementing at least the `Range` protocol.

    Returns:
        Capability flags of the range.

    Raises:
        TypeError: If `rng` does not implement the `Range` protocol.
    """
    declared = getattr(rng, "capabilities", None)
    if isinstance(declared, Capability):
        return declared

    if not isinstance(rng, Range):
        raise TypeError(f"{type(rng).__name__} does not implement the Range protocol")

    caps = Capability.NONE
    if isinstance(rng, BidirectionalRange):
        caps |= Capability.BIDIRECTIONAL
    if isinstance(rng, RandomAccessRange):
        caps |= Capability.RANDOM_ACCESS | Capability.DISTANCE
    if isinstance(rng, SizedRange):
        caps |= Capability.SIZED
    if isinstance(rng, WritableRange) and getattr(rng, "writable", True):
        caps |= Capability.WRITABLE
    if getattr(rng, "bounded", True):
        caps |= Capability.BOUNDED
    if getattr(rng, "infinite", False):
        caps |= Capability.INFINITE
    if getattr(rng, "single_pass", False):
        caps |= Capability.SINGLE_PASS
    return caps


def propagate(caps: Iterable[Capability]) -> Capability:
    """Combine per-range capabilities into the capabilities of their concatenation.

    Weakest link: a traversal operation survives only if every input has it.
    Infinite and single-pass are poisoning: one input taints the whole.
    Distance queries follow random access.

    Args:
        caps: Capabilities of each input, in any order.

    Returns:
        Capabilities of the concatenation.

    Raises:
        ValueError: If `caps` is empty.
    """
    caps = list(caps)
    if not caps:
        raise ValueError("Cannot propagate capabilities of zero ranges")

    result = (reduce(and_, caps) & WEAKEST_LINK) | (reduce(or_, caps) & POISONING)
    if Capability.RANDOM_ACCESS in result:
        result |= Capability.DISTANCE
    else:
        result &= ~Capability.DISTANCE
    return result


def require_capabilities(caps: Capability, needed: Capability, what: str) -> None:
    """Reject an operation the given capabilities do not support.

    Args:
        caps: Capabilities available.
        needed: Capabilities the operation requires.
        what: Operation name used in the error message.

    Raises:
        TypeError: If any of `needed` is missing from `caps`.
    """
    missing = needed & ~caps
    if missing:
        names = ", ".join(flag.name for flag in Capability if flag and flag in missing)
        raise TypeError(f"{what} requires capabilities missing from the inputs: {names}")
