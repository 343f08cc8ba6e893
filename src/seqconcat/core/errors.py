"""Contract violation errors.

These signal caller bugs (precondition violations), not recoverable conditions.
They are raised only while debug checks are enabled; see
``seqconcat.config.ViewSettings.debug_checks``.
"""

from __future__ import annotations


class ContractViolationError(AssertionError):
    """A precondition of a view or position operation was violated."""

    pass


class OutOfRangeError(ContractViolationError):
    """Position moved before begin, past end, or dereferenced at the terminal state."""

    pass


class MismatchedViewError(ContractViolationError):
    """Positions taken from two different views were mixed."""

    pass


class DanglingPositionError(ContractViolationError):
    """Position used after the view it refers to was garbage collected."""

    pass


__all__ = [
    "ContractViolationError",
    "OutOfRangeError",
    "MismatchedViewError",
    "DanglingPositionError",
]
