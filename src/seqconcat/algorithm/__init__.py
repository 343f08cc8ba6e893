"""Algorithms over concatenated views."""

from seqconcat.algorithm.generate import generate, generate_range

__all__ = [
    "generate",
    "generate_range",
]
