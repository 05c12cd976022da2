"""Marginal and conditional probabilities from state vectors."""

from .probability import (
    PeekStatistics,
    conditional_probability,
    marginal_probability,
    slice_peek_statistics,
    wire_probabilities,
)

__all__ = [
    "PeekStatistics",
    "conditional_probability",
    "marginal_probability",
    "slice_peek_statistics",
    "wire_probabilities",
]
