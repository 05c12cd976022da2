"""Slices and circuits."""

from .slice import OperationSlice, build_slice_operator
from .core import Circuit

__all__ = ["Circuit", "OperationSlice", "build_slice_operator"]
