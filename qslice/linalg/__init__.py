"""Complex scalars and dense matrices."""

from . import scalar
from .matrix import Matrix, tensor_all

__all__ = ["Matrix", "scalar", "tensor_all"]
