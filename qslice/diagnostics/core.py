"""Norm and unitarity checks for states and operators."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Union

import torch

from ..config import DEFAULT_CONFIG

if TYPE_CHECKING:
    from ..linalg.matrix import Matrix


def _as_tensor(value: Union["Matrix", torch.Tensor]) -> torch.Tensor:
    if isinstance(value, torch.Tensor):
        return value
    return value.tensor_view()


def state_norm(state: Union["Matrix", torch.Tensor]) -> float:
    """
    Return the L2 norm of a state.

    Parameters
    ----------
    state:
        A column :class:`~qslice.linalg.matrix.Matrix` or a complex tensor.
        Every entry contributes, so the shape does not matter.
    """
    data = _as_tensor(state)
    norm_sq = (data.conj() * data).real.sum()
    return float(torch.sqrt(norm_sq))


def assert_normalized(state: Union["Matrix", torch.Tensor], atol: float = 1e-6) -> None:
    """
    Assert that a state has norm ~1 within ``atol``.

    Raises
    ------
    ValueError
        If the norm is not finite or deviates from 1 by more than ``atol``.
    """
    norm = state_norm(state)
    if not math.isfinite(norm):
        raise ValueError("State norm contains non-finite values.")
    if abs(norm - 1.0) > atol:
        raise ValueError(
            f"State is not normalized within tolerance {atol}. Norm found: {norm}"
        )


def is_unitary(
    matrix: Union["Matrix", torch.Tensor], atol: float = DEFAULT_CONFIG.atol
) -> bool:
    """
    Check if a matrix is unitary within a given tolerance.

    A matrix U is unitary if U U† = I, where U† is the conjugate transpose.
    Non-square inputs are never unitary.
    """
    data = _as_tensor(matrix)
    if data.dim() != 2 or data.shape[0] != data.shape[1]:
        return False

    product = data @ data.conj().transpose(0, 1)
    identity = torch.eye(data.shape[0], dtype=data.dtype, device=data.device)
    diff = torch.abs(product - identity)
    return bool(torch.all(diff <= atol))
