"""
Probability readouts from a state vector.

Wire sets are given as bitmasks over basis indices: ``required_mask`` names
the wires that are checked and ``expected_mask`` the values they must hold
(bits of ``expected_mask`` outside ``required_mask`` are ignored).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

import torch

from ..errors import DimensionMismatchError
from ..linalg.matrix import Matrix

if TYPE_CHECKING:
    from ..circuit.slice import OperationSlice


@dataclass(frozen=True)
class PeekStatistics:
    """
    Readout for a peek on one wire of one slice.

    Attributes
    ----------
    conditional:
        P(target ON | the slice's control condition). NaN when the condition
        has zero probability.
    total:
        P(target ON and the control condition).
    can_differ:
        Whether the slice has any control wires, i.e. whether ``conditional``
        may differ from the plain marginal.
    """

    conditional: float
    total: float
    can_differ: bool


def _probabilities(state: Matrix) -> torch.Tensor:
    if state.width != 1:
        raise DimensionMismatchError(
            f"Expected a column state vector, got {state.height}x{state.width}."
        )
    amplitudes = state.tensor_view()[:, 0]
    return amplitudes.real**2 + amplitudes.imag**2


def _check_masks(*masks: int) -> None:
    for mask in masks:
        if mask < 0:
            raise ValueError(f"Masks must be non-negative, got {mask}.")


def _matching(height: int, expected_mask: int, required_mask: int, device) -> torch.Tensor:
    indices = torch.arange(height, device=device)
    return torch.bitwise_and(indices, required_mask) == (expected_mask & required_mask)


def marginal_probability(expected_mask: int, required_mask: int, state: Matrix) -> float:
    """
    Probability that the wires in ``required_mask`` hold the bits of
    ``expected_mask``, summed over every value of the other wires.

    ``required_mask == 0`` checks nothing and returns the total norm (1 for
    a normalised state).
    """
    _check_masks(expected_mask, required_mask)
    probs = _probabilities(state)
    matching = _matching(probs.shape[0], expected_mask, required_mask, probs.device)
    return float(probs[matching].sum())


def conditional_probability(
    target_wire: int,
    expected_mask: int,
    required_mask: int,
    state: Matrix,
) -> float:
    """
    P(wire ``target_wire`` is ON | the mask condition holds).

    Returns ``nan`` when no probability mass satisfies the condition; the
    conditional is undefined there and callers are expected to check with
    :func:`math.isnan`.
    """
    _check_masks(expected_mask, required_mask)
    probs = _probabilities(state)
    if target_wire < 0 or (1 << target_wire) >= probs.shape[0]:
        raise ValueError(
            f"target_wire {target_wire} out of range for a state of height {probs.shape[0]}."
        )
    indices = torch.arange(probs.shape[0], device=probs.device)
    matching = _matching(probs.shape[0], expected_mask, required_mask, probs.device)
    on = torch.bitwise_and(indices, 1 << target_wire) != 0
    mass_on = float(probs[matching & on].sum())
    mass_off = float(probs[matching & ~on].sum())
    total = mass_on + mass_off
    if total == 0:
        return math.nan
    return mass_on / total


def slice_peek_statistics(
    op_slice: "OperationSlice",
    target_wire: int,
    state: Matrix,
) -> PeekStatistics:
    """
    Peek readout for ``target_wire`` using ``op_slice``'s controls as the condition.

    ``state`` is normally the state right after ``op_slice`` was applied.
    """
    expected, required = op_slice.control_masks()
    target_bit = 1 << target_wire
    return PeekStatistics(
        conditional=conditional_probability(target_wire, expected, required, state),
        total=marginal_probability(expected | target_bit, required | target_bit, state),
        can_differ=required != 0,
    )


def wire_probabilities(state: Matrix) -> Tuple[float, ...]:
    """P(wire ``k`` is ON) for every wire of the register, wire 0 first."""
    probs = _probabilities(state)
    height = probs.shape[0]
    n_wires = height.bit_length() - 1
    if 1 << n_wires != height:
        raise DimensionMismatchError(f"State height {height} is not a power of two.")
    return tuple(
        marginal_probability(1 << wire, 1 << wire, state) for wire in range(n_wires)
    )


__all__ = [
    "PeekStatistics",
    "conditional_probability",
    "marginal_probability",
    "slice_peek_statistics",
    "wire_probabilities",
]
