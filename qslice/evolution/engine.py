"""
Left-to-right evolution of a register through a sequence of slices.

States are column :class:`~qslice.linalg.matrix.Matrix` objects of height
``2**n_wires``; bit ``k`` of a basis index is the value of wire ``k``.
Nothing here keeps state between calls: the result depends only on the
arguments and on each gate's matrix when the call runs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence

from ..config import check_wire_count
from ..diagnostics import assert_normalized, is_debug_enabled
from ..errors import DimensionMismatchError
from ..linalg.matrix import Matrix
from ..logging import get_logger

if TYPE_CHECKING:
    from ..circuit.slice import OperationSlice

logger = get_logger(__name__)


def initial_state(n_wires: int) -> Matrix:
    """The all-OFF register ``|0...0>``: column ``(1, 0)`` tensored ``n_wires`` times."""
    return Matrix.col(1, 0).tensor_power(check_wire_count(n_wires))


def basis_state(index: int, n_wires: int) -> Matrix:
    """The computational basis state whose wire values are the bits of ``index``."""
    dim = 1 << check_wire_count(n_wires)
    if not 0 <= index < dim:
        raise ValueError(f"Index {index} outside computational basis range [0, {dim}).")
    values = [0] * dim
    values[index] = 1
    return Matrix.col(*values)


def _check_fits(op_slice: "OperationSlice", state: Matrix, position: int) -> None:
    dim = 1 << op_slice.n_wires
    if state.width != 1 or state.height != dim:
        raise DimensionMismatchError(
            f"Slice {position} spans {op_slice.n_wires} wires but the state is "
            f"{state.height}x{state.width}; expected a {dim}x1 column."
        )


def evolve(
    initial: Matrix,
    slices: Sequence["OperationSlice"],
    phase: Optional[float] = None,
) -> List[Matrix]:
    """
    Apply ``slices`` in order to ``initial``.

    Returns the state after each slice, so ``evolve(v, s)[k]`` is the state
    after ``s[0..k]``; the last entry is the final state. An empty sequence
    gives an empty list.

    Args:
        initial: Column state vector.
        slices: Slices applied left to right.
        phase: When given, evolving gates are evaluated at this clock phase
            instead of using their current matrix.

    Raises:
        DimensionMismatchError: If a slice does not match the state size.
    """
    states: List[Matrix] = []
    state = initial
    for position, op_slice in enumerate(slices):
        _check_fits(op_slice, state, position)
        state = op_slice.operator(phase).times(state)
        if is_debug_enabled():
            assert_normalized(state)
        states.append(state)
    logger.debug("Evolved %d-row state through %d slices", initial.height, len(states))
    return states


def final_state(
    initial: Matrix,
    slices: Sequence["OperationSlice"],
    phase: Optional[float] = None,
) -> Matrix:
    """The state after all ``slices``; ``initial`` itself when there are none."""
    states = evolve(initial, slices, phase=phase)
    return states[-1] if states else initial


def circuit_operator(
    slices: Sequence["OperationSlice"],
    n_wires: int,
    phase: Optional[float] = None,
) -> Matrix:
    """The product of all slice operators, later slices on the left."""
    total = Matrix.identity(1 << n_wires)
    for position, op_slice in enumerate(slices):
        if op_slice.n_wires != n_wires:
            raise DimensionMismatchError(
                f"Slice {position} spans {op_slice.n_wires} wires, expected {n_wires}."
            )
        total = op_slice.operator(phase).times(total)
    return total


__all__ = ["basis_state", "circuit_operator", "evolve", "final_state", "initial_state"]
