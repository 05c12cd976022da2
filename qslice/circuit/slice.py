"""One time-step of a circuit and the register operator it stands for."""

from __future__ import annotations

from typing import Iterator, Optional, Sequence, Tuple

import torch

from ..diagnostics import is_debug_enabled
from ..errors import ConfigurationError
from ..gates.gate import Gate, GateKind
from ..linalg.matrix import Matrix, tensor_all
from ..logging import get_logger

logger = get_logger(__name__)


class OperationSlice:
    """
    At most one gate per wire, applied simultaneously.

    ``gates[k]`` is the gate on wire ``k`` or ``None`` for "nothing here".
    Slices are immutable; :meth:`with_gate` returns an edited copy. The gates
    themselves are shared templates and are only read when an operator is
    built.
    """

    __slots__ = ("_gates",)

    def __init__(self, gates: Sequence[Optional[Gate]]) -> None:
        slots = tuple(gates)
        if not slots:
            raise ValueError("OperationSlice requires at least one wire.")
        for wire, gate in enumerate(slots):
            if gate is not None and not isinstance(gate, Gate):
                raise TypeError(f"Slot {wire} must hold a Gate or None, got {gate!r}.")
        self._gates = slots

    @classmethod
    def empty(cls, n_wires: int) -> "OperationSlice":
        if n_wires < 1:
            raise ValueError(f"n_wires must be >= 1, got {n_wires}.")
        return cls((None,) * n_wires)

    @classmethod
    def of(cls, n_wires: int, placements: dict[int, Gate]) -> "OperationSlice":
        """Slice with ``placements`` (wire -> gate) and every other wire empty."""
        slots: list[Optional[Gate]] = [None] * n_wires
        for wire, gate in placements.items():
            if not 0 <= wire < n_wires:
                raise ValueError(f"Wire {wire} out of range [0, {n_wires}).")
            slots[wire] = gate
        return cls(slots)

    @property
    def n_wires(self) -> int:
        return len(self._gates)

    @property
    def gates(self) -> Tuple[Optional[Gate], ...]:
        return self._gates

    def __len__(self) -> int:
        return len(self._gates)

    def __iter__(self) -> Iterator[Optional[Gate]]:
        return iter(self._gates)

    def __getitem__(self, wire: int) -> Optional[Gate]:
        return self._gates[wire]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OperationSlice):
            return NotImplemented
        return len(self) == len(other) and all(
            a is b for a, b in zip(self._gates, other._gates)
        )

    __hash__ = None  # type: ignore[assignment]

    def is_empty(self) -> bool:
        return all(gate is None for gate in self._gates)

    def with_gate(self, wire: int, gate: Optional[Gate]) -> "OperationSlice":
        """Copy of this slice with ``wire`` set to ``gate`` (``None`` clears it)."""
        if not 0 <= wire < self.n_wires:
            raise ValueError(f"Wire {wire} out of range [0, {self.n_wires}).")
        slots = list(self._gates)
        slots[wire] = gate
        return OperationSlice(slots)

    def wires_of_kind(self, *kinds: GateKind) -> Tuple[int, ...]:
        return tuple(
            wire
            for wire, gate in enumerate(self._gates)
            if gate is not None and gate.kind in kinds
        )

    def control_wires(self) -> Tuple[int, ...]:
        return self.wires_of_kind(GateKind.CONTROL, GateKind.ANTI_CONTROL)

    def active_wires(self) -> Tuple[int, ...]:
        """Wires holding a unitary gate or a peek."""
        return self.wires_of_kind(GateKind.UNITARY, GateKind.PEEK)

    def peek_wires(self) -> Tuple[int, ...]:
        return self.wires_of_kind(GateKind.PEEK)

    def control_masks(self) -> Tuple[int, int]:
        """
        ``(expected_mask, required_mask)`` for the control condition.

        ``required_mask`` has a bit for every control or anti-control wire;
        ``expected_mask`` has a bit only for control wires.
        """
        expected = 0
        required = 0
        for wire, gate in enumerate(self._gates):
            if gate is None:
                continue
            if gate.kind is GateKind.CONTROL:
                required |= 1 << wire
                expected |= 1 << wire
            elif gate.kind is GateKind.ANTI_CONTROL:
                required |= 1 << wire
        return expected, required

    def operator(self, phase: Optional[float] = None) -> Matrix:
        """The ``2**n x 2**n`` operator; see :func:`build_slice_operator`."""
        return build_slice_operator(self, phase=phase)

    def __repr__(self) -> str:
        symbols = ", ".join("-" if g is None else g.symbol for g in self._gates)
        return f"OperationSlice([{symbols}])"


def _wire_factor(gate: Optional[Gate], wire: int, phase: Optional[float]) -> Matrix:
    if gate is None or gate.kind is not GateKind.UNITARY:
        return Matrix.identity(2)
    matrix = gate.matrix if phase is None else gate.matrix_at(phase)
    if matrix.shape != (2, 2):
        raise ConfigurationError(
            f"Gate {gate.symbol!r} on wire {wire} has a "
            f"{matrix.height}x{matrix.width} matrix; expected 2x2."
        )
    if is_debug_enabled():
        gate.validate()
    return matrix


def build_slice_operator(op_slice: OperationSlice, phase: Optional[float] = None) -> Matrix:
    """
    Build the whole-register operator for one slice.

    Unitary gates contribute their matrix on their wire; empty, peek and
    control wires contribute the identity. The factors are combined with
    wire ``n-1`` as the slowest-varying factor, so bit ``k`` of a basis
    index belongs to wire ``k``.

    With control or anti-control wires present, only basis states meeting
    every condition (bit 1 under a control, bit 0 under an anti-control) are
    acted on; all other rows are left as the identity. The control wires
    themselves never change value.

    Gates are read at call time: ``gate.matrix`` by default, or
    ``gate.matrix_at(phase)`` when ``phase`` is given.

    Raises
    ------
    ConfigurationError
        If a unitary gate's matrix is not 2x2.
    """
    n = op_slice.n_wires
    factors = [
        _wire_factor(op_slice[wire], wire, phase) for wire in reversed(range(n))
    ]
    full = tensor_all(factors)

    expected, required = op_slice.control_masks()
    logger.debug(
        "Slice %r: controls=%s active=%s",
        op_slice,
        op_slice.control_wires(),
        op_slice.active_wires(),
    )
    if required == 0:
        return full

    data = full.tensor_view()
    indices = torch.arange(1 << n, device=data.device)
    satisfied = torch.bitwise_and(indices, required) == expected
    identity = torch.eye(1 << n, dtype=data.dtype, device=data.device)
    return Matrix(torch.where(satisfied.unsqueeze(1), data, identity))


__all__ = ["OperationSlice", "build_slice_operator"]
