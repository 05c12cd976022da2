"""The editable, ordered sequence of slices."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple

from ..config import DEFAULT_CONFIG, check_wire_count
from ..evolution import engine
from ..gates.gate import Gate
from ..linalg.matrix import Matrix
from .slice import OperationSlice


class Circuit:
    """
    Ordered slices over a fixed number of wires.

    This is the one mutable collection in the simulator. Editing methods
    replace whole slices (slices themselves are immutable), so previously
    returned prefixes and state lists stay valid.
    """

    def __init__(
        self,
        n_wires: int = DEFAULT_CONFIG.n_wires,
        slices: Iterable[OperationSlice] = (),
    ) -> None:
        """Initialize a Circuit of at most ``MAX_WIRES`` wires."""
        self._n_wires = check_wire_count(n_wires)
        self._slices: List[OperationSlice] = []
        for op_slice in slices:
            self.append(op_slice)

    @property
    def n_wires(self) -> int:
        return self._n_wires

    @property
    def slices(self) -> Tuple[OperationSlice, ...]:
        """Read-only snapshot of the slices."""
        return tuple(self._slices)

    def __len__(self) -> int:
        return len(self._slices)

    def __iter__(self) -> Iterator[OperationSlice]:
        return iter(tuple(self._slices))

    def __getitem__(self, column: int) -> OperationSlice:
        return self._slices[column]

    def _check(self, op_slice: OperationSlice) -> OperationSlice:
        if not isinstance(op_slice, OperationSlice):
            raise TypeError(f"Expected an OperationSlice, got {op_slice!r}.")
        if op_slice.n_wires != self._n_wires:
            raise ValueError(
                f"Slice spans {op_slice.n_wires} wires; circuit has {self._n_wires}."
            )
        return op_slice

    def _pad_to(self, length: int) -> None:
        while len(self._slices) < length:
            self._slices.append(OperationSlice.empty(self._n_wires))

    def append(self, op_slice: OperationSlice) -> None:
        self._slices.append(self._check(op_slice))

    def insert(self, column: int, op_slice: OperationSlice) -> None:
        """
        Insert ``op_slice`` before ``column``.

        Inserting past the end first pads the circuit with empty slices so
        the new slice lands exactly at ``column``.
        """
        if column < 0:
            raise ValueError(f"column must be >= 0, got {column}.")
        self._check(op_slice)
        self._pad_to(column)
        self._slices.insert(column, op_slice)

    def set_gate(self, column: int, wire: int, gate: Optional[Gate]) -> None:
        """Place ``gate`` on ``wire`` of slice ``column``, padding with empty slices."""
        if column < 0:
            raise ValueError(f"column must be >= 0, got {column}.")
        base = (
            self._slices[column]
            if column < len(self._slices)
            else OperationSlice.empty(self._n_wires)
        )
        edited = base.with_gate(wire, gate)
        self._pad_to(column + 1)
        self._slices[column] = edited

    def clear_gate(self, column: int, wire: int) -> Optional[Gate]:
        """Empty one slot and return whatever gate was there."""
        removed = self._slices[column][wire]
        self._slices[column] = self._slices[column].with_gate(wire, None)
        return removed

    def remove(self, column: int) -> OperationSlice:
        return self._slices.pop(column)

    def prune(self) -> int:
        """Drop empty slices; returns how many were removed."""
        before = len(self._slices)
        self._slices = [s for s in self._slices if not s.is_empty()]
        return before - len(self._slices)

    def prefix(self, length: int) -> Tuple[OperationSlice, ...]:
        """The first ``length`` slices."""
        return tuple(self._slices[:length])

    def copy(self) -> "Circuit":
        return Circuit(self._n_wires, self._slices)

    def initial_state(self) -> Matrix:
        return engine.initial_state(self._n_wires)

    def evolve(
        self,
        initial: Optional[Matrix] = None,
        phase: Optional[float] = None,
    ) -> List[Matrix]:
        """States after each slice, starting from ``initial`` or ``|0...0>``."""
        start = self.initial_state() if initial is None else initial
        return engine.evolve(start, self._slices, phase=phase)

    def final_state(
        self,
        initial: Optional[Matrix] = None,
        phase: Optional[float] = None,
    ) -> Matrix:
        start = self.initial_state() if initial is None else initial
        return engine.final_state(start, self._slices, phase=phase)

    def operator(self, phase: Optional[float] = None) -> Matrix:
        """The whole-circuit operator."""
        return engine.circuit_operator(self._slices, self._n_wires, phase=phase)

    def __repr__(self) -> str:
        return f"Circuit(n_wires={self._n_wires}, slices={self._slices!r})"


__all__ = ["Circuit"]
