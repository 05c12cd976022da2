"""Tests for the evolution engine."""

import math

import pytest

from qslice.circuit import OperationSlice
from qslice.config import MAX_WIRES
from qslice.diagnostics import debug_context, state_norm
from qslice.errors import DimensionMismatchError
from qslice.evolution import (
    basis_state,
    circuit_operator,
    evolve,
    final_state,
    initial_state,
)
from qslice.gates import CONTROL, evolving_y, library
from qslice.linalg import Matrix
from qslice.measurement import marginal_probability


def _bell_slices():
    return [
        OperationSlice([library.H, None]),
        OperationSlice([CONTROL, library.X]),
    ]


class TestRegisterStates:
    """Tests for register state constructors."""

    def test_initial_state(self):
        """Test the all-OFF register is basis state 0."""
        state = initial_state(3)
        assert state.shape == (8, 1)
        assert state.equals(basis_state(0, 3))

    def test_basis_state_range(self):
        """Test out of range indices raise."""
        with pytest.raises(ValueError):
            basis_state(4, 2)
        with pytest.raises(ValueError):
            initial_state(0)

    def test_wire_cap(self):
        """Test register states wider than MAX_WIRES are refused before allocation."""
        with pytest.raises(ValueError, match="at most"):
            initial_state(MAX_WIRES + 1)
        with pytest.raises(ValueError, match="at most"):
            basis_state(0, 16)


class TestEvolve:
    """Tests for left-to-right evolution."""

    def test_one_state_per_slice(self):
        """Test evolve returns the state after every slice."""
        states = evolve(initial_state(2), _bell_slices())
        assert len(states) == 2
        half = 1 / math.sqrt(2)
        assert states[1].equals(Matrix.col(half, 0, 0, half))

    def test_empty_sequence(self):
        """Test no slices gives no states and the initial final state."""
        start = initial_state(2)
        assert evolve(start, []) == []
        assert final_state(start, []) is start

    def test_prefix_consistency(self, rng):
        """Test evolve(v, s)[k] equals the final state of evolve(v, s[:k+1])."""
        gates = [library.H, library.X, library.DOWN, library.RIGHT, library.Z, None]
        slices = []
        for _ in range(6):
            picks = rng.integers(0, len(gates), size=3)
            slices.append(OperationSlice([gates[i] for i in picks]))
        slices.insert(3, OperationSlice([CONTROL, library.H, library.X]))

        start = initial_state(3)
        states = evolve(start, slices)
        for k in range(len(slices)):
            assert states[k].equals(final_state(start, slices[: k + 1]))

    def test_hadamard_marginal(self):
        """Test H on wire 0 gives P(wire 0 ON) = 0.5."""
        state = final_state(initial_state(2), [OperationSlice([library.H, None])])
        assert marginal_probability(1, 1, state) == pytest.approx(0.5)

    def test_norm_preserved(self, rng):
        """Test evolution keeps a normalised state normalised."""
        slices = [
            OperationSlice([library.H, library.DOWN]),
            OperationSlice([library.COUNTER_CLOCKWISE, CONTROL]),
            OperationSlice([library.RIGHT, library.H]),
        ]
        for state in evolve(initial_state(2), slices):
            assert state_norm(state) == pytest.approx(1.0)

    def test_dimension_mismatch(self):
        """Test a slice wider than the state raises."""
        with pytest.raises(DimensionMismatchError):
            evolve(initial_state(2), [OperationSlice.empty(3)])

    def test_explicit_phase(self):
        """Test evolution at an explicit phase ignores the stored matrix."""
        spin = evolving_y()
        slices = [OperationSlice([spin])]
        assert final_state(initial_state(1), slices).equals(initial_state(1))
        flipped = final_state(initial_state(1), slices, phase=math.pi)
        assert marginal_probability(1, 1, flipped) == pytest.approx(1.0)

    def test_debug_checks_normalisation(self):
        """Test debug mode rejects an unnormalised starting state."""
        start = Matrix.col(1, 1)
        slices = [OperationSlice([library.X])]
        with debug_context(False):
            evolve(start, slices)
        with debug_context(True):
            with pytest.raises(ValueError):
                evolve(start, slices)


class TestCircuitOperator:
    """Tests for the folded circuit operator."""

    def test_matches_evolution(self):
        """Test the product of slice operators reproduces the final state."""
        slices = _bell_slices()
        op = circuit_operator(slices, 2)
        assert op.times(initial_state(2)).equals(final_state(initial_state(2), slices))

    def test_no_slices_is_identity(self):
        """Test an empty circuit is the identity."""
        assert circuit_operator([], 2).equals(Matrix.identity(4))

    def test_wire_count_checked(self):
        """Test slices must match the register size."""
        with pytest.raises(DimensionMismatchError):
            circuit_operator([OperationSlice.empty(1)], 2)
