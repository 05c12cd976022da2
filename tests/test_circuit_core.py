"""Tests for the editable Circuit."""

import math

import pytest

from qslice.circuit import Circuit, OperationSlice
from qslice.config import DEFAULT_CONFIG, MAX_WIRES
from qslice.gates import CONTROL, default_toolbox, library
from qslice.measurement import marginal_probability


class TestEditing:
    """Tests for circuit editing helpers."""

    def test_set_gate_pads_with_empty_slices(self):
        """Test placing a gate past the end pads the circuit."""
        circuit = Circuit(2)
        circuit.set_gate(2, 1, library.X)
        assert len(circuit) == 3
        assert circuit[0].is_empty() and circuit[1].is_empty()
        assert circuit[2][1] is library.X

    def test_set_gate_replaces_slice(self):
        """Test editing does not mutate slices handed out earlier."""
        circuit = Circuit(2, [OperationSlice.empty(2)])
        before = circuit[0]
        circuit.set_gate(0, 0, library.H)
        assert before.is_empty()
        assert circuit[0][0] is library.H

    def test_clear_gate(self):
        """Test clear_gate empties the slot and returns the gate."""
        circuit = Circuit(2)
        circuit.set_gate(0, 1, library.Y)
        assert circuit.clear_gate(0, 1) is library.Y
        assert circuit[0].is_empty()

    def test_insert(self):
        """Test insert places a slice before a column, padding if needed."""
        circuit = Circuit(1)
        circuit.append(OperationSlice([library.X]))
        circuit.insert(0, OperationSlice([library.H]))
        assert [s[0] for s in circuit] == [library.H, library.X]
        circuit.insert(4, OperationSlice([library.Z]))
        assert len(circuit) == 5
        assert circuit[4][0] is library.Z

    def test_prune(self):
        """Test prune drops empty slices and keeps order."""
        circuit = Circuit(1)
        circuit.set_gate(1, 0, library.X)
        circuit.set_gate(3, 0, library.Z)
        assert circuit.prune() == 2
        assert [s[0] for s in circuit] == [library.X, library.Z]

    def test_remove_and_copy(self):
        """Test remove pops a column and copies are independent."""
        circuit = Circuit(1, [OperationSlice([library.X]), OperationSlice([library.Y])])
        clone = circuit.copy()
        assert circuit.remove(0)[0] is library.X
        assert len(circuit) == 1
        assert len(clone) == 2

    def test_wire_count_checked(self):
        """Test slices must match the circuit width."""
        circuit = Circuit(2)
        with pytest.raises(ValueError):
            circuit.append(OperationSlice.empty(3))
        with pytest.raises(TypeError):
            circuit.append(library.X)
        with pytest.raises(ValueError):
            Circuit(0)

    def test_failed_set_gate_leaves_circuit_unchanged(self):
        """Test a rejected placement does not pad the circuit."""
        circuit = Circuit(2)
        with pytest.raises(ValueError):
            circuit.set_gate(4, 7, library.X)
        assert len(circuit) == 0
        with pytest.raises(TypeError):
            circuit.set_gate(3, 0, library.X.matrix)
        assert len(circuit) == 0

    def test_failed_insert_leaves_circuit_unchanged(self):
        """Test inserting a mismatched slice does not pad the circuit."""
        circuit = Circuit(2)
        with pytest.raises(ValueError):
            circuit.insert(3, OperationSlice.empty(1))
        assert len(circuit) == 0

    def test_wire_cap(self):
        """Test registers wider than MAX_WIRES are refused."""
        assert Circuit(MAX_WIRES).n_wires == MAX_WIRES
        with pytest.raises(ValueError, match="at most"):
            Circuit(MAX_WIRES + 1)

    def test_default_width(self):
        """Test the default register width comes from the config."""
        assert Circuit().n_wires == DEFAULT_CONFIG.n_wires


class TestSimulation:
    """Tests for running a circuit."""

    def test_prefix_matches_states(self):
        """Test prefix k reproduces the k-th intermediate state."""
        circuit = Circuit(2)
        circuit.set_gate(0, 0, library.H)
        circuit.set_gate(1, 0, CONTROL)
        circuit.set_gate(1, 1, library.X)
        circuit.set_gate(2, 1, library.DOWN)
        states = circuit.evolve()
        for k in range(len(circuit)):
            partial = Circuit(2, circuit.prefix(k + 1))
            assert partial.final_state().equals(states[k])

    def test_empty_circuit_final_state(self):
        """Test an empty circuit leaves the register at |0...0>."""
        circuit = Circuit(3)
        assert circuit.final_state().equals(circuit.initial_state())

    def test_follows_toolbox_clock(self):
        """Test evolving gates in a circuit follow the toolbox clock."""
        toolbox = default_toolbox(step=math.pi / 2)
        circuit = Circuit(1)
        circuit.set_gate(0, 0, toolbox.find("X(t)"))
        assert marginal_probability(1, 1, circuit.final_state()) == pytest.approx(0.0)
        toolbox.clock.tick()
        assert marginal_probability(1, 1, circuit.final_state()) == pytest.approx(0.5)
        toolbox.clock.tick()
        assert marginal_probability(1, 1, circuit.final_state()) == pytest.approx(1.0)

    def test_operator(self):
        """Test the circuit operator maps |0...0> to the final state."""
        circuit = Circuit(2)
        circuit.set_gate(0, 1, library.H)
        circuit.set_gate(1, 0, library.X)
        op = circuit.operator()
        assert op.times(circuit.initial_state()).equals(circuit.final_state())
