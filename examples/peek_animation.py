"""Peek example: watching a controlled, evolving gate over a few clock ticks.

Wire 0 is put into superposition with a Hadamard, then conditions an evolving
X gate on wire 1. A peek on wire 1 reports the chance that wire 1 is ON given
the control, which grows as the evolving gate approaches a full Pauli X.
"""

from __future__ import annotations

import math
import time

import qslice as qs
from qslice.gates import library


def main() -> None:
    """Build the circuit, tick the clock and print peek readouts."""
    n_wires = 2
    toolbox = qs.default_toolbox(step=math.pi / 4)
    spin_x = toolbox.find("X(t)")

    circuit = qs.Circuit(n_wires)
    circuit.set_gate(0, 0, library.H)
    circuit.set_gate(1, 0, qs.CONTROL)
    circuit.set_gate(1, 1, spin_x)
    circuit.set_gate(2, 0, qs.CONTROL)
    circuit.set_gate(2, 1, qs.PEEK)

    print(f"Circuit: {circuit.slices}")
    for _ in range(5):
        states = circuit.evolve()
        stats = qs.slice_peek_statistics(circuit[2], 1, states[2])
        on = qs.wire_probabilities(states[-1])
        print(
            f"phase={toolbox.clock.phase:.4f} "
            f"P(wire1 | wire0)={stats.conditional:.4f} "
            f"P(wire1 & wire0)={stats.total:.4f} "
            f"wires ON={[round(p, 4) for p in on]}"
        )
        toolbox.clock.tick()
        time.sleep(qs.DEFAULT_CONFIG.tick_interval)

    print(f"\nOperator at half turn:\n{circuit.operator(phase=math.pi)}")


if __name__ == "__main__":
    main()
