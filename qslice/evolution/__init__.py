"""State evolution through ordered slices."""

from .engine import basis_state, circuit_operator, evolve, final_state, initial_state

__all__ = ["basis_state", "circuit_operator", "evolve", "final_state", "initial_state"]
