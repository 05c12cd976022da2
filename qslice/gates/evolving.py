"""Gates whose matrix follows a cycling clock phase.

The phase ``ts`` lives in ``[0, 2*pi)``. Each evolving gate maps it to a
unitary through a schedule that depends on nothing but ``ts``, so the same
phase always gives bit-identical matrices. :class:`PhaseClock` owns ``ts``
and rewrites the current matrix of every gate it drives in one pass.
"""

from __future__ import annotations

import math
from typing import Callable, Iterable, List, Tuple

from ..config import DEFAULT_CONFIG
from ..linalg.matrix import Matrix
from ..logging import get_logger
from .gate import Gate

logger = get_logger(__name__)

TWO_PI = 2 * math.pi

Schedule = Callable[[float], Matrix]


def wrap_phase(phase: float) -> float:
    """Reduce ``phase`` into ``[0, 2*pi)``."""
    wrapped = math.fmod(phase, TWO_PI)
    if wrapped < 0:
        wrapped += TWO_PI
    # fmod of a value just below a negative multiple can round up to 2*pi
    if wrapped >= TWO_PI:
        wrapped = 0.0
    return wrapped


def turn_fraction(phase: float) -> float:
    """``u = ts / (2*pi)`` for the wrapped phase."""
    return wrap_phase(phase) / TWO_PI


def x_schedule(phase: float) -> Matrix:
    return Matrix.from_rotation(turn_fraction(phase), 0, 0)


def y_schedule(phase: float) -> Matrix:
    return Matrix.from_rotation(0, turn_fraction(phase), 0)


def z_schedule(phase: float) -> Matrix:
    return Matrix.from_rotation(0, 0, turn_fraction(phase))


def hadamard_schedule(phase: float) -> Matrix:
    u = turn_fraction(phase) / math.sqrt(2)
    return Matrix.from_rotation(u, 0, u)


def rotation_schedule(phase: float) -> Matrix:
    """Real rotation ``[[cos ts, -sin ts], [sin ts, cos ts]]``."""
    ts = wrap_phase(phase)
    c = math.cos(ts)
    s = math.sin(ts)
    return Matrix.square(c, -s, s, c)


class EvolvingGate(Gate):
    """
    A unitary gate whose matrix is recomputed from the clock phase.

    :meth:`matrix_at` is a pure function of the phase. :meth:`update` stores
    that result as the shared current matrix.
    """

    def __init__(
        self,
        symbol: str,
        schedule: Schedule,
        name: str,
        description: str = "",
        phase: float = 0.0,
    ) -> None:
        super().__init__(symbol, schedule(phase), name, description)
        self._schedule = schedule
        self.phase = wrap_phase(phase)

    def matrix_at(self, phase: float) -> Matrix:
        return self._schedule(phase)

    def update(self, phase: float) -> Matrix:
        """Recompute and store the matrix for ``phase``; returns it."""
        self.phase = wrap_phase(phase)
        self.matrix = self._schedule(self.phase)
        return self.matrix


def evolving_x() -> EvolvingGate:
    return EvolvingGate(
        "X(t)",
        x_schedule,
        "Evolving X Gate",
        "Smoothly interpolates from no-op to the Pauli X gate and back over\n"
        "time. A continuous rotation around the X axis of the Bloch sphere.",
    )


def evolving_y() -> EvolvingGate:
    return EvolvingGate(
        "Y(t)",
        y_schedule,
        "Evolving Y Gate",
        "Smoothly interpolates from no-op to the Pauli Y gate and back over\n"
        "time. A continuous rotation around the Y axis of the Bloch sphere.",
    )


def evolving_z() -> EvolvingGate:
    return EvolvingGate(
        "Z(t)",
        z_schedule,
        "Evolving Z Gate",
        "Smoothly interpolates from no-op to the Pauli Z gate and back over\n"
        "time. A phase gate where the phase angle increases and cycles over\n"
        "time. A continuous rotation around the Z axis of the Bloch sphere.",
    )


def evolving_h() -> EvolvingGate:
    return EvolvingGate(
        "H(t)",
        hadamard_schedule,
        "Evolving Hadamard Gate",
        "Smoothly interpolates from no-op to the Hadamard gate and back over\n"
        "time. A continuous rotation around the X+Z axis of the Bloch sphere.",
    )


def evolving_r() -> EvolvingGate:
    return EvolvingGate(
        "R(t)",
        rotation_schedule,
        "Evolving Rotation Gate",
        "A rotation gate where the angle of rotation increases and cycles over\n"
        "time.",
    )


class PhaseClock:
    """
    The single phase accumulator driving a set of evolving gates.

    ``tick`` and ``set_phase`` update every registered gate before returning,
    so evolutions run after either call see one consistent phase across all
    gates. Run ticks and evolutions on the same thread.
    """

    def __init__(
        self,
        gates: Iterable[EvolvingGate] = (),
        step: float = DEFAULT_CONFIG.phase_step,
        phase: float = 0.0,
    ) -> None:
        if step <= 0:
            raise ValueError(f"step must be positive, got {step}.")
        self.step = float(step)
        self._gates: List[EvolvingGate] = []
        self._phase = wrap_phase(phase)
        for gate in gates:
            self.register(gate)

    @property
    def phase(self) -> float:
        return self._phase

    @property
    def gates(self) -> Tuple[EvolvingGate, ...]:
        return tuple(self._gates)

    def register(self, gate: EvolvingGate) -> None:
        """Drive ``gate`` from this clock; its matrix is synced immediately."""
        if not isinstance(gate, EvolvingGate):
            raise TypeError(f"Only evolving gates can be registered, got {gate!r}.")
        if any(existing is gate for existing in self._gates):
            return
        self._gates.append(gate)
        gate.update(self._phase)

    def set_phase(self, phase: float) -> float:
        """Jump to ``phase`` (wrapped into ``[0, 2*pi)``) and refresh all gates."""
        self._phase = wrap_phase(phase)
        for gate in self._gates:
            gate.update(self._phase)
        return self._phase

    def tick(self) -> float:
        """Advance by one step, wrap, refresh all gates; returns the new phase."""
        phase = self.set_phase(self._phase + self.step)
        logger.debug("Clock ticked to %.4f (%d gates)", phase, len(self._gates))
        return phase


__all__ = [
    "EvolvingGate",
    "PhaseClock",
    "Schedule",
    "TWO_PI",
    "evolving_h",
    "evolving_r",
    "evolving_x",
    "evolving_y",
    "evolving_z",
    "hadamard_schedule",
    "rotation_schedule",
    "turn_fraction",
    "wrap_phase",
    "x_schedule",
    "y_schedule",
    "z_schedule",
]
