"""Simulator-wide settings."""

from __future__ import annotations

import math
from dataclasses import dataclass

# Dense operators have side 2**n; 12 wires is a 4096x4096 complex128 matrix (256 MiB).
MAX_WIRES = 12


def check_wire_count(n_wires: int) -> int:
    """Return ``n_wires`` if it is in ``[1, MAX_WIRES]``, else raise ``ValueError``."""
    if n_wires < 1:
        raise ValueError(f"n_wires must be >= 1, got {n_wires}.")
    if n_wires > MAX_WIRES:
        raise ValueError(
            f"n_wires={n_wires} would need a dense operator of side "
            f"2**{n_wires}; at most {MAX_WIRES} wires are supported."
        )
    return int(n_wires)


@dataclass(frozen=True)
class SimulatorConfig:
    """
    Settings shared by the register, the phase clock and tolerance checks.

    Attributes
    ----------
    n_wires:
        Number of wires in the register. The state vector has
        ``2**n_wires`` amplitudes, so keep this small.
    phase_step:
        Radians the phase clock advances per tick.
    tick_interval:
        Seconds between ticks for a driver that animates the clock.
    atol:
        Absolute tolerance for approximate equality and unitarity checks.
    """

    n_wires: int = 4
    phase_step: float = 0.05
    tick_interval: float = 0.05
    atol: float = 1e-9

    def __post_init__(self) -> None:
        """Validate SimulatorConfig invariants."""
        check_wire_count(self.n_wires)
        if not math.isfinite(self.phase_step) or self.phase_step <= 0:
            raise ValueError(f"phase_step must be positive, got {self.phase_step}.")
        if self.tick_interval <= 0:
            raise ValueError(
                f"tick_interval must be positive, got {self.tick_interval}."
            )
        if self.atol <= 0:
            raise ValueError(f"atol must be positive, got {self.atol}.")

    @property
    def n_states(self) -> int:
        """Number of basis states, ``2**n_wires``."""
        return 1 << self.n_wires


DEFAULT_CONFIG = SimulatorConfig()

__all__ = ["DEFAULT_CONFIG", "MAX_WIRES", "SimulatorConfig", "check_wire_count"]
