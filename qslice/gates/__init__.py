"""Gate templates: fixed rotations, slot markers, evolving gates."""

from .evolving import (
    EvolvingGate,
    PhaseClock,
    evolving_h,
    evolving_r,
    evolving_x,
    evolving_y,
    evolving_z,
    wrap_phase,
)
from .gate import ANTI_CONTROL, CONTROL, PEEK, Gate, GateKind
from .library import (
    CLOCKWISE,
    COUNTER_CLOCKWISE,
    DOWN,
    LEFT,
    OTHER_Z,
    RIGHT,
    UP,
    H,
    X,
    Y,
    Z,
    phase_gate,
)
from .toolbox import Toolbox, ToolboxGroup, default_toolbox

__all__ = [
    "ANTI_CONTROL",
    "CLOCKWISE",
    "CONTROL",
    "COUNTER_CLOCKWISE",
    "DOWN",
    "EvolvingGate",
    "Gate",
    "GateKind",
    "H",
    "LEFT",
    "OTHER_Z",
    "PEEK",
    "PhaseClock",
    "RIGHT",
    "Toolbox",
    "ToolboxGroup",
    "UP",
    "X",
    "Y",
    "Z",
    "default_toolbox",
    "evolving_h",
    "evolving_r",
    "evolving_x",
    "evolving_y",
    "evolving_z",
    "phase_gate",
    "wrap_phase",
]
