"""Fixed gate templates.

Every gate here is a rotation of the Bloch sphere built once with
:meth:`Gate.from_rotation` and never modified. Half turns are the Pauli
and Hadamard gates, quarter turns their square roots (and inverses).
"""

from __future__ import annotations

import math
from typing import Tuple

from .gate import Gate

_DIAGONAL = 1 / math.sqrt(2)

H = Gate.from_rotation(
    0.5 * _DIAGONAL,
    0,
    0.5 * _DIAGONAL,
    symbol="H",
    name="Hadamard Gate",
    description=(
        "Toggles between ON and ON+OFF, and between OFF and ON-OFF.\n"
        "A half turn around the X+Z axis of the Bloch sphere."
    ),
)

X = Gate.from_rotation(
    0.5, 0, 0,
    symbol="X",
    name="Pauli X Gate",
    description="Toggles between ON and OFF.\nA half turn around the X axis.",
)

Y = Gate.from_rotation(
    0, 0.5, 0,
    symbol="Y",
    name="Pauli Y Gate",
    description=(
        "Toggles between ON and OFF with a phase change.\n"
        "A half turn around the Y axis."
    ),
)

Z = Gate.from_rotation(
    0, 0, 0.5,
    symbol="Z",
    name="Pauli Z Gate",
    description="Negates the amplitude of ON states.\nA half turn around the Z axis.",
)

DOWN = Gate.from_rotation(
    0.25, 0, 0,
    symbol="↓",
    name="Down Gate",
    description="Square root of X. A quarter turn around the X axis.",
)

UP = Gate.from_rotation(
    -0.25, 0, 0,
    symbol="↑",
    name="Up Gate",
    description=(
        "Undoes the Down gate up to global phase.\n"
        "A quarter turn back around the X axis."
    ),
)

RIGHT = Gate.from_rotation(
    0, 0.25, 0,
    symbol="→",
    name="Right Gate",
    description="Square root of Y. A quarter turn around the Y axis.",
)

LEFT = Gate.from_rotation(
    0, -0.25, 0,
    symbol="←",
    name="Left Gate",
    description=(
        "Undoes the Right gate up to global phase.\n"
        "A quarter turn back around the Y axis."
    ),
)

COUNTER_CLOCKWISE = Gate.from_rotation(
    0, 0, 0.25,
    symbol="↺",
    name="Counter Clockwise Phase Gate",
    description=(
        "Multiplies the amplitude of ON states by i.\n"
        "A quarter turn around the Z axis."
    ),
)

CLOCKWISE = Gate.from_rotation(
    0, 0, -0.25,
    symbol="↻",
    name="Clockwise Phase Gate",
    description=(
        "Multiplies the amplitude of ON states by -i relative to OFF states.\n"
        "A quarter turn back around the Z axis."
    ),
)


def phase_gate(turns: float, label: str) -> Gate:
    """A Z rotation by ``turns`` of a full turn, labelled ``label``."""
    return Gate.from_rotation(
        0, 0, turns,
        symbol=f"Z^{label}",
        name="Phase Gate",
        description=f"Rotates the phase of ON states by {label} of a full turn.",
    )


OTHER_Z: Tuple[Gate, ...] = (
    phase_gate(1 / 3, "1/3"),
    phase_gate(1 / 8, "1/8"),
    phase_gate(1 / 16, "1/16"),
    phase_gate(-1 / 3, "-1/3"),
    phase_gate(-1 / 8, "-1/8"),
    phase_gate(-1 / 16, "-1/16"),
)

HALF_TURNS: Tuple[Gate, ...] = (H, X, Y, Z)
QUARTER_TURNS: Tuple[Gate, ...] = (DOWN, RIGHT, COUNTER_CLOCKWISE, UP, LEFT, CLOCKWISE)


__all__ = [
    "CLOCKWISE",
    "COUNTER_CLOCKWISE",
    "DOWN",
    "H",
    "HALF_TURNS",
    "LEFT",
    "OTHER_Z",
    "QUARTER_TURNS",
    "RIGHT",
    "UP",
    "X",
    "Y",
    "Z",
    "phase_gate",
]
