"""Gate templates and the three slot markers."""

from __future__ import annotations

import enum
from typing import Optional

from ..errors import MalformedGateError
from ..linalg import scalar
from ..linalg.matrix import Matrix
from ..logging import get_logger

logger = get_logger(__name__)


class GateKind(enum.Enum):
    """
    What a gate does when it occupies a wire in a slice.

    UNITARY gates contribute their matrix to the slice operator. CONTROL and
    ANTI_CONTROL condition the rest of the slice on the wire holding 1 or 0.
    PEEK acts as the identity and only asks for a probability readout.
    """

    UNITARY = "unitary"
    CONTROL = "control"
    ANTI_CONTROL = "anti_control"
    PEEK = "peek"

    @property
    def is_control(self) -> bool:
        return self in (GateKind.CONTROL, GateKind.ANTI_CONTROL)


class Gate:
    """
    A named single-wire operation.

    Gate instances are shared templates: a slice stores a reference to the
    same object the toolbox holds, so replacing :attr:`matrix` (as evolving
    gates do on every clock tick) is seen by every slice that uses it. Code
    that builds operators must read :attr:`matrix` at that moment and never
    keep a copy.

    Attributes
    ----------
    symbol:
        Short label, e.g. ``"H"`` or ``"X(t)"``.
    name:
        Human-readable name.
    description:
        Longer help text.
    kind:
        How the gate participates in slice operator construction.
    """

    def __init__(
        self,
        symbol: str,
        matrix: Matrix,
        name: str,
        description: str = "",
        kind: GateKind = GateKind.UNITARY,
    ) -> None:
        self.symbol = symbol
        self.name = name
        self.description = description
        self.kind = kind
        self._matrix = matrix

    @property
    def matrix(self) -> Matrix:
        """The current matrix. Evolving gates replace it as the phase changes."""
        return self._matrix

    @matrix.setter
    def matrix(self, value: Matrix) -> None:
        if not isinstance(value, Matrix):
            raise TypeError(f"Gate matrix must be a Matrix, got {type(value)}.")
        self._matrix = value

    @property
    def is_sentinel(self) -> bool:
        return self.kind is not GateKind.UNITARY

    def matrix_at(self, phase: float) -> Matrix:
        """Matrix at the given clock phase. Fixed gates ignore the phase."""
        return self._matrix

    def validate(self, atol: float = scalar.DEFAULT_ATOL) -> None:
        """
        Check that a non-sentinel gate holds a 2x2 unitary.

        Raises
        ------
        MalformedGateError
            If the matrix is not 2x2 or not unitary within ``atol``.
        """
        if self.is_sentinel:
            return
        matrix = self._matrix
        if matrix.shape != (2, 2):
            logger.warning("Gate %r has a %dx%d matrix", self.symbol, *matrix.shape)
            raise MalformedGateError(
                f"Gate {self.symbol!r} must have a 2x2 matrix, got "
                f"{matrix.height}x{matrix.width}."
            )
        if not matrix.times(matrix.adjoint()).equals(Matrix.identity(2), atol=atol):
            logger.warning("Gate %r is not unitary: %s", self.symbol, matrix)
            raise MalformedGateError(f"Gate {self.symbol!r} is not unitary: {matrix}.")

    @classmethod
    def from_rotation(
        cls,
        x: float,
        y: float,
        z: float,
        symbol: Optional[str] = None,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> "Gate":
        """A fixed gate turning the Bloch sphere, see :meth:`Matrix.from_rotation`."""
        axis = ", ".join(scalar.format_complex(v) for v in (x, y, z))
        if symbol is None:
            symbol = f"R[{axis}]"
        if name is None:
            name = "Rotation Gate"
        if description is None:
            description = (
                f"Rotates the Bloch sphere about ({axis}); the axis length is the "
                "fraction of a full turn."
            )
        return cls(symbol, Matrix.from_rotation(x, y, z), name, description)

    def __repr__(self) -> str:
        return f"Gate({self.symbol!r}, name={self.name!r}, kind={self.kind.value})"


CONTROL = Gate(
    "•",
    Matrix.square(0, 0, 0, 1),
    "Control",
    "Conditions the other operations in its column on this wire being ON.",
    kind=GateKind.CONTROL,
)

ANTI_CONTROL = Gate(
    "◦",
    Matrix.square(1, 0, 0, 0),
    "Anti-Control",
    "Conditions the other operations in its column on this wire being OFF.",
    kind=GateKind.ANTI_CONTROL,
)

PEEK = Gate(
    "∡",
    Matrix.identity(2),
    "Peek",
    "Shows the chance that this wire is ON at this point of the circuit.\n"
    "Has no effect on the state.",
    kind=GateKind.PEEK,
)


__all__ = ["ANTI_CONTROL", "CONTROL", "PEEK", "Gate", "GateKind"]
