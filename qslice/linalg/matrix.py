"""Dense complex matrices backed by double-precision torch tensors.

A :class:`Matrix` is immutable: every operation returns a new instance and
the wrapped tensor is never handed out for mutation. Column vectors are the
``width == 1`` case, so state vectors and operators share one type.

Tensor products follow the textbook Kronecker layout: in ``a.tensor_product(b)``
the left factor varies slowest. A whole-register operator is therefore built
as ``tensor_all([u[n-1], ..., u[0]])`` so that bit ``k`` of a basis index is
wire ``k``.
"""

from __future__ import annotations

import cmath
import math
from typing import Iterable, Sequence, Tuple

import numpy as np
import torch

from ..core.device import default_device
from ..errors import DimensionMismatchError
from . import scalar

_PAULI_X = ((0, 1), (1, 0))
_PAULI_Y = ((0, -1j), (1j, 0))
_PAULI_Z = ((1, 0), (0, -1))

# Below this axis length a rotation is treated as the identity.
_ROTATION_EPSILON = 1e-12


def _storage() -> Tuple[torch.dtype, torch.device]:
    dev = default_device()
    return dev.complex_dtype, dev.as_torch_device()


class Matrix:
    """Immutable dense rectangular array of complex numbers."""

    __slots__ = ("_data",)

    def __init__(self, data: torch.Tensor | np.ndarray) -> None:
        dtype, device = _storage()
        tensor = torch.as_tensor(data, dtype=dtype, device=device)
        if tensor.dim() != 2:
            raise DimensionMismatchError(
                f"Matrix data must be 2-dimensional, got shape {tuple(tensor.shape)}."
            )
        if tensor.shape[0] == 0 or tensor.shape[1] == 0:
            raise DimensionMismatchError("Matrix must have at least one row and column.")
        self._data = tensor.clone()

    # -- construction -----------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[complex]]) -> "Matrix":
        """Build a matrix from a sequence of equal-length rows."""
        rows = [list(row) for row in rows]
        if not rows:
            raise DimensionMismatchError("Matrix needs at least one row.")
        width = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != width:
                raise DimensionMismatchError(
                    f"Row {index} has length {len(row)}, expected {width}."
                )
        dtype, device = _storage()
        values = [[complex(v) for v in row] for row in rows]
        return cls(torch.tensor(values, dtype=dtype, device=device))

    @classmethod
    def col(cls, *values: complex) -> "Matrix":
        """Column vector with the given entries, top to bottom."""
        return cls.from_rows([[v] for v in values])

    @classmethod
    def square(cls, *values: complex) -> "Matrix":
        """Square matrix from its entries in row-major order."""
        side = math.isqrt(len(values))
        if side * side != len(values) or side == 0:
            raise DimensionMismatchError(
                f"{len(values)} entries do not form a square matrix."
            )
        return cls.from_rows(
            [values[row * side:(row + 1) * side] for row in range(side)]
        )

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        """The ``n x n`` identity."""
        if n < 1:
            raise ValueError(f"identity size must be >= 1, got {n}.")
        dtype, device = _storage()
        return cls(torch.eye(n, dtype=dtype, device=device))

    @classmethod
    def zeros(cls, height: int, width: int) -> "Matrix":
        dtype, device = _storage()
        return cls(torch.zeros((height, width), dtype=dtype, device=device))

    @classmethod
    def from_rotation(cls, x: float, y: float, z: float) -> "Matrix":
        """
        Unitary that turns the Bloch sphere by ``t`` full turns about ``(x, y, z)``.

        ``t = sqrt(x**2 + y**2 + z**2)`` and the axis is ``(x, y, z) / t``.
        The global phase is fixed so that the operator equals
        ``(n.sigma) ** (2t)``:

            U = (1 + e^{i 2 pi t}) / 2 * I + (1 - e^{i 2 pi t}) / 2 * (n.sigma)

        A half turn (``t = 0.5``) is exactly the Pauli matrix for that axis
        (or the Hadamard matrix for the X+Z diagonal), a quarter turn is its
        square root, and ``t = 0`` or ``t = 1`` give the identity.
        """
        t = math.sqrt(x * x + y * y + z * z)
        if t < _ROTATION_EPSILON:
            return cls.identity(2)

        nx, ny, nz = x / t, y / t, z / t
        phase = cmath.exp(2j * math.pi * t)
        ci = (1 + phase) / 2
        cv = (1 - phase) / 2

        entries = []
        for row in range(2):
            for column in range(2):
                sigma = (
                    nx * _PAULI_X[row][column]
                    + ny * _PAULI_Y[row][column]
                    + nz * _PAULI_Z[row][column]
                )
                diagonal = 1 if row == column else 0
                entries.append(
                    scalar.add(scalar.mul(ci, diagonal), scalar.mul(cv, sigma))
                )
        return cls.square(*entries)

    # -- shape and access -------------------------------------------------

    @property
    def width(self) -> int:
        return int(self._data.shape[1])

    @property
    def height(self) -> int:
        return int(self._data.shape[0])

    @property
    def shape(self) -> Tuple[int, int]:
        """``(height, width)``, matching torch/numpy ordering."""
        return self.height, self.width

    def is_square(self) -> bool:
        return self.width == self.height

    def __getitem__(self, index: Tuple[int, int]) -> complex:
        row, column = index
        return complex(self._data[row, column].item())

    @property
    def rows(self) -> Tuple[Tuple[complex, ...], ...]:
        """Entries as nested tuples of Python complex numbers."""
        return tuple(tuple(complex(v) for v in row) for row in self._data.tolist())

    def column_values(self, column: int = 0) -> Tuple[complex, ...]:
        """One column as a tuple; for a state vector, its amplitudes."""
        return tuple(complex(v) for v in self._data[:, column].tolist())

    def to_tensor(self) -> torch.Tensor:
        """Return a copy of the underlying tensor."""
        return self._data.clone()

    def tensor_view(self) -> torch.Tensor:
        """Return the underlying tensor without copying. Do not mutate it."""
        return self._data

    def to_numpy(self) -> np.ndarray:
        return self._data.detach().cpu().numpy().copy()

    # -- algebra ----------------------------------------------------------

    def times(self, other: "Matrix") -> "Matrix":
        """Matrix product ``self @ other``."""
        if self.width != other.height:
            raise DimensionMismatchError(
                f"Cannot multiply {self.height}x{self.width} by "
                f"{other.height}x{other.width} matrix."
            )
        return Matrix(self._data @ other._data)

    def __matmul__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.times(other)

    def tensor_product(self, other: "Matrix") -> "Matrix":
        """Kronecker product; ``self`` is the slow-varying factor."""
        return Matrix(torch.kron(self._data, other._data))

    def tensor_power(self, exponent: int) -> "Matrix":
        """``self`` tensored with itself ``exponent`` times (``exponent >= 1``)."""
        if exponent < 1:
            raise ValueError(f"tensor_power exponent must be >= 1, got {exponent}.")
        result = self
        for _ in range(exponent - 1):
            result = result.tensor_product(self)
        return result

    def plus(self, other: "Matrix") -> "Matrix":
        if self.shape != other.shape:
            raise DimensionMismatchError(
                f"Cannot add {self.height}x{self.width} and "
                f"{other.height}x{other.width} matrices."
            )
        return Matrix(self._data + other._data)

    def __add__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.plus(other)

    def scaled_by(self, factor: complex) -> "Matrix":
        return Matrix(self._data * complex(factor))

    def adjoint(self) -> "Matrix":
        """Conjugate transpose."""
        return Matrix(self._data.conj().transpose(0, 1))

    # -- comparison -------------------------------------------------------

    def equals(self, other: "Matrix", atol: float = scalar.DEFAULT_ATOL) -> bool:
        """Entrywise approximate equality; different shapes are never equal."""
        if self.shape != other.shape:
            return False
        diff = self._data - other._data
        return bool(
            torch.all(diff.real.abs() <= atol) and torch.all(diff.imag.abs() <= atol)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        body = "}, {".join(
            ", ".join(scalar.format_complex(v) for v in row) for row in self.rows
        )
        return "{{" + body + "}}"

    def __repr__(self) -> str:
        return f"Matrix({self})"


def tensor_all(factors: Iterable[Matrix]) -> Matrix:
    """Kronecker product of ``factors`` evaluated left-to-right."""
    result = None
    for factor in factors:
        result = factor if result is None else result.tensor_product(factor)
    if result is None:
        raise ValueError("Provide at least one matrix to tensor_all.")
    return result


__all__ = ["Matrix", "tensor_all"]
