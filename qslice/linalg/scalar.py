"""Complex scalar helpers.

Amplitudes are plain Python ``complex`` values. These functions are the
public scalar API for code that reads single amplitudes out of a
:class:`~qslice.linalg.matrix.Matrix`. :class:`Matrix` applies the same
rules elementwise in torch; both take their default tolerance from
:data:`DEFAULT_ATOL`, which is ``DEFAULT_CONFIG.atol``.
"""

from __future__ import annotations

import math

from ..config import DEFAULT_CONFIG

DEFAULT_ATOL = DEFAULT_CONFIG.atol


def add(a: complex, b: complex) -> complex:
    return complex(a) + complex(b)


def mul(a: complex, b: complex) -> complex:
    return complex(a) * complex(b)


def conj(a: complex) -> complex:
    return complex(a).conjugate()


def magnitude(a: complex) -> float:
    """Return ``sqrt(real**2 + imag**2)``."""
    a = complex(a)
    return math.hypot(a.real, a.imag)


def norm2(a: complex) -> float:
    """Return the squared magnitude, i.e. the probability mass of an amplitude."""
    a = complex(a)
    return a.real * a.real + a.imag * a.imag


def approx_equal(a: complex, b: complex, atol: float = DEFAULT_ATOL) -> bool:
    """True when both the real and the imaginary parts differ by at most ``atol``."""
    a = complex(a)
    b = complex(b)
    return abs(a.real - b.real) <= atol and abs(a.imag - b.imag) <= atol


def _format_real(value: float) -> str:
    text = f"{value:.6g}"
    return "0" if text == "-0" else text


def format_complex(a: complex) -> str:
    """
    Deterministic short text for an amplitude.

    Examples: ``1``, ``-0.5``, ``i``, ``-i``, ``0.707107i``, ``0.5+0.5i``,
    ``0.5-0.5i``. Parts are printed with 6 significant digits.
    """
    a = complex(a)
    re = _format_real(a.real)
    im = _format_real(a.imag)
    if im == "0":
        return re
    if im == "1":
        im_text = "i"
    elif im == "-1":
        im_text = "-i"
    else:
        im_text = f"{im}i"
    if re == "0":
        return im_text
    if im_text.startswith("-"):
        return f"{re}{im_text}"
    return f"{re}+{im_text}"


__all__ = [
    "DEFAULT_ATOL",
    "add",
    "approx_equal",
    "conj",
    "format_complex",
    "magnitude",
    "mul",
    "norm2",
]
