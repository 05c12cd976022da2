"""Tests for diagnostics and debug mode."""

import math

import pytest
import torch

from qslice.diagnostics import (
    assert_normalized,
    debug_context,
    is_debug_enabled,
    is_unitary,
    set_debug_enabled,
    state_norm,
)
from qslice.gates import library
from qslice.linalg import Matrix


def test_state_norm_matrix_and_tensor() -> None:
    """Test state_norm accepts matrices and raw tensors."""
    assert state_norm(Matrix.col(3, 4j)) == pytest.approx(5.0)
    assert state_norm(torch.tensor([1.0, 0.0], dtype=torch.complex128)) == pytest.approx(1.0)


def test_assert_normalized() -> None:
    """Test assert_normalized accepts unit states and rejects others."""
    half = 1 / math.sqrt(2)
    assert_normalized(Matrix.col(half, half * 1j))
    with pytest.raises(ValueError, match="not normalized"):
        assert_normalized(Matrix.col(1, 1))


def test_assert_normalized_non_finite() -> None:
    """Test NaN amplitudes are reported as non-finite."""
    with pytest.raises(ValueError, match="non-finite"):
        assert_normalized(Matrix.col(float("nan"), 0))


def test_is_unitary() -> None:
    """Test is_unitary on unitary, non-unitary and non-square inputs."""
    assert is_unitary(library.H.matrix)
    assert is_unitary(Matrix.identity(4))
    assert not is_unitary(Matrix.square(1, 1, 0, 1))
    assert not is_unitary(Matrix.col(1, 0))


def test_debug_mode_toggle_and_context() -> None:
    """Test debug mode toggling and context manager."""
    set_debug_enabled(False)
    assert not is_debug_enabled()

    with debug_context(True):
        assert is_debug_enabled()
        with debug_context(False):
            assert not is_debug_enabled()
        assert is_debug_enabled()

    assert not is_debug_enabled()


def test_debug_context_restores_on_error() -> None:
    """Test debug_context restores the flag when the block raises."""
    set_debug_enabled(False)
    with pytest.raises(RuntimeError):
        with debug_context(True):
            raise RuntimeError("boom")
    assert not is_debug_enabled()
