"""Where matrix entries live: torch device plus complex dtype."""

from __future__ import annotations

from typing import Callable, Dict

import torch


class Device:
    """
    A named placement for qslice tensors: the torch device plus the complex
    dtype every matrix is stored in.

    Instances are treated as immutable once built.
    """

    def __init__(
        self,
        name: str,
        torch_device: torch.device,
        complex_dtype: torch.dtype = torch.complex128,
    ) -> None:
        """
        Args:
            name: Logical device name ("cpu" or "cuda").
            torch_device: The torch device tensors are allocated on.
            complex_dtype: Dtype of matrix entries; double precision by default.
        """
        self.name = name
        self.torch_device = torch_device
        self.complex_dtype = complex_dtype

    def __repr__(self) -> str:
        return (
            f"Device({self.name!r}, torch_device={self.torch_device}, "
            f"complex_dtype={self.complex_dtype})"
        )

    def as_torch_device(self) -> torch.device:
        return self.torch_device


def _cpu() -> Device:
    return Device("cpu", torch.device("cpu"))


def _cuda() -> Device:
    if not torch.cuda.is_available():
        raise RuntimeError("CUDA device requested but CUDA is not available.")
    return Device("cuda", torch.device("cuda"))


_FACTORIES: Dict[str, Callable[[], Device]] = {"cpu": _cpu, "cuda": _cuda}


def device(name: str) -> Device:
    """
    Look up a Device by name.

    Raises:
        RuntimeError: If "cuda" is requested but CUDA is not available.
        ValueError: If the device name is not one of "cpu", "cuda".
    """
    try:
        factory = _FACTORIES[name]
    except KeyError:
        raise ValueError(
            f"Unsupported device {name!r}; choose one of {sorted(_FACTORIES)}."
        ) from None
    return factory()


def default_device() -> Device:
    """The device all matrices are created on: CPU, complex128."""
    return device("cpu")
