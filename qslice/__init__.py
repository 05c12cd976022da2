"""qslice - a slice-by-slice quantum circuit simulator on dense torch matrices."""

__version__ = "0.1.0"

# Circuit model
from .circuit import Circuit, OperationSlice, build_slice_operator

# Settings and errors
from .config import DEFAULT_CONFIG, SimulatorConfig
from .core import Device, default_device, device
from .errors import ConfigurationError, DimensionMismatchError, MalformedGateError

# Evolution
from .evolution import basis_state, circuit_operator, evolve, final_state, initial_state

# Gates
from .gates import (
    ANTI_CONTROL,
    CONTROL,
    PEEK,
    EvolvingGate,
    Gate,
    GateKind,
    PhaseClock,
    Toolbox,
    default_toolbox,
)

# Linear algebra
from .linalg import Matrix, tensor_all

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Measurement
from .measurement import (
    PeekStatistics,
    conditional_probability,
    marginal_probability,
    slice_peek_statistics,
    wire_probabilities,
)

__all__ = [
    "__version__",
    "ANTI_CONTROL",
    "CONTROL",
    "Circuit",
    "ConfigurationError",
    "DEFAULT_CONFIG",
    "Device",
    "DimensionMismatchError",
    "EvolvingGate",
    "Gate",
    "GateKind",
    "MalformedGateError",
    "Matrix",
    "OperationSlice",
    "PEEK",
    "PeekStatistics",
    "PhaseClock",
    "SimulatorConfig",
    "Toolbox",
    "basis_state",
    "build_slice_operator",
    "circuit_operator",
    "conditional_probability",
    "configure_logging",
    "default_device",
    "default_toolbox",
    "device",
    "evolve",
    "final_state",
    "get_logger",
    "initial_state",
    "marginal_probability",
    "set_log_level",
    "slice_peek_statistics",
    "tensor_all",
    "wire_probabilities",
]
