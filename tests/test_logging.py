"""Tests for logging utilities."""

import logging
import math
from io import StringIO

import pytest

from qslice.circuit import OperationSlice
from qslice.errors import MalformedGateError
from qslice.gates import Gate, PhaseClock, evolving_x, library
from qslice.linalg import Matrix
from qslice.logging import (
    configure_logging,
    get_logger,
    set_log_level,
)


@pytest.fixture
def captured():
    """Route all qslice loggers into a buffer at DEBUG, then restore."""
    get_logger("test_module")
    stream = StringIO()
    configure_logging(level=logging.DEBUG, stream=stream)
    try:
        yield stream
    finally:
        configure_logging(level=logging.WARNING)


def test_get_logger_namespaced():
    """Test that loggers live under the qslice namespace."""
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "qslice.test_module"
    assert get_logger("qslice.circuit").name == "qslice.circuit"
    assert get_logger().name == "qslice"


def test_get_logger_caching():
    """Test that get_logger caches loggers."""
    assert get_logger("test_module") is get_logger("test_module")
    assert get_logger("module1") is not get_logger("module2")


def test_logger_does_not_propagate():
    """Test that loggers don't propagate to root logger."""
    assert get_logger("test_module").propagate is False
    assert len(get_logger("test_module").handlers) == 1


def test_set_log_level_string():
    """Test that set_log_level accepts string levels."""
    logger = get_logger("test_module")
    try:
        set_log_level("DEBUG")
        assert logger.level == logging.DEBUG
        set_log_level("ERROR")
        assert logger.level == logging.ERROR
    finally:
        set_log_level(logging.WARNING)


def test_configure_logging_format(captured):
    """Test that configured output uses the level/name format."""
    get_logger("test_module").info("Test message")
    assert "[INFO] qslice.test_module: Test message" in captured.getvalue()


def test_slice_construction_logged(captured):
    """Test building a slice operator logs its wire roles at DEBUG."""
    OperationSlice([library.H, None]).operator()
    assert "qslice.circuit.slice" in captured.getvalue()
    assert "active=(0,)" in captured.getvalue()


def test_clock_tick_logged(captured):
    """Test clock ticks are logged at DEBUG."""
    PhaseClock([evolving_x()], step=math.pi).tick()
    assert "Clock ticked to 3.1416" in captured.getvalue()


def test_validation_failure_warns(captured):
    """Test a rejected gate logs a warning before raising."""
    with pytest.raises(MalformedGateError):
        Gate("S?", Matrix.square(1, 1, 0, 1), "Shear").validate()
    assert "[WARNING]" in captured.getvalue()


def test_configured_stream_used_by_new_loggers(captured):
    """Test loggers created after configure_logging write to its stream."""
    get_logger("created_after_configure").warning("late logger")
    assert "qslice.created_after_configure: late logger" in captured.getvalue()
