"""
qperceptron
Two-qubit state-vector simulator and quantum perceptron evaluator.
"""

"""Lightweight package initializer.

numpy-backed modules are loaded lazily through the `quantum_api` wrappers;
import `qperceptron.core` directly when you need the full engine.
"""

from .__version__ import __version__
from .core_types import GateKind, GateDescriptor, DataPoint, EvaluationReport
from .errors import (
    QuantumSimulationError,
    InvalidArgumentError,
    QubitIndexError,
    DegenerateStateError,
)
from .quantum_api import is_available as quantum_available, create_register, create_evaluator, evaluate

__all__ = [
    "__version__",
    "GateKind",
    "GateDescriptor",
    "DataPoint",
    "EvaluationReport",
    "QuantumSimulationError",
    "InvalidArgumentError",
    "QubitIndexError",
    "DegenerateStateError",
    "quantum_available",
    "create_register",
    "create_evaluator",
    "evaluate",
]
