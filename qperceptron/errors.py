"""Exception types raised by the simulator and the classifier."""


class QuantumSimulationError(Exception):
    """Base exception for simulation errors."""
    pass


class InvalidArgumentError(QuantumSimulationError, ValueError):
    """Raised when caller-supplied inputs violate a precondition."""
    pass


class QubitIndexError(QuantumSimulationError, IndexError):
    """Raised when a gate targets a qubit outside the register."""
    pass


class DegenerateStateError(QuantumSimulationError, ArithmeticError):
    """Raised when measurement would collapse onto a zero-probability outcome."""
    pass


__all__ = [
    "QuantumSimulationError",
    "InvalidArgumentError",
    "QubitIndexError",
    "DegenerateStateError",
]
