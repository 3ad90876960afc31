"""State-vector quantum register."""

from typing import Optional

import numpy as np

from qperceptron.constants import NORM_TOLERANCE
from qperceptron.core.quantum import gates, measurement
from qperceptron.core_types import GateDescriptor, GateKind
from qperceptron.errors import InvalidArgumentError


class QuantumRegister:
    """Pure state of ``num_qubits`` qubits held as a complex amplitude vector.

    The register owns its random source so that measurement is reproducible
    when the caller passes a seeded generator. It starts in |0...0>.
    """

    def __init__(self, num_qubits: int, rng: Optional[np.random.Generator] = None):
        if isinstance(num_qubits, bool) or not isinstance(num_qubits, (int, np.integer)) or num_qubits < 1:
            raise InvalidArgumentError(f"num_qubits must be a positive integer, got {num_qubits!r}")
        self.num_qubits = int(num_qubits)
        self.rng = rng if rng is not None else measurement.make_rng()
        self._amplitudes = np.zeros(1 << self.num_qubits, dtype=np.complex128)
        self.reset()

    @property
    def amplitudes(self) -> np.ndarray:
        view = self._amplitudes.view()
        view.flags.writeable = False
        return view

    def reset(self) -> None:
        self._amplitudes[:] = 0.0
        self._amplitudes[0] = 1.0

    def apply_gate(self, descriptor: GateDescriptor) -> Optional[int]:
        """Apply ``descriptor``. Returns the measured bit for MEASURE, else None."""
        if descriptor.kind == GateKind.RESET:
            self.reset()
            return None
        if descriptor.kind == GateKind.MEASURE:
            if len(descriptor.targets) != 1:
                raise InvalidArgumentError("measure expects exactly one target qubit")
            return self.measure(descriptor.targets[0])
        self._amplitudes = gates.apply_gate(self._amplitudes, self.num_qubits, descriptor)
        return None

    def ry(self, qubit: int, angle: float) -> None:
        self.apply_gate(GateDescriptor.ry(qubit, angle))

    def x(self, qubit: int) -> None:
        self.apply_gate(GateDescriptor.x(qubit))

    def cnot(self, control: int, target: int) -> None:
        self.apply_gate(GateDescriptor.cnot(control, target))

    def measure(self, qubit: int) -> int:
        outcome, self._amplitudes = measurement.measure(
            self._amplitudes, self.num_qubits, qubit, self.rng
        )
        return outcome

    def probabilities(self) -> np.ndarray:
        return measurement.probabilities(self._amplitudes)

    def probability_of_one(self, qubit: int) -> float:
        return measurement.probability_of_one(self._amplitudes, self.num_qubits, qubit)

    def norm(self) -> float:
        return float(np.vdot(self._amplitudes, self._amplitudes).real)

    def is_normalized(self, tol: float = NORM_TOLERANCE) -> bool:
        return abs(1.0 - self.norm()) <= tol

    def __repr__(self) -> str:
        return f"QuantumRegister(num_qubits={self.num_qubits})"


__all__ = ["QuantumRegister"]
