"""Gate library for the state-vector simulator.

Every function here is pure: it takes an amplitude vector and returns a new
one, leaving the input untouched. Qubit 0 is the most significant bit of the
basis-state index, so in a two-qubit register index ``0b10`` is qubit 0 set
and qubit 1 clear.
"""

import math
from typing import Tuple

import numpy as np

from qperceptron.constants import UNITARY_TOLERANCE
from qperceptron.core_types import GateDescriptor, GateKind
from qperceptron.errors import InvalidArgumentError, QubitIndexError

X_MATRIX = np.array([[0, 1], [1, 0]], dtype=np.complex128)


def ry_matrix(theta: float) -> np.ndarray:
    c = math.cos(theta / 2.0)
    s = math.sin(theta / 2.0)
    return np.array([[c, -s], [s, c]], dtype=np.complex128)


def is_unitary(matrix: np.ndarray, tol: float = UNITARY_TOLERANCE) -> bool:
    """Return True if ``matrix`` is square and ``U^dagger U`` is the identity."""
    m = np.asarray(matrix, dtype=np.complex128)
    if m.ndim != 2 or m.shape[0] != m.shape[1]:
        return False
    return bool(np.allclose(m.conj().T @ m, np.eye(m.shape[0]), atol=tol))


def qubit_mask(num_qubits: int, qubit: int) -> int:
    """Bit of the basis-state index that holds ``qubit``."""
    check_qubit(num_qubits, qubit)
    return 1 << (num_qubits - 1 - qubit)


def check_qubit(num_qubits: int, qubit: int) -> None:
    if isinstance(qubit, bool) or not isinstance(qubit, (int, np.integer)):
        raise QubitIndexError(f"Qubit index must be an integer, got {qubit!r}")
    if not 0 <= qubit < num_qubits:
        raise QubitIndexError(
            f"Qubit index {qubit} out of range for a {num_qubits}-qubit register"
        )


def _pairs(num_qubits: int, qubit: int) -> Tuple[np.ndarray, np.ndarray]:
    """Indices (i0, i1) of every basis-state pair that differs only in ``qubit``."""
    mask = qubit_mask(num_qubits, qubit)
    indices = np.arange(1 << num_qubits)
    zeros = indices[(indices & mask) == 0]
    return zeros, zeros | mask


def _check_vector(vector: np.ndarray, num_qubits: int) -> np.ndarray:
    v = np.asarray(vector, dtype=np.complex128)
    if v.shape != (1 << num_qubits,):
        raise InvalidArgumentError(
            f"Amplitude vector of shape {v.shape} does not match {num_qubits} qubits"
        )
    return v


def apply_single_qubit(vector: np.ndarray, num_qubits: int, qubit: int, matrix: np.ndarray) -> np.ndarray:
    """Apply a 2x2 ``matrix`` to ``qubit``, mixing each (|..0..>, |..1..>) pair."""
    v = _check_vector(vector, num_qubits)
    i0, i1 = _pairs(num_qubits, qubit)
    a0 = v[i0]
    a1 = v[i1]
    out = v.copy()
    out[i0] = matrix[0, 0] * a0 + matrix[0, 1] * a1
    out[i1] = matrix[1, 0] * a0 + matrix[1, 1] * a1
    return out


def apply_ry(vector: np.ndarray, num_qubits: int, qubit: int, theta: float) -> np.ndarray:
    """Rotate ``qubit`` about the Y axis by ``theta``.

    On |0> this produces ``cos(theta/2)|0> + sin(theta/2)|1>``.
    """
    return apply_single_qubit(vector, num_qubits, qubit, ry_matrix(theta))


def apply_x(vector: np.ndarray, num_qubits: int, qubit: int) -> np.ndarray:
    v = _check_vector(vector, num_qubits)
    i0, i1 = _pairs(num_qubits, qubit)
    out = v.copy()
    out[i0] = v[i1]
    out[i1] = v[i0]
    return out


def apply_cnot(vector: np.ndarray, num_qubits: int, control: int, target: int) -> np.ndarray:
    """Flip ``target`` on every basis state where ``control`` is 1."""
    v = _check_vector(vector, num_qubits)
    control_mask = qubit_mask(num_qubits, control)
    check_qubit(num_qubits, target)
    if control == target:
        raise InvalidArgumentError("CNOT control and target must be different qubits")
    i0, i1 = _pairs(num_qubits, target)
    active = (i0 & control_mask) != 0
    i0, i1 = i0[active], i1[active]
    out = v.copy()
    out[i0] = v[i1]
    out[i1] = v[i0]
    return out


def apply_gate(vector: np.ndarray, num_qubits: int, descriptor: GateDescriptor) -> np.ndarray:
    """Dispatch a unitary gate descriptor. Reset and measure are handled by the register."""
    kind = descriptor.kind
    targets = descriptor.targets
    if kind == GateKind.RY:
        _expect_targets(descriptor, 1)
        return apply_ry(vector, num_qubits, targets[0], descriptor.angle)
    if kind == GateKind.X:
        _expect_targets(descriptor, 1)
        return apply_x(vector, num_qubits, targets[0])
    if kind == GateKind.CNOT:
        _expect_targets(descriptor, 2)
        return apply_cnot(vector, num_qubits, targets[0], targets[1])
    raise InvalidArgumentError(f"{kind.value!r} is not a unitary gate")


def _expect_targets(descriptor: GateDescriptor, count: int) -> None:
    if len(descriptor.targets) != count:
        raise InvalidArgumentError(
            f"{descriptor.kind.value} expects {count} target qubit(s), got {len(descriptor.targets)}"
        )


__all__ = [
    "X_MATRIX",
    "ry_matrix",
    "is_unitary",
    "qubit_mask",
    "check_qubit",
    "apply_single_qubit",
    "apply_ry",
    "apply_x",
    "apply_cnot",
    "apply_gate",
]
