"""Z-basis measurement with Born-rule sampling and state collapse."""

import math
from typing import Optional, Tuple

import numpy as np

from qperceptron.constants import PROBABILITY_EPSILON
from qperceptron.core.quantum.gates import qubit_mask
from qperceptron.errors import DegenerateStateError


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(seed)


def _outcome_mask(vector: np.ndarray, num_qubits: int, qubit: int) -> np.ndarray:
    mask = qubit_mask(num_qubits, qubit)
    return (np.arange(len(vector)) & mask) != 0


def probabilities(vector: np.ndarray) -> np.ndarray:
    return np.abs(np.asarray(vector)) ** 2


def probability_of_one(vector: np.ndarray, num_qubits: int, qubit: int) -> float:
    ones = _outcome_mask(vector, num_qubits, qubit)
    return float(np.sum(probabilities(vector)[ones]))


def sample_outcome(p1: float, rng, epsilon: float = PROBABILITY_EPSILON) -> int:
    """Pick 0 or 1 given the probability of 1.

    Certain outcomes (``p1`` within ``epsilon`` of 0 or 1) are returned
    without consuming a random draw.
    """
    p1 = min(max(p1, 0.0), 1.0)
    if p1 <= epsilon:
        return 0
    if p1 >= 1.0 - epsilon:
        return 1
    return 1 if rng.random() < p1 else 0


def collapse(vector: np.ndarray, num_qubits: int, qubit: int, outcome: int) -> np.ndarray:
    """Project onto ``outcome`` for ``qubit`` and renormalize."""
    v = np.asarray(vector, dtype=np.complex128)
    keep = _outcome_mask(v, num_qubits, qubit)
    if outcome == 0:
        keep = ~keep
    out = np.where(keep, v, 0.0).astype(np.complex128)
    p_outcome = float(np.sum(np.abs(out) ** 2))
    if p_outcome <= 0.0 or not math.isfinite(p_outcome):
        raise DegenerateStateError(
            f"Cannot collapse qubit {qubit} onto {outcome}: outcome has zero probability"
        )
    return out / math.sqrt(p_outcome)


def measure(vector: np.ndarray, num_qubits: int, qubit: int, rng) -> Tuple[int, np.ndarray]:
    """Measure ``qubit`` and return ``(bit, collapsed_vector)``."""
    p1 = probability_of_one(vector, num_qubits, qubit)
    outcome = sample_outcome(p1, rng)
    return outcome, collapse(vector, num_qubits, qubit, outcome)


__all__ = [
    "make_rng",
    "probabilities",
    "probability_of_one",
    "sample_outcome",
    "collapse",
    "measure",
]
