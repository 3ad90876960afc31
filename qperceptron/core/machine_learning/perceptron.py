"""
Quantum perceptron evaluator
Encodes labelled scalar points into a two-qubit register, rotates by the model
parameter and measures whether the predicted label matches the expected one.
"""

import math
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence, Tuple

import numpy as np

from qperceptron.constants import (
    DATA_QUBIT,
    LABEL_QUBIT,
    MAJORITY_THRESHOLD,
    NUM_QUBITS,
    VALID_LABELS,
)
from qperceptron.core.quantum.register import QuantumRegister
from qperceptron.core_types import DataPoint
from qperceptron.errors import InvalidArgumentError
from qperceptron.utils.logger import get_logger

logger = get_logger(__name__)


def encode(point: DataPoint, register: QuantumRegister) -> None:
    """Reset ``register`` and load ``point`` into it.

    The value becomes a Y rotation on the data qubit; a label of 1 flips the
    label qubit.
    """
    register.reset()
    register.ry(DATA_QUBIT, point.value)
    if point.label == 1:
        register.x(LABEL_QUBIT)


def classify_one(alpha: float, register: QuantumRegister) -> bool:
    """Run one classification trial on an encoded register.

    CNOT writes (predicted XOR expected) onto the label qubit, so a 0 means
    the model agreed with the label.
    """
    register.ry(DATA_QUBIT, -alpha)
    register.cnot(DATA_QUBIT, LABEL_QUBIT)
    return register.measure(LABEL_QUBIT) == 0


def is_majority(successes: int, n_iterations: int) -> bool:
    return successes > MAJORITY_THRESHOLD * n_iterations


def is_integer(value) -> bool:
    return not isinstance(value, bool) and isinstance(value, (int, np.integer))


def finite_float(value, name: str) -> float:
    try:
        result = float(value)
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(result):
        raise InvalidArgumentError(f"{name} is not finite: {result!r}")
    return result


def validate_inputs(data_points: Sequence[float], labels: Sequence[int], n_iterations: int) -> List[DataPoint]:
    """Check evaluation inputs and pair them into DataPoints."""
    if not is_integer(n_iterations):
        raise InvalidArgumentError(f"n_iterations must be an integer, got {n_iterations!r}")
    if n_iterations <= 0:
        raise InvalidArgumentError(f"n_iterations must be positive, got {n_iterations}")
    if len(data_points) != len(labels):
        raise InvalidArgumentError(
            f"data_points and labels differ in length ({len(data_points)} != {len(labels)})"
        )
    if len(data_points) == 0:
        raise InvalidArgumentError("at least one data point is required")

    points = []
    for i, (value, label) in enumerate(zip(data_points, labels)):
        if not is_integer(label) or label not in VALID_LABELS:
            raise InvalidArgumentError(f"label at index {i} must be 0 or 1, got {label!r}")
        value = finite_float(value, f"data point at index {i}")
        points.append(DataPoint(value, int(label)))
    return points


class ClassifierEvaluator:
    """Measures how well a fixed ``alpha`` classifies a labelled dataset.

    With ``workers == 1`` every trial runs on one register and one random
    stream, in order. With ``workers > 1`` points are spread over a thread
    pool; each point gets its own register and a random stream spawned from
    ``seed``, so the result does not depend on scheduling.
    """

    def __init__(self, seed: Optional[int] = None, workers: int = 1,
                 rng: Optional[np.random.Generator] = None):
        if not is_integer(workers) or workers < 1:
            raise InvalidArgumentError(f"workers must be a positive integer, got {workers!r}")
        self.seed = seed
        self.workers = int(workers)
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.register = QuantumRegister(NUM_QUBITS, rng=self.rng)

    def run_point(self, alpha: float, point: DataPoint, n_iterations: int,
                  register: Optional[QuantumRegister] = None) -> int:
        """Number of successful trials out of ``n_iterations`` for one point."""
        register = register if register is not None else self.register
        successes = 0
        for _ in range(n_iterations):
            encode(point, register)
            if classify_one(alpha, register):
                successes += 1
        return successes

    def evaluate_detailed(self, alpha: float, data_points: Sequence[float],
                          labels: Sequence[int], n_iterations: int) -> Tuple[float, List[int]]:
        """Return ``(success_rate, successes_per_point)``."""
        alpha = finite_float(alpha, "alpha")
        points = validate_inputs(data_points, labels, n_iterations)
        logger.debug("Evaluating %d points x %d trials at alpha=%.6f", len(points), n_iterations, alpha)

        if self.workers > 1:
            successes = self._run_parallel(alpha, points, n_iterations)
        else:
            successes = [self.run_point(alpha, p, n_iterations) for p in points]

        correct = 0
        for point, s in zip(points, successes):
            ok = is_majority(s, n_iterations)
            logger.debug("point value=%.6f label=%d: %d/%d trials succeeded (%s)",
                         point.value, point.label, s, n_iterations, "correct" if ok else "wrong")
            if ok:
                correct += 1

        rate = correct / len(points)
        logger.info("alpha=%.6f classified %d/%d points correctly (rate=%.4f)",
                    alpha, correct, len(points), rate)
        return rate, successes

    def evaluate(self, alpha: float, data_points: Sequence[float],
                 labels: Sequence[int], n_iterations: int) -> float:
        rate, _ = self.evaluate_detailed(alpha, data_points, labels, n_iterations)
        return rate

    def _run_parallel(self, alpha: float, points: List[DataPoint], n_iterations: int) -> List[int]:
        if self.seed is not None:
            seed_seq = np.random.SeedSequence(self.seed)
        else:
            seed_seq = np.random.SeedSequence(int(self.rng.integers(0, 2 ** 32)))
        children = seed_seq.spawn(len(points))

        def task(index: int) -> int:
            register = QuantumRegister(NUM_QUBITS, rng=np.random.default_rng(children[index]))
            return self.run_point(alpha, points[index], n_iterations, register=register)

        with ThreadPoolExecutor(max_workers=self.workers, thread_name_prefix="qperceptron") as executor:
            return list(executor.map(task, range(len(points))))


def evaluate(alpha: float, data_points: Sequence[float], labels: Sequence[int],
             n_iterations: int, seed: Optional[int] = None, workers: int = 1) -> float:
    """Success rate of ``alpha`` on the dataset, in [0, 1]."""
    return ClassifierEvaluator(seed=seed, workers=workers).evaluate(
        alpha, data_points, labels, n_iterations
    )


__all__ = [
    "encode",
    "classify_one",
    "is_majority",
    "validate_inputs",
    "ClassifierEvaluator",
    "evaluate",
]
