"""Synthetic datasets labelled with the same angle convention as the Ry gate."""
import math
from typing import List, Optional, Tuple

import numpy as np

from qperceptron.constants import DATASET_HIGH, DATASET_LOW
from qperceptron.errors import InvalidArgumentError


def label_for(value: float, alpha: float) -> int:
    """1 when Ry(value) followed by Ry(-alpha) is more likely to read 1 than 0."""
    return 1 if math.sin((value - alpha) / 2.0) ** 2 > 0.5 else 0


def boundary_distance(value: float, alpha: float) -> float:
    """Angular distance from ``value`` to the nearest point where the label flips."""
    # cos(value - alpha) == 0 at alpha + pi/2 + k*pi
    offset = (value - alpha - math.pi / 2.0) % math.pi
    return min(offset, math.pi - offset)


def generate_dataset(
    n_points: int,
    alpha: float,
    low: float = DATASET_LOW,
    high: float = DATASET_HIGH,
    margin: float = 0.0,
    seed: Optional[int] = None,
    max_draws: int = 1000000,
) -> Tuple[List[float], List[int]]:
    """Draw ``n_points`` values uniformly from ``[low, high]`` and label them by ``alpha``.

    Values closer than ``margin`` to the decision boundary are rejected and
    redrawn.
    """
    if isinstance(n_points, bool) or not isinstance(n_points, int) or n_points <= 0:
        raise InvalidArgumentError(f"n_points must be a positive integer, got {n_points!r}")
    if not low < high:
        raise InvalidArgumentError(f"low must be below high, got [{low}, {high}]")
    if margin < 0:
        raise InvalidArgumentError(f"margin must be non-negative, got {margin}")

    rng = np.random.default_rng(seed)
    values: List[float] = []
    draws = 0
    while len(values) < n_points:
        if draws >= max_draws:
            raise InvalidArgumentError(
                f"margin {margin} leaves no room in [{low}, {high}] for alpha={alpha}"
            )
        batch = rng.uniform(low, high, size=n_points - len(values))
        draws += len(batch)
        values.extend(float(v) for v in batch if boundary_distance(float(v), alpha) >= margin)

    labels = [label_for(v, alpha) for v in values]
    return values, labels


__all__ = ["label_for", "boundary_distance", "generate_dataset"]
