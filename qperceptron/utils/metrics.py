"""Summary statistics for per-point trial results."""
import numpy as np


def compute_basic_stats(values):
    if len(values) == 0:
        return {}
    arr = np.asarray(values, dtype=float)
    return {
        "min": float(arr.min()),
        "max": float(arr.max()),
        "mean": float(arr.mean()),
        "std": float(arr.std()),
    }


def binomial_standard_error(p, n):
    """Standard error of a success fraction estimated from ``n`` trials."""
    if n <= 0:
        raise ValueError("n must be positive")
    return float(np.sqrt(p * (1.0 - p) / n))

__all__ = ["compute_basic_stats", "binomial_standard_error"]
