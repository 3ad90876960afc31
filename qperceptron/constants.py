"""Project constants and fixed policy values."""

import math

# Version
__version__ = "0.1.0"

# Register layout
NUM_QUBITS = 2
DATA_QUBIT = 0
LABEL_QUBIT = 1

# Numerical tolerances
NORM_TOLERANCE = 1e-9
PROBABILITY_EPSILON = 1e-12  # p1 within this of 0 or 1 is treated as certain
UNITARY_TOLERANCE = 1e-10

# Classification policy
MAJORITY_THRESHOLD = 0.5  # a point counts as correct when strictly more than this fraction of trials succeed
VALID_LABELS = (0, 1)

# Dataset defaults
DATASET_LOW = 0.0
DATASET_HIGH = math.pi

# Evaluation defaults
DEFAULT_ITERATIONS = 201
DEFAULT_POINTS = 100

# Exit codes
EXIT_OK = 0
EXIT_INVALID_ARGUMENT = 2

__all__ = [
    "__version__",
    "NUM_QUBITS",
    "DATA_QUBIT",
    "LABEL_QUBIT",
    "NORM_TOLERANCE",
    "PROBABILITY_EPSILON",
    "UNITARY_TOLERANCE",
    "MAJORITY_THRESHOLD",
    "VALID_LABELS",
    "DATASET_LOW",
    "DATASET_HIGH",
    "DEFAULT_ITERATIONS",
    "DEFAULT_POINTS",
    "EXIT_OK",
    "EXIT_INVALID_ARGUMENT",
]
