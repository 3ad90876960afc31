"""Configuration for qperceptron environment variables."""

import os
from pathlib import Path
from typing import Optional

from qperceptron.constants import DEFAULT_ITERATIONS, DEFAULT_POINTS

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

# Paths
OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR", PROJECT_ROOT / "output"))
LOGS_DIR = Path(os.getenv("LOGS_DIR", PROJECT_ROOT / "logs"))
CONFIG_DIR = Path(os.getenv("CONFIG_DIR", PROJECT_ROOT / "config"))

# Evaluation defaults
_seed = os.getenv("QPERCEPTRON_SEED")
SEED: Optional[int] = int(_seed) if _seed not in (None, "") else None
ITERATIONS = int(os.getenv("QPERCEPTRON_ITERATIONS", str(DEFAULT_ITERATIONS)))
POINTS = int(os.getenv("QPERCEPTRON_POINTS", str(DEFAULT_POINTS)))
WORKERS = int(os.getenv("QPERCEPTRON_WORKERS", "1"))
MARGIN = float(os.getenv("QPERCEPTRON_MARGIN", "0.0"))

# Logging settings
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "true").lower() == "true"

__all__ = [
    "PROJECT_ROOT",
    "OUTPUT_DIR",
    "LOGS_DIR",
    "CONFIG_DIR",
    "SEED",
    "ITERATIONS",
    "POINTS",
    "WORKERS",
    "MARGIN",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_TO_FILE",
]
