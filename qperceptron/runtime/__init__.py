"""Driver: dataset generation, evaluation runs and result output."""
