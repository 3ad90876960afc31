import time
from typing import Optional

from qperceptron.core.machine_learning.perceptron import ClassifierEvaluator, is_integer, is_majority
from qperceptron.core_types import EvaluationReport
from qperceptron.errors import InvalidArgumentError
from qperceptron.runtime import dataset, output_manager
from qperceptron.utils.logger import get_logger
from qperceptron.utils.metrics import binomial_standard_error, compute_basic_stats

logger = get_logger(__name__)


def run_evaluation(alpha: float, n_points: int, n_iterations: int, seed: Optional[int] = None,
                   workers: int = 1, true_alpha: Optional[float] = None, margin: float = 0.0,
                   output_name: Optional[str] = None, out_dir=None) -> EvaluationReport:
    """Generate a dataset labelled by ``true_alpha`` and score ``alpha`` on it."""
    if seed is not None and (not is_integer(seed) or seed < 0):
        raise InvalidArgumentError(f"seed must be a non-negative integer, got {seed!r}")
    if true_alpha is None:
        true_alpha = alpha
    values, labels = dataset.generate_dataset(n_points, true_alpha, margin=margin, seed=seed)

    logger.info("Evaluating alpha = %s", alpha)
    start = time.perf_counter()
    # measurement draws must not reuse the stream that placed the points
    eval_seed = None if seed is None else seed + 1
    evaluator = ClassifierEvaluator(seed=eval_seed, workers=workers)
    rate, successes = evaluator.evaluate_detailed(alpha, values, labels, n_iterations)
    elapsed = time.perf_counter() - start

    report = EvaluationReport(
        alpha=float(alpha),
        success_rate=rate,
        correct_points=sum(1 for s in successes if is_majority(s, n_iterations)),
        total_points=len(values),
        n_iterations=n_iterations,
        trial_success_fractions=[s / n_iterations for s in successes],
        seed=seed,
        true_alpha=float(true_alpha),
        elapsed_seconds=elapsed,
    )
    stats = compute_basic_stats(report.trial_success_fractions)
    # pooled over every trial of every point
    stderr = binomial_standard_error(stats["mean"], n_iterations * len(values))
    logger.info("Success rate %.4f in %.2fs (trial success mean=%.4f +/- %.4f, min=%.4f)",
                rate, elapsed, stats["mean"], stderr, stats["min"])

    if output_name:
        metrics = report.to_dict()
        metrics["trial_success_stats"] = stats
        metrics["trial_success_stderr"] = stderr
        output_manager.save_metrics(metrics, name=output_name, out_dir=out_dir)
    return report

__all__ = ["run_evaluation"]
