"""Command-line entry point for evaluating one perceptron parameter."""

import argparse
import sys
from typing import List, Optional

from qperceptron.constants import EXIT_INVALID_ARGUMENT, EXIT_OK
from qperceptron.errors import InvalidArgumentError
from qperceptron.logging_config import setup_logging
from qperceptron.runtime import initializer
from qperceptron.runtime.evaluation_loop import run_evaluation


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qperceptron",
        description="Estimate the success rate of a quantum perceptron for a fixed alpha",
    )
    parser.add_argument("--alpha", type=float, default=None, help="Model parameter (radians)")
    parser.add_argument("--points", type=int, default=None, help="Number of generated data points")
    parser.add_argument("--iterations", type=int, default=None, help="Trials per data point")
    parser.add_argument("--seed", type=int, default=None, help="Seed for data and measurement")
    parser.add_argument("--workers", type=int, default=None, help="Threads used across data points")
    parser.add_argument("--true-alpha", type=float, default=None,
                        help="Angle used to label the generated data (defaults to --alpha)")
    parser.add_argument("--margin", type=float, default=None,
                        help="Minimum distance of generated points from the decision boundary")
    parser.add_argument("--config", default="config.json", help="JSON settings file")
    parser.add_argument("--output", default=None, help="Write a JSON report with this file name")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = setup_logging(level=args.log_level)

    try:
        cfg = initializer.initialize(
            args.config,
            alpha=args.alpha,
            n_points=args.points,
            n_iterations=args.iterations,
            seed=args.seed,
            workers=args.workers,
            true_alpha=args.true_alpha,
            margin=args.margin,
        )
        report = run_evaluation(
            cfg["alpha"],
            cfg["n_points"],
            cfg["n_iterations"],
            seed=cfg["seed"],
            workers=cfg["workers"],
            true_alpha=cfg["true_alpha"],
            margin=cfg["margin"],
            output_name=args.output,
        )
    except InvalidArgumentError as e:
        logger.error("Invalid argument: %s", e)
        return EXIT_INVALID_ARGUMENT

    print(f"alpha={report.alpha:.6f} success_rate={report.success_rate:.4f} "
          f"({report.correct_points}/{report.total_points})")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
