"""Simulation core: state-vector engine and the perceptron evaluator."""
