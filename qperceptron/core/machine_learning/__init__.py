"""Classifier built on the state-vector engine."""
from .perceptron import ClassifierEvaluator, encode, classify_one, evaluate

__all__ = ["ClassifierEvaluator", "encode", "classify_one", "evaluate"]
