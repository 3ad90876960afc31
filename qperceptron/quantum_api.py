"""Quantum API wrapper to provide lazy access to the simulation components."""
from typing import Any
import importlib

_mod_register = ".core.quantum.register"
_mod_perceptron = ".core.machine_learning.perceptron"


def _load_register():
    try:
        return importlib.import_module(_mod_register, package="qperceptron")
    except ImportError as e:
        raise ImportError("Quantum register module cannot be imported: %s" % e)


def _load_perceptron():
    try:
        return importlib.import_module(_mod_perceptron, package="qperceptron")
    except ImportError as e:
        raise ImportError("Perceptron module cannot be imported: %s" % e)


def is_available() -> bool:
    try:
        _load_register()
        _load_perceptron()
        return True
    except ImportError:
        return False


def create_register(*args, **kwargs) -> Any:
    mod = _load_register()
    return getattr(mod, "QuantumRegister")(*args, **kwargs)


def create_evaluator(*args, **kwargs) -> Any:
    mod = _load_perceptron()
    return getattr(mod, "ClassifierEvaluator")(*args, **kwargs)


def evaluate(*args, **kwargs) -> float:
    mod = _load_perceptron()
    return getattr(mod, "evaluate")(*args, **kwargs)


__all__ = ["is_available", "create_register", "create_evaluator", "evaluate"]
