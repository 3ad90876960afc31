"""State-vector simulation engine."""
from .register import QuantumRegister
from .measurement import make_rng
from . import gates, measurement

__all__ = ["QuantumRegister", "make_rng", "gates", "measurement"]
