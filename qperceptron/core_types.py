"""Core lightweight types shared across modules.
Provides simple dataclasses and enums so modules can interoperate without heavy imports.
"""
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Tuple, Optional, List, Dict, Any


class GateKind(str, Enum):
    """Supported register operations"""
    RY = "ry"
    X = "x"
    CNOT = "cnot"
    RESET = "reset"
    MEASURE = "measure"


@dataclass(frozen=True)
class GateDescriptor:
    kind: GateKind
    targets: Tuple[int, ...] = ()
    angle: float = 0.0

    @classmethod
    def ry(cls, qubit: int, angle: float) -> "GateDescriptor":
        return cls(GateKind.RY, (qubit,), float(angle))

    @classmethod
    def x(cls, qubit: int) -> "GateDescriptor":
        return cls(GateKind.X, (qubit,))

    @classmethod
    def cnot(cls, control: int, target: int) -> "GateDescriptor":
        return cls(GateKind.CNOT, (control, target))

    @classmethod
    def reset(cls) -> "GateDescriptor":
        return cls(GateKind.RESET)

    @classmethod
    def measure(cls, qubit: int) -> "GateDescriptor":
        return cls(GateKind.MEASURE, (qubit,))


@dataclass(frozen=True)
class DataPoint:
    value: float
    label: int


@dataclass
class EvaluationReport:
    alpha: float
    success_rate: float
    correct_points: int
    total_points: int
    n_iterations: int
    trial_success_fractions: List[float] = field(default_factory=list)
    seed: Optional[int] = None
    true_alpha: Optional[float] = None
    elapsed_seconds: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["GateKind", "GateDescriptor", "DataPoint", "EvaluationReport"]
