"""Boundary protocols shared by the solvers."""
from .model import Model, Snapshot
from .observer import FunctionObserver, NoOpObserver, Observer, as_observer
from .problem import OptimizationProblem, objective_from_snapshot

__all__ = [
    "FunctionObserver",
    "Model",
    "NoOpObserver",
    "Observer",
    "OptimizationProblem",
    "Snapshot",
    "as_observer",
    "objective_from_snapshot",
]
