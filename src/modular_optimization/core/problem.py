"""Optimization problem boundary consumed by the solvers."""
from __future__ import annotations

from typing import Any, Protocol

from modular_optimization.core.model import Snapshot


class OptimizationProblem(Protocol):
    """Adapts solver variables to a model input and extracts an objective.

    ``x`` is always a tuple of floats, one per solver variable. Single-variable
    solvers pass a 1-tuple. Either method signals failure by raising.
    """

    def input(self, x: tuple[float, ...]) -> Any: ...

    def objective(self, input: Any, output: Any) -> float: ...


def objective_from_snapshot(problem: OptimizationProblem, snapshot: Snapshot) -> float:
    """Recompute the objective of ``problem`` from a recorded snapshot."""

    return float(problem.objective(snapshot.input, snapshot.output))
