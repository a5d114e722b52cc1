from __future__ import annotations

from dataclasses import dataclass

from modular_optimization.optimization.evaluate import Evaluation

from .goal import Goal


@dataclass(frozen=True, slots=True)
class Point:
    """A position and the raw objective observed there."""

    x: float
    objective: float

    @classmethod
    def from_evaluation(cls, evaluation: Evaluation) -> "Point":
        return cls(x=evaluation.x[0], objective=evaluation.objective)

    @classmethod
    def assumed_worse(cls, x: float, goal: Goal) -> "Point":
        """Synthetic point at ``x`` that scores worse than any real evaluation."""
        return cls(x=x, objective=goal.worst_objective)
