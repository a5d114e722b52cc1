"""Events emitted by golden-section search, one per evaluation attempt."""
from __future__ import annotations

from dataclasses import dataclass
from math import nan
from typing import Any

from modular_optimization.optimization.evaluate import (
    Evaluation,
    EvaluationError,
    ModelEvaluationError,
)

from .point import Point


@dataclass(frozen=True, slots=True)
class Evaluated:
    """The evaluation succeeded.

    ``other`` is the interior point that is not being replaced by this step and
    ``best`` the best point known before this step is resolved.
    """

    point: Point
    input: Any
    output: Any
    other: Point
    best: Point

    @property
    def x(self) -> float:
        return self.point.x

    @property
    def objective(self) -> float:
        return self.point.objective


@dataclass(frozen=True, slots=True)
class ModelFailed:
    """The model call raised."""

    x: float
    input: Any
    other: Point
    best: Point
    error: ModelEvaluationError

    @property
    def objective(self) -> float:
        return nan


@dataclass(frozen=True, slots=True)
class ProblemFailed:
    """The problem failed to build the input or to compute the objective.

    ``input`` and ``output`` are ``None`` for the stages that never ran.
    """

    x: float
    input: Any
    output: Any
    other: Point
    best: Point
    error: EvaluationError

    @property
    def objective(self) -> float:
        return nan


Event = Evaluated | ModelFailed | ProblemFailed


def build_event(
    outcome: Evaluation | EvaluationError,
    *,
    other: Point,
    best: Point,
) -> Event:
    """Describe an evaluation attempt, successful or not, as an event."""
    if isinstance(outcome, Evaluation):
        return Evaluated(
            point=Point.from_evaluation(outcome),
            input=outcome.snapshot.input,
            output=outcome.snapshot.output,
            other=other,
            best=best,
        )
    if isinstance(outcome, ModelEvaluationError):
        return ModelFailed(
            x=outcome.x[0],
            input=outcome.input,
            other=other,
            best=best,
            error=outcome,
        )
    return ProblemFailed(
        x=outcome.x[0],
        input=outcome.input,
        output=outcome.output,
        other=other,
        best=best,
        error=outcome,
    )


def is_failure(event: Event) -> bool:
    return isinstance(event, (ModelFailed, ProblemFailed))
