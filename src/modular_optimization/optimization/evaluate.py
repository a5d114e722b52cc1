"""Evaluate a model in the context of an optimization problem."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from modular_optimization.core.model import Model, Snapshot
from modular_optimization.core.problem import OptimizationProblem

logger = logging.getLogger(__name__)


class EvaluationStage(Enum):
    """Where in ``input -> call -> objective`` an evaluation failed."""

    INPUT = "input"
    MODEL = "model"
    OBJECTIVE = "objective"


class EvaluationError(Exception):
    """
    Raised when an evaluation at ``x`` cannot produce an objective.
      The underlying exception is chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        *,
        x: tuple[float, ...],
        stage: EvaluationStage,
        input: Any = None,
        output: Any = None,
    ) -> None:
        super().__init__(message)
        self.x = x
        self.stage = stage
        self.input = input
        self.output = output


class ModelEvaluationError(EvaluationError):
    """
    Raised when the model call fails. ``input`` holds the model input that
      was being evaluated.
    """


class ProblemEvaluationError(EvaluationError):
    """
    Raised when the problem fails to build the model input from ``x``, or fails
      to compute the objective from the model input and output. ``input`` and
      ``output`` are populated for the stages that had already completed.
    """


@dataclass(frozen=True, slots=True)
class Evaluation:
    """Successful evaluation of a problem at ``x``."""

    x: tuple[float, ...]
    objective: float
    snapshot: Snapshot


def evaluate(model: Model, problem: OptimizationProblem, x: tuple[float, ...]) -> Evaluation:
    """Map ``x`` to a model input, call the model and compute the objective.

    Raises
    ------
    ProblemEvaluationError
        If ``problem.input`` or ``problem.objective`` raises.
    ModelEvaluationError
        If ``model.call`` raises.
    """

    x = tuple(float(value) for value in x)

    try:
        model_input = problem.input(x)
    except Exception as exc:
        raise ProblemEvaluationError(
            f"failed to compute model input at x={x!r}: {exc}",
            x=x,
            stage=EvaluationStage.INPUT,
        ) from exc

    try:
        output = model.call(model_input)
    except Exception as exc:
        raise ModelEvaluationError(
            f"model call failed at x={x!r}: {exc}",
            x=x,
            stage=EvaluationStage.MODEL,
            input=model_input,
        ) from exc

    try:
        objective = float(problem.objective(model_input, output))
    except Exception as exc:
        raise ProblemEvaluationError(
            f"failed to compute objective at x={x!r}: {exc}",
            x=x,
            stage=EvaluationStage.OBJECTIVE,
            input=model_input,
            output=output,
        ) from exc

    logger.debug("Evaluated x=%r -> objective=%r", x, objective)
    return Evaluation(x=x, objective=objective, snapshot=Snapshot(model_input, output))


__all__ = [
    "Evaluation",
    "EvaluationError",
    "EvaluationStage",
    "ModelEvaluationError",
    "ProblemEvaluationError",
    "evaluate",
]
