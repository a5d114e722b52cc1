"""
Solvers for optimization problems.

An :class:`~modular_optimization.core.OptimizationProblem` maps solver
variables to a model input and extracts a scalar objective from the model
output. Solvers in this package search for the variables that minimize or
maximize that objective.

- :mod:`~modular_optimization.optimization.golden_section`: derivative-free
  search over a bracketed interval for unimodal objectives.
"""
from .evaluate import (
    Evaluation,
    EvaluationError,
    EvaluationStage,
    ModelEvaluationError,
    ProblemEvaluationError,
    evaluate,
)

__all__ = [
    "Evaluation",
    "EvaluationError",
    "EvaluationStage",
    "ModelEvaluationError",
    "ProblemEvaluationError",
    "evaluate",
]
