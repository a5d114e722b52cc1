"""Three-way resolution of an evaluation attempt: continue, stop or propagate."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from modular_optimization.core.model import Model, Snapshot
from modular_optimization.core.observer import Observer
from modular_optimization.core.problem import OptimizationProblem
from modular_optimization.optimization.evaluate import (
    Evaluation,
    EvaluationError,
    evaluate,
)

from .action import Action
from .event import build_event
from .goal import Goal
from .point import Point

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Accept:
    """Commit the real evaluation and consider it for the best point."""

    point: Point
    snapshot: Snapshot


@dataclass(frozen=True, slots=True)
class AssumedWorse:
    """Commit a sentinel point that never competes for the best point."""

    point: Point


@dataclass(frozen=True, slots=True)
class Stop:
    """The observer asked the search to stop."""


Resolution = Accept | AssumedWorse | Stop


def attempt(model: Model, problem: OptimizationProblem, x: float) -> Evaluation | EvaluationError:
    """Evaluate at ``x``, returning the failure instead of raising it."""
    try:
        return evaluate(model, problem, (x,))
    except EvaluationError as exc:
        return exc


def resolve(
    observer: Observer,
    outcome: Evaluation | EvaluationError,
    *,
    other: Point,
    best: Point,
    goal: Goal,
) -> Resolution:
    """Emit the event for ``outcome`` and turn the observer's answer into a resolution.

    A failed evaluation that the observer declines to handle is raised unchanged.
    """
    event = build_event(outcome, other=other, best=best)
    action = observer.observe(event)

    if action is Action.STOP_EARLY:
        logger.debug("Observer stopped the search at x=%r.", event.x)
        return Stop()
    if action is Action.ASSUME_WORSE:
        if isinstance(outcome, EvaluationError):
            logger.warning(
                "Evaluation at x=%r failed (%s); observer assumed it worse and the search continues.",
                event.x,
                outcome,
            )
        else:
            logger.debug("Observer assumed x=%r worse than x=%r.", event.x, other.x)
        return AssumedWorse(Point.assumed_worse(event.x, goal))
    if action is not None:
        raise TypeError(
            f"Observer returned {action!r}; expected an Action or None."
        )

    if isinstance(outcome, EvaluationError):
        raise outcome
    return Accept(Point.from_evaluation(outcome), outcome.snapshot)
