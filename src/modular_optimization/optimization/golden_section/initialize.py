from __future__ import annotations

import logging
from math import inf

from modular_optimization.core.model import Model
from modular_optimization.core.observer import Observer
from modular_optimization.core.problem import OptimizationProblem
from modular_optimization.optimization.evaluate import Evaluation, EvaluationError

from .bracket import GoldenBracket
from .errors import SearchInvariantError
from .goal import Goal
from .point import Point
from .resolve import Accept, Stop, attempt, resolve
from .solution import Solution, Status
from .state import State

logger = logging.getLogger(__name__)


def _stopped(point: Point, evaluation: Evaluation) -> Solution:
    return Solution(
        status=Status.STOPPED_BY_OBSERVER,
        x=point.x,
        objective=point.objective,
        snapshot=evaluation.snapshot,
        iters=0,
    )


def initialize(
    model: Model,
    problem: OptimizationProblem,
    bracket: GoldenBracket,
    observer: Observer,
    goal: Goal,
) -> State | Solution:
    """Evaluate both interior points and build the search state.

    Only the second outcome reaches the observer, with the first as its
    ``other`` and ``best`` point. When exactly one evaluation fails, the failure
    is the one reported. When both fail nothing is reported, since there is no
    point to describe the failure against, and the right failure is raised.

    Returns a :class:`Solution` instead of a state when the observer stops the
    search before the main loop starts.
    """
    left = attempt(model, problem, bracket.inner_left)
    right = attempt(model, problem, bracket.inner_right)

    if isinstance(left, EvaluationError) and isinstance(right, EvaluationError):
        logger.warning(
            "Both initial evaluations failed; reporting the failure at x=%r and discarding "
            "the failure at x=%r: %s",
            bracket.inner_right,
            bracket.inner_left,
            left,
        )
        raise right

    if isinstance(left, Evaluation) and isinstance(right, Evaluation):
        left_point = Point.from_evaluation(left)
        resolution = resolve(observer, right, other=left_point, best=left_point, goal=goal)
        if isinstance(resolution, Stop):
            return _stopped(left_point, left)

        best_point, best_snapshot = left_point, left.snapshot
        if isinstance(resolution, Accept) and goal.score(resolution.point) < goal.score(left_point):
            best_point, best_snapshot = resolution.point, resolution.snapshot
        state = State(bracket, left_point, resolution.point, best_point, best_snapshot)
    else:
        if isinstance(left, Evaluation):
            ok, failed = left, right
        else:
            ok, failed = right, left
        ok_point = Point.from_evaluation(ok)
        # declining a failure raises it from resolve()
        resolution = resolve(observer, failed, other=ok_point, best=ok_point, goal=goal)
        if isinstance(resolution, Stop):
            return _stopped(ok_point, ok)

        if ok is left:
            state = State(bracket, ok_point, resolution.point, ok_point, ok.snapshot)
        else:
            state = State(bracket, resolution.point, ok_point, ok_point, ok.snapshot)

    if goal.score(state.left) == inf and goal.score(state.right) == inf:
        raise SearchInvariantError(
            f"Both interior points at x={state.left.x!r} and x={state.right.x!r} score as the "
            "worst value after initialization; the search has nothing to act on."
        )

    logger.debug(
        "Initialized golden-section search on [%r, %r]: left=%r, right=%r, best=%r",
        bracket.left,
        bracket.right,
        state.left,
        state.right,
        state.best_point,
    )
    return state
