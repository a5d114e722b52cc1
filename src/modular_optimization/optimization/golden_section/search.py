from __future__ import annotations

import logging
from collections.abc import Sequence

from modular_optimization.core.model import Model
from modular_optimization.core.observer import Observer
from modular_optimization.core.problem import OptimizationProblem

from .bracket import GoldenBracket
from .config import GoldenSectionConfig
from .goal import Goal
from .initialize import initialize
from .resolve import Accept, Stop, attempt, resolve
from .solution import Solution, Status

logger = logging.getLogger(__name__)


def search(
    model: Model,
    problem: OptimizationProblem,
    bracket: Sequence[float],
    config: GoldenSectionConfig,
    observer: Observer,
    goal: Goal,
) -> Solution:
    """Run golden-section search to completion on the calling thread.

    ``goal`` decides how objectives are scored, so the same loop serves both
    minimization and maximization.
    """
    golden_bracket = GoldenBracket.from_bounds(bracket)

    initialized = initialize(model, problem, golden_bracket, observer, goal)
    if isinstance(initialized, Solution):
        logger.info("Golden-section search stopped by observer during initialization.")
        return initialized
    state = initialized

    for iteration in range(1, config.max_iters + 1):
        if state.is_converged(config):
            solution = state.into_solution(Status.CONVERGED, iteration - 1)
            logger.info(
                "Golden-section search converged after %d iterations at x=%r (objective=%r).",
                solution.iters,
                solution.x,
                solution.objective,
            )
            return solution

        direction = state.next_action(goal)
        outcome = attempt(model, problem, direction.x)
        resolution = resolve(
            observer,
            outcome,
            other=state.surviving_point(direction),
            best=state.best_point,
            goal=goal,
        )
        if isinstance(resolution, Stop):
            logger.info("Golden-section search stopped by observer at iteration %d.", iteration)
            return state.into_solution(Status.STOPPED_BY_OBSERVER, iteration)

        state.apply(direction, resolution.point)
        if isinstance(resolution, Accept):
            state.maybe_update_best(resolution.point, goal, resolution.snapshot)

        logger.debug(
            "Iteration %d: %s to x=%r, bracket width=%r, best x=%r",
            iteration,
            type(direction).__name__,
            direction.x,
            state.bracket.width,
            state.best_point.x,
        )

    solution = state.into_solution(Status.MAX_ITERS, config.max_iters)
    logger.info(
        "Golden-section search hit max_iters=%d without converging; best x=%r (objective=%r).",
        config.max_iters,
        solution.x,
        solution.objective,
    )
    return solution
