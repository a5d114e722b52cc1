"""
Golden-section search for single-variable optimization.

The search keeps two interior points positioned by the golden ratio, compares
their scores and shrinks the bracket toward the better one, so each iteration
costs exactly one new evaluation. It finds an optimum of a unimodal objective
on the bracket without derivative information; with several extrema it may
settle on a local one.

Observers receive one event per evaluation attempt:

- :class:`Evaluated` when the evaluation succeeded,
- :class:`ModelFailed` when the model raised,
- :class:`ProblemFailed` when building the input or the objective raised.

During initialization both interior points are evaluated but only the second
outcome is reported. An observer may return :attr:`Action.STOP_EARLY` to halt
with the best point found so far, :attr:`Action.ASSUME_WORSE` to treat the
point as worse than the other interior point (recovering from a failure or
steering the search away from a region), or ``None`` to accept the outcome. A
declined failure is raised as the result of the call.
"""
from __future__ import annotations

from collections.abc import Callable, Sequence

from modular_optimization.core.model import Model
from modular_optimization.core.observer import NoOpObserver, Observer, as_observer
from modular_optimization.core.problem import OptimizationProblem

from .action import Action
from .bracket import INV_PHI, GoldenBracket
from .config import GoldenSectionConfig
from .errors import SearchInvariantError
from .event import Evaluated, Event, ModelFailed, ProblemFailed
from .goal import Goal
from .point import Point
from .search import search
from .solution import Solution, Status

ObserverLike = Observer | Callable[[Event], Action | None] | None


def optimize(
    model: Model,
    problem: OptimizationProblem,
    bracket: Sequence[float],
    goal: Goal | str,
    config: GoldenSectionConfig | None = None,
    observer: ObserverLike = None,
) -> Solution:
    """Search ``bracket`` for the optimum of ``problem`` in the direction of ``goal``."""
    if config is None:
        config = GoldenSectionConfig.default()
    return search(model, problem, bracket, config, as_observer(observer), Goal.from_value(goal))


def minimize(
    model: Model,
    problem: OptimizationProblem,
    bracket: Sequence[float],
    config: GoldenSectionConfig | None = None,
    observer: ObserverLike = None,
) -> Solution:
    """Find the minimum of the objective on ``bracket``.

    Raises
    ------
    InvalidBracketError
        If the bounds are not finite or not strictly increasing.
    EvaluationError
        If an evaluation fails and the observer does not return an action.
    """
    return optimize(model, problem, bracket, Goal.MINIMIZE, config, observer)


def maximize(
    model: Model,
    problem: OptimizationProblem,
    bracket: Sequence[float],
    config: GoldenSectionConfig | None = None,
    observer: ObserverLike = None,
) -> Solution:
    """Find the maximum of the objective on ``bracket``. Raises like :func:`minimize`."""
    return optimize(model, problem, bracket, Goal.MAXIMIZE, config, observer)


def minimize_unobserved(
    model: Model,
    problem: OptimizationProblem,
    bracket: Sequence[float],
    config: GoldenSectionConfig | None = None,
) -> Solution:
    return minimize(model, problem, bracket, config, NoOpObserver())


def maximize_unobserved(
    model: Model,
    problem: OptimizationProblem,
    bracket: Sequence[float],
    config: GoldenSectionConfig | None = None,
) -> Solution:
    return maximize(model, problem, bracket, config, NoOpObserver())


__all__ = [
    "Action",
    "Evaluated",
    "Event",
    "GoldenBracket",
    "GoldenSectionConfig",
    "Goal",
    "INV_PHI",
    "ModelFailed",
    "Point",
    "ProblemFailed",
    "SearchInvariantError",
    "Solution",
    "Status",
    "maximize",
    "maximize_unobserved",
    "minimize",
    "minimize_unobserved",
    "optimize",
]
