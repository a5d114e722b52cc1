import math

import pytest

from modular_optimization.core import Snapshot
from modular_optimization.optimization.golden_section import GoldenBracket, Goal, Point, Status
from modular_optimization.optimization.golden_section.state import ShrinkLeft, ShrinkRight, State


def _state(left_objective: float, right_objective: float, bounds=(0.0, 10.0)) -> State:
    bracket = GoldenBracket.from_bounds(bounds)
    left = Point(bracket.inner_left, left_objective)
    right = Point(bracket.inner_right, right_objective)
    return State(bracket, left, right, left, Snapshot(left.x, left_objective))


def test_goal_transforms_are_involutions():
    for goal in Goal:
        for value in (-3.5, 0.0, 2.0, math.inf):
            assert goal.transform(goal.transform(value)) == value
        assert goal.transform(goal.worst_objective) == math.inf


def test_goal_from_value_accepts_names():
    assert Goal.from_value("min") is Goal.MINIMIZE
    assert Goal.from_value("Maximize") is Goal.MAXIMIZE
    assert Goal.from_value(Goal.MAXIMIZE) is Goal.MAXIMIZE
    with pytest.raises(ValueError):
        Goal.from_value("sideways")
    with pytest.raises(TypeError):
        Goal.from_value(1)


def test_sentinel_point_scores_worst_in_both_directions():
    for goal in Goal:
        sentinel = Point.assumed_worse(1.0, goal)
        assert goal.score(sentinel) == math.inf
        assert goal.score(Point(2.0, 1e300)) < goal.score(sentinel)
        assert goal.score(Point(2.0, -1e300)) < goal.score(sentinel)


def test_next_action_shrinks_away_from_worse_point():
    state = _state(1.0, 2.0)
    action = state.next_action(Goal.MINIMIZE)
    assert isinstance(action, ShrinkRight)
    assert action.x == state.bracket.new_inner_left()

    action = state.next_action(Goal.MAXIMIZE)
    assert isinstance(action, ShrinkLeft)
    assert action.x == state.bracket.new_inner_right()


def test_next_action_tie_keeps_left():
    state = _state(3.0, 3.0)
    assert isinstance(state.next_action(Goal.MINIMIZE), ShrinkRight)
    assert isinstance(state.next_action(Goal.MAXIMIZE), ShrinkRight)


def test_next_action_is_pure():
    state = _state(1.0, 2.0)
    bracket = (state.bracket.left, state.bracket.inner_left, state.bracket.inner_right, state.bracket.right)
    state.next_action(Goal.MINIMIZE)
    assert (state.bracket.left, state.bracket.inner_left, state.bracket.inner_right, state.bracket.right) == bracket


def test_apply_shrink_right_reuses_left_point():
    state = _state(1.0, 2.0)
    old_left = state.left
    action = state.next_action(Goal.MINIMIZE)
    new_point = Point(action.x, 0.5)

    state.apply(action, new_point)

    assert state.right == old_left
    assert state.left == new_point
    assert state.left.x == state.bracket.inner_left
    assert state.right.x == state.bracket.inner_right


def test_apply_shrink_left_reuses_right_point():
    state = _state(2.0, 1.0)
    old_right = state.right
    action = state.next_action(Goal.MINIMIZE)
    new_point = Point(action.x, 0.5)

    state.apply(action, new_point)

    assert state.left == old_right
    assert state.right == new_point
    assert state.left.x == state.bracket.inner_left
    assert state.right.x == state.bracket.inner_right


def test_maybe_update_best_requires_strict_improvement():
    state = _state(1.0, 2.0)
    original = state.best_point

    state.maybe_update_best(Point(4.0, 1.0), Goal.MINIMIZE, Snapshot(4.0, 1.0))
    assert state.best_point == original

    state.maybe_update_best(Point(4.0, 0.5), Goal.MINIMIZE, Snapshot(4.0, 0.5))
    assert state.best_point == Point(4.0, 0.5)
    assert state.best_snapshot == Snapshot(4.0, 0.5)


def test_is_converged_uses_absolute_and_relative_width():
    from modular_optimization.optimization.golden_section import GoldenSectionConfig

    state = _state(1.0, 2.0, bounds=(100.0, 100.001))
    gap = abs(state.right.x - state.left.x)

    assert not state.is_converged(GoldenSectionConfig(x_abs_tol=gap / 2, x_rel_tol=0.0))
    assert state.is_converged(GoldenSectionConfig(x_abs_tol=gap, x_rel_tol=0.0))
    assert state.is_converged(GoldenSectionConfig(x_abs_tol=0.0, x_rel_tol=gap / 100.0))


def test_into_solution_reports_best_point():
    state = _state(1.0, 2.0)
    solution = state.into_solution(Status.MAX_ITERS, 7)

    assert solution.status is Status.MAX_ITERS
    assert solution.x == state.left.x
    assert solution.objective == 1.0
    assert solution.snapshot == Snapshot(state.left.x, 1.0)
    assert solution.iters == 7
    assert not solution.converged


def test_nan_objective_scores_worst_in_both_directions():
    for goal in Goal:
        assert goal.score(Point(1.0, math.nan)) == math.inf
        assert goal.score(Point(2.0, 1e300)) < goal.score(Point(1.0, math.nan))


def test_next_action_keeps_finite_point_over_nan():
    state = _state(math.nan, 2.0)
    for goal in Goal:
        action = state.next_action(goal)
        assert isinstance(action, ShrinkLeft)
        assert goal.score(state.surviving_point(action)) < math.inf


def test_maybe_update_best_ignores_nan():
    state = _state(1.0, 2.0)
    state.maybe_update_best(Point(5.0, math.nan), Goal.MINIMIZE, Snapshot(5.0, math.nan))
    assert state.best_point == state.left
