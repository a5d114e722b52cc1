from __future__ import annotations

from collections.abc import Callable
from math import isfinite

from modular_optimization.optimization.golden_section.action import Action
from modular_optimization.optimization.golden_section.event import Evaluated, Event
from modular_optimization.optimization.golden_section.goal import Goal


class StopWhen:
    """Stops the search once ``predicate(event)`` holds after ``min_evaluations`` events."""

    def __init__(self, predicate: Callable[[Event], bool], min_evaluations: int = 0) -> None:
        if min_evaluations < 0:
            raise ValueError("min_evaluations must be non-negative")
        self.predicate = predicate
        self.min_evaluations = min_evaluations
        self.seen = 0

    def observe(self, event: Event) -> Action | None:
        self.seen += 1
        if self.seen >= self.min_evaluations and self.predicate(event):
            return Action.STOP_EARLY
        return None


class ObjectiveTarget:
    """
    Stops the search as soon as an evaluation reaches ``target``:
      at or below it when minimizing, at or above it when maximizing.
    """

    def __init__(self, target: float, goal: Goal | str = Goal.MINIMIZE) -> None:
        if not isfinite(target):
            raise ValueError(f"target must be finite, got {target!r}")
        self.target = float(target)
        self.goal = Goal.from_value(goal)

    def observe(self, event: Event) -> Action | None:
        if not isinstance(event, Evaluated):
            return None
        if self.goal.transform(event.objective) <= self.goal.transform(self.target):
            return Action.STOP_EARLY
        return None
