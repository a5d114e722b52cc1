from __future__ import annotations

from dataclasses import dataclass

from modular_optimization.core.model import Snapshot

from .bracket import GoldenBracket
from .config import GoldenSectionConfig
from .goal import Goal
from .point import Point
from .solution import Solution, Status


@dataclass(frozen=True, slots=True)
class ShrinkLeft:
    """Discard the left interior point; ``x`` is the new ``inner_right``."""

    x: float


@dataclass(frozen=True, slots=True)
class ShrinkRight:
    """Discard the right interior point; ``x`` is the new ``inner_left``."""

    x: float


ShrinkDirection = ShrinkLeft | ShrinkRight


class State:
    """Bracket, the two interior points and the best real point seen so far.

    At least one of ``left``/``right`` always has a finite score, since each
    shrink discards the interior point with the worse score.
    """

    __slots__ = ("bracket", "left", "right", "best_point", "best_snapshot")

    def __init__(
        self,
        bracket: GoldenBracket,
        left: Point,
        right: Point,
        best_point: Point,
        best_snapshot: Snapshot,
    ) -> None:
        self.bracket = bracket
        self.left = left
        self.right = right
        self.best_point = best_point
        self.best_snapshot = best_snapshot

    def next_action(self, goal: Goal) -> ShrinkDirection:
        # ties keep the left point
        if goal.score(self.left) <= goal.score(self.right):
            return ShrinkRight(self.bracket.new_inner_left())
        return ShrinkLeft(self.bracket.new_inner_right())

    def surviving_point(self, direction: ShrinkDirection) -> Point:
        """Interior point that is kept when ``direction`` is applied."""
        if isinstance(direction, ShrinkRight):
            return self.left
        return self.right

    def apply(self, direction: ShrinkDirection, point: Point) -> None:
        if isinstance(direction, ShrinkRight):
            self.bracket.shrink_right()
            self.right = self.left
            self.left = point
        else:
            self.bracket.shrink_left()
            self.left = self.right
            self.right = point

    def maybe_update_best(self, point: Point, goal: Goal, snapshot: Snapshot) -> None:
        """Replace the best point on strict improvement. Real evaluations only."""
        if goal.score(point) < goal.score(self.best_point):
            self.best_point = point
            self.best_snapshot = snapshot

    def is_converged(self, config: GoldenSectionConfig) -> bool:
        gap = abs(self.right.x - self.left.x)
        x_ref = max(abs(self.left.x), abs(self.right.x))
        return gap <= config.x_abs_tol + config.x_rel_tol * x_ref

    def into_solution(self, status: Status, iters: int) -> Solution:
        return Solution(
            status=status,
            x=self.best_point.x,
            objective=self.best_point.objective,
            snapshot=self.best_snapshot,
            iters=iters,
        )
