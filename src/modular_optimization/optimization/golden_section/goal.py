from __future__ import annotations

from enum import Enum
from math import inf, isnan
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .point import Point


class Goal(Enum):
    """
    MINIMIZE: score = objective.
    MAXIMIZE: score = -objective.

    Lower score is always better. Both transforms are involutions, so
      ``transform(transform(v)) == v`` and the sentinel objective
      ``transform(inf)`` always scores ``+inf``. A NaN objective scores ``+inf``
      as well, so it never wins a comparison against a real value.
    """

    MINIMIZE = "minimize"
    MAXIMIZE = "maximize"

    @classmethod
    def from_value(cls, value: "Goal | str") -> "Goal":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            if key in ("min", "minimize"):
                return cls.MINIMIZE
            if key in ("max", "maximize"):
                return cls.MAXIMIZE
            raise ValueError(
                f"Invalid goal '{value}'. Valid names: 'min', 'minimize', 'max', 'maximize'."
            )
        raise TypeError(f"Goal must be a Goal or str, got {type(value).__name__!r}.")

    def transform(self, value: float) -> float:
        if self is Goal.MINIMIZE:
            return value
        return -value

    def score(self, point: "Point") -> float:
        value = self.transform(point.objective)
        if isnan(value):
            return inf
        return value

    @property
    def worst_objective(self) -> float:
        """Raw objective that reads as worse than any real evaluation."""
        return self.transform(inf)
