from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from math import isfinite, sqrt

from modular_optimization.validation.exceptions import InvalidBracketError

PHI = (1.0 + sqrt(5.0)) / 2.0
INV_PHI = PHI - 1.0  # (sqrt(5) - 1) / 2 ~ 0.618


@dataclass(slots=True)
class GoldenBracket:
    """
    Outer interval ``[left, right]`` with two interior probes placed by the
      golden ratio, ``left < inner_left < inner_right < right``.

    Every shrink keeps the ratio of the sub-intervals golden, so the surviving
      interior point lands exactly where one of the next interior points must
      sit and only one new position needs evaluating per iteration.
    """

    left: float
    inner_left: float
    inner_right: float
    right: float

    @classmethod
    def from_bounds(cls, bounds: Sequence[float]) -> "GoldenBracket":
        try:
            count = len(bounds)
        except TypeError as exc:
            raise InvalidBracketError(
                f"Bracket must be a sequence of two bounds, got {type(bounds).__name__!r}."
            ) from exc
        if count != 2:
            raise InvalidBracketError(f"Bracket must contain exactly two bounds, got {count}.")
        try:
            left, right = float(bounds[0]), float(bounds[1])
        except (TypeError, ValueError) as exc:
            raise InvalidBracketError(f"Bracket bounds must be numbers, got {bounds!r}.") from exc
        if not (isfinite(left) and isfinite(right)):
            raise InvalidBracketError(
                f"Bracket bounds must be finite, got [{left!r}, {right!r}]."
            )
        if not left < right:
            raise InvalidBracketError(
                f"Bracket must satisfy left < right, got [{left!r}, {right!r}]."
            )
        width = right - left
        return cls(
            left=left,
            inner_left=left + (1.0 - INV_PHI) * width,
            inner_right=left + INV_PHI * width,
            right=right,
        )

    @property
    def width(self) -> float:
        return self.right - self.left

    def new_inner_left(self) -> float:
        """x of the new ``inner_left`` if the right side were shrunk. Does not mutate."""
        return self.left + (1.0 - INV_PHI) * (self.inner_right - self.left)

    def new_inner_right(self) -> float:
        """x of the new ``inner_right`` if the left side were shrunk. Does not mutate."""
        return self.inner_left + INV_PHI * (self.right - self.inner_left)

    def shrink_right(self) -> None:
        """Keep ``[left, inner_right]``; the old ``inner_left`` becomes ``inner_right``."""
        new_inner_left = self.new_inner_left()
        self.right = self.inner_right
        self.inner_right = self.inner_left
        self.inner_left = new_inner_left

    def shrink_left(self) -> None:
        """Keep ``[inner_left, right]``; the old ``inner_right`` becomes ``inner_left``."""
        new_inner_right = self.new_inner_right()
        self.left = self.inner_left
        self.inner_left = self.inner_right
        self.inner_right = new_inner_right
