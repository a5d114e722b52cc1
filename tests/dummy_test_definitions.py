from __future__ import annotations

from math import sqrt


class Polynomial:
    """f(x) = x**3 - 4x: local minimum at 2/sqrt(3), local maximum at -2/sqrt(3)."""

    def call(self, x: float) -> float:
        return x**3 - 4.0 * x


class Identity:
    def call(self, x: float) -> float:
        return x


class Quadratic:
    """(x - center)**2."""

    def __init__(self, center: float = 5.0) -> None:
        self.center = center

    def call(self, x: float) -> float:
        return (x - self.center) ** 2


class ThresholdError(RuntimeError):
    pass


class ThresholdModel:
    """Parabola with minimum at x=2 that raises for x above ``threshold``."""

    def __init__(self, threshold: float) -> None:
        self.threshold = threshold
        self.calls: list[float] = []

    def call(self, x: float) -> float:
        self.calls.append(x)
        if x > self.threshold:
            raise ThresholdError(f"model failed at x={x} (threshold={self.threshold})")
        return (x - 2.0) ** 2


class ObjectiveIsOutput:
    def input(self, x: tuple[float, ...]) -> float:
        return x[0]

    def objective(self, input: float, output: float) -> float:
        return output


class CountingObserver:
    """Returns ``actions[n]`` for the n-th event (``None`` once exhausted)."""

    def __init__(self, actions=None) -> None:
        self.actions = list(actions or [])
        self.events: list = []

    def observe(self, event):
        self.events.append(event)
        index = len(self.events) - 1
        if index < len(self.actions):
            return self.actions[index]
        return None


LOCAL_MINIMUM = 2.0 / sqrt(3.0)
