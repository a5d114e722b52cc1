from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from math import isfinite, nan
from typing import Any

import numpy as np
from numpy.typing import NDArray

from modular_optimization.core.observer import Observer, as_observer
from modular_optimization.optimization.golden_section.action import Action
from modular_optimization.optimization.golden_section.event import Event


@dataclass(slots=True)
class EventRecord:
    """Flattened view of one observed event."""

    evaluation: int
    kind: str
    x: float
    objective: float
    best_x: float
    best_objective: float
    action: Action | None = None

    @property
    def ok(self) -> bool:
        """Whether the evaluation succeeded, produced a finite objective and was accepted."""
        return (
            self.kind == "Evaluated"
            and isfinite(self.objective)
            and self.action is not Action.ASSUME_WORSE
        )


class EventRecorder:
    """Records every event it sees and optionally forwards it to another observer.

    The wrapped observer's action is returned unchanged and stored alongside the
    record, so a recorder can sit in front of any steering logic.
    """

    def __init__(self, observer: Observer | Callable[[Event], Action | None] | None = None) -> None:
        self._inner = as_observer(observer)
        self.records: list[EventRecord] = []

    def observe(self, event: Event) -> Action | None:
        action = self._inner.observe(event)
        self.records.append(
            EventRecord(
                evaluation=len(self.records),
                kind=type(event).__name__,
                x=float(event.x),
                objective=float(event.objective),
                best_x=float(event.best.x),
                best_objective=float(event.best.objective),
                action=action,
            )
        )
        return action

    def __len__(self) -> int:
        return len(self.records)

    @property
    def failures(self) -> list[EventRecord]:
        return [record for record in self.records if record.kind != "Evaluated"]

    def best_so_far(self) -> tuple[float, float]:
        """(x, objective) of the best point the search reported in the last event."""
        if not self.records:
            return nan, nan
        last = self.records[-1]
        return last.best_x, last.best_objective

    def history(self) -> dict[str, NDArray[Any]]:
        """Recorded events as equal-length NumPy arrays keyed by field name."""
        return {
            "evaluation": np.array([r.evaluation for r in self.records], dtype=int),
            "x": np.array([r.x for r in self.records], dtype=float),
            "objective": np.array([r.objective for r in self.records], dtype=float),
            "ok": np.array([r.ok for r in self.records], dtype=bool),
            "best_x": np.array([r.best_x for r in self.records], dtype=float),
            "best_objective": np.array([r.best_objective for r in self.records], dtype=float),
        }


__all__ = ["EventRecord", "EventRecorder"]
