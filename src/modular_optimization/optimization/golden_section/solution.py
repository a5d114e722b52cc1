from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from modular_optimization.core.model import Snapshot


class Status(Enum):
    CONVERGED = "converged"
    MAX_ITERS = "max_iters"
    STOPPED_BY_OBSERVER = "stopped_by_observer"


@dataclass(frozen=True, slots=True)
class Solution:
    """Result of a golden-section search.

    ``x``, ``objective`` and ``snapshot`` describe the best real evaluation
    found. ``iters`` counts completed shrink iterations; the two initial
    evaluations are iteration zero.
    """

    status: Status
    x: float
    objective: float
    snapshot: Snapshot | None
    iters: int

    @property
    def converged(self) -> bool:
        return self.status is Status.CONVERGED
