from __future__ import annotations

import logging
from collections.abc import Callable

from modular_optimization.optimization.golden_section.action import Action
from modular_optimization.optimization.golden_section.event import Event, is_failure

logger = logging.getLogger(__name__)


class AssumeWorseWhen:
    """Steers the search away from every point for which ``predicate(event)`` holds."""

    def __init__(self, predicate: Callable[[Event], bool]) -> None:
        self.predicate = predicate

    def observe(self, event: Event) -> Action | None:
        if self.predicate(event):
            return Action.ASSUME_WORSE
        return None


class RecoverFailures:
    """
    Treats failed evaluations as worse than the other interior point.

    With ``limit`` set, at most ``limit`` failures are recovered; later
      failures are declined and therefore raised by the solver.
    """

    def __init__(self, limit: int | None = None) -> None:
        if limit is not None and limit < 0:
            raise ValueError("limit must be non-negative")
        self.limit = limit
        self.recovered = 0

    def observe(self, event: Event) -> Action | None:
        if not is_failure(event):
            return None
        if self.limit is not None and self.recovered >= self.limit:
            logger.debug(
                "Failure at x=%r not recovered; limit of %d reached.", event.x, self.limit
            )
            return None
        self.recovered += 1
        return Action.ASSUME_WORSE
