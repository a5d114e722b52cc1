from __future__ import annotations

from collections.abc import Callable

from modular_optimization.core.observer import Observer, as_observer
from modular_optimization.optimization.golden_section.action import Action
from modular_optimization.optimization.golden_section.event import Event


class ObserverChain:
    """
    Shows every event to each observer in order; the first non-``None``
      action wins. Later observers still see the event, so recorders placed
      after a steering observer keep a complete history.
    """

    def __init__(self, *observers: Observer | Callable[[Event], Action | None]) -> None:
        self.observers = [as_observer(observer) for observer in observers]

    def observe(self, event: Event) -> Action | None:
        chosen: Action | None = None
        for observer in self.observers:
            action = observer.observe(event)
            if chosen is None and action is not None:
                chosen = action
        return chosen
