"""Observer protocol used to inspect and steer solvers while they run."""
from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol


class Observer(Protocol):
    """Receives one event per evaluation attempt and optionally returns an action.

    Returning ``None`` tells the solver to accept the real outcome and carry on.
    """

    def observe(self, event: Any) -> Any | None: ...


class NoOpObserver:
    """Observer that never intervenes."""

    def observe(self, event: Any) -> None:
        return None


class FunctionObserver:
    """Adapts a plain ``event -> action | None`` callable to :class:`Observer`."""

    __slots__ = ("_func",)

    def __init__(self, func: Callable[[Any], Any | None]) -> None:
        self._func = func

    def observe(self, event: Any) -> Any | None:
        return self._func(event)


def as_observer(observer: Observer | Callable[[Any], Any | None] | None) -> Observer:
    """Coerce ``observer`` into something with an ``observe`` method.

    ``None`` maps to :class:`NoOpObserver` and bare callables are wrapped in
    :class:`FunctionObserver`.
    """

    if observer is None:
        return NoOpObserver()
    if callable(getattr(observer, "observe", None)):
        return observer  # type: ignore[return-value]
    if callable(observer):
        return FunctionObserver(observer)
    raise TypeError(
        f"Observer must define 'observe(event)' or be callable, got {type(observer).__name__!r}."
    )
