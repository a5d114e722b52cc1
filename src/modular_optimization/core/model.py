"""Model boundary consumed by the solvers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class Model(Protocol):
    """A callable that maps a model input to a model output.

    A model signals failure by raising; the evaluator classifies anything it
    raises as a model-stage failure.
    """

    def call(self, input: Any) -> Any: ...


@dataclass(frozen=True, slots=True)
class Snapshot(Generic[InputT, OutputT]):
    """Captured input/output pair from a single model call."""

    input: InputT
    output: OutputT
