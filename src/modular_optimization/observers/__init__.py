"""Reusable observers for steering and inspecting golden-section search."""
from .chain import ObserverChain
from .recording import EventRecord, EventRecorder
from .steering import AssumeWorseWhen, RecoverFailures
from .stopping import ObjectiveTarget, StopWhen

__all__ = [
    "AssumeWorseWhen",
    "EventRecord",
    "EventRecorder",
    "ObjectiveTarget",
    "ObserverChain",
    "RecoverFailures",
    "StopWhen",
]
