"""Observability – event logger and lifecycle tap."""

from nettrace.observability.logging import EventLogger, MemorySink, StreamSink, Verbosity
from nettrace.observability.lifecycle import LifecycleTap

__all__ = [
    "EventLogger",
    "LifecycleTap",
    "MemorySink",
    "StreamSink",
    "Verbosity",
]
