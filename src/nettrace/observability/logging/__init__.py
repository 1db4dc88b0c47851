"""Observability – verbosity-gated event logger, sinks and structlog helpers."""
from nettrace.observability.logging.verbosity import Verbosity
from nettrace.observability.logging.event import NIL, LogEvent, describe, render_event
from nettrace.observability.logging.context import current_context_id
from nettrace.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from nettrace.observability.logging.processors import configure_logging, get_logger
from nettrace.observability.logging.sinks import MemorySink, StreamSink, StructlogSink, TraceSink
from nettrace.observability.logging.settings import TraceSettings
from nettrace.observability.logging.logger import EventLogger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "NIL",
    "EventLogger",
    "LogEvent",
    "MemorySink",
    "SensitiveFieldsFilter",
    "StreamSink",
    "StructlogSink",
    "TraceSettings",
    "TraceSink",
    "Verbosity",
    "configure_logging",
    "current_context_id",
    "describe",
    "get_logger",
    "render_event",
]
