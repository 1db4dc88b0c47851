"""Observability – EventLogger.

A verbosity-gated sink for named lifecycle events.  The logger owns no
mutable state: label and verbosity are fixed at construction and each call
to :meth:`EventLogger.log` renders one block and hands it to the sink in a
single write.
"""
from __future__ import annotations

from typing import Any, Mapping

from nettrace.observability.logging.context import current_context_id
from nettrace.observability.logging.event import LogEvent, describe, render_event
from nettrace.observability.logging.processors import get_logger
from nettrace.observability.logging.settings import TraceSettings
from nettrace.observability.logging.sinks import StreamSink, TraceSink
from nettrace.observability.logging.verbosity import Verbosity

_log = get_logger(__name__)


class EventLogger:
    """Print one trace block per lifecycle event.

    Parameters
    ----------
    label:
        Distinguishes several loggers attached to the same client; printed as
        ``<label>.<event name>`` in every header.
    verbosity:
        :class:`Verbosity` threshold (member, ordinal or name).
    sink:
        Destination of rendered blocks.  Defaults to :class:`StreamSink`
        over ``sys.stdout``.

    Example
    -------
    ::

        logger = EventLogger("T", Verbosity.DEBUG)
        logger.log("didOpen", {"protocol": "chat"}, context_id=7)
    """

    def __init__(
        self,
        label: str,
        verbosity: Verbosity | int | str = Verbosity.INFO,
        sink: TraceSink | None = None,
    ) -> None:
        self._label = label
        self._verbosity = Verbosity.parse(verbosity)
        self._sink: TraceSink = sink if sink is not None else StreamSink()

    @classmethod
    def from_settings(cls, settings: TraceSettings, sink: TraceSink | None = None) -> "EventLogger":
        return cls(settings.label, settings.verbosity_level, sink)

    @property
    def label(self) -> str:
        return self._label

    @property
    def verbosity(self) -> Verbosity:
        return self._verbosity

    def log(
        self,
        event_name: str,
        arguments: Mapping[str, Any] | None = None,
        context_id: Any = None,
    ) -> None:
        """Render and emit *event_name* with its labelled *arguments*.

        *context_id* defaults to :func:`current_context_id`.  Argument values
        are rendered with :func:`describe`, so ``None`` prints as ``nil``.
        Sink failures of any kind are reported through structlog and never
        raised.
        """
        if self._verbosity is Verbosity.OFF:
            return
        event = LogEvent(
            name=event_name,
            arguments={str(k): describe(v) for k, v in (arguments or {}).items()},
            context_id=current_context_id() if context_id is None else describe(context_id),
        )
        text = render_event(event, self._label, self._verbosity)
        try:
            self._sink.write(text)
        except Exception as exc:  # noqa: BLE001
            _log.warning(
                "trace_sink_write_failed",
                label=self._label,
                event_name=event_name,
                error=f"{type(exc).__name__}: {exc}",
            )

    def __repr__(self) -> str:
        return f"EventLogger(label={self._label!r}, verbosity={self._verbosity.name})"


__all__ = ["EventLogger"]
