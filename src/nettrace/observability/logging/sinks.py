"""Observability – trace sinks.

Every sink receives one fully rendered block per event and must make that
single ``write`` appear atomically to concurrent callers.
"""
from __future__ import annotations

import sys
import threading
from typing import Any, Protocol, TextIO

from nettrace.config.validation import InvalidSettingValueError
from nettrace.observability.logging.processors import get_logger


class TraceSink(Protocol):
    """Port: receives one rendered trace block per event."""

    def write(self, text: str) -> None: ...


class StreamSink:
    """Write trace blocks to a text stream (``sys.stdout`` by default).

    The default stream is looked up on every write so redirections of
    ``sys.stdout`` made after construction are honoured.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._lock = threading.Lock()

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str) -> None:
        with self._lock:
            stream = self.stream
            stream.write(text)
            stream.flush()


class StructlogSink:
    """Forward trace blocks to a structlog logger as ``trace_event`` entries.

    Parameters
    ----------
    logger:
        A bound structlog logger.  Defaults to ``get_logger("nettrace.trace")``.
    level:
        Name of the logger method used for each entry (``"info"`` by default).

    Raises
    ------
    InvalidSettingValueError
        When *logger* has no method named *level*.
    """

    def __init__(self, logger: Any = None, level: str = "info") -> None:
        self._log = logger if logger is not None else get_logger("nettrace.trace")
        self._level = level.lower()
        if not callable(getattr(self._log, self._level, None)):
            raise InvalidSettingValueError("level", level, "not a method of the structlog logger")

    def write(self, text: str) -> None:
        getattr(self._log, self._level)("trace_event", text=text.strip("\n"))


class MemorySink:
    """Keep trace blocks in memory (handy for tests and assertions)."""

    def __init__(self) -> None:
        self._blocks: list[str] = []
        self._lock = threading.Lock()

    def write(self, text: str) -> None:
        with self._lock:
            self._blocks.append(text)

    @property
    def blocks(self) -> list[str]:
        with self._lock:
            return list(self._blocks)

    @property
    def text(self) -> str:
        return "".join(self.blocks)

    def clear(self) -> None:
        with self._lock:
            self._blocks.clear()


__all__ = ["MemorySink", "StreamSink", "StructlogSink", "TraceSink"]
