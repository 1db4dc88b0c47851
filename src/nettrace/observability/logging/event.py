"""Observability – LogEvent and trace block rendering.

A trace block looks like::

    [140213/Task-3] client.did_receive_response

      Arguments:
        - dataTask: <Request('GET', 'https://example.org/')>
        - response:
          | <Response [200 OK]>
          | content-type: text/html

The arguments block is only rendered above ``Verbosity.INFO``.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping

from nettrace.observability.logging.verbosity import Verbosity

NIL = "nil"
CONTINUATION = "      | "


@dataclasses.dataclass(frozen=True)
class LogEvent:
    """One lifecycle event, built, rendered and discarded."""
    name: str
    arguments: Mapping[str, str] = dataclasses.field(default_factory=dict)
    context_id: str = ""


def describe(value: Any) -> str:
    """Render *value* as a trace string; never raises."""
    if value is None:
        return NIL
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return f"{len(value)} bytes"
    try:
        return str(value)
    except Exception:  # noqa: BLE001
        return f"<unprintable {type(value).__name__}>"


def render_event(event: LogEvent, label: str, verbosity: Verbosity) -> str:
    """Format *event* into a single text block ready for one sink write."""
    if verbosity <= Verbosity.OFF:
        return ""
    lines = ["", f"[{event.context_id}] {label}.{event.name}"]
    if verbosity > Verbosity.INFO and event.arguments:
        lines += ["", "  Arguments:"]
        for key, value in event.arguments.items():
            value_lines = value.split("\n")
            if len(value_lines) > 1:
                lines.append(f"    - {key}:")
                lines.extend(f"{CONTINUATION}{line}" for line in value_lines if line)
            else:
                lines.append(f"    - {key}: {value}")
    return "\n".join(lines) + "\n"


__all__ = ["CONTINUATION", "NIL", "LogEvent", "describe", "render_event"]
