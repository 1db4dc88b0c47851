"""Observability – lifecycle event surface and the logging tap."""
from nettrace.observability.lifecycle.dispositions import (
    AuthChallengeDisposition,
    DelayedRequestDisposition,
    ResponseDisposition,
)
from nettrace.observability.lifecycle.ports import (
    DataEvents,
    DownloadEvents,
    SessionEvents,
    StreamEvents,
    TaskEvents,
    WebSocketEvents,
)
from nettrace.observability.lifecycle.describe import (
    describe_error,
    describe_headers,
    describe_request,
    describe_response,
)
from nettrace.observability.lifecycle.tap import LifecycleTap

__all__ = [
    "AuthChallengeDisposition",
    "DataEvents",
    "DelayedRequestDisposition",
    "DownloadEvents",
    "LifecycleTap",
    "ResponseDisposition",
    "SessionEvents",
    "StreamEvents",
    "TaskEvents",
    "WebSocketEvents",
    "describe_error",
    "describe_headers",
    "describe_request",
    "describe_response",
]
