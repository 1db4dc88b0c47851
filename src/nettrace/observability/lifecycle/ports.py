"""Lifecycle – one port per event category a network client can report."""
from __future__ import annotations

from typing import Any, Callable, Protocol

from nettrace.observability.lifecycle.dispositions import (
    AuthChallengeDisposition,
    DelayedRequestDisposition,
    ResponseDisposition,
)

AuthChallengeCompletion = Callable[[AuthChallengeDisposition, Any], None]
DelayedRequestCompletion = Callable[[DelayedRequestDisposition, Any], None]
RedirectCompletion = Callable[[Any], None]
BodyStreamCompletion = Callable[[Any], None]
ResponseCompletion = Callable[[ResponseDisposition], None]
CacheCompletion = Callable[[Any], None]


class SessionEvents(Protocol):
    """Port: events about the session (client) as a whole."""

    def did_become_invalid_with_error(self, session: Any, error: BaseException | None) -> None: ...

    def did_receive_challenge(
        self, session: Any, challenge: Any, completion: AuthChallengeCompletion
    ) -> None: ...

    def did_finish_events_for_background_session(self, session: Any) -> None: ...


class TaskEvents(Protocol):
    """Port: events common to every task (request/response exchange)."""

    def will_begin_delayed_request(
        self, session: Any, task: Any, request: Any, completion: DelayedRequestCompletion
    ) -> None: ...

    def task_is_waiting_for_connectivity(self, session: Any, task: Any) -> None: ...

    def will_perform_http_redirection(
        self, session: Any, task: Any, response: Any, request: Any, completion: RedirectCompletion
    ) -> None: ...

    def task_did_receive_challenge(
        self, session: Any, task: Any, challenge: Any, completion: AuthChallengeCompletion
    ) -> None: ...

    def need_new_body_stream(self, session: Any, task: Any, completion: BodyStreamCompletion) -> None: ...

    def did_send_body_data(
        self,
        session: Any,
        task: Any,
        bytes_sent: int,
        total_bytes_sent: int,
        total_bytes_expected_to_send: int,
    ) -> None: ...

    def did_finish_collecting_metrics(self, session: Any, task: Any, metrics: Any) -> None: ...

    def did_complete_with_error(self, session: Any, task: Any, error: BaseException | None) -> None: ...


class DataEvents(Protocol):
    """Port: events of tasks that deliver the body in memory."""

    def did_receive_response(
        self, session: Any, data_task: Any, response: Any, completion: ResponseCompletion
    ) -> None: ...

    def did_become_download_task(self, session: Any, data_task: Any, download_task: Any) -> None: ...

    def did_become_stream_task(self, session: Any, data_task: Any, stream_task: Any) -> None: ...

    def did_receive_data(self, session: Any, data_task: Any, data: bytes) -> None: ...

    def will_cache_response(
        self, session: Any, data_task: Any, proposed_response: Any, completion: CacheCompletion
    ) -> None: ...


class DownloadEvents(Protocol):
    """Port: events of tasks that write the body to a file."""

    def did_finish_downloading_to(self, session: Any, download_task: Any, location: Any) -> None: ...

    def did_write_data(
        self,
        session: Any,
        download_task: Any,
        bytes_written: int,
        total_bytes_written: int,
        total_bytes_expected_to_write: int,
    ) -> None: ...

    def did_resume_at_offset(
        self, session: Any, download_task: Any, file_offset: int, expected_total_bytes: int
    ) -> None: ...


class StreamEvents(Protocol):
    """Port: events of bidirectional byte-stream tasks."""

    def read_closed_for(self, session: Any, stream_task: Any) -> None: ...

    def write_closed_for(self, session: Any, stream_task: Any) -> None: ...

    def better_route_discovered_for(self, session: Any, stream_task: Any) -> None: ...

    def did_become_streams(
        self, session: Any, stream_task: Any, input_stream: Any, output_stream: Any
    ) -> None: ...


class WebSocketEvents(Protocol):
    """Port: WebSocket handshake and close events."""

    def did_open_with_protocol(self, session: Any, web_socket_task: Any, protocol: str | None) -> None: ...

    def did_close_with(
        self, session: Any, web_socket_task: Any, close_code: int, reason: bytes | None
    ) -> None: ...


__all__ = [
    "AuthChallengeCompletion",
    "BodyStreamCompletion",
    "CacheCompletion",
    "DataEvents",
    "DelayedRequestCompletion",
    "DownloadEvents",
    "RedirectCompletion",
    "ResponseCompletion",
    "SessionEvents",
    "StreamEvents",
    "TaskEvents",
    "WebSocketEvents",
]
