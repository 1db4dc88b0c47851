"""Lifecycle – LifecycleTap.

One component attached to every event category a network client reports.
Each event is logged under its method name; events that need an answer are
answered with the client's neutral default right after logging, on the same
call.  The tap never inspects, alters or vetoes proposed values.
"""
from __future__ import annotations

from typing import Any, Mapping

from nettrace.observability.lifecycle.describe import (
    describe_error,
    describe_request,
    describe_response,
)
from nettrace.observability.lifecycle.dispositions import (
    AuthChallengeDisposition,
    DelayedRequestDisposition,
    ResponseDisposition,
)
from nettrace.observability.lifecycle.ports import (
    AuthChallengeCompletion,
    BodyStreamCompletion,
    CacheCompletion,
    DelayedRequestCompletion,
    RedirectCompletion,
    ResponseCompletion,
)
from nettrace.observability.logging import EventLogger, describe


class LifecycleTap:
    """Observation-only receiver for session, task, data, download, stream
    and WebSocket events.

    Parameters
    ----------
    logger:
        The :class:`EventLogger` every event is forwarded to.

    Example
    -------
    ::

        tap = LifecycleTap(EventLogger("api", Verbosity.DEBUG))
        tap.did_open_with_protocol(session, ws_task, "chat")
    """

    def __init__(self, logger: EventLogger) -> None:
        self._logger = logger

    @property
    def logger(self) -> EventLogger:
        return self._logger

    def log(self, event_name: str, arguments: Mapping[str, Any] | None = None) -> None:
        self._logger.log(event_name, arguments)

    # ------------------------------------------------------------------
    # Disposition helpers
    # ------------------------------------------------------------------

    @staticmethod
    def answer_auth_challenge(completion: AuthChallengeCompletion) -> None:
        completion(AuthChallengeDisposition.PERFORM_DEFAULT_HANDLING, None)

    @staticmethod
    def answer_delayed_request(completion: DelayedRequestCompletion, request: Any) -> None:
        completion(DelayedRequestDisposition.CONTINUE_LOADING, request)

    @staticmethod
    def answer_redirect(completion: RedirectCompletion, request: Any) -> None:
        completion(request)

    @staticmethod
    def answer_body_stream(completion: BodyStreamCompletion) -> None:
        completion(None)

    @staticmethod
    def answer_response(completion: ResponseCompletion) -> None:
        completion(ResponseDisposition.ALLOW)

    @staticmethod
    def answer_cache(completion: CacheCompletion, proposed_response: Any) -> None:
        completion(proposed_response)

    # ------------------------------------------------------------------
    # Session events
    # ------------------------------------------------------------------

    def did_become_invalid_with_error(self, session: Any, error: BaseException | None) -> None:  # noqa: ARG002
        self.log("did_become_invalid_with_error", {"error": describe_error(error)})

    def did_receive_challenge(
        self, session: Any, challenge: Any, completion: AuthChallengeCompletion  # noqa: ARG002
    ) -> None:
        try:
            self.log("did_receive_challenge", {"challenge": describe(challenge)})
        finally:
            self.answer_auth_challenge(completion)

    def did_finish_events_for_background_session(self, session: Any) -> None:  # noqa: ARG002
        self.log("did_finish_events_for_background_session")

    # ------------------------------------------------------------------
    # Task events
    # ------------------------------------------------------------------

    def will_begin_delayed_request(
        self, session: Any, task: Any, request: Any, completion: DelayedRequestCompletion  # noqa: ARG002
    ) -> None:
        try:
            self.log(
                "will_begin_delayed_request",
                {"task": describe(task), "request": describe_request(request)},
            )
        finally:
            self.answer_delayed_request(completion, request)

    def task_is_waiting_for_connectivity(self, session: Any, task: Any) -> None:  # noqa: ARG002
        self.log("task_is_waiting_for_connectivity", {"task": describe(task)})

    def will_perform_http_redirection(
        self,
        session: Any,  # noqa: ARG002
        task: Any,
        response: Any,
        request: Any,
        completion: RedirectCompletion,
    ) -> None:
        try:
            self.log(
                "will_perform_http_redirection",
                {
                    "task": describe(task),
                    "response": describe_response(response),
                    "request": describe_request(request),
                },
            )
        finally:
            self.answer_redirect(completion, request)

    def task_did_receive_challenge(
        self, session: Any, task: Any, challenge: Any, completion: AuthChallengeCompletion  # noqa: ARG002
    ) -> None:
        try:
            self.log(
                "task_did_receive_challenge",
                {"task": describe(task), "challenge": describe(challenge)},
            )
        finally:
            self.answer_auth_challenge(completion)

    def need_new_body_stream(self, session: Any, task: Any, completion: BodyStreamCompletion) -> None:  # noqa: ARG002
        try:
            self.log("need_new_body_stream", {"task": describe(task)})
        finally:
            self.answer_body_stream(completion)

    def did_send_body_data(
        self,
        session: Any,  # noqa: ARG002
        task: Any,
        bytes_sent: int,
        total_bytes_sent: int,
        total_bytes_expected_to_send: int,
    ) -> None:
        self.log(
            "did_send_body_data",
            {
                "task": describe(task),
                "bytesSent": bytes_sent,
                "totalBytesSent": total_bytes_sent,
                "totalBytesExpectedToSend": total_bytes_expected_to_send,
            },
        )

    def did_finish_collecting_metrics(self, session: Any, task: Any, metrics: Any) -> None:  # noqa: ARG002
        self.log("did_finish_collecting_metrics", {"task": describe(task), "metrics": describe(metrics)})

    def did_complete_with_error(self, session: Any, task: Any, error: BaseException | None) -> None:  # noqa: ARG002
        self.log("did_complete_with_error", {"task": describe(task), "error": describe_error(error)})

    # ------------------------------------------------------------------
    # Data events
    # ------------------------------------------------------------------

    def did_receive_response(
        self, session: Any, data_task: Any, response: Any, completion: ResponseCompletion  # noqa: ARG002
    ) -> None:
        try:
            self.log(
                "did_receive_response",
                {"dataTask": describe(data_task), "response": describe_response(response)},
            )
        finally:
            self.answer_response(completion)

    def did_become_download_task(self, session: Any, data_task: Any, download_task: Any) -> None:  # noqa: ARG002
        self.log(
            "did_become_download_task",
            {"dataTask": describe(data_task), "downloadTask": describe(download_task)},
        )

    def did_become_stream_task(self, session: Any, data_task: Any, stream_task: Any) -> None:  # noqa: ARG002
        self.log(
            "did_become_stream_task",
            {"dataTask": describe(data_task), "streamTask": describe(stream_task)},
        )

    def did_receive_data(self, session: Any, data_task: Any, data: bytes) -> None:  # noqa: ARG002
        self.log("did_receive_data", {"dataTask": describe(data_task), "data": describe(data)})

    def will_cache_response(
        self, session: Any, data_task: Any, proposed_response: Any, completion: CacheCompletion  # noqa: ARG002
    ) -> None:
        try:
            self.log("will_cache_response", {"dataTask": describe(data_task)})
        finally:
            self.answer_cache(completion, proposed_response)

    # ------------------------------------------------------------------
    # Download events
    # ------------------------------------------------------------------

    def did_finish_downloading_to(self, session: Any, download_task: Any, location: Any) -> None:  # noqa: ARG002
        self.log(
            "did_finish_downloading_to",
            {"downloadTask": describe(download_task), "location": describe(location)},
        )

    def did_write_data(
        self,
        session: Any,  # noqa: ARG002
        download_task: Any,
        bytes_written: int,
        total_bytes_written: int,
        total_bytes_expected_to_write: int,
    ) -> None:
        self.log(
            "did_write_data",
            {
                "downloadTask": describe(download_task),
                "bytesWritten": bytes_written,
                "totalBytesWritten": total_bytes_written,
                "totalBytesExpectedToWrite": total_bytes_expected_to_write,
            },
        )

    def did_resume_at_offset(
        self, session: Any, download_task: Any, file_offset: int, expected_total_bytes: int  # noqa: ARG002
    ) -> None:
        self.log(
            "did_resume_at_offset",
            {
                "downloadTask": describe(download_task),
                "fileOffset": file_offset,
                "expectedTotalBytes": expected_total_bytes,
            },
        )

    # ------------------------------------------------------------------
    # Stream events
    # ------------------------------------------------------------------

    def read_closed_for(self, session: Any, stream_task: Any) -> None:  # noqa: ARG002
        self.log("read_closed_for", {"streamTask": describe(stream_task)})

    def write_closed_for(self, session: Any, stream_task: Any) -> None:  # noqa: ARG002
        self.log("write_closed_for", {"streamTask": describe(stream_task)})

    def better_route_discovered_for(self, session: Any, stream_task: Any) -> None:  # noqa: ARG002
        self.log("better_route_discovered_for", {"streamTask": describe(stream_task)})

    def did_become_streams(
        self, session: Any, stream_task: Any, input_stream: Any, output_stream: Any  # noqa: ARG002
    ) -> None:
        self.log(
            "did_become_streams",
            {
                "streamTask": describe(stream_task),
                "inputStream": describe(input_stream),
                "outputStream": describe(output_stream),
            },
        )

    # ------------------------------------------------------------------
    # WebSocket events
    # ------------------------------------------------------------------

    def did_open_with_protocol(self, session: Any, web_socket_task: Any, protocol: str | None) -> None:  # noqa: ARG002
        self.log(
            "did_open_with_protocol",
            {"webSocketTask": describe(web_socket_task), "protocol": describe(protocol)},
        )

    def did_close_with(
        self, session: Any, web_socket_task: Any, close_code: int, reason: bytes | None  # noqa: ARG002
    ) -> None:
        self.log(
            "did_close_with",
            {
                "webSocketTask": describe(web_socket_task),
                "closeCode": close_code,
                "reason": None if reason is None else len(reason),
            },
        )

    def __repr__(self) -> str:
        return f"LifecycleTap({self._logger!r})"


__all__ = ["LifecycleTap"]
