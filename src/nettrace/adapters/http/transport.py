"""HTTP adapter – TracingTransport.

Wraps any :class:`httpx.AsyncBaseTransport` and reports body progress,
metrics and completion of every request to a :class:`LifecycleTap`.
The wrapped transport still does all the work; requests and responses are
passed through unchanged.
"""
from __future__ import annotations

import asyncio
import dataclasses
import time
from typing import AsyncIterator

import httpx

from nettrace.observability.lifecycle import LifecycleTap

UNKNOWN_SIZE = -1


@dataclasses.dataclass(frozen=True)
class TaskMetrics:
    """Timing and volume of one request/response exchange."""
    method: str
    url: str
    status_code: int
    http_version: str
    elapsed: float
    bytes_received: int

    def __str__(self) -> str:
        return "\n".join([
            f"{self.method} {self.url}",
            f"status: {self.status_code}",
            f"http_version: {self.http_version}",
            f"elapsed: {self.elapsed:.3f}s",
            f"bytes_received: {self.bytes_received}",
        ])


def _content_length(headers: httpx.Headers) -> int:
    try:
        return int(headers["content-length"])
    except (KeyError, ValueError):
        return UNKNOWN_SIZE


class _TracedRequestStream(httpx.AsyncByteStream):
    def __init__(
        self,
        tap: LifecycleTap,
        session: "TracingTransport",
        request: httpx.Request,
        stream: httpx.AsyncByteStream,
    ) -> None:
        self._tap = tap
        self._session = session
        self._request = request
        self._stream = stream
        self._expected = _content_length(request.headers)

    async def __aiter__(self) -> AsyncIterator[bytes]:
        total = 0
        async for chunk in self._stream:
            if chunk:
                total += len(chunk)
                self._tap.did_send_body_data(self._session, self._request, len(chunk), total, self._expected)
            yield chunk

    async def aclose(self) -> None:
        await self._stream.aclose()


class _TracedResponseStream(httpx.AsyncByteStream):
    def __init__(
        self,
        tap: LifecycleTap,
        session: "TracingTransport",
        request: httpx.Request,
        response: httpx.Response,
        started: float,
    ) -> None:
        self._tap = tap
        self._session = session
        self._request = request
        self._response = response
        self._started = started
        self._received = 0
        self._finished = False

    async def __aiter__(self) -> AsyncIterator[bytes]:
        try:
            async for chunk in self._response.stream:  # type: ignore[union-attr]
                if chunk:
                    self._received += len(chunk)
                    self._tap.did_receive_data(self._session, self._request, chunk)
                yield chunk
        except (Exception, asyncio.CancelledError) as exc:
            self._finish(exc)
            raise

    async def aclose(self) -> None:
        try:
            await self._response.stream.aclose()  # type: ignore[union-attr]
        except (Exception, asyncio.CancelledError) as exc:
            self._finish(exc)
            raise
        self._finish(None)

    def _finish(self, error: BaseException | None) -> None:
        if self._finished:
            return
        self._finished = True
        metrics = TaskMetrics(
            method=self._request.method,
            url=str(self._request.url),
            status_code=self._response.status_code,
            http_version=self._response.http_version,
            elapsed=time.perf_counter() - self._started,
            bytes_received=self._received,
        )
        self._tap.did_finish_collecting_metrics(self._session, self._request, metrics)
        self._tap.did_complete_with_error(self._session, self._request, error)


class TracingTransport(httpx.AsyncBaseTransport):
    """Transport decorator feeding a :class:`LifecycleTap`.

    Parameters
    ----------
    tap:
        Receiver of the traced events.
    transport:
        The transport doing the actual I/O.  Defaults to
        :class:`httpx.AsyncHTTPTransport`.

    Reported events: ``did_send_body_data`` per request body chunk,
    ``did_receive_data`` per response body chunk, then
    ``did_finish_collecting_metrics`` and ``did_complete_with_error`` once the
    response is closed (or the exchange failed or was cancelled).  Closing the
    transport reports ``did_become_invalid_with_error``.
    """

    def __init__(self, tap: LifecycleTap, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._tap = tap
        self._transport = transport if transport is not None else httpx.AsyncHTTPTransport()

    @property
    def tap(self) -> LifecycleTap:
        return self._tap

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self._trace_upload(request)
        started = time.perf_counter()
        try:
            response = await self._transport.handle_async_request(request)
        except (Exception, asyncio.CancelledError) as exc:
            self._tap.did_complete_with_error(self, request, exc)
            raise
        return httpx.Response(
            status_code=response.status_code,
            headers=response.headers,
            stream=_TracedResponseStream(self._tap, self, request, response, started),
            extensions=response.extensions,
            request=request,
        )

    async def aclose(self) -> None:
        try:
            await self._transport.aclose()
        except Exception as exc:
            self._tap.did_become_invalid_with_error(self, exc)
            raise
        self._tap.did_become_invalid_with_error(self, None)

    def _trace_upload(self, request: httpx.Request) -> None:
        if "content-length" not in request.headers and "transfer-encoding" not in request.headers:
            return
        stream = request.stream
        # redirects re-send the same stream object; never wrap twice
        if isinstance(stream, _TracedRequestStream):
            stream = stream._stream
        if isinstance(stream, httpx.AsyncByteStream):
            request.stream = _TracedRequestStream(self._tap, self, request, stream)


__all__ = ["TaskMetrics", "TracingTransport", "UNKNOWN_SIZE"]
