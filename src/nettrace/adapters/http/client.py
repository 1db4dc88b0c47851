"""HTTP adapter – TracedHttpClient."""
from __future__ import annotations

import contextlib
import os
import re
import tempfile
from pathlib import Path
from typing import Any, Iterator

import httpx

from nettrace.adapters.http.hooks import merge_event_hooks, tracing_event_hooks
from nettrace.adapters.http.transport import UNKNOWN_SIZE, TracingTransport
from nettrace.kernel.errors import ExternalServiceError, TimeoutError as AppTimeoutError
from nettrace.observability.lifecycle import LifecycleTap
from nettrace.observability.logging import get_logger

_log = get_logger(__name__)

_CONTENT_RANGE_TOTAL = re.compile(r"/(\d+)\s*$")


@contextlib.contextmanager
def _mapped_errors(method: str, url: Any) -> Iterator[None]:
    try:
        yield
    except httpx.TimeoutException as exc:
        raise AppTimeoutError(f"HTTP request timed out: {method} {url}") from exc
    except httpx.HTTPStatusError as exc:
        raise ExternalServiceError(
            service=str(url),
            message=f"HTTP {exc.response.status_code} from {method} {url}",
            status_code=exc.response.status_code,
        ) from exc
    except httpx.HTTPError as exc:
        raise ExternalServiceError(service=str(url), message=str(exc)) from exc


def _expected_total(response: httpx.Response, resumed: bool) -> int:
    if resumed:
        match = _CONTENT_RANGE_TOTAL.search(response.headers.get("content-range", ""))
        if match:
            return int(match.group(1))
    try:
        return int(response.headers["content-length"])
    except (KeyError, ValueError):
        return UNKNOWN_SIZE


class TracedHttpClient:
    """Async httpx client whose whole lifecycle is reported to a tap.

    Parameters
    ----------
    tap:
        :class:`LifecycleTap` receiving every event.
    base_url, timeout:
        Passed to :class:`httpx.AsyncClient`.
    transport:
        Inner transport (e.g. :class:`httpx.MockTransport` in tests); wrapped
        in a :class:`TracingTransport`.
    **kwargs:
        Extra :class:`httpx.AsyncClient` options.  Caller ``event_hooks`` run
        after the tracing hooks.
    """

    def __init__(
        self,
        tap: LifecycleTap,
        base_url: str = "",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
        **kwargs: Any,
    ) -> None:
        self._tap = tap
        event_hooks = merge_event_hooks(tracing_event_hooks(tap, self), kwargs.pop("event_hooks", None))
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=TracingTransport(tap, transport),
            event_hooks=event_hooks,
            **kwargs,
        )

    @property
    def tap(self) -> LifecycleTap:
        return self._tap

    async def __aenter__(self) -> "TracedHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("POST", url, **kwargs)

    async def put(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("PUT", url, **kwargs)

    async def patch(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("PATCH", url, **kwargs)

    async def delete(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("DELETE", url, **kwargs)

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        with _mapped_errors(method, url):
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
            return response

    async def download(
        self,
        url: str,
        destination: str | os.PathLike[str] | None = None,
        *,
        offset: int = 0,
        **kwargs: Any,
    ) -> Path:
        """Stream *url* to *destination* (a fresh temp file by default).

        With ``offset > 0`` a ``Range`` header is sent; when the server
        answers ``206`` the body is appended to *destination*, otherwise the
        file is rewritten from the start.  Returns the file path.  A temp file
        created here is removed again when the download fails.
        """
        headers = httpx.Headers(kwargs.pop("headers", None))
        if offset > 0:
            headers["range"] = f"bytes={offset}-"

        if destination is None:
            fd, name = tempfile.mkstemp(prefix="nettrace-", suffix=".download")
            os.close(fd)
            path = Path(name)
        else:
            path = Path(destination)

        try:
            with _mapped_errors("GET", url):
                async with self._client.stream("GET", url, headers=headers, **kwargs) as response:
                    response.raise_for_status()
                    task = response.request
                    resumed = offset > 0 and response.status_code == httpx.codes.PARTIAL_CONTENT
                    expected = _expected_total(response, resumed)
                    if resumed:
                        self._tap.did_resume_at_offset(self, task, offset, expected)
                    elif offset > 0:
                        _log.info("download_range_ignored", url=str(url), offset=offset)

                    written = offset if resumed else 0
                    with path.open("ab" if resumed else "wb") as fh:
                        async for chunk in response.aiter_bytes():
                            fh.write(chunk)
                            written += len(chunk)
                            self._tap.did_write_data(self, task, len(chunk), written, expected)
        except BaseException:
            if destination is None:
                path.unlink(missing_ok=True)
            raise

        self._tap.did_finish_downloading_to(self, task, path)
        return path


__all__ = ["TracedHttpClient"]
