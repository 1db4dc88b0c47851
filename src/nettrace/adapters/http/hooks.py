"""HTTP adapter – httpx event hooks feeding a LifecycleTap.

httpx decides redirects and authentication itself; the hooks only observe,
so every disposition the tap answers is discarded.
"""
from __future__ import annotations

from typing import Any, Awaitable, Callable

import httpx

from nettrace.observability.lifecycle import LifecycleTap

EventHooks = dict[str, list[Callable[..., Awaitable[None]]]]

_CHALLENGE_HEADERS = {401: "www-authenticate", 407: "proxy-authenticate"}


def _observe_only(*answer: Any) -> None:  # noqa: ARG001
    pass


def _redirect_method(method: str, status_code: int) -> str:
    if status_code == httpx.codes.SEE_OTHER and method != "HEAD":
        return "GET"
    if status_code in (httpx.codes.FOUND, httpx.codes.MOVED_PERMANENTLY) and method == "POST":
        return "GET"
    return method


def proposed_redirect(response: httpx.Response) -> httpx.Request:
    """The request httpx is about to send for a redirect *response*."""
    request = response.request
    url = request.url.join(response.headers["location"])
    return httpx.Request(_redirect_method(request.method, response.status_code), url)


def tracing_event_hooks(tap: LifecycleTap, session: Any = None) -> EventHooks:
    """Build an httpx ``event_hooks`` mapping reporting to *tap*.

    * request  -> ``will_begin_delayed_request``
    * response -> ``did_receive_response``, plus
      ``will_perform_http_redirection`` for redirects and
      ``task_did_receive_challenge`` for 401/407 with a challenge header.
    """

    async def on_request(request: httpx.Request) -> None:
        tap.will_begin_delayed_request(session, request, request, _observe_only)

    async def on_response(response: httpx.Response) -> None:
        request = response.request
        tap.did_receive_response(session, request, response, _observe_only)
        if response.has_redirect_location:
            tap.will_perform_http_redirection(
                session, request, response, proposed_redirect(response), _observe_only
            )
        header = _CHALLENGE_HEADERS.get(response.status_code)
        if header is not None and header in response.headers:
            tap.task_did_receive_challenge(session, request, response.headers[header], _observe_only)

    return {"request": [on_request], "response": [on_response]}


def merge_event_hooks(*hooks: EventHooks | None) -> EventHooks:
    """Concatenate several ``event_hooks`` mappings, keeping order."""
    merged: EventHooks = {"request": [], "response": []}
    for mapping in hooks:
        for name, callbacks in (mapping or {}).items():
            merged.setdefault(name, []).extend(callbacks)
    return merged


__all__ = ["EventHooks", "merge_event_hooks", "proposed_redirect", "tracing_event_hooks"]
