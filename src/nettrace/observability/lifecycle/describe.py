"""Lifecycle – render client objects as trace strings.

The describers duck-type on the attributes an HTTP client exposes
(``method``/``url`` for requests, ``status_code``/``headers`` for responses)
and fall back to :func:`describe` for anything else.  None of them raise.
"""
from __future__ import annotations

import functools
from typing import Any, Callable

from nettrace.observability.logging import NIL, SensitiveFieldsFilter, describe

_filter = SensitiveFieldsFilter()


def _total(fn: Callable[[Any], str]) -> Callable[[Any], str]:
    @functools.wraps(fn)
    def wrapper(value: Any) -> str:
        if value is None:
            return NIL
        try:
            return fn(value)
        except Exception:  # noqa: BLE001
            return describe(value)

    return wrapper


@_total
def describe_error(error: Any) -> str:
    """``TypeName: message`` for exceptions, ``nil`` when absent."""
    if isinstance(error, BaseException):
        message = str(error)
        name = type(error).__name__
        return f"{name}: {message}" if message else name
    return describe(error)


@_total
def describe_request(request: Any) -> str:
    """``METHOD url`` for request-like objects."""
    method = getattr(request, "method", None)
    url = getattr(request, "url", None)
    if method is None or url is None:
        return describe(request)
    return f"{method} {url}"


def describe_headers(headers: Any) -> list[str]:
    """Header lines with credentials redacted, in wire order."""
    if hasattr(headers, "multi_items"):
        pairs = headers.multi_items()
    else:
        pairs = list(dict(headers).items())
    return [f"{k}: {v}" for k, v in _filter.redact_pairs(pairs)]


@_total
def describe_response(response: Any) -> str:
    """Status line followed by one line per (redacted) header."""
    status_code = getattr(response, "status_code", None)
    if status_code is None:
        return describe(response)
    reason = getattr(response, "reason_phrase", "") or ""
    version = getattr(response, "http_version", "") or ""
    status_line = " ".join(part for part in (version, str(status_code), reason) if part)
    lines = [status_line]
    if _has_request(response):
        lines.append(f"url: {response.request.url}")
    headers = getattr(response, "headers", None)
    if headers is not None:
        lines.extend(describe_headers(headers))
    return "\n".join(lines)


def _has_request(response: Any) -> bool:
    # httpx raises RuntimeError when a Response was built without a request
    try:
        return getattr(response, "request", None) is not None
    except RuntimeError:
        return False


__all__ = ["describe_error", "describe_headers", "describe_request", "describe_response"]
