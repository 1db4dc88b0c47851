"""Observability – identifier of the executing thread / asyncio task."""
from __future__ import annotations

import asyncio
import threading


def current_context_id() -> str:
    """Return ``<native thread id>`` or ``<native thread id>/<task name>``.

    The task suffix is added when called from inside a running asyncio task,
    so concurrent requests on one event loop stay distinguishable.
    """
    ident = str(threading.get_native_id())
    try:
        task = asyncio.current_task()
    except RuntimeError:
        return ident
    if task is None:
        return ident
    return f"{ident}/{task.get_name()}"


__all__ = ["current_context_id"]
