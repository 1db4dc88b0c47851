"""HTTP adapter – attach a LifecycleTap to an httpx.AsyncClient."""
from nettrace.adapters.http.transport import TaskMetrics, TracingTransport
from nettrace.adapters.http.hooks import merge_event_hooks, proposed_redirect, tracing_event_hooks
from nettrace.adapters.http.client import TracedHttpClient

__all__ = [
    "TaskMetrics",
    "TracedHttpClient",
    "TracingTransport",
    "merge_event_hooks",
    "proposed_redirect",
    "tracing_event_hooks",
]
