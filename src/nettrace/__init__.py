"""
nettrace – verbosity-gated lifecycle tracing for async network clients.

Import path convention::

    from nettrace.observability.logging import EventLogger, Verbosity
    from nettrace.observability.lifecycle import LifecycleTap
    from nettrace.adapters.http import TracedHttpClient
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
