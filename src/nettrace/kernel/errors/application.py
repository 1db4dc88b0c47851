"""Application-layer errors."""

from __future__ import annotations

from nettrace.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern (bad configuration, misuse)."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
