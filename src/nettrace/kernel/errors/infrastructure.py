"""Infrastructure errors – failures reported by the traced HTTP client."""

from __future__ import annotations

from typing import Any

from nettrace.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O failure raised while talking to a remote endpoint."""

    default_code = "infrastructure_error"


class TimeoutError(InfrastructureError):  # noqa: A001
    """A request exceeded its deadline."""

    default_code = "timeout"


class ExternalServiceError(InfrastructureError):
    """The remote endpoint failed or returned an error status."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["service"] = self.service
        if self.status_code is not None:
            payload["status_code"] = self.status_code
        return payload


__all__ = ["ExternalServiceError", "InfrastructureError", "TimeoutError"]
