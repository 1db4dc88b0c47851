"""Observability – SensitiveFieldsFilter."""
from __future__ import annotations

from typing import Any, Iterable

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "authorization", "proxy-authorization", "cookie", "set-cookie",
    "password", "passwd", "secret", "token", "api_key", "apikey",
    "x-api-key", "access_token", "refresh_token",
})


class SensitiveFieldsFilter:
    """Replace values of sensitive keys with ``[REDACTED]``."""

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._fields = sensitive_fields or DEFAULT_SENSITIVE_FIELDS

    def is_sensitive(self, key: str) -> bool:
        return key.lower() in self._fields

    def redact(self, data: dict[str, Any]) -> dict[str, Any]:
        return {k: (self.REDACTED if self.is_sensitive(k) else v) for k, v in data.items()}

    def redact_deep(self, data: dict[str, Any]) -> dict[str, Any]:
        """Recursively redact nested dicts."""
        result: dict[str, Any] = {}
        for k, v in data.items():
            if self.is_sensitive(k):
                result[k] = self.REDACTED
            elif isinstance(v, dict):
                result[k] = self.redact_deep(v)
            else:
                result[k] = v
        return result

    def redact_pairs(self, pairs: Iterable[tuple[str, str]]) -> list[tuple[str, str]]:
        """Redact a multi-valued sequence such as HTTP headers, keeping order."""
        return [(k, self.REDACTED if self.is_sensitive(k) else v) for k, v in pairs]


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter"]
