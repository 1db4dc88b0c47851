"""Observability – Verbosity threshold for the event logger."""
from __future__ import annotations

from enum import IntEnum

from nettrace.config.validation import InvalidSettingValueError


class Verbosity(IntEnum):
    """Ordered trace threshold: ``OFF < INFO < DEBUG``.

    ``OFF`` silences the logger, ``INFO`` prints one header line per event,
    ``DEBUG`` adds the labelled arguments block.
    """

    OFF = 0
    INFO = 1
    DEBUG = 2

    @classmethod
    def parse(cls, value: "Verbosity | int | str") -> "Verbosity":
        """Coerce a member, ordinal or case-insensitive name into a member."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass
        elif isinstance(value, str):
            name = value.strip().upper()
            if name in cls.__members__:
                return cls[name]
            if name.isdigit():
                return cls.parse(int(name))
        raise InvalidSettingValueError(
            "verbosity", value, f"expected one of {', '.join(m.name.lower() for m in cls)}"
        )


__all__ = ["Verbosity"]
