"""Observability – TraceSettings (``NETTRACE_*`` environment variables)."""
from __future__ import annotations

import dataclasses

from nettrace.config.settings import Settings
from nettrace.config.validation import InvalidSettingValueError
from nettrace.observability.logging.verbosity import Verbosity


@dataclasses.dataclass
class TraceSettings(Settings):
    """Label and verbosity for an :class:`EventLogger`.

    ``NETTRACE_LABEL=api NETTRACE_VERBOSITY=debug`` yields a DEBUG logger
    whose headers read ``[<ctx>] api.<event>``.
    """

    label: str = "nettrace"
    verbosity: str = "info"

    def _validate(self) -> None:
        try:
            Verbosity.parse(self.verbosity)
        except InvalidSettingValueError as exc:
            raise InvalidSettingValueError(self.env_key("verbosity"), exc.value, exc.reason) from exc

    @property
    def verbosity_level(self) -> Verbosity:
        return Verbosity.parse(self.verbosity)


__all__ = ["TraceSettings"]
