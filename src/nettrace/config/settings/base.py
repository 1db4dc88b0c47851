"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping


@dataclasses.dataclass
class Settings:
    """Base class for settings read from ``<PREFIX>_<FIELD>`` variables.

    Subclasses are dataclasses; ``_prefix`` names the variable family
    (``NETTRACE`` unless overridden) and ``_validate`` runs after every
    construction, whether from the environment or from code.
    """

    _prefix: dataclasses.ClassVar[str] = "NETTRACE"

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Variable holding *field_name*, e.g. ``NETTRACE_VERBOSITY``."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Any:
        """Build an instance from *environ* (``os.environ`` by default)."""
        from nettrace.config.settings.loaders import EnvSettingsLoader  # noqa: PLC0415

        return EnvSettingsLoader(environ).load(cls)

    def _validate(self) -> None:
        """Override to reject inconsistent values (raise :class:`ConfigError`)."""


__all__ = ["Settings"]
