"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   └── ConfigError      (nettrace.config.validation)
    └── InfrastructureError  (infrastructure.py)
        ├── TimeoutError
        └── ExternalServiceError
"""

from nettrace.kernel.errors.application import ApplicationError
from nettrace.kernel.errors.base import BaseError
from nettrace.kernel.errors.infrastructure import (
    ExternalServiceError,
    InfrastructureError,
    TimeoutError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ExternalServiceError",
    "InfrastructureError",
    "TimeoutError",
]
