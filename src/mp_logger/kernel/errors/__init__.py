"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ConfigError              (config.py)
    │   ├── MissingRequiredSettingError
    │   └── InvalidSettingValueError
    └── InfrastructureError      (infrastructure.py)
        ├── TimeoutError
        └── ExternalServiceError
"""

from mp_logger.kernel.errors.base import BaseError, error_fields
from mp_logger.kernel.errors.config import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from mp_logger.kernel.errors.infrastructure import (
    ExternalServiceError,
    InfrastructureError,
    TimeoutError,
)

__all__ = [
    "BaseError",
    "ConfigError",
    "ExternalServiceError",
    "InfrastructureError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "TimeoutError",
    "error_fields",
]
