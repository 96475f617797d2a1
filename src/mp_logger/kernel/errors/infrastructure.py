"""Infrastructure errors – network failures talking to log backends."""

from __future__ import annotations

from typing import Any

from mp_logger.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O failure while delivering log entries."""

    default_code = "infrastructure_error"


class TimeoutError(InfrastructureError):  # noqa: A001
    """An I/O operation exceeded its deadline."""

    default_code = "infrastructure_timeout"


class ExternalServiceError(InfrastructureError):
    """A log backend returned an unexpected response or was unreachable."""

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

    def log_fields(self) -> dict[str, Any]:
        fields = super().log_fields()
        if self.status_code is not None:
            fields["status_code"] = self.status_code
        return fields


__all__ = [
    "ExternalServiceError",
    "InfrastructureError",
    "TimeoutError",
]
