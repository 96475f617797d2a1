"""Root error class for the mp-logger error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of every error mp-logger raises or reports.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra context; must be JSON-serialisable.
        cause: Underlying exception, also set as ``__cause__``.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.message} [{self.code}]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def log_fields(self) -> dict[str, Any]:
        """Flat ``extra`` fields for a diagnostic record."""
        fields: dict[str, Any] = {"error": self.message, "error_code": self.code}
        if self.__cause__ is not None:
            fields["error_cause"] = repr(self.__cause__)
        return fields


def error_fields(exc: BaseException | None) -> dict[str, Any]:
    """Diagnostic fields for any exception; richer for :class:`BaseError`."""
    if exc is None:
        return {}
    if isinstance(exc, BaseError):
        return exc.log_fields()
    return {"error": repr(exc)}


__all__ = ["BaseError", "error_fields"]
