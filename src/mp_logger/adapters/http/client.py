"""HTTP adapter – HttpxHttpClient used for log pushes."""
from __future__ import annotations

from typing import Any

from mp_logger.kernel.errors import ExternalServiceError, TimeoutError as AppTimeoutError

USER_AGENT = "mp-logger"

# Loki explains rejections (out-of-order entries, rate limits) in the body
_MAX_ERROR_BODY = 512


def _require_httpx() -> Any:
    try:
        import httpx  # type: ignore[import-untyped]
        return httpx
    except ImportError as exc:
        raise ImportError("Install 'httpx' to use the HTTP adapter") from exc


class HttpxHttpClient:
    """Async httpx client that turns every delivery failure into a kernel error.

    * non-2xx response -> :class:`ExternalServiceError` with ``status_code``
      and the start of the response body in ``detail["body"]``
    * timeout -> :class:`~mp_logger.kernel.errors.TimeoutError`
    * any other transport error -> :class:`ExternalServiceError` without a
      status

    *service* names the backend in those errors.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        *,
        service: str = "loki",
        headers: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> None:
        httpx = _require_httpx()
        self._service = service
        self._client = httpx.AsyncClient(
            timeout=timeout,
            headers={"User-Agent": USER_AGENT, **(headers or {})},
            **kwargs,
        )

    async def __aenter__(self) -> "HttpxHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    @property
    def is_closed(self) -> bool:
        return bool(self._client.is_closed)

    async def post(self, url: str, **kwargs: Any) -> Any:
        """POST and return the response; raises on anything but 2xx."""
        httpx = _require_httpx()
        try:
            response = await self._client.post(url, **kwargs)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise AppTimeoutError(
                f"{self._service} push timed out: POST {url}", detail={"service": self._service}
            ) from exc
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise ExternalServiceError(
                self._service,
                f"{self._service} answered HTTP {status} to POST {url}",
                status_code=status,
                detail={"url": url, "body": exc.response.text[:_MAX_ERROR_BODY]},
            ) from exc
        except httpx.HTTPError as exc:
            raise ExternalServiceError(
                self._service,
                f"{self._service} unreachable: {str(exc) or type(exc).__name__}",
                detail={"url": url},
            ) from exc
        return response

    async def aclose(self) -> None:
        await self._client.aclose()


HttpClient = HttpxHttpClient

__all__ = ["HttpClient", "HttpxHttpClient", "USER_AGENT"]
