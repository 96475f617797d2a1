"""Unit tests – HTTP adapter used by the Loki transport."""
from __future__ import annotations

import asyncio
import json

import httpx
import pytest
import respx

from mp_logger.adapters.http.client import USER_AGENT, HttpClient, HttpxHttpClient
from mp_logger.kernel.errors import ExternalServiceError, InfrastructureError, TimeoutError as AppTimeoutError

URL = "http://loki:3100/loki/api/v1/push"


class TestHttpxPost:
    @respx.mock
    def test_post_sends_json_and_headers(self) -> None:
        route = respx.post(URL).mock(return_value=httpx.Response(204))

        async def run() -> httpx.Response:
            async with HttpxHttpClient() as client:
                return await client.post(URL, json={"streams": []}, headers={"X-Scope-OrgID": "t1"})

        response = asyncio.run(run())
        assert response.status_code == 204
        sent = route.calls.last.request
        assert sent.headers["x-scope-orgid"] == "t1"
        assert sent.headers["user-agent"] == USER_AGENT
        assert json.loads(sent.content) == {"streams": []}

    def test_alias(self) -> None:
        assert HttpClient is HttpxHttpClient

    def test_aclose_marks_closed(self) -> None:
        async def run() -> bool:
            client = HttpxHttpClient()
            await client.aclose()
            return client.is_closed

        assert asyncio.run(run()) is True


class TestHttpxErrorMapping:
    """HttpxHttpClient maps httpx errors to domain errors."""

    @respx.mock
    def test_4xx_raises_external_service_error(self) -> None:
        respx.post(URL).mock(return_value=httpx.Response(400, text="entry out of order"))

        async def run() -> None:
            async with HttpxHttpClient() as client:
                await client.post(URL, json={})

        with pytest.raises(ExternalServiceError) as exc_info:
            asyncio.run(run())
        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == {"url": URL, "body": "entry out of order"}
        assert exc_info.value.service == "loki"

    @respx.mock
    def test_5xx_raises_external_service_error(self) -> None:
        respx.post(URL).mock(return_value=httpx.Response(503))

        async def run() -> None:
            async with HttpxHttpClient() as client:
                await client.post(URL, json={})

        with pytest.raises(ExternalServiceError) as exc_info:
            asyncio.run(run())
        assert exc_info.value.status_code == 503

    @respx.mock
    def test_connect_error_has_no_status(self) -> None:
        respx.post(URL).mock(side_effect=httpx.ConnectError("connection refused"))

        async def run() -> None:
            async with HttpxHttpClient() as client:
                await client.post(URL, json={})

        with pytest.raises(ExternalServiceError) as exc_info:
            asyncio.run(run())
        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @respx.mock
    def test_timeout_maps_to_timeout_error(self) -> None:
        respx.post(URL).mock(side_effect=httpx.ReadTimeout("slow"))

        async def run() -> None:
            async with HttpxHttpClient(timeout=0.1) as client:
                await client.post(URL, json={})

        with pytest.raises(AppTimeoutError) as exc_info:
            asyncio.run(run())
        assert isinstance(exc_info.value, InfrastructureError)

    @respx.mock
    def test_service_name_in_message(self) -> None:
        respx.post(URL).mock(return_value=httpx.Response(429, text="rate limited"))

        async def run() -> None:
            async with HttpxHttpClient(service="loki-eu") as client:
                await client.post(URL, json={})

        with pytest.raises(ExternalServiceError) as exc_info:
            asyncio.run(run())
        assert exc_info.value.message.startswith("loki-eu answered HTTP 429")
