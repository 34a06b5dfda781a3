"""Precise unit tests for HTTPClient.

Tests focus on session management, URL resolution and transport retries.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from theoneapi.scraper.core import HTTPStatusError, ProviderError
from theoneapi.scraper.runtime.rest import HTTPClient, HTTPResponse


def _mock_response(status: int = 200, body=None, text: str = "") -> AsyncMock:
    response = AsyncMock()
    response.status = status
    response.json = AsyncMock(return_value=body)
    response.text = AsyncMock(return_value=text)
    response.__aenter__ = AsyncMock(return_value=response)
    response.__aexit__ = AsyncMock(return_value=None)
    return response


def _client_with(*responses, **kwargs) -> tuple[HTTPClient, MagicMock, AsyncMock]:
    sleep = AsyncMock()
    client = HTTPClient(sleep=sleep, **kwargs)
    mock_session = MagicMock()
    mock_session.closed = False
    mock_session.get = MagicMock(side_effect=list(responses))
    client._session = mock_session
    return client, mock_session, sleep


class TestHTTPClientSessionManagement:
    """Test HTTPClient session management."""

    def test_init(self):
        client = HTTPClient(timeout=10.0)
        assert client.timeout.total == 10.0
        assert client._session is None
        assert client.max_retries == 3
        assert 429 in client.retry_statuses

    @pytest.mark.asyncio
    async def test_session_property_creates_session(self):
        client = HTTPClient()
        session = client.session
        assert isinstance(session, aiohttp.ClientSession)
        assert client._session is session
        await client.close()

    @pytest.mark.asyncio
    async def test_session_property_recreates_closed_session(self):
        client = HTTPClient()
        session1 = client.session
        await session1.close()

        session2 = client.session
        assert session1 is not session2
        assert not session2.closed
        await client.close()

    @pytest.mark.asyncio
    async def test_close_idempotent(self):
        client = HTTPClient()
        await client.close()
        await client.close()  # Should not raise

    @pytest.mark.asyncio
    async def test_context_manager(self):
        async with HTTPClient() as client:
            assert client.session is not None

        assert client._session is None or client._session.closed


class TestHTTPClientGet:
    """Test successful requests and URL handling."""

    @pytest.mark.asyncio
    async def test_get_returns_status_and_body(self):
        client, _, _ = _client_with(_mock_response(200, {"docs": []}))

        result = await client.get("https://api.example.com/book")

        assert result == HTTPResponse(
            status=200, body={"docs": []}, url="https://api.example.com/book"
        )

    @pytest.mark.asyncio
    async def test_get_with_base_url(self):
        client, mock_session, _ = _client_with(
            _mock_response(200, {}), base_url="https://api.example.com/v2/"
        )

        await client.get("/character", params={"limit": "10"})

        args, kwargs = mock_session.get.call_args
        assert args[0] == "https://api.example.com/v2/character"
        assert kwargs["params"] == {"limit": "10"}

    @pytest.mark.asyncio
    async def test_get_with_absolute_url(self):
        client, mock_session, _ = _client_with(
            _mock_response(200, {}), base_url="https://api.example.com"
        )

        await client.get("https://other.com/test")

        args, _ = mock_session.get.call_args
        assert args[0] == "https://other.com/test"

    @pytest.mark.asyncio
    async def test_per_request_timeout_is_passed(self):
        client, mock_session, _ = _client_with(_mock_response(200, {}))

        await client.get("https://api.example.com/x", timeout=10.0)

        _, kwargs = mock_session.get.call_args
        assert kwargs["timeout"].total == 10.0

    @pytest.mark.asyncio
    async def test_malformed_json_raises_provider_error(self):
        response = _mock_response(200)
        response.json = AsyncMock(side_effect=ValueError("Expecting value"))
        client, _, _ = _client_with(response)

        with pytest.raises(ProviderError) as exc_info:
            await client.get("https://api.example.com/x")
        assert not isinstance(exc_info.value, HTTPStatusError)


class TestHTTPClientRetries:
    """Test transport-level retries."""

    @pytest.mark.asyncio
    async def test_retries_transient_status_then_succeeds(self):
        client, mock_session, sleep = _client_with(
            _mock_response(503, text="unavailable"),
            _mock_response(502),
            _mock_response(200, {"docs": [1]}),
        )

        result = await client.get("https://api.example.com/x")

        assert result.body == {"docs": [1]}
        assert mock_session.get.call_count == 3
        assert [c.args[0] for c in sleep.await_args_list] == [1.0, 2.0]

    @pytest.mark.asyncio
    async def test_gives_up_after_three_retries(self):
        client, mock_session, sleep = _client_with(*[_mock_response(429) for _ in range(4)])

        with pytest.raises(HTTPStatusError) as exc_info:
            await client.get("https://api.example.com/x")

        assert exc_info.value.status_code == 429
        assert mock_session.get.call_count == 4
        assert sleep.await_count == 3

    @pytest.mark.asyncio
    async def test_non_transient_status_is_not_retried(self):
        client, mock_session, sleep = _client_with(_mock_response(401, text="Unauthorized"))

        with pytest.raises(HTTPStatusError) as exc_info:
            await client.get("https://api.example.com/x")

        assert exc_info.value.status_code == 401
        assert exc_info.value.body == "Unauthorized"
        assert mock_session.get.call_count == 1
        sleep.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_error_body_is_decoded_leniently(self):
        response = _mock_response(404, text="not found")
        client, _, _ = _client_with(response)

        with pytest.raises(HTTPStatusError):
            await client.get("https://api.example.com/x")

        response.text.assert_awaited_once_with(errors="replace")

    @pytest.mark.asyncio
    async def test_per_request_retry_budget(self):
        client, mock_session, _ = _client_with(_mock_response(500), _mock_response(200, {}))

        with pytest.raises(HTTPStatusError):
            await client.get("https://api.example.com/x", max_retries=0)
        assert mock_session.get.call_count == 1

    @pytest.mark.asyncio
    async def test_connection_errors_are_retried(self):
        client, mock_session, _ = _client_with(
            aiohttp.ClientConnectionError("reset"),
            _mock_response(200, {"ok": True}),
        )

        result = await client.get("https://api.example.com/x")

        assert result.body == {"ok": True}
        assert mock_session.get.call_count == 2

    @pytest.mark.asyncio
    async def test_timeout_surfaces_after_retries(self):
        client, mock_session, _ = _client_with(*[TimeoutError() for _ in range(4)])

        with pytest.raises(TimeoutError):
            await client.get("https://api.example.com/x")
        assert mock_session.get.call_count == 4
