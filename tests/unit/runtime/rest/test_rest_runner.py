"""Unit tests for RestRunner."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from theoneapi.scraper.runtime.rest import (
    HTTPResponse,
    ResponseAdapter,
    RestEndpointSpec,
    RestRunner,
)


class UpperAdapter(ResponseAdapter):
    def parse(self, response, params):
        return response.body["value"].upper()


@pytest.mark.asyncio
async def test_runner_builds_request_from_spec():
    transport = MagicMock()
    transport.get = AsyncMock(
        return_value=HTTPResponse(status=200, body={"value": "frodo"}, url="u")
    )
    spec = RestEndpointSpec(
        id="thing",
        method="GET",
        build_path=lambda p: f"/thing/{p['id']}",
        build_query=lambda p: {"limit": "1"},
        build_headers=lambda p: {"Authorization": "Bearer t"},
        timeout=10.0,
        max_retries=0,
    )

    result = await RestRunner(transport).run(spec=spec, adapter=UpperAdapter(), params={"id": "x1"})

    assert result == "FRODO"
    transport.get.assert_awaited_once_with(
        "/thing/x1",
        params={"limit": "1"},
        headers={"Authorization": "Bearer t"},
        timeout=10.0,
        max_retries=0,
    )


@pytest.mark.asyncio
async def test_runner_defaults_leave_transport_settings():
    transport = MagicMock()
    transport.get = AsyncMock(return_value=HTTPResponse(status=200, body=[1, 2], url="u"))
    spec = RestEndpointSpec(id="list", method="GET", build_path=lambda p: "/list")

    result = await RestRunner(transport).run(spec=spec, adapter=ResponseAdapter(), params={})

    assert result == [1, 2]
    transport.get.assert_awaited_once_with(
        "/list", params=None, headers=None, timeout=None, max_retries=None
    )


@pytest.mark.asyncio
async def test_runner_rejects_non_get():
    spec = RestEndpointSpec(id="post", method="POST", build_path=lambda p: "/x")
    with pytest.raises(ValueError, match="Unsupported method"):
        await RestRunner(MagicMock()).run(spec=spec, adapter=ResponseAdapter(), params={})
