"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .http_client import HTTPClient, HTTPResponse


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # only "GET" is used upstream
    build_path: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    build_headers: Callable[[dict[str, Any]], dict[str, str]] | None = None
    # None falls back to the transport defaults
    timeout: float | None = None
    max_retries: int | None = None


class ResponseAdapter:
    def parse(self, response: HTTPResponse, params: dict[str, Any]) -> Any:
        return response.body


class RestRunner:
    def __init__(self, transport: HTTPClient) -> None:
        self._t = transport

    async def run(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Any:
        if spec.method.upper() != "GET":
            raise ValueError(f"Unsupported method for endpoint {spec.id}: {spec.method}")

        path = spec.build_path(params)
        query = spec.build_query(params) if spec.build_query else None
        headers = spec.build_headers(params) if spec.build_headers else None

        response = await self._t.get(
            path,
            params=query,
            headers=headers,
            timeout=spec.timeout,
            max_retries=spec.max_retries,
        )
        return adapter.parse(response, params)
